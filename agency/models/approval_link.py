from agency.extensions import db
from datetime import datetime
import uuid

class ApprovalLink(db.Model):
    __tablename__ = 'approval_links'

    """
    ApprovalLink Model - Bearer capability letting a client review their posts.

    Anyone holding unique_token can list and act on the client's posts that
    await approval, as long as the link is active and not expired.

    Attributes:
        link_id (str): Unique identifier (UUID)
        client_id (str): Client whose posts the token unlocks
        unique_token (str): URL-safe random token (unique)
        expires_at (datetime): Absolute expiry (UTC)
        is_active (bool): Operator can switch a link off without deleting it
    """

    link_id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    client_id = db.Column(db.String(36), db.ForeignKey('clients.client_id', ondelete='CASCADE'), nullable=False)
    unique_token = db.Column(db.String(64), unique=True, nullable=False, index=True)
    expires_at = db.Column(db.DateTime, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def is_expired(self, now=None):
        now = now or datetime.utcnow()
        return now >= self.expires_at

    def grants_access(self, now=None):
        return bool(self.is_active) and not self.is_expired(now)

    def to_dict(self, share_url=None):
        return {
            "link_id": self.link_id,
            "client_id": self.client_id,
            "unique_token": self.unique_token,
            "share_url": share_url,
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
            "is_active": self.is_active,
            "is_expired": self.is_expired(),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
