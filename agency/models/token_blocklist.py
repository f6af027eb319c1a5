from agency.extensions import db
from datetime import datetime


class TokenBlocklist(db.Model):
    """Revoked JWT ids; a token listed here is rejected on every request."""
    __tablename__ = 'token_blocklist'

    jti = db.Column(db.String(36), primary_key=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
