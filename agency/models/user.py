from agency.extensions import db
from datetime import datetime
import uuid


class User(db.Model):
    __tablename__ = 'users'

    """
    User Model - An operator of the agency studio.

    Every client, post, payment and approval link belongs to the operator
    who created it. Approval notifications are emailed to this address.

    Attributes:
        user_id (str): Unique identifier (UUID)
        name (str): Display name
        email (str): Login email, stored lower-cased (unique)
        password_hash (str): Hashed password (never store plaintext!)
        is_active (bool): Can the user log in?
        created_at (datetime): When user registered
    """

    user_id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "user_id": self.user_id,
            "name": self.name,
            "email": self.email,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
