from agency.extensions import db
from datetime import datetime
import uuid

PAYMENT_STATUSES = ('recebido', 'pendente', 'atrasado')


class Client(db.Model):
    __tablename__ = 'clients'

    """
    Client Model - A customer whose social media accounts the agency runs.

    Owns posts, payments and approval links. Deleting a client removes all
    three in the same transaction (see services/clients.py).

    Attributes:
        client_id (str): Unique identifier (UUID)
        user_id (str): Operator who manages this client
        name (str): Client name (e.g., "Padaria Central")
        instagram / facebook / tiktok (str): Social handles or profile URLs
        contract_pdf (str): Reference to the uploaded contract document
        monthly_fee (float): Agreed monthly fee
        payment_status (str): 'recebido', 'pendente' or 'atrasado'
        notes (str): Free-text notes
    """

    client_id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    profile_photo = db.Column(db.Text)
    instagram = db.Column(db.String(255))
    facebook = db.Column(db.String(255))
    tiktok = db.Column(db.String(255))
    contract_pdf = db.Column(db.Text)
    monthly_fee = db.Column(db.Numeric(10, 2), default=0, nullable=False)
    payment_status = db.Column(db.String(20), default='pendente', nullable=False)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships - deleting a client deletes its posts, payments and links
    owner = db.relationship('User', backref='clients')
    posts = db.relationship('Post', backref='client', cascade='all, delete')
    payments = db.relationship('Payment', backref='client', cascade='all, delete')
    approval_links = db.relationship('ApprovalLink', backref='client', cascade='all, delete')
    ideas = db.relationship('Idea', backref='client')

    def to_public_dict(self):
        """Fields a client may see on the approval page."""
        return {
            "client_id": self.client_id,
            "name": self.name,
            "profile_photo": self.profile_photo,
        }

    def to_dict(self):
        return {
            "client_id": self.client_id,
            "name": self.name,
            "profile_photo": self.profile_photo,
            "instagram": self.instagram,
            "facebook": self.facebook,
            "tiktok": self.tiktok,
            "contract_pdf": self.contract_pdf,
            "monthly_fee": float(self.monthly_fee) if self.monthly_fee is not None else 0.0,
            "payment_status": self.payment_status,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
