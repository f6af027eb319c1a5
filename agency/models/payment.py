from agency.extensions import db
from datetime import datetime
import uuid

MONTHS = (
    'janeiro', 'fevereiro', 'março', 'abril', 'maio', 'junho',
    'julho', 'agosto', 'setembro', 'outubro', 'novembro', 'dezembro',
)

class Payment(db.Model):
    __tablename__ = 'payments'

    payment_id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    client_id = db.Column(db.String(36), db.ForeignKey('clients.client_id', ondelete='CASCADE'), nullable=False)
    month = db.Column(db.String(20), nullable=False)
    year = db.Column(db.Integer, nullable=False)
    amount = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    status = db.Column(db.String(20), nullable=False, default='pendente')
    payment_date = db.Column(db.Date, nullable=True)
    invoice_url = db.Column(db.Text)
    receipt_url = db.Column(db.Text)
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    @property
    def month_number(self):
        return MONTHS.index(self.month) + 1 if self.month in MONTHS else 0

    def to_dict(self):
        return {
            "payment_id": self.payment_id,
            "client_id": self.client_id,
            "month": self.month,
            "year": self.year,
            "amount": float(self.amount) if self.amount is not None else 0.0,
            "status": self.status,
            "payment_date": self.payment_date.isoformat() if self.payment_date else None,
            "invoice_url": self.invoice_url,
            "receipt_url": self.receipt_url,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
