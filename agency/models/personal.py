from agency.extensions import db
from datetime import datetime
import uuid


class PersonalEvent(db.Model):
    __tablename__ = 'personal_events'

    """
    PersonalEvent Model - One diary entry per day on the operator's personal calendar.
    """

    event_id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    date = db.Column(db.String(10), nullable=False)  # YYYY-MM-DD, local day
    title = db.Column(db.String(255))
    mood = db.Column(db.String(50))
    medication_taken = db.Column(db.Boolean, default=False, nullable=False)
    special_moment = db.Column(db.Boolean, default=False, nullable=False)
    special_moment_description = db.Column(db.Text)
    diary_notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        db.UniqueConstraint('user_id', 'date', name='uq_personal_event_user_date'),
    )

    def to_dict(self):
        return {
            "event_id": self.event_id,
            "date": self.date,
            "title": self.title,
            "mood": self.mood,
            "medication_taken": self.medication_taken,
            "special_moment": self.special_moment,
            "special_moment_description": self.special_moment_description,
            "diary_notes": self.diary_notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class Idea(db.Model):
    __tablename__ = 'ideas'

    idea_id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    client_id = db.Column(db.String(36), db.ForeignKey('clients.client_id', ondelete='SET NULL'), nullable=True)
    title = db.Column(db.String(255), nullable=False)
    notes = db.Column(db.Text)
    tags = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "idea_id": self.idea_id,
            "client_id": self.client_id,
            "title": self.title,
            "notes": self.notes,
            "tags": list(self.tags or []),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class Task(db.Model):
    __tablename__ = 'tasks'

    task_id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    completed = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "task_id": self.task_id,
            "title": self.title,
            "completed": self.completed,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
