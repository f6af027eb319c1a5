from agency.extensions import db
from datetime import datetime
import uuid

POST_FORMATS = ('post', 'story', 'reel', 'carrossel')

POST_STATUSES = (
    'pendente',
    'em_criacao',
    'aguardando_aprovacao',
    'aprovado',
    'rejeitado',
    'agendado',
    'postado',
)

# Which media column is authoritative for each format
MEDIA_FIELD_BY_FORMAT = {
    'post': 'image_url',
    'story': 'image_url',
    'reel': 'video_url',
    'carrossel': 'carousel_images',
}

class Post(db.Model):
    __tablename__ = 'posts'

    """
    Post Model - A piece of content scheduled for one client.

    scheduled_date is the operator's local wall-clock time, kept as the
    literal string the editor sent (YYYY-MM-DDTHH:MM) and never converted.

    version is bumped by SQLAlchemy on every flush; a stale write raises
    StaleDataError, and callers may also pass the version they last read.
    """

    post_id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False)
    client_id = db.Column(db.String(36), db.ForeignKey('clients.client_id', ondelete='CASCADE'), nullable=False)
    title = db.Column(db.String(255), nullable=False, default='')
    caption = db.Column(db.Text)
    hashtags = db.Column(db.Text)
    format = db.Column(db.String(20), nullable=False, default='post')
    image_url = db.Column(db.Text)
    video_url = db.Column(db.Text)
    carousel_images = db.Column(db.JSON, nullable=False, default=list)
    scheduled_date = db.Column(db.String(32))
    status = db.Column(db.String(32), nullable=False, default='pendente')
    rejection_reason = db.Column(db.Text)
    boost_requested = db.Column(db.Boolean, nullable=False, default=False)
    boost_notes = db.Column(db.Text)
    version = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (
        db.Index('ix_posts_client_status', 'client_id', 'status'),
    )
    __mapper_args__ = {'version_id_col': version}

    @property
    def media_field(self):
        return MEDIA_FIELD_BY_FORMAT.get(self.format, 'image_url')

    def has_media(self):
        return bool(getattr(self, self.media_field))

    def to_dict(self):
        return {
            "post_id": self.post_id,
            "client_id": self.client_id,
            "title": self.title,
            "caption": self.caption,
            "hashtags": self.hashtags,
            "format": self.format,
            "image_url": self.image_url,
            "video_url": self.video_url,
            "carousel_images": list(self.carousel_images or []),
            "scheduled_date": self.scheduled_date,
            "status": self.status,
            "rejection_reason": self.rejection_reason,
            "boost_requested": self.boost_requested,
            "boost_notes": self.boost_notes,
            "version": self.version,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
