import re

from marshmallow import Schema, fields, validate, validates, ValidationError, EXCLUDE

from agency.models.post import POST_FORMATS, POST_STATUSES

# Local wall-clock date-time as the editor sends it, e.g. 2025-03-01T09:30
SCHEDULED_DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}(T\d{2}:\d{2}(:\d{2})?)?$')


class PostSchema(Schema):
    """
    Create/update payload for a post. Updates load with partial=True.

    `version` is the version the editor last read; when present the update
    is refused if someone else saved the post in between.
    """

    class Meta:
        unknown = EXCLUDE

    client_id = fields.Str(required=True, error_messages={"required": "client_id is required"})
    title = fields.Str(required=True, validate=validate.Length(min=1, max=255), error_messages={
        "required": "Title is required"
    })
    caption = fields.Str(allow_none=True)
    hashtags = fields.Str(allow_none=True)
    format = fields.Str(validate=validate.OneOf(POST_FORMATS))
    image_url = fields.Str(allow_none=True)
    video_url = fields.Str(allow_none=True)
    carousel_images = fields.List(fields.Str(), allow_none=True)
    scheduled_date = fields.Str(allow_none=True)
    status = fields.Str(validate=validate.OneOf(POST_STATUSES))
    rejection_reason = fields.Str(allow_none=True)
    boost_requested = fields.Bool()
    boost_notes = fields.Str(allow_none=True)
    version = fields.Int(load_only=True)

    @validates('scheduled_date')
    def validate_scheduled_date(self, value, **kwargs):
        if value and not SCHEDULED_DATE_RE.match(value):
            raise ValidationError("scheduled_date must be YYYY-MM-DD or YYYY-MM-DDTHH:MM")


class PostMoveSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    status = fields.Str(required=True, validate=validate.OneOf(POST_STATUSES), error_messages={
        "required": "status is required"
    })
    version = fields.Int()


class VersionSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    version = fields.Int()
