import re

from marshmallow import Schema, fields, validate, validates, ValidationError, EXCLUDE

DAY_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')


class PersonalEventSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    date = fields.Str(required=True, error_messages={"required": "Date is required"})
    title = fields.Str(allow_none=True, validate=validate.Length(max=255))
    mood = fields.Str(allow_none=True, validate=validate.Length(max=50))
    medication_taken = fields.Bool()
    special_moment = fields.Bool()
    special_moment_description = fields.Str(allow_none=True)
    diary_notes = fields.Str(allow_none=True)

    @validates('date')
    def validate_date(self, value, **kwargs):
        if not DAY_RE.match(value):
            raise ValidationError("Date must be in YYYY-MM-DD format")


class IdeaSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    title = fields.Str(required=True, validate=validate.Length(min=1, max=255), error_messages={
        "required": "Title is required"
    })
    client_id = fields.Str(allow_none=True)
    notes = fields.Str(allow_none=True)
    tags = fields.List(fields.Str())


class TaskSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    title = fields.Str(required=True, validate=validate.Length(min=1, max=255), error_messages={
        "required": "Title is required"
    })
    completed = fields.Bool()
