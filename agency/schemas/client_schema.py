from marshmallow import Schema, fields, validate, EXCLUDE

from agency.models.client import PAYMENT_STATUSES


class ClientSchema(Schema):
    """Create/update payload for a client. Updates load with partial=True."""

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=255), error_messages={
        "required": "Name is required"
    })
    profile_photo = fields.Str(allow_none=True)
    instagram = fields.Str(allow_none=True, validate=validate.Length(max=255))
    facebook = fields.Str(allow_none=True, validate=validate.Length(max=255))
    tiktok = fields.Str(allow_none=True, validate=validate.Length(max=255))
    contract_pdf = fields.Str(allow_none=True)
    monthly_fee = fields.Float(validate=validate.Range(min=0))
    payment_status = fields.Str(validate=validate.OneOf(PAYMENT_STATUSES))
    notes = fields.Str(allow_none=True)
