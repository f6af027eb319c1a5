from marshmallow import Schema, fields, validate, EXCLUDE

from agency.models.client import PAYMENT_STATUSES
from agency.models.payment import MONTHS


class PaymentSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    client_id = fields.Str(required=True, error_messages={"required": "client_id is required"})
    month = fields.Str(required=True, validate=validate.OneOf(MONTHS), error_messages={
        "required": "Month is required"
    })
    year = fields.Int(required=True, validate=validate.Range(min=2000, max=2100))
    amount = fields.Float(required=True, validate=validate.Range(min=0))
    status = fields.Str(validate=validate.OneOf(PAYMENT_STATUSES))
    payment_date = fields.Date(allow_none=True)
    invoice_url = fields.Str(allow_none=True)
    receipt_url = fields.Str(allow_none=True)
    notes = fields.Str(allow_none=True)
