from marshmallow import Schema, fields, validates, ValidationError
import re


class RegisterSchema(Schema):
    """
    Registration Request Validation Schema

    Validates operator registration input:
    - Name at least 2 characters
    - Email must be valid format
    - Password must be strong (8-128 chars, lower, upper, number, special)

    Example:
        schema = RegisterSchema()
        result = schema.load(request_data)
    """
    name = fields.Str(required=True, error_messages={
        "required": "Name is required"
    })

    email = fields.Email(required=True, error_messages={
        "required": "Email is required",
        "invalid": "Invalid email format"
    })

    password = fields.Str(required=True, error_messages={
        "required": "Password is required"
    })

    @validates('name')
    def validate_name(self, value, **kwargs):
        if len(value.strip()) < 2:
            raise ValidationError("Name must be at least 2 characters")

        if len(value) > 255:
            raise ValidationError("Name must be less than 255 characters")

    @validates('password')
    def validate_password(self, value, **kwargs):
        """
        Validate password strength

        Raises:
            ValidationError: If password doesn't meet requirements
        """
        if len(value) < 8:
            raise ValidationError("Password must be at least 8 characters long")

        if len(value) > 128:
            raise ValidationError("Password must be at most 128 characters long")

        if not re.search(r'[a-z]', value):
            raise ValidationError("Password must contain at least one lowercase letter")

        if not re.search(r'[A-Z]', value):
            raise ValidationError("Password must contain at least one uppercase letter")

        if not re.search(r'\d', value):
            raise ValidationError("Password must contain at least one number")

        if not re.search(r'[!@#$%^&*(),.?":{}|<>]', value):
            raise ValidationError("Password must contain at least one special character")


class LoginSchema(Schema):
    email = fields.Email(required=True, error_messages={
        "required": "Email is required",
        "invalid": "Invalid email format"
    })
    password = fields.Str(required=True, error_messages={
        "required": "Password is required"
    })
