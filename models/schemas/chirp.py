from marshmallow import Schema, ValidationError, fields, validates


class ChirpCreateSchema(Schema):
    body = fields.String(required=True)

    def __init__(self, max_length: int = 140, **kwargs):
        self.max_length = max_length
        super().__init__(**kwargs)

    @validates("body")
    def validate_body(self, value, **kwargs):
        if not value:
            raise ValidationError("Chirp body must not be empty.")
        if len(value) > self.max_length:
            raise ValidationError(f"Chirp is too long (max {self.max_length} characters).")


class ChirpOutSchema(Schema):
    id = fields.String()
    body = fields.String()
    user_id = fields.String()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
