from marshmallow import EXCLUDE, Schema, fields, pre_load, validate

from models.schemas.common import normalize_email


class _EmailNormalizingSchema(Schema):
    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "email" in data:
            data = dict(data)
            data["email"] = normalize_email(data["email"])
        return data


class UserCreateSchema(_EmailNormalizingSchema):
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))


class UserUpdateSchema(UserCreateSchema):
    pass


class UserLoginSchema(_EmailNormalizingSchema):
    class Meta:
        # older clients still send expires_in_seconds
        unknown = EXCLUDE

    email = fields.String(required=True)
    password = fields.String(required=True, load_only=True)


class UserOutSchema(Schema):
    id = fields.String()
    email = fields.String()
    is_chirpy_red = fields.Boolean()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()


class LoginOutSchema(UserOutSchema):
    token = fields.String()
    refresh_token = fields.String()
