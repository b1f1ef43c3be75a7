from marshmallow import EXCLUDE, Schema, fields

USER_UPGRADED = "user.upgraded"


class WebhookDataSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    user_id = fields.UUID(required=True)


class PolkaWebhookSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    event = fields.String(required=True)
    # only required for user.upgraded; checked in the view
    data = fields.Nested(WebhookDataSchema, required=False)
