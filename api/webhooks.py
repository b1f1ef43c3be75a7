"""
Polka payment webhook:
- POST /api/polka/webhooks   Authorization: ApiKey <key>

Only "user.upgraded" changes anything (is_chirpy_red -> true); other events
are acknowledged with 204 so Polka stops retrying.
"""
from __future__ import annotations

from flask import Blueprint, request

from models import storage
from models.user import User
from models.schemas.webhook import PolkaWebhookSchema, USER_UPGRADED
from utils.decorators import api_key_required
from utils.exceptions import BadRequest, NotFound
from utils.log import logger

bp = Blueprint("webhooks", __name__)

webhook_schema = PolkaWebhookSchema()


@bp.post("/polka/webhooks")
@api_key_required()
def polka_webhook():
    """
    Polka payment events
    ---
    tags:
      - Webhooks
    security:
      - ApiKey: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            event: { type: string, example: user.upgraded }
            data:
              type: object
              properties:
                user_id: { type: string }
    responses:
      204:
        description: Processed
      401:
        description: Invalid API key
      404:
        description: Unknown user
    """
    payload = request.get_json(silent=True) or {}
    event = webhook_schema.load(payload)

    if event["event"] != USER_UPGRADED:
        return ("", 204)

    data = event.get("data")
    if not data:
        raise BadRequest("data.user_id is required")

    user = storage.get(User, str(data["user_id"]))
    if not user:
        raise NotFound("User not found")

    user.is_chirpy_red = True
    user.save()
    logger.info("User %s upgraded to Chirpy Red", user.id)
    return ("", 204)
