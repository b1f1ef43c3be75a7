"""
Authentication blueprint:
- POST /api/login    email + password -> profile, access token, refresh token
- POST /api/refresh  Bearer <refresh token> -> new access token
- POST /api/revoke   Bearer <refresh token> -> 204

Access tokens are HS256 JWTs (1 hour by default). Refresh tokens are opaque
hex strings stored in refresh_tokens; refresh does not rotate them.
"""
from __future__ import annotations

from flask import Blueprint, request, jsonify

from models.schemas.user import LoginOutSchema, UserLoginSchema
from utils.decorators import auth_gate, session_manager

bp = Blueprint("auth", __name__)

user_login_schema = UserLoginSchema()
login_out_schema = LoginOutSchema()


@bp.post("/login")
def login():
    """
    Login: return profile, access token and refresh token
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      -  in: body
         name: body
         schema:
           type: object
           properties:
             email: { type: string }
             password: { type: string }
    responses:
      200:
        description: OK (returns tokens)
      401:
        description: Incorrect email or password
    """
    payload = request.get_json(silent=True) or {}
    data = user_login_schema.load(payload)

    result = session_manager().login(data["email"], data["password"])

    body = login_out_schema.dump(result.user)
    body["token"] = result.token
    body["refresh_token"] = result.refresh_token
    return jsonify(body), 200


@bp.post("/refresh")
def refresh():
    """
    Exchange a refresh token for a new access token
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      200:
        description: OK
        schema:
          type: object
          properties:
            token: { type: string }
      401:
        description: Missing, unknown, expired or revoked refresh token
    """
    refresh_token = auth_gate().extract_bearer(request.headers)
    token = session_manager().refresh(refresh_token)
    return jsonify({"token": token}), 200


@bp.post("/revoke")
def revoke():
    """
    Revoke a refresh token (logout)
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      204:
        description: Revoked
      401:
        description: Missing, unknown or already revoked refresh token
    """
    refresh_token = auth_gate().extract_bearer(request.headers)
    session_manager().revoke(refresh_token)
    return ("", 204)
