"""
Users blueprint:
- POST /api/users   register (public)
- PUT  /api/users   change own email and password (access token)

Changing credentials does not revoke tokens issued before the change.
"""
from __future__ import annotations

from flask import Blueprint, request, jsonify, g

from models import storage
from models.user import User
from models.schemas.user import UserCreateSchema, UserOutSchema, UserUpdateSchema
from utils.decorators import jwt_required
from utils.exceptions import NotFound
from utils.log import logger
from utils.security import hash_password

bp = Blueprint("users", __name__)

user_create_schema = UserCreateSchema()
user_update_schema = UserUpdateSchema()
user_out_schema = UserOutSchema()


@bp.post("/users")
def create_user():
    """
    Register a new user.
    ---
    tags:
      - Users
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            email: { type: string }
            password: { type: string }
    responses:
      201:
        description: Created
      400:
        description: Validation error
      409:
        description: Email already registered
    """
    payload = request.get_json(silent=True) or {}
    data = user_create_schema.load(payload)

    user = User(
        email=data["email"],
        hashed_password=hash_password(data["password"]),
        is_chirpy_red=False,
    )
    storage.new(user)
    storage.save()
    logger.info("User %s registered", user.id)

    return jsonify(user_out_schema.dump(user)), 201


@bp.put("/users")
@jwt_required()
def update_user():
    """
    Update the current user's email and password.
    ---
    tags:
      - Users
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            email: { type: string }
            password: { type: string }
    responses:
      200:
        description: OK
      400:
        description: Validation error
      401:
        description: Unauthorized
    """
    payload = request.get_json(silent=True) or {}
    data = user_update_schema.load(payload)

    user = storage.get(User, g.current_user_id)
    if not user:
        raise NotFound("User not found")

    user.email = data["email"]
    user.hashed_password = hash_password(data["password"])
    user.save()
    logger.info("User %s updated credentials", user.id)

    return jsonify(user_out_schema.dump(user)), 200
