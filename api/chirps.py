"""
Chirps blueprint:
- POST   /api/chirps             create (access token)
- GET    /api/chirps             list, public; ?author_id=<uuid>&sort=asc|desc
- GET    /api/chirps/<chirp_id>  read, public
- DELETE /api/chirps/<chirp_id>  delete (access token + ownership)
"""
from __future__ import annotations

from flask import Blueprint, current_app, g, jsonify, request

from models import storage
from models.chirp import Chirp
from models.schemas.chirp import ChirpCreateSchema, ChirpOutSchema
from models.schemas.common import parse_optional_uuid, parse_uuid
from utils.access_control import authorize_delete
from utils.decorators import jwt_required
from utils.exceptions import Forbidden, NotFound
from utils.log import logger
from utils.profanity import clean_body

bp = Blueprint("chirps", __name__)

chirp_out_schema = ChirpOutSchema()
chirps_out_schema = ChirpOutSchema(many=True)


@bp.post("/chirps")
@jwt_required()
def create_chirp():
    """
    Create a chirp as the current user
    ---
    tags:
      - Chirps
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            body: { type: string, maxLength: 140 }
    responses:
      201:
        description: Created
      400:
        description: Invalid chirp length
      401:
        description: Unauthorized
    """
    payload = request.get_json(silent=True) or {}
    data = ChirpCreateSchema(max_length=current_app.config["CHIRP_MAX_LENGTH"]).load(payload)

    chirp = Chirp(body=clean_body(data["body"]), user_id=g.current_user_id)
    storage.new(chirp)
    storage.save()

    return jsonify(chirp_out_schema.dump(chirp)), 201


@bp.get("/chirps")
def list_chirps():
    """
    List chirps ordered by creation time
    ---
    tags:
      - Chirps
    parameters:
      - in: query
        name: author_id
        type: string
        description: "Only chirps by this user"
      - in: query
        name: sort
        type: string
        enum: [asc, desc]
        default: asc
    responses:
      200:
        description: List of chirps
    """
    session = storage.get_session()
    query = session.query(Chirp)

    author_id = parse_optional_uuid(request.args.get("author_id"))
    if author_id:
        query = query.filter(Chirp.user_id == author_id)

    if request.args.get("sort") == "desc":
        query = query.order_by(Chirp.created_at.desc(), Chirp.id.desc())
    else:
        query = query.order_by(Chirp.created_at.asc(), Chirp.id.asc())

    return jsonify(chirps_out_schema.dump(query.all())), 200


@bp.get("/chirps/<chirp_id>")
def get_chirp(chirp_id: str):
    """
    Get a single chirp by id
    ---
    tags:
      - Chirps
    parameters:
      - in: path
        name: chirp_id
        type: string
        required: true
    responses:
      200:
        description: Chirp found
      400:
        description: Invalid chirp id
      404:
        description: Not found
    """
    chirp = storage.get(Chirp, parse_uuid(chirp_id, "chirp id"))
    if not chirp:
        raise NotFound("Chirp not found")
    return jsonify(chirp_out_schema.dump(chirp)), 200


@bp.delete("/chirps/<chirp_id>")
@jwt_required()
def delete_chirp(chirp_id: str):
    """
    Delete one of your own chirps
    ---
    tags:
      - Chirps
    security:
      - Bearer: []
    parameters:
      - in: path
        name: chirp_id
        type: string
        required: true
    responses:
      204:
        description: Deleted
      401:
        description: Unauthorized
      403:
        description: Not the author
      404:
        description: Not found
    """
    chirp = storage.get(Chirp, parse_uuid(chirp_id, "chirp id"))
    if not chirp:
        raise NotFound("Chirp not found")
    if not authorize_delete(chirp, g.current_user_id):
        logger.warning("User %s tried to delete chirp %s", g.current_user_id, chirp.id)
        raise Forbidden("You do not have permission to delete this chirp")

    chirp.delete()
    storage.save()
    return ("", 204)
