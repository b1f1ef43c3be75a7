from flask import Blueprint, current_app

from models import storage
from models.chirp import Chirp
from models.refresh_token import RefreshToken
from models.user import User
from utils.exceptions import Forbidden
from utils.log import logger

bp = Blueprint("admin", __name__)


@bp.post("/reset")
def reset():
    """
    Delete every user along with their chirps and refresh tokens (dev only)
    ---
    tags:
      - Admin
    responses:
      200:
        description: Users deleted
      403:
        description: Not available outside PLATFORM=dev
    """
    if current_app.config.get("PLATFORM") != "dev":
        raise Forbidden()

    session = storage.get_session()
    session.query(RefreshToken).delete(synchronize_session=False)
    session.query(Chirp).delete(synchronize_session=False)
    deleted = session.query(User).delete(synchronize_session=False)
    storage.save()
    logger.warning("Admin reset removed %d users", deleted)

    return {"message": "Users deleted", "deleted": deleted}, 200
