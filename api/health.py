from flask import Blueprint
from sqlalchemy.exc import SQLAlchemyError

from models import storage
from utils.log import logger

bp = Blueprint("health", __name__)


@bp.get("/healthz")
def health():
    """
    Liveness and database check
    ---
    tags:
      - Health
    responses:
      200:
        description: API and database are reachable
        schema:
          type: object
          properties:
            status:
              type: string
              example: ok
            checks:
              type: object
              properties:
                db:
                  type: string
                  example: ok
      503:
        description: Database unreachable
    """
    checks = {}
    try:
        storage.ping()
        checks["db"] = "ok"
    except SQLAlchemyError:
        logger.exception("Health check: database unreachable")
        storage.rollback()
        checks["db"] = "down"

    if all(state == "ok" for state in checks.values()):
        return {"status": "ok", "checks": checks}, 200
    return {"status": "down", "checks": checks}, 503
