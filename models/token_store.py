"""
Persistence and validation of opaque refresh tokens.

A token moves from active to expired (by time, detected at validate) or to
revoked (explicitly). Neither transition is reversible and rows are never
deleted, so a rejected token stays rejected.
"""
from __future__ import annotations

from datetime import datetime, timedelta

from models.base_model import utcnow
from models.refresh_token import RefreshToken
from utils.exceptions import TokenExpired, TokenNotFound, TokenRevoked
from utils.log import logger
from utils.security import make_refresh_token

REFRESH_TOKEN_TTL = timedelta(days=60)


class RefreshTokenStore:
    def __init__(self, storage):
        self.storage = storage

    @staticmethod
    def generate() -> str:
        return make_refresh_token()

    def create(self, token: str, user_id: str, expires_at: datetime) -> RefreshToken:
        row = RefreshToken(token=token, user_id=user_id, expires_at=expires_at, revoked_at=None)
        self.storage.new(row)
        self.storage.save()
        return row

    def issue(self, user_id: str, ttl: timedelta = REFRESH_TOKEN_TTL) -> RefreshToken:
        """Generate a fresh token for ``user_id`` and persist it."""
        return self.create(self.generate(), user_id, utcnow() + ttl)

    def _lookup(self, token: str) -> RefreshToken | None:
        # populate_existing: another statement may have revoked it since it was loaded
        return self.storage.get_session().get(RefreshToken, token, populate_existing=True)

    def validate(self, token: str) -> str:
        """Return the owning user id, or raise TokenNotFound / TokenRevoked / TokenExpired."""
        row = self._lookup(token)
        if row is None:
            raise TokenNotFound()
        if row.revoked_at is not None:
            raise TokenRevoked()
        if row.expires_at <= utcnow():
            raise TokenExpired()
        return row.user_id

    def revoke(self, token: str) -> None:
        """
        Set revoked_at with a single UPDATE keyed by the token. A token that
        is missing raises TokenNotFound; one already revoked raises TokenRevoked
        and keeps its original revocation time.
        """
        now = utcnow()
        session = self.storage.get_session()
        updated = (
            session.query(RefreshToken)
            .filter(RefreshToken.token == token, RefreshToken.revoked_at.is_(None))
            .update({"revoked_at": now, "updated_at": now}, synchronize_session=False)
        )
        self.storage.save()

        if updated:
            logger.info("Refresh token revoked for user %s", self._lookup(token).user_id)
            return
        if self._lookup(token) is None:
            raise TokenNotFound()
        raise TokenRevoked()
