"""
Session lifecycle: login, refresh and revoke.

Login issues both token kinds. Refresh exchanges a valid refresh token for a
new access token and leaves the refresh token untouched, so it can be reused
until it expires or is revoked. Revoke needs only the refresh token.
"""
from __future__ import annotations

from dataclasses import dataclass

from api.config import AuthSettings
from models.token_store import RefreshTokenStore
from models.user import User
from utils.exceptions import InvalidCredential
from utils.log import logger
from utils.security import create_access_token, hash_password, verify_password

LOGIN_FAILED = "Incorrect email or password"


@dataclass
class LoginResult:
    user: User
    token: str
    refresh_token: str


class SessionManager:
    def __init__(self, settings: AuthSettings, storage, tokens: RefreshTokenStore | None = None):
        self.settings = settings
        self.storage = storage
        self.tokens = tokens or RefreshTokenStore(storage)
        self._dummy_hash = None

    def issue_access_token(self, user_id: str) -> str:
        return create_access_token(user_id, self.settings.token_secret, self.settings.access_token_ttl)

    def _burn_verify(self, password: str) -> None:
        # unknown emails still pay for one hash verification
        if self._dummy_hash is None:
            self._dummy_hash = hash_password("chirpy-no-such-user")
        verify_password(password, self._dummy_hash)

    def login(self, email: str, password: str) -> LoginResult:
        session = self.storage.get_session()
        user = session.query(User).filter(User.email == email).first()
        if user is None:
            self._burn_verify(password)
            logger.warning("Login failed for unknown email")
            raise InvalidCredential(LOGIN_FAILED)
        if not verify_password(password, user.hashed_password):
            logger.warning("Login failed for user %s", user.id)
            raise InvalidCredential(LOGIN_FAILED)

        refresh = self.tokens.issue(user.id, self.settings.refresh_token_ttl)
        token = self.issue_access_token(user.id)
        logger.info("User %s logged in", user.id)
        return LoginResult(user=user, token=token, refresh_token=refresh.token)

    def refresh(self, refresh_token: str) -> str:
        try:
            user_id = self.tokens.validate(refresh_token)
        except InvalidCredential as exc:
            logger.warning("Refresh rejected: %s", exc.__class__.__name__)
            raise
        return self.issue_access_token(user_id)

    def revoke(self, refresh_token: str) -> None:
        try:
            self.tokens.revoke(refresh_token)
        except InvalidCredential as exc:
            logger.warning("Revoke rejected: %s", exc.__class__.__name__)
            raise
