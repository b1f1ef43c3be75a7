"""
Authorization gate: turns request credentials into a user id.

Access tokens are checked cryptographically only (no storage lookup). The
webhook API key is compared in constant time; an empty key never matches.
"""
from __future__ import annotations

import hmac
from typing import Mapping

from api.config import AuthSettings
from utils.exceptions import InvalidCredential
from utils.log import logger
from utils.security import decode_access_token, get_api_key, get_bearer_token


class AuthGate:
    def __init__(self, settings: AuthSettings):
        self.settings = settings

    def extract_bearer(self, headers: Mapping[str, str]) -> str:
        return get_bearer_token(headers)

    def extract_api_key(self, headers: Mapping[str, str]) -> str:
        return get_api_key(headers)

    def authenticate(self, request) -> str:
        """Return the user id behind the request's access token or raise a 401 error."""
        token = self.extract_bearer(request.headers)
        try:
            return decode_access_token(token, self.settings.token_secret)
        except InvalidCredential as exc:
            logger.warning("Access token rejected: %s", exc.__class__.__name__)
            raise

    def check_api_key(self, headers: Mapping[str, str]) -> bool:
        key = self.extract_api_key(headers)
        expected = self.settings.polka_key
        if not key or not expected:
            return False
        return hmac.compare_digest(key.encode(), expected.encode())
