"""Refresh token persistence: create, validate, revoke."""

from datetime import timedelta

import pytest

from models import storage
from models.base_model import as_utc, utcnow
from models.refresh_token import RefreshToken
from models.token_store import REFRESH_TOKEN_TTL, RefreshTokenStore
from utils.exceptions import TokenExpired, TokenNotFound, TokenRevoked


@pytest.fixture
def store(app):
    return RefreshTokenStore(storage)


@pytest.fixture
def user(make_user):
    return make_user()


def test_validate_right_after_create(store, user):
    token = store.generate()
    store.create(token, user.id, utcnow() + timedelta(days=1))
    assert store.validate(token) == user.id


def test_create_starts_unrevoked(store, user):
    row = store.create(store.generate(), user.id, utcnow() + timedelta(days=1))
    assert row.revoked_at is None


def test_issue_uses_sixty_day_ttl(store, user):
    before = utcnow()
    row = store.issue(user.id)
    assert REFRESH_TOKEN_TTL == timedelta(days=60)
    assert before + REFRESH_TOKEN_TTL <= as_utc(row.expires_at) <= utcnow() + REFRESH_TOKEN_TTL


def test_unknown_token(store):
    with pytest.raises(TokenNotFound):
        store.validate("0" * 64)


def test_revoked_token_is_rejected(store, user):
    token = store.issue(user.id).token
    store.revoke(token)
    with pytest.raises(TokenRevoked):
        store.validate(token)


def test_expired_token_is_rejected(store, user):
    token = store.generate()
    store.create(token, user.id, utcnow() - timedelta(seconds=1))
    with pytest.raises(TokenExpired):
        store.validate(token)


def test_revoked_takes_precedence_over_expired(store, user):
    token = store.generate()
    store.create(token, user.id, utcnow() - timedelta(seconds=1))
    store.revoke(token)
    with pytest.raises(TokenRevoked):
        store.validate(token)


def test_revoke_unknown_token(store):
    with pytest.raises(TokenNotFound):
        store.revoke("f" * 64)


def test_second_revoke_keeps_first_timestamp(store, user):
    token = store.issue(user.id).token
    store.revoke(token)
    first = storage.get_session().get(RefreshToken, token, populate_existing=True).revoked_at

    with pytest.raises(TokenRevoked):
        store.revoke(token)

    again = storage.get_session().get(RefreshToken, token, populate_existing=True).revoked_at
    assert again == first


def test_rows_survive_revocation(store, user):
    token = store.issue(user.id).token
    store.revoke(token)
    assert storage.count(RefreshToken) == 1


def test_validate_is_repeatable(store, user):
    token = store.issue(user.id).token
    assert store.validate(token) == user.id
    assert store.validate(token) == user.id


def test_expiry_reads_back_in_utc(store, user):
    naive = (utcnow() + timedelta(days=1)).replace(tzinfo=None)
    token = store.create(store.generate(), user.id, naive).token
    storage.close()

    row = storage.get(RefreshToken, token)
    assert row.expires_at.utcoffset() == timedelta(0)
    assert row.expires_at == as_utc(naive)
    assert store.validate(token) == user.id
