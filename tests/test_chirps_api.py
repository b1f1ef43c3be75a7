"""HTTP tests for /api/chirps."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import Text

from models import storage
from models.chirp import Chirp
from utils.access_control import authorize_delete
from utils.security import create_access_token


@pytest.fixture
def alice(make_user):
    return make_user("alice@x.com")


@pytest.fixture
def bob(make_user):
    return make_user("bob@x.com")


def _post(client, headers, body):
    return client.post("/api/chirps", json={"body": body}, headers=headers)


class TestCreate:
    def test_created(self, client, alice, auth_headers):
        resp = _post(client, auth_headers(alice.id), "hello world")
        assert resp.status_code == 201
        data = resp.get_json()
        assert data["body"] == "hello world"
        assert data["user_id"] == alice.id
        assert storage.get(Chirp, data["id"]) is not None

    def test_max_length_is_accepted(self, client, alice, auth_headers):
        assert _post(client, auth_headers(alice.id), "x" * 140).status_code == 201

    def test_body_column_follows_configured_limit(self, app, client, alice, auth_headers):
        app.config["CHIRP_MAX_LENGTH"] = 300
        resp = _post(client, auth_headers(alice.id), "y" * 300)
        assert resp.status_code == 201
        assert client.get(f"/api/chirps/{resp.get_json()['id']}").get_json()["body"] == "y" * 300
        assert isinstance(Chirp.__table__.c.body.type, Text)

    @pytest.mark.parametrize("body", ["x" * 141, ""])
    def test_invalid_length(self, client, alice, auth_headers, body):
        resp = _post(client, auth_headers(alice.id), body)
        assert resp.status_code == 400
        assert "body" in resp.get_json()["details"]

    def test_words_are_masked(self, client, alice, auth_headers):
        resp = _post(client, auth_headers(alice.id), "What a kerfuffle, Fornax!")
        assert resp.get_json()["body"] == "What a ****, ****!"

    def test_requires_token(self, client):
        assert client.post("/api/chirps", json={"body": "hi"}).status_code == 401

    def test_rejects_token_for_other_secret(self, client, alice):
        token = create_access_token(alice.id, "some-other-secret-0123456789abcdef012")
        resp = _post(client, {"Authorization": f"Bearer {token}"}, "hi")
        assert resp.status_code == 401
        assert storage.count(Chirp) == 0


class TestRead:
    def test_get_one(self, client, alice, auth_headers):
        chirp_id = _post(client, auth_headers(alice.id), "hello").get_json()["id"]
        resp = client.get(f"/api/chirps/{chirp_id}")
        assert resp.status_code == 200
        assert resp.get_json()["body"] == "hello"

    def test_get_missing(self, client):
        assert client.get(f"/api/chirps/{uuid.uuid4()}").status_code == 404

    def test_get_bad_id(self, client):
        assert client.get("/api/chirps/not-a-uuid").status_code == 400

    def test_timestamps_match_between_create_and_read(self, client, alice, auth_headers):
        created = _post(client, auth_headers(alice.id), "hello").get_json()
        storage.close()

        fetched = client.get(f"/api/chirps/{created['id']}").get_json()
        listed = client.get("/api/chirps").get_json()[0]
        for field in ("created_at", "updated_at"):
            assert created[field] == fetched[field] == listed[field]
            assert datetime.fromisoformat(fetched[field]).utcoffset() == timedelta(0)

    def test_list_sort_and_filter(self, client, alice, bob):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i, (user, body) in enumerate([(alice, "first"), (bob, "second"), (alice, "third")]):
            storage.new(Chirp(body=body, user_id=user.id, created_at=base + timedelta(minutes=i)))
        storage.save()

        asc = [c["body"] for c in client.get("/api/chirps").get_json()]
        assert asc == ["first", "second", "third"]

        desc = [c["body"] for c in client.get("/api/chirps?sort=desc").get_json()]
        assert desc == ["third", "second", "first"]

        mine = [c["body"] for c in client.get(f"/api/chirps?author_id={alice.id}").get_json()]
        assert mine == ["first", "third"]

    def test_list_ignores_unparsable_author(self, client, alice, auth_headers):
        _post(client, auth_headers(alice.id), "hello")
        assert len(client.get("/api/chirps?author_id=garbage").get_json()) == 1


class TestDelete:
    def test_owner_can_delete(self, client, alice, auth_headers):
        chirp_id = _post(client, auth_headers(alice.id), "bye").get_json()["id"]
        resp = client.delete(f"/api/chirps/{chirp_id}", headers=auth_headers(alice.id))
        assert resp.status_code == 204
        assert client.get(f"/api/chirps/{chirp_id}").status_code == 404

    def test_other_user_is_forbidden(self, client, alice, bob, auth_headers):
        chirp_id = _post(client, auth_headers(alice.id), "mine").get_json()["id"]
        resp = client.delete(f"/api/chirps/{chirp_id}", headers=auth_headers(bob.id))
        assert resp.status_code == 403
        assert client.get(f"/api/chirps/{chirp_id}").status_code == 200

    def test_requires_token(self, client, alice, auth_headers):
        chirp_id = _post(client, auth_headers(alice.id), "mine").get_json()["id"]
        assert client.delete(f"/api/chirps/{chirp_id}").status_code == 401

    def test_missing_chirp(self, client, alice, auth_headers):
        resp = client.delete(f"/api/chirps/{uuid.uuid4()}", headers=auth_headers(alice.id))
        assert resp.status_code == 404


def test_authorize_delete():
    chirp = Chirp(body="x", user_id="11111111-1111-1111-1111-111111111111")
    assert authorize_delete(chirp, "11111111-1111-1111-1111-111111111111")
    assert not authorize_delete(chirp, "22222222-2222-2222-2222-222222222222")
    assert not authorize_delete(None, "11111111-1111-1111-1111-111111111111")
