"""Tests for /api/genres."""

from __future__ import annotations

import pytest
from bson import ObjectId

from tests.conftest import auth, insert_genre


class TestListGenres:
    def test_returns_all_genres(self, client, db) -> None:
        db["genres"].insert_many([{"name": "genre2"}, {"name": "genre1"}])
        res = client.get("/api/genres/")
        assert res.status_code == 200
        assert [g["name"] for g in res.json()] == ["genre1", "genre2"]


class TestGetGenre:
    def test_returns_genre_for_valid_id(self, client, db) -> None:
        genre = insert_genre(db)
        res = client.get(f"/api/genres/{genre['_id']}")
        assert res.status_code == 200
        assert res.json() == {"_id": str(genre["_id"]), "name": "genre1"}

    def test_404_for_invalid_id(self, client) -> None:
        res = client.get("/api/genres/1")
        assert res.status_code == 404

    def test_404_for_unknown_id(self, client) -> None:
        res = client.get(f"/api/genres/{ObjectId()}")
        assert res.status_code == 404


class TestCreateGenre:
    def test_401_if_not_logged_in(self, client) -> None:
        res = client.post("/api/genres/", json={"name": "genre1"})
        assert res.status_code == 401

    @pytest.mark.parametrize("name", ["1", "a" * 31])
    def test_400_for_bad_name_length(self, client, token, name) -> None:
        res = client.post("/api/genres/", json={"name": name}, headers=auth(token))
        assert res.status_code == 400

    def test_saves_and_returns_genre(self, client, db, token) -> None:
        res = client.post("/api/genres/", json={"name": "genre1"}, headers=auth(token))
        assert res.status_code == 200
        body = res.json()
        assert body["name"] == "genre1"
        assert db["genres"].find_one({"_id": ObjectId(body["_id"])}) is not None


class TestUpdateGenre:
    def test_401_if_not_logged_in(self, client, db) -> None:
        genre = insert_genre(db)
        res = client.put(f"/api/genres/{genre['_id']}", json={"name": "genre2"})
        assert res.status_code == 401

    def test_400_for_short_name(self, client, db, token) -> None:
        genre = insert_genre(db)
        res = client.put(f"/api/genres/{genre['_id']}", json={"name": "1"}, headers=auth(token))
        assert res.status_code == 400

    def test_404_for_invalid_id(self, client, token) -> None:
        res = client.put("/api/genres/1", json={"name": "genre2"}, headers=auth(token))
        assert res.status_code == 404

    def test_404_for_unknown_id(self, client, token) -> None:
        res = client.put(f"/api/genres/{ObjectId()}", json={"name": "genre2"}, headers=auth(token))
        assert res.status_code == 404

    def test_updates_and_returns_genre(self, client, db, token) -> None:
        genre = insert_genre(db)
        res = client.put(f"/api/genres/{genre['_id']}", json={"name": "genre2"}, headers=auth(token))
        assert res.status_code == 200
        assert res.json() == {"_id": str(genre["_id"]), "name": "genre2"}
        assert db["genres"].find_one({"_id": genre["_id"]})["name"] == "genre2"


class TestDeleteGenre:
    def test_401_if_not_logged_in(self, client, db) -> None:
        genre = insert_genre(db)
        assert client.delete(f"/api/genres/{genre['_id']}").status_code == 401

    def test_403_if_not_admin(self, client, db, token) -> None:
        genre = insert_genre(db)
        res = client.delete(f"/api/genres/{genre['_id']}", headers=auth(token))
        assert res.status_code == 403

    def test_404_for_invalid_id(self, client, admin_token) -> None:
        assert client.delete("/api/genres/1", headers=auth(admin_token)).status_code == 404

    def test_404_for_unknown_id(self, client, admin_token) -> None:
        res = client.delete(f"/api/genres/{ObjectId()}", headers=auth(admin_token))
        assert res.status_code == 404

    def test_deletes_and_returns_genre(self, client, db, admin_token) -> None:
        genre = insert_genre(db)
        res = client.delete(f"/api/genres/{genre['_id']}", headers=auth(admin_token))
        assert res.status_code == 200
        assert res.json() == {"_id": str(genre["_id"]), "name": "genre1"}
        assert db["genres"].find_one({"_id": genre["_id"]}) is None
