"""Tests for /api/customers and /api/movies."""

from __future__ import annotations

from bson import ObjectId

from tests.conftest import auth, insert_customer, insert_genre, insert_movie


def movie_payload(genre_id, **overrides):
    payload = {
        "title": "Terminator",
        "genreId": str(genre_id),
        "numberInStock": 5,
        "dailyRentalRate": 2,
    }
    payload.update(overrides)
    return payload


class TestCustomers:
    def test_list_sorted_by_name(self, client, db) -> None:
        insert_customer(db, name="Zoe Smith")
        insert_customer(db, name="Adam Jones")
        res = client.get("/api/customers/")
        assert res.status_code == 200
        assert [c["name"] for c in res.json()] == ["Adam Jones", "Zoe Smith"]

    def test_get_customer(self, client, db) -> None:
        customer = insert_customer(db, name="Jane Doe", phone="555-0100", is_gold=True)
        res = client.get(f"/api/customers/{customer['_id']}")
        assert res.status_code == 200
        assert res.json() == {
            "_id": str(customer["_id"]),
            "name": "Jane Doe",
            "phone": "555-0100",
            "isGold": True,
        }

    def test_create_requires_login(self, client) -> None:
        res = client.post("/api/customers/", json={"name": "Jane Doe", "phone": "555-0100"})
        assert res.status_code == 401

    def test_create_validates_lengths(self, client, token) -> None:
        res = client.post("/api/customers/", json={"name": "Jo", "phone": "555-0100"}, headers=auth(token))
        assert res.status_code == 400

    def test_create_defaults_is_gold(self, client, db, token) -> None:
        res = client.post("/api/customers/", json={"name": "Jane Doe", "phone": "555-0100"}, headers=auth(token))
        assert res.status_code == 200
        assert res.json()["isGold"] is False
        assert db["customers"].count_documents({"name": "Jane Doe"}) == 1

    def test_update_customer(self, client, db, token) -> None:
        customer = insert_customer(db, name="Jane Doe")
        res = client.put(
            f"/api/customers/{customer['_id']}",
            json={"name": "Jane Smith", "phone": "555-0199", "isGold": True},
            headers=auth(token),
        )
        assert res.status_code == 200
        assert res.json()["name"] == "Jane Smith"
        assert db["customers"].find_one({"_id": customer["_id"]})["isGold"] is True

    def test_update_unknown_customer(self, client, token) -> None:
        res = client.put(
            f"/api/customers/{ObjectId()}",
            json={"name": "Jane Smith", "phone": "555-0199"},
            headers=auth(token),
        )
        assert res.status_code == 404

    def test_delete_requires_admin(self, client, db, token, admin_token) -> None:
        customer = insert_customer(db)
        assert client.delete(f"/api/customers/{customer['_id']}", headers=auth(token)).status_code == 403
        res = client.delete(f"/api/customers/{customer['_id']}", headers=auth(admin_token))
        assert res.status_code == 200
        assert db["customers"].count_documents({}) == 0


class TestMovies:
    def test_list_sorted_by_title(self, client, db) -> None:
        insert_movie(db, title="Zulu Dawn")
        insert_movie(db, title="Alien")
        res = client.get("/api/movies/")
        assert [m["title"] for m in res.json()] == ["Alien", "Zulu Dawn"]

    def test_get_movie_includes_genre_snapshot(self, client, db) -> None:
        genre = insert_genre(db, "Action")
        movie = insert_movie(db, title="Terminator", genre=genre)
        res = client.get(f"/api/movies/{movie['_id']}")
        assert res.status_code == 200
        assert res.json()["genre"] == {"_id": str(genre["_id"]), "name": "Action"}

    def test_get_invalid_id(self, client) -> None:
        assert client.get("/api/movies/not-an-id").status_code == 404

    def test_create_embeds_genre(self, client, db, token) -> None:
        genre = insert_genre(db, "Action")
        res = client.post("/api/movies/", json=movie_payload(genre["_id"], title="  Terminator  "), headers=auth(token))
        assert res.status_code == 200
        body = res.json()
        assert body["title"] == "Terminator"
        assert body["genre"]["name"] == "Action"
        stored = db["movies"].find_one({"_id": ObjectId(body["_id"])})
        assert stored["genre"]["_id"] == genre["_id"]

    def test_create_with_unknown_genre(self, client, token) -> None:
        res = client.post("/api/movies/", json=movie_payload(ObjectId()), headers=auth(token))
        assert res.status_code == 400
        assert res.json()["detail"] == "Invalid genre."

    def test_create_rejects_negative_stock(self, client, db, token) -> None:
        genre = insert_genre(db)
        res = client.post("/api/movies/", json=movie_payload(genre["_id"], numberInStock=-1), headers=auth(token))
        assert res.status_code == 400

    def test_genre_rename_does_not_touch_movies(self, client, db, token) -> None:
        genre = insert_genre(db, "Action")
        movie = insert_movie(db, genre=genre)
        client.put(f"/api/genres/{genre['_id']}", json={"name": "Thriller"}, headers=auth(token))
        assert db["movies"].find_one({"_id": movie["_id"]})["genre"]["name"] == "Action"

    def test_update_movie(self, client, db, token) -> None:
        genre = insert_genre(db, "Action")
        movie = insert_movie(db, title="Terminator")
        res = client.put(
            f"/api/movies/{movie['_id']}",
            json=movie_payload(genre["_id"], title="Terminator 2", numberInStock=9),
            headers=auth(token),
        )
        assert res.status_code == 200
        stored = db["movies"].find_one({"_id": movie["_id"]})
        assert stored["title"] == "Terminator 2"
        assert stored["numberInStock"] == 9
        assert stored["genre"]["name"] == "Action"

    def test_update_unknown_movie(self, client, db, token) -> None:
        genre = insert_genre(db)
        res = client.put(f"/api/movies/{ObjectId()}", json=movie_payload(genre["_id"]), headers=auth(token))
        assert res.status_code == 404

    def test_delete_movie(self, client, db, admin_token) -> None:
        movie = insert_movie(db)
        res = client.delete(f"/api/movies/{movie['_id']}", headers=auth(admin_token))
        assert res.status_code == 200
        assert res.json()["_id"] == str(movie["_id"])
        assert db["movies"].count_documents({}) == 0
