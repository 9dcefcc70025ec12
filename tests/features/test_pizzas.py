"""HTTP tests of the pizza endpoints."""

from uuid import uuid4

import pytest


def ingredient(client, name: str, cost: float) -> str:
    response = client.post("/ingredients", json={"name": name, "cost": cost})
    assert response.status_code == 201
    return response.json()["id"]


def create(client, name="margherita", ingredients=()) -> dict:
    response = client.post(
        "/pizzas",
        json={
            "name": name,
            "description": "classic",
            "url": "http://img/margherita.png",
            "ingredients": list(ingredients),
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def tomato(client):
    return ingredient(client, "tomato", 1)


@pytest.fixture
def cheese(client):
    return ingredient(client, "cheese", 2)


class TestCreate:

    def test_price_is_cost_times_margin(self, client, tomato, cheese):
        body = create(client, ingredients=[tomato, cheese])
        assert body["price"] == pytest.approx(3.6)
        assert body["name"] == "margherita"
        assert body["description"] == "classic"
        assert body["url"] == "http://img/margherita.png"

    def test_ingredients_sorted_by_name(self, client, tomato, cheese):
        body = create(client, ingredients=[tomato, cheese])
        assert [i["name"] for i in body["ingredients"]] == ["cheese", "tomato"]
        assert body["ingredients"][0] == {"id": cheese, "name": "cheese", "cost": 2}

    def test_without_ingredients(self, client):
        body = create(client)
        assert body["price"] == 0
        assert body["ingredients"] == []

    def test_repeated_ingredient_counts_once(self, client, tomato):
        body = create(client, ingredients=[tomato, tomato])
        assert len(body["ingredients"]) == 1
        assert body["price"] == pytest.approx(1.2)

    def test_unknown_ingredient_is_an_empty_404(self, client, tomato):
        response = client.post(
            "/pizzas", json={"name": "margherita", "ingredients": [tomato, str(uuid4())]}
        )
        assert response.status_code == 404
        assert response.content == b""
        assert client.get("/pizzas").json() == []

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": ""},
            {"name": "m" * 256},
            {"name": "margherita", "url": "http://img/" + "x" * 2048},
        ],
    )
    def test_invalid_payload(self, client, payload):
        response = client.post("/pizzas", json=payload)
        assert response.status_code == 422
        assert client.get("/pizzas").json() == []


class TestGet:

    def test_reads_back_created_pizza(self, client, tomato, cheese):
        created = create(client, ingredients=[tomato, cheese])
        response = client.get(f"/pizzas/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_unknown_id(self, client):
        response = client.get(f"/pizzas/{uuid4()}")
        assert response.status_code == 404
        assert response.content == b""

    def test_price_follows_ingredient_cost(self, client, tomato):
        created = create(client, ingredients=[tomato])
        client.put(f"/ingredients/{tomato}", json={"name": "tomato", "cost": 2})
        body = client.get(f"/pizzas/{created['id']}").json()
        assert body["price"] == pytest.approx(2.4)


class TestQuery:

    def test_filters_and_pages(self, client):
        for name in ("Pepperoni", "margherita", "Marinara"):
            create(client, name)
        names = [p["name"] for p in client.get("/pizzas", params={"name": "mar"}).json()]
        assert sorted(names) == ["Marinara", "margherita"]
        page = client.get("/pizzas", params={"page": 1, "size": 2}).json()
        assert len(page) == 1


class TestUpdate:

    def test_replaces_scalars_and_keeps_ingredients(self, client, tomato):
        created = create(client, ingredients=[tomato])
        response = client.put(
            f"/pizzas/{created['id']}",
            json={"name": "marinara", "description": "no cheese", "url": "http://img/x"},
        )
        assert response.status_code == 204
        body = client.get(f"/pizzas/{created['id']}").json()
        assert body["name"] == "marinara"
        assert body["description"] == "no cheese"
        assert body["url"] == "http://img/x"
        assert [i["id"] for i in body["ingredients"]] == [tomato]

    def test_too_long_fields_are_rejected(self, client):
        created = create(client)
        path = f"/pizzas/{created['id']}"
        assert client.put(path, json={"name": "m" * 256}).status_code == 422
        assert client.put(path, json={"name": "m", "url": "u" * 2049}).status_code == 422
        assert client.get(path).json()["name"] == "margherita"

    def test_unknown_id(self, client):
        response = client.put(f"/pizzas/{uuid4()}", json={"name": "x"})
        assert response.status_code == 404


class TestRemove:

    def test_removes_pizza_and_releases_ingredients(self, client, tomato):
        created = create(client, ingredients=[tomato])
        assert client.delete(f"/pizzas/{created['id']}").status_code == 204
        assert client.get(f"/pizzas/{created['id']}").status_code == 404
        assert client.delete(f"/ingredients/{tomato}").status_code == 204

    def test_unknown_id(self, client):
        assert client.delete(f"/pizzas/{uuid4()}").status_code == 404


class TestIngredientMembership:

    def test_add_ingredient(self, client, tomato, cheese):
        created = create(client, ingredients=[tomato])
        path = f"/pizzas/{created['id']}/ingredients/{cheese}"
        assert client.put(path).status_code == 204
        body = client.get(f"/pizzas/{created['id']}").json()
        assert body["price"] == pytest.approx(3.6)

    def test_add_is_idempotent(self, client, tomato):
        created = create(client, ingredients=[tomato])
        path = f"/pizzas/{created['id']}/ingredients/{tomato}"
        assert client.put(path).status_code == 204
        assert client.put(path).status_code == 204
        body = client.get(f"/pizzas/{created['id']}").json()
        assert len(body["ingredients"]) == 1
        assert body["price"] == pytest.approx(1.2)

    def test_remove_ingredient(self, client, tomato, cheese):
        created = create(client, ingredients=[tomato, cheese])
        path = f"/pizzas/{created['id']}/ingredients/{tomato}"
        assert client.delete(path).status_code == 204
        assert client.delete(path).status_code == 204
        body = client.get(f"/pizzas/{created['id']}").json()
        assert [i["name"] for i in body["ingredients"]] == ["cheese"]
        assert body["price"] == pytest.approx(2.4)

    def test_unknown_ingredient(self, client, tomato):
        created = create(client, ingredients=[tomato])
        response = client.put(f"/pizzas/{created['id']}/ingredients/{uuid4()}")
        assert response.status_code == 404
        assert response.content == b""

    def test_unknown_pizza(self, client, tomato):
        response = client.delete(f"/pizzas/{uuid4()}/ingredients/{tomato}")
        assert response.status_code == 404


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.text == "OK"


def test_openapi_is_exposed_when_testing(client):
    assert client.get("/openapi.json").status_code == 200
