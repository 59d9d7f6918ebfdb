"""Tests for the HTTP API."""

from types import SimpleNamespace

import pytest

from recipeshelf.tasks.imports import import_recipes_task

# =============================================================================
# Helpers
# =============================================================================


def create_recipe(client, headers, name, lines) -> dict:
    response = client.post(
        "/api/v1/recipes/",
        json={"name": name, "ingredient_lines": lines},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


def item_by_name(shopping_list: dict, name: str) -> dict:
    return next(i for i in shopping_list["items"] if i["name"] == name)


# =============================================================================
# Application
# =============================================================================


class TestApplication:
    """Tests for health, root and request ids."""

    def test_health(self, client):
        """Test the health check."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "recipeshelf-api"}

    def test_root(self, client):
        """Test the root endpoint."""
        data = client.get("/").json()

        assert data["name"] == "Recipeshelf API"
        assert data["version"] == "0.1.0"

    def test_request_id_echoed(self, client):
        """Test a sent request id comes back unchanged."""
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"

    def test_request_id_generated(self, client):
        """Test a request id is generated when none is sent."""
        assert client.get("/health").headers["X-Request-ID"]


# =============================================================================
# Ingredients
# =============================================================================


class TestIngredientsApi:
    """Tests for the ingredient endpoints."""

    def test_parse(self, client):
        """Test parsing one line."""
        response = client.post(
            "/api/v1/ingredients/parse", json={"text": "2 cups all-purpose flour"}
        )
        data = response.json()

        assert response.status_code == 200
        assert data["parsed"] is True
        assert data["quantity"] == 2
        assert data["unit"]["name"] == "cup"
        assert data["ingredient"]["name"] == data["name"]

    def test_parse_many(self, client):
        """Test parsing several lines keeps the order."""
        data = client.post(
            "/api/v1/ingredients/parse-many",
            json={"texts": ["2 eggs", "salt and pepper"]},
        ).json()

        assert data["parser"] == "rules"
        assert data["total"] == 2
        assert [r["parsed"] for r in data["results"]] == [True, False]

    def test_search(self, client):
        """Test searching known ingredients."""
        names = [i["name"] for i in client.get("/api/v1/ingredients/search?q=onion").json()]

        assert "Onion" in names
        assert client.get("/api/v1/ingredients/search?q=o").json() == []

    def test_find_or_create(self, client):
        """Test manual entries resolve to existing ingredients or create new ones."""
        existing = client.post("/api/v1/ingredients/", json={"name": "onions"}).json()
        created = client.post("/api/v1/ingredients/", json={"name": "dragon fruit"}).json()

        assert existing["created"] is False
        assert existing["ingredient"]["name"] == "Onion"
        assert created["created"] is True
        assert created["ingredient"]["name"] == "Dragon Fruit"

    def test_find_or_create_blank(self, client):
        """Test a blank name is a bad request."""
        assert client.post("/api/v1/ingredients/", json={"name": "  "}).status_code == 400

    def test_units_and_modifiers(self, client):
        """Test listing units and modifiers."""
        units = client.get("/api/v1/ingredients/units").json()
        modifiers = client.get("/api/v1/ingredients/modifiers").json()

        assert "cup" in [u["name"] for u in units]
        assert "diced" in [m["name"] for m in modifiers]

    def test_list_ingredients(self, client):
        """Test listing every known ingredient."""
        response = client.get("/api/v1/ingredients/")
        names = [i["name"] for i in response.json()]

        assert response.status_code == 200
        assert "Onion" in names
        assert len(names) == len(set(names))

    def test_create_unit_used_by_parser(self, client):
        """Test a created unit is listed and matched by later parses."""
        response = client.post(
            "/api/v1/ingredients/units",
            json={"name": "smidgen", "type": "volume", "aliases": ["smidgens"]},
        )

        assert response.status_code == 201
        assert response.json()["name"] == "smidgen"
        assert response.json()["aliases"] == ["smidgens"]
        units = client.get("/api/v1/ingredients/units").json()
        assert "smidgen" in [u["name"] for u in units]

        parsed = client.post("/api/v1/ingredients/parse", json={"text": "2 smidgens salt"}).json()
        assert parsed["unit"]["name"] == "smidgen"

    def test_create_unit_invalid(self, client):
        """Test a blank name or an unknown unit type is a bad request."""
        blank = client.post("/api/v1/ingredients/units", json={"name": " "})
        unknown = client.post("/api/v1/ingredients/units", json={"name": "dash", "type": "vibes"})

        assert blank.status_code == 400
        assert unknown.status_code == 400

    def test_create_modifier(self, client):
        """Test creating a modifier and rejecting an unknown modifier type."""
        created = client.post(
            "/api/v1/ingredients/modifiers",
            json={"name": "spatchcocked", "type": "preparation"},
        )
        invalid = client.post(
            "/api/v1/ingredients/modifiers", json={"name": "spatchcocked", "type": "weird"}
        )

        assert created.status_code == 201
        assert created.json()["type"] == "preparation"
        assert invalid.status_code == 400
        modifiers = client.get("/api/v1/ingredients/modifiers").json()
        assert "spatchcocked" in [m["name"] for m in modifiers]

    def test_knowledge_base_summary(self, client):
        """Test the summary reports counts, version and conflicts."""
        data = client.get("/api/v1/ingredients/knowledge-base").json()

        assert len(data["version"]) == 12
        assert data["ingredients"] > 0
        assert any(c["term"] == "steak" for c in data["conflicts"])


# =============================================================================
# Recipes
# =============================================================================


class TestRecipesApi:
    """Tests for the recipe endpoints."""

    def test_owner_header_required(self, client):
        """Test requests without an owner are rejected."""
        assert client.get("/api/v1/recipes/").status_code == 401

    def test_create_with_lines(self, client, owner_headers):
        """Test raw lines are parsed on create and unmatched ones flag the recipe."""
        recipe = create_recipe(
            client, owner_headers, "Salad", ["2 tbsp olive oil", "salt and pepper"]
        )

        assert recipe["owner_id"] == "user-1"
        assert [i["parsed"] for i in recipe["ingredients"]] == [True, False]
        assert recipe["has_unparsed_ingredients"] is True

    def test_get_list_update_delete(self, client, owner_headers):
        """Test the basic recipe lifecycle."""
        recipe = create_recipe(client, owner_headers, "Soup", ["2 onions"])
        url = f"/api/v1/recipes/{recipe['id']}"

        assert client.get(url, headers=owner_headers).json()["name"] == "Soup"
        assert len(client.get("/api/v1/recipes/", headers=owner_headers).json()) == 1

        updated = client.put(url, json={"servings": 4}, headers=owner_headers).json()
        assert updated["servings"] == 4
        assert updated["id"] == recipe["id"]

        assert client.delete(url, headers=owner_headers).status_code == 204
        assert client.get(url, headers=owner_headers).status_code == 404

    def test_other_owner_not_found(self, client, owner_headers):
        """Test another owner cannot see the recipe."""
        recipe = create_recipe(client, owner_headers, "Soup", ["2 onions"])

        response = client.get(f"/api/v1/recipes/{recipe['id']}", headers={"X-User-Id": "user-2"})
        assert response.status_code == 404

    def test_unparsed_only(self, client, owner_headers):
        """Test filtering recipes that need review."""
        create_recipe(client, owner_headers, "Soup", ["2 onions"])
        create_recipe(client, owner_headers, "Salad", ["salt and pepper"])

        recipes = client.get("/api/v1/recipes/?unparsed_only=true", headers=owner_headers).json()
        assert [r["name"] for r in recipes] == ["Salad"]

    def test_fix_ingredient(self, client, owner_headers):
        """Test a manual fix clears the needs-review flag."""
        recipe = create_recipe(client, owner_headers, "Mystery", ["1 cup unobtainium"])

        fixed = client.put(
            f"/api/v1/recipes/{recipe['id']}/ingredients/0",
            json={"name": "Dragon Fruit", "quantity": 1},
            headers=owner_headers,
        ).json()

        assert fixed["ingredients"][0]["name"] == "Dragon Fruit"
        assert fixed["ingredients"][0]["raw_line"] == "1 cup unobtainium"
        assert fixed["has_unparsed_ingredients"] is False

    def test_fix_ingredient_bad_index(self, client, owner_headers):
        """Test an out-of-range index is a bad request."""
        recipe = create_recipe(client, owner_headers, "Soup", ["2 onions"])

        response = client.put(
            f"/api/v1/recipes/{recipe['id']}/ingredients/5",
            json={"name": "Salt"},
            headers=owner_headers,
        )
        assert response.status_code == 400

    def test_split_ingredient(self, client, owner_headers):
        """Test splitting one ingredient into two."""
        recipe = create_recipe(client, owner_headers, "Salad", ["salt and pepper"])

        split = client.post(
            f"/api/v1/recipes/{recipe['id']}/ingredients/0/split",
            json={"ingredients": [{"name": "Salt", "parsed": True}, {"name": "Black Pepper"}]},
            headers=owner_headers,
        ).json()

        assert [i["name"] for i in split["ingredients"]] == ["Salt", "Black Pepper"]
        assert split["has_unparsed_ingredients"] is True

    def test_fix_unparsed_flags(self, client, owner_headers):
        """Test the flag repair endpoint reports counts for the caller."""
        create_recipe(client, owner_headers, "Soup", ["2 onions"])

        data = client.post("/api/v1/recipes/fix-unparsed-flags", headers=owner_headers).json()
        assert data == {"fixed": 0, "total": 1}


# =============================================================================
# Imports
# =============================================================================


class TestImportsApi:
    """Tests for the import endpoints."""

    def test_import(self, client, owner_headers, mealie_recipe):
        """Test a synchronous import returns the report."""
        report = client.post(
            "/api/v1/imports/",
            json={"recipes": [mealie_recipe, {"name": ""}]},
            headers=owner_headers,
        ).json()

        assert report["created"] == 1
        assert report["failed"] == 1
        assert report["parser"] == "rules"

        recipes = client.get("/api/v1/recipes/", headers=owner_headers).json()
        assert [r["name"] for r in recipes] == ["Weeknight Chili"]

    def test_import_twice_skips(self, client, owner_headers, mealie_recipe):
        """Test importing the same fully parsed recipe again skips it."""
        client.post("/api/v1/imports/", json={"recipes": [mealie_recipe]}, headers=owner_headers)
        report = client.post(
            "/api/v1/imports/", json={"recipes": [mealie_recipe]}, headers=owner_headers
        ).json()

        assert report["skipped"] == 1
        assert report["created"] == 0

    def test_preview(self, client, mealie_recipe):
        """Test a preview lists the lines without storing anything."""
        data = client.post("/api/v1/imports/preview", json={"recipes": [mealie_recipe]}).json()

        assert data["total_recipes"] == 1
        assert data["total_ingredients"] == 4

    def test_async_import(self, client, owner_headers, mealie_recipe, monkeypatch):
        """Test the async endpoint queues the batch."""
        calls = []

        def fake_delay(owner_id, recipes):
            calls.append((owner_id, recipes))
            return SimpleNamespace(id="task-123")

        monkeypatch.setattr(import_recipes_task, "delay", fake_delay)

        response = client.post(
            "/api/v1/imports/async", json={"recipes": [mealie_recipe]}, headers=owner_headers
        )

        assert response.status_code == 202
        assert response.json()["task_id"] == "task-123"
        assert response.json()["status"] == "queued"
        assert calls[0][0] == "user-1"


# =============================================================================
# Shopping Lists
# =============================================================================


class TestShoppingListsApi:
    """Tests for the shopping list endpoints."""

    @pytest.fixture
    def recipe_ids(self, client, owner_headers) -> list[str]:
        soup = create_recipe(client, owner_headers, "Onion Soup", ["2 onions", "1 cup milk"])
        stew = create_recipe(client, owner_headers, "Stew", ["1 onion", "1 tsp salt"])
        return [soup["id"], stew["id"]]

    def test_create_aggregates(self, client, owner_headers, recipe_ids):
        """Test lines for the same ingredient and unit are merged."""
        response = client.post(
            "/api/v1/shopping-lists/",
            json={"name": "Week 1", "recipe_ids": recipe_ids},
            headers=owner_headers,
        )
        data = response.json()

        assert response.status_code == 201
        assert data["is_complete"] is False
        assert sorted(data["recipe_ids"]) == sorted(recipe_ids)
        assert item_by_name(data, "Onion")["quantity"] == 3
        assert [i["position"] for i in data["items"]] == list(range(len(data["items"])))

    def test_add_recipes_unchecks(self, client, owner_headers, recipe_ids):
        """Test appending a recipe merges into checked items and unchecks them."""
        shopping_list = client.post(
            "/api/v1/shopping-lists/",
            json={"name": "Week 1", "recipe_ids": recipe_ids[:1]},
            headers=owner_headers,
        ).json()
        base = f"/api/v1/shopping-lists/{shopping_list['id']}"
        onion = item_by_name(shopping_list, "Onion")
        client.post(f"{base}/items/{onion['id']}/toggle", headers=owner_headers)

        data = client.post(
            f"{base}/recipes", json={"recipe_ids": recipe_ids[1:]}, headers=owner_headers
        ).json()

        merged = item_by_name(data, "Onion")
        assert merged["quantity"] == 3
        assert merged["is_checked"] is False
        assert item_by_name(data, "Salt")["unit"] == "teaspoon"

    def test_manual_items(self, client, owner_headers):
        """Test adding, editing, checking and removing a manual item."""
        shopping_list = client.post(
            "/api/v1/shopping-lists/", json={"name": "Extras"}, headers=owner_headers
        ).json()
        base = f"/api/v1/shopping-lists/{shopping_list['id']}"

        item = client.post(
            f"{base}/items", json={"name": "Paper towels", "quantity": 2}, headers=owner_headers
        )
        assert item.status_code == 201
        item_url = f"{base}/items/{item.json()['id']}"

        edited = client.patch(item_url, json={"note": "recycled"}, headers=owner_headers).json()
        assert edited["note"] == "recycled"
        assert edited["quantity"] == 2

        assert client.post(f"{item_url}/toggle", headers=owner_headers).json()["is_checked"]
        cleared = client.post(f"{base}/clear-checked", headers=owner_headers).json()
        assert cleared["items"] == []

    def test_list_summaries(self, client, owner_headers, recipe_ids):
        """Test the summary listing counts items."""
        client.post(
            "/api/v1/shopping-lists/",
            json={"name": "Week 1", "recipe_ids": recipe_ids},
            headers=owner_headers,
        )

        summaries = client.get("/api/v1/shopping-lists/", headers=owner_headers).json()

        assert len(summaries) == 1
        assert summaries[0]["item_count"] == 3
        assert summaries[0]["checked_count"] == 0

    def test_toggle_complete_and_delete(self, client, owner_headers):
        """Test completing and deleting a list."""
        shopping_list = client.post(
            "/api/v1/shopping-lists/", json={"name": "Done"}, headers=owner_headers
        ).json()
        url = f"/api/v1/shopping-lists/{shopping_list['id']}"

        assert client.post(f"{url}/toggle-complete", headers=owner_headers).json()["is_complete"]
        assert client.delete(url, headers=owner_headers).status_code == 204
        assert client.get(url, headers=owner_headers).status_code == 404

    def test_other_owner_not_found(self, client, owner_headers):
        """Test another owner's list is reported as missing."""
        shopping_list = client.post(
            "/api/v1/shopping-lists/", json={"name": "Mine"}, headers=owner_headers
        ).json()

        response = client.get(
            f"/api/v1/shopping-lists/{shopping_list['id']}", headers={"X-User-Id": "user-2"}
        )
        assert response.status_code == 404

    def test_append_unknown_recipe(self, client, owner_headers):
        """Test appending only unknown recipes is reported as missing."""
        shopping_list = client.post(
            "/api/v1/shopping-lists/", json={"name": "Week 1"}, headers=owner_headers
        ).json()

        response = client.post(
            f"/api/v1/shopping-lists/{shopping_list['id']}/recipes",
            json={"recipe_ids": ["nope"]},
            headers=owner_headers,
        )
        assert response.status_code == 404
