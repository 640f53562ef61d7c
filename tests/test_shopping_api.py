"""
Tests for Shopping List API endpoints.

This module covers manual item management and generating the list from
the meal plan.
"""

from tests.base_test import BaseAPITest, FailingStorage, FlakyStorage


class TestShoppingListEndpoints(BaseAPITest):
    """Test cases for shopping list API endpoints."""

    def add_item(self, name, category=None):
        payload = {"name": name}
        if category:
            payload["category"] = category
        return self.client.post("/api/v1/shopping/items", json=payload)

    def test_get_empty_list(self):
        response = self.client.get("/api/v1/shopping/items")

        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["categories"] == []
        assert data["total"] == 0

    def test_add_item(self):
        response = self.add_item("Milk", "dairy")

        assert response.status_code == 200
        data = response.json()
        assert data["items"][0]["name"] == "Milk"
        assert data["categories"][0]["display_name"] == "Dairy"
        assert data["remaining"] == 1

    def test_add_duplicate_item(self):
        self.add_item("Milk")

        response = self.add_item("milk")

        assert response.status_code == 409
        assert self.client.get("/api/v1/shopping/items").json()["total"] == 1

    def test_add_blank_item(self):
        assert self.add_item("").status_code == 422

    def test_add_whitespace_item(self):
        assert self.add_item("   ").status_code == 400

    def test_add_item_write_failure(self):
        self.storage = FlakyStorage()
        self.storage.fail_writes = 1

        response = self.add_item("Milk")

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to save shopping list"
        assert self.add_item("Milk").status_code == 200

    def test_toggle_item(self):
        item_id = self.add_item("eggs").json()["items"][0]["id"]

        response = self.client.post(f"/api/v1/shopping/items/{item_id}/toggle")

        assert response.status_code == 200
        assert response.json()["item"]["checked"] is True
        data = self.client.get("/api/v1/shopping/items").json()
        assert data["checked"] == 1

    def test_toggle_missing_item(self):
        response = self.client.post("/api/v1/shopping/items/nope/toggle")

        assert response.status_code == 404

    def test_remove_item(self):
        item_id = self.add_item("eggs").json()["items"][0]["id"]

        assert self.client.delete(f"/api/v1/shopping/items/{item_id}").status_code == 200
        assert self.client.delete(f"/api/v1/shopping/items/{item_id}").status_code == 404

    def test_clear_list(self):
        self.add_item("eggs")

        assert self.client.delete("/api/v1/shopping/items").status_code == 200
        assert self.client.get("/api/v1/shopping/items").json()["total"] == 0

    def test_clear_failure(self):
        self.storage = FailingStorage()

        assert self.client.delete("/api/v1/shopping/items").status_code == 500


class TestShoppingListGeneration(BaseAPITest):
    """Test cases for generating the list from the meal plan."""

    def add_item(self, name, category=None):
        payload = {"name": name}
        if category:
            payload["category"] = category
        return self.client.post("/api/v1/shopping/items", json=payload)

    def fill_plan(self):
        self.client.put(
            "/api/v1/meal-plan/monday/breakfast",
            json=self.create_test_recipe_data(1, "Pancakes"),
        )
        self.client.put(
            "/api/v1/meal-plan/tuesday/breakfast",
            json=self.create_test_recipe_data(2, "Crepes"),
        )

    def test_preview_does_not_save(self):
        self.fill_plan()

        data = self.client.get("/api/v1/shopping/preview").json()

        assert data["total"] == 2
        assert data["items"][0] == {
            "name": "flour",
            "category": "other",
            "amount": 400,
            "unit": "g",
            "checked": False,
        }
        assert self.client.get("/api/v1/shopping/items").json()["total"] == 0

    def test_generate(self):
        self.fill_plan()

        response = self.client.post("/api/v1/shopping/generate")

        assert response.status_code == 200
        data = response.json()
        assert data["generated"] == 2
        assert data["added"] == 2
        names = [item["name"] for item in data["items"]]
        assert names == ["flour", "milk"]
        assert data["items"][1]["amount"] == 600
        assert data["items"][1]["category"] == "dairy"

    def test_generate_replaces_list(self):
        self.fill_plan()
        self.add_item("coffee")

        data = self.client.post("/api/v1/shopping/generate").json()

        assert [item["name"] for item in data["items"]] == ["flour", "milk"]

    def test_generate_without_replace_keeps_items(self):
        self.fill_plan()
        self.add_item("Milk", "dairy")

        data = self.client.post("/api/v1/shopping/generate?replace=false").json()

        assert data["added"] == 1
        assert [item["name"] for item in data["items"]] == ["Milk", "flour"]

    def test_generate_from_empty_plan(self):
        response = self.client.post("/api/v1/shopping/generate")

        assert response.status_code == 400
        assert response.json()["detail"] == "No meals in your meal plan"

    def test_add_recipe_ingredients(self):
        response = self.client.post("/api/v1/shopping/recipes/101")

        assert response.status_code == 200
        assert response.json()["added"] == 2
        items = self.client.get("/api/v1/shopping/items").json()["items"]
        assert {item["name"]: item["category"] for item in items} == {
            "spaghetti": "other",
            "garlic": "produce",
        }

    def test_add_recipe_ingredients_missing_recipe(self):
        assert self.client.post("/api/v1/shopping/recipes/999").status_code == 404

    def test_add_recipe_ingredients_unconfigured(self):
        self.recipe_client.configured = False

        assert self.client.post("/api/v1/shopping/recipes/101").status_code == 503
