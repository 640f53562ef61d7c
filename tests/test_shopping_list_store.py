"""
Tests for the persisted shopping list store.
"""

from domain.entities import AggregatedIngredient, Category
from stores import ShoppingListStore, StorageKeys
from tests.base_test import make_recipe


class TestShoppingListStore:
    """Test cases for ShoppingListStore."""

    def test_empty_by_default(self, shopping_store):
        assert shopping_store.list() == []
        assert shopping_store.counts() == {"total": 0, "checked": 0, "remaining": 0}

    def test_add_item(self, shopping_store):
        assert shopping_store.add("Milk", "dairy")

        items = shopping_store.list()
        assert len(items) == 1
        assert items[0].name == "Milk"
        assert items[0].category == Category.DAIRY
        assert items[0].checked is False

    def test_duplicate_names_ignore_case(self, shopping_store):
        """A second item differing only in case is rejected."""
        assert shopping_store.add("Milk", "dairy")
        assert not shopping_store.add("milk", "dairy")
        assert not shopping_store.add("  MILK ", "other")

        assert [item.name for item in shopping_store.list()] == ["Milk"]

    def test_blank_names_rejected(self, shopping_store):
        assert not shopping_store.add("")
        assert not shopping_store.add("   ")
        assert shopping_store.list() == []

    def test_name_is_stripped(self, shopping_store):
        shopping_store.add("  bread  ", "grains")
        assert shopping_store.list()[0].name == "bread"

    def test_unknown_category_defaults_to_other(self, shopping_store):
        shopping_store.add("napkins", "household")
        shopping_store.add("foil")

        assert {item.category for item in shopping_store.list()} == {Category.OTHER}

    def test_insertion_order_kept(self, shopping_store):
        for name in ("eggs", "apples", "rice"):
            shopping_store.add(name)

        assert [item.name for item in shopping_store.list()] == ["eggs", "apples", "rice"]

    def test_toggle(self, shopping_store):
        shopping_store.add("eggs")
        item_id = shopping_store.list()[0].id

        assert shopping_store.toggle(item_id)
        assert shopping_store.get_item(item_id).checked is True
        assert shopping_store.toggle(item_id)
        assert shopping_store.get_item(item_id).checked is False

    def test_toggle_unknown_id(self, shopping_store):
        shopping_store.add("eggs")

        assert not shopping_store.toggle("missing")
        assert shopping_store.list()[0].checked is False

    def test_remove(self, shopping_store):
        shopping_store.add("eggs")
        shopping_store.add("rice")
        eggs = shopping_store.list()[0]

        assert shopping_store.remove(eggs.id)
        assert [item.name for item in shopping_store.list()] == ["rice"]
        assert not shopping_store.remove(eggs.id)

    def test_clear(self, shopping_store):
        shopping_store.add("eggs")

        assert shopping_store.clear()
        assert shopping_store.list() == []

    def test_counts(self, shopping_store):
        for name in ("eggs", "rice", "beans"):
            shopping_store.add(name)
        shopping_store.toggle(shopping_store.list()[1].id)

        assert shopping_store.counts() == {"total": 3, "checked": 1, "remaining": 2}

    def test_grouped_by_category_uses_display_order(self, shopping_store):
        shopping_store.add("salt", "spices")
        shopping_store.add("beans", "pantry")
        shopping_store.add("apples", "produce")
        shopping_store.add("pears", "produce")

        groups = shopping_store.grouped_by_category()

        assert list(groups) == [Category.PRODUCE, Category.PANTRY, Category.SPICES]
        assert [item.name for item in groups[Category.PRODUCE]] == ["apples", "pears"]

    def test_persists_through_storage(self, storage):
        ShoppingListStore(storage).add("coffee")

        assert ShoppingListStore(storage).list()[0].name == "coffee"

    def test_malformed_record_discarded(self, shopping_store, storage):
        storage.set(StorageKeys.SHOPPING_LIST, {"not": "a list"})

        assert shopping_store.list() == []
        assert shopping_store.add("tea")


class TestCommitGenerated:
    """Test cases for committing generated entries."""

    def test_adds_entries_with_quantities(self, shopping_store):
        entries = [
            AggregatedIngredient("flour", Category.OTHER, 350, "g"),
            AggregatedIngredient("milk", Category.DAIRY, 300, "ml"),
        ]

        assert shopping_store.commit_generated(entries) == 2

        items = shopping_store.list()
        assert items[0].amount == 350
        assert items[0].unit == "g"
        assert items[1].category == Category.DAIRY

    def test_skips_existing_names(self, shopping_store):
        shopping_store.add("Flour")
        entries = [
            AggregatedIngredient("flour", Category.OTHER, 350, "g"),
            AggregatedIngredient("sugar", Category.OTHER, 100, "g"),
        ]

        assert shopping_store.commit_generated(entries) == 1
        assert [item.name for item in shopping_store.list()] == ["Flour", "sugar"]

    def test_does_not_clear_first(self, shopping_store):
        shopping_store.add("coffee")

        shopping_store.commit_generated([AggregatedIngredient("tea", Category.OTHER)])

        assert len(shopping_store.list()) == 2

    def test_case_variants_collapse(self, shopping_store):
        """Generated 'flour' and 'Flour' become a single list item."""
        entries = [
            AggregatedIngredient("flour", Category.OTHER, 200, "g"),
            AggregatedIngredient("Flour", Category.OTHER, 100, "g"),
        ]

        assert shopping_store.commit_generated(entries) == 1


class TestAddRecipeIngredients:
    def test_adds_categorized_ingredients(self, shopping_store, pasta):
        assert shopping_store.add_recipe_ingredients(pasta) == 3

        categories = {item.name: item.category for item in shopping_store.list()}
        assert categories == {
            "spaghetti": Category.OTHER,
            "tomatoes": Category.PRODUCE,
            "olive oil": Category.SPICES,
        }

    def test_skips_duplicates(self, shopping_store, pasta):
        shopping_store.add("Tomatoes")

        assert shopping_store.add_recipe_ingredients(pasta) == 2

    def test_recipe_without_ingredients(self, shopping_store):
        assert shopping_store.add_recipe_ingredients(make_recipe(3)) == 0
        assert shopping_store.add_recipe_ingredients(None) == 0


class TestShoppingListStorageFailures:
    def test_failures_return_safe_defaults(self, failing_storage):
        store = ShoppingListStore(failing_storage)

        assert store.list() == []
        assert store.add("milk") is False
        assert store.toggle("x") is False
        assert store.remove("x") is False
        assert store.clear() is False
        assert store.counts()["total"] == 0

    def test_failed_read_keeps_items(self, flaky_storage):
        store = ShoppingListStore(flaky_storage)
        store.add("milk")
        store.add("bread")
        item_id = store.list()[0].id

        flaky_storage.fail_reads = 1
        assert store.add("eggs") is False
        flaky_storage.fail_reads = 1
        assert store.toggle(item_id) is False
        flaky_storage.fail_reads = 1
        assert store.remove(item_id) is False

        items = store.list()
        assert [item.name for item in items] == ["milk", "bread"]
        assert not items[0].checked

    def test_failed_write_reported(self, flaky_storage):
        store = ShoppingListStore(flaky_storage)

        flaky_storage.fail_writes = 1
        assert store.add("milk") is False
        assert store.find_by_name("milk") is None
        assert store.add("milk")


class TestFindByName:
    def test_ignores_case_and_spaces(self, shopping_store):
        shopping_store.add("Olive Oil", "pantry")

        assert shopping_store.find_by_name("  olive oil ").name == "Olive Oil"
        assert shopping_store.find_by_name("butter") is None
