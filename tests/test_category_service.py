"""Unit tests for CategoryService and CategoryController."""
import asyncio

import pytest

from servicedesk.schemas import Category, CategoryPatch, PageRequest
from servicedesk.utils.exceptions import BadRequestAlertException, CategoryNotFoundError


class TestCategoryService:
    """Tests for CategoryService."""

    def test_save_new_category_inserts(self, category_service, category_store):
        result = asyncio.run(category_service.save(Category(name="Hardware")))

        assert result.id == 1
        assert category_store.rows[1]["name"] == "Hardware"

    def test_save_existing_category_replaces(self, category_service, seeded_store):
        asyncio.run(category_service.save(Category(id=1, name="Devices")))

        assert seeded_store.rows[1] == {"name": "Devices", "description": None}

    def test_partial_update_keeps_untouched_fields(self, category_service, seeded_store):
        patch = CategoryPatch.model_validate({"id": 2, "description": "LAN and Wi-Fi"})

        result = asyncio.run(category_service.partial_update(patch))

        assert result == Category(id=2, name="Network", description="LAN and Wi-Fi")

    def test_partial_update_of_missing_category(self, category_service, category_store):
        patch = CategoryPatch(id=4, name="Gone")

        assert asyncio.run(category_service.partial_update(patch)) is None

    def test_find_all_pages(self, category_service, seeded_store):
        page = asyncio.run(category_service.find_all(PageRequest.of(page=0, size=2)))

        assert len(page.content) == 2
        assert page.total_elements == 3
        assert page.total_pages == 2

    def test_delete_is_idempotent(self, category_service, seeded_store):
        asyncio.run(category_service.delete(1))
        asyncio.run(category_service.delete(1))

        assert 1 not in seeded_store.rows


class TestCategoryController:
    """Tests for CategoryController request checks."""

    def test_create_rejects_existing_id(self, category_controller):
        with pytest.raises(BadRequestAlertException) as exc_info:
            asyncio.run(category_controller.create_category(Category(id=1, name="Hardware")))

        assert exc_info.value.error_key == "idexists"
        assert exc_info.value.entity_name == "category"

    @pytest.mark.parametrize(
        "path_id, body_id, error_key",
        [(1, None, "idnull"), (1, 2, "idinvalid"), (8, 8, "idnotfound")],
    )
    def test_update_checks_target(self, category_controller, seeded_store, path_id, body_id, error_key):
        with pytest.raises(BadRequestAlertException) as exc_info:
            asyncio.run(category_controller.update_category(path_id, Category(id=body_id, name="X")))

        assert exc_info.value.error_key == error_key

    def test_get_missing_category_raises_not_found(self, category_controller):
        with pytest.raises(CategoryNotFoundError) as exc_info:
            asyncio.run(category_controller.get_category(999))

        assert exc_info.value.category_id == 999


class TestCategoryPatch:
    """Tests for merge-patch field selection."""

    def test_changed_fields_skip_absent_null_and_id(self):
        patch = CategoryPatch.model_validate({"id": 1, "name": None, "description": "Desks"})

        assert patch.changed_fields() == {"description": "Desks"}

    def test_changed_fields_empty_patch(self):
        assert CategoryPatch(id=1).changed_fields() == {}
