"""Tests for pagination and alert header helpers."""
from starlette.datastructures import URL

from servicedesk.schemas import Category, Page, PageRequest, SortDirection, SortOrder
from servicedesk.utils import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    create_failure_alert,
    generate_pagination_http_headers,
)

BASE_URL = URL("http://localhost/api/categories")


def page_of(number, size, total):
    return Page[Category](content=[], total_elements=total, number=number, size=size)


class TestPageRequest:
    """Tests for PageRequest normalisation."""

    def test_defaults(self):
        request = PageRequest.of()

        assert (request.page, request.size, request.sort) == (0, 20, [])

    def test_negative_page_and_bad_size(self):
        request = PageRequest.of(page=-3, size=0, default_size=20)

        assert (request.page, request.size) == (0, 20)

    def test_size_capped(self):
        assert PageRequest.of(size=10_000, max_size=2000).size == 2000

    def test_offset(self):
        assert PageRequest.of(page=3, size=10).offset == 30

    def test_sort_parsing(self):
        request = PageRequest.of(sort=["name,DESC", "id", ","])

        assert request.sort == [
            SortOrder(field="name", direction=SortDirection.DESC),
            SortOrder(field="id", direction=SortDirection.ASC),
        ]


class TestPaginationHeaders:
    """Tests for generate_pagination_http_headers."""

    def test_middle_page_links(self):
        headers = generate_pagination_http_headers(BASE_URL, page_of(1, 10, 35))

        assert headers["X-Total-Count"] == "35"
        assert headers["Link"].split(",") == [
            '<http://localhost/api/categories?page=2&size=10>; rel="next"',
            '<http://localhost/api/categories?page=0&size=10>; rel="prev"',
            '<http://localhost/api/categories?page=3&size=10>; rel="last"',
            '<http://localhost/api/categories?page=0&size=10>; rel="first"',
        ]

    def test_empty_result_links(self):
        headers = generate_pagination_http_headers(BASE_URL, page_of(0, 20, 0))

        assert headers["X-Total-Count"] == "0"
        assert headers["Link"] == (
            '<http://localhost/api/categories?page=0&size=20>; rel="last",'
            '<http://localhost/api/categories?page=0&size=20>; rel="first"'
        )

    def test_existing_query_is_kept_and_escaped(self):
        url = URL("http://localhost/api/categories?sort=name,asc&page=4")

        headers = generate_pagination_http_headers(url, page_of(0, 5, 5))

        assert "sort=name%2Casc&page=0&size=5" in headers["Link"]
        assert "page=4" not in headers["Link"]


class TestAlertHeaders:
    """Tests for alert header builders."""

    def test_creation_alert(self):
        headers = create_entity_creation_alert("servicedeskApp", False, "category", "4")

        assert headers == {
            "X-servicedeskApp-alert": "A new category is created with identifier 4",
            "X-servicedeskApp-params": "4",
        }

    def test_update_alert_translated(self):
        headers = create_entity_update_alert("servicedeskApp", True, "category", "4")

        assert headers["X-servicedeskApp-alert"] == "servicedeskApp.category.updated"

    def test_deletion_alert(self):
        headers = create_entity_deletion_alert("servicedeskApp", False, "category", "4")

        assert headers["X-servicedeskApp-alert"] == "A category is deleted with identifier 4"

    def test_failure_alert(self):
        headers = create_failure_alert("servicedeskApp", True, "category", "idnull", "Invalid id")

        assert headers == {
            "X-servicedeskApp-error": "error.idnull",
            "X-servicedeskApp-params": "category",
        }
