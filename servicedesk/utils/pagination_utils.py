"""
Pagination response headers.

``X-Total-Count`` carries the total number of matching entities and
``Link`` the navigation links (RFC 5988) derived from the request URL.
"""
from typing import Dict

from starlette.datastructures import URL

from servicedesk.schemas import Page

TOTAL_COUNT_HEADER = "X-Total-Count"


def _prepare_link(url: URL, page_number: int, page_size: int, rel: str) -> str:
    link = str(url.include_query_params(page=page_number, size=page_size))
    link = link.replace(",", "%2C").replace(";", "%3B")
    return f'<{link}>; rel="{rel}"'


def generate_pagination_http_headers(url: URL, page: Page) -> Dict[str, str]:
    """Build total-count and link headers for ``page`` served at ``url``."""
    number = page.number
    size = page.size
    total_pages = page.total_pages

    links = []
    if number < total_pages - 1:
        links.append(_prepare_link(url, number + 1, size, "next"))
    if number > 0:
        links.append(_prepare_link(url, number - 1, size, "prev"))
    last_page = total_pages - 1 if total_pages > 0 else 0
    links.append(_prepare_link(url, last_page, size, "last"))
    links.append(_prepare_link(url, 0, size, "first"))

    return {
        TOTAL_COUNT_HEADER: str(page.total_elements),
        "Link": ",".join(links),
    }
