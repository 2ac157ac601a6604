from __future__ import annotations
from typing import Any

from billboi.fetchers.base import MAX_STORIES, SourceAdapter, Story, text_or
from billboi.fetchers.http_helpers import fetch_json

DEFAULT_LIST = "hardcover-fiction"


def _build_stories(books: list[dict[str, Any]]) -> list[Story]:
    stories: list[Story] = []
    for book in books[:MAX_STORIES]:
        description = text_or(book.get("description"), "No description available.")
        stories.append(
            Story(
                section="bestsellers",
                title=f"#{book['rank']}: {book['title']}",
                abstract=f"{description} By {book.get('author')}.",
                byline=f"{book.get('weeks_on_list')} weeks on the bestseller list",
                url=book.get("amazon_product_url") or "https://www.nytimes.com/books/best-sellers/",
            )
        )
    return stories


class BestsellersAdapter(SourceAdapter):
    source_name = "bestsellers"
    error_title = "Error Fetching Bestsellers"
    error_activity = "fetching bestsellers"
    error_url = "https://www.nytimes.com/books/best-sellers/"

    def _fetch(self, list_name: str = DEFAULT_LIST) -> list[Story]:
        payload = fetch_json(f"books/v3/lists/current/{list_name}.json")
        return _build_stories(payload["results"]["books"])

    def error_section(self, list_name: str = DEFAULT_LIST) -> str:
        return "bestsellers"
