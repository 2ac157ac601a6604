from __future__ import annotations
from typing import Any

from billboi.core.logging import get_logger
from billboi.fetchers.base import ATTRIBUTION, MAX_STORIES, SourceAdapter, Story, text_or
from billboi.fetchers.http_helpers import fetch_json

logger = get_logger()

REVIEWS_URL = "https://www.nytimes.com/section/books/review"
# The reviews endpoint refuses to list without an author, isbn or title filter.
PRIMARY_AUTHOR = "Stephen King"
FALLBACK_AUTHOR = "Colleen Hoover"


def _build_stories(reviews: list[dict[str, Any]]) -> list[Story]:
    stories: list[Story] = []
    for review in reviews[:MAX_STORIES]:
        book_title = review.get("book_title")
        stories.append(
            Story(
                section="books",
                title=text_or(book_title, "Book Review"),
                abstract=text_or(review.get("summary"), f'Review of "{book_title}" by {review.get("book_author")}'),
                byline=f"Review by {text_or(review.get('byline'), 'NYT Critic')}",
                url=review.get("url") or REVIEWS_URL,
            )
        )
    return stories


def _no_results_story() -> Story:
    return Story(
        section="books",
        title="No Book Reviews Available",
        abstract=(
            "The New York Times book review API did not return any results at this time. "
            "Please try again later."
        ),
        byline=ATTRIBUTION,
        url=REVIEWS_URL,
    )


class BookReviewsAdapter(SourceAdapter):
    source_name = "book_reviews"
    error_title = "Error Fetching Book Reviews"
    error_activity = "fetching book reviews"
    error_url = REVIEWS_URL

    def _fetch(self) -> list[Story]:
        results = fetch_json("books/v3/reviews.json", {"author": PRIMARY_AUTHOR}).get("results")
        if not results:
            logger.info("book_reviews_empty", author=PRIMARY_AUTHOR, fallback=FALLBACK_AUTHOR)
            results = fetch_json("books/v3/reviews.json", {"author": FALLBACK_AUTHOR}).get("results")
            if not results:
                return [_no_results_story()]
        return _build_stories(results)

    def error_section(self) -> str:
        return "books"
