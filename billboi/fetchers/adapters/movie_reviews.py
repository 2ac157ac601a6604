from __future__ import annotations
from typing import Any

from billboi.fetchers.base import MAX_STORIES, SourceAdapter, Story, text_or
from billboi.fetchers.http_helpers import fetch_json


def _build_stories(results: list[dict[str, Any]]) -> list[Story]:
    stories: list[Story] = []
    for review in results[:MAX_STORIES]:
        display_title = review.get("display_title")
        stories.append(
            Story(
                section="movies",
                title=text_or(display_title, "Movie Review"),
                abstract=text_or(review.get("summary_short"), f'Review of "{display_title}"'),
                byline=f"Review by {text_or(review.get('byline'), 'NYT Critic')}",
                # Picks without a link object are malformed; let the adapter fall back.
                url=review["link"]["url"],
            )
        )
    return stories


class MovieReviewsAdapter(SourceAdapter):
    source_name = "movie_reviews"
    error_title = "Error Fetching Movie Reviews"
    error_activity = "fetching movie reviews"
    error_url = "https://www.nytimes.com/section/movies"

    def _fetch(self) -> list[Story]:
        payload = fetch_json("movies/v2/reviews/picks.json")
        return _build_stories(payload["results"])

    def error_section(self) -> str:
        return "movies"
