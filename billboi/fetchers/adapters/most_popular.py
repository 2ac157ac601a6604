from __future__ import annotations
from typing import Any

from billboi.fetchers.base import MAX_STORIES, SourceAdapter, Story
from billboi.fetchers.http_helpers import fetch_json

PERIODS = (1, 7, 30)
DEFAULT_PERIOD = 7


def valid_period(period: Any) -> int:
    try:
        value = float(period)
    except (TypeError, ValueError):
        return DEFAULT_PERIOD
    return int(value) if value in PERIODS else DEFAULT_PERIOD


def _build_stories(results: list[dict[str, Any]]) -> list[Story]:
    stories: list[Story] = []
    for item in results:
        if not item.get("title") or not item.get("abstract"):
            continue
        stories.append(
            Story(
                section=item.get("section") or "popular",
                title=item["title"],
                abstract=item["abstract"],
                byline=item.get("byline") or "",
                url=item["url"],
            )
        )
    return stories[:MAX_STORIES]


class MostPopularAdapter(SourceAdapter):
    source_name = "most_popular"
    error_title = "Error Fetching Popular Stories"
    error_activity = "fetching popular stories"

    def _fetch(self, period: Any = DEFAULT_PERIOD) -> list[Story]:
        payload = fetch_json(f"mostpopular/v2/viewed/{valid_period(period)}.json")
        return _build_stories(payload["results"])

    def error_section(self, period: Any = DEFAULT_PERIOD) -> str:
        return "popular"
