from __future__ import annotations
from typing import Any

from billboi.fetchers.base import MAX_STORIES, SourceAdapter, Story
from billboi.fetchers.http_helpers import fetch_json


def _build_stories(results: list[dict[str, Any]]) -> list[Story]:
    stories: list[Story] = []
    for item in results:
        if not item.get("title") or not item.get("abstract"):
            continue
        stories.append(
            Story(
                section=item.get("section") or "news",
                title=item["title"],
                abstract=item["abstract"],
                byline=item.get("byline") or "",
                url=item["url"],
            )
        )
        if len(stories) >= MAX_STORIES:
            break
    return stories


class TopStoriesAdapter(SourceAdapter):
    source_name = "top_stories"

    def _fetch(self, section: str = "home") -> list[Story]:
        payload = fetch_json(f"topstories/v2/{section}.json")
        return _build_stories(payload["results"])

    def error_section(self, section: str = "home") -> str:
        return "news"
