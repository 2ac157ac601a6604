from __future__ import annotations
import math
from typing import Any

from billboi.fetchers.adapters.common import build_article_stories
from billboi.fetchers.base import MAX_STORIES, SourceAdapter, Story
from billboi.fetchers.http_helpers import fetch_json

DEFAULT_YEAR = 1969
DEFAULT_MONTH = 7


def _as_number(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(number) else number


def valid_year(year: Any) -> int:
    return int(_as_number(year)) or DEFAULT_YEAR


def valid_month(month: Any) -> int:
    number = _as_number(month)
    return int(number) if 1 <= number <= 12 else DEFAULT_MONTH


def filter_by_keyword(docs: list[dict[str, Any]], keyword: str) -> list[dict[str, Any]]:
    """Keep docs whose headline or abstract contains ``keyword``; fall back to the first unfiltered docs."""
    matches = docs
    if keyword:
        needle = keyword.lower()
        matches = [
            doc
            for doc in docs
            if needle in str((doc.get("headline") or {}).get("main") or "").lower()
            or needle in str(doc.get("abstract") or "").lower()
        ]
    if not matches:
        matches = docs[:MAX_STORIES]
    return matches


class ArchiveAdapter(SourceAdapter):
    source_name = "archive"
    error_title = "Error Fetching Historical Articles"
    error_activity = "fetching historical articles"
    error_url = "https://www.nytimes.com/section/archive"

    def _fetch(self, year: Any = DEFAULT_YEAR, month: Any = DEFAULT_MONTH, keyword: str = "") -> list[Story]:
        year_value = valid_year(year)
        month_value = valid_month(month)
        payload = fetch_json(f"archive/v1/{year_value}/{month_value}.json")
        docs = filter_by_keyword(payload["response"]["docs"], keyword)
        return build_article_stories(docs, f"archive: {month_value}/{year_value}")

    def error_section(self, year: Any = DEFAULT_YEAR, month: Any = DEFAULT_MONTH, keyword: str = "") -> str:
        # Reports what the caller asked for, not the validated values used for the request.
        return f"archive: {month}/{year}"
