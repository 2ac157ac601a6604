from __future__ import annotations
from datetime import datetime
from typing import Any

from billboi.fetchers.base import MAX_STORIES, Story


def published_label(pub_date: str | None) -> str:
    raw = (pub_date or "").strip()
    for fmt in ("%Y-%m-%dT%H:%M:%S%z", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d"):
        try:
            parsed = datetime.strptime(raw, fmt)
        except ValueError:
            continue
        return f"Published: {parsed.month}/{parsed.day}/{parsed.year}"
    return f"Published: {raw or 'unknown date'}"


def article_abstract(doc: dict[str, Any]) -> str:
    return doc.get("abstract") or doc.get("snippet") or doc.get("lead_paragraph") or "No abstract available."


def article_byline(doc: dict[str, Any]) -> str:
    byline = doc.get("byline")
    original = byline.get("original") if isinstance(byline, dict) else None
    return original or published_label(doc.get("pub_date"))


def build_article_stories(docs: list[dict[str, Any]], section: str) -> list[Story]:
    """Map article-search style documents (archive and search share the shape)."""
    return [
        Story(
            section=section,
            title=doc["headline"]["main"],
            abstract=article_abstract(doc),
            byline=article_byline(doc),
            url=doc["web_url"],
        )
        for doc in docs[:MAX_STORIES]
    ]
