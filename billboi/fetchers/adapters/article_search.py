from __future__ import annotations

from billboi.fetchers.adapters.common import build_article_stories
from billboi.fetchers.base import SourceAdapter, Story, describe_error
from billboi.fetchers.http_helpers import fetch_json

DEFAULT_QUERY = "technology"


class ArticleSearchAdapter(SourceAdapter):
    source_name = "article_search"
    error_title = "Error Searching for Articles"

    def _fetch(self, query: str = DEFAULT_QUERY) -> list[Story]:
        payload = fetch_json("search/v2/articlesearch.json", {"q": query})
        return build_article_stories(payload["response"]["docs"], f"search: {query}")

    def error_section(self, query: str = DEFAULT_QUERY) -> str:
        return f"search: {query}"

    def error_message(self, exc: Exception, query: str = DEFAULT_QUERY) -> str:
        return f'We encountered an error while searching for "{query}": {describe_error(exc)}. Please try again later.'
