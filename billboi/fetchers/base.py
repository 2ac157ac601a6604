from __future__ import annotations
from dataclasses import dataclass

import httpx

from billboi.core.logging import get_logger

logger = get_logger()

MAX_STORIES = 5
ATTRIBUTION = "billboi-print"
SITE_ROOT = "https://www.nytimes.com"


@dataclass
class Story:
    section: str
    title: str
    abstract: str
    byline: str = ""
    url: str = SITE_ROOT


class SourceAdapter:
    """Fetches one endpoint and normalizes it into at most MAX_STORIES stories.

    ``fetch`` never raises: any failure is logged and replaced by a single
    synthetic error story built by ``error_story`` from the caller's raw
    arguments.
    """

    source_name: str
    error_title: str = "Error Fetching Stories"
    error_activity: str = "fetching stories"
    error_url: str = SITE_ROOT

    def fetch(self, *args, **kwargs) -> list[Story]:
        try:
            stories = self._fetch(*args, **kwargs)
            if not stories:
                raise ValueError("the API returned no stories")
        except Exception as exc:  # noqa: BLE001
            logger.warning("fetch_failed", source=self.source_name, error=describe_error(exc))
            return [self.error_story(exc, *args, **kwargs)]
        return stories[:MAX_STORIES]

    def _fetch(self, *args, **kwargs) -> list[Story]:
        raise NotImplementedError

    def error_section(self, *args, **kwargs) -> str:
        raise NotImplementedError

    def error_message(self, exc: Exception, *args, **kwargs) -> str:
        return f"We encountered an error while {self.error_activity}: {describe_error(exc)}. Please try again later."

    def error_story(self, exc: Exception, *args, **kwargs) -> Story:
        return Story(
            section=self.error_section(*args, **kwargs),
            title=self.error_title,
            abstract=self.error_message(exc, *args, **kwargs),
            byline=ATTRIBUTION,
            url=self.error_url,
        )


def text_or(value, fallback: str) -> str:
    return str(value) if value else fallback


def describe_error(exc: Exception) -> str:
    # Status errors embed the request URL, which carries the api-key.
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code} {exc.response.reason_phrase}".strip()
    return str(exc) or exc.__class__.__name__
