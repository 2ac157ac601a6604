from __future__ import annotations
from billboi.fetchers.base import ATTRIBUTION, MAX_STORIES, SourceAdapter, Story

__all__ = ["ATTRIBUTION", "MAX_STORIES", "SourceAdapter", "Story"]
