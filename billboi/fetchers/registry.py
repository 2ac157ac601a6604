from __future__ import annotations
from billboi.fetchers.adapters.archive import ArchiveAdapter
from billboi.fetchers.adapters.article_search import ArticleSearchAdapter
from billboi.fetchers.adapters.bestsellers import BestsellersAdapter
from billboi.fetchers.adapters.book_reviews import BookReviewsAdapter
from billboi.fetchers.adapters.most_popular import MostPopularAdapter
from billboi.fetchers.adapters.movie_reviews import MovieReviewsAdapter
from billboi.fetchers.adapters.top_stories import TopStoriesAdapter

ADAPTERS = {
    "top_stories": TopStoriesAdapter,
    "most_popular": MostPopularAdapter,
    "book_reviews": BookReviewsAdapter,
    "movie_reviews": MovieReviewsAdapter,
    "bestsellers": BestsellersAdapter,
    "archive": ArchiveAdapter,
    "article_search": ArticleSearchAdapter,
}
