from __future__ import annotations

from billboi.fetchers.adapters import (
    archive,
    article_search,
    bestsellers,
    book_reviews,
    most_popular,
    movie_reviews,
    top_stories,
)
from billboi.fetchers.base import ATTRIBUTION


class RecordingFetch:
    def __init__(self, *payloads):
        self.payloads = list(payloads)
        self.calls: list[tuple[str, dict | None]] = []

    def __call__(self, path, params=None, **_kwargs):
        self.calls.append((path, params))
        return self.payloads.pop(0)


def _doc(headline: str, abstract: str = "", **extra) -> dict:
    doc = {"headline": {"main": headline}, "abstract": abstract, "web_url": f"https://nyt.example/{headline}"}
    doc.update(extra)
    return doc


def test_top_stories_filters_and_caps(monkeypatch):
    results = [{"title": "No abstract", "abstract": "", "url": "https://nyt.example/0"}]
    results += [
        {"section": "world", "title": f"Story {i}", "abstract": f"Body {i}", "byline": "By A. Writer", "url": f"https://nyt.example/{i}"}
        for i in range(1, 8)
    ]
    results[2]["section"] = ""
    results[3]["byline"] = None
    fetch = RecordingFetch({"results": results})
    monkeypatch.setattr(top_stories, "fetch_json", fetch)

    stories = top_stories.TopStoriesAdapter().fetch("science")

    assert fetch.calls[0][0] == "topstories/v2/science.json"
    assert [s.title for s in stories] == ["Story 1", "Story 2", "Story 3", "Story 4", "Story 5"]
    assert stories[1].section == "news"
    assert stories[2].byline == ""


def test_most_popular_invalid_period_uses_week(monkeypatch):
    fetch = RecordingFetch(
        {"results": [{"title": "Viral", "abstract": "Everyone read it", "url": "https://nyt.example/v"}]},
        {"results": [{"title": "Monthly", "abstract": "Long read", "url": "https://nyt.example/m", "section": "Opinion"}]},
    )
    monkeypatch.setattr(most_popular, "fetch_json", fetch)

    week = most_popular.MostPopularAdapter().fetch(15)
    month = most_popular.MostPopularAdapter().fetch("30")

    assert fetch.calls[0][0] == "mostpopular/v2/viewed/7.json"
    assert fetch.calls[1][0] == "mostpopular/v2/viewed/30.json"
    assert week[0].section == "popular"
    assert week[0].byline == ""
    assert month[0].section == "Opinion"


def test_most_popular_valid_period():
    assert most_popular.valid_period(1) == 1
    assert most_popular.valid_period("7") == 7
    assert most_popular.valid_period("abc") == 7
    assert most_popular.valid_period(None) == 7


def test_book_reviews_falls_back_to_second_author(monkeypatch):
    fetch = RecordingFetch(
        {"results": []},
        {"results": [{"book_title": "It Ends with Us", "book_author": "Colleen Hoover", "url": "https://nyt.example/b"}]},
    )
    monkeypatch.setattr(book_reviews, "fetch_json", fetch)

    stories = book_reviews.BookReviewsAdapter().fetch()

    assert [c[1]["author"] for c in fetch.calls] == ["Stephen King", "Colleen Hoover"]
    assert len(stories) == 1
    assert stories[0].title == "It Ends with Us"
    assert stories[0].abstract == 'Review of "It Ends with Us" by Colleen Hoover'
    assert stories[0].byline == "Review by NYT Critic"


def test_book_reviews_no_results_story(monkeypatch):
    monkeypatch.setattr(book_reviews, "fetch_json", RecordingFetch({"results": []}, {"num_results": 0}))

    stories = book_reviews.BookReviewsAdapter().fetch()

    assert len(stories) == 1
    assert stories[0].title == "No Book Reviews Available"
    assert stories[0].byline == ATTRIBUTION


def test_book_reviews_primary_results(monkeypatch):
    reviews = [
        {"book_title": f"Book {i}", "summary": "Scary.", "byline": "JANET MASLIN", "url": f"https://nyt.example/{i}"}
        for i in range(8)
    ]
    fetch = RecordingFetch({"results": reviews})
    monkeypatch.setattr(book_reviews, "fetch_json", fetch)

    stories = book_reviews.BookReviewsAdapter().fetch()

    assert len(fetch.calls) == 1
    assert len(stories) == 5
    assert stories[0].byline == "Review by JANET MASLIN"
    assert stories[0].abstract == "Scary."


def test_movie_reviews_reads_nested_link(monkeypatch):
    fetch = RecordingFetch(
        {
            "results": [
                {"display_title": "Arrival", "summary_short": "", "byline": "", "link": {"url": "https://nyt.example/arrival"}}
            ]
        }
    )
    monkeypatch.setattr(movie_reviews, "fetch_json", fetch)

    stories = movie_reviews.MovieReviewsAdapter().fetch()

    assert stories[0].url == "https://nyt.example/arrival"
    assert stories[0].abstract == 'Review of "Arrival"'
    assert stories[0].byline == "Review by NYT Critic"
    assert stories[0].section == "movies"


def test_movie_reviews_without_link_fall_back(monkeypatch):
    monkeypatch.setattr(movie_reviews, "fetch_json", RecordingFetch({"results": [{"display_title": "Arrival"}]}))

    stories = movie_reviews.MovieReviewsAdapter().fetch()

    assert len(stories) == 1
    assert stories[0].title == "Error Fetching Movie Reviews"


def test_bestsellers_prefixes_rank(monkeypatch):
    fetch = RecordingFetch(
        {
            "results": {
                "books": [
                    {
                        "rank": 1,
                        "title": "THE WOMEN",
                        "author": "Kristin Hannah",
                        "description": "",
                        "weeks_on_list": 12,
                        "amazon_product_url": "https://amazon.example/women",
                    }
                ]
            }
        }
    )
    monkeypatch.setattr(bestsellers, "fetch_json", fetch)

    stories = bestsellers.BestsellersAdapter().fetch("hardcover-fiction")

    assert fetch.calls[0][0] == "books/v3/lists/current/hardcover-fiction.json"
    assert stories[0].title == "#1: THE WOMEN"
    assert stories[0].abstract == "No description available. By Kristin Hannah."
    assert stories[0].byline == "12 weeks on the bestseller list"
    assert stories[0].section == "bestsellers"


def test_archive_filters_by_keyword(monkeypatch):
    docs = [
        _doc("Men Walk on Moon", "Astronauts land"),
        _doc("Senate Debates Budget", "Taxes"),
        _doc("Scientists Cheer", "The MOON rocks arrive"),
    ]
    fetch = RecordingFetch({"response": {"docs": docs}})
    monkeypatch.setattr(archive, "fetch_json", fetch)

    stories = archive.ArchiveAdapter().fetch(1969, 7, "moon")

    assert fetch.calls[0][0] == "archive/v1/1969/7.json"
    assert [s.title for s in stories] == ["Men Walk on Moon", "Scientists Cheer"]
    assert stories[0].section == "archive: 7/1969"


def test_archive_without_matches_returns_first_five(monkeypatch):
    docs = [_doc(f"Headline {i}", snippet=f"Snippet {i}", pub_date="1969-07-21T05:00:00+0000") for i in range(9)]
    monkeypatch.setattr(archive, "fetch_json", RecordingFetch({"response": {"docs": docs}}))

    stories = archive.ArchiveAdapter().fetch(1969, 7, "zeppelin")

    assert [s.title for s in stories] == [f"Headline {i}" for i in range(5)]
    assert stories[0].abstract == "Snippet 0"
    assert stories[0].byline == "Published: 7/21/1969"


def test_archive_validates_year_and_month(monkeypatch):
    fetch = RecordingFetch({"response": {"docs": [_doc("Old News", "Text")]}})
    monkeypatch.setattr(archive, "fetch_json", fetch)

    stories = archive.ArchiveAdapter().fetch("nope", 13)

    assert fetch.calls[0][0] == "archive/v1/1969/7.json"
    assert stories[0].section == "archive: 7/1969"


def test_article_search_maps_docs(monkeypatch):
    docs = [
        _doc("Chips Act", "", byline={"original": "By Don Clark"}, lead_paragraph="Lead"),
        _doc("AI Rules", ""),
    ]
    fetch = RecordingFetch({"response": {"docs": docs}})
    monkeypatch.setattr(article_search, "fetch_json", fetch)

    stories = article_search.ArticleSearchAdapter().fetch("climate change")

    assert fetch.calls[0] == ("search/v2/articlesearch.json", {"q": "climate change"})
    assert stories[0].section == "search: climate change"
    assert stories[0].byline == "By Don Clark"
    assert stories[0].abstract == "Lead"
    assert stories[1].abstract == "No abstract available."
    assert stories[1].byline == "Published: unknown date"
