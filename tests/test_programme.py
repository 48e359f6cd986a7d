import pytest

from conftest import LEGACY_LISTING, SMOTRIM_LISTING, load_fixture

from src.feed.errors import ErrorKind, FeedError
from src.feed.models import Feed
from src.feed.programme import populate_feed
from src.utils.text import clean_text


def test_legacy_page_falls_back_to_legacy_grammar() -> None:
    feed = Feed(link=LEGACY_LISTING)

    populate_feed(feed, clean_text(load_fixture("radiorus_episodes.html")))

    assert feed.title == '"Аэростат"'
    assert feed.description == ""
    assert feed.image is not None
    assert feed.image.url.endswith("/4.jpg")
    assert [item.link for item in feed.items] == [
        "https://www.radiorus.ru/brand/57083/episode/2176502",
        "https://www.radiorus.ru/brand/57083/episode/2176503",
        "https://www.radiorus.ru/brand/57083/episode/2176504",
    ]


def test_redesigned_page_uses_selectors() -> None:
    feed = Feed(link=SMOTRIM_LISTING)

    populate_feed(feed, load_fixture("smotrim_brand.html"))

    assert feed.title == "Аэростат"
    assert feed.description == "Авторская программа Бориса Гребенщикова."
    assert feed.image is not None
    assert feed.image.title == "Аэростат"
    assert [item.title for item in feed.items] == ["Sparks", "Кино"]


def test_redesigned_title_wins_over_legacy_title() -> None:
    page = '<h1 class="brand-main-item__title">Новое</h1><h2>Старое</h2>'
    feed = Feed(link=SMOTRIM_LISTING)

    populate_feed(feed, page)

    assert feed.title == "Новое"


def test_page_without_title_is_bad_programme_page() -> None:
    feed = Feed(link=LEGACY_LISTING)

    with pytest.raises(FeedError) as excinfo:
        populate_feed(feed, "<html><body><p>503</p></body></html>")

    assert excinfo.value.kind is ErrorKind.BAD_PROGRAMME_PAGE
    assert feed.items == []


def test_malformed_episode_leaves_items_untouched() -> None:
    page = clean_text(load_fixture("radiorus_episodes.html")).replace(
        'class="title brand-menu-link">Аэростат. Архив</a>',
        'class="title brand-menu-link">Аэростат. Архив</a>'
        '<a href="/brand/57083/episode/2176505" class="title brand-menu-link">Другой</a>',
    )
    feed = Feed(link=LEGACY_LISTING)

    with pytest.raises(FeedError) as excinfo:
        populate_feed(feed, page)

    assert excinfo.value.kind is ErrorKind.BAD_EPISODE
    assert feed.items == []


def test_duplicate_episodes_are_added_once() -> None:
    listing = load_fixture("smotrim_brand.html").replace("/audio/2516562", "/audio/2516561")
    feed = Feed(link=SMOTRIM_LISTING)

    populate_feed(feed, listing)

    assert len(feed.items) == 1
    assert feed.items[0].title == "Sparks"
