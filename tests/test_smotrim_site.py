from datetime import datetime

from conftest import SMOTRIM_LISTING, load_fixture

from src.feed.models import Enclosure
from src.sites.patterns import DEFAULT_TABLES
from src.sites.smotrim import RedesignSite, audio_id_from_path
from src.utils.dates import MOSCOW, SENTINEL_DATE


def _site() -> RedesignSite:
    return RedesignSite(DEFAULT_TABLES)


def test_programme_fields() -> None:
    page = load_fixture("smotrim_brand.html")
    site = _site()

    assert site.extract_title(page) == "Аэростат"
    assert site.extract_description(page) == "Авторская программа Бориса Гребенщикова."
    image = site.extract_image(page, SMOTRIM_LISTING)
    assert image is not None
    assert image.url == "https://cdn-st1.smotrim.ru/vh/pictures/aerostat.jpg"
    assert image.title == "Аэростат"
    assert image.link == SMOTRIM_LISTING


def test_episode_cards_drop_brand_prefix_from_title() -> None:
    episodes = _site().extract_episodes(load_fixture("smotrim_brand.html"), SMOTRIM_LISTING)

    assert [e.title for e in episodes] == ["Sparks", "Кино"]
    assert episodes[0].link == "https://smotrim.ru/audio/2516561"
    assert episodes[0].id == "http://smotrim.ru/audio/2516561"
    assert episodes[0].enclosure == Enclosure.for_audio("2516561")
    assert episodes[0].created is None


def test_episode_card_without_link_is_skipped() -> None:
    page = (
        '<div class="episode-card"><div class="episode-card__title">Без ссылки</div></div>'
        '<div class="episode-card"><a class="episode-card__link" href="/audio/7">'
        '<div class="episode-card__title">Со ссылкой</div></a></div>'
    )

    episodes = _site().extract_episodes(page, SMOTRIM_LISTING)

    assert [e.title for e in episodes] == ["Со ссылкой"]


def test_missing_fields_are_empty() -> None:
    site = _site()

    assert site.extract_title("<html></html>") == ""
    assert site.extract_description("<html></html>") == ""
    assert site.extract_image("<html></html>", SMOTRIM_LISTING) is None
    assert site.extract_episodes("<html></html>", SMOTRIM_LISTING) == []


def test_extract_date_from_detail_page() -> None:
    site = _site()

    assert site.extract_date(load_fixture("smotrim_audio.html")) == datetime(
        2019, 11, 24, 14, 10, tzinfo=MOSCOW
    )
    assert site.extract_date("<html></html>") == SENTINEL_DATE


def test_audio_id_from_path() -> None:
    assert audio_id_from_path("/audio/2516561") == "2516561"
    assert audio_id_from_path("/audio/2516561/") == "2516561"
    assert audio_id_from_path("/video/1") == ""


def test_absolute_card_link_keeps_enclosure() -> None:
    page = (
        '<div class="episode-card"><a class="episode-card__link" href="https://smotrim.ru/audio/2516561">'
        '<div class="episode-card__title">Sparks</div></a></div>'
    )

    episodes = _site().extract_episodes(page, SMOTRIM_LISTING)

    assert episodes[0].link == "https://smotrim.ru/audio/2516561"
    assert episodes[0].enclosure == Enclosure.for_audio("2516561")
