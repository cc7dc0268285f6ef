# tests/test_presenter.py

import json

from quotebox.config import ALL_CATEGORIES, LAST_QUOTE_KEY, NO_QUOTE_MESSAGE
from quotebox.domain.models import SEED_QUOTES, Quote


def test_pick_random_from_empty_collection(presenter):
    assert presenter.pick_random([]) is None


def test_pick_random_returns_member(presenter):
    for _ in range(20):
        assert presenter.pick_random(SEED_QUOTES) in SEED_QUOTES


def test_pick_random_in_category_only_matches(presenter):
    quotes = SEED_QUOTES + [Quote("Stay hungry.", "Motivation")]
    for _ in range(20):
        assert presenter.pick_random_in_category(quotes, "Motivation").category == "Motivation"


def test_pick_random_in_category_with_no_match_is_none(presenter):
    assert presenter.pick_random_in_category(SEED_QUOTES, "Humor") is None


def test_all_sentinel_means_unrestricted(presenter):
    assert presenter.pick_random_in_category(SEED_QUOTES, ALL_CATEGORIES) in SEED_QUOTES


def test_render_updates_surface_and_session(presenter, surface, session_store):
    quote = Quote("Get busy living or get busy dying.", "Motivation")

    presenter.render(quote)

    assert surface.shown == [('"Get busy living or get busy dying."', "Motivation")]
    assert json.loads(session_store.get(LAST_QUOTE_KEY)) == quote.to_dict()
    assert presenter.last_viewed() == quote


def test_show_random_with_no_match_shows_empty_notice(presenter, surface, session_store):
    assert presenter.show_random(SEED_QUOTES, "Humor") is None
    assert surface.empty_messages == [NO_QUOTE_MESSAGE]
    assert surface.shown == []
    assert session_store.get(LAST_QUOTE_KEY) is None


def test_last_viewed_ignores_malformed_value(presenter, session_store):
    session_store.set(LAST_QUOTE_KEY, "not json")
    assert presenter.last_viewed() is None
    session_store.set(LAST_QUOTE_KEY, json.dumps({"text": "only text"}))
    assert presenter.last_viewed() is None
