# tests/test_category_index.py

from quotebox.config import ALL_CATEGORIES
from quotebox.domain.models import Quote
from quotebox.services.category_index import CategoryIndex
from quotebox.storage.kv import DurableStore


def test_categories_are_distinct_in_first_seen_order():
    quotes = [
        Quote("a", "Life"),
        Quote("b", "Humor"),
        Quote("c", "Life"),
        Quote("d", "Art"),
        Quote("e", "Humor"),
    ]
    assert CategoryIndex.categories(quotes) == ["Life", "Humor", "Art"]


def test_categories_of_empty_collection():
    assert CategoryIndex.categories([]) == []


def test_options_start_with_all_sentinel(durable):
    index = CategoryIndex(durable)
    assert index.options([Quote("a", "Life")]) == [ALL_CATEGORIES, "Life"]


def test_filter_defaults_to_all(durable):
    assert CategoryIndex(durable).selected_filter() == ALL_CATEGORIES


def test_filter_persists_across_instances(durable, db_path):
    CategoryIndex(durable).set_filter("Life")
    assert CategoryIndex(DurableStore(db_path)).selected_filter() == "Life"


def test_empty_filter_resets_to_all(durable):
    index = CategoryIndex(durable)
    index.set_filter("Life")
    index.set_filter("")
    assert index.selected_filter() == ALL_CATEGORIES
