"""Tests for the clothing vocabulary helpers."""

from __future__ import annotations

from itertools import combinations

import pytest

from models.vocabulary import (
    ACCESSORIES,
    SLOT_VOCABULARIES,
    canonical_label,
    normalize_token,
    slot_for_token,
    tokenize,
)


@pytest.mark.parametrize(
    ("token", "label"),
    [
        ("tee", "T-shirt"),
        ("t-shirt", "T-shirt"),
        ("kurti", "Kurta/Kurti"),
        ("pant", "Trousers"),
        ("sari", "Saree"),
        ("saree", "Saree"),
        ("sneakers", "Footwear"),
        ("slipper", "Footwear"),
        ("backpack", "Bag/Backpack"),
        ("hat", "Cap/Hat"),
        ("sunglasses", "Glasses"),
        ("cardigan", "Cardigan"),
        ("coat", "Coat"),
    ],
)
def test_canonical_labels(token: str, label: str) -> None:
    assert canonical_label(token) == label


def test_unmapped_tokens_pass_through() -> None:
    assert canonical_label("hoodie") == "hoodie"
    assert canonical_label("overcoat") == "overcoat"
    assert canonical_label("blouse") == "blouse"


def test_vocabularies_do_not_overlap() -> None:
    vocabularies = [set(words) for words in SLOT_VOCABULARIES.values()] + [set(ACCESSORIES)]
    for left, right in combinations(vocabularies, 2):
        assert not left & right


def test_slot_lookup() -> None:
    assert slot_for_token("tank top") == "top"
    assert slot_for_token("dhoti") == "bottom"
    assert slot_for_token("anarkali") == "dress"
    assert slot_for_token("watch") is None


def test_tokenize_splits_lowercases_and_dedupes() -> None:
    assert tokenize("My__Blue-Jeans.JPG?v=2&jeans") == ["my", "blue", "jeans", "jpg", "v", "2"]
    assert tokenize("") == []


def test_normalize_token() -> None:
    assert normalize_token("T-Shirt ") == "t shirt"
    assert normalize_token("Tank Top") == "tank top"
