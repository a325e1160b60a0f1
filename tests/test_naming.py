import re

import pytest

from structor.domain.naming import FALLBACK_NAME, letter_suffix, sanitize_name, uniquify


def test_sanitize_name_keeps_letters_only() -> None:
    assert sanitize_name("Ele9gant_Floral!!") == "ElegantFloral"


def test_sanitize_name_falls_back_when_empty() -> None:
    assert sanitize_name("1234") == "Untitled"
    assert sanitize_name("") == FALLBACK_NAME
    assert sanitize_name(None) == FALLBACK_NAME


def test_sanitize_name_drops_non_ascii_letters() -> None:
    assert sanitize_name("Café Noir Ω") == "CafNoir"


@pytest.mark.parametrize(
    ("position", "expected"),
    [(0, "a"), (1, "b"), (25, "z"), (26, "aa"), (27, "ab"), (51, "az"), (52, "ba"), (701, "zz"), (702, "aaa")],
)
def test_letter_suffix_is_bijective_base_26(position: int, expected: str) -> None:
    assert letter_suffix(position) == expected


def test_letter_suffix_rejects_negative_positions() -> None:
    with pytest.raises(ValueError):
        letter_suffix(-1)


def test_uniquify_returns_base_when_free() -> None:
    used: set[str] = set()
    assert uniquify("Foo", used) == "Foo"
    assert used == {"Foo"}


def test_uniquify_appends_first_free_suffix() -> None:
    used = {"Foo"}
    assert uniquify("Foo", used) == "Fooa"
    assert used == {"Foo", "Fooa"}


def test_uniquify_rolls_over_to_two_letter_suffix() -> None:
    used = {"Foo"} | {f"Foo{chr(code)}" for code in range(ord("a"), ord("z") + 1)}
    assert uniquify("Foo", used) == "Fooaa"


def test_uniquify_skips_taken_suffixes_in_order() -> None:
    used = {"Foo", "Fooa", "Foob"}
    assert uniquify("Foo", used) == "Fooc"


def test_uniquify_sequence_stays_distinct_and_letters_only() -> None:
    used: set[str] = set()
    names = [uniquify(sanitize_name(raw), used) for raw in ["Wave", "wave!", "Wave", "9", "", "Wave"]]
    assert names == ["Wave", "wave", "Wavea", "Untitled", "Untitleda", "Waveb"]
    assert len(set(names)) == len(names)
    assert all(re.fullmatch(r"[A-Za-z]+", name) for name in names)
