"""``--set`` parsing, value coercion and merging over a loaded Config."""

from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st
from lib_layered_config import Config

from message_producer.adapters.config import Override, coerce_value, merge_overrides, parse_override

segments = st.text(alphabet=string.ascii_lowercase + "_", min_size=1, max_size=12)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("lib_log_rich.console_level=DEBUG", Override(("lib_log_rich", "console_level"), "DEBUG")),
        ("a.b.c=3", Override(("a", "b", "c"), 3)),
        ("a.b=", Override(("a", "b"), "")),
        ("a.b=x=y", Override(("a", "b"), "x=y")),
        ('a.b=["x", 1]', Override(("a", "b"), ["x", 1])),
    ],
)
def test_parse_override(raw: str, expected: Override) -> None:
    assert parse_override(raw) == expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "reason"),
    [
        ("a.b", "'=' is missing"),
        ("key=1", "key needs a section"),
        ("a..b=1", "empty segment"),
        (".a=1", "empty segment"),
    ],
)
def test_parse_override_rejects(raw: str, reason: str) -> None:
    with pytest.raises(ValueError, match=reason):
        parse_override(raw)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("text", "expected"),
    [("true", True), ("1.5", 1.5), ("null", None), ('{"k": 1}', {"k": 1}), ("WARNING", "WARNING"), ("'q'", "'q'")],
)
def test_coerce_value(text: str, expected: object) -> None:
    assert coerce_value(text) == expected


@pytest.mark.os_agnostic
def test_merge_keeps_untouched_keys_and_the_original() -> None:
    base = Config({"s": {"a": 1, "b": 2}, "t": {"c": 3}}, {})

    merged = merge_overrides(base, ["s.a=10"])

    assert merged["s"] == {"a": 10, "b": 2}
    assert merged["t"] == {"c": 3}
    assert base["s"]["a"] == 1


@pytest.mark.os_agnostic
def test_merge_later_assignment_wins() -> None:
    merged = merge_overrides(Config({}, {}), ["s.k=1", "s.k=2"])

    assert merged["s"]["k"] == 2


@pytest.mark.os_agnostic
def test_merge_refuses_to_nest_below_a_scalar() -> None:
    with pytest.raises(ValueError, match="made a scalar"):
        merge_overrides(Config({}, {}), ["s.k=1", "s.k.x=2"])


@pytest.mark.os_agnostic
@given(section=segments, key=segments, value=st.integers())
def test_integers_survive_the_round_trip(section: str, key: str, value: int) -> None:
    merged = merge_overrides(Config({}, {}), [f"{section}.{key}={value}"])

    assert merged[section][key] == value


@pytest.mark.os_agnostic
@given(text=st.text(alphabet=string.ascii_letters, min_size=1))
def test_bare_words_stay_text(text: str) -> None:
    if text in {"true", "false", "null"}:
        return
    assert coerce_value(text) == text
