"""Tests for the shared configuration."""

from collections.abc import Iterator

import pytest

import pyoresult as pr


@pytest.fixture
def narrow_config() -> Iterator[pr.Config]:
    config = pr.get_config()
    previous = config.max_payload_width
    config.max_payload_width = 10
    yield config
    config.max_payload_width = previous


def test_get_config_is_shared() -> None:
    """Test get_config always returns the same instance."""
    assert pr.get_config() is pr.get_config()


def test_default_payload_repr() -> None:
    """Test short payloads are rendered with their repr."""
    assert pr.get_config().payload_repr("error") == "'error'"
    assert pr.get_config().payload_repr({"a": 1}) == "{'a': 1}"


def test_payload_repr_is_truncated(narrow_config: pr.Config) -> None:
    """Test long payloads are cut to the configured width."""
    text = narrow_config.payload_repr(list(range(100)))
    assert len(text) == 10
    assert text.endswith("...")


def test_unwrap_message_uses_config(narrow_config: pr.Config) -> None:
    """Test the unwrap failure message respects the configured width, not the payload."""
    payload = "x" * 50
    with pytest.raises(pr.ResultUnwrapError) as exc_info:
        pr.Err(payload).unwrap()
    assert str(exc_info.value) == "called `unwrap` on an `Err` value: 'xxxxxx..."
    assert exc_info.value.payload == payload


def test_long_string_payload_keeps_its_repr() -> None:
    """Test a long string with spaces is rendered as one repr, not split fragments."""
    text = pr.get_config().payload_repr("user not found " * 10)
    assert text.startswith("'user not found user not found")
    assert "(" not in text
    assert len(text) == 80


@pytest.mark.parametrize("width", [0, 1, 2, 3, 4])
def test_payload_repr_never_exceeds_tiny_width(narrow_config: pr.Config, width: int) -> None:
    """Test the truncated repr respects widths smaller than the ellipsis."""
    narrow_config.max_payload_width = width
    assert len(narrow_config.payload_repr("abcdef")) <= width


def test_payload_repr_depth_is_configurable() -> None:
    """Test nesting past the configured depth is elided."""
    config = pr.get_config()
    previous = config.max_payload_depth
    config.max_payload_depth = 1
    try:
        assert config.payload_repr([[[1]]]) == "[[...]]"
    finally:
        config.max_payload_depth = previous
