"""Tests for slot usage in pyoresult classes."""

import pyoresult as pr


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(pr.Some(42))
    assert _check_slots(pr.NONE)
    assert _check_slots(pr.Err[int, object](42))
    assert _check_slots(pr.Ok[int, object](42))
