from __future__ import annotations

import logging
import pickle

import numpy as np
import pytest

from grect import Rect, settings

NAN = float("nan")


def test_equality_is_exact() -> None:
    assert Rect(1, 2, 3, 4) == Rect(1, 2, 3, 4)
    assert Rect(1, 2, 3, 4) != Rect(1, 2, 3, 4.0000001)
    assert Rect(0.1 + 0.2, 0, 1, 1) != Rect(0.3, 0, 1, 1)


def test_equality_with_other_types() -> None:
    assert Rect(1, 2, 3, 4) != (1.0, 2.0, 3.0, 4.0)
    assert Rect() != None  # noqa: E711


def test_nan_fields_compare_equal_and_hash_alike() -> None:
    first = Rect(NAN, 1, 2, float("nan"))
    second = Rect(float("nan"), 1, 2, NAN)
    assert first == second
    assert hash(first) == hash(second)
    assert first != Rect(0, 1, 2, NAN)


def test_signed_zeros_compare_equal_and_hash_alike() -> None:
    assert Rect(0.0, -0.0, 1, 1) == Rect(-0.0, 0.0, 1, 1)
    assert hash(Rect(0.0, -0.0, 1, 1)) == hash(Rect(-0.0, 0.0, 1, 1))


def test_hash_follows_field_order() -> None:
    assert hash(Rect(1, 2, 3, 4)) == hash(Rect(1, 2, 3, 4))
    assert hash(Rect(1, 2, 3, 4)) != hash(Rect(2, 1, 3, 4))
    assert len({Rect(1, 2, 3, 4), Rect(1, 2, 3, 4), Rect(4, 3, 2, 1)}) == 2


def test_pickle_round_trip() -> None:
    for rect in (Rect(1.5, -2, 3, 4), Rect(), Rect(0, 0, -1, NAN)):
        restored = pickle.loads(pickle.dumps(rect))
        assert restored == rect
        assert restored is not rect


def test_state_carries_version_and_ordered_fields() -> None:
    assert Rect(1, 2, 3, 4).__getstate__() == (Rect.SERIAL_VERSION, (1.0, 2.0, 3.0, 4.0))


def test_unknown_state_version_is_rejected() -> None:
    rect = Rect()
    with pytest.raises(ValueError, match="version 99"):
        rect.__setstate__((99, (1.0, 2.0, 3.0, 4.0)))
    assert rect == Rect()


def test_array_round_trip() -> None:
    rect = Rect(1, 2, 3, 4)
    values = rect.as_array()
    assert isinstance(values, np.ndarray)
    assert values.tolist() == [1.0, 2.0, 3.0, 4.0]
    assert Rect.from_array(values) == rect
    assert Rect.from_array([5, 6, 7, 8]) == Rect(5, 6, 7, 8)


def test_from_array_requires_four_values() -> None:
    with pytest.raises(ValueError):
        Rect.from_array([1, 2, 3])
    with pytest.raises(ValueError):
        Rect.from_array([[1, 2], [3, 4]])


def test_debug_logging_follows_settings(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="grect")
    Rect.from_array([1, 2, 3, 4])
    assert caplog.text == ""

    monkeypatch.setattr(settings, "DEBUG", True)
    pickle.loads(pickle.dumps(Rect(1, 2, 3, 4)))
    assert "Restored rect state" in caplog.text


def test_string_format_is_configurable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "STR_FORMAT", "({x}, {y}) {width} by {height}")
    assert str(Rect(1, 2, 3, 4)) == "(1.0, 2.0) 3.0 by 4.0"
