"""Unit tests for input validation helpers."""

import pytest

from feedmesh.core.exceptions import ValidationError
from feedmesh.core.services.validation import (
    optional_cursor,
    require_positive_id,
    require_text,
    resolve_limit,
)


@pytest.mark.parametrize("value", [0, -1, "1", 1.0, True, None])
def test_require_positive_id_rejects_non_positive_ints(value):
    with pytest.raises(ValidationError) as exc:
        require_positive_id("postId", value)
    assert exc.value.field == "postId"
    assert exc.value.details == {"field": "postId"}


def test_require_positive_id_accepts_positive_int():
    assert require_positive_id("postId", 7) == 7


def test_optional_cursor():
    assert optional_cursor(None) is None
    assert optional_cursor(5) == 5
    with pytest.raises(ValidationError) as exc:
        optional_cursor(0)
    assert exc.value.field == "cursor"


def test_require_text_strips_and_bounds():
    assert require_text("content", "  hi  ", 500) == "hi"
    assert require_text("content", "x" * 500, 500) == "x" * 500

    for bad in ("", "   ", None, "x" * 501):
        with pytest.raises(ValidationError) as exc:
            require_text("content", bad, 500)
        assert exc.value.field == "content"


def test_resolve_limit():
    assert resolve_limit(None, 20, 50) == 20
    assert resolve_limit(1, 20, 50) == 1
    assert resolve_limit(50, 20, 50) == 50

    for bad in (0, 51, -3, True):
        with pytest.raises(ValidationError) as exc:
            resolve_limit(bad, 20, 50)
        assert exc.value.field == "limit"
