"""Testes das falhas classificadas e do preview de corpo."""

from __future__ import annotations

import pytest

from api.connectors.timeapi.errors import (
    BODY_PREVIEW_LIMIT,
    ELLIPSIS_MARKER,
    EMPTY_BODY_MARKER,
    EmptyBodyFailure,
    FailureKind,
    HttpStatusFailure,
    JsonParseFailure,
    NetworkFailure,
    TimeApiError,
    ValidationFailure,
    build_body_preview,
)


class TestBodyPreview:
    def test_body_of_501_chars_is_truncated(self) -> None:
        body = "x" * 501

        preview = build_body_preview(body)

        assert preview == "x" * 500 + ELLIPSIS_MARKER

    def test_body_of_500_chars_is_unchanged(self) -> None:
        body = "y" * 500

        assert build_body_preview(body) == body

    def test_empty_body_uses_marker(self) -> None:
        assert build_body_preview("") == EMPTY_BODY_MARKER

    def test_limit_constant(self) -> None:
        assert BODY_PREVIEW_LIMIT == 500


@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (NetworkFailure("current-time", "connection refused"), FailureKind.NETWORK),
        (HttpStatusFailure("current-time", 503, "down"), FailureKind.HTTP_STATUS),
        (EmptyBodyFailure("current-time"), FailureKind.EMPTY_BODY),
        (JsonParseFailure("current-time", "Expecting value", "nope"), FailureKind.JSON_PARSE),
        (ValidationFailure("current-time", []), FailureKind.VALIDATION),
    ],
)
def test_every_failure_carries_kind_and_label(error: TimeApiError, kind: FailureKind) -> None:
    assert isinstance(error, TimeApiError)
    assert error.kind is kind
    assert error.label == "current-time"
    assert str(error).startswith("[current-time] ")
    assert error.as_dict()["kind"] == kind.value


def test_http_status_failure_exposes_status_and_preview() -> None:
    error = HttpStatusFailure("day-of-year", 404, "not found")

    assert error.status_code == 404
    assert error.body_preview == "not found"
    assert "responded with 404: not found" in str(error)
    assert error.as_dict()["statusCode"] == 404


def test_empty_body_and_parse_failure_messages_differ() -> None:
    empty = EmptyBodyFailure("x")
    invalid = JsonParseFailure("x", "Expecting value", "<html>")

    assert str(empty) != str(invalid)
    assert "empty response body" in str(empty)
    assert "failed to parse" in str(invalid)
    assert "<html>" in str(invalid)


def test_validation_failure_lists_fields() -> None:
    error = ValidationFailure(
        "current-time-by-coordinate",
        [{"loc": ("latitude",), "msg": "too big", "type": "less_than_equal"}],
    )

    assert "latitude" in str(error)
    assert error.as_dict()["errors"][0]["type"] == "less_than_equal"
