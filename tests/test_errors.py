"""Unit tests for the error classifier."""

import pytest

from hello_app.errors import classify
from hello_app.exceptions import (
    BadClientData,
    InternalError,
    RequestError,
    Timeout,
    ValidationError,
)
from hello_app.responses import render


@pytest.mark.parametrize(
    ("variant", "status_code", "text"),
    [
        (InternalError(), 500, "internal error"),
        (BadClientData(), 400, "bad request"),
        (Timeout(), 504, "timeout"),
        (ValidationError(field="email"), 400, "Validation error on field: email"),
    ],
)
def test_classify_maps_every_variant(variant: object, status_code: int, text: str) -> None:
    reply = classify(variant)  # type: ignore[arg-type]
    assert reply.status_code == status_code
    assert reply.content_type == "text/html; charset=utf-8"
    assert reply.text == text


def test_validation_error_names_the_field() -> None:
    reply = classify(ValidationError(field="name"))
    assert reply.status_code == 400
    assert reply.text == "Validation error on field: name"


def test_classify_is_deterministic() -> None:
    first = render(classify(ValidationError(field="name")))
    second = render(classify(ValidationError(field="name")))
    assert first.status_code == second.status_code
    assert first.body == second.body
    assert first.headers["content-type"] == second.headers["content-type"]


def test_equal_variants_compare_equal() -> None:
    assert ValidationError(field="name") == ValidationError(field="name")
    assert classify(Timeout()) == classify(Timeout())


def test_request_error_carries_display_text() -> None:
    exc = RequestError(ValidationError(field="age"))
    assert exc.variant == ValidationError(field="age")
    assert exc.message == "Validation error on field: age"
    assert str(exc) == "Validation error on field: age"


def test_classify_rejects_unknown_variant() -> None:
    with pytest.raises(AssertionError):
        classify("not a variant")  # type: ignore[arg-type]
