"""
Unit tests for the validation handlers.

Run with: pytest tests/test_validation.py -v
"""

import pytest

from backstage.domain.exceptions import DomainError
from backstage.domain.validation.error import Error
from backstage.domain.validation.fail_fast import FailFast
from backstage.domain.validation.notification import Notification
from backstage.domain.validation.result import ValidationResult


def _raise(exc):
    raise exc


class TestNotification:
    """Accumulate-all handler."""

    def test_starts_empty(self):
        notification = Notification()

        assert notification.errors == []
        assert not notification.has_error()
        assert notification.first_error() is None

    def test_create_with_error(self):
        notification = Notification.create(Error("boom"))

        assert notification.errors == [Error("boom")]

    def test_append_keeps_insertion_order(self):
        notification = Notification()

        notification.append(Error("first")).append(Error("second"))

        assert [e.message for e in notification.errors] == ["first", "second"]
        assert notification.first_error() == Error("first")

    def test_append_handler_merges_its_errors(self):
        other = Notification().append(Error("a")).append(Error("b"))
        notification = Notification.create(Error("x"))

        notification.append(other)

        assert [e.message for e in notification.errors] == ["x", "a", "b"]

    def test_validate_returns_value_on_success(self):
        notification = Notification()

        assert notification.validate(lambda: 42) == 42
        assert not notification.has_error()

    def test_validate_records_failure_and_returns_none(self):
        notification = Notification()

        result = notification.validate(lambda: _raise(RuntimeError("bad thing")))

        assert result is None
        assert notification.errors == [Error("bad thing")]

    def test_validate_merges_domain_error_list(self):
        notification = Notification()
        error = DomainError.with_errors([Error("one"), Error("two")])

        notification.validate(lambda: _raise(error))

        assert [e.message for e in notification.errors] == ["one", "two"]

    def test_continues_after_failures(self):
        notification = Notification()

        notification.validate(lambda: _raise(ValueError("a")))
        notification.validate(lambda: _raise(ValueError("b")))
        notification.append(Error("c"))

        assert len(notification.errors) == 3

    def test_errors_is_a_copy(self):
        notification = Notification.create(Error("x"))

        notification.errors.append(Error("y"))

        assert notification.errors == [Error("x")]


class TestFailFast:
    """Raise-on-first handler."""

    def test_append_raises_with_single_error(self):
        with pytest.raises(DomainError) as exc_info:
            FailFast().append(Error("stop"))

        assert exc_info.value.message == "stop"
        assert exc_info.value.errors == [Error("stop")]

    def test_append_handler_raises_all_its_errors(self):
        other = Notification().append(Error("a")).append(Error("b"))

        with pytest.raises(DomainError) as exc_info:
            FailFast().append(other)

        assert exc_info.value.errors == [Error("a"), Error("b")]

    def test_validate_wraps_failure(self):
        cause = RuntimeError("kaput")

        with pytest.raises(DomainError) as exc_info:
            FailFast().validate(lambda: _raise(cause))

        assert exc_info.value.errors == [Error("kaput")]
        assert exc_info.value.__cause__ is cause

    def test_validate_returns_value(self):
        assert FailFast().validate(lambda: "ok") == "ok"

    def test_never_holds_errors(self):
        handler = FailFast()

        assert handler.errors == []
        assert not handler.has_error()
        assert handler.first_error() is None


class TestValidationResult:
    def test_from_clean_handler_is_valid(self):
        result = ValidationResult.from_handler("value", Notification())

        assert result.is_valid
        assert result.unwrap() == "value"

    def test_from_failed_handler_keeps_errors(self):
        handler = Notification().append(Error("a")).append(Error("b"))

        result = ValidationResult.from_handler(None, handler)

        assert not result.is_valid
        assert result.value is None
        assert result.errors == (Error("a"), Error("b"))

    def test_unwrap_raises_with_every_error(self):
        result = ValidationResult.failed([Error("a"), Error("b")])

        with pytest.raises(DomainError) as exc_info:
            result.unwrap()

        assert exc_info.value.errors == [Error("a"), Error("b")]
