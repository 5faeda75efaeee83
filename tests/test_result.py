"""Tests for the ApproxResult wrapper."""

import pytest

from pyminimax import ApproxResult, EmptyResultError


class TestPresent:
    def test_holds_value(self):
        r = ApproxResult.present(42)
        assert r.is_present()
        assert not r.is_empty()
        assert r.get() == 42
        assert r.message() == ""

    def test_or_else_raise_returns_value(self):
        r = ApproxResult.present("poly")
        assert r.or_else_raise(lambda: RuntimeError("unused")) == "poly"

    def test_none_rejected(self):
        with pytest.raises(ValueError, match="must not be None"):
            ApproxResult.present(None)

    def test_falsy_content_is_present(self):
        assert ApproxResult.present(0).is_present()

    def test_repr(self):
        assert repr(ApproxResult.present(3)) == "ApproxResult(3)"


class TestFailed:
    def test_is_empty(self):
        r = ApproxResult.failed("overflow in target")
        assert r.is_empty()
        assert not r.is_present()
        assert r.message() == "overflow in target"

    def test_get_raises(self):
        r = ApproxResult.failed("overflow in target")
        with pytest.raises(EmptyResultError, match="overflow in target"):
            r.get()

    def test_empty_result_error_is_lookup_error(self):
        with pytest.raises(LookupError):
            ApproxResult.failed("x").get()

    def test_or_else_raise(self):
        r = ApproxResult.failed("x")
        with pytest.raises(KeyError):
            r.or_else_raise(lambda: KeyError("missing"))

    def test_none_message_becomes_empty(self):
        assert ApproxResult.failed(None).message() == ""

    def test_repr(self):
        assert repr(ApproxResult.failed("bad")) == "ApproxResult(empty, message='bad')"
