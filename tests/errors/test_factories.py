"""Tests for the error factories new, wrap and wrap_always."""

from __future__ import annotations

import inspect
import logging

import pytest

import seer
from seer.config import SeerSettings
from seer.errors import SeerError, new, wrap, wrap_always, wrap_error

MODULE = __name__.rsplit(".", 1)[-1]


class TestNew:
    """Tests for new()."""

    def test_operation_and_message(self) -> None:
        """Test that the operation and message are stored as given."""
        error = new("validateInput", "even number: 4")

        assert error.operation == "validateInput"
        assert error.message == "even number: 4"
        assert error.unwrap() == (None, False)

    def test_default_code(self) -> None:
        """Test that the default code is used when none is given."""
        seer.set_default_code(400)

        assert new("validate", "bad input").code == 400

    def test_explicit_code(self) -> None:
        """Test that a valid code is stored."""
        assert new("validate", "bad input", 422).code == 422

    def test_invalid_code_uses_default(self, caplog) -> None:
        """Test that an out-of-range code is logged and replaced."""
        with caplog.at_level(logging.WARNING, logger="seer"):
            error = new("x", "y", 9999)

        assert error.code == seer.get_settings().default_code
        assert error.code != 9999
        assert "9999" in caplog.text

    def test_captures_caller(self) -> None:
        """Test that provenance names the caller of new()."""
        expected_line = inspect.currentframe().f_lineno + 1
        error = new("op", "msg")

        assert error.provenance.caller == f"{MODULE}.TestNew.test_captures_caller"
        assert error.provenance.file == "test_factories.py"
        assert error.provenance.line == expected_line

    def test_no_provenance_when_disabled(self) -> None:
        """Test that nothing is captured while collection is off."""
        seer.set_collect_provenance(False)

        error = new("op", "msg")

        assert error.provenance is None
        assert error.detailed_string() == "op: msg"

    def test_chained_with_code(self) -> None:
        """Test builder chaining on a freshly created error."""
        assert new("op", "msg").with_code(404).code == 404


class TestWrap:
    """Tests for wrap() and wrap_error()."""

    def test_default_message(self) -> None:
        """Test that the default message is used when none is given."""
        error = wrap("loadConfig", OSError("no such file"))

        assert error.message == seer.get_settings().default_message

    def test_custom_default_message(self) -> None:
        """Test that a changed default message is picked up."""
        seer.set_default_message("something broke")

        assert wrap("op", ValueError("bad")).message == "something broke"

    def test_custom_message_overrides_default(self) -> None:
        """Test that an explicit message wins."""
        error = wrap("op", ValueError("bad"), "could not parse")

        assert error.message == "could not parse"

    def test_unwrap_seer_error(self) -> None:
        """Test unwrapping a wrapped seer error."""
        inner = new("read", "cannot read")

        assert wrap("load", inner).unwrap() == (inner, True)

    def test_unwrap_plain_error(self) -> None:
        """Test unwrapping a wrapped plain error."""
        original = OSError("disk full")

        assert wrap("load", original).unwrap() == (original, False)

    def test_load_config_without_provenance(self) -> None:
        """Test the short diagnostic and JSON form with collection off."""
        seer.set_collect_provenance(False)

        error = wrap("loadConfig", OSError("no such file"))

        assert error.detailed_string() == "loadConfig: an error occurred"
        data = error.to_dict()
        assert "caller" not in data
        assert "file" not in data
        assert "line" not in data
        assert data["previous_error"] == "no such file"

    def test_captures_caller_in_closure(self) -> None:
        """Test that closures report their enclosing function."""

        def load() -> SeerError:
            return wrap("load", ValueError("bad"))

        error = load()

        assert error.provenance.caller == (
            f"{MODULE}.TestWrap.test_captures_caller_in_closure"
        )

    def test_captures_caller_in_lambda(self) -> None:
        """Test that lambdas report their enclosing function."""
        error = (lambda: wrap("load", ValueError("bad")))()

        assert error.provenance.caller == (
            f"{MODULE}.TestWrap.test_captures_caller_in_lambda"
        )

    def test_wrap_error_alias(self) -> None:
        """Test that wrap_error is the same factory as wrap."""
        assert wrap_error is wrap

    def test_detailed_string_with_provenance(self) -> None:
        """Test the full diagnostic produced through the factory."""
        expected_line = inspect.currentframe().f_lineno + 1
        error = wrap("load", ValueError("bad"), "cannot load")

        assert error.detailed_string() == (
            f"test_factories.py:{expected_line} "
            f"({MODULE}.TestWrap.test_detailed_string_with_provenance::load): "
            "cannot load, original_err=bad"
        )


class TestWrapAlways:
    """Tests for wrap_always()."""

    def test_captures_even_when_disabled(self) -> None:
        """Test that provenance is captured regardless of the switch."""
        seer.set_collect_provenance(False)

        expected_line = inspect.currentframe().f_lineno + 1
        error = wrap_always("load", ValueError("bad"))

        assert error.provenance.caller == (
            f"{MODULE}.TestWrapAlways.test_captures_even_when_disabled"
        )
        assert error.provenance.line == expected_line
        assert error.detailed_string().startswith(f"test_factories.py:{expected_line} (")

    def test_json_still_follows_switch(self) -> None:
        """Test that JSON output hides provenance while collection is off."""
        seer.set_collect_provenance(False)

        data = wrap_always("load", ValueError("bad")).to_dict()

        assert set(data) == {"operation", "message", "previous_error"}

    def test_message(self) -> None:
        """Test default and custom messages."""
        assert wrap_always("op", ValueError("bad")).message == "an error occurred"
        assert wrap_always("op", ValueError("bad"), "custom").message == "custom"


class TestExplicitSettings:
    """Tests for passing a settings instance instead of using the global one."""

    def test_settings_are_used(self) -> None:
        """Test that factories read defaults from the given settings."""
        settings = SeerSettings(
            default_message="local default", default_code=503, collect_provenance=False
        )

        error = wrap("op", ValueError("bad"), settings=settings)

        assert error.message == "local default"
        assert error.code == 503
        assert error.provenance is None
        assert error.settings is settings

    def test_global_settings_untouched(self) -> None:
        """Test that a local instance does not change the process defaults."""
        settings = SeerSettings(default_code=503)

        new("op", "msg", settings=settings)

        assert seer.get_settings().default_code == 500

    @pytest.mark.parametrize("factory", [wrap, wrap_always])
    def test_wrap_factories_accept_settings(self, factory) -> None:
        """Test both wrap factories with explicit settings."""
        settings = SeerSettings(default_message="local default")

        assert factory("op", ValueError("bad"), settings=settings).message == (
            "local default"
        )
