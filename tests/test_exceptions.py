"""Tests for the exception hierarchy."""

import pytest

from arscript.exceptions import (
    ArScriptError,
    ConfigurationError,
    EmptyResultError,
    MalformedResponseError,
    RemoteClassificationError,
    RemoteNetworkError,
    check_config_keys,
)


class TestArScriptError:
    """Test error formatting."""

    def test_message_only(self):
        error = ArScriptError("Something failed")
        assert str(error) == "Error: Something failed"

    def test_hint_and_details(self):
        error = ArScriptError(
            "Something failed",
            hint="Try again",
            details={"file": "script.txt", "line": 3},
        )
        assert str(error) == (
            "Error: Something failed\n"
            "Hint: Try again\n"
            "Details:\n"
            "  file: script.txt\n"
            "  line: 3"
        )


class TestRemoteErrors:
    """Test remote classification errors."""

    @pytest.mark.parametrize(
        "error_class",
        [RemoteNetworkError, MalformedResponseError, EmptyResultError],
    )
    def test_hierarchy(self, error_class):
        assert issubclass(error_class, RemoteClassificationError)
        assert issubclass(error_class, ArScriptError)

    def test_network_error_details(self):
        cause = ConnectionError("refused")
        error = RemoteNetworkError(
            "Could not connect",
            status_code=503,
            endpoint="http://localhost/v1/chat/completions",
            original_error=cause,
        )
        assert error.status_code == 503
        assert error.details == {
            "endpoint": "http://localhost/v1/chat/completions",
            "status_code": 503,
            "original_error": "ConnectionError: refused",
        }
        assert error.hint is not None

    def test_network_error_without_response(self):
        error = RemoteNetworkError("Timed out")
        assert error.status_code is None
        assert error.details is None or error.details == {}


class TestCheckConfigKeys:
    """Test misspelled configuration keys."""

    @pytest.mark.parametrize(
        ("wrong", "correct"),
        [
            ("api_key", "llm_api_key"),
            ("endpoint", "llm_endpoint"),
            ("model", "llm_model"),
            ("max_cue_words", "character_cue_max_words"),
        ],
    )
    def test_rejects_wrong_key(self, wrong, correct):
        with pytest.raises(ConfigurationError) as exc_info:
            check_config_keys({wrong: "x"})
        assert correct in exc_info.value.hint

    def test_accepts_valid_keys(self):
        check_config_keys({"llm_api_key": "x", "words_per_page": 300})
