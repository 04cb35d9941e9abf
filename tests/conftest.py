"""Pytest configuration and fixtures."""

import logging
import os
from pathlib import Path

import pytest

from arscript.config import ArScriptSettings, reset_settings, set_settings

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import clean_runner, cli_invoke  # noqa: F401

SAMPLE_SCRIPT = """\
بسم الله الرحمن الرحيم

مشهد 1 ليل-داخلي المستشفى – غرفة العمليات
يدخل الطبيب مسرعاً ويتجه نحو السرير.

أحمد:
(بصوت منخفض)
هل سينجو؟

الطبيب:
لا أعرف بعد.

قطع إلى

م. 2 نهار-خارجي
شارع المدينة المزدحم
تمر السيارات بسرعة.
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers",
        "unit: mark test as unit test",
    )
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test",
    )
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow running",
    )


@pytest.fixture(autouse=True)
def isolated_test_environment(monkeypatch):
    """Run every test with default settings and no ARSCRIPT_ environment."""
    for key in list(os.environ):
        if key.startswith("ARSCRIPT_"):
            monkeypatch.delenv(key, raising=False)

    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers.copy()

    reset_settings()
    set_settings(ArScriptSettings(_env_file=None))

    yield

    reset_settings()

    # Commands that reconfigure logging must not leak handlers into later tests
    for handler in root_logger.handlers.copy():
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in original_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


@pytest.fixture
def sample_script() -> str:
    """A short script touching every element kind."""
    return SAMPLE_SCRIPT


@pytest.fixture
def sample_script_file(tmp_path: Path) -> Path:
    """The sample script written to a temporary .txt file."""
    path = tmp_path / "script.txt"
    path.write_text(SAMPLE_SCRIPT, encoding="utf-8")
    return path
