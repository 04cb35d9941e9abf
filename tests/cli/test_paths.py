"""Tests for output path checks."""

import pytest

from arscript.cli.utils.paths import check_output_path
from arscript.exceptions import ValidationError


def test_distinct_output_accepted(tmp_path):
    script = tmp_path / "script.txt"
    output = tmp_path / "script.html"
    assert check_output_path(script, output) == output


def test_same_file_rejected(tmp_path):
    script = tmp_path / "script.txt"
    with pytest.raises(ValidationError) as exc_info:
        check_output_path(script, tmp_path / "." / "script.txt")
    assert exc_info.value.hint == "Choose a different path with --output"


def test_directory_rejected(tmp_path):
    with pytest.raises(ValidationError, match="directory"):
        check_output_path(tmp_path / "script.txt", tmp_path)
