"""Unit tests for taskrecur.utils.exit_codes."""

from __future__ import annotations

import pytest

from taskrecur.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    SUCCESS,
    get_exit_code_description,
    get_exit_code_name,
)

ALL_CODES = [SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_NOT_FOUND]


class TestExitCodeConstants:
    def test_values(self):
        assert SUCCESS == 0
        assert ERROR_GENERAL == 1
        assert ERROR_INVALID_ARGS == 2
        assert ERROR_NOT_FOUND == 5

    def test_all_constants_are_unique(self):
        assert len(ALL_CODES) == len(set(ALL_CODES))


class TestGetExitCodeName:
    @pytest.mark.parametrize(
        "code, name",
        [
            (SUCCESS, "SUCCESS"),
            (ERROR_GENERAL, "ERROR_GENERAL"),
            (ERROR_INVALID_ARGS, "ERROR_INVALID_ARGS"),
            (ERROR_NOT_FOUND, "ERROR_NOT_FOUND"),
        ],
    )
    def test_known_codes(self, code, name):
        assert get_exit_code_name(code) == name

    def test_unknown_code(self):
        assert get_exit_code_name(42) == "UNKNOWN(42)"


class TestGetExitCodeDescription:
    def test_known_codes_have_descriptions(self):
        for code in ALL_CODES:
            assert get_exit_code_description(code) != "Unknown error"

    def test_unknown_code(self):
        assert get_exit_code_description(-1) == "Unknown error"
