"""Tests for callable kind and parameter role mapping."""

import pytest

from dbmeta.database import kinds
from dbmeta.database.kinds import CallableKind, ParameterRole


class TestCallableKind:
    @pytest.mark.parametrize("code,expected", [
        (kinds.PROCEDURE_RESULT_UNKNOWN, CallableKind.UNKNOWN),
        (kinds.PROCEDURE_NO_RESULT, CallableKind.VOID),
        (kinds.PROCEDURE_RETURNS_RESULT, CallableKind.VALUE),
    ])
    def test_from_procedure(self, code, expected):
        assert CallableKind.from_procedure(code) is expected

    @pytest.mark.parametrize("code,expected", [
        (kinds.FUNCTION_RESULT_UNKNOWN, CallableKind.UNKNOWN),
        (kinds.FUNCTION_NO_TABLE, CallableKind.VALUE),
        (kinds.FUNCTION_RETURNS_TABLE, CallableKind.TABLE),
    ])
    def test_from_function(self, code, expected):
        assert CallableKind.from_function(code) is expected

    @pytest.mark.parametrize("code", [3, -1, 99, None])
    def test_unrecognised_codes_are_unknown(self, code):
        assert CallableKind.from_procedure(code) is CallableKind.UNKNOWN
        assert CallableKind.from_function(code) is CallableKind.UNKNOWN


class TestParameterRole:
    @pytest.mark.parametrize("code,expected", [
        (kinds.PROCEDURE_COLUMN_UNKNOWN, ParameterRole.UNKNOWN),
        (kinds.PROCEDURE_COLUMN_IN, ParameterRole.IN),
        (kinds.PROCEDURE_COLUMN_IN_OUT, ParameterRole.IN_OUT),
        (kinds.PROCEDURE_COLUMN_RESULT, ParameterRole.RESULT),
        (kinds.PROCEDURE_COLUMN_OUT, ParameterRole.OUT),
        (kinds.PROCEDURE_COLUMN_RETURN, ParameterRole.RETURN),
    ])
    def test_from_procedure(self, code, expected):
        assert ParameterRole.from_procedure(code) is expected

    @pytest.mark.parametrize("code,expected", [
        (kinds.FUNCTION_COLUMN_UNKNOWN, ParameterRole.UNKNOWN),
        (kinds.FUNCTION_COLUMN_IN, ParameterRole.IN),
        (kinds.FUNCTION_COLUMN_IN_OUT, ParameterRole.IN_OUT),
        (kinds.FUNCTION_COLUMN_OUT, ParameterRole.OUT),
        (kinds.FUNCTION_COLUMN_RETURN, ParameterRole.RETURN),
        (kinds.FUNCTION_COLUMN_RESULT, ParameterRole.RESULT),
    ])
    def test_from_function(self, code, expected):
        assert ParameterRole.from_function(code) is expected

    def test_code_tables_differ(self):
        """Code 3 is a result column for procedures but an OUT parameter for functions."""
        assert ParameterRole.from_procedure(3) is ParameterRole.RESULT
        assert ParameterRole.from_function(3) is ParameterRole.OUT

    @pytest.mark.parametrize("code", [6, -3, 1000, None])
    def test_unrecognised_codes_are_unknown(self, code):
        assert ParameterRole.from_procedure(code) is ParameterRole.UNKNOWN
        assert ParameterRole.from_function(code) is ParameterRole.UNKNOWN
