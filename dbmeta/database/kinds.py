"""Callable and parameter kinds, derived from driver metadata codes."""

from enum import Enum
from typing import Optional

# Return shape codes reported in PROCEDURE_TYPE / FUNCTION_TYPE
PROCEDURE_RESULT_UNKNOWN = 0
PROCEDURE_NO_RESULT = 1
PROCEDURE_RETURNS_RESULT = 2

FUNCTION_RESULT_UNKNOWN = 0
FUNCTION_NO_TABLE = 1
FUNCTION_RETURNS_TABLE = 2

# Parameter codes reported in COLUMN_TYPE of procedure columns
PROCEDURE_COLUMN_UNKNOWN = 0
PROCEDURE_COLUMN_IN = 1
PROCEDURE_COLUMN_IN_OUT = 2
PROCEDURE_COLUMN_RESULT = 3
PROCEDURE_COLUMN_OUT = 4
PROCEDURE_COLUMN_RETURN = 5

# Parameter codes reported in COLUMN_TYPE of function columns
FUNCTION_COLUMN_UNKNOWN = 0
FUNCTION_COLUMN_IN = 1
FUNCTION_COLUMN_IN_OUT = 2
FUNCTION_COLUMN_OUT = 3
FUNCTION_COLUMN_RETURN = 4
FUNCTION_COLUMN_RESULT = 5

# NULLABLE codes
COLUMN_NO_NULLS = 0
COLUMN_NULLABLE = 1
COLUMN_NULLABLE_UNKNOWN = 2


class CallableKind(str, Enum):
    """Return shape of a stored function or procedure."""
    UNKNOWN = "unknown"
    VOID = "void"
    VALUE = "value"
    TABLE = "table"

    @classmethod
    def from_procedure(cls, code: Optional[int]) -> "CallableKind":
        """Map a PROCEDURE_TYPE code; unrecognised codes give UNKNOWN."""
        return _PROCEDURE_KINDS.get(code, cls.UNKNOWN)

    @classmethod
    def from_function(cls, code: Optional[int]) -> "CallableKind":
        """Map a FUNCTION_TYPE code; unrecognised codes give UNKNOWN."""
        return _FUNCTION_KINDS.get(code, cls.UNKNOWN)


class ParameterRole(str, Enum):
    """Direction or kind of a callable parameter."""
    UNKNOWN = "unknown"
    IN = "in"
    IN_OUT = "in_out"
    OUT = "out"
    RETURN = "return"
    RESULT = "result"

    @classmethod
    def from_procedure(cls, code: Optional[int]) -> "ParameterRole":
        """Map a procedure COLUMN_TYPE code; unrecognised codes give UNKNOWN."""
        return _PROCEDURE_ROLES.get(code, cls.UNKNOWN)

    @classmethod
    def from_function(cls, code: Optional[int]) -> "ParameterRole":
        """Map a function COLUMN_TYPE code; unrecognised codes give UNKNOWN."""
        return _FUNCTION_ROLES.get(code, cls.UNKNOWN)


_PROCEDURE_KINDS = {
    PROCEDURE_RESULT_UNKNOWN: CallableKind.UNKNOWN,
    PROCEDURE_NO_RESULT: CallableKind.VOID,
    PROCEDURE_RETURNS_RESULT: CallableKind.VALUE,
}

_FUNCTION_KINDS = {
    FUNCTION_RESULT_UNKNOWN: CallableKind.UNKNOWN,
    FUNCTION_NO_TABLE: CallableKind.VALUE,
    FUNCTION_RETURNS_TABLE: CallableKind.TABLE,
}

_PROCEDURE_ROLES = {
    PROCEDURE_COLUMN_UNKNOWN: ParameterRole.UNKNOWN,
    PROCEDURE_COLUMN_IN: ParameterRole.IN,
    PROCEDURE_COLUMN_IN_OUT: ParameterRole.IN_OUT,
    PROCEDURE_COLUMN_RESULT: ParameterRole.RESULT,
    PROCEDURE_COLUMN_OUT: ParameterRole.OUT,
    PROCEDURE_COLUMN_RETURN: ParameterRole.RETURN,
}

_FUNCTION_ROLES = {
    FUNCTION_COLUMN_UNKNOWN: ParameterRole.UNKNOWN,
    FUNCTION_COLUMN_IN: ParameterRole.IN,
    FUNCTION_COLUMN_IN_OUT: ParameterRole.IN_OUT,
    FUNCTION_COLUMN_OUT: ParameterRole.OUT,
    FUNCTION_COLUMN_RETURN: ParameterRole.RETURN,
    FUNCTION_COLUMN_RESULT: ParameterRole.RESULT,
}
