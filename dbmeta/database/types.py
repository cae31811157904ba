"""SQL type codes and type classification.

Type codes follow the standard numbering used by database metadata APIs
(``java.sql.Types``), so codes reported by different backends compare equal.
"""

from enum import IntEnum
from typing import FrozenSet


class SqlType(IntEnum):
    """Standard SQL type codes."""
    BIT = -7
    TINYINT = -6
    SMALLINT = 5
    INTEGER = 4
    BIGINT = -5
    FLOAT = 6
    REAL = 7
    DOUBLE = 8
    NUMERIC = 2
    DECIMAL = 3
    CHAR = 1
    VARCHAR = 12
    LONGVARCHAR = -1
    DATE = 91
    TIME = 92
    TIMESTAMP = 93
    BINARY = -2
    VARBINARY = -3
    LONGVARBINARY = -4
    NULL = 0
    OTHER = 1111
    JAVA_OBJECT = 2000
    DISTINCT = 2001
    STRUCT = 2002
    ARRAY = 2003
    BLOB = 2004
    CLOB = 2005
    REF = 2006
    DATALINK = 70
    BOOLEAN = 16
    ROWID = -8
    NCHAR = -15
    NVARCHAR = -9
    LONGNVARCHAR = -16
    NCLOB = 2011
    SQLXML = 2009
    REF_CURSOR = 2012
    TIME_WITH_TIMEZONE = 2013
    TIMESTAMP_WITH_TIMEZONE = 2014


STRING_TYPES: FrozenSet[int] = frozenset({
    SqlType.CHAR,
    SqlType.CLOB,
    SqlType.LONGNVARCHAR,
    SqlType.LONGVARCHAR,
    SqlType.NCHAR,
    SqlType.NCLOB,
    SqlType.NVARCHAR,
    SqlType.VARCHAR,
})

NUMERIC_TYPES: FrozenSet[int] = frozenset({
    SqlType.BIGINT,
    SqlType.DECIMAL,
    SqlType.DOUBLE,
    SqlType.FLOAT,
    SqlType.INTEGER,
    SqlType.NUMERIC,
    SqlType.REAL,
    SqlType.SMALLINT,
    SqlType.TINYINT,
})


def is_string_type(type_code: int) -> bool:
    """Return True if the SQL type code denotes a character type."""
    return type_code in STRING_TYPES


def is_numeric_type(type_code: int) -> bool:
    """Return True if the SQL type code denotes a numeric type."""
    return type_code in NUMERIC_TYPES


def type_label(type_code: int) -> str:
    """Readable name for a type code, falling back to the number itself."""
    try:
        return SqlType(type_code).name
    except ValueError:
        return str(type_code)
