"""Backend-specific mapping from type labels to SQL type codes.

Each backend reports column types as free-form labels. A TypeMapper turns
such a label into a standard SQL type code and normalizes the label itself
(for example stripping array markers), so the descriptors never deal with
vendor quirks.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

from .types import SqlType

_PARAMS_RE = re.compile(r"\(\s*(\d+)\s*(?:,\s*(\d+)\s*)?\)")


class TypeMapper(ABC):
    """Abstract base class for database type mapping."""

    @abstractmethod
    def to_sql_type(self, type_name: Optional[str]) -> int:
        """Convert a backend type label to an SQL type code."""
        pass

    def normalize_type_name(self, type_name: Optional[str]) -> str:
        """Normalize a backend type label; by default only strips parameters."""
        return self.base_type(type_name)

    @staticmethod
    def base_type(type_name: Optional[str]) -> str:
        """Upper-case label without its ``(...)`` parameters."""
        if not type_name:
            return ""
        return type_name.split("(", 1)[0].strip().upper()

    @staticmethod
    def parse_size(type_name: Optional[str]) -> Tuple[int, int]:
        """Extract ``(size, digits)`` from a label like ``DECIMAL(10,2)``.

        Missing values are returned as 0.
        """
        if not type_name:
            return 0, 0
        match = _PARAMS_RE.search(type_name)
        if not match:
            return 0, 0
        size = int(match.group(1))
        digits = int(match.group(2)) if match.group(2) else 0
        return size, digits


class SQLiteTypeMapper(TypeMapper):
    """Type mapper for SQLite declared column types.

    Well-known names map directly; anything else follows SQLite's type
    affinity rules.
    """

    NAMED_TYPES: Dict[str, int] = {
        "INT": SqlType.INTEGER,
        "INTEGER": SqlType.INTEGER,
        "MEDIUMINT": SqlType.INTEGER,
        "TINYINT": SqlType.TINYINT,
        "SMALLINT": SqlType.SMALLINT,
        "INT2": SqlType.SMALLINT,
        "BIGINT": SqlType.BIGINT,
        "INT8": SqlType.BIGINT,
        "UNSIGNED BIG INT": SqlType.BIGINT,
        "CHAR": SqlType.CHAR,
        "CHARACTER": SqlType.CHAR,
        "NCHAR": SqlType.NCHAR,
        "NATIVE CHARACTER": SqlType.NCHAR,
        "VARCHAR": SqlType.VARCHAR,
        "VARYING CHARACTER": SqlType.VARCHAR,
        "NVARCHAR": SqlType.NVARCHAR,
        "TEXT": SqlType.VARCHAR,
        "CLOB": SqlType.CLOB,
        "BLOB": SqlType.BLOB,
        "REAL": SqlType.REAL,
        "FLOAT": SqlType.FLOAT,
        "DOUBLE": SqlType.DOUBLE,
        "DOUBLE PRECISION": SqlType.DOUBLE,
        "NUMERIC": SqlType.NUMERIC,
        "DECIMAL": SqlType.DECIMAL,
        "BOOLEAN": SqlType.BOOLEAN,
        "DATE": SqlType.DATE,
        "TIME": SqlType.TIME,
        "DATETIME": SqlType.TIMESTAMP,
        "TIMESTAMP": SqlType.TIMESTAMP,
    }

    def to_sql_type(self, type_name: Optional[str]) -> int:
        base = self.base_type(type_name)
        if base in self.NAMED_TYPES:
            return self.NAMED_TYPES[base]

        # Affinity rules, in SQLite's order of precedence
        if "INT" in base:
            return SqlType.INTEGER
        if any(t in base for t in ["CHAR", "CLOB", "TEXT"]):
            return SqlType.VARCHAR
        if "BLOB" in base or not base:
            return SqlType.BLOB
        if any(t in base for t in ["REAL", "FLOA", "DOUB"]):
            return SqlType.DOUBLE
        return SqlType.NUMERIC


class DuckDBTypeMapper(TypeMapper):
    """Type mapper for DuckDB logical types.

    Array types (``INTEGER[]``, ``VARCHAR[3]``) map to ARRAY and their label
    is reduced to the element type.
    """

    NAMED_TYPES: Dict[str, int] = {
        "BOOLEAN": SqlType.BOOLEAN,
        "TINYINT": SqlType.TINYINT,
        "UTINYINT": SqlType.SMALLINT,
        "SMALLINT": SqlType.SMALLINT,
        "USMALLINT": SqlType.INTEGER,
        "INTEGER": SqlType.INTEGER,
        "UINTEGER": SqlType.BIGINT,
        "BIGINT": SqlType.BIGINT,
        "UBIGINT": SqlType.NUMERIC,
        "HUGEINT": SqlType.NUMERIC,
        "UHUGEINT": SqlType.NUMERIC,
        "FLOAT": SqlType.FLOAT,
        "DOUBLE": SqlType.DOUBLE,
        "DECIMAL": SqlType.DECIMAL,
        "VARCHAR": SqlType.VARCHAR,
        "BLOB": SqlType.BLOB,
        "BIT": SqlType.BIT,
        "DATE": SqlType.DATE,
        "TIME": SqlType.TIME,
        "TIME WITH TIME ZONE": SqlType.TIME_WITH_TIMEZONE,
        "TIMESTAMP": SqlType.TIMESTAMP,
        "TIMESTAMP_S": SqlType.TIMESTAMP,
        "TIMESTAMP_MS": SqlType.TIMESTAMP,
        "TIMESTAMP_NS": SqlType.TIMESTAMP,
        "TIMESTAMP WITH TIME ZONE": SqlType.TIMESTAMP_WITH_TIMEZONE,
        "STRUCT": SqlType.STRUCT,
        "LIST": SqlType.ARRAY,
        "JSON": SqlType.OTHER,
        "UUID": SqlType.OTHER,
        "INTERVAL": SqlType.OTHER,
        "MAP": SqlType.OTHER,
        "UNION": SqlType.OTHER,
        "ENUM": SqlType.OTHER,
    }

    @staticmethod
    def _is_array(type_name: Optional[str]) -> bool:
        return bool(type_name) and type_name.rstrip().endswith("]")

    @staticmethod
    def _element_type(type_name: str) -> str:
        return type_name.rstrip()[: type_name.rstrip().rindex("[")]

    def to_sql_type(self, type_name: Optional[str]) -> int:
        if self._is_array(type_name):
            return SqlType.ARRAY
        return self.NAMED_TYPES.get(self.base_type(type_name), SqlType.OTHER)

    def normalize_type_name(self, type_name: Optional[str]) -> str:
        while self._is_array(type_name):
            type_name = self._element_type(type_name)
        return self.base_type(type_name)
