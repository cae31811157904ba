"""Abstract base class for database metadata sources."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from ..errors import MetadataAccessError, UnsupportedConnectionError
from .models import ResultColumn
from .type_mappers import TypeMapper

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


def quote_identifier(name: str) -> str:
    """Quote an SQL identifier with double quotes."""
    return '"' + name.replace('"', '""') + '"'


class MetadataSource(ABC):
    """Metadata queries over one borrowed DB-API connection.

    Every ``get_*`` method returns rows as dicts keyed by the standard
    metadata column labels (``TABLE_NAME``, ``COLUMN_NAME``, ``DATA_TYPE``
    and so on). Arguments named ``*_pattern`` use LIKE semantics with ``\\``
    as escape character; ``None`` means "do not filter". Driver failures are
    raised as MetadataAccessError.

    The connection is never opened or closed here.
    """

    #: Name used in log records and error details
    BACKEND: str = "generic"

    def __init__(self, connection: Any, type_mapper: TypeMapper):
        self.connection = connection
        self.type_mapper = type_mapper

    def _query(self, sql: str, params: Sequence[Any] = (), operation: Optional[str] = None) -> List[Row]:
        """Run a query and return rows as dicts keyed by lower-case column name.

        Args:
            sql: SQL query to execute
            params: Positional query parameters
            operation: Metadata operation name for logging and errors

        Returns:
            List of result rows
        """
        logger.debug("%s metadata query for %s: %s %s", self.BACKEND, operation, " ".join(sql.split()), tuple(params))
        try:
            if params:
                cursor = self.connection.execute(sql, tuple(params))
            else:
                cursor = self.connection.execute(sql)
            names = [d[0].lower() for d in cursor.description or []]
            return [dict(zip(names, row)) for row in cursor.fetchall()]
        except Exception as e:
            raise MetadataAccessError(
                f"{self.BACKEND} metadata query failed: {e}",
                operation=operation,
                details={"backend": self.BACKEND},
            ) from e

    @abstractmethod
    def get_tables(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
        types: Optional[Sequence[str]] = None,
    ) -> List[Row]:
        """List tables and views.

        Args:
            catalog: Catalog name, or None for all
            schema_pattern: Schema name pattern
            name_pattern: Table name pattern
            types: Table kinds to include (e.g. ``["TABLE", "VIEW"]``), or None for all

        Returns:
            Rows with TABLE_CAT, TABLE_SCHEM, TABLE_NAME, TABLE_TYPE, REMARKS,
            SELF_REFERENCING_COL_NAME, REF_GENERATION
        """

    @abstractmethod
    def get_primary_keys(self, catalog: Optional[str], schema: Optional[str], table: str) -> List[Row]:
        """List the primary key columns of one table.

        Names are matched exactly, not as patterns.

        Returns:
            Rows with TABLE_CAT, TABLE_SCHEM, TABLE_NAME, COLUMN_NAME, KEY_SEQ, PK_NAME
        """

    @abstractmethod
    def get_columns(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        table_pattern: Optional[str],
        column_pattern: Optional[str] = None,
    ) -> List[Row]:
        """List table columns, ordered by table and ordinal position.

        Returns:
            Rows with TABLE_CAT, TABLE_SCHEM, TABLE_NAME, COLUMN_NAME, DATA_TYPE,
            TYPE_NAME, COLUMN_SIZE, DECIMAL_DIGITS, NUM_PREC_RADIX, NULLABLE,
            REMARKS, COLUMN_DEF, ORDINAL_POSITION
        """

    @abstractmethod
    def get_functions(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
    ) -> List[Row]:
        """List stored functions.

        Returns:
            Rows with FUNCTION_CAT, FUNCTION_SCHEM, FUNCTION_NAME, REMARKS, FUNCTION_TYPE
        """

    @abstractmethod
    def get_function_columns(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
        column_pattern: Optional[str] = None,
    ) -> List[Row]:
        """List function parameters, return values and result columns.

        Returns:
            Rows with FUNCTION_CAT, FUNCTION_SCHEM, FUNCTION_NAME, COLUMN_NAME,
            COLUMN_TYPE, DATA_TYPE, TYPE_NAME, PRECISION, SCALE, RADIX,
            NULLABLE, REMARKS, ORDINAL_POSITION
        """

    @abstractmethod
    def get_procedures(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
    ) -> List[Row]:
        """List stored procedures.

        Returns:
            Rows with PROCEDURE_CAT, PROCEDURE_SCHEM, PROCEDURE_NAME, REMARKS, PROCEDURE_TYPE
        """

    @abstractmethod
    def get_procedure_columns(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
        column_pattern: Optional[str] = None,
    ) -> List[Row]:
        """List procedure parameters and result columns.

        ORDINAL_POSITION may be missing from the rows of some backends.

        Returns:
            Rows with PROCEDURE_CAT, PROCEDURE_SCHEM, PROCEDURE_NAME, COLUMN_NAME,
            COLUMN_TYPE, DATA_TYPE, TYPE_NAME, PRECISION, SCALE, RADIX,
            NULLABLE, REMARKS and usually ORDINAL_POSITION
        """

    def qualified_name(self, catalog: Optional[str], schema: Optional[str], table: str) -> str:
        """Build a quoted ``catalog.schema.table`` reference."""
        parts = [p for p in (catalog, schema) if p]
        parts.append(table)
        return ".".join(quote_identifier(p) for p in parts)

    def describe_table(self, catalog: Optional[str], schema: Optional[str], table: str) -> List[ResultColumn]:
        """Describe the result columns of ``SELECT *`` on a table without fetching rows."""
        sql = f"SELECT * FROM {self.qualified_name(catalog, schema, table)} WHERE 0 = 1"
        logger.debug("%s result probe: %s", self.BACKEND, sql)
        try:
            cursor = self.connection.execute(sql)
            description = cursor.description or []
            cursor.fetchall()
        except Exception as e:
            raise MetadataAccessError(
                f"{self.BACKEND} result probe failed: {e}",
                operation="describe_table",
                details={"backend": self.BACKEND, "table": table},
            ) from e
        return [ResultColumn.from_description(entry) for entry in description]


def metadata_for(connection: Any) -> MetadataSource:
    """Return the metadata source for a DB-API connection.

    A MetadataSource is returned unchanged. sqlite3 and duckdb connections
    are wrapped in their backend; anything else raises
    UnsupportedConnectionError.
    """
    if isinstance(connection, MetadataSource):
        return connection

    import sqlite3

    if isinstance(connection, sqlite3.Connection):
        from .sqlite import SQLiteMetadata
        return SQLiteMetadata(connection)

    if "duckdb" in type(connection).__module__:
        from .duckdb import DuckDBMetadata
        return DuckDBMetadata(connection)

    raise UnsupportedConnectionError(connection)
