"""DuckDB metadata source."""

from typing import Any, List, Optional, Sequence

from .base import MetadataSource, Row
from .kinds import (
    COLUMN_NO_NULLS,
    COLUMN_NULLABLE,
    COLUMN_NULLABLE_UNKNOWN,
    FUNCTION_COLUMN_IN,
    FUNCTION_COLUMN_RETURN,
    FUNCTION_NO_TABLE,
    FUNCTION_RESULT_UNKNOWN,
    FUNCTION_RETURNS_TABLE,
)
from .patterns import matches_pattern
from .type_mappers import DuckDBTypeMapper


class DuckDBMetadata(MetadataSource):
    """Metadata source for a ``duckdb`` connection.

    Reads the ``duckdb_*()`` catalog table functions. Each attached database
    is a catalog. Built-in objects (``internal``) are not reported. User
    macros are reported as functions; DuckDB has no stored procedures.
    """

    BACKEND = "duckdb"

    FUNCTION_TYPES = {
        "scalar": FUNCTION_NO_TABLE,
        "macro": FUNCTION_NO_TABLE,
        "aggregate": FUNCTION_NO_TABLE,
        "table": FUNCTION_RETURNS_TABLE,
        "table_macro": FUNCTION_RETURNS_TABLE,
    }

    def __init__(self, connection: Any):
        super().__init__(connection, DuckDBTypeMapper())

    @staticmethod
    def _in_scope(row: Row, catalog: Optional[str], schema_pattern: Optional[str]) -> bool:
        if catalog is not None and row["database_name"] != catalog:
            return False
        return matches_pattern(row["schema_name"], schema_pattern)

    def get_tables(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
        types: Optional[Sequence[str]] = None,
    ) -> List[Row]:
        rows = self._query(
            """
            SELECT database_name, schema_name, table_name, comment, temporary, 'TABLE' AS kind
            FROM duckdb_tables()
            WHERE NOT internal
            UNION ALL
            SELECT database_name, schema_name, view_name, comment, temporary, 'VIEW'
            FROM duckdb_views()
            WHERE NOT internal
            """,
            operation="get_tables",
        )

        wanted = {t.upper() for t in types} if types else None
        tables = []
        for row in rows:
            if not self._in_scope(row, catalog, schema_pattern):
                continue
            if not matches_pattern(row["table_name"], name_pattern):
                continue
            kind = row["kind"]
            if kind == "TABLE" and row["temporary"]:
                kind = "LOCAL TEMPORARY"
            if wanted is not None and kind not in wanted:
                continue
            tables.append({
                "TABLE_CAT": row["database_name"],
                "TABLE_SCHEM": row["schema_name"],
                "TABLE_NAME": row["table_name"],
                "TABLE_TYPE": kind,
                "REMARKS": row["comment"],
                "SELF_REFERENCING_COL_NAME": None,
                "REF_GENERATION": None,
            })

        tables.sort(key=lambda t: (t["TABLE_TYPE"], t["TABLE_CAT"], t["TABLE_SCHEM"], t["TABLE_NAME"]))
        return tables

    def get_primary_keys(self, catalog: Optional[str], schema: Optional[str], table: str) -> List[Row]:
        rows = self._query(
            """
            SELECT database_name, schema_name, table_name, constraint_column_names
            FROM duckdb_constraints()
            WHERE constraint_type = 'PRIMARY KEY'
              AND table_name = ?
            """,
            (table,),
            operation="get_primary_keys",
        )

        keys = []
        for row in rows:
            if catalog is not None and row["database_name"] != catalog:
                continue
            if schema is not None and row["schema_name"] != schema:
                continue
            column_names = row["constraint_column_names"]
            if not isinstance(column_names, list):
                column_names = [column_names]
            for seq, column_name in enumerate(column_names, start=1):
                keys.append({
                    "TABLE_CAT": row["database_name"],
                    "TABLE_SCHEM": row["schema_name"],
                    "TABLE_NAME": row["table_name"],
                    "COLUMN_NAME": column_name,
                    "KEY_SEQ": seq,
                    "PK_NAME": None,
                })
        return keys

    def get_columns(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        table_pattern: Optional[str],
        column_pattern: Optional[str] = None,
    ) -> List[Row]:
        rows = self._query(
            """
            SELECT database_name, schema_name, table_name, column_name, column_index,
                   comment, column_default, is_nullable, data_type,
                   character_maximum_length, numeric_precision,
                   numeric_precision_radix, numeric_scale
            FROM duckdb_columns()
            WHERE NOT internal
            ORDER BY database_name, schema_name, table_name, column_index
            """,
            operation="get_columns",
        )

        columns = []
        position = 0
        current_table = None
        for row in rows:
            table_key = (row["database_name"], row["schema_name"], row["table_name"])
            if table_key != current_table:
                current_table = table_key
                position = 0
            position += 1

            if not self._in_scope(row, catalog, schema_pattern):
                continue
            if not matches_pattern(row["table_name"], table_pattern):
                continue
            if not matches_pattern(row["column_name"], column_pattern):
                continue

            data_type = row["data_type"]
            columns.append({
                "TABLE_CAT": row["database_name"],
                "TABLE_SCHEM": row["schema_name"],
                "TABLE_NAME": row["table_name"],
                "COLUMN_NAME": row["column_name"],
                "DATA_TYPE": self.type_mapper.to_sql_type(data_type),
                "TYPE_NAME": self.type_mapper.normalize_type_name(data_type),
                "COLUMN_SIZE": row["character_maximum_length"] or row["numeric_precision"] or 0,
                "DECIMAL_DIGITS": row["numeric_scale"] or 0,
                "NUM_PREC_RADIX": row["numeric_precision_radix"] or 0,
                "NULLABLE": COLUMN_NULLABLE if row["is_nullable"] else COLUMN_NO_NULLS,
                "REMARKS": row["comment"],
                "COLUMN_DEF": row["column_default"],
                "ORDINAL_POSITION": position,
            })
        return columns

    def _user_functions(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
        operation: str,
    ) -> List[Row]:
        rows = self._query(
            """
            SELECT database_name, schema_name, function_name, function_type,
                   description, return_type, parameters, parameter_types
            FROM duckdb_functions()
            WHERE NOT internal
            ORDER BY database_name, schema_name, function_name
            """,
            operation=operation,
        )
        return [
            row for row in rows
            if self._in_scope(row, catalog, schema_pattern)
            and matches_pattern(row["function_name"], name_pattern)
        ]

    def get_functions(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
    ) -> List[Row]:
        return [
            {
                "FUNCTION_CAT": row["database_name"],
                "FUNCTION_SCHEM": row["schema_name"],
                "FUNCTION_NAME": row["function_name"],
                "REMARKS": row["description"],
                "FUNCTION_TYPE": self.FUNCTION_TYPES.get(row["function_type"], FUNCTION_RESULT_UNKNOWN),
            }
            for row in self._user_functions(catalog, schema_pattern, name_pattern, "get_functions")
        ]

    def _function_column(self, row: Row, name: str, type_name: Optional[str], column_type: int, position: int) -> Row:
        type_name = type_name or ""
        size, digits = self.type_mapper.parse_size(type_name)
        return {
            "FUNCTION_CAT": row["database_name"],
            "FUNCTION_SCHEM": row["schema_name"],
            "FUNCTION_NAME": row["function_name"],
            "COLUMN_NAME": name,
            "COLUMN_TYPE": column_type,
            "DATA_TYPE": self.type_mapper.to_sql_type(type_name),
            "TYPE_NAME": self.type_mapper.normalize_type_name(type_name),
            "PRECISION": size,
            "SCALE": digits,
            "RADIX": 0,
            "NULLABLE": COLUMN_NULLABLE_UNKNOWN,
            "REMARKS": row["description"],
            "ORDINAL_POSITION": position,
        }

    def get_function_columns(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
        column_pattern: Optional[str] = None,
    ) -> List[Row]:
        columns = []
        for row in self._user_functions(catalog, schema_pattern, name_pattern, "get_function_columns"):
            if row["return_type"] and matches_pattern("", column_pattern):
                columns.append(self._function_column(row, "", row["return_type"], FUNCTION_COLUMN_RETURN, 0))

            parameters = row["parameters"] or []
            parameter_types = row["parameter_types"] or []
            for index, name in enumerate(parameters):
                if not matches_pattern(name, column_pattern):
                    continue
                type_name = parameter_types[index] if index < len(parameter_types) else None
                columns.append(self._function_column(row, name, type_name, FUNCTION_COLUMN_IN, index + 1))
        return columns

    def get_procedures(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
    ) -> List[Row]:
        return []

    def get_procedure_columns(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
        column_pattern: Optional[str] = None,
    ) -> List[Row]:
        return []
