"""SQLite metadata source."""

import sqlite3
from typing import List, Optional, Sequence

from .base import MetadataSource, Row, quote_identifier
from .kinds import COLUMN_NO_NULLS, COLUMN_NULLABLE
from .patterns import matches_pattern
from .type_mappers import SQLiteTypeMapper
from .types import is_numeric_type


class SQLiteMetadata(MetadataSource):
    """Metadata source for a ``sqlite3`` connection.

    Each attached database is reported as a schema (``main``, ``temp`` and
    any ATTACHed name); SQLite has no catalogs, so TABLE_CAT is always None
    and a non-empty catalog filter matches nothing. SQLite has no stored
    routines: function and procedure queries return no rows.
    """

    BACKEND = "sqlite"

    def __init__(self, connection: sqlite3.Connection):
        super().__init__(connection, SQLiteTypeMapper())

    @staticmethod
    def _catalog_matches(catalog: Optional[str]) -> bool:
        return not catalog

    def _schemas(self, schema_pattern: Optional[str]) -> List[str]:
        rows = self._query("PRAGMA database_list", operation="database_list")
        return [row["name"] for row in rows if matches_pattern(row["name"], schema_pattern)]

    @staticmethod
    def _table_kind(schema: str, name: str, object_type: str) -> str:
        if object_type == "view":
            return "VIEW"
        if name.startswith("sqlite_"):
            return "SYSTEM TABLE"
        if schema == "temp":
            return "LOCAL TEMPORARY"
        return "TABLE"

    def get_tables(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
        types: Optional[Sequence[str]] = None,
    ) -> List[Row]:
        if not self._catalog_matches(catalog):
            return []

        wanted = {t.upper() for t in types} if types else None
        tables = []
        for schema in self._schemas(schema_pattern):
            # sqlite_master is itself not listed in sqlite_master
            rows = self._query(
                f"SELECT type, name FROM {quote_identifier(schema)}.sqlite_master "
                f"WHERE type IN ('table', 'view') ORDER BY name",
                operation="get_tables",
            )
            for row in rows:
                if not matches_pattern(row["name"], name_pattern):
                    continue
                kind = self._table_kind(schema, row["name"], row["type"])
                if wanted is not None and kind not in wanted:
                    continue
                tables.append({
                    "TABLE_CAT": None,
                    "TABLE_SCHEM": schema,
                    "TABLE_NAME": row["name"],
                    "TABLE_TYPE": kind,
                    "REMARKS": None,
                    "SELF_REFERENCING_COL_NAME": None,
                    "REF_GENERATION": None,
                })

        tables.sort(key=lambda t: (t["TABLE_TYPE"], t["TABLE_SCHEM"], t["TABLE_NAME"]))
        return tables

    def _table_info(self, schema: str, table: str) -> List[Row]:
        return self._query(
            "SELECT * FROM pragma_table_info(?, ?)",
            (table, schema),
            operation="table_info",
        )

    def get_primary_keys(self, catalog: Optional[str], schema: Optional[str], table: str) -> List[Row]:
        if not self._catalog_matches(catalog):
            return []

        keys = []
        for schema_name in self._schemas(None):
            if schema is not None and schema_name != schema:
                continue
            info = [row for row in self._table_info(schema_name, table) if row["pk"]]
            for row in sorted(info, key=lambda r: r["pk"]):
                keys.append({
                    "TABLE_CAT": None,
                    "TABLE_SCHEM": schema_name,
                    "TABLE_NAME": table,
                    "COLUMN_NAME": row["name"],
                    "KEY_SEQ": row["pk"],
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
        columns = []
        for table in self.get_tables(catalog, schema_pattern, table_pattern):
            schema = table["TABLE_SCHEM"]
            name = table["TABLE_NAME"]
            for row in self._table_info(schema, name):
                if not matches_pattern(row["name"], column_pattern):
                    continue
                declared = row["type"] or ""
                sql_type = self.type_mapper.to_sql_type(declared)
                size, digits = self.type_mapper.parse_size(declared)
                columns.append({
                    "TABLE_CAT": None,
                    "TABLE_SCHEM": schema,
                    "TABLE_NAME": name,
                    "COLUMN_NAME": row["name"],
                    "DATA_TYPE": sql_type,
                    "TYPE_NAME": self.type_mapper.normalize_type_name(declared),
                    "COLUMN_SIZE": size,
                    "DECIMAL_DIGITS": digits,
                    "NUM_PREC_RADIX": 10 if is_numeric_type(sql_type) else 0,
                    "NULLABLE": COLUMN_NO_NULLS if row["notnull"] else COLUMN_NULLABLE,
                    "REMARKS": None,
                    "COLUMN_DEF": row["dflt_value"],
                    "ORDINAL_POSITION": row["cid"] + 1,
                })
        return columns

    def get_functions(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
    ) -> List[Row]:
        return []

    def get_function_columns(
        self,
        catalog: Optional[str],
        schema_pattern: Optional[str],
        name_pattern: Optional[str],
        column_pattern: Optional[str] = None,
    ) -> List[Row]:
        return []

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
