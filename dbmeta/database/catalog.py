"""Entry point for schema introspection over one connection."""

import logging
from typing import Any, Dict, Optional, Tuple

from .base import metadata_for
from .callable import CallableDescriptor
from .patterns import mask_pattern
from .table import TableDescriptor

logger = logging.getLogger(__name__)


class SchemaCatalog:
    """Tables, functions and procedures visible through one connection.

    The connection is borrowed: the caller opens it and closes it. Each of
    the three lists is queried once per instance and then served from
    cache; create a new SchemaCatalog to see schema changes. A failed
    query leaves its cache empty, so the next call queries again.

    Not thread-safe: the caches are populated without locking.

    Example usage:
        conn = sqlite3.connect("app.db")
        catalog = SchemaCatalog(conn, name_pattern="ORDER%")
        for table in catalog.get_tables():
            print(table.name, list(table.get_fields()))
    """

    def __init__(
        self,
        connection: Any,
        catalog: Optional[str] = None,
        schema: Optional[str] = None,
        name_pattern: Optional[str] = None,
    ):
        """Initialize the catalog.

        Args:
            connection: DB-API connection or MetadataSource
            catalog: Catalog to restrict to (None for all)
            schema: Schema to restrict to (None for all); matched literally
            name_pattern: Object name filter, LIKE syntax (None for all)
        """
        self.connection = connection
        self.catalog = catalog
        self.schema = schema
        self.name_pattern = name_pattern
        self._source = metadata_for(connection)
        self._tables: Optional[Tuple[TableDescriptor, ...]] = None
        self._functions: Optional[Tuple[CallableDescriptor, ...]] = None
        self._procedures: Optional[Tuple[CallableDescriptor, ...]] = None

    def get_tables(self) -> Tuple[TableDescriptor, ...]:
        """Tables and views matching the filters, in backend order."""
        if self._tables is None:
            rows = self._source.get_tables(
                self.catalog,
                mask_pattern(self.schema),
                mask_pattern(self.name_pattern),
            )
            self._tables = tuple(TableDescriptor.from_row(self._source, row) for row in rows)
            logger.debug("Loaded %d table(s)", len(self._tables))
        return self._tables

    def get_tables_as_map(self) -> Dict[str, TableDescriptor]:
        """Tables keyed by lower-cased name.

        Built anew on every call. If two names differ only in case, the
        later table wins.
        """
        return {table.name.lower(): table for table in self.get_tables()}

    def get_functions(self) -> Tuple[CallableDescriptor, ...]:
        """Stored functions matching the filters."""
        if self._functions is None:
            rows = self._source.get_functions(
                self.catalog,
                mask_pattern(self.schema),
                mask_pattern(self.name_pattern),
            )
            self._functions = tuple(CallableDescriptor.from_function_row(self._source, row) for row in rows)
            logger.debug("Loaded %d function(s)", len(self._functions))
        return self._functions

    def get_procedures(self) -> Tuple[CallableDescriptor, ...]:
        """Stored procedures matching the filters."""
        if self._procedures is None:
            rows = self._source.get_procedures(
                self.catalog,
                mask_pattern(self.schema),
                mask_pattern(self.name_pattern),
            )
            self._procedures = tuple(CallableDescriptor.from_procedure_row(self._source, row) for row in rows)
            logger.debug("Loaded %d procedure(s)", len(self._procedures))
        return self._procedures

    def get_table(self, name: str) -> Optional[TableDescriptor]:
        """Find a table by name, ignoring case."""
        return self.get_tables_as_map().get(name.lower())
