"""Table metadata with lazily loaded keys and columns."""

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .base import Row, metadata_for
from .kinds import COLUMN_NULLABLE
from .models import ColumnDescriptor, ResultColumn, as_int, as_optional_int
from .patterns import mask_pattern

logger = logging.getLogger(__name__)


def column_from_row(row: Row, keys: Sequence[str]) -> ColumnDescriptor:
    """Build a ColumnDescriptor from one columns-metadata row."""
    name = row["COLUMN_NAME"]
    default = row.get("COLUMN_DEF")
    return ColumnDescriptor(
        catalog=row.get("TABLE_CAT"),
        schema=row.get("TABLE_SCHEM"),
        owner_name=row.get("TABLE_NAME"),
        name=name,
        type=as_int(row.get("DATA_TYPE")),
        type_name=row.get("TYPE_NAME") or "",
        size=as_int(row.get("COLUMN_SIZE")),
        digits=as_int(row.get("DECIMAL_DIGITS")),
        radix=as_int(row.get("NUM_PREC_RADIX")),
        nullable=row.get("NULLABLE") == COLUMN_NULLABLE,
        comment=row.get("REMARKS"),
        default_value=str(default) if default is not None else None,
        position=as_optional_int(row.get("ORDINAL_POSITION")),
        is_primary_key=name in keys,
    )


class TableDescriptor:
    """One table or view of a database.

    Identity attributes are set at construction. Primary keys, columns and
    the result-column description are loaded from the connection on first
    access and cached for the lifetime of the object; there is no refresh.

    The caches are not synchronized: share a descriptor between threads only
    if its connection is used sequentially.
    """

    def __init__(
        self,
        connection: Any,
        catalog: Optional[str] = None,
        schema: Optional[str] = None,
        name: Optional[str] = None,
        kind: Optional[str] = None,
        remarks: Optional[str] = None,
        id_name: Optional[str] = None,
        id_gen_type: Optional[str] = None,
    ):
        """Initialize a table descriptor.

        Args:
            connection: DB-API connection or MetadataSource (borrowed, not closed)
            catalog: Table catalog (None if not supported)
            schema: Table schema (None if not supported)
            name: Table name
            kind: Table kind label, e.g. TABLE, VIEW, SYSTEM TABLE
            remarks: Table comment
            id_name: Designated identifier column of a typed table
            id_gen_type: How id_name values are created (SYSTEM, USER, DERIVED)
        """
        self._source = metadata_for(connection)
        self.catalog = catalog
        self.schema = schema
        self.name = name
        self.kind = kind
        self.remarks = remarks
        self.id_name = id_name
        self.id_gen_type = id_gen_type
        self._keys: Optional[Tuple[str, ...]] = None
        self._fields: Optional[Dict[str, ColumnDescriptor]] = None
        self._result_columns: Optional[Tuple[ResultColumn, ...]] = None

    @classmethod
    def from_row(cls, connection: Any, row: Row) -> "TableDescriptor":
        """Build from one tables-metadata row."""
        return cls(
            connection,
            catalog=row.get("TABLE_CAT"),
            schema=row.get("TABLE_SCHEM"),
            name=row.get("TABLE_NAME"),
            kind=row.get("TABLE_TYPE"),
            remarks=row.get("REMARKS"),
            id_name=row.get("SELF_REFERENCING_COL_NAME"),
            id_gen_type=row.get("REF_GENERATION"),
        )

    def get_keys(self) -> Tuple[str, ...]:
        """Primary key column names, in the order the backend reports them."""
        if self._keys is None:
            # Exact lookup; schema and name are not patterns here
            rows = self._source.get_primary_keys(self.catalog, self.schema, self.name)
            self._keys = tuple(row["COLUMN_NAME"] for row in rows)
            logger.debug("Loaded %d key column(s) for %s", len(self._keys), self.name)
        return self._keys

    def get_fields(self) -> Mapping[str, ColumnDescriptor]:
        """Columns keyed by lower-cased name, in ordinal order.

        Returns:
            Read-only mapping of column name (lower case) to ColumnDescriptor
        """
        if self._fields is None:
            keys = self.get_keys()
            rows = self._source.get_columns(
                self.catalog,
                mask_pattern(self.schema),
                mask_pattern(self.name),
            )
            fields: Dict[str, ColumnDescriptor] = {}
            for row in rows:
                column = column_from_row(row, keys)
                fields[column.name.lower()] = column
            self._fields = fields
            logger.debug("Loaded %d column(s) for %s", len(fields), self.name)
        return MappingProxyType(self._fields)

    def get_result_columns(self) -> Tuple[ResultColumn, ...]:
        """Columns of ``SELECT *`` on this table as the driver describes them."""
        if self._result_columns is None:
            self._result_columns = tuple(self._source.describe_table(self.catalog, self.schema, self.name))
        return self._result_columns

    def get_column_names(self) -> List[str]:
        """Original-case column names in ordinal order."""
        return [column.name for column in self.get_fields().values()]

    def __repr__(self) -> str:
        return (
            f"TableDescriptor(catalog={self.catalog!r}, schema={self.schema!r}, "
            f"name={self.name!r}, kind={self.kind!r}, remarks={self.remarks!r})"
        )
