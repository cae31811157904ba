"""Stored function and procedure metadata."""

import logging
from typing import Any, Optional, Tuple

from .base import Row, metadata_for
from .kinds import COLUMN_NULLABLE, CallableKind, ParameterRole
from .models import ParameterDescriptor, as_int, as_optional_int
from .patterns import mask_pattern

logger = logging.getLogger(__name__)


def parameter_from_function_row(row: Row) -> ParameterDescriptor:
    """Build a ParameterDescriptor from one function-columns row.

    Position 0 marks the function's return value.
    """
    return ParameterDescriptor(
        catalog=row.get("FUNCTION_CAT"),
        schema=row.get("FUNCTION_SCHEM"),
        owner_name=row.get("FUNCTION_NAME"),
        name=row.get("COLUMN_NAME"),
        role=ParameterRole.from_function(row.get("COLUMN_TYPE")),
        type=as_int(row.get("DATA_TYPE")),
        type_name=row.get("TYPE_NAME") or "",
        size=as_int(row.get("PRECISION")),
        digits=as_int(row.get("SCALE")),
        radix=as_int(row.get("RADIX")),
        nullable=row.get("NULLABLE") == COLUMN_NULLABLE,
        comment=row.get("REMARKS"),
        position=as_optional_int(row.get("ORDINAL_POSITION")),
    )


def parameter_from_procedure_row(row: Row) -> ParameterDescriptor:
    """Build a ParameterDescriptor from one procedure-columns row.

    Some backends do not report ORDINAL_POSITION for procedures; the row is
    still used and its position left unset.
    """
    try:
        position = as_optional_int(row["ORDINAL_POSITION"])
    except KeyError:
        logger.error("Column ORDINAL_POSITION not found in procedure info for %s", row.get("PROCEDURE_NAME"))
        position = None

    return ParameterDescriptor(
        catalog=row.get("PROCEDURE_CAT"),
        schema=row.get("PROCEDURE_SCHEM"),
        owner_name=row.get("PROCEDURE_NAME"),
        name=row.get("COLUMN_NAME"),
        role=ParameterRole.from_procedure(row.get("COLUMN_TYPE")),
        type=as_int(row.get("DATA_TYPE")),
        type_name=row.get("TYPE_NAME") or "",
        size=as_int(row.get("PRECISION")),
        digits=as_int(row.get("SCALE")),
        radix=as_int(row.get("RADIX")),
        nullable=row.get("NULLABLE") == COLUMN_NULLABLE,
        position=position,
    )


class CallableDescriptor:
    """A stored function or procedure.

    Parameters are loaded on the first ``get_columns`` call and cached for
    the lifetime of the object. The caches are not synchronized.
    """

    def __init__(
        self,
        connection: Any,
        catalog: Optional[str] = None,
        schema: Optional[str] = None,
        is_function: bool = False,
        name: Optional[str] = None,
        kind: CallableKind = CallableKind.UNKNOWN,
        comment: Optional[str] = None,
    ):
        """Initialize a callable descriptor.

        Args:
            connection: DB-API connection or MetadataSource (borrowed, not closed)
            catalog: Callable catalog (None if not supported)
            schema: Callable schema (None if not supported)
            is_function: True for a function, False for a procedure
            name: Callable name
            kind: Return shape
            comment: Callable comment
        """
        self._source = metadata_for(connection)
        self.catalog = catalog
        self.schema = schema
        self.is_function = is_function
        self.name = name
        self.kind = kind
        self.comment = comment
        self._columns: Optional[Tuple[ParameterDescriptor, ...]] = None

    @classmethod
    def from_function_row(cls, connection: Any, row: Row) -> "CallableDescriptor":
        """Build from one functions-metadata row."""
        return cls(
            connection,
            catalog=row.get("FUNCTION_CAT"),
            schema=row.get("FUNCTION_SCHEM"),
            is_function=True,
            name=row.get("FUNCTION_NAME"),
            kind=CallableKind.from_function(row.get("FUNCTION_TYPE")),
            comment=row.get("REMARKS"),
        )

    @classmethod
    def from_procedure_row(cls, connection: Any, row: Row) -> "CallableDescriptor":
        """Build from one procedures-metadata row."""
        return cls(
            connection,
            catalog=row.get("PROCEDURE_CAT"),
            schema=row.get("PROCEDURE_SCHEM"),
            is_function=False,
            name=row.get("PROCEDURE_NAME"),
            kind=CallableKind.from_procedure(row.get("PROCEDURE_TYPE")),
            comment=row.get("REMARKS"),
        )

    def get_columns(self, name_pattern: Optional[str] = None) -> Tuple[ParameterDescriptor, ...]:
        """Parameters of the callable, in the order the backend reports them.

        Once loaded, the cached parameters are returned and ``name_pattern``
        is ignored: a descriptor describes a single callable.

        Args:
            name_pattern: Callable name to look up; defaults to this callable's name

        Returns:
            Tuple of ParameterDescriptor
        """
        if self._columns is not None:
            return self._columns

        target = name_pattern if name_pattern is not None else self.name
        if self.is_function:
            rows = self._source.get_function_columns(self.catalog, mask_pattern(self.schema), mask_pattern(target))
            self._columns = tuple(parameter_from_function_row(row) for row in rows)
        else:
            rows = self._source.get_procedure_columns(self.catalog, mask_pattern(self.schema), mask_pattern(target))
            self._columns = tuple(parameter_from_procedure_row(row) for row in rows)
        logger.debug("Loaded %d parameter(s) for %s", len(self._columns), target)
        return self._columns

    def __repr__(self) -> str:
        return (
            f"CallableDescriptor(catalog={self.catalog!r}, schema={self.schema!r}, name={self.name!r}, "
            f"kind={self.kind.value!r}, is_function={self.is_function!r})"
        )
