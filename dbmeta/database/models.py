"""Immutable descriptors for columns and callable parameters."""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .kinds import ParameterRole
from .types import is_numeric_type, is_string_type, type_label


@dataclass(frozen=True)
class FieldDescriptor:
    """Attributes shared by table columns and callable parameters.

    Not instantiated directly; use ColumnDescriptor or ParameterDescriptor.
    """
    owner_name: str  # table, function or procedure the field belongs to
    name: str
    type: int  # SQL type code, see SqlType
    type_name: str  # backend type label
    catalog: Optional[str] = None
    schema: Optional[str] = None
    size: int = 0
    digits: int = 0
    radix: int = 0
    nullable: bool = True
    comment: Optional[str] = None
    default_value: Optional[str] = None
    position: Optional[int] = None  # 1-based; 0 is a function's return value

    def __post_init__(self):
        if type(self) is FieldDescriptor:
            raise TypeError("FieldDescriptor is abstract; use ColumnDescriptor or ParameterDescriptor")

    def is_string(self) -> bool:
        """Is the field of a character type?"""
        return is_string_type(self.type)

    def is_numeric(self) -> bool:
        """Is the field of a numeric type?"""
        return is_numeric_type(self.type)

    @property
    def type_label(self) -> str:
        return type_label(self.type)


@dataclass(frozen=True)
class ColumnDescriptor(FieldDescriptor):
    """A table column."""
    is_primary_key: bool = False


@dataclass(frozen=True)
class ParameterDescriptor(FieldDescriptor):
    """A function or procedure parameter (or result column)."""
    role: ParameterRole = ParameterRole.UNKNOWN


@dataclass(frozen=True)
class ResultColumn:
    """One entry of a DB-API ``cursor.description`` for a table probe.

    Only ``name`` is guaranteed; the other attributes are whatever the
    driver reports and are often None.
    """
    name: str
    type_code: Any = None
    display_size: Optional[int] = None
    internal_size: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    null_ok: Optional[bool] = None

    @classmethod
    def from_description(cls, entry: Tuple) -> "ResultColumn":
        """Build from a 7-item description sequence."""
        padded = tuple(entry) + (None,) * (7 - len(entry))
        return cls(*padded[:7])


def as_int(value: Any) -> int:
    """Read an integer metadata value; NULL reads as 0."""
    return int(value) if value is not None else 0


def as_optional_int(value: Any) -> Optional[int]:
    return int(value) if value is not None else None
