"""Database schema introspection for dbmeta.

This module turns the metadata reported by a live connection into cached,
immutable descriptors, with backend-specific metadata sources for SQLite
and DuckDB.
"""

from .types import SqlType, STRING_TYPES, NUMERIC_TYPES, is_string_type, is_numeric_type
from .patterns import mask_pattern, matches_pattern
from .kinds import CallableKind, ParameterRole
from .models import FieldDescriptor, ColumnDescriptor, ParameterDescriptor, ResultColumn
from .base import MetadataSource, metadata_for
from .type_mappers import TypeMapper, SQLiteTypeMapper, DuckDBTypeMapper
from .table import TableDescriptor
from .callable import CallableDescriptor
from .catalog import SchemaCatalog
from .sqlite import SQLiteMetadata
from .duckdb import DuckDBMetadata

__all__ = [
    # Type classification
    "SqlType",
    "STRING_TYPES",
    "NUMERIC_TYPES",
    "is_string_type",
    "is_numeric_type",
    # Name patterns
    "mask_pattern",
    "matches_pattern",
    # Kinds
    "CallableKind",
    "ParameterRole",
    # Descriptors
    "FieldDescriptor",
    "ColumnDescriptor",
    "ParameterDescriptor",
    "ResultColumn",
    "TableDescriptor",
    "CallableDescriptor",
    "SchemaCatalog",
    # Metadata sources
    "MetadataSource",
    "metadata_for",
    "SQLiteMetadata",
    "DuckDBMetadata",
    # Type mappers
    "TypeMapper",
    "SQLiteTypeMapper",
    "DuckDBTypeMapper",
]
