"""Tests for column and parameter descriptors."""

import dataclasses

import pytest

from dbmeta.database.kinds import ParameterRole
from dbmeta.database.models import (
    ColumnDescriptor,
    FieldDescriptor,
    ParameterDescriptor,
    ResultColumn,
    as_int,
    as_optional_int,
)
from dbmeta.database.types import SqlType


def make_column(**overrides):
    values = dict(
        owner_name="TEST_TABLE_1",
        name="ID",
        type=SqlType.INTEGER,
        type_name="INTEGER",
        position=1,
        nullable=False,
        is_primary_key=True,
    )
    values.update(overrides)
    return ColumnDescriptor(**values)


class TestColumnDescriptor:
    def test_defaults(self):
        column = ColumnDescriptor(owner_name="T", name="C", type=SqlType.VARCHAR, type_name="VARCHAR")
        assert column.catalog is None
        assert column.schema is None
        assert column.size == 0
        assert column.nullable is True
        assert column.position is None
        assert column.is_primary_key is False

    def test_is_immutable(self):
        column = make_column()
        with pytest.raises(dataclasses.FrozenInstanceError):
            column.name = "OTHER"
        with pytest.raises(dataclasses.FrozenInstanceError):
            column.is_primary_key = False

    def test_classification(self):
        assert make_column().is_numeric()
        assert not make_column().is_string()
        text = make_column(type=SqlType.NVARCHAR, type_name="NVARCHAR")
        assert text.is_string()
        assert not text.is_numeric()
        date = make_column(type=SqlType.DATE, type_name="DATE")
        assert not date.is_string()
        assert not date.is_numeric()

    def test_value_equality(self):
        assert make_column() == make_column()
        assert make_column() != make_column(position=2)

    def test_type_label(self):
        assert make_column().type_label == "INTEGER"


class TestParameterDescriptor:
    def test_role_defaults_to_unknown(self):
        parameter = ParameterDescriptor(owner_name="F", name="X", type=SqlType.INTEGER, type_name="INTEGER")
        assert parameter.role is ParameterRole.UNKNOWN

    def test_is_immutable(self):
        parameter = ParameterDescriptor(
            owner_name="F", name="X", type=SqlType.INTEGER, type_name="INTEGER", role=ParameterRole.IN
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            parameter.role = ParameterRole.OUT


class TestFieldDescriptor:
    def test_cannot_be_instantiated_directly(self):
        with pytest.raises(TypeError):
            FieldDescriptor(owner_name="T", name="C", type=SqlType.INTEGER, type_name="INTEGER")


class TestResultColumn:
    def test_from_full_description(self):
        column = ResultColumn.from_description(("ID", "INTEGER", None, 4, 32, 0, False))
        assert column.name == "ID"
        assert column.type_code == "INTEGER"
        assert column.internal_size == 4
        assert column.null_ok is False

    def test_from_short_description(self):
        column = ResultColumn.from_description(("ID",))
        assert column.name == "ID"
        assert column.type_code is None


class TestIntHelpers:
    def test_as_int(self):
        assert as_int(None) == 0
        assert as_int(5) == 5
        assert as_int("7") == 7

    def test_as_optional_int(self):
        assert as_optional_int(None) is None
        assert as_optional_int(0) == 0
