"""Shared pytest fixtures for dbmeta tests."""

import sqlite3

import pytest

from dbmeta.database.kinds import (
    COLUMN_NO_NULLS,
    COLUMN_NULLABLE,
    COLUMN_NULLABLE_UNKNOWN,
    FUNCTION_COLUMN_IN,
    FUNCTION_COLUMN_RESULT,
    FUNCTION_COLUMN_RETURN,
    FUNCTION_NO_TABLE,
    FUNCTION_RETURNS_TABLE,
    PROCEDURE_COLUMN_IN,
    PROCEDURE_COLUMN_OUT,
    PROCEDURE_COLUMN_RETURN,
    PROCEDURE_NO_RESULT,
    PROCEDURE_RETURNS_RESULT,
)
from dbmeta.database.types import SqlType
from tests.fixtures import FakeMetadataSource


SQLITE_SCHEMA = """
CREATE TABLE TEST_TABLE_1 (
    ID INTEGER NOT NULL PRIMARY KEY,
    ENUM_FIELD VARCHAR(50),
    BIG_FIELD VARCHAR(1000),
    READ_ONLY INTEGER,
    IS_DELETED TINYINT DEFAULT 0,
    DOUBLE_FIELD DOUBLE,
    PRICE DECIMAL(10,2)
);
CREATE TABLE TEST_TABLE_2 (
    TENANT_ID INTEGER NOT NULL,
    CODE CHAR(8) NOT NULL,
    NOTE TEXT,
    PRIMARY KEY (TENANT_ID, CODE)
);
CREATE TABLE TESTXTABLE_3 (
    PAYLOAD BLOB
);
CREATE VIEW TEST_VIEW AS SELECT ID, ENUM_FIELD FROM TEST_TABLE_1;
"""


def _table(name, kind="TABLE", schema="PUBLIC", remarks=None):
    return {
        "TABLE_CAT": "PUBLIC",
        "TABLE_SCHEM": schema,
        "TABLE_NAME": name,
        "TABLE_TYPE": kind,
        "REMARKS": remarks,
    }


def _column(table, name, data_type, type_name, position, size=0, nullable=True, default=None, digits=0):
    return {
        "TABLE_CAT": "PUBLIC",
        "TABLE_SCHEM": "PUBLIC",
        "TABLE_NAME": table,
        "COLUMN_NAME": name,
        "DATA_TYPE": int(data_type),
        "TYPE_NAME": type_name,
        "COLUMN_SIZE": size,
        "DECIMAL_DIGITS": digits,
        "NUM_PREC_RADIX": 10,
        "NULLABLE": COLUMN_NULLABLE if nullable else COLUMN_NO_NULLS,
        "REMARKS": None,
        "COLUMN_DEF": default,
        "ORDINAL_POSITION": position,
    }


def _function_column(function, name, column_type, data_type, type_name, position):
    return {
        "FUNCTION_CAT": "PUBLIC",
        "FUNCTION_SCHEM": "PUBLIC",
        "FUNCTION_NAME": function,
        "COLUMN_NAME": name,
        "COLUMN_TYPE": column_type,
        "DATA_TYPE": int(data_type),
        "TYPE_NAME": type_name,
        "PRECISION": 32,
        "SCALE": 0,
        "RADIX": 10,
        "NULLABLE": COLUMN_NULLABLE_UNKNOWN,
        "REMARKS": f"{name} of {function}",
        "ORDINAL_POSITION": position,
    }


def _procedure_column(procedure, name, column_type, data_type, type_name, position=None):
    row = {
        "PROCEDURE_CAT": "PUBLIC",
        "PROCEDURE_SCHEM": "PUBLIC",
        "PROCEDURE_NAME": procedure,
        "COLUMN_NAME": name,
        "COLUMN_TYPE": column_type,
        "DATA_TYPE": int(data_type),
        "TYPE_NAME": type_name,
        "PRECISION": 10,
        "SCALE": 0,
        "RADIX": 10,
        "NULLABLE": COLUMN_NULLABLE,
    }
    if position is not None:
        row["ORDINAL_POSITION"] = position
    return row


@pytest.fixture
def fake_source():
    """Fake metadata source describing a small schema with routines."""
    return FakeMetadataSource(
        tables=[
            _table("TEST_TABLE_1", remarks="first table"),
            _table("TEST_TABLE_2"),
            _table("TESTXTABLE_3"),
            _table("TEST_VIEW", kind="VIEW"),
        ],
        keys=[
            {"TABLE_CAT": "PUBLIC", "TABLE_SCHEM": "PUBLIC", "TABLE_NAME": "TEST_TABLE_1", "COLUMN_NAME": "ID", "KEY_SEQ": 1},
            {"TABLE_CAT": "PUBLIC", "TABLE_SCHEM": "PUBLIC", "TABLE_NAME": "TEST_TABLE_2", "COLUMN_NAME": "TENANT_ID", "KEY_SEQ": 1},
            {"TABLE_CAT": "PUBLIC", "TABLE_SCHEM": "PUBLIC", "TABLE_NAME": "TEST_TABLE_2", "COLUMN_NAME": "CODE", "KEY_SEQ": 2},
        ],
        columns=[
            _column("TEST_TABLE_1", "ID", SqlType.INTEGER, "INTEGER", 1, size=32, nullable=False),
            _column("TEST_TABLE_1", "ENUM_FIELD", SqlType.VARCHAR, "VARCHAR", 2, size=50),
            _column("TEST_TABLE_1", "DOUBLE_FIELD", SqlType.DOUBLE, "DOUBLE", 3, size=64, default="0.5"),
            _column("TEST_TABLE_2", "TENANT_ID", SqlType.INTEGER, "INTEGER", 1, nullable=False),
            _column("TEST_TABLE_2", "CODE", SqlType.CHAR, "CHAR", 2, size=8, nullable=False),
            _column("TESTXTABLE_3", "PAYLOAD", SqlType.BLOB, "BLOB", 1),
        ],
        functions=[
            {"FUNCTION_CAT": "PUBLIC", "FUNCTION_SCHEM": "PUBLIC", "FUNCTION_NAME": "ADD_ONE",
             "REMARKS": "adds one", "FUNCTION_TYPE": FUNCTION_NO_TABLE},
            {"FUNCTION_CAT": "PUBLIC", "FUNCTION_SCHEM": "PUBLIC", "FUNCTION_NAME": "SPLIT_ROWS",
             "REMARKS": None, "FUNCTION_TYPE": FUNCTION_RETURNS_TABLE},
            {"FUNCTION_CAT": "PUBLIC", "FUNCTION_SCHEM": "PUBLIC", "FUNCTION_NAME": "VENDOR_FN",
             "REMARKS": None, "FUNCTION_TYPE": 42},
        ],
        function_columns=[
            _function_column("ADD_ONE", "", FUNCTION_COLUMN_RETURN, SqlType.INTEGER, "INTEGER", 0),
            _function_column("ADD_ONE", "X", FUNCTION_COLUMN_IN, SqlType.INTEGER, "INTEGER", 1),
            _function_column("SPLIT_ROWS", "TEXT", FUNCTION_COLUMN_IN, SqlType.VARCHAR, "VARCHAR", 1),
            _function_column("SPLIT_ROWS", "PART", FUNCTION_COLUMN_RESULT, SqlType.VARCHAR, "VARCHAR", 1),
        ],
        procedures=[
            {"PROCEDURE_CAT": "PUBLIC", "PROCEDURE_SCHEM": "PUBLIC", "PROCEDURE_NAME": "CLEANUP",
             "REMARKS": "purges old rows", "PROCEDURE_TYPE": PROCEDURE_NO_RESULT},
            {"PROCEDURE_CAT": "PUBLIC", "PROCEDURE_SCHEM": "PUBLIC", "PROCEDURE_NAME": "GET_TOTAL",
             "REMARKS": None, "PROCEDURE_TYPE": PROCEDURE_RETURNS_RESULT},
            {"PROCEDURE_CAT": "PUBLIC", "PROCEDURE_SCHEM": "PUBLIC", "PROCEDURE_NAME": "ODD_PROC",
             "REMARKS": None, "PROCEDURE_TYPE": 9},
        ],
        procedure_columns=[
            _procedure_column("CLEANUP", "DAYS", PROCEDURE_COLUMN_IN, SqlType.INTEGER, "INTEGER", 1),
            _procedure_column("CLEANUP", "REMOVED", PROCEDURE_COLUMN_OUT, SqlType.BIGINT, "BIGINT"),
            _procedure_column("GET_TOTAL", "", PROCEDURE_COLUMN_RETURN, SqlType.DECIMAL, "DECIMAL", 0),
        ],
        description=[
            ("ID", "INTEGER", None, None, None, None, False),
            ("ENUM_FIELD", "VARCHAR", None, None, None, None, True),
        ],
    )


@pytest.fixture
def sqlite_connection():
    """In-memory SQLite database with the test tables."""
    conn = sqlite3.connect(":memory:")
    conn.executescript(SQLITE_SCHEMA)
    yield conn
    conn.close()


@pytest.fixture
def sqlite_file(tmp_path):
    """SQLite database file with the test tables."""
    path = tmp_path / "test.db"
    conn = sqlite3.connect(str(path))
    conn.executescript(SQLITE_SCHEMA)
    conn.commit()
    conn.close()
    return path
