"""CLI command groups for dbmeta."""
