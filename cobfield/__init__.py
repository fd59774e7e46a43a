"""Helpers for COBOL-style fixed-width fields: delimited records, numbers, tracing and paths."""

__version__ = "0.1.0"

__all__ = [
    "codegen",
    "csv",
    "environment",
    "files",
    "misc",
    "numconv",
    "numparse",
    "scinote",
    "trace",
]