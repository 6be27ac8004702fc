"""Core utilities for the federal office map."""

from .logging import configure_logging, logger, ProgressReporter
from .io import setup_logging, read_registry_csv, clean_headers, require_columns, MissingColumnsError
from .normalization import to_ascii, ascii_columns, parse_coordinate, has_text, parse_flag
from .config import (
    PipelineConfig,
    JURISDICTION_ACRONYMS,
    COWORKING_STRUCTURE_NAMES,
    UNKNOWN_JURISDICTION,
)

__all__ = [
    "configure_logging",
    "logger",
    "ProgressReporter",
    "setup_logging",
    "read_registry_csv",
    "clean_headers",
    "require_columns",
    "MissingColumnsError",
    "to_ascii",
    "ascii_columns",
    "parse_coordinate",
    "has_text",
    "parse_flag",
    "PipelineConfig",
    "JURISDICTION_ACRONYMS",
    "COWORKING_STRUCTURE_NAMES",
    "UNKNOWN_JURISDICTION",
]
