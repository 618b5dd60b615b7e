"""Command line front-end for the numerals library."""

from .main import CliConfig, ConversionResult, ValidationResult, build_parser, main

__all__ = [
    "CliConfig",
    "ConversionResult",
    "ValidationResult",
    "build_parser",
    "main",
]
