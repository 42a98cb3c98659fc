"""Classification enums shared across the access pipeline."""

from __future__ import annotations

from enum import StrEnum


class Severity(StrEnum):
    """Diagnostic severity levels."""

    ERROR = "error"
    WARNING = "warning"


class Direction(StrEnum):
    """Access direction, selects the naming-convention prefixes."""

    READ = "read"
    WRITE = "write"


class NamingStyle(StrEnum):
    """How a prefix is joined to a logical name."""

    CAMEL = "camel"  # set + amount -> setAmount
    SNAKE = "snake"  # set + amount -> set_amount


class Via(StrEnum):
    """Accessor kind requested by a caller of the CLI."""

    AUTO = "auto"
    FIELD = "field"
    METHOD = "method"
