"""Accessor naming conventions.

A convention is plain data: ordered prefixes per direction plus a joining
style. The resolver tries the candidate names in order and the first existing
method wins, so ``set`` takes precedence over ``append`` by default.

Examples:
    >>> NamingConvention().candidates("amount", Direction.WRITE)
    ['setAmount', 'appendAmount']
    >>> accessor_name("get", "id", NamingStyle.SNAKE)
    'get_id'
"""

from __future__ import annotations

from pydantic import BaseModel

from objfacade.domain.types import Direction, NamingStyle

DEFAULT_GETTER_PREFIXES: tuple[str, ...] = ("get",)
DEFAULT_SETTER_PREFIXES: tuple[str, ...] = ("set", "append")


def accessor_name(prefix: str, logical_name: str, style: NamingStyle = NamingStyle.CAMEL) -> str:
    """Join *prefix* and *logical_name* into a method name."""
    if style == NamingStyle.SNAKE:
        return f"{prefix}_{logical_name}"
    return prefix + logical_name[:1].upper() + logical_name[1:]


class NamingConvention(BaseModel):
    """[conventions] section — getter/setter prefix rules."""

    model_config = {"frozen": True}

    getter_prefixes: tuple[str, ...] = DEFAULT_GETTER_PREFIXES
    setter_prefixes: tuple[str, ...] = DEFAULT_SETTER_PREFIXES
    style: NamingStyle = NamingStyle.CAMEL

    def prefixes(self, direction: Direction) -> tuple[str, ...]:
        if direction == Direction.WRITE:
            return self.setter_prefixes
        return self.getter_prefixes

    def candidates(self, logical_name: str, direction: Direction) -> list[str]:
        """Method names to try for *logical_name*, in priority order."""
        return [
            accessor_name(prefix, logical_name, self.style) for prefix in self.prefixes(direction)
        ]
