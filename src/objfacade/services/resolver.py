"""AccessorResolver — find the field or method behind a logical name."""

from __future__ import annotations

from typing import TYPE_CHECKING

from objfacade.domain.conventions import NamingConvention
from objfacade.domain.types import Direction

if TYPE_CHECKING:
    from objfacade.domain.descriptors import FieldDescriptor, MethodDescriptor
    from objfacade.domain.members import TypeDescriptor


class AccessorResolver:
    """Resolve fields by exact name and methods by naming convention.

    There is no case-insensitive or fuzzy fallback: a miss is ``None``.
    """

    def __init__(
        self,
        descriptor: TypeDescriptor,
        convention: NamingConvention | None = None,
    ) -> None:
        self._descriptor = descriptor
        self._convention = convention or NamingConvention()

    @property
    def convention(self) -> NamingConvention:
        return self._convention

    def resolve_field(self, name: str) -> FieldDescriptor | None:
        return self._descriptor.field(name)

    def resolve_method(self, logical_name: str, direction: Direction) -> MethodDescriptor | None:
        """Return the first method named by the convention's prefixes."""
        for candidate in self._convention.candidates(logical_name, direction):
            method = self._descriptor.method(candidate)
            if method is not None:
                return method
        return None

    def resolve_getter(self, logical_name: str) -> MethodDescriptor | None:
        return self.resolve_method(logical_name, Direction.READ)

    def resolve_setter(self, logical_name: str) -> MethodDescriptor | None:
        return self.resolve_method(logical_name, Direction.WRITE)
