"""ProbeService — describe, read, and write targets named on the command line.

A target spec is ``module:attribute`` (``pkg.settings:config``); the attribute
part may be dotted to reach a nested object. The imported object is bound to
an :class:`ObjectFacade`, and every diagnostic raised during the operation
is returned as a result warning.
"""

from __future__ import annotations

import importlib
import json
import logging
import sys
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic_core import to_jsonable_python

from objfacade.domain.typecheck import type_name
from objfacade.domain.types import Via
from objfacade.infrastructure.diagnostics import CollectingSink, StructlogSink
from objfacade.services.gateway import InvalidTargetError, ObjectFacade
from objfacade.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from objfacade.config.settings import FacadeSettings
    from objfacade.domain.descriptors import FieldDescriptor, MethodDescriptor

logger = logging.getLogger(__name__)

_ABSENT = object()
T = TypeVar("T")


class TargetLoadError(Exception):
    """The target spec could not be imported or resolved."""


def parse_value(raw: str) -> Any:
    """Parse a CLI value as JSON, falling back to the raw string.

    Examples:
        >>> parse_value("7")
        7
        >>> parse_value("null") is None
        True
        >>> parse_value("Ada")
        'Ada'
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _jsonable(value: Any) -> Any:
    return to_jsonable_python(value, fallback=repr)


def _field_row(field: FieldDescriptor) -> dict[str, Any]:
    return {
        "name": field.name,
        "type": type_name(field.annotation),
        "public": field.public,
        "static": field.static,
        "nullable": field.nullable,
        "readonly": field.readonly,
    }


def _method_row(method: MethodDescriptor) -> dict[str, Any]:
    params = []
    for p in method.parameters:
        label = f"*{p.name}" if p.variadic else p.name
        params.append(f"{label}: {type_name(p.annotation)}" if p.typed else label)
    return {
        "name": method.name,
        "parameters": ", ".join(params),
        "returns": type_name(method.returns.annotation) if method.returns else "-",
        "required": method.required_count,
        "public": method.public,
        "static": method.static,
    }


class ProbeService:
    """CLI-facing operations over an :class:`ObjectFacade`."""

    def __init__(self, settings: FacadeSettings) -> None:
        self._settings = settings

    def load_target(self, spec: str) -> object:
        """Import ``module:attribute`` relative to the project root."""
        module_name, sep, attr_path = spec.partition(":")
        if not sep or not module_name or not attr_path:
            msg = f"Target must look like 'module:attribute', got {spec!r}"
            raise TargetLoadError(msg)

        root = str(self._settings.project_root)
        if root not in sys.path:
            sys.path.insert(0, root)

        try:
            obj: Any = importlib.import_module(module_name)
        except ImportError as exc:
            msg = f"Cannot import module {module_name!r}: {exc}"
            raise TargetLoadError(msg) from exc
        for part in attr_path.split("."):
            try:
                obj = getattr(obj, part)
            except AttributeError as exc:
                msg = f"{spec!r} has no attribute {part!r}"
                raise TargetLoadError(msg) from exc
        return obj

    def _bind(self, op: str, spec: str) -> tuple[ObjectFacade, CollectingSink] | ServiceResult:
        forward = StructlogSink() if self._settings.verbose else None
        sink = CollectingSink(forward=forward)
        try:
            target = self.load_target(spec)
            facade = ObjectFacade.from_settings(target, self._settings, sink=sink)
        except (TargetLoadError, InvalidTargetError) as exc:
            error = ServiceError(code="INVALID_TARGET", message=str(exc), detail={"target": spec})
            return ServiceResult(ok=False, op=op, error=error)
        return facade, sink

    def describe(self, spec: str) -> ServiceResult:
        """List the target's fields and methods with their policy flags."""
        bound = self._bind("describe", spec)
        if isinstance(bound, ServiceResult):
            return bound
        facade, _ = bound
        descriptor = facade.descriptor
        return ServiceResult(
            ok=True,
            op="describe",
            data={
                "target": spec,
                "type": descriptor.type_name,
                "fields": [_field_row(f) for f in sorted_members(descriptor.fields)],
                "methods": [_method_row(m) for m in sorted_members(descriptor.methods)],
            },
        )

    def get(self, spec: str, name: str, *, via: Via = Via.AUTO) -> ServiceResult:
        """Read *name* through a field or a getter."""
        bound = self._bind("get", spec)
        if isinstance(bound, ServiceResult):
            return bound
        facade, sink = bound

        resolved = self._choose(facade, name, via, getter=True)
        if resolved is None:
            return self._not_found("get", spec, name, via)
        if resolved == Via.FIELD:
            value = facade.read_field(name, default=_ABSENT)
        else:
            value = facade.read_via_method(name, default=_ABSENT)

        if value is _ABSENT:
            return self._rejected("get", spec, name, resolved, sink)
        return ServiceResult(
            ok=True,
            op="get",
            data={"name": name, "via": str(resolved), "value": _jsonable(value)},
            warnings=sink.messages,
        )

    def set(self, spec: str, name: str, value: Any, *, via: Via = Via.AUTO) -> ServiceResult:
        """Write *value* to *name* through a field or a setter."""
        bound = self._bind("set", spec)
        if isinstance(bound, ServiceResult):
            return bound
        facade, sink = bound

        resolved = self._choose(facade, name, via, getter=False)
        if resolved is None:
            return self._not_found("set", spec, name, via)
        if resolved == Via.FIELD:
            written = facade.write_field(name, value)
        else:
            written = facade.write_via_method(name, value)

        if not written:
            return self._rejected("set", spec, name, resolved, sink)
        return ServiceResult(
            ok=True,
            op="set",
            data={"name": name, "via": str(resolved), "value": _jsonable(value)},
            warnings=sink.messages,
        )

    @staticmethod
    def _choose(facade: ObjectFacade, name: str, via: Via, *, getter: bool) -> Via | None:
        """Pick the accessor kind; ``auto`` prefers the field."""
        if via != Via.METHOD and facade.has_field(name):
            return Via.FIELD
        if via == Via.FIELD:
            return None
        method = facade.resolve_getter(name) if getter else facade.resolve_setter(name)
        return Via.METHOD if method is not None else None

    @staticmethod
    def _not_found(op: str, spec: str, name: str, via: Via) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="NOT_FOUND",
                message=f"No accessor for {name!r} on {spec}",
                detail={"name": name, "via": str(via)},
            ),
        )

    @staticmethod
    def _rejected(op: str, spec: str, name: str, via: Via, sink: CollectingSink) -> ServiceResult:
        messages = sink.messages
        return ServiceResult(
            ok=False,
            op=op,
            warnings=messages,
            error=ServiceError(
                code="REJECTED",
                message=messages[-1] if messages else f"Access to {name!r} was rejected",
                detail={"name": name, "via": str(via), "target": spec},
            ),
        )


def sorted_members(members: Mapping[str, T]) -> list[T]:
    return [members[name] for name in sorted(members)]
