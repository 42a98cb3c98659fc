"""TypeDescriptor — the per-object view of accessible members.

The class part is built once from ``type(obj)``, walked with
``inspect.getattr_static`` so no descriptor is triggered, and cached: the
type of a bound instance cannot change. Instance attributes can, so they are
read from the live ``__dict__`` on every lookup. Annotations are resolved
with ``typing.get_type_hints``; when that fails, each annotation is resolved
on its own and the ones that still cannot be resolved stay as strings, which
count as untyped.

Classification rules:
- ``staticmethod`` / ``classmethod`` -> static method.
- ``property`` -> instance field (read-only without a setter).
- other callables defined on the class -> instance method, unless the
  instance shadows the name.
- ``ClassVar[...]`` annotation -> static field.
- annotated names, ``__slots__`` entries, and instance attributes -> fields.
- unannotated class data the instance does not shadow -> static field.

Dunder names are never described.
"""

from __future__ import annotations

import inspect
import logging
import sys
from collections.abc import Callable, Mapping
from functools import cached_property
from typing import Any, get_type_hints

from objfacade.domain.descriptors import (
    FieldDescriptor,
    MethodDescriptor,
    ParameterDescriptor,
    ReturnDescriptor,
)
from objfacade.domain.typecheck import UNTYPED, allows_none, is_classvar

logger = logging.getLogger(__name__)

DEFAULT_PRIVATE_PREFIX = "_"


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _resolve_each(
    raw: Mapping[str, Any],
    globalns: dict[str, Any],
    localns: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Evaluate string annotations one at a time; failures stay strings."""
    resolved: dict[str, Any] = {}
    for name, annotation in raw.items():
        if isinstance(annotation, str):
            try:
                annotation = eval(annotation, globalns, dict(localns or {}))  # noqa: S307
            except (NameError, AttributeError, SyntaxError, TypeError):
                pass
        resolved[name] = annotation
    return resolved


def _class_hints(owner: type) -> dict[str, Any]:
    try:
        return get_type_hints(owner)
    except (NameError, TypeError, AttributeError):
        logger.debug("Resolving annotations of %s one by one", owner.__qualname__, exc_info=True)
    merged: dict[str, Any] = {}
    for klass in reversed(owner.__mro__):
        module = sys.modules.get(klass.__module__)
        globalns = dict(vars(module)) if module is not None else {}
        merged.update(_resolve_each(inspect.get_annotations(klass), globalns, vars(klass)))
    return merged


def _function_hints(func: Callable[..., Any]) -> dict[str, Any]:
    try:
        return get_type_hints(func)
    except (NameError, TypeError, AttributeError):
        logger.debug("Resolving annotations of %r one by one", func, exc_info=True)
    try:
        raw = inspect.get_annotations(func)
    except TypeError:
        return {}
    return _resolve_each(raw, getattr(inspect.unwrap(func), "__globals__", {}))


def _live_attrs(obj: object) -> Mapping[str, Any]:
    try:
        return vars(obj)
    except TypeError:
        return {}


class TypeDescriptor:
    """Fields and methods of one bound object, keyed by name.

    A name is either a field or a method, never both. Lookups never raise;
    absence is ``None``. Class-derived members are fixed at construction;
    instance attributes are consulted live, so an attribute added to the
    target later is visible and one that shadows a method hides it.
    """

    def __init__(
        self,
        type_name: str,
        fields: Mapping[str, FieldDescriptor],
        methods: Mapping[str, MethodDescriptor],
        *,
        class_data: frozenset[str] = frozenset(),
        instance: object = None,
        private_prefix: str = DEFAULT_PRIVATE_PREFIX,
    ) -> None:
        self.type_name = type_name
        self._fields = dict(fields)
        self._methods = dict(methods)
        # Unannotated class attributes: static until the instance shadows them.
        self._class_data = class_data
        self._instance = instance
        self._private_prefix = private_prefix

    def _live(self) -> Mapping[str, Any]:
        if self._instance is None:
            return {}
        return _live_attrs(self._instance)

    def _public(self, name: str) -> bool:
        return not (self._private_prefix and name.startswith(self._private_prefix))

    def _instance_field(self, name: str) -> FieldDescriptor:
        return FieldDescriptor(name=name, public=self._public(name))

    @property
    def fields(self) -> Mapping[str, FieldDescriptor]:
        merged = dict(self._fields)
        for name in self._live():
            field = self.field(name)
            if field is not None:
                merged[name] = field
        return merged

    @property
    def methods(self) -> Mapping[str, MethodDescriptor]:
        live = self._live()
        return {name: m for name, m in self._methods.items() if name not in live}

    def has_field(self, name: str) -> bool:
        return self.field(name) is not None

    def has_method(self, name: str) -> bool:
        return self.method(name) is not None

    def field(self, name: str) -> FieldDescriptor | None:
        declared = self._fields.get(name)
        if _is_dunder(name) or name not in self._live():
            return declared
        if declared is None or name in self._class_data:
            return self._instance_field(name)
        return declared

    def method(self, name: str) -> MethodDescriptor | None:
        if name in self._live():
            return None
        return self._methods.get(name)

    @classmethod
    def from_type(
        cls,
        owner: type,
        *,
        private_prefix: str = DEFAULT_PRIVATE_PREFIX,
    ) -> TypeDescriptor:
        """Describe the members *owner* declares, without any instance."""
        return cls._build(owner, None, private_prefix)

    @classmethod
    def from_instance(
        cls,
        obj: object,
        *,
        private_prefix: str = DEFAULT_PRIVATE_PREFIX,
    ) -> TypeDescriptor:
        """Describe *obj*'s type, with *obj*'s attributes looked up live."""
        return cls._build(type(obj), obj, private_prefix)

    @classmethod
    def _build(cls, owner: type, obj: object, private_prefix: str) -> TypeDescriptor:
        hints = _class_hints(owner)

        def public(name: str) -> bool:
            return not (private_prefix and name.startswith(private_prefix))

        fields: dict[str, FieldDescriptor] = {}
        methods: dict[str, MethodDescriptor] = {}
        class_data: set[str] = set()

        for name in dir(owner):
            if _is_dunder(name):
                continue
            try:
                raw = inspect.getattr_static(owner, name)
            except AttributeError:
                continue

            if isinstance(raw, (staticmethod, classmethod)):
                methods[name] = _describe_method(
                    name,
                    raw.__func__,
                    public=public(name),
                    static=True,
                    drop_first=isinstance(raw, classmethod),
                )
            elif isinstance(raw, property):
                annotation = UNTYPED
                if raw.fget is not None:
                    annotation = _function_hints(raw.fget).get("return", UNTYPED)
                fields[name] = FieldDescriptor(
                    name=name,
                    annotation=annotation,
                    public=public(name),
                    nullable=allows_none(annotation),
                    readonly=raw.fset is None,
                )
            elif callable(raw) and not isinstance(raw, type):
                methods[name] = _describe_method(name, raw, public=public(name), static=False)
            else:
                annotation = hints.get(name, UNTYPED)
                if name in hints:
                    static = is_classvar(annotation)
                elif inspect.isdatadescriptor(raw) or isinstance(raw, cached_property):
                    static = False
                else:
                    static = True
                    class_data.add(name)
                fields[name] = FieldDescriptor(
                    name=name,
                    annotation=annotation,
                    public=public(name),
                    static=static,
                    nullable=allows_none(annotation),
                )

        # Declared-but-unset annotations.
        for name, annotation in hints.items():
            if _is_dunder(name) or name in fields or name in methods:
                continue
            fields[name] = FieldDescriptor(
                name=name,
                annotation=annotation,
                public=public(name),
                static=is_classvar(annotation),
                nullable=allows_none(annotation),
            )

        logger.debug(
            "Described %s: %d fields, %d methods", owner.__qualname__, len(fields), len(methods)
        )
        return cls(
            owner.__qualname__,
            fields,
            methods,
            class_data=frozenset(class_data),
            instance=obj,
            private_prefix=private_prefix,
        )


def _describe_method(
    name: str,
    func: Callable[..., Any],
    *,
    public: bool,
    static: bool,
    drop_first: bool | None = None,
) -> MethodDescriptor:
    """Build a MethodDescriptor from the unbound function behind a member.

    ``self`` (or ``cls``) is dropped unless the member is a plain staticmethod.
    Signatures that cannot be inspected are described as ``(*args)``.
    """
    if drop_first is None:
        drop_first = not static
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return MethodDescriptor(
            name=name,
            public=public,
            static=static,
            parameters=(ParameterDescriptor(position=0, name="args", variadic=True),),
        )

    hints = _function_hints(func)
    params = list(signature.parameters.values())
    if drop_first and params and params[0].kind is not inspect.Parameter.VAR_POSITIONAL:
        params = params[1:]

    parameters: list[ParameterDescriptor] = []
    required = 0
    keyword_required = 0
    for param in params:
        if param.kind is inspect.Parameter.VAR_KEYWORD:
            continue
        if param.kind is inspect.Parameter.KEYWORD_ONLY:
            if param.default is inspect.Parameter.empty:
                required += 1
                keyword_required += 1
            continue
        variadic = param.kind is inspect.Parameter.VAR_POSITIONAL
        if not variadic and param.default is inspect.Parameter.empty:
            required += 1
        annotation = hints.get(param.name, param.annotation)
        parameters.append(
            ParameterDescriptor(
                position=len(parameters),
                name=param.name,
                annotation=annotation,
                nullable=allows_none(annotation) or param.default is None,
                variadic=variadic,
            )
        )

    returns: ReturnDescriptor | None = None
    return_annotation = hints.get("return", signature.return_annotation)
    if return_annotation is not inspect.Signature.empty:
        returns = ReturnDescriptor(
            annotation=return_annotation, nullable=allows_none(return_annotation)
        )

    return MethodDescriptor(
        name=name,
        public=public,
        static=static,
        parameters=tuple(parameters),
        returns=returns,
        required_count=required,
        keyword_required=keyword_required,
    )
