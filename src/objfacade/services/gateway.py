"""ObjectFacade — policy-enforcing reads and writes on one bound object.

Every operation follows resolve -> validate -> invoke-or-reject and has a
total signature: rejections return the caller's default (reads) or False
(writes) and are explained only through the diagnostics sink.

Usage::

    facade = ObjectFacade(account)
    facade.write_field("name", "Ada")          # True
    facade.read_via_method("id")              # account.getId()
    facade.write_via_method("amount", None)   # False unless setAmount accepts None
"""

from __future__ import annotations

import logging
import types
from typing import TYPE_CHECKING, Any

from objfacade.domain.conventions import NamingConvention
from objfacade.domain.members import DEFAULT_PRIVATE_PREFIX, TypeDescriptor
from objfacade.domain.types import Severity
from objfacade.infrastructure.diagnostics import StructlogSink
from objfacade.services.resolver import AccessorResolver
from objfacade.services.validator import AccessValidator

if TYPE_CHECKING:
    from objfacade.config.settings import FacadeSettings
    from objfacade.domain.descriptors import FieldDescriptor, MethodDescriptor
    from objfacade.infrastructure.diagnostics import DiagnosticSink

logger = logging.getLogger(__name__)

FIELD_READ_FAILED = "Field %s could not be read"
FIELD_WRITE_FAILED = "Field %s could not be assigned"
METHOD_CALL_FAILED = "Method %s raised while being invoked"


class InvalidTargetError(TypeError):
    """Raised when a facade is bound to something that is not an instance."""


class ObjectFacade:
    """Gateway for named field access on a single object.

    The target is fixed for the facade's lifetime. Its :class:`TypeDescriptor`
    is built at construction: class members are cached, instance attributes
    are looked up live. Nothing else is kept between calls.

    Args:
        target: The instance to access. ``None``, classes, and modules are
            rejected with :class:`InvalidTargetError`.
        sink: Diagnostics sink (default: :class:`StructlogSink`).
        convention: Getter/setter prefix rules.
        private_prefix: Names starting with this prefix are non-public.
    """

    def __init__(
        self,
        target: object,
        *,
        sink: DiagnosticSink | None = None,
        convention: NamingConvention | None = None,
        private_prefix: str = DEFAULT_PRIVATE_PREFIX,
    ) -> None:
        if target is None or isinstance(target, (type, types.ModuleType)):
            msg = f"That is not a valid object: {target!r}"
            raise InvalidTargetError(msg)
        self._target = target
        self._sink: DiagnosticSink = sink if sink is not None else StructlogSink()
        self._convention = convention or NamingConvention()
        self._validator = AccessValidator(self._sink)
        self._descriptor = TypeDescriptor.from_instance(target, private_prefix=private_prefix)
        self._resolver = AccessorResolver(self._descriptor, self._convention)

    @classmethod
    def from_settings(
        cls,
        target: object,
        settings: FacadeSettings,
        *,
        sink: DiagnosticSink | None = None,
    ) -> ObjectFacade:
        """Bind *target* using the conventions and policy from *settings*."""
        return cls(
            target,
            sink=sink,
            convention=settings.conventions,
            private_prefix=settings.policy.private_prefix,
        )

    @property
    def target(self) -> object:
        return self._target

    @property
    def descriptor(self) -> TypeDescriptor:
        """Member view of the target."""
        return self._descriptor

    @property
    def resolver(self) -> AccessorResolver:
        return self._resolver

    @property
    def validator(self) -> AccessValidator:
        return self._validator

    # --- Resolution without invocation ---

    def has_field(self, name: str) -> bool:
        return self.descriptor.has_field(name)

    def has_method(self, name: str) -> bool:
        return self.descriptor.has_method(name)

    def resolve_field(self, name: str) -> FieldDescriptor | None:
        return self.resolver.resolve_field(name)

    def resolve_getter(self, name: str) -> MethodDescriptor | None:
        return self.resolver.resolve_getter(name)

    def resolve_setter(self, name: str) -> MethodDescriptor | None:
        return self.resolver.resolve_setter(name)

    # --- Field access ---

    def read_field(self, name: str, default: Any = None) -> Any:
        """Return the field's current value, or *default* if access is rejected."""
        field = self.resolve_field(name)
        if field is None:
            logger.debug("No field %s on %s", name, self.descriptor.type_name)
            return default
        if not self._validator.validate_field(field).accepted:
            return default
        try:
            return getattr(self._target, name)
        except Exception:
            logger.debug("Reading field %s failed", name, exc_info=True)
            self._validator.report(Severity.ERROR, FIELD_READ_FAILED, name)
            return default

    def write_field(self, name: str, value: Any) -> bool:
        """Assign *value* to the field. Returns False if access is rejected."""
        field = self.resolve_field(name)
        if field is None:
            logger.debug("No field %s on %s", name, self.descriptor.type_name)
            return False
        if not self._validator.validate_field(field).accepted:
            return False
        try:
            setattr(self._target, name, value)
        except Exception:
            logger.debug("Assigning field %s failed", name, exc_info=True)
            self._validator.report(Severity.ERROR, FIELD_WRITE_FAILED, name)
            return False
        return True

    # --- Method access ---

    def read_via_method(self, name: str, default: Any = None) -> Any:
        """Return the getter's result, or *default* if access is rejected.

        The getter is invoked exactly once, during validation.
        """
        method = self.resolve_getter(name)
        if method is None:
            logger.debug("No getter for %s on %s", name, self.descriptor.type_name)
            return default
        verdict = self._validator.validate_getter(method, self._target)
        if not verdict.accepted:
            return default
        return verdict.value

    def write_via_method(self, name: str, value: Any) -> bool:
        """Pass *value* to the setter. Returns False if access is rejected.

        A setter declaring no parameters is invoked without an argument.
        """
        method = self.resolve_setter(name)
        if method is None:
            logger.debug("No setter for %s on %s", name, self.descriptor.type_name)
            return False
        if not self._validator.validate_setter(method, value).accepted:
            return False
        args = (value,) if method.parameters else ()
        return self._invoke(method, args)[0]

    def call_method(self, name: str, *args: Any, default: Any = None) -> Any:
        """Call the method *name* (exact, no convention) with positional *args*.

        Returns the method's result, or *default* if the argument list is
        rejected or the call raises.
        """
        method = self.descriptor.method(name)
        if method is None:
            logger.debug("No method %s on %s", name, self.descriptor.type_name)
            return default
        if not self._validator.validate_arguments(method, *args).accepted:
            return default
        ok, result = self._invoke(method, args)
        return result if ok else default

    def _invoke(self, method: MethodDescriptor, args: tuple[Any, ...]) -> tuple[bool, Any]:
        try:
            return True, getattr(self._target, method.name)(*args)
        except Exception:
            logger.debug("Invoking %s failed", method.name, exc_info=True)
            self._validator.report(Severity.ERROR, METHOD_CALL_FAILED, method.name)
            return False, None
