"""AccessValidator — the access policy applied to every resolved accessor.

Rules run in a fixed order and short-circuit: the first failing rule decides
the outcome and emits exactly one diagnostic to the sink before the verdict
is returned. Errors are policy violations (visibility, staticness, arity,
None into a non-nullable slot); warnings are type mismatches.

INVARIANT: getter validation is the only rule that touches the target; it
invokes the getter once and the verdict carries the obtained value.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from objfacade.domain.descriptors import ACCEPTED, Diagnostic, Verdict
from objfacade.domain.typecheck import type_accepts
from objfacade.domain.types import Severity

if TYPE_CHECKING:
    from objfacade.domain.descriptors import (
        FieldDescriptor,
        MethodDescriptor,
        ParameterDescriptor,
    )
    from objfacade.infrastructure.diagnostics import DiagnosticSink

logger = logging.getLogger(__name__)

# --- Message templates (one ``%s`` each, filled with the subject) ---

FIELD_NOT_PUBLIC = "Field %s is not public"
FIELD_STATIC = "Field %s is static"
METHOD_NOT_PUBLIC = "Method %s is not public"
METHOD_STATIC = "Method %s is static"
METHOD_NO_PARAMETERS = "Method %s does not accept any parameters"
METHOD_TOO_MANY_REQUIRED = "Method %s requires more than one argument"
METHOD_KEYWORD_REQUIRED = "Method %s requires keyword-only arguments"
METHOD_TOO_FEW_ARGUMENTS = "Method %s received fewer arguments than it requires"
METHOD_RAISED = "Method %s raised while being invoked"
RETURN_NOT_NULLABLE = "Method %s returned None but its return type does not allow None"
PARAMETER_NOT_NULLABLE = "Parameter %s does not accept None"
PARAMETER_TYPE_MISMATCH = "Parameter %s does not accept a value of this type"


class AccessValidator:
    """Classify accessors as accepted or rejected.

    The validator holds no state besides its sink; it never mutates the
    target except by invoking a getter in :meth:`validate_getter`.
    """

    def __init__(self, sink: DiagnosticSink) -> None:
        self._sink = sink

    def report(self, severity: Severity, template: str, subject: str) -> Diagnostic:
        """Build a diagnostic and emit it to the sink."""
        diagnostic = Diagnostic(severity=severity, template=template, subject=subject)
        self._sink.emit(diagnostic.severity, diagnostic.template, diagnostic.subject)
        return diagnostic

    def _reject(self, severity: Severity, template: str, subject: str) -> Verdict:
        return Verdict(accepted=False, diagnostic=self.report(severity, template, subject))

    # --- Fields ---

    def validate_field(self, field: FieldDescriptor) -> Verdict:
        if not field.public:
            return self._reject(Severity.ERROR, FIELD_NOT_PUBLIC, field.name)
        if field.static:
            return self._reject(Severity.ERROR, FIELD_STATIC, field.name)
        return ACCEPTED

    # --- Methods ---

    def validate_method_shape(self, method: MethodDescriptor) -> Verdict:
        if not method.public:
            return self._reject(Severity.ERROR, METHOD_NOT_PUBLIC, method.name)
        if method.static:
            return self._reject(Severity.ERROR, METHOD_STATIC, method.name)
        return ACCEPTED

    def validate_setter(self, method: MethodDescriptor, value: Any) -> Verdict:
        """Check that *method* can be called with *value* as its only argument.

        A setter without parameters is accepted with a warning; the caller
        then invokes it without an argument. Required keyword-only parameters
        are rejected first, since a single positional value cannot fill them.
        """
        verdict = self.validate_method_shape(method)
        if not verdict.accepted:
            return verdict
        if method.keyword_required:
            return self._reject(Severity.ERROR, METHOD_KEYWORD_REQUIRED, method.name)
        if not method.parameters:
            warning = self.report(Severity.WARNING, METHOD_NO_PARAMETERS, method.name)
            return Verdict(accepted=True, diagnostic=warning)
        if method.required_count > 1:
            return self._reject(Severity.ERROR, METHOD_TOO_MANY_REQUIRED, method.name)
        return self._check_argument(method, method.parameters[0], value)

    def validate_getter(self, method: MethodDescriptor, target: object) -> Verdict:
        """Invoke the getter on *target* and check the returned value.

        Nullability is checked against the live value, so validating and
        reading are one step. An exception raised by the getter is a
        rejection, never propagated.
        """
        verdict = self.validate_method_shape(method)
        if not verdict.accepted:
            return verdict
        try:
            value = getattr(target, method.name)()
        except Exception:
            logger.debug("Getter %s raised", method.name, exc_info=True)
            return self._reject(Severity.ERROR, METHOD_RAISED, method.name)
        if value is None and method.returns is not None and not method.returns.nullable:
            return self._reject(Severity.ERROR, RETURN_NOT_NULLABLE, method.name)
        return Verdict(accepted=True, value=value)

    def validate_arguments(self, method: MethodDescriptor, *args: Any) -> Verdict:
        """Check a full positional argument list against *method*.

        Arguments beyond the declared parameters are ignored; a variadic
        parameter receives every remaining argument.
        """
        if not method.public:
            return self._reject(Severity.ERROR, METHOD_NOT_PUBLIC, method.name)
        if method.keyword_required:
            return self._reject(Severity.ERROR, METHOD_KEYWORD_REQUIRED, method.name)
        if len(args) < method.required_count:
            return self._reject(Severity.ERROR, METHOD_TOO_FEW_ARGUMENTS, method.name)
        for position, value in enumerate(args):
            parameter = method.parameter_at(position)
            if parameter is None:
                break
            verdict = self._check_argument(method, parameter, value)
            if not verdict.accepted:
                return verdict
        return ACCEPTED

    def _check_argument(
        self,
        method: MethodDescriptor,
        parameter: ParameterDescriptor,
        value: Any,
    ) -> Verdict:
        subject = f"{method.name}.{parameter.name}"
        if value is None:
            if parameter.nullable:
                return ACCEPTED
            return self._reject(Severity.ERROR, PARAMETER_NOT_NULLABLE, subject)
        if type_accepts(parameter.annotation, value):
            return ACCEPTED
        return self._reject(Severity.WARNING, PARAMETER_TYPE_MISMATCH, subject)
