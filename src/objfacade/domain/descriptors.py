"""Member descriptors, diagnostics, and validation verdicts.

All value types here are frozen. Descriptors are produced once per bound
object by :class:`objfacade.domain.members.TypeDescriptor`; diagnostics and
verdicts live for a single gateway call.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel

from objfacade.domain.typecheck import UNTYPED
from objfacade.domain.types import Severity


class ParameterDescriptor(BaseModel):
    """One positional parameter of a method.

    A variadic (``*args``) parameter covers every remaining position.
    """

    model_config = {"frozen": True}

    position: int
    name: str
    annotation: Any = UNTYPED
    nullable: bool = True
    variadic: bool = False

    @property
    def typed(self) -> bool:
        return self.annotation is not UNTYPED


class ReturnDescriptor(BaseModel):
    """Declared return type of a method."""

    model_config = {"frozen": True}

    annotation: Any
    nullable: bool


class FieldDescriptor(BaseModel):
    """An attribute reachable by name on the bound object."""

    model_config = {"frozen": True}

    kind: Literal["field"] = "field"
    name: str
    annotation: Any = UNTYPED
    public: bool = True
    static: bool = False
    nullable: bool = True
    readonly: bool = False


class MethodDescriptor(BaseModel):
    """A callable member of the bound object's type.

    Attributes:
        parameters: Positional parameters, excluding ``self`` / ``cls``.
        returns: Declared return type, or None when unannotated.
        required_count: Parameters without a default, keyword-only included.
        keyword_required: Keyword-only parameters without a default. A
            positional call can never satisfy them.
    """

    model_config = {"frozen": True}

    kind: Literal["method"] = "method"
    name: str
    public: bool = True
    static: bool = False
    parameters: tuple[ParameterDescriptor, ...] = ()
    returns: ReturnDescriptor | None = None
    required_count: int = 0
    keyword_required: int = 0

    def parameter_at(self, position: int) -> ParameterDescriptor | None:
        """Parameter receiving the argument at *position*, if any."""
        if position < len(self.parameters):
            return self.parameters[position]
        if self.parameters and self.parameters[-1].variadic:
            return self.parameters[-1]
        return None


AccessCandidate = FieldDescriptor | MethodDescriptor | None
"""Result of resolution; None means no accessor matched."""


class Diagnostic(BaseModel):
    """Why an access was rejected (or allowed with a warning)."""

    model_config = {"frozen": True}

    severity: Severity
    template: str
    subject: str

    @property
    def message(self) -> str:
        return self.template % self.subject


class Verdict(BaseModel):
    """Outcome of validating one accessor.

    Attributes:
        accepted: Whether the access may proceed.
        diagnostic: The single diagnostic emitted for this decision, if any.
        value: Live value obtained while validating a getter.
    """

    model_config = {"frozen": True}

    accepted: bool
    diagnostic: Diagnostic | None = None
    value: Any = None


ACCEPTED = Verdict(accepted=True)
