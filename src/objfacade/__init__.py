"""objfacade: policy-enforcing reads and writes of named fields on any object."""

from objfacade.domain.conventions import NamingConvention
from objfacade.domain.descriptors import Diagnostic
from objfacade.domain.types import Direction, Severity
from objfacade.infrastructure.diagnostics import CollectingSink, DiagnosticSink, StructlogSink
from objfacade.services.gateway import InvalidTargetError, ObjectFacade

__version__ = "0.1.0"

__all__ = [
    "CollectingSink",
    "Diagnostic",
    "DiagnosticSink",
    "Direction",
    "InvalidTargetError",
    "NamingConvention",
    "ObjectFacade",
    "Severity",
    "StructlogSink",
    "__version__",
]
