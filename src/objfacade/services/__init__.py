"""Service layer — the access pipeline and the CLI-facing probe service.

Services may import from domain, infrastructure, and config.
They must never import from commands or output.
"""

from objfacade.services.gateway import InvalidTargetError, ObjectFacade
from objfacade.services.resolver import AccessorResolver
from objfacade.services.validator import AccessValidator

__all__ = ["AccessValidator", "AccessorResolver", "InvalidTargetError", "ObjectFacade"]
