"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, objfacade.toml only holds overrides.
``[conventions]`` maps onto :class:`NamingConvention` directly.
"""

from __future__ import annotations

from pydantic import BaseModel

from objfacade.domain.members import DEFAULT_PRIVATE_PREFIX


class PolicyConfig(BaseModel):
    """[policy] section."""

    model_config = {"frozen": True}

    private_prefix: str = DEFAULT_PRIVATE_PREFIX
