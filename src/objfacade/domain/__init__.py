"""Domain layer — descriptors, conventions, and runtime type rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
