"""Infrastructure layer — diagnostics sinks backed by structlog.

May import domain value types. Must never import from services, commands,
or output.
"""
