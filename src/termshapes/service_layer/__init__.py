"""Service layer for termshapes.

Implements the term shape handlers and the display manager that dispatches
shapes to them, the way a host display pipeline would.

Dependency rule: may import `termshapes.domain` and `termshapes.interfaces`,
but not `termshapes.adapters` or `termshapes.entrypoints`.
"""
