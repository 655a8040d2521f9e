"""Adapters (infrastructure) for termshapes.

Provide concrete implementations of the collaborator interfaces: in-memory
content, alias and term lookups, a read-only JSON content loader, and the
default shape factory.

Dependency rule: may import `termshapes.domain` and `termshapes.interfaces`;
the domain must not import this package.
"""
