"""Support namespace for cross-cutting, dependency-light helpers.

Scope:
- Small, stateless helpers with minimal dependencies (string formatting,
  class-name sanitizing).
- No business rules, no orchestration, no wiring.

Import direction:
- May be imported by any termshapes package.
- Must not import from application packages.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules.
"""
