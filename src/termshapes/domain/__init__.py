"""Domain layer for termshapes.

Contains the content and shape records, and the pure rules that derive
alternate names from them. Deliberately technology-agnostic.

Dependency rule: do not import from `termshapes.adapters` or
`termshapes.entrypoints`.
"""
