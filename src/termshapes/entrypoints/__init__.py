"""Entrypoints (inbound adapters) for termshapes.

Expose the application to the outside world (currently the CLI). Parse and
validate inputs, call the bootstrap facades, and present results.

Dependency rule: may import `termshapes.bootstrap` and `termshapes.domain`.
"""
