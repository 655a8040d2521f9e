"""Bootstrap (composition root) for termshapes.

Assembles the application at runtime: wires concrete adapters to the term
shape handlers and builds the display manager.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `termshapes.adapters`, `termshapes.service_layer`,
  `termshapes.interfaces`, `termshapes.domain`, and `termshapes.config`.
- Inner layers must not import `termshapes.bootstrap`.
"""

from .bootstrap import (
    AppContainer,
    bootstrap_from_file,
    bootstrap_in_memory,
    build_display_manager,
)

__all__ = [
    "AppContainer",
    "bootstrap_from_file",
    "bootstrap_in_memory",
    "build_display_manager",
]
