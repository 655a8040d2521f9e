"""Interfaces (application boundary) for termshapes.

Defines the contracts of the host collaborators the term shape handlers
depend on: content retrieval, alias resolution, taxonomy term lookup and
shape creation. Business rules stay out of this package.

Dependency rule: may import `termshapes.domain` records only. It may be
imported by `termshapes.service_layer`, `termshapes.adapters`, and
`termshapes.bootstrap`.
"""

from .content import AliasManager, ContentManager, TaxonomyTerms
from .shape_factory import ShapeFactory

__all__ = ["AliasManager", "ContentManager", "ShapeFactory", "TaxonomyTerms"]
