"""termshapes

Alternate-name resolution for taxonomy shapes. Given a hierarchy of terms it
derives the template alternates a host renderer can pick from and builds the
tree of term item shapes one level at a time.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
