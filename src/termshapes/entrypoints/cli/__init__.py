"""The ``termshapes`` command-line interface."""
