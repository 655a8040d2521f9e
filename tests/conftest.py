"""Global pytest fixtures for termshapes."""

pytest_plugins = [
    "tests.fixtures.content",
]
