"""
Docstore exception hierarchy.

Store and search operations have no error taxonomy of their own: faults
raised while evaluating a query propagate unchanged. The classes here cover
the library-level concerns around them (configuration and the like).
"""


class DocstoreError(Exception):
    """Base exception class for all docstore errors."""


class ConfigurationError(DocstoreError):
    """Raised for configuration errors (missing keys, invalid values)."""
