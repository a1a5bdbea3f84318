"""Custom exceptions for docregistry."""


class DocRegistryError(Exception):
    """Base exception for docregistry."""
    pass


class ConfigError(DocRegistryError):
    """Configuration errors."""
    pass


class DocumentLoadError(DocRegistryError):
    """Errors reading documents from a file."""
    pass


class IdGenerationError(DocRegistryError):
    """Raised when no usable document id could be generated."""
    pass
