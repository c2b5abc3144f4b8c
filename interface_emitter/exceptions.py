"""Exception hierarchy for the interface emitter.

Rendering itself trusts its caller and never reports bad content. The only
errors raised while rendering signal internal state corruption; the rest
belong to loading model descriptions and to configuration.
"""


class InterfaceEmitterError(Exception):
    """Base exception for all interface emitter errors."""


class InvalidIndentState(InterfaceEmitterError):
    """Raised when the indent depth of a CodeBuilder would go below zero."""


class ModelFormatError(InterfaceEmitterError):
    """Raised when a model description is structurally malformed."""


class ConfigurationError(InterfaceEmitterError):
    """Raised when render options are invalid."""
