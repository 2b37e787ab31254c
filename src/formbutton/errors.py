"""formbutton exception hierarchy.

Shared across the validator, synthesizer, and component so every module
raises and catches the same types. Misuse errors also subclass
``ValueError`` so generic callers can catch them without importing
formbutton.
"""


class FormButtonError(Exception):
    """Base for all formbutton-specific errors."""


class ConfigurationError(FormButtonError):
    """Raised when a ``ButtonConfig`` is invalid."""


class MissingLabelError(FormButtonError, ValueError):
    """Raised when a button has no content, no label, and no ``label`` option."""


class InvalidDestinationError(FormButtonError, ValueError):
    """Raised when a destination is empty, unresolvable, or uses an unsafe scheme."""


class InvalidMethodError(FormButtonError, ValueError):
    """Raised when a method is not one of the recognized HTTP verbs."""
