"""Button configuration.

ButtonConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from formbutton.errors import ConfigurationError, InvalidMethodError
from formbutton.methods import normalize_method


@dataclass(frozen=True, slots=True)
class ButtonConfig:
    """Button configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ButtonConfig(default_method="delete", strict_destinations=True)
    """

    # Synthesis
    default_method: str = "post"
    csrf_key: str = "csrf_token"  # Key under ``data`` (rendered as data-csrf_token)

    # Method shim: form field names posted to the server
    method_field: str = "_method"
    csrf_field: str = "_csrf_token"  # Matches the CSRF middleware's form field

    # CSRF tokens generated by csrf_scope() (bytes, hex-encoded)
    token_length: int = 32

    # Destinations: only allow same-origin relative paths
    strict_destinations: bool = False

    # Events are rendered as Alpine.js listeners
    event_prefix: str = "x-on:"

    # Used in error messages
    context_label: str = "<Button />"

    # Templates
    autoescape: bool = True

    def __post_init__(self) -> None:
        try:
            normalize_method(self.default_method)
        except InvalidMethodError as exc:
            msg = f"Invalid default_method in ButtonConfig: {exc}"
            raise ConfigurationError(msg) from None
        if not self.csrf_key:
            msg = "ButtonConfig.csrf_key must be a non-empty string"
            raise ConfigurationError(msg)
        if self.token_length < 16:
            msg = f"ButtonConfig.token_length must be at least 16, got {self.token_length}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = ButtonConfig()
