"""Event bindings for form buttons, rendered as Alpine.js listeners.

Each binding is an Alpine expression. Modifiers follow Alpine's syntax:
``capture_click`` becomes ``x-on:click.capture`` and ``window_keydown``
becomes ``x-on:keydown.window``::

    Events(click="open = false", window_keyup="close()")
    # {"x-on:click": "open = false", "x-on:keyup.window": "close()"}
"""

from dataclasses import dataclass, fields

# field name -> (DOM event, Alpine modifier)
_EVENT_NAMES: dict[str, tuple[str, str]] = {
    "click": ("click", ""),
    "capture_click": ("click", ".capture"),
    "submit": ("submit", ""),
    "blur": ("blur", ""),
    "focus": ("focus", ""),
    "window_blur": ("blur", ".window"),
    "window_focus": ("focus", ".window"),
    "keydown": ("keydown", ""),
    "keyup": ("keyup", ""),
    "window_keydown": ("keydown", ".window"),
    "window_keyup": ("keyup", ".window"),
}


@dataclass(frozen=True, slots=True)
class Events:
    """Event handler expressions to attach to a button. Unset events are skipped."""

    click: str | None = None
    capture_click: str | None = None
    submit: str | None = None
    blur: str | None = None
    focus: str | None = None
    window_blur: str | None = None
    window_focus: str | None = None
    keydown: str | None = None
    keyup: str | None = None
    window_keydown: str | None = None
    window_keyup: str | None = None


def events_to_attrs(events: Events | None, prefix: str = "x-on:") -> dict[str, str]:
    """Convert *events* into an ordered mapping of listener attributes."""
    if events is None:
        return {}
    attrs: dict[str, str] = {}
    for f in fields(events):
        value = getattr(events, f.name)
        if not value:
            continue
        event, modifier = _EVENT_NAMES[f.name]
        attrs[f"{prefix}{event}{modifier}"] = value
    return attrs
