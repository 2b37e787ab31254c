"""Form buttons — state-changing actions behind a real form submission.

A ``Button`` renders a ``<button>`` whose ``data-*`` attributes describe a
form submission (method, destination, CSRF token). The method shim turns
a click into a POST/GET form submit, so destructive actions cannot be
triggered by crawlers, prefetchers, or a plain link being followed.

Usage::

    from formbutton import Button, csrf_scope

    with csrf_scope(token):
        html = Button(
            "/users/1",
            method="delete",
            label="user",
            class_="is-danger",
            opts={"data": {"confirm": "Really?"}},
        ).render()

    # <button class="is-danger" data-method="delete" data-to="/users/1"
    #         data-csrf_token="..." data-confirm="Really?">user</button>

Named parameters (``id``, ``class_``, ``label``, ``method``, ``to``)
always override the same keys inside ``opts``.

All misuse is reported at construction time: ``MissingLabelError``,
``InvalidDestinationError``, ``InvalidMethodError``.
"""

import html
import logging
from dataclasses import dataclass
from typing import Any

from kida.template import Markup

from formbutton.config import DEFAULT_CONFIG, ButtonConfig
from formbutton.csrf import CSRFTokenProvider
from formbutton.destination import validate_destination
from formbutton.errors import MissingLabelError
from formbutton.events import Events, events_to_attrs
from formbutton.methods import Method, normalize_method
from formbutton.routing.table import Resolver
from formbutton.synthesis import Options, merge_events, synthesize, to_ordered
from formbutton.templating.attrs import opts_to_attrs, render_attrs

_log = logging.getLogger("formbutton.button")


def _present(value: Any) -> bool:
    if value is None:
        return False
    return bool(str(value).strip())


def assert_has_visible_content(
    has_child_content: bool,
    explicit_label: str | None,
    options_label: str | None,
    context_label: str = "<Button />",
) -> None:
    """Raise ``MissingLabelError`` unless at least one content source is present."""
    if has_child_content or _present(explicit_label) or _present(options_label):
        return
    msg = f"{context_label} requires a label or content"
    raise MissingLabelError(msg)


@dataclass(frozen=True, slots=True)
class NamedOptions:
    """Values of the named parameters after precedence is applied."""

    id: str | None = None
    class_: Any = None
    label: str | None = None
    method: str | Method | None = None


def apply_named_options(
    options: Options | None,
    *,
    id: str | None = None,
    class_: Any = None,
    label: str | None = None,
    method: str | Method | None = None,
) -> tuple[NamedOptions, dict[str, Any]]:
    """Split named keys out of *options*; explicit arguments win.

    Returns the resolved named values and the remaining options. A ``to``
    key in *options* is discarded: the destination is always explicit.
    """
    rest = to_ordered(options)
    opt_id = rest.pop("id", None)
    opt_class = rest.pop("class", None)
    opt_label = rest.pop("label", None)
    opt_method = rest.pop("method", None)
    if rest.pop("to", None) is not None:
        _log.debug("Ignoring 'to' in button options; the destination argument wins")

    named = NamedOptions(
        id=id if id is not None else opt_id,
        class_=class_ if class_ is not None else opt_class,
        label=label if _present(label) else opt_label,
        method=method if method is not None else opt_method,
    )
    return named, rest


class Button:
    """A button that submits through a form instead of following a link."""

    __slots__ = (
        "_config",
        "_csrf",
        "_events",
        "_options",
        "class_",
        "content",
        "destination",
        "id",
        "label",
        "method",
    )

    def __init__(
        self,
        to: Any,
        *,
        method: str | Method | None = None,
        id: str | None = None,
        class_: Any = None,
        label: str | None = None,
        opts: Options | None = None,
        content: Any = None,
        events: Events | None = None,
        resolver: Resolver | None = None,
        csrf: CSRFTokenProvider | None = None,
        config: ButtonConfig | None = None,
    ) -> None:
        cfg = config or DEFAULT_CONFIG
        options = to_ordered(opts)

        # Fail fast: content is checked before anything else
        has_content = _present(content)
        assert_has_visible_content(has_content, label, options.get("label"), cfg.context_label)

        named, rest = apply_named_options(options, id=id, class_=class_, label=label, method=method)

        self.destination: str = validate_destination(
            to,
            cfg.context_label,
            resolver=resolver,
            strict=cfg.strict_destinations,
        )
        self.method: Method = normalize_method(
            named.method if named.method is not None else cfg.default_method
        )
        self.id = named.id
        self.class_ = named.class_
        self.label = named.label
        self.content = content if has_content else None
        self._options = rest
        self._events = events
        self._csrf = csrf
        self._config = cfg

    def attributes(self) -> dict[str, Any]:
        """Return the ordered attribute mapping (``data`` still nested)."""
        attrs: dict[str, Any] = {}
        if self.id is not None:
            attrs["id"] = self.id
        if self.class_ is not None:
            attrs["class"] = self.class_
        attrs.update(
            synthesize(
                self.destination,
                self.method,
                self._options,
                csrf=self._csrf,
                csrf_key=self._config.csrf_key,
            )
        )
        return merge_events(attrs, events_to_attrs(self._events, self._config.event_prefix))

    def attrs(self) -> list[tuple[str, Any]]:
        """Return the flattened ``(name, value)`` attribute pairs."""
        return opts_to_attrs(self.attributes())

    def body(self) -> Markup:
        """Return the element body: content if given, otherwise the label."""
        value = self.content if self.content is not None else self.label
        if hasattr(value, "__html__"):
            return Markup(value.__html__())
        return Markup(html.escape(str(value)))

    def render(self) -> Markup:
        return Markup(f"<button{render_attrs(self.attrs())}>{self.body()}</button>")

    def __html__(self) -> str:
        return str(self.render())

    def __repr__(self) -> str:
        return f"Button({self.destination!r}, method={self.method.value!r})"


def button(
    label: str | None = None,
    *,
    to: Any,
    method: str | Method | None = None,
    id: str | None = None,
    class_: Any = None,
    opts: Options | None = None,
    content: Any = None,
    events: Events | None = None,
    resolver: Resolver | None = None,
    csrf: CSRFTokenProvider | None = None,
    config: ButtonConfig | None = None,
) -> Markup:
    """Render a form button in one call.

    For use as a template global::

        {{ button("Delete", to="/users/1", method="delete", class_="is-danger") }}
    """
    return Button(
        to,
        method=method,
        id=id,
        class_=class_,
        label=label,
        opts=opts,
        content=content,
        events=events,
        resolver=resolver,
        csrf=csrf,
        config=config,
    ).render()
