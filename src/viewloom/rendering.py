"""Render-time dispatch for compiled view units.

A sub-template is the view itself, an attached partial, or a block the
view defines.  Rendering a partial composes it with the view: every block
both of them declare is rendered from the view and handed to the
partial's ``render_stream()`` as pre-rendered blocks.  A layout declaring
``{% block body %}{% end %}`` therefore renders the view's ``body`` block
in place.  Blocks the partial does not declare are never rendered.

Templates are streamed to the sink chunk by chunk.

Engine and sink failures are wrapped in :class:`ExecutionError`; output
already written to the sink is not retracted.
"""

from __future__ import annotations

import dataclasses
import io
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Protocol

from viewloom.errors import ExecutionError

if TYPE_CHECKING:
    from viewloom.compiler import ViewUnit
    from viewloom.registry import Handle


class Sink(Protocol):
    """Anything output can be written to: buffers, files, response writers."""

    def write(self, data: Any, /) -> object: ...


def render(handle: Handle, name: str, sink: Sink, data: Any = None) -> None:
    """Render sub-template *name* of the handle's view into *sink*.

    Equivalent to ``handle.render(name, sink, data)``.

    Raises:
        NotFoundError: The handle came from a failed lookup. *sink* is
            not touched.
        ExecutionError: *name* is not available in the view, the data
            cannot be used as a context, or rendering failed.
    """
    handle.render(name, sink, data)


def render_unit(unit: ViewUnit, name: str, sink: Sink, data: Any = None) -> None:
    """Render sub-template *name* within *unit* and write the output to *sink*.

    *name* is the view's own path, an attached partial, or a block the
    view defines (e.g. ``"body"``).
    """
    view = unit.view
    template = unit.get(name)
    if template is None and name not in view.list_blocks():
        available = ", ".join([*unit.template_names, *sorted(view.list_blocks())])
        raise ExecutionError(
            unit.name,
            name,
            f"no template or block named {name!r} in this view (available: {available})",
        )

    context = build_context(data, view=unit.name, template=name)
    write = _writer(sink, unit.encoding)

    try:
        if template is None:
            write(view.render_block(name, context))
            return

        if name != unit.name:
            # Only blocks the sub-template declares; unused view blocks never run
            wanted = set(view.list_blocks()) & set(template.list_blocks())
            blocks = {block: view.render_block(block, context) for block in sorted(wanted)}
            if blocks:
                context = {**context, "_cached_blocks": blocks}

        for chunk in template.render_stream(context):
            write(chunk)
    except Exception as exc:
        raise ExecutionError(unit.name, name, _describe(exc)) from exc


def build_context(data: Any, *, view: str, template: str) -> dict[str, Any]:
    """Turn a caller payload into a template context dict.

    ``None`` gives an empty context; mappings are copied; dataclass
    instances contribute their fields and other objects their ``__dict__``.
    """
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return dict(data)
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return {f.name: getattr(data, f.name) for f in dataclasses.fields(data)}
    if hasattr(data, "__dict__"):
        return dict(vars(data))
    raise ExecutionError(
        view,
        template,
        f"cannot use {type(data).__name__} as template data; "
        "pass a mapping, a dataclass instance or an object with attributes",
    )


def _writer(sink: Sink, encoding: str) -> Callable[[str], object]:
    """Return a ``write(str)`` callable for *sink*, encoding for binary sinks."""
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return lambda text: sink.write(text.encode(encoding))
    return sink.write


def _describe(exc: Exception) -> str:
    message = getattr(exc, "message", None) or str(exc)
    return f"{type(exc).__name__}: {message}"
