"""Registry of compiled views and lookup handles.

``Registry.lookup()`` never raises.  It returns a handle that is either
:class:`Found` (carrying the compiled unit) or :class:`Missing` (carrying
a deferred :class:`NotFoundError`).  The error surfaces only when the
handle is rendered, so call sites can chain::

    registry.lookup("views/index.html").render("base.html", out, data)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from viewloom.compiler import ViewUnit
from viewloom.config import LoaderConfig
from viewloom.errors import NotFoundError
from viewloom.rendering import Sink, render_unit


@dataclass(frozen=True, slots=True)
class Found:
    """Lookup handle for a registered view."""

    unit: ViewUnit

    @property
    def ok(self) -> bool:
        return True

    @property
    def name(self) -> str:
        return self.unit.name

    def render(self, name: str, sink: Sink, data: Any = None) -> None:
        """Render sub-template *name* of this view into *sink*."""
        render_unit(self.unit, name, sink, data)


@dataclass(frozen=True, slots=True)
class Missing:
    """Lookup handle for an unknown view. Rendering raises NotFoundError."""

    name: str

    @property
    def ok(self) -> bool:
        return False

    @property
    def error(self) -> NotFoundError:
        return NotFoundError(self.name)

    def render(self, name: str, sink: Sink, data: Any = None) -> None:
        """Raise the deferred not-found error without touching *sink*."""
        raise self.error


type Handle = Found | Missing


@dataclass(frozen=True, slots=True)
class Registry:
    """Read-only mapping of view path -> compiled unit.

    Built once by :func:`viewloom.build`; safe to share between threads
    and to render from concurrently.

    Attributes:
        units: View path -> :class:`ViewUnit`.
        views: View path -> source, as discovered.
        partials: Partial path -> source, as discovered.
        root: Template root the registry was built from.
        config: Configuration used for the build.
    """

    units: Mapping[str, ViewUnit]
    views: Mapping[str, str] = field(default_factory=dict)
    partials: Mapping[str, str] = field(default_factory=dict)
    root: Path = Path(".")
    config: LoaderConfig = field(default_factory=LoaderConfig)

    def __post_init__(self) -> None:
        for attr in ("units", "views", "partials"):
            value = getattr(self, attr)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, attr, MappingProxyType(dict(value)))

    def lookup(self, name: str) -> Handle:
        """Look up a view by relative path. Never raises."""
        unit = self.units.get(name)
        if unit is None:
            return Missing(name)
        return Found(unit)

    def get(self, name: str) -> ViewUnit | None:
        return self.units.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.units

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.units))

    def __len__(self) -> int:
        return len(self.units)
