"""Two-pass compilation of discovered templates into view units.

Pass 1 compiles every view on its own.  Pass 2 attaches every partial to
every view by compiling it inside that view's private kida Environment.
Each partial is therefore parsed once per view; the cost is paid once at
build time and keeps every view's template namespace self-contained.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from kida import DictLoader, Environment

from viewloom.config import LoaderConfig
from viewloom.errors import CompileError, EmptyViewsError

if TYPE_CHECKING:
    from kida import Template

logger = logging.getLogger("viewloom.compiler")


@dataclass(frozen=True, slots=True)
class ViewUnit:
    """One compiled view plus every partial attached to it.

    Attributes:
        name: The view's relative path, e.g. ``"views/index.html"``.
        environment: The view's private kida Environment.
        templates: Every compiled template in the view's namespace, keyed
            by name. Contains the view itself and all partials.
        encoding: Encoding used when rendering to binary sinks.
    """

    name: str
    environment: Environment
    templates: Mapping[str, Template]
    encoding: str = "utf-8"

    @property
    def view(self) -> Template:
        """The view's own compiled template."""
        return self.templates[self.name]

    @property
    def template_names(self) -> tuple[str, ...]:
        """Sorted names of every template available in this unit."""
        return tuple(sorted(self.templates))

    def get(self, name: str) -> Template | None:
        """Look up a compiled sub-template by name."""
        return self.templates.get(name)


def create_environment(sources: Mapping[str, str], config: LoaderConfig) -> Environment:
    """Create a kida Environment over an in-memory template namespace."""
    return Environment(
        loader=DictLoader(dict(sources)),
        autoescape=config.autoescape,
        auto_reload=False,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )


def compile_views(
    views: Mapping[str, str],
    partials: Mapping[str, str],
    config: LoaderConfig,
    *,
    root: str = ".",
) -> dict[str, ViewUnit]:
    """Compile every view and attach every partial to it.

    Args:
        views: View path -> source.
        partials: Partial path -> source.
        config: Loader configuration (engine options, views directory).
        root: Template root, used only in the empty-views error message.

    Returns:
        View path -> fully composed :class:`ViewUnit`.

    Raises:
        EmptyViewsError: *views* is empty.
        CompileError: A view or partial failed to parse. Pass 1 (views)
            completes before any partial is compiled.
    """
    if not views:
        raise EmptyViewsError(root, config.views_dir)

    # Pass 1: each view standalone
    compiled: dict[str, tuple[Environment, Template]] = {}
    for name in sorted(views):
        env = create_environment({name: views[name], **partials}, config)
        compiled[name] = (env, _compile(env, name))

    # Pass 2: every partial onto every view
    units: dict[str, ViewUnit] = {}
    for name, (env, view_template) in compiled.items():
        templates: dict[str, Template] = {name: view_template}
        for partial in sorted(partials):
            templates[partial] = _compile(env, partial, view=name)
        units[name] = ViewUnit(
            name=name,
            environment=env,
            templates=MappingProxyType(templates),
            encoding=config.encoding,
        )

    logger.debug(
        "Compiled %d views with %d partials attached to each",
        len(units),
        len(partials),
    )
    return units


def _compile(env: Environment, name: str, *, view: str | None = None) -> Template:
    """Compile *name* in *env*, translating engine failures to CompileError."""
    try:
        return env.get_template(name)
    except Exception as exc:
        raise CompileError(
            name,
            getattr(exc, "message", None) or str(exc),
            view=view,
            lineno=getattr(exc, "lineno", None),
        ) from exc
