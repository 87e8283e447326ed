"""Build entry point and the reloadable registry holder.

``build()`` walks a template root, compiles every view and returns a new
immutable :class:`Registry`.  Nothing is global: callers keep the
registry (or a :class:`TemplateStore`) and pass it to whoever renders.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any

from viewloom.compiler import compile_views
from viewloom.config import LoaderConfig
from viewloom.discovery import walk_tree
from viewloom.errors import ConfigurationError
from viewloom.registry import Handle, Registry

logger = logging.getLogger("viewloom.loader")


def build(root: str | os.PathLike[str], config: LoaderConfig | None = None) -> Registry:
    """Discover and compile the template tree under *root*.

    Args:
        root: Template root directory. Views live in ``<root>/<views_dir>/``,
            everything else is a partial.
        config: Loader configuration. Defaults to :class:`LoaderConfig()`.

    Returns:
        A fully composed, read-only :class:`Registry`.

    Raises:
        DiscoveryError: The tree could not be walked or read.
        EmptyViewsError: No file was classified as a view.
        CompileError: A view or partial failed to parse.
    """
    cfg = config if config is not None else LoaderConfig()
    tree = walk_tree(root, cfg)
    units = compile_views(tree.views, tree.partials, cfg, root=str(tree.root))
    return Registry(
        units=units,
        views=tree.views,
        partials=tree.partials,
        root=tree.root,
        config=cfg,
    )


class TemplateStore:
    """Holds the current registry for a long-lived process.

    ``reload()`` builds a brand-new registry and swaps the reference; units
    already handed to in-flight renders are never mutated.  A failed
    reload raises and keeps the previous registry.

    Usage::

        store = TemplateStore("templates")
        store.load()
        store.lookup("views/index.html").render("base.html", out, data)
    """

    def __init__(
        self,
        root: str | os.PathLike[str],
        config: LoaderConfig | None = None,
    ) -> None:
        self._root = Path(root)
        self._config = config if config is not None else LoaderConfig()
        self._registry: Registry | None = None
        self._lock = threading.Lock()

    @property
    def root(self) -> Path:
        return self._root

    @property
    def config(self) -> LoaderConfig:
        return self._config

    @property
    def loaded(self) -> bool:
        return self._registry is not None

    @property
    def registry(self) -> Registry:
        """The current registry. Raises ConfigurationError before ``load()``."""
        registry = self._registry
        if registry is None:
            raise ConfigurationError(
                f"TemplateStore for {self._root} has not been loaded. Call load() first."
            )
        return registry

    def load(self) -> Registry:
        """Build the registry from the store's root and make it current."""
        with self._lock:
            registry = build(self._root, self._config)
            previous = self._registry
            self._registry = registry

        if previous is None:
            logger.debug("Loaded %d views from %s", len(registry), self._root)
        else:
            logger.debug(
                "Reloaded %s: %d views (was %d)",
                self._root,
                len(registry),
                len(previous),
            )
        return registry

    reload = load

    def lookup(self, name: str) -> Handle:
        """Look up *name* in the current registry."""
        return self.registry.lookup(name)

    def render(self, view: str, name: str, sink: Any, data: Any = None) -> None:
        """Shorthand for ``store.lookup(view).render(name, sink, data)``."""
        self.lookup(view).render(name, sink, data)
