"""Filesystem discovery for template trees.

Walks a template root and partitions every file into one of two
namespaces:

- files under ``<views_dir>/`` are **views**, keyed by their relative
  path including the ``<views_dir>/`` prefix
- every other file is a **partial** (layouts, navigation, includes)

Example tree::

    templates/
      base.html          # partial
      nav/menu.html      # partial
      views/
        index.html       # view "views/index.html"
        docs/page.html   # view "views/docs/page.html"

Keys are posix-style paths relative to the root, whatever the platform.
"""

from __future__ import annotations

import enum
import logging
import os
from collections.abc import Mapping, Set
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from viewloom.config import LoaderConfig
from viewloom.errors import DiscoveryError

logger = logging.getLogger("viewloom.discovery")


class Role(enum.Enum):
    """Namespace a discovered file belongs to."""

    VIEW = "view"
    PARTIAL = "partial"


@dataclass(frozen=True, slots=True)
class DiscoveredTree:
    """Result of walking a template root.

    ``views`` and ``partials`` are read-only views over disjoint
    relative-path -> source mappings.
    """

    root: Path
    views: Mapping[str, str] = field(default_factory=dict)
    partials: Mapping[str, str] = field(default_factory=dict)


def classify(relative_path: str, views_dir: str) -> Role:
    """Classify a root-relative posix path as a view or a partial.

    The views directory is matched as a whole leading path segment:
    with ``views_dir="views"``, ``views/x.html`` is a view while
    ``viewsExtra/x.html`` and ``partials/views/x.html`` are partials.
    """
    if relative_path.startswith(f"{views_dir}/"):
        return Role.VIEW
    return Role.PARTIAL


def accepts_extension(ext: str, extensions: Set[str]) -> bool:
    """True if *ext* passes the allow-list. An empty allow-list accepts all."""
    if not extensions:
        return True
    return ext in extensions


def walk_tree(root: str | os.PathLike[str], config: LoaderConfig) -> DiscoveredTree:
    """Walk *root* and collect view and partial sources.

    Args:
        root: Template root directory.
        config: Loader configuration (views directory, allow-list, encoding).

    Returns:
        A :class:`DiscoveredTree` with both content maps populated.

    Raises:
        DiscoveryError: The root is missing or not a directory, or any entry
            could not be listed, read or decoded. Nothing partial is returned.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise DiscoveryError(root_path, "template root is not a directory")

    views: dict[str, str] = {}
    partials: dict[str, str] = {}
    _walk_directory(root_path, root_path, config=config, views=views, partials=partials)

    logger.debug(
        "Discovered %d views and %d partials under %s",
        len(views),
        len(partials),
        root_path,
    )
    return DiscoveredTree(
        root=root_path,
        views=MappingProxyType(views),
        partials=MappingProxyType(partials),
    )


def _walk_directory(
    directory: Path,
    root: Path,
    *,
    config: LoaderConfig,
    views: dict[str, str],
    partials: dict[str, str],
) -> None:
    """Recursively collect files below *directory* into *views* / *partials*."""
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        raise DiscoveryError(directory, exc.strerror or str(exc)) from exc

    for entry in entries:
        if entry.is_dir():
            # Symlinked directories are skipped rather than followed (cycles)
            if not entry.is_symlink():
                _walk_directory(entry, root, config=config, views=views, partials=partials)
            continue

        # FIFOs, sockets and devices; dangling symlinks fall through and fail on read
        if not entry.is_file() and entry.exists():
            continue

        ext = os.path.splitext(entry.name)[1]
        if not accepts_extension(ext, config.extensions):
            continue

        relative = entry.relative_to(root).as_posix()
        source = _read_source(entry, config.encoding)

        if classify(relative, config.views_dir) is Role.VIEW:
            views[relative] = source
        else:
            partials[relative] = source


def _read_source(path: Path, encoding: str) -> str:
    """Read a whole template file into memory."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise DiscoveryError(path, exc.strerror or str(exc)) from exc

    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise DiscoveryError(path, f"cannot decode as {encoding}: {exc.reason}") from exc
