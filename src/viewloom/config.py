"""Loader configuration.

LoaderConfig is a frozen dataclass: it is handed to ``build()`` once and
cannot change afterwards, so settings made after a build have no effect.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from viewloom.errors import ConfigurationError

# Top-level subdirectory whose files are classified as views
DEFAULT_VIEWS_DIR = "views"


@dataclass(frozen=True, slots=True)
class LoaderConfig:
    """Loader configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = LoaderConfig(views_dir="pages", extensions={".html"})
    """

    # Discovery
    views_dir: str = DEFAULT_VIEWS_DIR
    extensions: frozenset[str] = frozenset()  # empty = accept every file
    encoding: str = "utf-8"

    # Engine options, passed to every kida Environment
    autoescape: bool = True
    trim_blocks: bool = False
    lstrip_blocks: bool = False

    def __post_init__(self) -> None:
        name = self.views_dir
        if not name or name in (".", "..") or "/" in name or "\\" in name:
            raise ConfigurationError(
                f"views_dir must be a single path segment, got {name!r}"
            )

        if isinstance(self.extensions, str):
            raise ConfigurationError(
                f"extensions must be a collection of strings, got {self.extensions!r}"
            )
        exts = frozenset(self.extensions)
        for ext in exts:
            if not isinstance(ext, str) or len(ext) < 2 or not ext.startswith("."):
                raise ConfigurationError(
                    f"Extensions must be dot-prefixed (e.g. '.html'), got {ext!r}"
                )
        # Frozen dataclass: bypass __setattr__ to store the normalised set
        object.__setattr__(self, "extensions", exts)

    def with_extensions(self, *extensions: str | Iterable[str]) -> "LoaderConfig":
        """Return a copy whose allow-list is replaced by *extensions*.

        Accepts individual strings, iterables of strings, or a mix::

            config.with_extensions(".html", ".tmpl")
            config.with_extensions([".html", ".tmpl"])

        Calling it with no arguments clears the allow-list.
        """
        exts: set[str] = set()
        for item in extensions:
            if isinstance(item, str):
                exts.add(item)
            else:
                exts.update(item)
        return replace(self, extensions=frozenset(exts))
