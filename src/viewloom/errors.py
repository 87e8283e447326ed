"""Viewloom exception hierarchy.

Build failures (discovery, empty tree, compile) derive from BuildError and
are fatal to the build that raised them.  NotFoundError and ExecutionError
are per-render and never affect the registry.
"""

from pathlib import Path


class ViewloomError(Exception):
    """Base for all viewloom-specific errors."""


class ConfigurationError(ViewloomError):
    """Raised when loader configuration is invalid or a store is used before loading."""


class BuildError(ViewloomError):
    """Base for errors that abort a build. No registry is produced."""


class DiscoveryError(BuildError):
    """The template tree could not be walked or a file could not be read.

    The underlying ``OSError`` / ``UnicodeDecodeError`` is chained as
    ``__cause__``.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class EmptyViewsError(BuildError):
    """The walk succeeded but no file was classified as a view."""

    def __init__(self, root: str | Path, views_dir: str) -> None:
        self.root = str(root)
        self.views_dir = views_dir
        super().__init__(f"No views were found under {self.root}/{views_dir}/")


class CompileError(BuildError):
    """A view or partial failed to parse.

    Attributes:
        path: Template that failed (view path, or partial path in pass 2).
        view: View the partial was being attached to, ``None`` for views.
        message: Message reported by the template engine.
        lineno: Line of the syntax error, when the engine reports one.
    """

    def __init__(
        self,
        path: str,
        message: str,
        *,
        view: str | None = None,
        lineno: int | None = None,
    ) -> None:
        self.path = path
        self.view = view
        self.message = message
        self.lineno = lineno
        super().__init__(str(self))

    def __str__(self) -> str:
        location = self.path if self.lineno is None else f"{self.path}:{self.lineno}"
        if self.view is not None:
            return f"{location} (attached to {self.view}): {self.message}"
        return f"{location}: {self.message}"


class NotFoundError(ViewloomError):
    """No view is registered under the looked-up path."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name!r}")


class ExecutionError(ViewloomError):
    """Rendering a sub-template failed.

    The engine exception, if any, is chained as ``__cause__``.
    """

    def __init__(self, view: str, template: str, message: str) -> None:
        self.view = view
        self.template = template
        self.message = message
        super().__init__(f"{template} (in {view}): {message}")
