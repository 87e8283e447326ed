"""Viewloom: views-and-partials template collections for kida.

Scans a template tree, treats files under ``views/`` as page entry points
and everything else as partials, and compiles each view with every partial
attached so a layout can be rendered through any view.

Basic usage::

    from viewloom import build

    registry = build("templates")
    registry.lookup("views/index.html").render("base.html", sink, {"title": "Home"})

Long-lived processes can hold a reloadable store::

    from viewloom import TemplateStore

    store = TemplateStore("templates")
    store.load()
"""

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_VIEWS_DIR",
    "BuildError",
    "CompileError",
    "ConfigurationError",
    "DiscoveryError",
    "EmptyViewsError",
    "ExecutionError",
    "Found",
    "LoaderConfig",
    "Missing",
    "NotFoundError",
    "Registry",
    "TemplateStore",
    "ViewUnit",
    "ViewloomError",
    "build",
    "render",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import viewloom`` from importing kida until it is needed.
    """
    if name in ("build", "TemplateStore"):
        from viewloom import loader as _loader

        return getattr(_loader, name)

    if name in ("LoaderConfig", "DEFAULT_VIEWS_DIR"):
        from viewloom import config as _config

        return getattr(_config, name)

    if name in ("Registry", "Found", "Missing"):
        from viewloom import registry as _registry

        return getattr(_registry, name)

    if name == "ViewUnit":
        from viewloom.compiler import ViewUnit

        return ViewUnit

    if name == "render":
        from viewloom.rendering import render

        return render

    if name in (
        "BuildError",
        "CompileError",
        "ConfigurationError",
        "DiscoveryError",
        "EmptyViewsError",
        "ExecutionError",
        "NotFoundError",
        "ViewloomError",
    ):
        from viewloom import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
