"""Tests for viewloom.errors — exception hierarchy and error messages."""

from viewloom.errors import (
    BuildError,
    CompileError,
    ConfigurationError,
    DiscoveryError,
    EmptyViewsError,
    ExecutionError,
    NotFoundError,
    ViewloomError,
)


class TestHierarchy:
    def test_build_errors(self) -> None:
        for cls in (DiscoveryError, EmptyViewsError, CompileError):
            assert issubclass(cls, BuildError)
        assert issubclass(BuildError, ViewloomError)

    def test_render_errors_are_not_build_errors(self) -> None:
        for cls in (NotFoundError, ExecutionError):
            assert issubclass(cls, ViewloomError)
            assert not issubclass(cls, BuildError)

    def test_configuration_error(self) -> None:
        assert issubclass(ConfigurationError, ViewloomError)


class TestMessages:
    def test_discovery(self) -> None:
        err = DiscoveryError("/srv/templates/a.html", "Permission denied")
        assert str(err) == "/srv/templates/a.html: Permission denied"
        assert err.reason == "Permission denied"

    def test_empty_views(self) -> None:
        err = EmptyViewsError("templates", "views")
        assert str(err) == "No views were found under templates/views/"

    def test_compile_view(self) -> None:
        err = CompileError("views/a.html", "Unexpected end of template", lineno=3)
        assert str(err) == "views/a.html:3: Unexpected end of template"

    def test_compile_partial(self) -> None:
        err = CompileError("nav.html", "bad tag", view="views/a.html")
        assert str(err) == "nav.html (attached to views/a.html): bad tag"

    def test_not_found(self) -> None:
        err = NotFoundError("views/missing.html")
        assert str(err) == "Template not found: 'views/missing.html'"
        assert err.name == "views/missing.html"

    def test_execution(self) -> None:
        err = ExecutionError("views/a.html", "base.html", "boom")
        assert str(err) == "base.html (in views/a.html): boom"
