"""Tests for application/reporters/console.py."""

from luadump.application.reporters.console import ConsoleReporter
from luadump.domain.model.member_kind import MemberKind
from luadump.domain.model.module_shape import ModuleShape
from luadump.domain.model.outcome import NoShape, Shape, SyntaxErrorOutcome
from luadump.domain.model.position import SourcePosition


def _plain(**kwargs: object) -> ConsoleReporter:
    return ConsoleReporter(color=False, **kwargs)  # type: ignore[arg-type]


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_returns_string(self) -> None:
        assert isinstance(_plain().report(NoShape()), str)

    def test_members_listed(self) -> None:
        shape = ModuleShape.from_members({"foo": MemberKind.FUNCTION, "bar": MemberKind.METHOD})
        output = _plain().report(Shape(shape))
        assert "foo" in output
        assert "Function" in output
        assert "bar" in output
        assert "Method" in output
        assert "Members: 2" in output

    def test_sorted_rows(self) -> None:
        shape = ModuleShape.from_members({"zeta": MemberKind.VALUE, "alpha": MemberKind.VALUE})
        output = _plain().report(Shape(shape))
        assert output.index("alpha") < output.index("zeta")

    def test_empty_shape(self) -> None:
        assert "no members" in _plain().report(Shape(ModuleShape()))

    def test_no_shape(self) -> None:
        assert "no statically determinable shape" in _plain().report(NoShape())

    def test_syntax_error(self) -> None:
        outcome = SyntaxErrorOutcome(position=SourcePosition(line=3, column=4), message="bad token")
        output = _plain().report(outcome)
        assert "syntax error" in output
        assert "3:4" in output
        assert "bad token" in output

    def test_title(self) -> None:
        output = _plain(title="init.lua").report(NoShape())
        assert "init.lua" in output

    def test_markup_in_names_escaped(self) -> None:
        shape = ModuleShape.from_members({"[bold]x": MemberKind.VALUE})
        output = _plain().report(Shape(shape))
        assert "[bold]x" in output

    def test_color_emits_ansi(self) -> None:
        shape = ModuleShape.from_members({"a": MemberKind.VALUE})
        output = ConsoleReporter(color=True).report(Shape(shape))
        assert "\x1b[" in output
