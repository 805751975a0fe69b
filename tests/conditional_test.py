import pytest

from wgsl_preprocessor.errors import UnbalancedConditional, UnterminatedConditional
from wgsl_preprocessor.preprocess.conditional import ConditionalStack
from wgsl_preprocessor.preprocess.macros import MacroTable


def test_empty_stack_is_relevant():
    assert ConditionalStack().is_relevant(MacroTable())


def test_ifdef_and_ifndef_guards():
    table = MacroTable()
    stack = ConditionalStack()

    stack.push("X", must_be_defined=True)
    assert not stack.is_relevant(table)
    table.define("X")
    assert stack.is_relevant(table)

    stack.pop()
    stack.push("X", must_be_defined=False)
    assert not stack.is_relevant(table)


def test_flip_switches_to_else_branch():
    table = MacroTable()
    stack = ConditionalStack()
    stack.push("X", must_be_defined=True)
    stack.flip()
    assert stack.is_relevant(table)
    stack.flip()
    assert not stack.is_relevant(table)


def test_all_guards_must_hold():
    table = MacroTable({"A": None})
    stack = ConditionalStack()
    stack.push("A", True)
    stack.push("B", True)
    assert not stack.is_relevant(table)
    assert stack.depth == 2

    stack.pop()
    assert stack.is_relevant(table)


def test_relevance_follows_current_table_state():
    table = MacroTable({"A": None})
    stack = ConditionalStack()
    stack.push("A", True)
    assert stack.is_relevant(table)
    table.undefine("A")
    assert not stack.is_relevant(table)


def test_unbalanced():
    stack = ConditionalStack()
    with pytest.raises(UnbalancedConditional):
        stack.pop()
    with pytest.raises(UnbalancedConditional) as exc_info:
        stack.flip("main.wgsl", 3)
    assert exc_info.value.directive == "else"
    assert exc_info.value.line_number == 3


def test_finish():
    stack = ConditionalStack()
    stack.finish()

    stack.push("A", True)
    with pytest.raises(UnterminatedConditional) as exc_info:
        stack.finish("main.wgsl")
    assert exc_info.value.path == "main.wgsl"
    assert exc_info.value.depth == 1
