import io
import sys

import pytest

from cursorlists.linkstack import Stack, main


def test_lifo_order():
    stack = Stack()
    for word in ["one", "two", "three"]:
        stack.push(word)
    assert len(stack) == 3
    assert [stack.pop() for _ in range(3)] == ["three", "two", "one"]
    assert stack.is_empty()


def test_constructor_last_item_on_top():
    stack = Stack(["a", "b", "c"])
    assert stack.top() == "c"
    assert len(stack) == 3


def test_top_does_not_remove():
    stack = Stack(["x"])
    assert stack.top() == "x"
    assert len(stack) == 1


def test_empty_stack_errors():
    stack = Stack()
    assert stack.is_empty()
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.pop()


def test_main_echoes_lines_reversed(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("first\nsecond\nthird\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "third\nsecond\nfirst\n"


def test_main_empty_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main() == 0
    assert capsys.readouterr().out == ""