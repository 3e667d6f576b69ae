import io

import pytest

from tinylisp import repl
from tinylisp.interpreter import Interpreter
from tinylisp.repl import Feed, ParenCounter


def _session(text: str, banner: bool = False) -> str:
    out = io.StringIO()
    interp = Interpreter(output=out)
    repl.repl(interp, stdin=io.StringIO(text), stdout=out, banner=banner)
    return out.getvalue()


@pytest.mark.parametrize(
    "lines,states",
    [
        (["(+ 1 2)\n"], [Feed.READY]),
        (["(+ 1\n", "2)\n"], [Feed.MORE, Feed.READY]),
        (["\n"], [Feed.SKIP]),
        (["; just a comment\n"], [Feed.SKIP]),
        (["(a ; )\n", ")\n"], [Feed.MORE, Feed.READY]),
        (["42\n"], [Feed.READY]),
        (["(f\n", "\n", ")\n"], [Feed.MORE, Feed.MORE, Feed.READY]),
    ]
)
def test_paren_counter(lines, states):
    counter = ParenCounter()
    assert [counter.feed(line) for line in lines] == states


def test_paren_counter_take_resets():
    counter = ParenCounter()
    counter.feed("(a\n")
    counter.feed("b)\n")
    assert counter.take() == "(a\nb)\n"
    assert counter.is_empty()
    assert counter.depth == 0


def test_session_prompts_and_results():
    output = _session("(+ 1\n 2)\n(print 5)\n")
    assert output == "> " + "  " + "3\n" + "> " + "5\n" + "nil\n" + "> " + "\n"


def test_comment_only_first_line_is_skipped():
    assert _session("; hello\n42\n") == "> " + "> " + "42\n" + "> " + "\n"


def test_definitions_persist_between_entries():
    output = _session("(defun sq (x) (* x x))\n(sq 12)\n")
    assert "sq\n" in output
    assert "144\n" in output


def test_unbalanced_entry_is_evaluated_at_end_of_input(caplog):
    output = _session("(+ 1 2\n")
    assert output == "> " + "  " + "3\n" + "> " + "\n"
    assert "Expected ')'" in caplog.text


def test_several_expressions_on_one_line():
    assert _session("1 2\n") == "> " + "1\n2\n" + "> " + "\n"


def test_deep_recursion_does_not_end_session():
    output = _session(
        "(defun c (n) (if (< n 1) 0 (+ 1 (c (- n 1)))))\n(c 300)\n(+ 1 2)\n"
    )
    assert output == "> c\n" + "> 300\n" + "> 3\n" + "> " + "\n"


def test_banner():
    assert _session("", banner=True).startswith("Tiny LISP Interpreter\n")


def test_main_runs_file(tmp_path, capsys):
    program = tmp_path / "fact.lisp"
    program.write_text(
        "; factorial\n"
        "(defun fact (n) (if (eq n 0) 1 (* n (fact (- n 1)))))\n"
        "(print (fact 10))\n"
    )
    assert repl.main([str(program)]) == 0
    assert capsys.readouterr().out == "3628800\n"


def test_main_reports_capacity_exceeded(tmp_path):
    program = tmp_path / "loop.lisp"
    program.write_text("(defun loop (n) (loop (+ n 1)))\n(loop 0)\n")
    assert repl.main([str(program), "--max-objects", "200"]) == 1


def test_main_repl_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(cons 1 2)\n"))
    assert repl.main(["--quiet"]) == 0
    assert capsys.readouterr().out == "> (1 . 2)\n> \n"
