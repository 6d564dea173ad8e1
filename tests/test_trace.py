import io

from toyc.toyc_trace import SEPARATOR, DiagnosticTrace, Frame


def test_push_pop() -> None:
    trace = DiagnosticTrace()
    trace.push("Statement Part", 1)
    trace.push("Statement List", 2)
    assert len(trace.frames) == 2
    assert trace.pop() == Frame("Statement List", 2)
    assert trace.frames == [Frame("Statement Part", 1)]


def test_render_innermost_first() -> None:
    trace = DiagnosticTrace()
    trace.push("Statement Part", 1)
    trace.push("Factor", 3)
    assert trace.render() == [
        ">\tCaused by Factor on line 3",
        ">\tCaused by Statement Part on line 1",
        SEPARATOR,
    ]


def test_separator_shape() -> None:
    assert SEPARATOR.endswith("->")
    assert len(SEPARATOR) == 207
    assert set(SEPARATOR[:-1]) == {"-"}


def test_dump_and_clear() -> None:
    trace = DiagnosticTrace()
    trace.push("Term", 7)
    buf = io.StringIO()
    trace.dump(buf)
    assert buf.getvalue() == f">\tCaused by Term on line 7\n{SEPARATOR}\n"
    trace.clear()
    assert trace.frames == []
    assert trace.render() == [SEPARATOR]
