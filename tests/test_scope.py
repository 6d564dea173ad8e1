import pytest

from toyc.emitters.tree_emitter import TreeEmitter
from toyc.toyc_scope import ScopeManager
from toyc.toyc_symbols import Variable, VarType

NUM = VarType.NUMBER
STR = VarType.STRING


@pytest.fixture  # type: ignore[misc]
def emitter() -> TreeEmitter:
    return TreeEmitter()


@pytest.fixture  # type: ignore[misc]
def scopes(emitter: TreeEmitter) -> ScopeManager:
    return ScopeManager(emitter)


def test_declare_outside_loop_is_global(scopes: ScopeManager, emitter: TreeEmitter) -> None:
    scopes.declare("x", NUM)
    assert scopes.global_variables() == [Variable("x", NUM)]
    assert "x" in emitter.symbols
    assert not scopes.inside_loop


def test_declare_inside_loop_is_local(scopes: ScopeManager, emitter: TreeEmitter) -> None:
    scopes.open_loop_scope()
    scopes.declare("i", NUM)
    assert scopes.loop_scopes == [{"i": Variable("i", NUM)}]
    assert scopes.global_variables() == []
    assert scopes.close_loop_scope() == [Variable("i", NUM)]
    assert "i" not in emitter.symbols
    assert scopes.loop_scopes == []


def test_global_reuse_inside_loop(scopes: ScopeManager, emitter: TreeEmitter) -> None:
    scopes.declare("x", NUM)
    scopes.open_loop_scope()
    scopes.declare("x", NUM)
    assert scopes.loop_scopes[-1] == {}
    scopes.close_loop_scope()
    assert "x" in emitter.symbols


def test_global_reuse_inside_loop_takes_new_type(
    scopes: ScopeManager, emitter: TreeEmitter
) -> None:
    scopes.declare("x", NUM)
    scopes.open_loop_scope()
    scopes.declare("x", STR)
    assert scopes.loop_scopes[-1] == {}
    scopes.close_loop_scope()
    assert scopes.global_variables() == [Variable("x", STR)]
    assert emitter.lookup_variable("x") == Variable("x", STR)


def test_loop_local_retyped_in_place(scopes: ScopeManager) -> None:
    scopes.open_loop_scope()
    scopes.declare("i", NUM)
    scopes.declare("i", STR)
    assert scopes.loop_scopes == [{"i": Variable("i", STR)}]


def test_duplicate_in_same_loop_scope_is_reuse(scopes: ScopeManager, emitter: TreeEmitter) -> None:
    scopes.open_loop_scope()
    scopes.declare("i", NUM)
    scopes.declare("i", NUM)
    assert len(scopes.loop_scopes[-1]) == 1
    # every declaration is still forwarded
    assert emitter.events.count("declare i:NUMBER") == 2


def test_is_shadowed_checks_innermost_and_global_only(scopes: ScopeManager) -> None:
    scopes.declare("g", NUM)
    scopes.open_loop_scope()
    scopes.declare("outer", NUM)
    scopes.open_loop_scope()
    assert scopes.is_shadowed("g")
    assert not scopes.is_shadowed("outer")
    scopes.declare("outer", NUM)
    assert scopes.is_shadowed("outer")
    assert len(scopes.loop_scopes) == 2


def test_nested_close_only_retires_innermost(scopes: ScopeManager, emitter: TreeEmitter) -> None:
    scopes.open_loop_scope()
    scopes.declare("i", NUM)
    scopes.open_loop_scope()
    scopes.declare("j", STR)
    scopes.close_loop_scope()
    assert "j" not in emitter.symbols
    assert "i" in emitter.symbols
    scopes.close_loop_scope()
    assert len(emitter.symbols) == 0


def test_close_without_open_raises(scopes: ScopeManager) -> None:
    with pytest.raises(RuntimeError):
        scopes.close_loop_scope()
