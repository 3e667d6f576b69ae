import pytest

from tinylisp.types.environment import Environment
from tinylisp.types.store import ValueStore


@pytest.fixture
def store():
    return ValueStore()


@pytest.fixture
def empty(store):
    return store.empty_env()


def test_empty_environment(empty):
    assert empty.is_empty()
    assert empty.lookup("x") is None
    assert len(empty) == 0
    assert list(empty) == []


def test_extend_is_persistent(store, empty):
    one = store.integer(1)
    env = empty.extend(store, "x", one)
    assert env is not empty
    assert env.lookup("x") is one
    assert empty.lookup("x") is None
    assert env.outer is empty


def test_newest_binding_wins(store, empty):
    first, second = store.integer(1), store.integer(2)
    outer = empty.extend(store, "x", first)
    inner = outer.extend(store, "x", second)
    assert inner.lookup("x") is second
    assert outer.lookup("x") is first
    assert [name for name, _ in inner] == ["x", "x"]


def test_branches_share_tail(store, empty):
    base = empty.extend(store, "shared", store.integer(0))
    left = base.extend(store, "a", store.integer(1))
    right = base.extend(store, "b", store.integer(2))
    assert left.outer is right.outer is base
    assert left.lookup("b") is None
    assert right.lookup("a") is None
    assert left.lookup("shared") is right.lookup("shared")


def test_iteration_order_and_contains(store, empty):
    env = empty
    for name in ("a", "b", "c"):
        env = env.extend(store, name, store.integer(0))
    assert [name for name, _ in env] == ["c", "b", "a"]
    assert "b" in env
    assert "z" not in env
    assert len(env) == 3


def test_environment_nodes_live_in_the_store(store, empty):
    env = empty.extend(store, "x", store.integer(1))
    assert isinstance(store[env.handle], Environment)
    assert store[env.handle] is env


def test_str(store, empty):
    env = empty.extend(store, "x", store.integer(7))
    assert str(env) == "{x: 7}"
