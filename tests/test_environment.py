import math

from minieval.environment import Environment, Value, ValueType


def test_insert_and_get_round_trip():
    env = Environment()
    env.insert("x", Value.int_(7))
    assert env.get("x") == Value.int_(7)


def test_get_missing_is_none():
    assert Environment().get("nothing") is None


def test_overwrite_keeps_single_entry():
    env = Environment()
    env.insert_int("x", 1)
    env.insert_string("x", "now a string")
    assert len(env) == 1
    assert env.get("x") == Value.string("now a string")


def test_typed_inserts():
    env = Environment()
    env.insert_int("i", 3)
    env.insert_float("f", 2.5)
    env.insert_string("s", "abc")
    env.insert_bool("b", 9)
    assert env.get("i").type is ValueType.INT
    assert env.get("f") == Value(ValueType.FLOAT, 2.5)
    assert env.get("s").data == "abc"
    assert env.get("b") == Value(ValueType.BOOL, True)


def test_contains_len_and_iteration():
    env = Environment()
    for name in ["a", "b", "c"]:
        env.insert_int(name, 0)
    assert "b" in env
    assert "z" not in env
    assert len(env) == 3
    assert list(env) == ["a", "b", "c"]


def test_many_keys_survive_growth():
    env = Environment()
    names = [f"var{n}" for n in range(200)]
    for n, name in enumerate(names):
        env.insert_int(name, n)
    assert len(env) == len(names)
    assert all(env.get(name) == Value.int_(n) for n, name in enumerate(names))


def test_int_wraps_to_32_bits():
    top = Value.int_(2**31 - 1)
    assert Value.int_(top.data + 1) == Value.int_(2**31)
    assert Value.int_(2**31).data < 0


def test_float_is_single_precision():
    once = Value.float_(0.1)
    assert once.data != 0.1
    assert Value.float_(once.data) == once
    assert Value.float_(1.5).data == 1.5


def test_float_overflow_becomes_infinite():
    assert math.isinf(Value.float_(1e40).data)
    assert Value.float_(-1e40).data < 0


def test_bool_normalises():
    assert Value.bool_(42) == Value.bool_(True)
    assert Value.bool_(0).data is False


def test_truthy():
    assert Value.int_(3).truthy()
    assert not Value.int_(0).truthy()
    assert not Value.float_(0.0).truthy()
    assert Value.bool_(True).truthy()