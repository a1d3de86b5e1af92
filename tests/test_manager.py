import threading

import pytest

from optkit import (
    InvalidCallError,
    OptionsManager,
    ReservedNameError,
    SharedOptionsManager,
    UnknownOptionError,
    ValidationError,
    allowed_enumerated,
    allowed_range,
    config,
    create_manager,
    reset,
)


def test_scenario_get_set_reset(sample):
    assert sample("foo") == 1
    sample(foo=7, bar=0)
    assert sample() == {"foo": 7, "bar": 0, "baz": "hello"}
    reset(sample)
    assert sample() == {"foo": 1, "bar": 2, "baz": "hello"}


def test_get_all_keeps_creation_order(sample):
    assert list(sample()) == ["foo", "bar", "baz"]
    assert sample.names() == ["foo", "bar", "baz"]
    assert list(sample) == ["foo", "bar", "baz"]


def test_get_many_in_requested_order(sample):
    assert sample("baz", "foo") == ["hello", 1]


def test_get_all_is_a_copy(sample):
    snapshot = sample()
    snapshot["foo"] = 100
    assert sample("foo") == 1


def test_mutable_values_are_copied_on_get():
    m = create_manager([("items", [1, 2, 3])])
    m("items").append(4)
    assert m("items") == [1, 2, 3]


def test_copy_on_get_can_be_disabled():
    config.set_value("copy_on_get", False)
    m = create_manager([("items", [1, 2, 3])])
    m("items").append(4)
    assert m("items") == [1, 2, 3, 4]


def test_get_unknown(sample):
    with pytest.raises(UnknownOptionError) as err:
        sample("nope")
    assert "nope" in str(err.value)
    with pytest.raises(KeyError):
        sample("foo", "nope")


def test_set_unknown(sample):
    with pytest.raises(UnknownOptionError):
        sample(foo=3, nope=1)
    assert sample("foo") == 1


def test_dict_input():
    m = create_manager({"a": 1, "b": None})
    assert m() == {"a": 1, "b": None}


def test_none_default_is_an_option():
    m = create_manager([("label", None)])
    assert "label" in m
    m(label="x")
    assert m("label") == "x"


def test_set_returns_manager(sample):
    assert sample(foo=3) is sample
    assert sample.set(bar=4) is sample
    assert sample("foo", "bar") == [3, 4]


def test_validation_on_set(ruled):
    ruled(direction="down", level=0)
    assert ruled("direction", "level") == ["down", 0]
    with pytest.raises(ValidationError) as err:
        ruled(direction="middle")
    assert "enumerated" in str(err.value)
    assert "'middle'" in str(err.value)
    with pytest.raises(ValidationError) as err:
        ruled(level=7)
    assert "range" in str(err.value)
    assert "7" in str(err.value)


def test_failed_set_is_atomic(ruled):
    before = ruled()
    with pytest.raises(ValidationError):
        ruled(label="changed", direction="down", level=-1)
    assert ruled() == before
    with pytest.raises(UnknownOptionError):
        ruled(label="changed", missing=1)
    assert ruled() == before


def test_validation_error_is_value_error(ruled):
    with pytest.raises(ValueError):
        ruled(level=99)


def test_validation_at_creation():
    with pytest.raises(ValidationError):
        create_manager([("level", 9)], {"level": allowed_range(0, 3)})


def test_rule_for_missing_option():
    with pytest.raises(UnknownOptionError):
        create_manager([("a", 1)], {"b": allowed_range(0, 3)})


def test_rule_must_be_a_rule():
    with pytest.raises(TypeError):
        create_manager([("a", 1)], {"a": lambda v: True})


def test_unconstrained_option_accepts_anything(ruled):
    ruled(label=object)
    assert ruled("label") is object


def test_rules_and_defaults_views(ruled):
    assert set(ruled.rules()) == {"direction", "level"}
    ruled(direction="down")
    assert ruled.defaults() == {"direction": "up", "level": 2, "label": None}


def test_reserved_name_on_create():
    with pytest.raises(ReservedNameError):
        create_manager([("ok", 1), ("__internal", 2)])


def test_reserved_name_on_set(sample):
    with pytest.raises(ReservedNameError):
        sample(**{"__internal": 1})


def test_reserved_prefix_follows_config():
    config.set_value("reserved_prefix", ".__")
    create_manager([("__fine", 1)])
    with pytest.raises(ReservedNameError):
        create_manager([(".__hidden", 1)])


def test_mixed_call_rejected(sample):
    with pytest.raises(InvalidCallError):
        sample("foo", bar=3)
    with pytest.raises(TypeError):
        sample("foo", bar=3)
    assert sample("bar") == 2


def test_reset_method_and_idempotence(sample):
    sample(foo=10)
    assert sample.reset() is sample
    once = sample()
    sample.reset()
    assert sample() == once == {"foo": 1, "bar": 2, "baz": "hello"}


def test_reset_restores_mutated_defaults():
    config.set_value("copy_on_get", False)
    m = create_manager([("items", [1])])
    m("items").append(2)
    m.reset()
    assert m("items") == [1]


def test_shared_handle_aliases_store(sample):
    alias = sample.shared()
    assert isinstance(alias, SharedOptionsManager)
    assert alias.shares_store_with(sample)
    alias(foo=42)
    assert sample("foo") == 42
    sample.reset()
    assert alias("foo") == 1


def test_mapping_helpers(sample):
    assert len(sample) == 3
    assert "bar" in sample
    assert "qux" not in sample
    assert repr(sample) == "OptionsManager(foo=1, bar=2, baz='hello')"
    assert isinstance(sample, OptionsManager)


def test_concurrent_multi_key_sets_are_not_torn():
    m = create_manager([("a", 0), ("b", 0)])
    torn = []

    def writer(offset):
        for i in range(200):
            m(a=offset + i, b=offset + i)

    def reader():
        for _ in range(400):
            values = m()
            if values["a"] != values["b"]:
                torn.append(values)

    threads = [threading.Thread(target=writer, args=(n * 1000,)) for n in range(4)]
    threads += [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert torn == []


def test_set_stores_a_copy_of_the_callers_value():
    m = create_manager(
        [("pts", [1, 2])],
        {"pts": allowed_enumerated([1, 2], [3, 4])},
    )
    value = [3, 4]
    m(pts=value)
    value.append(99)
    assert m("pts") == [3, 4]


def test_clone_method_gives_independent_manager(sample):
    alias = sample.shared()
    local = alias.clone()
    assert type(local) is OptionsManager
    assert not local.shares_store_with(sample)
    local(foo=50)
    assert sample("foo") == 1
