from types import MappingProxyType

import suite
from dgen import from_schema
from comprehend import deep_each, deep_map, map, UnsupportedSourceType

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# nested records: dicts holding lists of dicts
order_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 1000}),
    'customer': {
        'name': 'name',
        'city': 'city',
    },
    'lines': [{
        '_qen_count': (1, 4),
        '_qen_items': {
            'sku': 'ean8',
            'qty': ('pyint', {'min_value': 1, 'max_value': 9}),
            'tags': [{'_qen_count': 2, '_qen_items': 'word'}],
        },
    }],
}


# map() tests

@test("map over a dict maps values shallowly")
def test_map_dict():
    source = {'a': 1, 'b': 2, 'c': [1, 2, 3]}
    result = map(source, lambda v: v if isinstance(v, list) else v + 10)
    assert_that(result == {'a': 11, 'b': 12, 'c': [1, 2, 3]}, f"got {result}")
    assert_that(result['c'] is source['c'], "nested containers should be handed over as-is")


@test("map over a sequence returns a list")
def test_map_sequence():
    assert_that(map((1, 2, 3), lambda v: v * 2) == [2, 4, 6], "tuples should map to lists")
    assert_that(map([1, 2, 3, 4], {'when': lambda v: v > 2}) == [3, 4], "when should filter")


@test("map rejects anything but sequences and dicts")
def test_map_unsupported():
    assert_raises(UnsupportedSourceType, lambda: map({1, 2}, lambda v: v))
    assert_raises(UnsupportedSourceType, lambda: map(MappingProxyType({'a': 1}), lambda v: v))
    assert_raises(UnsupportedSourceType, lambda: map(None, lambda v: v))


# deep_map() tests

@test("deep_map over a flat dict")
def test_deep_map_flat():
    result = deep_map({'a': 1, 'b': 2, 'c': 3}, lambda v: v + 1)
    assert_that(result == {'a': 2, 'b': 3, 'c': 4}, f"got {result}")


@test("deep_map recurses into nested lists and dicts")
def test_deep_map_nested():
    result = deep_map({'a': 1, 'b': 2, 'c': [1, 2, {'d': 3}]}, lambda v: v + 1)
    assert_that(result == {'a': 2, 'b': 3, 'c': [2, 3, {'d': 4}]}, f"got {result}")


@test("deep_map when drops failing values, containers included")
def test_deep_map_when():
    source = {'a': 1, 'b': 2, 'c': [1, 2, 3]}
    result = deep_map(source, {'with': lambda v: v + 1, 'when': lambda v, k: k != 'c'})
    assert_that(result == {'a': 2, 'b': 3}, f"got {result}")


@test("deep_map treats sets and other mappings as leaves")
def test_deep_map_opaque_leaves():
    tags = {1, 2}
    settings = MappingProxyType({'x': 1})
    seen = []

    def record(v):
        seen.append(v)
        return v

    result = deep_map({'tags': tags, 'settings': settings, 'n': 1}, record)
    assert_that(result['tags'] is tags and result['settings'] is settings, "leaves should pass through with")
    assert_that(len(seen) == 3, f"with should see three leaves, saw {seen}")


@test("deep_map builds new containers")
def test_deep_map_copies():
    inner = [1, 2]
    source = {'inner': inner}
    result = deep_map(source)
    assert_that(result == source, "identity deep_map should be equal")
    assert_that(result is not source and result['inner'] is not inner, "containers should be rebuilt")


@test("deep_map over generated records is isomorphic and touches each leaf once")
def test_deep_map_generated():
    orders = from_schema(order_schema, seed=7).take(6)
    leaves = []
    deep_each(orders, lambda v: leaves.append(v))

    calls = []

    def identity(v):
        calls.append(v)
        return v

    result = deep_map(orders, identity)
    assert_that(result == orders, "identity deep_map should rebuild an equal structure")
    assert_that(len(calls) == len(leaves), f"{len(calls)} transform calls for {len(leaves)} leaves")


# deep_each() tests

@test("deep_each visits every leaf")
def test_deep_each_sum():
    total = 0

    def add(v):
        nonlocal total
        total += v

    deep_each({'a': 1, 'b': 2, 'c': [1, 2, 3]}, add)
    assert_that(total == 9, f"got {total}")


@test("deep_each enters sets and other mappings")
def test_deep_each_all_kinds():
    seen = []
    deep_each({'a': {1, 2}, 'b': MappingProxyType({'c': 3})}, lambda v: seen.append(v))
    assert_that(sorted(seen) == [1, 2, 3], f"got {seen}")


@test("deep_each skips containers that fail when")
def test_deep_each_when_on_containers():
    seen = []
    source = {'keep': [1, 2], 'skip': [3, 4], 'leaf': 5}
    deep_each(source, {'when': lambda v, k: k != 'skip', 'with': lambda v: seen.append(v)})
    assert_that(seen == [1, 2, 5], f"got {seen}")


@test("deep_each applies when to leaves")
def test_deep_each_when_on_leaves():
    seen = []
    deep_each([1, [2, 3, [4]], 5], {'when': lambda v: isinstance(v, list) or v % 2 == 0, 'with': seen.append})
    assert_that(seen == [2, 4], f"got {seen}")


@test("deep_each treats strings as leaves")
def test_deep_each_strings():
    seen = []
    deep_each(['ab', ['cd']], seen.append)
    assert_that(seen == ['ab', 'cd'], f"got {seen}")


@test("deep_each passes keys")
def test_deep_each_keys():
    pairs = []
    deep_each({'a': [10]}, lambda v, k: pairs.append((k, v)))
    assert_that(pairs == [(0, 10)], f"got {pairs}")


if __name__ == "__main__":
    suite.run(title="comprehend deep comprehensions test suite")
