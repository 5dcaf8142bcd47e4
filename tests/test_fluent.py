"""Tests for the ArFluent wrapper."""

import pytest

from arfluent import ArFluent, Empty, NoInitial, NotFound, ar, new, values, wrap


def times_two(value, key):
    return value * 2


class TestChaining:
    """Tests for chained calls."""

    def test_chain(self):
        """Each call feeds the next."""
        numbers = (
            wrap([1, 2, 3])
            .map(lambda value, key: value * 2)
            .filter(lambda value, key: value != 6)
            .unwrap()
        )
        assert numbers == {0: 2, 1: 4}

    def test_chain_returns_new_wrappers(self):
        """A chained call leaves the wrapper it was called on unchanged."""
        start = wrap([1, 2])
        pushed = start.push(3)
        assert pushed is not start
        assert start.unwrap() == {0: 1, 1: 2}
        assert pushed.unwrap() == {0: 1, 1: 2, 2: 3}

    def test_for_each_returns_self(self):
        seen = []
        wrapper = wrap([4, 5, 6])
        assert wrapper.for_each(lambda value, key: seen.append(value)) is wrapper
        assert seen == [4, 5, 6]

    def test_longer_chain(self):
        result = (
            wrap({'b': 3, 'a': 1, 'c': 3})
            .unique()
            .sort(lambda a, b: a - b)
            .unshift(0)
            .push(9)
            .slice(1)
            .implode(',')
        )
        assert result == '1,3,9'

    def test_merge_with_wrapper(self):
        assert wrap(['a']).merge(wrap(['b']), ['c']).unwrap() == {0: 'a', 1: 'b', 2: 'c'}


class TestTerminal:
    """Terminal methods return plain values."""

    def test_values_are_not_wrapped(self):
        wrapper = wrap([1, 2, 3])
        assert wrapper.count() == 3
        assert wrapper.first() == 1
        assert wrapper.last() == 3
        assert wrapper.implode('-') == '1-2-3'
        assert wrapper.reduce(lambda carry, value, key: carry + value, 0) == 6
        assert wrapper.search(lambda value, key: value > 1) == 2
        assert wrapper.is_list() is True

    def test_sentinels(self):
        empty = wrap()
        assert empty.first() is Empty
        assert empty.last() is Empty
        assert empty.search(lambda value, key: True) is NotFound
        assert empty.reduce(lambda carry, value, key: carry) is NoInitial

    def test_to_list(self):
        assert wrap({'x': 1, 'y': 2}).to_list() == [1, 2]


class TestOwnership:
    """The wrapper never shares storage with its caller."""

    def test_construction_copies(self):
        data = {'a': 1}
        wrapper = wrap(data)
        data['b'] = 2
        assert 'b' not in wrapper

    def test_unwrap_copies(self):
        wrapper = wrap({'a': 1})
        raw = wrapper.unwrap()
        raw['z'] = 26
        assert 'z' not in wrapper

    def test_item_writes_do_not_reach_input(self):
        data = [1, 2, 3]
        wrapper = wrap(data)
        wrapper[0] = 100
        assert data == [1, 2, 3]

    def test_item_writes_do_not_reach_derived_wrappers(self):
        wrapper = wrap([1, 2])
        doubled = wrapper.map(times_two)
        wrapper[0] = 50
        assert doubled.unwrap() == {0: 2, 1: 4}


class TestItemAccess:
    """Tests for dict-like access to the owned collection."""

    def test_get_item(self):
        wrapper = wrap({'a': 1, 'b': 15})
        assert wrapper['a'] == 1
        assert wrapper['b'] == 15

        doubled = wrapper.map(times_two)
        assert doubled['a'] == 2
        assert doubled['b'] == 30

    def test_set_and_contains(self):
        wrapper = wrap({'a': 1})
        wrapper['c'] = 81
        assert wrapper['c'] == 81
        assert 'c' in wrapper
        assert 'f' not in wrapper

    def test_missing_key(self):
        wrapper = wrap({'a': 1})
        with pytest.raises(KeyError):
            wrapper['missing']
        assert wrapper.get('missing') is None
        assert wrapper.get('missing', 0) == 0

    def test_set_and_append(self):
        wrapper = wrap([1, 2, 3])
        wrapper[1] = 5
        wrapper.append(10)
        assert wrapper.unwrap() == {0: 1, 1: 5, 2: 3, 3: 10}

    def test_delete(self):
        wrapper = wrap(['a', 'b', 'c'])
        del wrapper[1]
        assert wrapper.unwrap() == {0: 'a', 2: 'c'}
        assert wrapper.is_list() is False

    def test_len(self):
        assert len(wrap(['a', 'b'])) == 2
        assert len(wrap()) == 0


class TestIteration:
    """Iteration yields (key, value) pairs and can be repeated."""

    def test_iterates_pairs(self):
        expected = {0: 2, 1: 4, 2: 6}
        for key, value in wrap([1, 2, 3]).map(times_two):
            assert expected[key] == value

    def test_restartable(self):
        wrapper = wrap({'x': 1, 'y': 2})
        assert list(wrapper) == [('x', 1), ('y', 2)]
        assert list(wrapper) == [('x', 1), ('y', 2)]

    def test_iteration_sees_snapshot(self):
        """Writes during iteration do not disturb it."""
        wrapper = wrap([1, 2])
        seen = []
        for key, value in wrapper:
            wrapper[key + 10] = value
            seen.append(key)
        assert seen == [0, 1]


class TestEqualityAndRepr:
    """Tests for ==, repr and JSON encoding."""

    def test_equal_wrappers(self):
        numbers1 = ArFluent([1, 2, 3]).map(times_two)
        numbers2 = wrap([1, 2, 3]).map(times_two)
        assert numbers1 == numbers2

    def test_equal_to_dict(self):
        assert wrap(['a']) == {0: 'a'}
        assert wrap(['a']) != {0: 'b'}

    def test_not_equal_to_list(self):
        assert wrap(['a']) != ['a']

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(wrap([1]))

    def test_repr(self):
        assert repr(wrap({'a': 1})) == "ArFluent({'a': 1})"

    def test_json_list(self):
        assert wrap(['a', 'b', 'c']).to_json() == '["a","b","c"]'

    def test_json_map(self):
        assert wrap({'a': 1, 'b': None}).to_json() == '{"a":1,"b":null}'

    def test_json_sparse_keys(self):
        assert wrap({1: 'x'}).to_json() == '{"1":"x"}'

    def test_json_nested_wrapper(self):
        assert wrap([wrap({'k': 1}), wrap([True])]).to_json() == '[{"k":1},[true]]'

    def test_json_nested_list_shaped_dict(self):
        """Dicts returned by operations encode by shape too."""
        nested = wrap({'a': [1, 2]}).map(lambda value, key: values(value))
        assert nested.to_json() == '{"a":[1,2]}'

    def test_json_nested_shapes(self):
        data = [{0: 'x', 1: 'y'}, {2: 'z'}, ({'k': [{0: True}]},)]
        assert wrap(data).to_json() == '[["x","y"],{"2":"z"},[{"k":[[true]]}]]'

    def test_json_empty(self):
        assert wrap().to_json() == '[]'


class TestFactories:
    """Tests for wrap(), ar() and the deprecated aliases."""

    def test_ar_helper(self):
        assert ar([1]).unwrap() == {0: 1}

    def test_new_is_deprecated(self):
        with pytest.warns(DeprecationWarning):
            wrapper = new([1])
        assert wrapper.unwrap() == {0: 1}

    def test_to_array_is_deprecated(self):
        with pytest.warns(DeprecationWarning):
            assert wrap([1]).to_array() == {0: 1}
