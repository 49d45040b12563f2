# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for FlatStore and the emptiness test."""

import warnings

import pytest

from genro_registry import (
    FlatStore,
    InvalidKeyError,
    InvalidScopeError,
    MissingKeyError,
    MissingKeyWarning,
    OnMissing,
    RegistryOptions,
    is_empty_value,
)


@pytest.fixture
def initial_scope():
    return {
        'key_1': 'value_1',
        'empty_key_1': '',
        'empty_key_2': '0',
        'empty_key_3': 0,
        'empty_key_4': None,
        'key_2': 'value_2',
        'array': {
            'key_1_1': 'value_1_1',
        },
    }


@pytest.fixture
def store(initial_scope):
    return FlatStore(initial_scope)


class TestKeyValidation:
    """Tests for key type checks."""

    @pytest.mark.parametrize('key', [1.5, object(), ('a',), True, b'key'])
    def test_get_invalid_key_raises(self, store, key):
        """Test get rejects keys that are not str or int."""
        with pytest.raises(InvalidKeyError, match="Invalid key passed"):
            store.get(key)

    def test_set_none_key_raises(self, store):
        """Test None is only accepted by get."""
        with pytest.raises(InvalidKeyError):
            store.set(None, 'x')
        with pytest.raises(InvalidKeyError):
            store.exists(None)

    def test_invalid_key_is_type_error(self, store):
        """Test InvalidKeyError can be caught as TypeError."""
        with pytest.raises(TypeError):
            store.delete([])

    def test_int_keys(self):
        """Test integer keys are accepted."""
        store = FlatStore()
        store.set(0, 'zero')
        store.set(7, 'seven')
        assert store.get(0) == 'zero'
        assert store.exists(7)
        assert not store.exists('7')


class TestGet:
    """Tests for FlatStore.get."""

    def test_get_values(self, store, initial_scope):
        """Test stored values come back unchanged, empty ones included."""
        assert store.get('key_1') == 'value_1'
        assert store.get('empty_key_1') == ''
        assert store.get('empty_key_2') == '0'
        assert store.get('empty_key_3') == 0
        assert store.get('empty_key_4') is None
        assert store.get() == initial_scope

    def test_get_without_key_returns_scope(self, store, initial_scope):
        """Test get() returns the live root scope."""
        assert store.get() is initial_scope

    def test_get_default(self, store):
        """Test default is returned for a missing key."""
        assert store.get('key_3', 100500) == 100500

    def test_present_value_wins_over_default(self, store):
        """Test a stored None is returned even if a default is passed."""
        assert store.get('empty_key_4', 'fallback') is None
        assert store.get('empty_key_2', 'fallback') == '0'

    def test_missing_key_raises(self, store):
        """Test missing key without default raises MissingKeyError."""
        with pytest.raises(MissingKeyError, match="Missing key 'nonexistent_key'") as exc:
            store.get('nonexistent_key')
        assert exc.value.key == 'nonexistent_key'
        assert str(exc.value) == "Missing key 'nonexistent_key'"

    def test_missing_key_is_lookup_error(self, store):
        """Test MissingKeyError can be caught as LookupError."""
        with pytest.raises(LookupError):
            store.get('nope')

    def test_missing_key_custom_error(self, store):
        """Test a policy can raise another error kind."""
        with pytest.raises(RuntimeError, match="Missing key 'nope'"):
            store.get('nope', on_missing=OnMissing.raise_(RuntimeError))

    def test_missing_key_warns(self, store):
        """Test warn policy emits one warning and returns None."""
        with warnings.catch_warnings(record=True) as record:
            warnings.simplefilter('always')
            result = store.get('nonexistent_key', on_missing=OnMissing.WARN)
        assert result is None
        assert len(record) == 1
        assert record[0].category is MissingKeyWarning
        assert str(record[0].message) == "Missing key 'nonexistent_key'"

    def test_missing_key_warning_points_at_caller(self, store):
        """Test the warning is attributed to the calling module."""
        with pytest.warns(MissingKeyWarning) as record:
            store.get('nope', on_missing=OnMissing.WARN)
        assert record[0].filename == __file__

    def test_missing_key_custom_warning(self, store):
        """Test warn policy with a custom category."""
        with pytest.warns(RuntimeWarning, match="Missing key 'nope'"):
            store.get('nope', on_missing=OnMissing.warn(RuntimeWarning))

    @pytest.mark.parametrize('policy', [OnMissing.SILENT, None, False])
    def test_missing_key_silent(self, store, policy):
        """Test silent policies return None without warning."""
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            assert store.get('nope', on_missing=policy) is None


class TestMutation:
    """Tests for set, delete, exists and is_empty."""

    def test_common_functionality(self, store):
        """Test the basic set/get/delete/exists/is_empty cycle."""
        store.set('key_1', 'value_1_1')
        assert store.get('key_1') == 'value_1_1'

        store.delete('key_1')
        assert store.exists('key_1') is False
        assert store.is_empty('key_1') is True

        assert store.is_empty('key_3')
        assert store.is_empty('empty_key_1')
        assert store.is_empty('empty_key_2')
        assert store.is_empty('empty_key_3')
        assert store.is_empty('empty_key_4')
        assert not store.is_empty('key_2')
        assert not store.is_empty('array')

    @pytest.mark.parametrize('value', ['', '0', 0, None, False, 'x', [1]])
    def test_set_then_get_returns_value(self, value):
        """Test set values are found by exists and returned by get."""
        store = FlatStore()
        store.set('k', value)
        assert store.exists('k')
        assert store.get('k') == value

    def test_exists_with_none_value(self, store):
        """Test exists is true for a key holding None."""
        assert store.exists('empty_key_4')

    def test_delete_missing_is_noop(self, store):
        """Test deleting an absent key does nothing."""
        before = dict(store.get())
        store.delete('nope')
        assert store.get() == before

    def test_set_mutates_passed_scope(self):
        """Test the store writes into the dict it was given."""
        scope = {}
        store = FlatStore(scope)
        store.set('a', 1)
        assert scope == {'a': 1}


class TestIsEmptyValue:
    """Tests for the emptiness test."""

    @pytest.mark.parametrize('value', ['', '0', 0, 0.0, None, False, [], {}, (), set()])
    def test_empty_values(self, value):
        """Test values treated as empty."""
        assert is_empty_value(value) is True

    @pytest.mark.parametrize(
        'value', ['a', ' ', '00', '0.0', 'false', 1, -1, 0.5, True, [0], {'a': None}, object()]
    )
    def test_non_empty_values(self, value):
        """Test values treated as not empty."""
        assert is_empty_value(value) is False


class TestOverrideAndBranch:
    """Tests for override and get_branch."""

    def test_override(self, store):
        """Test override replaces the whole scope."""
        store.override({'key_1': 'value_1*'})
        assert store.get('key_1') == 'value_1*'
        assert not store.exists('key_2')

    def test_override_round_trip(self, store):
        """Test get() returns the overriding scope."""
        scope = {'a': 1, 'b': {'c': 2}}
        store.override(scope)
        assert store.get() == scope

    def test_override_rejects_non_dict(self, store):
        """Test override requires a dict."""
        with pytest.raises(InvalidScopeError):
            store.override([('a', 1)])

    def test_constructor_rejects_non_dict(self):
        """Test the constructor requires a dict scope."""
        with pytest.raises(InvalidScopeError, match="must be a dict"):
            FlatStore('abc')

    def test_get_branch(self, store):
        """Test get_branch seeds a new store from the value."""
        branch = store.get_branch('array')
        assert isinstance(branch, FlatStore)
        assert branch.get() == {'key_1_1': 'value_1_1'}

    def test_get_branch_is_independent(self, store):
        """Test branch mutations do not reach the parent."""
        branch = store.get_branch('array')
        branch.set('key_1_1', 'changed')
        branch.set('key_1_2', 'added')
        assert store.get('array') == {'key_1_1': 'value_1_1'}

    def test_get_branch_inherits_options(self):
        """Test the branch keeps the parent options unless given new ones."""
        store = FlatStore({'sub': {}}, {'owner': 'me'})
        assert store.get_branch('sub').options == store.options
        other = store.get_branch('sub', RegistryOptions(extra={'owner': 'you'}))
        assert other.options.get('owner') == 'you'

    def test_get_branch_non_dict_raises(self, store):
        """Test get_branch requires a dict value."""
        with pytest.raises(InvalidScopeError):
            store.get_branch('key_1')

    def test_get_branch_missing_raises(self, store):
        """Test get_branch of an absent key raises MissingKeyError."""
        with pytest.raises(MissingKeyError):
            store.get_branch('nope')


class TestContainerProtocol:
    """Tests for iteration, len and membership."""

    def test_iteration_order(self, store, initial_scope):
        """Test iteration yields keys in insertion order."""
        assert list(store) == list(initial_scope)

    def test_items(self, store, initial_scope):
        """Test items yields top-level pairs."""
        assert dict(store.items()) == initial_scope

    def test_len(self, store):
        """Test len counts top-level keys."""
        assert len(store) == 7
        store.set('new', 1)
        assert len(store) == 8

    def test_contains(self, store):
        """Test membership delegates to exists."""
        assert 'key_1' in store
        assert 'nope' not in store
        assert 1.5 not in store

    def test_repr(self, store):
        """Test string representation lists keys."""
        assert repr(store).startswith("FlatStore(['key_1'")

    def test_default_options(self, store):
        """Test a flat store gets default options."""
        assert store.options == RegistryOptions()
        assert store.options.delimiter == '/'
