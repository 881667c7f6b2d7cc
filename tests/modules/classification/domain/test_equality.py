# tests/modules/classification/domain/test_equality.py
"""
Tests para: deep_equal
Tipo: Unitario (Domain)
Enfoque: igualdad estructural, tipos no comparables y ciclos.
"""
import collections
import datetime
import re
import types

from type_inspector.core.value_objects import UNDEFINED, Symbol
from type_inspector.modules.classification.domain.equality import deep_equal


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class OtherPoint:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class Explodes:
    __slots__ = ()

    def __eq__(self, other):
        raise RuntimeError("no comparable")

    __hash__ = object.__hash__


# === Casos de Prueba: estructura ===


def test_nested_arrays_are_equal():
    assert deep_equal([1, [2, 3]], [1, [2, 3]]) is True
    assert deep_equal([1, [2, 3], [4, [5, 6]]], [1, [2, 3], [4, [5, 6]]]) is True
    assert deep_equal([1, ["abc", {}], [4, []]], [1, ["abc", {}], [4, []]]) is True


def test_string_array_is_not_number_array():
    assert deep_equal(["1", "2"], [1, 2]) is False
    assert deep_equal([["1", "2"]], [[1, 2]]) is False


def test_number_and_string_are_not_equal():
    assert deep_equal(1, "1") is False


def test_bool_and_number_are_not_equal():
    assert deep_equal(True, 1) is False
    assert deep_equal(0, False) is False


def test_list_and_tuple_compare_as_arrays():
    assert deep_equal((1, 2), [1, 2]) is True
    assert deep_equal([1, 2], [1, 2, 3]) is False


def test_dicts_ignore_key_order():
    assert deep_equal({"a": 1, "b": [1]}, {"b": [1], "a": 1}) is True
    assert deep_equal({"a": 1}, {"a": 2}) is False
    assert deep_equal({"a": 1}, {"b": 1}) is False


def test_numeric_edge_cases():
    assert deep_equal(float("nan"), float("nan")) is True
    assert deep_equal(float("inf"), float("inf")) is True
    assert deep_equal(float("inf"), float("-inf")) is False
    assert deep_equal(1, 1.0) is True


def test_null_and_undefined():
    assert deep_equal(None, None) is True
    assert deep_equal(UNDEFINED, UNDEFINED) is True
    assert deep_equal(None, UNDEFINED) is False


# === Casos de Prueba: objetos de dominio ===


def test_domain_object_is_not_a_plain_dict():
    """
    Given: Un objeto de dominio y un dict con los mismos campos visibles
    When: Se comparan
    Then: No son iguales (la clase forma parte de la estructura)
    """
    assert deep_equal(Point(1, 2), {"x": 1, "y": 2}) is False
    assert deep_equal(Point(1, 2), OtherPoint(1, 2)) is False


def test_domain_objects_compare_by_fields():
    assert deep_equal(Point(1, [2]), Point(1, [2])) is True
    assert deep_equal(Point(1, 2), Point(1, 3)) is False


def test_namespaces_compare_by_fields():
    assert deep_equal(types.SimpleNamespace(a=1), types.SimpleNamespace(a=1)) is True


def test_maps_sets_dates_regexps_and_errors():
    assert deep_equal(
        collections.OrderedDict(a=[1]), collections.OrderedDict(a=[1])
    ) is True
    assert deep_equal(collections.OrderedDict(a=1), collections.Counter(a=1)) is False
    assert deep_equal({1, 2}, {2, 1}) is True
    assert deep_equal({1}, {1, 2}) is False
    assert deep_equal(datetime.date(2024, 1, 1), datetime.date(2024, 1, 1)) is True
    assert deep_equal(
        datetime.date(2024, 1, 1), datetime.datetime(2024, 1, 1)
    ) is False
    assert deep_equal(re.compile("A+"), re.compile("A+")) is True
    assert deep_equal(re.compile("A+"), re.compile("A+", re.I)) is False
    assert deep_equal(ValueError("x"), ValueError("x")) is True
    assert deep_equal(ValueError("x"), TypeError("x")) is False


def test_dict_keys_keep_their_refined_tag():
    """
    Given: Dos dicts cuyas claves 1 y True comparten hash
    When: Se comparan estructuralmente
    Then: No son iguales, igual que 1 frente a True
    """
    assert deep_equal({1: "a"}, {True: "a"}) is False
    assert deep_equal({1: "a", "1": "b"}, {"1": "b", 1: "a"}) is True
    assert deep_equal({0: "a"}, {0: "a"}) is True


def test_set_members_keep_their_refined_tag():
    assert deep_equal({1}, {True}) is False
    assert deep_equal(frozenset({0, "x"}), frozenset({"x", 0})) is True


def test_sets_and_arrays_agree_on_nan():
    # Arrange
    nan_a, nan_b = float("nan"), float("nan")

    # Act / Assert
    assert deep_equal([nan_a], [nan_b]) is True
    assert deep_equal({nan_a}, {nan_b}) is True
    assert deep_equal({nan_a, 1}, {nan_b, 2}) is False


# === Casos de Prueba: tipos no comparables ===


def test_functions_are_equal_only_by_identity():
    def f():
        return 1

    def g():
        return 1

    assert deep_equal(f, f) is True
    assert deep_equal(f, g) is False
    assert deep_equal([f], [f]) is True


def test_symbols_are_equal_only_by_identity():
    s = Symbol("id")

    assert deep_equal(s, s) is True
    assert deep_equal(Symbol("id"), Symbol("id")) is False


def test_opaque_values_are_equal_only_by_identity():
    data = b"abc"

    assert deep_equal(data, data) is True
    assert deep_equal(b"abc", bytes([97, 98, 99])) is False


def test_failing_eq_is_reported_as_not_equal():
    assert deep_equal(Explodes(), Explodes()) is False


# === Casos de Prueba: ciclos ===


def test_cyclic_structures_terminate():
    """
    Given: Dos listas que se contienen a sí mismas
    When: Se comparan
    Then: Son iguales (coinducción) y no hay recursión infinita
    """
    # Arrange
    a = [1]
    a.append(a)
    b = [1]
    b.append(b)

    # Act & Assert
    assert deep_equal(a, b) is True
    assert deep_equal(a, a) is True


def test_cyclic_structures_with_different_content():
    a = {"v": 1}
    a["self"] = a
    b = {"v": 2}
    b["self"] = b

    assert deep_equal(a, b) is False


def test_reflexive_for_representable_values():
    value = {"name": "Max", "items": [1, 2.5, None, "x", {"k": [True]}]}

    assert deep_equal(value, value) is True
    assert deep_equal(value, {"name": "Max", "items": [1, 2.5, None, "x", {"k": [True]}]}) is True
