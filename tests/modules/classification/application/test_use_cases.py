# tests/modules/classification/application/test_use_cases.py
"""
Tests para: Analizador de Colecciones
Tipo: Unitario (Application)
"""
import itertools
import re
from datetime import datetime
from unittest.mock import patch

import pytest

from type_inspector.core.value_objects import UNDEFINED, Symbol
from type_inspector.modules.classification.application.use_cases import (
    all_same_coarse_type,
    all_unique_refined_types,
    classify_all,
    classify_all_refined,
    count_refined_types,
)
from type_inspector.modules.classification.domain.value_objects import FrequencyEntry

# === Fixtures ===


@pytest.fixture
def mixed_values():
    """La secuencia del escenario end-to-end (14 valores, 11 etiquetas)."""
    return [
        5,
        None,
        {"name": "Max"},
        [1, 2, 3],
        re.compile("[1-9]"),
        datetime.now(),
        False,
        UNDEFINED,
        {},
        Symbol("ui"),
        re.compile("A+"),
        "hi",
        float("inf") - float("inf"),
        2 - 1 == 1,
    ]


# === classify_all / classify_all_refined ===


def test_classify_all_preserves_order_and_length():
    items = [True, 1, "s", None, UNDEFINED]

    result = classify_all(items)

    assert result == ["boolean", "number", "string", "object", "undefined"]


def test_classify_all_refined_preserves_order_and_length():
    items = [[1], {"a": 1}, None, float("nan"), -float("inf")]

    result = classify_all_refined(items)

    assert result == ["array", "object", "null", "NaN", "infinity"]


def test_classify_accepts_generators():
    assert classify_all(x for x in [1, "a"]) == ["number", "string"]


# === all_same_coarse_type ===


def test_all_same_coarse_type_empty_is_true():
    assert all_same_coarse_type([]) is True


def test_all_same_coarse_type_numbers():
    assert all_same_coarse_type([1, 2, 3]) is True
    assert all_same_coarse_type([123, float("nan"), float("inf")]) is True


def test_all_same_coarse_type_mixed_is_false():
    assert all_same_coarse_type([1, "2", 3]) is False
    assert all_same_coarse_type([float("nan"), None]) is False
    assert all_same_coarse_type([None, UNDEFINED]) is False


def test_all_same_coarse_type_treats_array_and_object_alike():
    """
    Given: Un array, un dict y None
    When: Se verifica homogeneidad
    Then: True, porque la vista gruesa los agrupa como 'object'
    """
    assert all_same_coarse_type([[1, 2], {"a": 1}, None]) is True


# === all_unique_refined_types ===


def test_all_unique_empty_is_true():
    assert all_unique_refined_types([]) is True


def test_all_unique_distinct_tags():
    assert all_unique_refined_types([True, 123, "123"]) is True
    assert all_unique_refined_types([{}, re.compile("[A-Z]+"), None, datetime.now()]) is True


def test_all_unique_detects_repeated_booleans():
    assert all_unique_refined_types([True, False]) is False


def test_all_unique_stops_at_first_repeat():
    """
    Given: Un iterable cuya repetición ocurre antes de un elemento 'venenoso'
    When: Se verifica unicidad
    Then: Retorna False sin consumir el resto
    """
    # Arrange
    consumed = []

    def values():
        for value in [1, 2, "never"]:
            consumed.append(value)
            yield value

    # Act
    result = all_unique_refined_types(values())

    # Assert
    assert result is False
    assert consumed == [1, 2]


# === count_refined_types ===


def test_count_refined_types_sorted_by_tag():
    result = count_refined_types([True, None, False, not not None, {}])

    assert result == [("boolean", 3), ("null", 1), ("object", 1)]
    assert all(isinstance(entry, FrequencyEntry) for entry in result)


def test_count_refined_types_single_tag():
    assert count_refined_types([1, 4, 6]) == [("number", 3)]


def test_count_refined_types_empty():
    assert count_refined_types([]) == []


def test_count_refined_types_end_to_end(mixed_values):
    result = count_refined_types(mixed_values)

    assert result == [
        ("array", 1),
        ("boolean", 2),
        ("date", 1),
        ("NaN", 1),
        ("null", 1),
        ("number", 1),
        ("object", 2),
        ("regexp", 2),
        ("string", 1),
        ("symbol", 1),
        ("undefined", 1),
    ]
    assert sum(entry.count for entry in result) == len(mixed_values)


def test_count_refined_types_is_permutation_invariant():
    items = [{}, None, True, float("nan"), "a", [1], True, None]
    expected = count_refined_types(items)

    for permutation in itertools.islice(itertools.permutations(items), 200):
        assert count_refined_types(list(permutation)) == expected


@patch("type_inspector.modules.classification.application.use_cases.logger")
def test_all_unique_logs_the_repeated_tag(mock_logger):
    all_unique_refined_types(["a", "b"])

    mock_logger.debug.assert_called_once()
    assert "'string'" in mock_logger.debug.call_args[0][0]
