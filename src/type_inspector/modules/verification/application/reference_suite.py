# src/type_inspector/modules/verification/application/reference_suite.py
"""
Catálogo de Referencia.

Arquitectura: Application Layer
Responsabilidad: Documentar, con ejemplos ejecutables, el contrato del
clasificador, el analizador y el comparador.
"""

from __future__ import annotations

import re
from collections import OrderedDict, UserString
from datetime import datetime

from type_inspector.core.value_objects import UNDEFINED, Symbol
from type_inspector.modules.classification.application.use_cases import (
    all_same_coarse_type,
    all_unique_refined_types,
    classify_all,
    classify_all_refined,
    count_refined_types,
)
from type_inspector.modules.classification.domain.classifier import coarse_type
from type_inspector.modules.classification.domain.equality import deep_equal
from type_inspector.modules.verification.application.use_cases import ExampleSuite

NAN = float("nan")
INF = float("inf")


def known_values() -> list[object]:
    """Un valor por cada etiqueta refinada (excepto ``other``)."""
    return [
        False,
        291,
        "how are you",
        [0, 1, 2, 3],
        {"id": 1, "name": "Ivan"},
        lambda: None,
        UNDEFINED,
        None,
        NAN,
        -INF,
        datetime.now(),
        re.compile("[A-Za-z]+"),
        {1, 3, 2},
        OrderedDict([(1, "one"), (2, "two")]),
        Exception(),
        Symbol("id"),
    ]


def build_reference_suite() -> ExampleSuite:
    suite = ExampleSuite("reference")
    known = known_values()

    suite.block("Arrays are equal")
    suite.check(
        "Equal arrays with nested arrays",
        deep_equal([1, [2, 3], [4, [5, 6]]], [1, [2, 3], [4, [5, 6]]]),
        True,
    )
    suite.check(
        "Equal arrays with nested arrays, string/object/number",
        deep_equal([1, ["abc", {}], [4, []]], [1, ["abc", {}], [4, []]]),
        True,
    )

    suite.block("Arrays are not equal")
    suite.check(
        "String array vs number array are not equal",
        deep_equal([["1", "2"]], [[1, 2]]),
        False,
    )
    suite.check("Number and string are not equal", deep_equal(1, "1"), False)

    suite.block("coarse_type")
    suite.check("Boolean", coarse_type(True), "boolean")
    suite.check("Number", coarse_type(123), "number")
    suite.check("String", coarse_type("whoo"), "string")
    suite.check("Array", coarse_type([]), "object")
    suite.check("Object", coarse_type({}), "object")
    suite.check("Function", coarse_type(lambda: None), "function")
    suite.check("Undefined", coarse_type(UNDEFINED), "undefined")
    suite.check("Null", coarse_type(None), "object")

    suite.block("all_same_coarse_type")
    suite.check("All values are numbers", all_same_coarse_type([11, 12, 13]), True)
    suite.check("All values are strings", all_same_coarse_type(["11", "12", "13"]), True)
    suite.check(
        "Number, NaN and infinity share the coarse type",
        all_same_coarse_type([123, NAN, 1 / INF, INF]),
        True,
    )
    suite.check("A single object", all_same_coarse_type([{}]), True)
    suite.check("Empty sequence", all_same_coarse_type([]), True)

    suite.block("all_same_coarse_type is false")
    suite.check(
        "A boxed string is an object, not a string",
        all_same_coarse_type(["11", UserString("12"), "13"]),
        False,
    )
    suite.check("NaN and null differ", all_same_coarse_type([NAN, None]), False)
    suite.check("NaN and undefined differ", all_same_coarse_type([NAN, UNDEFINED]), False)
    suite.check("null and undefined differ", all_same_coarse_type([None, UNDEFINED]), False)

    suite.block("classify_all vs classify_all_refined")
    suite.check(
        "Coarse types",
        classify_all(known),
        [
            "boolean",
            "number",
            "string",
            "object",
            "object",
            "function",
            "undefined",
            "object",
            "number",
            "number",
            "object",
            "object",
            "object",
            "object",
            "object",
            "symbol",
        ],
    )
    suite.check(
        "Refined types",
        classify_all_refined(known),
        [
            "boolean",
            "number",
            "string",
            "array",
            "object",
            "function",
            "undefined",
            "null",
            "NaN",
            "infinity",
            "date",
            "regexp",
            "set",
            "map",
            "error",
            "symbol",
        ],
    )

    suite.block("all_unique_refined_types")
    suite.check(
        "All value types are unique", all_unique_refined_types([True, 123, "123"]), True
    )
    suite.check(
        "Two values have the same type",
        all_unique_refined_types([True, 123, "123" == 123]),
        False,
    )
    suite.check("No repeated types in the known values", all_unique_refined_types(known), True)
    suite.check(
        "Object, regexp, null and date are distinct",
        all_unique_refined_types([{}, re.compile("[A-Z]+"), None, datetime.now()]),
        True,
    )
    suite.check("Empty sequence", all_unique_refined_types([]), True)

    suite.block("count_refined_types")
    suite.check(
        "Count refined types of items",
        count_refined_types([True, None, not None, not not None, {}]),
        [("boolean", 3), ("null", 1), ("object", 1)],
    )
    suite.check(
        "Counted types are sorted",
        count_refined_types([{}, None, True, not None, not not None]),
        [("boolean", 3), ("null", 1), ("object", 1)],
    )
    suite.check("A single repeated type", count_refined_types([1, 4, 6]), [("number", 3)])
    suite.check(
        "Count distinct types with repetitions",
        count_refined_types(
            [
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
                INF - INF,
                2 - 1 == 1,
            ]
        ),
        [
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
        ],
    )

    return suite
