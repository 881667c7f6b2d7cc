# tests/modules/verification/application/test_reference_suite.py
"""
Tests para: build_reference_suite
Tipo: Integración (Classification + Verification)
"""
from type_inspector.modules.verification.application.reference_suite import (
    build_reference_suite,
    known_values,
)
from type_inspector.modules.classification.application.use_cases import (
    all_unique_refined_types,
    classify_all_refined,
)


def test_every_reference_case_passes():
    suite = build_reference_suite()

    failing = [r.label for r in suite.results if not r.passed]

    assert failing == []
    assert suite.summary().total >= 30


def test_reference_blocks_are_labelled():
    blocks = list(build_reference_suite().blocks())

    assert blocks[0] == "Arrays are equal"
    assert "count_refined_types" in blocks


def test_known_values_cover_every_tag_but_other():
    tags = classify_all_refined(known_values())

    assert all_unique_refined_types(known_values()) is True
    assert "other" not in tags
    assert len(tags) == 16
