"""Tests for the assertion engine."""

import pytest

from orderchecks.assertions import (
    PATH_NOT_FOUND,
    AssertionEngine,
    AssertionFailure,
    AssertionStatus,
    expect,
)

STATUS = {
    "overallStatus": "ACTIVE",
    "stage": "PACKING",
    "progressPercent": 50,
    "payment": {"status": "CLEARED"},
    "flags": {"giftWrap": True, "expedited": None},
}


@pytest.fixture
def engine():
    return AssertionEngine()


def test_status_in(engine):
    assert engine.status_in(201, (200, 201)).passed

    result = engine.status_in(404, (200, 201))
    assert result.failed
    assert result.expected == "200 or 201"
    assert result.actual == 404


def test_not_empty(engine):
    assert engine.not_empty('{"id":1}').passed
    assert engine.not_empty("").failed
    assert engine.not_empty(None).failed


def test_exists(engine):
    assert engine.exists(STATUS, "$.payment").passed
    assert engine.exists(STATUS, "$.missing").failed


def test_exists_fails_for_null(engine):
    result = engine.exists(STATUS, "$.flags.expedited")

    assert result.failed
    assert result.actual == "null"


def test_equals(engine):
    assert engine.equals(STATUS, "$.payment.status", "CLEARED").passed
    assert engine.equals(STATUS, "$.progressPercent", 50).passed

    result = engine.equals(STATUS, "$.stage", "SHIPPED")
    assert result.failed
    assert result.expected == "SHIPPED"
    assert result.actual == "PACKING"


def test_equals_missing_path(engine):
    result = engine.equals(STATUS, "$.payment.reference", "R-1")

    assert result.failed
    assert result.actual == PATH_NOT_FOUND


def test_equals_does_not_treat_bool_as_int(engine):
    assert engine.equals({"v": True}, "$.v", 1).failed
    assert engine.equals({"v": True}, "$.v", True).passed


def test_equals_type_mismatch_hint(engine):
    result = engine.equals(STATUS, "$.progressPercent", "50")

    assert result.failed
    assert "Type mismatch" in result.details["hint"]


def test_invalid_path_is_error(engine):
    result = engine.exists(STATUS, "$.[[[")

    assert result.status == AssertionStatus.ERROR


def test_expect_returns_passing_result(engine):
    result = engine.status_in(200, (200,))

    assert expect(result) is result


def test_expect_raises_assertion_failure(engine):
    result = engine.equals(STATUS, "$.stage", "SHIPPED")

    with pytest.raises(AssertionFailure) as excinfo:
        expect(result, "stage should be SHIPPED")

    assert isinstance(excinfo.value, AssertionError)
    assert excinfo.value.result is result
    assert str(excinfo.value) == "stage should be SHIPPED"


def test_result_str_lists_expected_and_actual(engine):
    text = str(engine.equals(STATUS, "$.stage", "SHIPPED"))

    assert text.startswith("FAILED:")
    assert "Expected: 'SHIPPED'" in text
    assert "Actual:   'PACKING'" in text
