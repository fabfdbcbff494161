import pytest
from pydantic import ValidationError

from tie.domain.test_case import TestCase


def test_matches_any_allowed_output() -> None:
    test_case = TestCase(input=[3, 1, 2], allowed_outputs=[[1, 2, 3], [1, 3, 2]])

    assert test_case.matches_output([1, 2, 3])
    assert not test_case.matches_output([3, 2, 1])


def test_without_allowed_outputs_nothing_matches() -> None:
    assert not TestCase(input="abc").matches_output("abc")


def test_accepts_camel_case_keys() -> None:
    test_case = TestCase.model_validate(
        {"input": "abc", "allowedOutputs": ["cba"], "tag": "reverse"}
    )

    assert test_case.allowed_outputs == ["cba"]
    assert test_case.tag == "reverse"


def test_rejects_values_that_do_not_survive_json() -> None:
    with pytest.raises(ValidationError):
        TestCase(input=(1, 2))
    with pytest.raises(ValidationError):
        TestCase(input="abc", allowed_outputs=[{1: "a"}])
