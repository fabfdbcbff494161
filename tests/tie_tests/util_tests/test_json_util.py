import pytest

from tie.util.json_util import ensure_json_shaped


@pytest.mark.parametrize(
    "value",
    [None, "text", 3, 2.5, True, [], {}, {"a": [1, {"b": None}]}],
)
def test_json_values_pass_through(value) -> None:
    assert ensure_json_shaped(value) is value


@pytest.mark.parametrize("value", [(1,), {1: "a"}, {"a": [(2,)]}, {1, 2}, b"raw"])
def test_non_json_values_raise(value) -> None:
    with pytest.raises(ValueError):
        ensure_json_shaped(value)
