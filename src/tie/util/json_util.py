from typing import Any


def ensure_json_shaped(value: Any) -> Any:
    """
    Raise ValueError unless value is made of dicts with string keys, lists,
    strings, numbers, booleans and None, so it survives a JSON round trip unchanged.
    """
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValueError(f"Object keys must be strings, got {key!r}")
            ensure_json_shaped(item)
    elif isinstance(value, list):
        for item in value:
            ensure_json_shaped(item)
    elif value is not None and not isinstance(value, (str, int, float, bool)):
        raise ValueError(
            f"{type(value).__name__} values do not survive a JSON round trip"
        )
    return value
