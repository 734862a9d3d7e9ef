import json
import math
from dataclasses import asdict, is_dataclass

# malformed text surfaces as the decoder's own error
ParseError = json.JSONDecodeError


def _finite(value):
    """NaN and the infinities have no JSON form and are written as null"""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value


def _instance_fields(obj):
    if is_dataclass(obj) and not isinstance(obj, type):
        return _finite(asdict(obj))
    try:
        return _finite(vars(obj))
    except TypeError:
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable") from None


def to_json(value) -> str:
    """
    Compact JSON text for `value`.

    Objects that are not JSON types are written as their instance fields.
    """
    return json.dumps(
        _finite(value),
        separators=(',', ':'),
        ensure_ascii=False,
        allow_nan=False,
        default=_instance_fields
    )


def from_json(cls: type, text: str):
    """
    Rebuild an instance of `cls` from JSON text.

    `cls.__init__` is never run: the instance is created bare and every
    key of the parsed object becomes an attribute, whether or not `cls`
    declares it.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}")
    obj = cls.__new__(cls)
    for key, value in data.items():
        setattr(obj, key, value)
    return obj
