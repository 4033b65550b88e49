"""
inputs.py — Raw Input Normalisation
===================================
Turns whatever the user typed (or the client posted) into a list of values
a simulator can walk over.  Normalisation is total: the worst case keeps
every token as a string.

    normalize_input([3, 1, 2])      → [3, 1, 2]
    normalize_input(7)              → [7]
    normalize_input("[3, 1, 2]")    → [3, 1, 2]
    normalize_input("3, x, 2.5")    → [3, "x", 2.5]
    normalize_input("hello")        → ["hello"]

Also home to the two helpers every simulator shares: a total ordering for
mixed values and the array formatter used in trace messages.
"""

import json
import math
from numbers import Real
from typing import Any, List, Mapping, Sequence, Tuple


def normalize_input(raw: Any) -> List[Any]:
    if raw is None:
        return []
    if isinstance(raw, str):
        return _parse_text(raw)
    if isinstance(raw, Real):
        return [raw]
    if isinstance(raw, (list, tuple)):
        return list(raw)
    return [raw]


def _parse_text(text: str) -> List[Any]:
    if not text.strip():
        return []
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        # RecursionError: nested deeper than the decoder allows
        pass
    else:
        return parsed if isinstance(parsed, list) else [parsed]

    tokens = [_coerce(t) for t in text.split(",") if t.strip()]
    return tokens if tokens else [text]


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(name)


def _coerce(token: str) -> Any:
    t = token.strip()
    if "_" in t:
        return t
    try:
        return int(t)
    except ValueError:
        pass
    try:
        value = float(t)
    except ValueError:
        return t
    return value if math.isfinite(value) else t


def is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def order_key(value: Any) -> Tuple[int, Any]:
    """Numbers sort before everything else; the rest sort by their text."""
    if is_number(value):
        return (0, value)
    return (1, str(value))


def greater(a: Any, b: Any) -> bool:
    return order_key(a) > order_key(b)


def format_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_array(values: Sequence[Any]) -> str:
    return "[" + ", ".join(format_value(v) for v in values) + "]"


def split_search_input(
    raw: Any,
    target: Any = None,
    default_array: Sequence[Any] = (),
) -> Tuple[List[Any], Any]:
    """
    Work out (array, target) for a search simulator.

    Precedence: explicit `target` argument, then a {"array", "target"}
    mapping, then a lone number (searched for in `default_array`), then the
    first element of the array.
    """
    if isinstance(raw, Mapping):
        array = normalize_input(raw.get("array"))
        if target is None:
            target = raw.get("target")
    else:
        array = normalize_input(raw)

    # a target typed as text is coerced the same way array tokens are
    if isinstance(target, str):
        target = _coerce(target)

    if target is None and len(array) == 1 and is_number(array[0]) and default_array:
        return list(default_array), array[0]

    if target is None and array:
        target = array[0]
    return array, target
