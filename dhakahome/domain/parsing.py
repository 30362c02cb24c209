# dhakahome/domain/parsing.py
from __future__ import annotations

import json
import math
from typing import Any, Iterable


def to_int(x: Any) -> int | None:
    if x is None or x == "" or isinstance(x, bool):
        return None
    try:
        return int(str(x).strip())
    except (TypeError, ValueError):
        return None


def to_float(x: Any) -> float | None:
    if x is None or x == "" or isinstance(x, bool):
        return None
    try:
        f = float(str(x).strip())
    except (TypeError, ValueError):
        return None
    if math.isnan(f) or math.isinf(f):
        return None
    return f


def format_number(f: float) -> str:
    """12.0 -> '12', 12.5 -> '12.5'."""
    if float(f).is_integer():
        return str(int(f))
    return str(f)


def round_half_away(f: float) -> int:
    return int(math.copysign(math.floor(abs(f) + 0.5), f))


def to_string(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float):
        if math.isnan(v):
            return ""
        return format_number(v)
    return str(v).strip()


def first_non_empty(*values: str | None) -> str:
    for v in values:
        if v and v.strip():
            return v.strip()
    return ""


def first_string(m: dict[str, Any] | None, *keys: str) -> str:
    """Return the first key whose value renders as a non-empty string."""
    if not m:
        return ""
    for k in keys:
        if k in m:
            s = to_string(m[k])
            if s:
                return s
    return ""


def pick_map(m: dict[str, Any] | None, *keys: str) -> dict[str, Any] | None:
    """Nested object by any of `keys`; JSON-encoded strings are decoded too."""
    if not m:
        return None
    for k in keys:
        if k not in m:
            continue
        v = m[k]
        if isinstance(v, dict) and v:
            return v
        if isinstance(v, str):
            try:
                decoded = json.loads(v)
            except ValueError:
                continue
            if isinstance(decoded, dict) and decoded:
                return decoded
    return None


def pick_slice(m: dict[str, Any] | None, *keys: str) -> list[Any]:
    if not m:
        return []
    for k in keys:
        v = m.get(k)
        if isinstance(v, list):
            return v
    return []


def parse_number(v: Any) -> float | None:
    if isinstance(v, bool):
        return None
    if isinstance(v, (int, float)):
        return to_float(v)
    if isinstance(v, str):
        return to_float(v) if v.strip() else None
    return None


def float_from(m: dict[str, Any] | None, *keys: str) -> float | None:
    if not m:
        return None
    for k in keys:
        if k in m:
            num = parse_number(m[k])
            if num is not None:
                return num
    return None


def int_from(m: dict[str, Any] | None, *keys: str) -> int | None:
    f = float_from(m, *keys)
    if f is None:
        return None
    return round_half_away(f)


_TRUE = {"1", "t", "true"}
_FALSE = {"0", "f", "false"}


def bool_from(m: dict[str, Any] | None, *keys: str) -> bool | None:
    if not m:
        return None
    for k in keys:
        if k not in m:
            continue
        v = m[k]
        if isinstance(v, bool):
            return v
        if isinstance(v, (int, float)):
            return v != 0
        if isinstance(v, str):
            clean = v.strip().lower()
            if not clean:
                continue
            if clean in _TRUE:
                return True
            if clean in _FALSE:
                return False
            num = to_float(clean)
            if num is not None:
                return num != 0
    return None


def titleize(s: str | None) -> str:
    clean = (s or "").replace("_", " ").strip()
    if not clean:
        return ""
    return " ".join(w[:1].upper() + w[1:].lower() for w in clean.split())


def dedup_strings(values: Iterable[str | None]) -> list[str]:
    out: list[str] = []
    seen: set[str] = set()
    for v in values:
        v = (v or "").strip()
        if not v or v in seen:
            continue
        seen.add(v)
        out.append(v)
    return out


def strings_from_list(values: Iterable[Any]) -> list[str]:
    return [s for s in (to_string(v) for v in values) if s]


def parse_string_list(payload: Any) -> list[str]:
    """Accept either a bare list or {"data": [...]}."""
    if isinstance(payload, list):
        return dedup_strings(strings_from_list(payload))
    if isinstance(payload, dict) and "data" in payload:
        return parse_string_list(payload["data"])
    return []


def is_any_value(v: str | None) -> bool:
    return (v or "").strip().lower() == "any"


def clean_any_value(v: str | None) -> str:
    """Trim and treat the literal 'any' (any case) as absent."""
    v = (v or "").strip()
    return "" if is_any_value(v) else v


def parse_price_field(raw: str | None) -> float | None:
    """Strip currency symbols and separators; keep digits and the decimal point."""
    if not raw:
        return None
    digits = "".join(ch for ch in raw if ch in "0123456789.")
    if not digits:
        return None
    try:
        val = float(digits)
    except ValueError:
        return None
    if val <= 0 or math.isinf(val):
        return None
    return val
