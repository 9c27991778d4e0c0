"""Query-string fragments for the OGD realtime endpoints.

The upstream API takes repeated keys for multi-valued parameters:
    &rbl=4410&rbl=4411

Values are interpolated as-is. There is no percent-encoding, so inputs with
reserved characters (&, =, #, spaces) produce a malformed query string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union


Atom = Union[str, int, float, bool]


@dataclass(frozen=True)
class Scalar:
    value: Atom

    def fragments(self, key: str) -> str:
        return f"&{key}={_format(self.value)}"


@dataclass(frozen=True)
class Many:
    """A multi-valued parameter. String elements are sent upper-cased."""

    values: Tuple[Atom, ...]

    def fragments(self, key: str) -> str:
        return "".join(f"&{key}={_format(_normalise(v))}" for v in self.values)


QueryValue = Union[Scalar, Many]
RawValue = Union[Atom, Sequence[Atom], Scalar, Many]


def _normalise(value: Atom) -> Atom:
    return value.upper() if isinstance(value, str) else value


def _format(value: Atom) -> str:
    # Match the wire form the API expects for flags.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def query_value(raw: RawValue) -> QueryValue:
    """Wrap a plain Python value in its Scalar/Many variant."""
    if isinstance(raw, (Scalar, Many)):
        return raw
    if isinstance(raw, (list, tuple)):
        return Many(tuple(raw))
    return Scalar(raw)


def build_url(key: str, value: RawValue) -> str:
    """Encode one parameter as `&key=value` fragment(s)."""
    return query_value(value).fragments(key)


def is_present(value: object) -> bool:
    """Optional parameters are sent only when set to a truthy value.

    `False`, `0` and `""` count as absent, the same as `None`.
    """
    if isinstance(value, Scalar):
        return bool(value.value)
    if isinstance(value, Many):
        return bool(value.values)
    return bool(value)
