"""Typing of raw sensor values.

Values reach the SDK as free-form text (from a CLI, a form, a config file)
and must be sent to the cloud as a boolean, a number or a Base64 string.
Numbers are checked first, so a string such as ``"1234"`` that is also valid
Base64 is sent as the number 1234.

Numeric parsing follows the ``parseFloat`` rule used by KNoT's JavaScript
tooling: the longest numeric literal at the start of the text is taken and
anything after it is ignored, so ``"3.14abc"`` becomes ``3.14`` and
``"0x1A"`` becomes ``0``. Existing deployments depend on this.
"""

import binascii
import re
from base64 import b64decode
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..core.error import UnsupportedValueTypeError


# Whitespace skipped by JavaScript's parseFloat (WhiteSpace and LineTerminator)
_JS_WHITESPACE = (
    r"\t\n\v\f\r\x20\u00a0\u1680\u2000-\u200a"
    r"\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_NUMERIC_PREFIX = re.compile(
    r"""
    [%s]*
    (?P<literal>
        [+-]?
        (?:
            Infinity
          | [0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?
          | \.[0-9]+(?:[eE][+-]?[0-9]+)?
        )
    )
    """ % _JS_WHITESPACE,
    re.VERBOSE,
)

# Integral values below this are sent as int, as JSON.stringify would
_MAX_SAFE_INTEGER = 2 ** 53

_BOOLEANS = {"true": True, "false": False}


class ValueType(Enum):
    """Kinds of values a sensor accepts."""
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"


@dataclass(frozen=True)
class SensorValue:
    """A coerced value, ready to be attached to a ``set_data`` request."""
    type: ValueType
    value: Union[bool, int, float, str]

    @classmethod
    def boolean(cls, value: bool) -> 'SensorValue':
        return cls(ValueType.BOOLEAN, value)

    @classmethod
    def number(cls, value: Union[int, float]) -> 'SensorValue':
        return cls(ValueType.NUMBER, value)

    @classmethod
    def string(cls, value: str) -> 'SensorValue':
        return cls(ValueType.STRING, value)

    def to_wire(self) -> Union[bool, int, float, str]:
        """Plain value as it goes into the update payload."""
        return self.value


def parse_number(text: str) -> Optional[Union[int, float]]:
    """Parse the leading numeric literal of ``text``.

    Only ASCII digits count, as in ``parseFloat``. Integral results that fit
    in a double exactly are returned as ``int`` so that ``"42"`` goes on the
    wire as ``42`` rather than ``42.0``.

    Returns:
        The parsed number, or None if ``text`` does not start with a number
    """
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return None
    literal = match.group("literal")
    if literal.lstrip("+-") == "Infinity":
        return float(literal.replace("Infinity", "inf"))
    number = float(literal)
    if number.is_integer() and abs(number) < _MAX_SAFE_INTEGER:
        return int(number)
    return number


def is_base64(text: str) -> bool:
    """Check that ``text`` is padded Base64 using the standard alphabet."""
    try:
        b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def coerce(text: str) -> SensorValue:
    """Convert raw text into a typed sensor value.

    Rules, in order: leading numeric literal, exact ``true``/``false``,
    valid Base64 (kept verbatim, not decoded). Booleans are case-sensitive;
    other spellings such as ``"True"`` are rejected rather than sent as
    Base64.

    Raises:
        UnsupportedValueTypeError: If no rule matches
    """
    if not isinstance(text, str):
        raise UnsupportedValueTypeError(text)

    number = parse_number(text)
    if number is not None:
        return SensorValue.number(number)

    if text in _BOOLEANS:
        return SensorValue.boolean(_BOOLEANS[text])
    if text.lower() in _BOOLEANS:
        # "TRUE" is valid Base64 too, but it is a mistyped boolean
        raise UnsupportedValueTypeError(text)

    if is_base64(text):
        return SensorValue.string(text)

    raise UnsupportedValueTypeError(text)
