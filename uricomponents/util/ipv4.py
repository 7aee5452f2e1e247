# Copyright 2026 by the uricomponents authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Numeric IPv4 host utilities.

Hosts such as ``0x7f.1`` or ``2130706433`` are accepted by most URL
parsers as alternative spellings of ``127.0.0.1``. This module converts
those spellings to the canonical dotted-decimal form::

    from uricomponents.util import ipv4

    ipv4.parse('0x7f.1')  # '127.0.0.1'
    ipv4.parse('example.com')  # 'example.com'

The arithmetic is delegated to a :class:`Math` strategy that is passed
explicitly to the parser.
"""

from __future__ import annotations

import ipaddress
import string
from typing import List, Optional, Protocol

import uricomponents

__all__ = (
    'INTEGER_MATH',
    'IntegerMath',
    'IPv4Parser',
    'Math',
    'parse',
)

MAX_IPV4_NUMBER = 0xFFFFFFFF

_HEX_DIGITS = frozenset(string.hexdigits)
_OCT_DIGITS = frozenset(string.octdigits)


class Math(Protocol):
    """Arithmetic needed to convert numeric hosts."""

    def pow(self, base: int, exponent: int) -> int: ...

    def multiply(self, value: int, factor: int) -> int: ...

    def compare(self, value1: int, value2: int) -> int: ...

    def base_convert(self, digits: str, base: int) -> int: ...

    def long2ip(self, value: int) -> str: ...


class IntegerMath:
    """Math strategy backed by Python's arbitrary-precision integers."""

    __slots__ = ()

    def pow(self, base: int, exponent: int) -> int:
        return base**exponent

    def multiply(self, value: int, factor: int) -> int:
        return value * factor

    def compare(self, value1: int, value2: int) -> int:
        return (value1 > value2) - (value1 < value2)

    def base_convert(self, digits: str, base: int) -> int:
        return int(digits, base)

    def long2ip(self, value: int) -> str:
        return str(ipaddress.IPv4Address(value))


INTEGER_MATH = IntegerMath()


class IPv4Parser:
    """Convert non-decimal IPv4 host literals to dotted-decimal notation.

    Args:
        math (Math): Arithmetic strategy used for the conversion.
    """

    __slots__ = ('_math',)

    def __init__(self, math: Math) -> None:
        self._math = math

    def parse(self, host: str) -> str:
        """Translate an IPv4 host from a non decimal representation.

        Each dot-separated part may be written in decimal, in octal (with a
        leading ``0``), or in hexadecimal (with a leading ``0x``). When fewer
        than four parts are given, the last part fills the remaining
        octets, e.g. ``1.2.3`` is read as ``1.2.0.3``.

        Args:
            host (str): Host to translate.

        Returns:
            str: The dotted-decimal IPv4 address, or `host` unchanged when it
            can not be read as a numeric IPv4 address.
        """

        if not host or '..' in host:
            return host

        parts = host.split('.')
        if parts[-1] == '':
            parts.pop()

        if len(parts) > 4:
            return host

        numbers: List[int] = []
        for part in parts:
            number = self._filter_part(part)
            if number is None or number > MAX_IPV4_NUMBER:
                return host

            numbers.append(number)

        math = self._math
        ipv4 = numbers.pop()
        if math.compare(ipv4, math.pow(256, 4 - len(numbers))) >= 0:
            uricomponents._logger.debug(
                'Host %r overflows the last IPv4 part; leaving it as-is', host
            )
            return host

        for offset, number in enumerate(numbers):
            if number > 255:
                return host

            ipv4 += math.multiply(number, math.pow(256, 3 - offset))

        return math.long2ip(ipv4)

    def _filter_part(self, part: str) -> Optional[int]:
        if part[:2].lower() == '0x':
            digits = part[2:].lstrip('0')
            if not digits:
                return 0

            if not _HEX_DIGITS.issuperset(digits):
                return None

            return self._math.base_convert(digits, 16)

        if part.startswith('0'):
            digits = part[1:].lstrip('0')
            if not digits:
                return 0

            if not _OCT_DIGITS.issuperset(digits):
                return None

            return self._math.base_convert(digits, 8)

        # NOTE: str.isdigit() also accepts non-ASCII digits such as '²'.
        if part.isascii() and part.isdigit():
            return self._math.base_convert(part, 10)

        return None


def parse(host: str, math: Math = INTEGER_MATH) -> str:
    """Translate an IPv4 host from a non decimal representation.

    Shorthand for ``IPv4Parser(math).parse(host)``.

    Args:
        host (str): Host to translate.

    Keyword Arguments:
        math (Math): Arithmetic strategy (default :data:`INTEGER_MATH`).

    Returns:
        str: The dotted-decimal IPv4 address, or `host` unchanged.
    """

    return IPv4Parser(math).parse(host)
