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

"""Base class for URI component value objects."""

from __future__ import annotations

import abc
from typing import Any, Optional

from uricomponents._typing import Stringable
from uricomponents.errors import ComponentSyntaxError
from uricomponents.errors import ComponentTypeError
from uricomponents.util import uri

__all__ = ('Component',)


def _is_stringable(value: Any) -> bool:
    # NOTE: Every object has a __str__() method, but the one inherited from
    #   object only renders the repr, which is never a sensible component.
    if isinstance(value, (bool, bytes, bytearray)):
        return False

    if isinstance(value, (str, int, float)):
        return True

    return type(value).__str__ is not object.__str__


class Component(metaclass=abc.ABCMeta):
    """Abstract immutable URI component.

    A component wraps an optional string: ``None`` stands for an undefined
    component, whereas ``''`` is a defined but empty one. Instances are
    never modified after construction; every ``with*()`` method returns a
    new instance, or the same instance when nothing would change.

    Concrete components store their value decoded (see
    :func:`uricomponents.util.uri.decode`), and percent-encode it again in
    :meth:`get_content`.
    """

    __slots__ = ()

    @classmethod
    def filter_component(cls, component: Optional[Stringable]) -> Optional[str]:
        """Convert the input to a component string.

        Args:
            component: A string, a number, an object implementing
                ``__str__()``, another component, or ``None``.

        Returns:
            str: The string value, or ``None`` if `component` is ``None`` or
            an undefined component.

        Raises:
            ComponentTypeError: `component` can not be converted to a string.
            ComponentSyntaxError: The string contains a control character,
                or can not be encoded as UTF-8.
        """

        if isinstance(component, Component):
            return component.get_content()

        if component is None:
            return None

        if not _is_stringable(component):
            raise ComponentTypeError(
                'Expected component to be stringable; received {}'.format(
                    type(component).__name__
                )
            )

        component = str(component)
        if uri.has_invalid_chars(component):
            raise ComponentSyntaxError(
                'Invalid component string: {!r}'.format(component)
            )

        if not component.isascii():
            try:
                component.encode()
            except UnicodeEncodeError as ex:
                raise ComponentSyntaxError(
                    'Invalid component string: {!r}'.format(component)
                ) from ex

        return component

    @classmethod
    def validate_component(cls, component: Optional[Stringable]) -> Optional[str]:
        """Filter the input and decode its percent-encoded characters."""
        filtered = cls.filter_component(component)
        if filtered is None:
            return None

        return uri.decode(filtered)

    @abc.abstractmethod
    def get_content(self) -> Optional[str]:
        """Return the RFC 3986 encoded content, or ``None`` if undefined."""

    @abc.abstractmethod
    def with_content(self, content: Optional[Stringable]) -> Component:
        """Return an instance with the specified content."""

    def get_uri_component(self) -> str:
        """Return the content as it would appear inside a URI."""
        return str(self)

    def __str__(self) -> str:
        return self.get_content() or ''

    def __repr__(self) -> str:
        return '{}({!r})'.format(type(self).__name__, self.get_content())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return self.get_content() == other.get_content()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.get_content()))
