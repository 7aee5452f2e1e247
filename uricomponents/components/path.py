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

"""Path component."""

from __future__ import annotations

from typing import List, Optional

from uricomponents._typing import Stringable
from uricomponents.components.base import Component
from uricomponents.constants import DOT_SEGMENTS
from uricomponents.constants import SEPARATOR
from uricomponents.errors import ComponentTypeError
from uricomponents.util import uri

__all__ = ('Path', 'remove_dot_segments')


def remove_dot_segments(path: str) -> str:
    """Remove the ``.`` and ``..`` segments from a path string.

    This implements the algorithm described in RFC 3986, section 5.2.4.
    A ``..`` segment with no preceding segment is dropped, and the root of
    an absolute path is never removed. When the last segment is a dot
    segment, a trailing slash is appended to the result.

    Args:
        path (str): The path to normalize.

    Returns:
        str: The path without dot segments.
    """

    segments = path.split(SEPARATOR)
    is_absolute = segments[0] == '' and len(segments) > 1

    resolved: List[str] = []
    for segment in segments[1:] if is_absolute else segments:
        if segment == '..':
            if resolved:
                resolved.pop()
        elif segment != '.':
            resolved.append(segment)

    if is_absolute:
        resolved.insert(0, '')

    new_path = SEPARATOR.join(resolved)
    if segments[-1] in DOT_SEGMENTS:
        new_path += SEPARATOR

    return new_path


class Path(Component):
    """A URI path.

    The path is always defined; ``''`` stands for an empty path.

    >>> path = Path('/foo/bar/../baz qux')
    >>> str(path.without_dot_segments())
    '/foo/baz%20qux'

    Args:
        path: The path, possibly percent-encoded (default ``''``).

    Raises:
        ComponentTypeError: `path` is ``None`` or is not stringable.
        ComponentSyntaxError: `path` contains a control character.
    """

    __slots__ = ('_path',)

    def __init__(self, path: Stringable = '') -> None:
        validated = self.validate_component(path)
        if validated is None:
            raise ComponentTypeError('The path can not be None')

        self._path = validated

    def get_content(self) -> str:
        return uri.encode_path(self._path)

    def decoded(self) -> str:
        """Return the path without percent-encoding.

        Triples that would change the structure of the path, such as
        ``%2F``, remain encoded.
        """

        return self._path

    def is_absolute(self) -> bool:
        """Return ``True`` if the path starts with a slash."""
        return self._path[:1] == SEPARATOR

    def has_trailing_slash(self) -> bool:
        """Return ``True`` if the path ends with a slash."""
        return self._path[-1:] == SEPARATOR

    def with_content(self, content: Optional[Stringable]) -> Path:
        content = self.filter_component(content)
        if content == self.get_content():
            return self

        return type(self)(content)

    def without_dot_segments(self) -> Path:
        """Return an instance without dot segments.

        See also: :func:`remove_dot_segments`.
        """

        current = str(self)
        if '.' not in current:
            return self

        return type(self)(remove_dot_segments(current))

    def with_trailing_slash(self) -> Path:
        """Return an instance ending with a slash."""
        if self.has_trailing_slash():
            return self

        return type(self)(str(self) + SEPARATOR)

    def without_trailing_slash(self) -> Path:
        """Return an instance without the trailing slash."""
        if not self.has_trailing_slash():
            return self

        return type(self)(str(self)[:-1])

    def with_leading_slash(self) -> Path:
        """Return an absolute instance."""
        if self.is_absolute():
            return self

        return type(self)(SEPARATOR + str(self))

    def without_leading_slash(self) -> Path:
        """Return an instance without the leading slash."""
        if not self.is_absolute():
            return self

        return type(self)(str(self)[1:])
