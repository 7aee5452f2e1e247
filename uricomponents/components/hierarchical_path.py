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

"""Segmented path component.

:class:`HierarchicalPath` decomposes a :class:`~.Path` into its ``/``
separated segments, and allows them to be read, replaced, inserted or
removed by position::

    from uricomponents import HierarchicalPath

    path = HierarchicalPath('/path/to/the/sky.txt')
    path.get(-1)  # 'sky.txt'
    str(path.with_extension('csv'))  # '/path/to/the/sky.csv'
    str(path.without_segment(0, 1))  # '/the/sky.txt'
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from uricomponents._typing import PathLike
from uricomponents._typing import Stringable
from uricomponents.components.base import Component
from uricomponents.components.path import Path
from uricomponents.constants import PARAMETER_DELIMITER
from uricomponents.constants import PathType
from uricomponents.constants import SEPARATOR
from uricomponents.errors import ComponentSyntaxError
from uricomponents.errors import ComponentTypeError
from uricomponents.errors import OffsetOutOfBounds
from uricomponents.errors import PathTypeNotFound

__all__ = ('HierarchicalPath',)

_CONSECUTIVE_SEPARATORS = re.compile('/+')


def _dirname(path: str) -> str:
    # NOTE: Mirrors POSIX dirname(1): trailing slashes are ignored, and a
    #   path without any slash lives in the current directory ('.').
    if not path:
        return ''

    stripped = path.rstrip(SEPARATOR)
    if not stripped:
        return SEPARATOR

    pos = stripped.rfind(SEPARATOR)
    if pos == -1:
        return '.'

    return stripped[:pos].rstrip(SEPARATOR) or SEPARATOR


def _split_parameter(basename: str) -> Tuple[str, Optional[str]]:
    name, sep, parameter = basename.partition(PARAMETER_DELIMITER)
    return name, (parameter if sep else None)


class HierarchicalPath(Component):
    """A path seen as an ordered sequence of segments.

    The segments are the decoded path split on ``'/'``, without the empty
    segment that precedes the leading slash of an absolute path. Hence,
    ``'/a/b/'`` holds the three segments ``'a'``, ``'b'`` and ``''``, while
    both ``''`` and ``'/'`` hold a single empty segment.

    Instances are immutable: every ``with*()``, ``without*()``,
    :meth:`append` and :meth:`prepend` call returns a new instance built
    from a new underlying :class:`~.Path`, unless nothing changes, in which
    case the instance itself is returned.

    Args:
        path: The path as a :class:`~.Path` instance or a string
            (default ``''``).
    """

    __slots__ = ('_path', '_segments')

    def __init__(self, path: PathLike = '') -> None:
        if not isinstance(path, Path):
            path = Path(path)

        self._path = path

        # NOTE: Path stores its value already decoded, so there is no need
        #   to decode again before splitting.
        decoded = path.decoded()
        if path.is_absolute():
            decoded = decoded[1:]

        self._segments = tuple(decoded.split(SEPARATOR))

    @classmethod
    def create_from_segments(
        cls,
        segments: Iterable[Stringable],
        path_type: Union[PathType, int] = PathType.RELATIVE,
    ) -> HierarchicalPath:
        """Create a new instance from a sequence of segments.

        >>> segments = ['a', 'b', '']
        >>> str(HierarchicalPath.create_from_segments(segments, PathType.ABSOLUTE))
        '/a/b/'

        Args:
            segments (iterable): The segments, in order.
            path_type (PathType): Whether the new path is absolute or
                relative (default ``PathType.RELATIVE``).

        Returns:
            HierarchicalPath: The new instance.

        Raises:
            PathTypeNotFound: `path_type` is not a :class:`~.PathType`.
            ComponentTypeError: A segment is not stringable.
        """

        try:
            path_type = PathType(path_type)
        except ValueError:
            raise PathTypeNotFound(
                '{!r} is an invalid or unsupported {} type'.format(
                    path_type, cls.__name__
                )
            ) from None

        path_segments = []
        for segment in segments:
            value = cls.filter_component(segment)
            if value is None:
                raise ComponentTypeError('The submitted segments are invalid')

            path_segments.append(value)

        path = SEPARATOR.join(path_segments)
        if path_type is PathType.RELATIVE:
            return cls(path.lstrip(SEPARATOR))

        if path[:1] != SEPARATOR:
            return cls(SEPARATOR + path)

        return cls(path)

    # ------------------------------------------------------------------------
    # Sequence access
    # ------------------------------------------------------------------------

    @property
    def segments(self) -> Tuple[str, ...]:
        """The decoded segments of the path."""
        return self._segments

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __getitem__(self, offset: int) -> str:
        segment = self.get(offset)
        if segment is None:
            raise OffsetOutOfBounds('the offset {} is invalid'.format(offset))

        return segment

    def get(self, offset: int) -> Optional[str]:
        """Return the segment at the given offset.

        Negative offsets count from the end of the path, ``-1`` being the
        last segment.

        Args:
            offset (int): Offset of the segment.

        Returns:
            str: The segment, or ``None`` if the offset is out of range.
        """

        if offset < 0:
            offset += len(self._segments)

        if 0 <= offset < len(self._segments):
            return self._segments[offset]

        return None

    def keys(self, segment: str) -> List[int]:
        """Return the offsets of every segment equal to `segment`."""
        return [
            offset for offset, value in enumerate(self._segments) if value == segment
        ]

    # ------------------------------------------------------------------------
    # Path properties
    # ------------------------------------------------------------------------

    def get_content(self) -> str:
        return self._path.get_content()

    def decoded(self) -> str:
        """Return the path without percent-encoding."""
        return self._path.decoded()

    def is_absolute(self) -> bool:
        """Return ``True`` if the path starts with a slash."""
        return self._path.is_absolute()

    def has_trailing_slash(self) -> bool:
        """Return ``True`` if the path ends with a slash."""
        return self._path.has_trailing_slash()

    def get_dirname(self) -> str:
        """Return the directory name of the path.

        The result follows POSIX ``dirname`` semantics: ``'/a/b/c'`` yields
        ``'/a/b'``, ``'/a/b/'`` yields ``'/a'``, and a relative path without
        any slash yields ``'.'``.
        """

        return _dirname(self._path.decoded())

    def get_basename(self) -> str:
        """Return the last segment of the path."""
        return self._segments[-1]

    def get_extension(self) -> str:
        """Return the extension of the basename.

        A trailing segment parameter is ignored, so ``'/a/file.tar.gz;v=1'``
        yields ``'gz'``. An empty string is returned when the basename has
        no extension.
        """

        basename, _ = _split_parameter(self.get_basename())
        _, dot, extension = basename.rpartition('.')
        return extension if dot else ''

    # ------------------------------------------------------------------------
    # Path modifiers
    # ------------------------------------------------------------------------

    def _with_path(self, path: Path) -> HierarchicalPath:
        if path is self._path:
            return self

        return type(self)(path)

    def with_content(self, content: Optional[Stringable]) -> HierarchicalPath:
        content = self.filter_component(content)
        if content == self._path.get_content():
            return self

        return type(self)(content)  # type: ignore[arg-type]

    def without_dot_segments(self) -> HierarchicalPath:
        """Return an instance without dot segments."""
        return self._with_path(self._path.without_dot_segments())

    def with_leading_slash(self) -> HierarchicalPath:
        """Return an absolute instance."""
        return self._with_path(self._path.with_leading_slash())

    def without_leading_slash(self) -> HierarchicalPath:
        """Return a relative instance."""
        return self._with_path(self._path.without_leading_slash())

    def with_trailing_slash(self) -> HierarchicalPath:
        """Return an instance ending with a slash."""
        return self._with_path(self._path.with_trailing_slash())

    def without_trailing_slash(self) -> HierarchicalPath:
        """Return an instance without the trailing slash."""
        return self._with_path(self._path.without_trailing_slash())

    def without_empty_segments(self) -> HierarchicalPath:
        """Return an instance where consecutive slashes are collapsed."""
        current = str(self)
        path = _CONSECUTIVE_SEPARATORS.sub(SEPARATOR, current)
        if path == current:
            return self

        return type(self)(path)

    def append(self, segment: Stringable) -> HierarchicalPath:
        """Return an instance with `segment` added after the last segment.

        Slashes at the junction are trimmed so that a single separator
        joins the path and the new segment.

        Raises:
            ComponentTypeError: `segment` is ``None`` or not stringable.
        """

        value = self.filter_component(segment)
        if value is None:
            raise ComponentTypeError('The appended path can not be None')

        return type(self)(
            str(self).rstrip(SEPARATOR) + SEPARATOR + value.lstrip(SEPARATOR)
        )

    def prepend(self, segment: Stringable) -> HierarchicalPath:
        """Return an instance with `segment` added before the first segment.

        Slashes at the junction are trimmed so that a single separator
        joins the new segment and the path.

        Raises:
            ComponentTypeError: `segment` is ``None`` or not stringable.
        """

        value = self.filter_component(segment)
        if value is None:
            raise ComponentTypeError('The prepended path can not be None')

        return type(self)(
            value.rstrip(SEPARATOR) + SEPARATOR + str(self).lstrip(SEPARATOR)
        )

    def with_segment(self, key: int, segment: PathLike) -> HierarchicalPath:
        """Return an instance with the segment at `key` replaced.

        Valid keys range from ``-n - 1`` to ``n`` inclusive, where ``n`` is
        the number of segments. A negative key is first increased by ``n``.
        The resulting key ``n`` appends the segment, and the resulting key
        ``-1`` (i.e., the original key ``-n - 1``) prepends it. Any other
        key replaces the segment at that position.

        Args:
            key (int): Offset of the segment to replace.
            segment: The new segment.

        Returns:
            HierarchicalPath: The new instance.

        Raises:
            OffsetOutOfBounds: `key` is out of range.
        """

        nb_segments = len(self._segments)
        if key < -nb_segments - 1 or key > nb_segments:
            raise OffsetOutOfBounds('the given key {} is invalid'.format(key))

        if key < 0:
            key += nb_segments

        if key == nb_segments:
            return self.append(segment)

        if key == -1:
            return self.prepend(segment)

        if not isinstance(segment, Path):
            segment = Path(segment)

        value = segment.decoded()
        if value == self._segments[key]:
            return self

        segments = list(self._segments)
        segments[key] = value
        if self.is_absolute():
            segments.insert(0, '')

        return type(self)(SEPARATOR.join(segments))

    def without_segment(self, key: int, *keys: int) -> HierarchicalPath:
        """Return an instance without the segments at the given offsets.

        Negative offsets count from the end of the path. Duplicate offsets
        are removed only once. The absolute or relative form of the path is
        kept.

        Raises:
            OffsetOutOfBounds: An offset is out of range.
        """

        nb_segments = len(self._segments)
        deleted_keys = set()
        for value in (key, *keys):
            if isinstance(value, bool) or not isinstance(value, int):
                raise OffsetOutOfBounds('the key {!r} is invalid'.format(value))

            if value < -nb_segments or value > nb_segments - 1:
                raise OffsetOutOfBounds('the key {} is invalid'.format(value))

            if value < 0:
                value += nb_segments

            deleted_keys.add(value)

        path = SEPARATOR.join(
            segment
            for offset, segment in enumerate(self._segments)
            if offset not in deleted_keys
        )
        if self.is_absolute():
            return type(self)(SEPARATOR + path)

        return type(self)(path)

    def with_dirname(self, path: PathLike) -> HierarchicalPath:
        """Return an instance with the directory name replaced.

        The basename of the current path is kept.
        """

        if not isinstance(path, Path):
            path = Path(path)

        if path.decoded() == self.get_dirname():
            return self

        return type(self)(
            str(path).rstrip(SEPARATOR) + SEPARATOR + self.get_basename()
        )

    def with_basename(self, basename: Stringable) -> HierarchicalPath:
        """Return an instance with the last segment replaced.

        Raises:
            ComponentSyntaxError: `basename` is ``None`` or contains a
                path separator.
        """

        value = self.validate_component(basename)
        if value is None:
            raise ComponentSyntaxError('a basename sequence can not be None')

        if SEPARATOR in value:
            raise ComponentSyntaxError(
                'The basename can not contain the path separator'
            )

        return self.with_segment(len(self._segments) - 1, value)

    def with_extension(self, extension: Stringable) -> HierarchicalPath:
        """Return an instance with the basename extension replaced.

        Any segment parameter (e.g., ``;v=1``) is kept after the new
        extension. An empty `extension` removes the current one. Nothing
        changes when the basename is empty.

        Raises:
            ComponentSyntaxError: `extension` is ``None``, contains a path
                separator, or starts with a ``'.'``.
        """

        value = self.validate_component(extension)
        if value is None:
            raise ComponentSyntaxError('an extension sequence can not be None')

        if SEPARATOR in value:
            raise ComponentSyntaxError(
                'an extension sequence can not contain a path delimiter'
            )

        if value.startswith('.'):
            raise ComponentSyntaxError(
                'an extension sequence can not contain a leading `.` character'
            )

        name, parameter = _split_parameter(self.get_basename())
        if not name:
            return self

        return self.with_basename(_build_basename(value, name, parameter))


def _build_basename(extension: str, name: str, parameter: Optional[str]) -> str:
    stem, dot, _ = name.rpartition('.')
    if dot:
        name = stem

    suffix = PARAMETER_DELIMITER + parameter if parameter else ''

    extension = extension.strip()
    if not extension:
        return name + suffix

    return name + '.' + extension + suffix
