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

from enum import auto
from enum import Enum
from enum import IntEnum
import sys

__all__ = (
    'DOT_SEGMENTS',
    'Encoding',
    'PathType',
    'SEPARATOR',
)

PYTHON_VERSION = tuple(sys.version_info[:3])
"""Python version information triplet: (major, minor, micro)."""

URICOMPONENTS_SUPPORTED = PYTHON_VERSION >= (3, 8, 0)
"""Whether this version of uricomponents supports the current Python version."""

if not URICOMPONENTS_SUPPORTED:  # pragma: nocover
    raise ImportError(
        'uricomponents requires Python 3.8+. '
        '(Recent Pip should automatically pick a suitable version.)'
    )

# RFC 3986, section 3.3
SEPARATOR = '/'

DOT_SEGMENTS = frozenset(['.', '..'])

# NOTE: Parameters trailing a path segment, e.g. "file.txt;v=2", are
#   delimited by a semicolon.
PARAMETER_DELIMITER = ';'

USERINFO_DELIMITER = ':'


class Encoding(Enum):
    """Encoding applied when rendering a component to a string.

    ``RFC3986`` percent-encodes every character that may not appear
    literally in the component, while ``NONE`` returns the stored value
    as-is.
    """

    RFC3986 = auto()
    NONE = auto()


class PathType(IntEnum):
    """Whether a path built from segments should be absolute or relative."""

    RELATIVE = 0
    ABSOLUTE = 1
