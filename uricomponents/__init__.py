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

"""Primary package for uricomponents, immutable URI component value objects.

The `uricomponents` package can be used to directly access the component
classes, errors, and constants::

    import uricomponents

    path = uricomponents.HierarchicalPath('/path/to/../the/sky.txt')
    str(path.without_dot_segments())  # '/path/the/sky.txt'
"""

import logging as _logging

__all__ = (
    # Components
    'Component',
    'HierarchicalPath',
    'Path',
    'UserInfo',
    'remove_dot_segments',
    # Errors
    'ComponentSyntaxError',
    'ComponentTypeError',
    'OffsetOutOfBounds',
    'PathTypeNotFound',
    # Constants
    'DOT_SEGMENTS',
    'Encoding',
    'PathType',
    'SEPARATOR',
    # Package version
    '__version__',
)

from uricomponents.components import Component
from uricomponents.components import HierarchicalPath
from uricomponents.components import Path
from uricomponents.components import remove_dot_segments
from uricomponents.components import UserInfo
from uricomponents.constants import DOT_SEGMENTS
from uricomponents.constants import Encoding
from uricomponents.constants import PathType
from uricomponents.constants import SEPARATOR
from uricomponents.errors import ComponentSyntaxError
from uricomponents.errors import ComponentTypeError
from uricomponents.errors import OffsetOutOfBounds
from uricomponents.errors import PathTypeNotFound

# NOTE: Ensure that "from uricomponents import uri" picks the front-door
#   module rather than uricomponents.util.uri.
import uricomponents.uri  # NOQA: F401

# Package version
from uricomponents.version import __version__  # NOQA: F401

# NOTE: Only to be used internally on the rare occasion that we need to log
#   something that we can't communicate any other way.
_logger = _logging.getLogger('uricomponents')
_logger.addHandler(_logging.NullHandler())
