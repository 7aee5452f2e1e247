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

"""Component validation errors.

Every error raised by this package derives from the closest built-in
exception type, so callers that already handle ``TypeError``,
``ValueError`` or ``IndexError`` keep working. All classes are available
directly from the `uricomponents` package namespace::

    import uricomponents

    try:
        path = uricomponents.Path('/bad\\x00path')
    except uricomponents.ComponentSyntaxError:
        ...
"""

__all__ = (
    'ComponentSyntaxError',
    'ComponentTypeError',
    'OffsetOutOfBounds',
    'PathTypeNotFound',
)


class ComponentTypeError(TypeError):
    """The value can not be converted to a component string."""


# NOTE: Not named SyntaxError in order to avoid shadowing the built-in
#   exception raised by the Python parser.
class ComponentSyntaxError(ValueError):
    """The component string is malformed or violates a structural rule."""


class OffsetOutOfBounds(IndexError):
    """The segment offset is outside of the valid range."""


class PathTypeNotFound(ValueError):
    """The path type is neither absolute nor relative."""
