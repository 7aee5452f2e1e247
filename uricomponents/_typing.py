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
"""Private type aliases used internally by uricomponents."""

from __future__ import annotations

from typing import Callable, Protocol, TYPE_CHECKING, Union

if TYPE_CHECKING:
    from uricomponents.components.base import Component
    from uricomponents.components.path import Path


class SupportsStr(Protocol):
    def __str__(self) -> str: ...


# NOTE: Anything filter_component() accepts. None is handled separately
#   since some components treat it as "undefined".
Stringable = Union['Component', str, int, float, SupportsStr]

PathLike = Union['Path', str]

Encoder = Callable[[str], str]
