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

"""User information component."""

from __future__ import annotations

from typing import Optional, Tuple

from uricomponents._typing import Stringable
from uricomponents.components.base import Component
from uricomponents.constants import Encoding
from uricomponents.constants import USERINFO_DELIMITER
from uricomponents.util import uri

__all__ = ('UserInfo',)


class UserInfo(Component):
    """The ``user:password`` part of a URI authority.

    A password can only exist alongside a non-empty user. An empty user
    is treated as undefined, which also drops the password.

    >>> info = UserInfo('john doe', 'p@ss')
    >>> info.get_content()
    'john%20doe:p%40ss'
    >>> info.with_user_info('').get_content() is None
    True

    Args:
        user: The user, possibly percent-encoded (default ``None``).
        password: The password, possibly percent-encoded (default ``None``).
    """

    __slots__ = ('_user', '_password')

    def __init__(
        self,
        user: Optional[Stringable] = None,
        password: Optional[Stringable] = None,
    ) -> None:
        self._user, self._password = self._filter_user_info(user, password)

    @classmethod
    def _filter_user_info(
        cls, user: Optional[Stringable], password: Optional[Stringable]
    ) -> Tuple[Optional[str], Optional[str]]:
        validated_user = cls.validate_component(user)
        validated_password = cls.validate_component(password)
        if not validated_user:
            # NOTE: An empty user is the same as no user information at all.
            validated_user = None
            validated_password = None

        return validated_user, validated_password

    @property
    def user(self) -> Optional[str]:
        """The decoded user, or ``None`` if undefined."""
        return self._user

    @property
    def password(self) -> Optional[str]:
        """The decoded password, or ``None`` if undefined."""
        return self._password

    def get_content(self) -> Optional[str]:
        return self._render(Encoding.RFC3986)

    def decoded(self) -> Optional[str]:
        """Return the user information without percent-encoding."""
        return self._render(Encoding.NONE)

    def _render(self, enc_type: Encoding) -> Optional[str]:
        if self._user is None:
            return None

        user_info = uri.encode(self._user, enc_type, uri.encode_userinfo)
        if self._password is None:
            return user_info

        password = uri.encode(self._password, enc_type, uri.encode_userinfo)
        return '{}{}{}'.format(user_info, USERINFO_DELIMITER, password)

    def with_content(self, content: Optional[Stringable]) -> UserInfo:
        """Return an instance parsed from a ``user[:password]`` string.

        The string is split on the first ``':'``.
        """

        content = self.filter_component(content)
        if content == self.get_content():
            return self

        if content is None:
            return type(self)()

        user, sep, password = content.partition(USERINFO_DELIMITER)
        return type(self)(user, password if sep else None)

    def with_user_info(
        self, user: Optional[Stringable], password: Optional[Stringable] = None
    ) -> UserInfo:
        """Return an instance with the specified user and password.

        An empty or undefined user removes the password as well.
        """

        user, password = self._filter_user_info(user, password)
        if user == self._user and password == self._password:
            return self

        clone = type(self).__new__(type(self))
        clone._user = user
        clone._password = password
        return clone
