"""Percent-encoding utilities.

This module provides the functions used to encode, decode, and normalize
URI component strings. These functions are not available directly in the
`uricomponents` module, and so must be explicitly imported::

    from uricomponents import uri

    uri.decode('/caf%C3%A9/a%2Fb')  # '/café/a%2Fb'
"""

# NOTE: This module exists to make "import uricomponents.uri" work
#   without reaching into the util package.

from uricomponents.util.ipv4 import parse as parse_ipv4_host
from uricomponents.util.uri import create_encoder
from uricomponents.util.uri import decode
from uricomponents.util.uri import encode
from uricomponents.util.uri import encode_path
from uricomponents.util.uri import encode_userinfo
from uricomponents.util.uri import has_invalid_chars
from uricomponents.util.uri import normalize
