import random
import string

import pytest

import uricomponents

# NOTE: Characters that may appear literally in a component string, plus a
#   few non-ASCII ones, minus the percent sign (which introduces triples).
_ALPHABET = (
    ''.join(char for char in string.printable if char.isprintable() and char != '%')
    + 'çü€日\U0001f600'
)

# NOTE: Heavy on '%' and hex digits so that generated strings are full of
#   valid triples as well as stray percent signs.
_ENCODED_ALPHABET = '%%%%0123456789ABCDEFabcdef/./:x é'


class _SuiteUtils:
    """Assorted utilities shared by the test modules."""

    ALPHABET = _ALPHABET
    ENCODED_ALPHABET = _ENCODED_ALPHABET

    @staticmethod
    def arbitrary_strings(count, length, alphabet=_ALPHABET):
        return (
            ''.join([random.choice(alphabet) for _ in range(length)])
            for __ in range(count)
        )


@pytest.fixture(scope='session')
def util():
    return _SuiteUtils()


@pytest.fixture(
    params=[uricomponents.Path, uricomponents.HierarchicalPath],
    ids=['path', 'hierarchical_path'],
)
def path_cls(request):
    return request.param
