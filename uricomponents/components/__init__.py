"""URI component value objects.

All classes in this package are hoisted into the front-door
`uricomponents` module for convenience::

    import uricomponents

    path = uricomponents.HierarchicalPath('/a/b/c')
"""

from uricomponents.components.base import Component
from uricomponents.components.hierarchical_path import HierarchicalPath
from uricomponents.components.path import Path
from uricomponents.components.path import remove_dot_segments
from uricomponents.components.userinfo import UserInfo

__all__ = (
    'Component',
    'HierarchicalPath',
    'Path',
    'remove_dot_segments',
    'UserInfo',
)
