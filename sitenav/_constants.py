"""Common literal values used across sitenav.

These constants keep declaration keys and defaults centralized so the
loader, the navigation builder, and tests can import the same values without
drifting. Intended for internal use within the sitenav package.

Examples
--------
>>> from sitenav import _constants
>>> _constants.DEFAULT_SEARCH_PROVIDER
'local'
>>> _constants.NODE_KEY_ALIASES["link"]
'target'
"""

import re

DEFAULT_SEARCH_PROVIDER = "local"

EXTERNAL_TARGET_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")

NODE_KEYS = frozenset(
    {"label", "target", "children", "base_path", "collapsed", "placeholder"}
)
NODE_KEY_ALIASES: dict[str, str] = {
    "text": "label",
    "link": "target",
    "items": "children",
    "base": "base_path",
    "basePath": "base_path",
}

SIDEBAR_ROOT = "sidebar"

ROOT_KEYS = frozenset(
    {"identity", "top_nav", SIDEBAR_ROOT, "social_links", "search", "footer"}
)
ROOT_KEY_ALIASES: dict[str, str] = {
    "topNav": "top_nav",
    "socialLinks": "social_links",
    "searchProvider": "search",
}
