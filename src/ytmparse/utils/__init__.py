"""Utility functions for ytmparse.

Not re-exported at the top-level `ytmparse` package.
"""

from ytmparse.utils.cookies import cookie_auth_headers, read_cookies, sapisid_hash

__all__ = [
    "cookie_auth_headers",
    "read_cookies",
    "sapisid_hash",
]
