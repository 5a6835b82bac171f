"""ytmusicapi authentication from a browser cookie export.

Library surfaces are only served to a signed-in session. A Netscape
cookies.txt exported while logged into YouTube Music is turned into the
request headers ytmusicapi accepts as ``auth``.
"""

import hashlib
import logging
import time
from pathlib import Path

logger = logging.getLogger(__name__)

YTM_ORIGIN = "https://music.youtube.com"

# Netscape columns: domain, subdomains, path, secure, expiry, name, value
_NETSCAPE_FIELDS = 7

# Newer session cookie first
_SAPISID_COOKIES = ("__Secure-3PAPISID", "SAPISID")


def read_cookies(cookies_path: Path) -> dict[str, str]:
    """Read name/value pairs from a Netscape cookies.txt.

    Comment lines are skipped, except ``#HttpOnly_`` entries which carry
    real cookies behind the prefix.

    Raises:
        OSError: If the file cannot be read.
    """
    cookies: dict[str, str] = {}
    for raw in cookies_path.read_text().splitlines():
        line = raw.strip().removeprefix("#HttpOnly_")
        if not line or line.startswith("#"):
            continue
        fields = line.split("\t")
        if len(fields) >= _NETSCAPE_FIELDS:
            cookies[fields[5]] = fields[6]
    return cookies


def sapisid_hash(sapisid: str, timestamp: int, origin: str = YTM_ORIGIN) -> str:
    """Authorization header value derived from the SAPISID cookie."""
    digest = hashlib.sha1(f"{timestamp} {sapisid} {origin}".encode()).hexdigest()
    return f"SAPISIDHASH {timestamp}_{digest}"


def cookie_auth_headers(cookies_path: Path) -> dict[str, str] | None:
    """Build ytmusicapi auth headers from a cookies.txt.

    Args:
        cookies_path: Netscape cookies.txt exported from the browser.

    Returns:
        Headers to pass as ``YTMusic(auth=...)``, or None if the file is
        missing or holds no session cookie.

    Raises:
        OSError: If the file exists but cannot be read.
    """
    if not cookies_path.exists():
        logger.debug("Cookies file not found: %s", cookies_path)
        return None

    cookies = read_cookies(cookies_path)
    sapisid = next((cookies[n] for n in _SAPISID_COOKIES if n in cookies), None)
    if not sapisid:
        logger.warning("No SAPISID cookie in %s, requests stay anonymous", cookies_path)
        return None

    return {
        "Accept": "*/*",
        "Authorization": sapisid_hash(sapisid, int(time.time())),
        "Content-Type": "application/json",
        "X-Goog-AuthUser": "0",
        "x-origin": YTM_ORIGIN,
        "Cookie": "; ".join(f"{name}={value}" for name, value in cookies.items()),
    }
