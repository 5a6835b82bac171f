"""Tests for cookie-based authentication headers."""

import hashlib
from pathlib import Path

from ytmparse.utils.cookies import (
    YTM_ORIGIN,
    cookie_auth_headers,
    read_cookies,
    sapisid_hash,
)

LINE = ".youtube.com\tTRUE\t/\tTRUE\t1735689600\t{name}\t{value}\n"


def _write(tmp_path: Path, *lines: str) -> Path:
    path = tmp_path / "cookies.txt"
    path.write_text("".join(lines))
    return path


class TestReadCookies:
    def test_reads_name_value_pairs(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "# Netscape HTTP Cookie File\n",
            LINE.format(name="SID", value="v1"),
            "\n",
            LINE.format(name="HSID", value="v2"),
        )
        assert read_cookies(path) == {"SID": "v1", "HSID": "v2"}

    def test_reads_http_only_entries(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "#HttpOnly_" + LINE.format(name="SSID", value="v3"))
        assert read_cookies(path) == {"SSID": "v3"}

    def test_skips_short_lines(self, tmp_path: Path) -> None:
        path = _write(tmp_path, ".youtube.com\tTRUE\t/\n")
        assert read_cookies(path) == {}


class TestSapisidHash:
    def test_hash_format(self) -> None:
        expected = hashlib.sha1(f"1700000000 abc {YTM_ORIGIN}".encode()).hexdigest()
        assert sapisid_hash("abc", 1700000000) == f"SAPISIDHASH 1700000000_{expected}"


class TestCookieAuthHeaders:
    def test_missing_file(self, tmp_path: Path) -> None:
        assert cookie_auth_headers(tmp_path / "missing.txt") is None

    def test_without_sapisid(self, tmp_path: Path) -> None:
        path = _write(tmp_path, LINE.format(name="SID", value="v1"))
        assert cookie_auth_headers(path) is None

    def test_prefers_secure_sapisid(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            LINE.format(name="SAPISID", value="old"),
            LINE.format(name="__Secure-3PAPISID", value="new"),
        )
        headers = cookie_auth_headers(path)

        assert headers is not None
        assert headers["x-origin"] == YTM_ORIGIN
        assert headers["Cookie"] == "SAPISID=old; __Secure-3PAPISID=new"
        timestamp, digest = headers["Authorization"].removeprefix("SAPISIDHASH ").split("_")
        assert digest == hashlib.sha1(f"{timestamp} new {YTM_ORIGIN}".encode()).hexdigest()
