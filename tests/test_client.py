"""Tests for YTMusicTransport."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from ytmusicapi.exceptions import YTMusicError, YTMusicServerError, YTMusicUserError

from ytmparse.client import YTMusicTransport
from ytmparse.config import TransportConfig
from ytmparse.exceptions import APIError


class TestFetch:
    def test_sends_request_and_returns_tree(self) -> None:
        mock_ytm = MagicMock()
        mock_ytm._send_request.return_value = {"contents": {}}
        transport = YTMusicTransport(ytmusic=mock_ytm)

        result = transport.fetch("browse", {"browseId": "FEmusic_liked_videos"})

        assert result == {"contents": {}}
        mock_ytm._send_request.assert_called_once_with(
            "browse", {"browseId": "FEmusic_liked_videos"}
        )

    def test_does_not_mutate_caller_body(self) -> None:
        mock_ytm = MagicMock()
        mock_ytm._send_request.side_effect = lambda endpoint, body: body.update(
            {"context": {}}
        ) or {}
        transport = YTMusicTransport(ytmusic=mock_ytm)
        body = {"browseId": "FEmusic_liked_albums"}

        transport.fetch("browse", body)

        assert body == {"browseId": "FEmusic_liked_albums"}

    @pytest.mark.parametrize(
        "error",
        [
            YTMusicServerError("Server returned HTTP 500"),
            YTMusicUserError("Invalid browse id"),
            YTMusicError("Something else"),
        ],
        ids=["server", "user", "generic"],
    )
    def test_maps_ytmusic_errors_to_api_error(self, error: Exception) -> None:
        mock_ytm = MagicMock()
        mock_ytm._send_request.side_effect = error
        transport = YTMusicTransport(ytmusic=mock_ytm)

        with pytest.raises(APIError, match="Failed to fetch browse") as exc_info:
            transport.fetch("browse", {"browseId": "x"})
        assert exc_info.value.__cause__ is error


class TestFetchPlayer:
    def test_returns_player_response(self) -> None:
        mock_ytm = MagicMock()
        mock_ytm.get_song.return_value = {"videoDetails": {"videoId": "abc"}}
        transport = YTMusicTransport(ytmusic=mock_ytm)

        assert transport.fetch_player("abc") == {"videoDetails": {"videoId": "abc"}}
        mock_ytm.get_song.assert_called_once_with("abc")

    @pytest.mark.parametrize("video_id", ["", "   "])
    def test_rejects_empty_video_id(self, video_id: str) -> None:
        transport = YTMusicTransport(ytmusic=MagicMock())

        with pytest.raises(ValueError, match="video_id cannot be empty"):
            transport.fetch_player(video_id)

    def test_maps_server_error(self) -> None:
        mock_ytm = MagicMock()
        mock_ytm.get_song.side_effect = YTMusicServerError("HTTP 403")
        transport = YTMusicTransport(ytmusic=mock_ytm)

        with pytest.raises(APIError, match="Failed to fetch player response"):
            transport.fetch_player("abc")


class TestCreateYTMusic:
    def test_anonymous_without_cookies(self) -> None:
        with patch("ytmparse.client.YTMusic") as mock_cls:
            YTMusicTransport(config=TransportConfig(language="de", location="DE"))

        mock_cls.assert_called_once_with(auth=None, language="de", location="DE")

    def test_uses_cookie_headers(self, tmp_path: Path) -> None:
        cookies = tmp_path / "cookies.txt"
        cookies.write_text(".youtube.com\tTRUE\t/\tTRUE\t0\tSAPISID\tsecret\n")

        with patch("ytmparse.client.YTMusic") as mock_cls:
            YTMusicTransport(cookies_path=cookies)

        auth = mock_cls.call_args.kwargs["auth"]
        assert auth["Authorization"].startswith("SAPISIDHASH ")
        assert auth["Cookie"] == "SAPISID=secret"
