"""YouTube Music transport: fetches raw InnerTube response trees."""

import logging
from pathlib import Path
from typing import Any, Protocol

from ytmusicapi import YTMusic
from ytmusicapi.exceptions import YTMusicError, YTMusicServerError, YTMusicUserError

from ytmparse.config import TransportConfig
from ytmparse.exceptions import APIError
from ytmparse.utils.cookies import cookie_auth_headers

logger = logging.getLogger(__name__)


class TransportProtocol(Protocol):
    """Protocol for response tree sources.

    This protocol enables dependency injection and testing. Implement it to
    feed captured responses to the service layer.
    """

    def fetch(self, endpoint: str, body: dict[str, Any]) -> dict[str, Any]:
        """POST an InnerTube request and return the decoded response."""
        ...

    def fetch_player(self, video_id: str) -> dict[str, Any]:
        """Fetch the player response of a video."""
        ...


class YTMusicTransport:
    """Production transport over ytmusicapi.

    ytmusicapi signs the request, adds the client context and decodes the
    JSON; the untouched tree is handed to the assemblers.
    Implements TransportProtocol.
    """

    def __init__(
        self,
        ytmusic: YTMusic | None = None,
        config: TransportConfig | None = None,
        cookies_path: Path | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            ytmusic: Optional YTMusic instance. Creates one if not provided.
            config: Optional session configuration. Uses defaults if not provided.
            cookies_path: Optional path to cookies.txt for authentication.
                Library surfaces require it.
        """
        self._config = config or TransportConfig()
        self._ytm = ytmusic or self._create_ytmusic(cookies_path)

    def _create_ytmusic(self, cookies_path: Path | None) -> YTMusic:
        auth = cookie_auth_headers(cookies_path) if cookies_path else None
        if auth:
            logger.info("Using cookies for ytmusicapi requests")
        else:
            logger.info("No cookies configured, requests are anonymous")
        return YTMusic(
            auth=auth,
            language=self._config.language,
            location=self._config.location,
        )

    def fetch(self, endpoint: str, body: dict[str, Any]) -> dict[str, Any]:
        """POST an InnerTube request.

        Args:
            endpoint: InnerTube endpoint, e.g. "browse" or "next".
            body: Request body without the client context.

        Returns:
            Decoded response tree.

        Raises:
            APIError: If the request fails.
        """
        logger.debug("Fetching %s: %s", endpoint, body)
        try:
            # ytmusicapi adds the client context to the body in place
            return self._ytm._send_request(endpoint, dict(body))
        except (YTMusicServerError, YTMusicUserError) as e:
            logger.warning("YTMusic API error for %s %s: %s", endpoint, body, e)
            raise APIError(f"Failed to fetch {endpoint}: {e}") from e
        except YTMusicError as e:
            logger.warning("YTMusic error for %s %s: %s", endpoint, body, e)
            raise APIError(f"Failed to fetch {endpoint}: {e}") from e

    def fetch_player(self, video_id: str) -> dict[str, Any]:
        """Fetch the player response of a video.

        Args:
            video_id: YouTube video ID.

        Returns:
            Decoded player response, including ``videoDetails`` and
            ``streamingData``.

        Raises:
            ValueError: If video_id is empty.
            APIError: If the request fails.
        """
        if not video_id or not video_id.strip():
            raise ValueError("video_id cannot be empty")

        logger.debug("Fetching player response: %s", video_id)
        try:
            return self._ytm.get_song(video_id)
        except (YTMusicServerError, YTMusicUserError) as e:
            logger.warning("YTMusic API error for video %s: %s", video_id, e)
            raise APIError(f"Failed to fetch player response: {e}") from e
        except YTMusicError as e:
            logger.warning("YTMusic error for video %s: %s", video_id, e)
            raise APIError(f"Failed to fetch player response: {e}") from e
