"""Configuration for ytmparse."""

from dataclasses import dataclass

from ytmparse.assemblers.library import DEFAULT_CREATOR_NAME
from ytmparse.models.enums import BatchPolicy


@dataclass(frozen=True)
class ParserConfig:
    """Assembly behaviour of the service layer.

    Attributes:
        default_creator_name: Name credited to playlists whose creator run
            does not link to a channel.
        batch_policy: Whether one malformed list item fails the whole list
            or is skipped and logged.
    """

    default_creator_name: str = DEFAULT_CREATOR_NAME
    batch_policy: BatchPolicy = BatchPolicy.FAIL_FAST


@dataclass(frozen=True)
class TransportConfig:
    """ytmusicapi session configuration.

    Attributes:
        language: Interface language of the responses (affects run texts).
        location: Country code for region-dependent content, empty for none.
    """

    language: str = "en"
    location: str = ""
