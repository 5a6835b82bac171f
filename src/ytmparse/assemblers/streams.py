"""Classification of adaptive format descriptors from a player response."""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta
from typing import Any

from ytmparse.assemblers.common import assembling
from ytmparse.exceptions import (
    AssemblyError,
    PathNotFoundError,
    TypeMismatchError,
    UnsupportedStreamKindError,
)
from ytmparse.lib.coercion import (
    as_array,
    select_float_optional,
    select_int,
    select_int_optional,
    select_string,
    select_string_optional,
)
from ytmparse.lib.navigator import select_optional
from ytmparse.models.enums import EntityKind, StreamKind
from ytmparse.models.streams import (
    UNBOUNDED_DURATION,
    UNKNOWN_CONTENT_LENGTH,
    AudioStream,
    MediaContainer,
    RejectedStream,
    StreamingData,
    VideoStream,
)

STREAMING_DATA_KEY = "streamingData"
_STREAMING_DATA_PATH = f"..{STREAMING_DATA_KEY}"

# video/mp4; codecs="avc1.4d401f"
_MIME_RE = re.compile(
    r'^\s*(?P<major>[\w.+-]+)/(?P<format>[\w.+-]+)'
    r'(?:\s*;\s*codecs="(?P<codecs>[^"]*)")?'
)


def split_mime_type(mime_type: str, path: str = "mimeType") -> tuple[str, str, str]:
    """Split a MIME type into major type, container format and codecs.

    Raises:
        TypeMismatchError: If the text is not a MIME type.
    """
    match = _MIME_RE.match(mime_type)
    if not match:
        raise TypeMismatchError(path, "mime type", mime_type)
    return match["major"].lower(), match["format"], match["codecs"] or ""


def _from_microseconds(value: int) -> datetime:
    try:
        return datetime.fromtimestamp(value / 1_000_000, tz=UTC)
    except (OverflowError, OSError, ValueError) as e:
        raise TypeMismatchError("lastModified", "timestamp", value) from e


def _from_milliseconds(value: int) -> timedelta:
    try:
        return timedelta(milliseconds=value)
    except OverflowError as e:
        raise TypeMismatchError("approxDurationMs", "duration", value) from e


def _common_fields(descriptor: Any, container: MediaContainer, now: datetime) -> dict:
    url = select_string_optional(descriptor, "url")
    signature_cipher = select_string_optional(descriptor, "signatureCipher")
    if url is None and signature_cipher is None:
        raise PathNotFoundError("url")

    last_modified = select_int_optional(descriptor, "lastModified")
    duration_ms = select_int_optional(descriptor, "approxDurationMs")
    content_length = select_int_optional(descriptor, "contentLength")
    return {
        "itag": select_int(descriptor, "itag"),
        "url": url,
        "signature_cipher": signature_cipher,
        "container": container,
        "last_modified_at": (
            now if last_modified is None else _from_microseconds(last_modified)
        ),
        "duration": (
            UNBOUNDED_DURATION
            if duration_ms is None
            else _from_milliseconds(duration_ms)
        ),
        "content_length": (
            UNKNOWN_CONTENT_LENGTH if content_length is None else content_length
        ),
        "bitrate": select_int(descriptor, "bitrate"),
        "quality": select_string(descriptor, "quality"),
    }


def classify_stream(descriptor: Any, now: datetime) -> AudioStream | VideoStream:
    """Classify one adaptive format descriptor by its MIME major type.

    Args:
        descriptor: One entry of ``streamingData.adaptiveFormats``.
        now: Stand-in for an absent ``lastModified``.

    Returns:
        AudioStream or VideoStream.

    Raises:
        UnsupportedStreamKindError: If the major type is neither audio nor
            video.
        AssemblyError: If a required field is missing or malformed.
    """
    with assembling(EntityKind.STREAM):
        mime_type = select_string(descriptor, "mimeType")
        major, container_format, codecs = split_mime_type(mime_type)

    if major == StreamKind.AUDIO:
        with assembling(EntityKind.AUDIO_STREAM):
            container = MediaContainer(
                kind=StreamKind.AUDIO, format=container_format, codecs=codecs
            )
            loudness = select_float_optional(descriptor, "loudnessDb")
            return AudioStream(
                **_common_fields(descriptor, container, now),
                sample_rate=select_int(descriptor, "audioSampleRate"),
                channels=select_int(descriptor, "audioChannels"),
                loudness_db=0.0 if loudness is None else loudness,
            )

    if major == StreamKind.VIDEO:
        with assembling(EntityKind.VIDEO_STREAM):
            container = MediaContainer(
                kind=StreamKind.VIDEO, format=container_format, codecs=codecs
            )
            return VideoStream(
                **_common_fields(descriptor, container, now),
                quality_label=select_string(descriptor, "qualityLabel"),
                width=select_int(descriptor, "width"),
                height=select_int(descriptor, "height"),
                framerate=select_int(descriptor, "fps"),
            )

    raise UnsupportedStreamKindError(mime_type)


def select_streaming_data(tree: Any, now: datetime) -> StreamingData:
    """Classify every adaptive format of a player response.

    ``streamingData`` is the first match of a key search, so both a bare player
    response and one nested in a larger document work. Descriptors of an
    unsupported kind are listed in ``rejected``; any other malformed
    descriptor fails the call.

    Args:
        tree: Decoded player response.
        now: Stand-in for absent ``lastModified`` timestamps.

    Raises:
        AssemblyError: If ``streamingData`` is absent or a descriptor is
            malformed. Carries the descriptor index.
    """
    streaming_data = select_optional(tree, _STREAMING_DATA_PATH)
    if streaming_data is None:
        error = PathNotFoundError(_STREAMING_DATA_PATH)
        raise AssemblyError(EntityKind.STREAMING_DATA.value, error) from error

    with assembling(EntityKind.STREAMING_DATA):
        formats_path = f"{_STREAMING_DATA_PATH}.adaptiveFormats"
        formats = select_optional(streaming_data, "adaptiveFormats")
        descriptors = [] if formats is None else as_array(formats, formats_path)
        expires_in = select_int_optional(streaming_data, "expiresInSeconds")
        hls_manifest_url = select_string_optional(streaming_data, "hlsManifestUrl")

    streams: list[AudioStream | VideoStream] = []
    rejected: list[RejectedStream] = []
    for i, descriptor in enumerate(descriptors):
        try:
            streams.append(classify_stream(descriptor, now))
        except UnsupportedStreamKindError as e:
            rejected.append(RejectedStream(index=i, mime_type=e.mime_type))
        except AssemblyError as e:
            raise e.at_index(i) from e.__cause__

    return StreamingData(
        streams=streams,
        expires_in=None if expires_in is None else timedelta(seconds=expires_in),
        hls_manifest_url=hls_manifest_url,
        rejected=rejected,
    )
