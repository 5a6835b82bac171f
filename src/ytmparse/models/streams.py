"""Media stream descriptor models."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field

from ytmparse.models.enums import StreamKind

# Duration of a stream whose length the service did not report
UNBOUNDED_DURATION = timedelta.max

# Content length of a stream that must be found with a range request
UNKNOWN_CONTENT_LENGTH = 2**63 - 1


class MediaContainer(BaseModel):
    """Container format and codecs, split from a MIME type.

    ``video/mp4; codecs="avc1.4d401f"`` becomes format ``mp4`` and codecs
    ``avc1.4d401f``.
    """

    model_config = ConfigDict(frozen=True)

    kind: StreamKind
    format: str
    codecs: str

    @property
    def is_audio(self) -> bool:
        return self.kind == StreamKind.AUDIO

    @property
    def is_video(self) -> bool:
        return self.kind == StreamKind.VIDEO


class MediaStream(BaseModel):
    """Fields shared by audio and video stream descriptors."""

    model_config = ConfigDict(frozen=True)

    itag: int
    url: str | None = None
    signature_cipher: str | None = None
    container: MediaContainer
    last_modified_at: datetime
    duration: timedelta = UNBOUNDED_DURATION
    content_length: int = UNKNOWN_CONTENT_LENGTH
    bitrate: int
    quality: str

    @property
    def is_content_length_known(self) -> bool:
        return self.content_length != UNKNOWN_CONTENT_LENGTH

    @property
    def is_duration_known(self) -> bool:
        return self.duration != UNBOUNDED_DURATION


class AudioStream(MediaStream):
    """Audio-only adaptive stream."""

    sample_rate: int
    channels: int
    loudness_db: float = 0.0


class VideoStream(MediaStream):
    """Video-only adaptive stream."""

    quality_label: str
    width: int
    height: int
    framerate: int


class RejectedStream(BaseModel):
    """A format descriptor left out because its major type is not modeled."""

    model_config = ConfigDict(frozen=True)

    index: int
    mime_type: str


class StreamingData(BaseModel):
    """Adaptive streams of one player response."""

    model_config = ConfigDict(frozen=True)

    streams: list[AudioStream | VideoStream] = Field(default_factory=list)
    expires_in: timedelta | None = None
    hls_manifest_url: str | None = None
    rejected: list[RejectedStream] = Field(default_factory=list)

    @property
    def audio_streams(self) -> list[AudioStream]:
        return [s for s in self.streams if isinstance(s, AudioStream)]

    @property
    def video_streams(self) -> list[VideoStream]:
        return [s for s in self.streams if isinstance(s, VideoStream)]

    def best_audio(self) -> AudioStream | None:
        """Audio stream with the highest bitrate, if any."""
        return max(self.audio_streams, key=lambda s: s.bitrate, default=None)
