"""Service layer used by CLI and future UI frontends."""

from __future__ import annotations

import ipaddress
import logging
from typing import TextIO

from sonosctl.core.cache import SpeakerCache
from sonosctl.core.config import Settings, load_settings
from sonosctl.core.confirm import Confirmer, StdinConfirmer
from sonosctl.core.discovery import SpeakerEnumerator
from sonosctl.core.errors import SpeakerCommandError
from sonosctl.core.model import Speaker, Track, Volume
from sonosctl.core.speaker_match import resolve_speaker
from sonosctl.transports.base import SpeakerTransport
from sonosctl.transports.soco_transport import SoCoTransport

LOGGER = logging.getLogger(__name__)


def is_ip_address(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def parse_timestamp(value: str) -> int:
    """Convert ``hh:mm:ss``, ``mm:ss`` or ``ss`` into seconds."""
    parts = value.strip().split(":")
    if not all(part.isascii() and part.isdecimal() for part in parts):
        raise SpeakerCommandError(f"Invalid timestamp '{value}'. Expected hh:mm:ss or mm:ss.")
    seconds = 0
    multiplier = 1
    for part in reversed(parts):
        seconds += int(part) * multiplier
        multiplier *= 60
    return seconds


class SonosService:
    def __init__(
        self,
        *,
        settings: Settings | None = None,
        transport: SpeakerTransport | None = None,
        confirmer: Confirmer | None = None,
        progress_stream: TextIO | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.transport = transport or SoCoTransport()
        self.confirmer = confirmer or StdinConfirmer()
        self.cache = SpeakerCache(self.settings.cache_file)
        self.enumerator = SpeakerEnumerator(
            self.transport,
            self.cache,
            timeout_s=self.settings.discovery_timeout,
            interface_addr=self.settings.interface_addr,
            progress_stream=progress_stream,
        )

    @property
    def runtime_warnings(self) -> tuple[str, ...]:
        return self.enumerator.warnings

    def discover(self, show_progress: bool = True, invalidate: bool = False) -> list[Speaker]:
        if invalidate:
            self.enumerator.invalidate()
        return self.enumerator.enumerate(use_cache=not invalidate, show_progress=show_progress)

    def resolve_controller(self, controller: str, show_progress: bool = True) -> Speaker:
        """Turn an IP address or an approximate room name into a speaker."""
        controller = controller.strip()
        if is_ip_address(controller):
            return self.transport.from_ip(controller)

        speakers = self.discover(show_progress=show_progress, invalidate=False)
        resolution = resolve_speaker(controller, speakers, self.confirmer)
        LOGGER.info(
            "Resolved '%s' to %s (%s) [%s]",
            controller,
            resolution.speaker.name,
            resolution.speaker.ip,
            resolution.outcome.value,
        )
        return resolution.speaker

    def info(self, speaker: Speaker) -> Speaker:
        return speaker

    def track(self, speaker: Speaker) -> Track:
        return self.transport.track(speaker.ip)

    def next(self, speaker: Speaker) -> None:
        self.transport.next(speaker.ip)

    def previous(self, speaker: Speaker) -> None:
        self.transport.previous(speaker.ip)

    def volume(self, speaker: Speaker) -> Volume:
        return self.transport.volume(speaker.ip)

    def set_volume(self, speaker: Speaker, level: int) -> None:
        if not 0 <= level <= 100:
            raise SpeakerCommandError(f"Volume must be between 0 and 100, got {level}")
        self.transport.set_volume(speaker.ip, level)

    def seek(self, speaker: Speaker, timestamp: str) -> int:
        position_s = parse_timestamp(timestamp)
        self.transport.seek(speaker.ip, position_s)
        return position_s
