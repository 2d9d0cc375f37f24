"""Speaker transport implementation using the SoCo library."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import soco
from soco.exceptions import SoCoException

from sonosctl.core.errors import AddressConnectError, NetworkDiscoveryError, SpeakerCommandError
from sonosctl.core.model import Speaker, Track, Volume

_T = TypeVar("_T")
LOGGER = logging.getLogger(__name__)


def _clock_to_seconds(value: str | None) -> int:
    # UPnP reports H:MM:SS, or NOT_IMPLEMENTED for streams
    if not value:
        return 0
    parts = value.split(":")
    if not all(part.isascii() and part.isdecimal() for part in parts):
        return 0
    seconds = 0
    for part in parts:
        seconds = seconds * 60 + int(part)
    return seconds


def _speaker_from_zone(zone: Any) -> Speaker:
    info = zone.get_speaker_info(refresh=True)
    return Speaker(
        ip=zone.ip_address,
        name=info.get("zone_name") or zone.player_name,
        model=info.get("model_name", ""),
        model_number=info.get("model_number", ""),
        software_version=info.get("software_version", ""),
        hardware_version=info.get("hardware_version", ""),
        serial_number=info.get("serial_number", ""),
        uuid=info.get("uid", ""),
    )


class SoCoTransport:
    def from_ip(self, ip: str) -> Speaker:
        try:
            return _speaker_from_zone(soco.SoCo(ip))
        except (OSError, SoCoException) as exc:
            raise AddressConnectError(f"Could not reach speaker at {ip}: {exc}") from exc

    def discover(self, *, timeout_s: float, interface_addr: str | None = None) -> list[Speaker]:
        try:
            zones = soco.discover(timeout=timeout_s, interface_addr=interface_addr) or set()
            speakers = [_speaker_from_zone(zone) for zone in zones]
        except (OSError, ValueError, SoCoException) as exc:
            # ValueError: interface_addr is not an IPv4 literal
            raise NetworkDiscoveryError(f"Speaker discovery failed: {exc}") from exc
        LOGGER.debug("Discovered %d speaker(s)", len(speakers))
        return speakers

    def _call(self, ip: str, action: str, fn: Callable[[Any], _T]) -> _T:
        try:
            return fn(soco.SoCo(ip))
        except (OSError, SoCoException) as exc:
            raise SpeakerCommandError(f"Could not {action} on {ip}: {exc}") from exc

    def track(self, ip: str) -> Track:
        info = self._call(ip, "read the current track", lambda zone: zone.get_current_track_info())
        return Track(
            title=info.get("title", ""),
            artist=info.get("artist", ""),
            album=info.get("album") or None,
            position_s=_clock_to_seconds(info.get("position")),
            duration_s=_clock_to_seconds(info.get("duration")),
        )

    def next(self, ip: str) -> None:
        self._call(ip, "skip to the next track", lambda zone: zone.next())

    def previous(self, ip: str) -> None:
        self._call(ip, "go back to the previous track", lambda zone: zone.previous())

    def volume(self, ip: str) -> Volume:
        return self._call(
            ip,
            "read the volume",
            lambda zone: Volume(level=int(zone.volume), muted=bool(zone.mute)),
        )

    def set_volume(self, ip: str, level: int) -> None:
        def _apply(zone: Any) -> None:
            zone.volume = level

        self._call(ip, "set the volume", _apply)

    def seek(self, ip: str, position_s: int) -> None:
        hours, rest = divmod(position_s, 3600)
        minutes, seconds = divmod(rest, 60)
        position = f"{hours}:{minutes:02d}:{seconds:02d}"
        self._call(ip, f"seek to {position}", lambda zone: zone.seek(position))
