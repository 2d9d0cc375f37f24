from __future__ import annotations

import threading

import pytest

from sonosctl.core.config import Settings
from sonosctl.core.errors import AddressConnectError, NetworkDiscoveryError
from sonosctl.core.model import Speaker, Track, Volume

KITCHEN = Speaker(ip="192.168.1.10", name="Kitchen", model="Sonos One", uuid="RINCON_1")
LIVING_ROOM = Speaker(ip="192.168.1.11", name="Living Room", model="Sonos Arc", uuid="RINCON_2")
OFFICE = Speaker(ip="192.168.1.12", name="Office", model="Sonos Five", uuid="RINCON_3")


class FakeTransport:
    def __init__(
        self,
        speakers: list[Speaker] | None = None,
        *,
        unreachable: set[str] | None = None,
        scan_error: str | None = None,
    ) -> None:
        self.speakers = list(speakers if speakers is not None else [KITCHEN, LIVING_ROOM, OFFICE])
        self.unreachable = unreachable or set()
        self.scan_error = scan_error
        self.connected: list[str] = []
        self.scans = 0
        self.calls: list[tuple[str, str, object]] = []
        self._lock = threading.Lock()

    def from_ip(self, ip: str) -> Speaker:
        with self._lock:
            self.connected.append(ip)
        if ip in self.unreachable:
            raise AddressConnectError(f"Could not reach speaker at {ip}: timed out")
        for speaker in self.speakers:
            if speaker.ip == ip:
                return speaker
        return Speaker(ip=ip, name=f"Speaker {ip}")

    def discover(self, *, timeout_s: float, interface_addr: str | None = None) -> list[Speaker]:
        self.scans += 1
        if self.scan_error:
            raise NetworkDiscoveryError(self.scan_error)
        return list(self.speakers)

    def track(self, ip: str) -> Track:
        self.calls.append(("track", ip, None))
        return Track(title="Song", artist="Band", album=None, position_s=30, duration_s=120)

    def next(self, ip: str) -> None:
        self.calls.append(("next", ip, None))

    def previous(self, ip: str) -> None:
        self.calls.append(("previous", ip, None))

    def volume(self, ip: str) -> Volume:
        self.calls.append(("volume", ip, None))
        return Volume(level=40, muted=False)

    def set_volume(self, ip: str, level: int) -> None:
        self.calls.append(("set_volume", ip, level))

    def seek(self, ip: str, position_s: int) -> None:
        self.calls.append(("seek", ip, position_s))


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(cache_file=tmp_path / "cache" / "speakers.json", discovery_timeout=0.1)
