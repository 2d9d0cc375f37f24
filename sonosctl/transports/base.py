"""Transport interfaces."""

from __future__ import annotations

from typing import Protocol

from sonosctl.core.model import Speaker, Track, Volume


class SpeakerTransport(Protocol):
    def from_ip(self, ip: str) -> Speaker:
        """Connect to the speaker at ``ip`` and describe it."""

    def discover(self, *, timeout_s: float, interface_addr: str | None = None) -> list[Speaker]:
        """Scan the network and return every speaker that answered."""

    def track(self, ip: str) -> Track: ...

    def next(self, ip: str) -> None: ...

    def previous(self, ip: str) -> None: ...

    def volume(self, ip: str) -> Volume: ...

    def set_volume(self, ip: str, level: int) -> None: ...

    def seek(self, ip: str, position_s: int) -> None: ...
