"""Stable public API for building tooling on top of sonosctl.

This module is the supported integration surface for third-party callers.
Avoid importing from private/internal modules unless intentionally depending on
non-stable internals.
"""

from __future__ import annotations

from typing import TextIO

from sonosctl.core.config import Settings, load_settings
from sonosctl.core.confirm import AutoConfirmer, Confirmer, StdinConfirmer
from sonosctl.core.errors import (
    AddressConnectError,
    CacheError,
    CacheReadError,
    CacheWriteError,
    ConfigError,
    NetworkDiscoveryError,
    NoMatchError,
    NotConfirmedError,
    SonosctlError,
    SpeakerCommandError,
    SpeakerSelectionError,
)
from sonosctl.core.model import MatchOutcome, Resolution, Speaker, Track, Volume
from sonosctl.core.service import SonosService
from sonosctl.transports.base import SpeakerTransport

__all__ = [
    "SonosctlError",
    "ConfigError",
    "CacheError",
    "CacheReadError",
    "CacheWriteError",
    "NetworkDiscoveryError",
    "AddressConnectError",
    "SpeakerSelectionError",
    "NoMatchError",
    "NotConfirmedError",
    "SpeakerCommandError",
    "Settings",
    "load_settings",
    "Confirmer",
    "StdinConfirmer",
    "AutoConfirmer",
    "MatchOutcome",
    "Resolution",
    "Speaker",
    "Track",
    "Volume",
    "SpeakerTransport",
    "Client",
]


class Client:
    """Public client for interacting with sonosctl core capabilities.

    A `Client` instance wraps speaker discovery, the address cache, name
    resolution, and playback commands behind a stable API intended for
    third-party tools (GUI/TUI/services/scripts). Pass an `AutoConfirmer` to
    avoid blocking on a terminal prompt when a name match is uncertain.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        transport: SpeakerTransport | None = None,
        confirmer: Confirmer | None = None,
        progress_stream: TextIO | None = None,
    ) -> None:
        self._service = SonosService(
            settings=settings,
            transport=transport,
            confirmer=confirmer,
            progress_stream=progress_stream,
        )

    @property
    def runtime_warnings(self) -> tuple[str, ...]:
        return self._service.runtime_warnings

    def discover(self, *, show_progress: bool = False, invalidate: bool = False) -> list[Speaker]:
        return self._service.discover(show_progress=show_progress, invalidate=invalidate)

    def resolve_controller(self, controller: str, *, show_progress: bool = False) -> Speaker:
        return self._service.resolve_controller(controller, show_progress=show_progress)

    def track(self, controller: str) -> Track:
        return self._service.track(self.resolve_controller(controller))

    def next(self, controller: str) -> None:
        self._service.next(self.resolve_controller(controller))

    def previous(self, controller: str) -> None:
        self._service.previous(self.resolve_controller(controller))

    def volume(self, controller: str) -> Volume:
        return self._service.volume(self.resolve_controller(controller))

    def set_volume(self, controller: str, level: int) -> None:
        self._service.set_volume(self.resolve_controller(controller), level)

    def seek(self, controller: str, timestamp: str) -> int:
        return self._service.seek(self.resolve_controller(controller), timestamp)
