"""Core data models used across discovery, service, and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Speaker:
    ip: str
    name: str
    model: str = ""
    model_number: str = ""
    software_version: str = ""
    hardware_version: str = ""
    serial_number: str = ""
    uuid: str = ""


class MatchOutcome(str, Enum):
    EXACT = "exact"
    CONFIRMED = "confirmed"


@dataclass(frozen=True)
class Resolution:
    speaker: Speaker
    distance: int
    outcome: MatchOutcome


@dataclass(frozen=True)
class Track:
    title: str
    artist: str
    album: str | None
    position_s: int
    duration_s: int


@dataclass(frozen=True)
class Volume:
    level: int
    muted: bool
