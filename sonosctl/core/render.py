"""Human-readable and JSON rendering of command results."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from sonosctl.core.model import Speaker, Track, Volume

PROGRESS_BAR_LEN = 25
MAX_VOLUME = 100
_BAR_FILLED = "▇"


def duration_to_hms(seconds: int) -> str:
    hours, rest = divmod(max(seconds, 0), 3600)
    minutes, secs = divmod(rest, 60)
    prefix = f"{hours:02d}:" if hours > 0 else ""
    return f"{prefix}{minutes:02d}:{secs:02d}"


def _bar(filled: int) -> str:
    filled = min(max(filled, 0), PROGRESS_BAR_LEN)
    return f"[{_BAR_FILLED * filled}{'-' * (PROGRESS_BAR_LEN - filled)}]"


def render_track(track: Track) -> str:
    lines = [f"🎤  {track.artist}", f"🎵  {track.title}"]
    if track.album:
        lines.append(f"💿  {track.album}")
    played = 0
    if track.duration_s > 0:
        played = int(track.position_s / track.duration_s * PROGRESS_BAR_LEN)
    lines.append(
        f"⏱️  {duration_to_hms(track.position_s)}/{duration_to_hms(track.duration_s)} {_bar(played)}"
    )
    return "\n".join(lines)


def render_volume(volume: Volume) -> str:
    pictogram = "🔇" if volume.muted else "🔊"
    filled = volume.level * PROGRESS_BAR_LEN // MAX_VOLUME
    return f"{pictogram} {volume.level}/{MAX_VOLUME} {_bar(filled)}"


def render_info(speaker: Speaker) -> str:
    return "\n".join(
        [
            f"🔈  {speaker.name}",
            "=" * (len(speaker.name) + 3),
            f"Model: {speaker.model} ({speaker.model_number})",
            f"Versions: Software {speaker.software_version}, Hardware {speaker.hardware_version}",
            f"Serial number: {speaker.serial_number}",
            f"UUID: {speaker.uuid}",
        ]
    )


def to_json(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return json.dumps([asdict(item) for item in value])
    return json.dumps(asdict(value))
