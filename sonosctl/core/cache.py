"""On-disk cache of speaker addresses seen by the last network scan."""

from __future__ import annotations

import ipaddress
import json
import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from sonosctl.core.errors import CacheReadError, CacheWriteError

LOGGER = logging.getLogger(__name__)


class SpeakerCache:
    """JSON array of IP address literals stored in a single file.

    The file is authoritative while it exists; there is no expiry. Callers
    force a refresh by invalidating it.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> list[str] | None:
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            LOGGER.debug("No speaker cache at %s", self.path)
            return None
        except OSError as exc:
            raise CacheReadError(f"Could not read speaker cache {self.path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise CacheReadError(
                f"Speaker cache {self.path} is not valid UTF-8. Rerun with --invalidate to rebuild it."
            ) from exc

        try:
            loaded = json.loads(content)
        except json.JSONDecodeError as exc:
            raise CacheReadError(
                f"Speaker cache {self.path} is corrupt ({exc}). Rerun with --invalidate to rebuild it."
            ) from exc

        if not isinstance(loaded, list):
            raise CacheReadError(f"Speaker cache {self.path} must contain a JSON array")

        addresses: list[str] = []
        for entry in loaded:
            if not isinstance(entry, str):
                raise CacheReadError(f"Speaker cache {self.path} has a non-string entry: {entry!r}")
            try:
                addresses.append(str(ipaddress.ip_address(entry)))
            except ValueError as exc:
                raise CacheReadError(
                    f"Speaker cache {self.path} has an invalid address: {entry!r}"
                ) from exc
        return addresses

    def save(self, addresses: Iterable[str]) -> None:
        payload = json.dumps(list(addresses))
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except FileNotFoundError:
                    pass
            raise CacheWriteError(f"Could not write speaker cache {self.path}: {exc}") from exc
        LOGGER.debug("Wrote %s to %s", payload, self.path)

    def invalidate(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise CacheWriteError(f"Could not remove speaker cache {self.path}: {exc}") from exc
        LOGGER.debug("Removed speaker cache %s", self.path)
