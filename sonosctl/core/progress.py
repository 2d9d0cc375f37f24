"""Status line shown while a network scan blocks."""

from __future__ import annotations

import logging
import sys
import threading
from typing import TextIO

TWO_SECONDS = "⏲️  Give me 2 secs to discover your devices..."
ONE_SECOND = "⏲️  Give me a sec to discover your devices..."
LOGGER = logging.getLogger(__name__)


class ProgressIndicator:
    """Background ticker that counts down a scan and then clears its line.

    The indicator does not know when the scan ends. ``stop()`` cuts the
    countdown short and clears the line; otherwise it runs on its own timers.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        first_delay_s: float = 1.0,
        second_delay_s: float = 0.999,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.first_delay_s = first_delay_s
        self.second_delay_s = second_delay_s
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, name="sonosctl-progress", daemon=True)
        self._thread.start()

    def stop(self, timeout_s: float | None = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout_s)

    def __enter__(self) -> ProgressIndicator:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def _write(self, text: str) -> None:
        self.stream.write(text + "\r")
        self.stream.flush()

    def _run(self) -> None:
        width = len(TWO_SECONDS)
        try:
            self._write(TWO_SECONDS)
            if not self._stop.wait(self.first_delay_s):
                self._write(ONE_SECOND.ljust(width))
                self._stop.wait(self.second_delay_s)
            self._write(" " * width)
        except (OSError, ValueError) as exc:
            # closed or broken stream
            LOGGER.debug("Progress output stopped: %s", exc)
