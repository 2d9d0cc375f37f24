"""Speaker enumeration from the address cache or a live network scan."""

from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import TextIO

from sonosctl.core.cache import SpeakerCache
from sonosctl.core.errors import CacheWriteError
from sonosctl.core.model import Speaker
from sonosctl.core.progress import ProgressIndicator
from sonosctl.transports.base import SpeakerTransport

_MAX_CONNECT_WORKERS = 16
LOGGER = logging.getLogger(__name__)


class SpeakerEnumerator:
    def __init__(
        self,
        transport: SpeakerTransport,
        cache: SpeakerCache,
        *,
        timeout_s: float = 5.0,
        interface_addr: str | None = None,
        progress_stream: TextIO | None = None,
    ) -> None:
        self.transport = transport
        self.cache = cache
        self.timeout_s = timeout_s
        self.interface_addr = interface_addr
        self.progress_stream = progress_stream
        self.warnings: tuple[str, ...] = ()

    def enumerate(self, use_cache: bool = True, show_progress: bool = False) -> list[Speaker]:
        if use_cache:
            addresses = self.cache.load()
            if addresses is not None:
                LOGGER.debug("Using %d cached speaker address(es)", len(addresses))
                return self._connect_all(addresses)

        speakers = self._scan(show_progress)

        try:
            self.cache.save([speaker.ip for speaker in speakers])
        except CacheWriteError as exc:
            self._warn(exc)

        return speakers

    def invalidate(self) -> None:
        try:
            self.cache.invalidate()
        except CacheWriteError as exc:
            self._warn(exc)

    def _warn(self, exc: Exception) -> None:
        LOGGER.warning("%s", exc)
        self.warnings = (*self.warnings, str(exc))

    def _connect_all(self, addresses: list[str]) -> list[Speaker]:
        """Connect to every cached address; any unreachable one fails the batch."""
        if not addresses:
            return []
        workers = min(len(addresses), _MAX_CONNECT_WORKERS)
        executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="sonosctl-connect")
        try:
            futures = [executor.submit(self.transport.from_ip, ip) for ip in addresses]
            done, _ = wait(futures, return_when=FIRST_EXCEPTION)
            for future in done:
                exc = future.exception()
                if exc is not None:
                    raise exc
            return [future.result() for future in futures]
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

    def _scan(self, show_progress: bool) -> list[Speaker]:
        if not show_progress:
            return self.transport.discover(timeout_s=self.timeout_s, interface_addr=self.interface_addr)
        with ProgressIndicator(self.progress_stream):
            return self.transport.discover(timeout_s=self.timeout_s, interface_addr=self.interface_addr)
