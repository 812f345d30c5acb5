"""Radio id to callsign lookup table, optionally reloaded in the background."""

from __future__ import annotations

import re
import threading

from nxdnkit.log import LogLevel, log
from nxdnkit.timer import Timer

ALL_ID = 0xFFFF

_SEPARATORS = re.compile(r"[,\t\r\n]+")
_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _parse_id(text: str) -> int:
    match = _INT_RE.match(text)
    return (int(match.group(1)) & 0xFFFFFFFF) if match else 0


class NXDNLookup:
    """Maps NXDN radio ids to callsigns read from a comma or tab separated file.

    With a non-zero ``reload_time`` (in hours) the file is reloaded by a
    background thread at that interval until :meth:`stop` is called.
    """

    def __init__(self, filename: str, reload_time: int) -> None:
        self._filename = str(filename)
        self._reload_time = reload_time
        self._table: dict[int, str] = {}
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def read(self) -> bool:
        """Load the file and start reloading if configured.

        Returns False when the file is missing or holds no usable entries.
        """
        loaded = self._load()
        if self._reload_time > 0 and self._thread is None:
            self._stop_event.clear()
            self._thread = threading.Thread(
                target=self._reload_loop, name="nxdn-lookup", daemon=True
            )
            self._thread.start()
        return loaded

    def _reload_loop(self) -> None:
        log(LogLevel.INFO, "Started the NXDN Id lookup reload thread")
        timer = Timer(1, 3600 * self._reload_time)
        timer.start()
        while not self._stop_event.wait(1.0):
            timer.clock()
            if timer.has_expired():
                self._load()
                timer.start()
        log(LogLevel.INFO, "Stopped the NXDN Id lookup reload thread")

    def stop(self) -> None:
        """Stop the reload thread, if one is running, and wait for it."""
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join()
        self._thread = None

    def find(self, id_: int) -> str:
        """Return the callsign for ``id_``, "ALL" for the all-call id, or the id as text."""
        if id_ == ALL_ID:
            return "ALL"
        with self._lock:
            return self._table.get(id_, str(id_))

    def exists(self, id_: int) -> bool:
        with self._lock:
            return id_ in self._table

    def __len__(self) -> int:
        with self._lock:
            return len(self._table)

    def _load(self) -> bool:
        try:
            handle = open(self._filename, encoding="utf-8", errors="replace")
        except OSError:
            log(LogLevel.WARNING, f"Cannot open the NXDN Id lookup file - {self._filename}")
            return False

        table: dict[int, str] = {}
        with handle:
            for line in handle:
                if line.startswith("#"):
                    continue
                tokens = [token for token in _SEPARATORS.split(line) if token]
                if len(tokens) < 2:
                    continue
                id_ = _parse_id(tokens[0])
                if id_ > 0:
                    table[id_] = tokens[1].upper()

        with self._lock:
            self._table = table

        if not table:
            return False

        log(LogLevel.INFO, f"Loaded {len(table)} Ids to the NXDN callsign lookup table")
        return True