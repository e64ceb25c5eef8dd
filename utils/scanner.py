from __future__ import annotations
import itertools
import logging
import os
import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional

from PyQt5.QtCore import QObject, QRunnable, pyqtSignal, pyqtSlot

from .config import IMAGE_EXTS
from .errors import DirectoryAccessError, ScanCancelled

log = logging.getLogger(__name__)


class CancellationToken:
    """A flag shared between the GUI thread and one scan worker."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise ScanCancelled()


class ScanStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


_generation = itertools.count(1)


@dataclass(eq=False)
class ScanRequest:
    """
    Handle to a single directory scan. At most one is active at a time.
    Only the GUI thread writes *status*; workers just read the token.
    """
    directory: Path
    token: CancellationToken = field(default_factory=CancellationToken)
    generation: int = field(default_factory=lambda: next(_generation))
    status: ScanStatus = ScanStatus.IDLE

    def cancel(self) -> None:
        """Cancels the scan unless its outcome has already been applied."""
        self.token.cancel()
        if self.is_active:
            self.status = ScanStatus.CANCELLED

    @property
    def is_active(self) -> bool:
        return self.status in (ScanStatus.IDLE, ScanStatus.RUNNING)


def scan_directory(
        directory: Path,
        allowed_exts: Iterable[str] = IMAGE_EXTS,
        token: Optional[CancellationToken] = None,
) -> List[str]:
    """
    Lists the immediate files of *directory* whose extension is in *allowed_exts*.
    Matching ignores case. The result holds absolute paths in plain
    lexicographic order. Raises ScanCancelled if *token* is set before the
    listing completes and DirectoryAccessError if the directory cannot be read.
    """
    allowed = {ext.lower() for ext in allowed_exts}
    root = Path(directory).absolute()
    matches: List[str] = []

    try:
        with os.scandir(root) as entries:
            for entry in entries:
                if token is not None:
                    token.raise_if_cancelled()
                try:
                    if not entry.is_file():
                        continue
                except OSError:
                    continue
                if os.path.splitext(entry.name)[1].lower() in allowed:
                    matches.append(os.path.join(str(root), entry.name))
    except OSError as e:
        raise DirectoryAccessError(root, e) from e

    if token is not None:
        token.raise_if_cancelled()
    matches.sort()
    return matches


class ScanSignals(QObject):
    """Defines signals available from a running scan worker."""
    finished = pyqtSignal(object, list)  # request, paths
    cancelled = pyqtSignal(object)  # request
    failed = pyqtSignal(object, str)  # request, message


class ScanWorker(QRunnable):
    """Worker thread that scans one directory for images."""

    def __init__(self, request: ScanRequest, allowed_exts: Iterable[str] = IMAGE_EXTS):
        super().__init__()
        self.request = request
        self.allowed_exts = frozenset(allowed_exts)
        self.signals = ScanSignals()

    @pyqtSlot()
    def run(self):
        """Execute the scan and report exactly one outcome.

        The request's status is left alone here; the GUI thread settles it
        when the outcome is delivered.
        """
        request = self.request
        if request.token.cancelled:
            self.signals.cancelled.emit(request)
            return

        try:
            paths = scan_directory(request.directory, self.allowed_exts, request.token)
        except ScanCancelled:
            self.signals.cancelled.emit(request)
        except DirectoryAccessError as e:
            self.signals.failed.emit(request, str(e))
        else:
            # A cancel that lands after the last check still wins.
            if request.token.cancelled:
                self.signals.cancelled.emit(request)
            else:
                log.debug("Scan #%d of %s matched %d files",
                          request.generation, request.directory, len(paths))
                self.signals.finished.emit(request, paths)
