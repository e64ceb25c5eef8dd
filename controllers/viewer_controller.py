from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional

from PyQt5.QtCore import QObject, pyqtSlot, QThreadPool
from PyQt5.QtWidgets import QFileDialog, QMessageBox

from models.viewer_model import ViewerState, move_next, move_previous, state_from_scan
from views.application_window import ApplicationWindow
from utils.config import APP_NAME, DEFAULT_THEME, OPEN_DIALOG_FILTER, SHUTDOWN_WAIT_MS
from utils.errors import ImageDecodeError, ThemeLoadError
from utils.images import load_image
from utils.paths import directory_of_selection
from utils.scanner import ScanRequest, ScanStatus, ScanWorker
from utils.themes import load_theme

log = logging.getLogger(__name__)


class ViewerController(QObject):

    def __init__(self, start_directory: Optional[Path] = None, theme: str = DEFAULT_THEME,
                 window=None, threadpool: Optional[QThreadPool] = None):
        super().__init__()
        self.threadpool = threadpool or QThreadPool.globalInstance()
        log.debug("Max threads: %d", self.threadpool.maxThreadCount())

        self.state = ViewerState()
        self.scan_request: Optional[ScanRequest] = None
        self.theme_name: Optional[str] = None

        self.window = window if window is not None else ApplicationWindow()
        self._wire_signals()
        self.set_theme(theme)

        self.window.show()
        if start_directory is not None:
            self.start_scan(start_directory)

    def _wire_signals(self):
        w = self.window
        w.next_requested.connect(self.next_image)
        w.previous_requested.connect(self.previous_image)
        w.open_requested.connect(self.open_directory)
        w.cancel_requested.connect(self.cancel_scan)
        w.theme_requested.connect(self.set_theme)
        w.exit_requested.connect(self.exit)
        w.maximize_toggled.connect(self.toggle_maximize)
        w.closing.connect(self.shutdown)

    # --- Scanning ---
    def start_scan(self, directory: Path) -> ScanRequest:
        """Cancels any running scan and starts a new one for *directory*."""
        if self.scan_request is not None:
            self.scan_request.cancel()

        request = ScanRequest(Path(directory))
        self.scan_request = request
        log.info("Scanning %s", request.directory)

        self.window.show_loading(0)

        worker = ScanWorker(request)
        worker.signals.finished.connect(self._on_scan_finished)
        worker.signals.cancelled.connect(self._on_scan_cancelled)
        worker.signals.failed.connect(self._on_scan_failed)
        request.status = ScanStatus.RUNNING
        self.threadpool.start(worker)
        return request

    @pyqtSlot()
    def cancel_scan(self):
        if self.scan_request is not None:
            log.info("Cancelling scan of %s", self.scan_request.directory)
            self.scan_request.cancel()

    @pyqtSlot(object, list)
    def _on_scan_finished(self, request: ScanRequest, paths: List[str]):
        if request is not self.scan_request:
            log.debug("Dropping stale result for %s", request.directory)
            return
        if request.token.cancelled:
            # Cancelled after the worker finished but before delivery
            self._on_scan_cancelled(request)
            return

        self.scan_request = None
        log.info("Found %d images in %s", len(paths), request.directory)
        self.window.set_found_count(len(paths))
        self.state = state_from_scan(paths)
        self._display_current()
        self.window.hide_loading()
        request.status = ScanStatus.COMPLETED

    @pyqtSlot(object)
    def _on_scan_cancelled(self, request: ScanRequest):
        request.status = ScanStatus.CANCELLED
        if request is not self.scan_request:
            log.debug("Scan of %s was superseded", request.directory)
            return

        # Drop the image set but leave the last frame on screen
        self.scan_request = None
        self.state = ViewerState()
        self.window.hide_loading()
        log.info("Scan of %s cancelled", request.directory)

    @pyqtSlot(object, str)
    def _on_scan_failed(self, request: ScanRequest, message: str):
        if request is not self.scan_request:
            log.debug("Ignoring failure of superseded scan: %s", message)
            return
        if request.token.cancelled:
            self._on_scan_cancelled(request)
            return

        self.scan_request = None
        request.status = ScanStatus.FAILED
        self.window.hide_loading()
        log.error(message)
        QMessageBox.warning(self.window, APP_NAME, message)

    # --- Navigation ---
    @pyqtSlot()
    def next_image(self):
        if not self.state.images:
            return
        self.state = move_next(self.state)
        self._display_current()

    @pyqtSlot()
    def previous_image(self):
        if not self.state.images:
            return
        self.state = move_previous(self.state)
        self._display_current()

    def _display_current(self):
        path = self.state.current_path
        self.window.set_current_title(path, self.state.cursor, self.state.count)
        if path is None:
            self.window.clear_image()
            return
        try:
            image = load_image(Path(path))
        except ImageDecodeError as e:
            # Keep whatever was on screen before
            log.warning("%s", e)
            return
        self.window.show_image(image)

    # --- Commands ---
    @pyqtSlot()
    def open_directory(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self.window, "Select an Image", str(Path.home()), OPEN_DIALOG_FILTER
        )
        directory = directory_of_selection(file_path)
        if directory is not None:
            self.start_scan(directory)

    @pyqtSlot(str)
    def set_theme(self, name: str):
        try:
            theme = load_theme(name)
        except ThemeLoadError as e:
            log.warning("Theme not applied: %s", e)
            return
        self.window.apply_theme(theme.stylesheet, theme.text_color)
        self.theme_name = theme.name
        log.info("Applied %s theme", theme.name)

    @pyqtSlot()
    def toggle_maximize(self):
        self.window.toggle_maximized()

    @pyqtSlot()
    def exit(self):
        self.window.close()

    @pyqtSlot()
    def shutdown(self):
        if self.scan_request is not None:
            self.scan_request.cancel()
            self.scan_request = None
        self.threadpool.waitForDone(SHUTDOWN_WAIT_MS)
