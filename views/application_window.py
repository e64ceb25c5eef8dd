from __future__ import annotations
from pathlib import Path
from typing import Optional

from PyQt5.QtCore import pyqtSignal, Qt, QPoint
from PyQt5.QtGui import QGuiApplication, QImage, QPixmap, QColor, QPalette
from PyQt5.QtWidgets import QMainWindow, QAction, QLabel, QSizePolicy

from utils.config import APP_NAME, WINDOW_SIZE_FRACTION
from .loading_overlay import LoadingOverlay


class ApplicationWindow(QMainWindow):
    next_requested = pyqtSignal()
    previous_requested = pyqtSignal()
    open_requested = pyqtSignal()
    cancel_requested = pyqtSignal()
    theme_requested = pyqtSignal(str)
    exit_requested = pyqtSignal()
    maximize_toggled = pyqtSignal()
    closing = pyqtSignal()

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.setWindowFlags(self.windowFlags() | Qt.FramelessWindowHint)

        self._pixmap: Optional[QPixmap] = None
        self._drag_offset: Optional[QPoint] = None

        # Default size, relative to the available screen
        screen = QGuiApplication.primaryScreen().availableGeometry()
        self.resize(int(screen.width() * WINDOW_SIZE_FRACTION[0]),
                    int(screen.height() * WINDOW_SIZE_FRACTION[1]))
        self.center()

        self._create_actions()
        self._create_menu()

        self.image_label = QLabel()
        self.image_label.setObjectName("imageLabel")
        self.image_label.setAlignment(Qt.AlignCenter)
        self.image_label.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setCentralWidget(self.image_label)

        self.loading_overlay = LoadingOverlay(self)
        self.loading_overlay.cancel_requested.connect(self.cancel_requested)

        self.setFocusPolicy(Qt.StrongFocus)

    def _create_actions(self):
        self.open_action = QAction("&Open Directory...", self)
        self.open_action.setShortcut("Ctrl+O")
        self.open_action.triggered.connect(self.open_requested)
        self.exit_action = QAction("E&xit", self)
        self.exit_action.triggered.connect(self.exit_requested)

        self.light_theme_action = QAction("&Light Theme", self)
        self.light_theme_action.triggered.connect(lambda: self.theme_requested.emit("light"))
        self.dark_theme_action = QAction("&Dark Theme", self)
        self.dark_theme_action.triggered.connect(lambda: self.theme_requested.emit("dark"))

    def _create_menu(self):
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.open_action)
        file_menu.addSeparator()
        file_menu.addAction(self.exit_action)
        view_menu = menu_bar.addMenu("&View")
        view_menu.addAction(self.light_theme_action)
        view_menu.addAction(self.dark_theme_action)

    def center(self):
        qr = self.frameGeometry()
        cp = QGuiApplication.primaryScreen().availableGeometry().center()
        qr.moveCenter(cp)
        self.move(qr.topLeft())

    def apply_theme(self, stylesheet: str, text_color: str):
        self.setStyleSheet(stylesheet)
        palette = self.palette()
        palette.setColor(QPalette.WindowText, QColor(text_color))
        palette.setColor(QPalette.Text, QColor(text_color))
        self.setPalette(palette)

    # --- Image area ---
    def show_image(self, image: QImage) -> None:
        self._pixmap = QPixmap.fromImage(image)
        self._rescale_pixmap()

    def clear_image(self) -> None:
        self._pixmap = None
        self.image_label.clear()

    def _rescale_pixmap(self):
        if self._pixmap is None or self._pixmap.isNull():
            return
        self.image_label.setPixmap(self._pixmap.scaled(
            self.image_label.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation
        ))

    def set_current_title(self, path: Optional[str], index: int, count: int) -> None:
        if path is None:
            self.setWindowTitle(APP_NAME)
        else:
            self.setWindowTitle(f"{Path(path).name} ({index + 1}/{count}) - {APP_NAME}")

    # --- Loading overlay ---
    def show_loading(self, found: int = 0) -> None:
        self.loading_overlay.set_found_count(found)
        self.loading_overlay.show_centered()

    def set_found_count(self, count: int) -> None:
        self.loading_overlay.set_found_count(count)

    def hide_loading(self) -> None:
        self.loading_overlay.hide()

    # --- Window control ---
    def toggle_maximized(self) -> None:
        if self.isMaximized():
            self.showNormal()
        else:
            self.showMaximized()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._rescale_pixmap()
        self.loading_overlay.recenter()

    def closeEvent(self, event):
        self.closing.emit()
        super().closeEvent(event)

    def keyPressEvent(self, e):
        if e.key() == Qt.Key_Left:
            self.previous_requested.emit()
        elif e.key() == Qt.Key_Right:
            self.next_requested.emit()
        elif e.key() == Qt.Key_Escape:
            if self.isMaximized():
                self.showNormal()
            else:
                self.exit_requested.emit()
        else:
            super().keyPressEvent(e)

    def mousePressEvent(self, e):
        if e.button() == Qt.LeftButton:
            self._drag_offset = e.globalPos() - self.frameGeometry().topLeft()
            e.accept()
        else:
            super().mousePressEvent(e)

    def mouseMoveEvent(self, e):
        if self._drag_offset is not None and e.buttons() & Qt.LeftButton and not self.isMaximized():
            self.move(e.globalPos() - self._drag_offset)
            e.accept()
        else:
            super().mouseMoveEvent(e)

    def mouseReleaseEvent(self, e):
        self._drag_offset = None
        super().mouseReleaseEvent(e)

    def mouseDoubleClickEvent(self, e):
        if e.button() == Qt.LeftButton:
            self.maximize_toggled.emit()
            e.accept()
        else:
            super().mouseDoubleClickEvent(e)
