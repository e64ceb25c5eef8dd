"""Shared pytest fixtures."""

import os
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5.QtCore import QObject, pyqtSignal  # noqa: E402
from PyQt5.QtWidgets import QApplication  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole session, on the offscreen platform."""
    app = QApplication.instance() or QApplication([])
    yield app


def write_image(path: Path, size=(4, 3), color="red") -> Path:
    """Write a real image file with Pillow; the format follows the suffix."""
    from PIL import Image

    img = Image.new("RGB", size, color=color)
    fmt = {".jpg": "JPEG", ".png": "PNG", ".bmp": "BMP", ".gif": "GIF"}[path.suffix.lower()]
    img.save(path, fmt)
    return path


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """A directory with three decodable images and some non-matching entries."""
    write_image(tmp_path / "a.png", color="red")
    write_image(tmp_path / "b.jpg", color="green")
    write_image(tmp_path / "c.gif", color="blue")
    (tmp_path / "notes.txt").write_text("not an image", encoding="utf-8")
    (tmp_path / "sub.png").mkdir()
    return tmp_path


class StubWindow(QObject):
    """Records what the controller asks the window to do."""
    next_requested = pyqtSignal()
    previous_requested = pyqtSignal()
    open_requested = pyqtSignal()
    cancel_requested = pyqtSignal()
    theme_requested = pyqtSignal(str)
    exit_requested = pyqtSignal()
    maximize_toggled = pyqtSignal()
    closing = pyqtSignal()

    def __init__(self):
        super().__init__()
        self.shown_images = []
        self.cleared = 0
        self.loading_visible = False
        self.found_count = None
        self.title = None
        self.stylesheet = None
        self.text_color = None
        self.maximize_calls = 0
        self.closed = False

    def show(self):
        pass

    def show_image(self, image):
        self.shown_images.append(image)

    def clear_image(self):
        self.cleared += 1

    def set_current_title(self, path, index, count):
        self.title = (path, index, count)

    def show_loading(self, found=0):
        self.loading_visible = True
        self.found_count = found

    def set_found_count(self, count):
        self.found_count = count

    def hide_loading(self):
        self.loading_visible = False

    def apply_theme(self, stylesheet, text_color):
        self.stylesheet = stylesheet
        self.text_color = text_color

    def toggle_maximized(self):
        self.maximize_calls += 1

    def close(self):
        self.closed = True
        self.closing.emit()


@pytest.fixture
def stub_window(qapp):
    return StubWindow()


@pytest.fixture
def make_image():
    return write_image
