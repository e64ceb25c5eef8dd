from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from utils.config import FOUND_TEMPLATE


class LoadingOverlay(QFrame):
    """Centered panel shown while a directory scan is running."""
    cancel_requested = pyqtSignal()

    def __init__(self, parent: QWidget = None) -> None:
        super().__init__(parent)
        self.setObjectName("loadingOverlay")

        self.title_label = QLabel("Loading images...")
        self.title_label.setAlignment(Qt.AlignCenter)
        self.found_label = QLabel(FOUND_TEMPLATE.format(count=0))
        self.found_label.setAlignment(Qt.AlignCenter)
        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.clicked.connect(self.cancel_requested.emit)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 16, 24, 16)
        layout.addWidget(self.title_label)
        layout.addWidget(self.found_label)
        layout.addWidget(self.cancel_btn, 0, Qt.AlignCenter)

        self.setFixedSize(220, 120)
        self.hide()

    def set_found_count(self, count: int) -> None:
        self.found_label.setText(FOUND_TEMPLATE.format(count=count))

    def show_centered(self) -> None:
        self.recenter()
        self.show()
        self.raise_()

    def recenter(self) -> None:
        parent = self.parentWidget()
        if parent is None:
            return
        self.move((parent.width() - self.width()) // 2,
                  (parent.height() - self.height()) // 2)
