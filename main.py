import argparse
import logging
import sys

from PyQt5.QtWidgets import QApplication

from controllers.viewer_controller import ViewerController
from utils.config import APP_NAME, DEFAULT_THEME, THEME_NAMES
from utils.log import setup_logging
from utils.paths import resolve_start_directory

log = logging.getLogger(__name__)


def parse_args(argv):
    parser = argparse.ArgumentParser(prog="simple-image-viewer", description=APP_NAME)
    parser.add_argument("directory", nargs="?", help="Directory (or a file inside it) to open")
    parser.add_argument("--theme", choices=THEME_NAMES, default=DEFAULT_THEME)
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING or ERROR")
    return parser.parse_args(argv)


def main() -> None:
    """
    Initializes and launches the image viewer application.
    """
    app = QApplication(sys.argv)
    args = parse_args(app.arguments()[1:])
    setup_logging(args.log_level)

    # The controller builds the UI and starts the first scan
    try:
        controller = ViewerController(
            start_directory=resolve_start_directory(args.directory),
            theme=args.theme,
        )
    except Exception:
        log.exception("An unexpected error occurred during startup")
        sys.exit(1)

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
