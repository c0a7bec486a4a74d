import sys
import logging
from PyQt6.QtWidgets import QApplication

from sketchboard.config import Settings
from sketchboard.raster import SurfaceError
from sketchboard.ui import SketchboardWindow


def setup_logging(level="INFO"):
    # --- DEV LOGGING ---
    log_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level, logging.INFO))
    console_handler.setFormatter(log_formatter)

    # Debug file handler (captures all logs)
    debug_file_handler = logging.FileHandler('app_debug.log', mode='a', encoding='utf-8')
    debug_file_handler.setLevel(logging.DEBUG)
    debug_file_handler.setFormatter(log_formatter)

    # Error file handler (captures only errors and critical)
    error_file_handler = logging.FileHandler('app_error.log', mode='a', encoding='utf-8')
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(log_formatter)

    # force: replace any handler attached before this ran
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            console_handler,
            debug_file_handler,
            error_file_handler
        ],
        force=True
    )
    return console_handler


def main():
    # Logging first, so config warnings land in the log files too
    console_handler = setup_logging()
    settings = Settings.from_env()
    console_handler.setLevel(getattr(logging, settings.log_level, logging.INFO))

    app = QApplication(sys.argv)

    try:
        logging.info("Starting Sketchboard...")
        window = SketchboardWindow(settings)
    except SurfaceError as e:
        # No drawing surface, nothing to fall back to
        logging.critical(f"Startup Error: {e}", exc_info=True)
        sys.exit(1)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
