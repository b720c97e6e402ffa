"""Entry point of the desktop application."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from .api_client import ApiClient
from .config import configure_logging, load_config
from .controller import SubmissionController
from .download import DownloadTrigger, save_to_directory
from .widgets.filter_form import DriverFilterWindow, dialog_save_file


def main() -> None:
    """Start the Qt application."""

    config = load_config()
    configure_logging(config.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName("Driver Filter")
    app.setOrganizationName("Driver Filter")

    api_client = ApiClient(config.backend_url, timeout=config.request_timeout)
    if config.download_dir is not None:
        save_file = save_to_directory(config.download_dir)
    else:
        save_file = dialog_save_file()
    controller = SubmissionController(api_client, DownloadTrigger(save_file))

    window = DriverFilterWindow(controller)
    window.show()

    sys.exit(app.exec())


__all__ = ["main"]
