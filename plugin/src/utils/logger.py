"""Global logging, error handling and user message utilities"""
import sys
import logging
import traceback

from constants import STATUS_MESSAGE_TIMEOUT_MS

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_main_window = None
_logger = logging.getLogger('SortBackgroundColors')


def configure_logging(verbose: bool = False):
    """Configure root logging the way the host application does

    Args:
        verbose: DEBUG level when True, WARNING otherwise
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def set_main_window(window):
    """Set the main window reference for status messages and popups"""
    global _main_window
    _main_window = window


def show_status_message(text: str, timeout: int = STATUS_MESSAGE_TIMEOUT_MS):
    """Show a transient message to the user

    Uses the main window's status bar when one is registered, otherwise
    the message only goes to the log.
    """
    if _main_window is not None:
        _main_window.statusBar().showMessage(text, timeout)
    else:
        _logger.info(f"Status: {text}")


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional popup in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Logs the full traceback
        - Shows popup with user message or exception string
        - Then raises the exception
    """
    if DEBUG_MODE:
        raise e

    tb = traceback.format_exc()
    _logger.error(f"{tb}")

    message = user_message if user_message else str(e)
    if _main_window is not None:
        from PyQt5.QtWidgets import QMessageBox
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error(f"ERROR POPUP (no window): {title} - {message}")

    raise e
