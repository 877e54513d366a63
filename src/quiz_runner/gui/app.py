"""
Entry point for the PySide6 quiz GUI.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def _set_macos_app_name(name: str):
    """
    Set the application name in the macOS menu bar.
    This requires pyobjc-framework-Cocoa.
    """
    if sys.platform != "darwin":
        return

    try:
        from Foundation import NSBundle
        bundle = NSBundle.mainBundle()
        info = bundle.localizedInfoDictionary() or bundle.infoDictionary()
        if info:
            info["CFBundleName"] = name
    except ImportError:
        pass


def run(questions_path: Optional[Path] = None, seed: Optional[int] = None) -> int:
    """
    Main entry point for the GUI application.

    Args:
        questions_path: Question file to load instead of the remembered one
        seed: Seed for choice shuffling (overrides the settings file)

    Returns:
        Qt event loop exit code
    """
    from PySide6.QtWidgets import QApplication
    from quiz_runner.engine import EngineConfig
    from quiz_runner.gui.main_window import MainWindow
    from quiz_runner.gui.models.settings import SettingsStore
    from quiz_runner.gui.styles.theme import GLOBAL_STYLESHEET
    from quiz_runner.gui.utils.paths import get_settings_path

    _set_macos_app_name("Quiz Runner")
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Quiz Runner")
    app.setApplicationDisplayName("Quiz Runner")
    app.setOrganizationName("Quiz Runner")

    settings = SettingsStore(get_settings_path())

    # Malformed settings: ask before resetting them
    if not settings.check_load_error():
        return 1

    app.setStyleSheet(GLOBAL_STYLESHEET)

    if seed is None:
        seed = settings.get_seed()
    config = EngineConfig(seed=seed)
    logger.debug(f"Starting GUI (seed={seed}, questions={questions_path})")

    window = MainWindow(settings, questions_path=questions_path, config=config)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(run())
