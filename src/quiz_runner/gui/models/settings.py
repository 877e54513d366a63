"""
Settings persistence model for the GUI.

Stores preferences only (question file, sketch toggle, last mode, shuffle
seed). Quiz progress is never written to disk. Malformed data falls back
to defaults.

File layout:
    {
      "version": 1,
      "questions_path": "/path/to/questions.json",
      "seed": 42,
      "ui": {"drawing_enabled": true, "last_mode": "practice"}
    }
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)

MODES = ("practice", "test")


def _read_settings_file(path: Path) -> Tuple[Dict[str, object], Optional[str]]:
    """Read a settings file. Returns (data, error); data is {} on error."""
    if not path.exists():
        return {}, None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        return {}, f"Settings file is corrupted:\n{e}"
    except (OSError, UnicodeDecodeError) as e:
        return {}, f"Failed to read settings:\n{e}"
    if not isinstance(data, dict):
        return {}, "Settings file does not contain an object"
    return data, None


class SettingsStore(QObject):
    """JSON-backed store for quiz preferences."""

    questionsPathChanged = Signal(str)
    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self.data, self._load_error = _read_settings_file(path)
        if self._load_error:
            logger.warning(self._load_error.replace("\n", " "))
        self.data.setdefault("version", self.CURRENT_VERSION)

    @property
    def load_error(self) -> Optional[str]:
        return self._load_error

    def check_load_error(self) -> bool:
        """
        Ask whether to reset unreadable settings.

        Returns True if the app should continue. Needs a QApplication.
        """
        if self._load_error is None:
            return True

        from PySide6.QtWidgets import QMessageBox

        answer = QMessageBox.question(
            None,
            "Settings Error",
            f"Your quiz settings could not be loaded.\n\n{self._load_error}\n\n"
            "Reset them to defaults and continue?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.Yes,
        )
        if answer != QMessageBox.StandardButton.Yes:
            return False
        self._save()
        self._load_error = None
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Preferences
    # ─────────────────────────────────────────────────────────────────────────

    def get_questions_path(self) -> Optional[str]:
        value = self.data.get("questions_path")
        return value if isinstance(value, str) and value else None

    def set_questions_path(self, value: str) -> None:
        if self.data.get("questions_path") == value:
            return
        self.data["questions_path"] = value
        self._save()
        self.questionsPathChanged.emit(value)

    def get_drawing_enabled(self) -> bool:
        value = self._ui().get("drawing_enabled", True)
        return value if isinstance(value, bool) else True

    def set_drawing_enabled(self, enabled: bool) -> None:
        self._ui()["drawing_enabled"] = bool(enabled)
        self._save()

    def get_last_mode(self) -> Optional[str]:
        mode = self._ui().get("last_mode")
        return mode if mode in MODES else None

    def set_last_mode(self, mode: str) -> None:
        self._ui()["last_mode"] = mode
        self._save()

    def get_seed(self) -> Optional[int]:
        """Shuffle seed from the file (None = random order each run)."""
        value: Any = self.data.get("seed")
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Ignoring invalid seed in settings: {value!r}")
            return None

    # ─────────────────────────────────────────────────────────────────────────
    # Storage
    # ─────────────────────────────────────────────────────────────────────────

    def _ui(self) -> Dict[str, object]:
        ui = self.data.get("ui")
        if not isinstance(ui, dict):
            ui = self.data["ui"] = {}
        return ui

    def _save(self) -> None:
        """Write via a temp file so a crash never leaves half a file."""
        tmp = self.path.with_suffix(".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(self.data, indent=2), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to save settings: {e}")
            tmp.unlink(missing_ok=True)
