"""PySide6 front end: the presentation adapter for the quiz engine."""
