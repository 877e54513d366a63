"""
Theme definitions for the Quiz Runner GUI.
"""


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#0364B8"
    PRIMARY_BLUE_HOVER = "#0A2767"
    
    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    HOVER = "#f0f0f0"
    DISABLED_BG = "#e0e0e0"
    
    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_DISABLED = "#757575"
    TEXT_ON_PRIMARY = "#ffffff"
    
    # Borders
    BORDER = "#e0e0e0"
    
    # Status
    ERROR = "#f56565"
    SUCCESS = "#48bb78"
    WARNING = "#f57c00"
    INFO = "#4299e1"
    
    # Selection
    SELECTION_BG = "#F0F9FF"
    
    # Toggles
    TOGGLE_BG = "#f57c00"
    
    # Sketch pens
    PEN_BLACK = "#000000"
    PEN_RED = "#e53e3e"


class Fonts:
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"
    
    H1 = "18pt"
    BODY = "14pt"
    SMALL = "11pt"


# Progress cell colours keyed by QuestionStatus value
PROGRESS_COLORS = {
    "unvisited": (Colors.SURFACE, Colors.TEXT_PRIMARY),
    "current": (Colors.PRIMARY_BLUE, Colors.TEXT_ON_PRIMARY),
    "correct": (Colors.SUCCESS, Colors.TEXT_ON_PRIMARY),
    "incorrect": (Colors.ERROR, Colors.TEXT_ON_PRIMARY),
    "answered": (Colors.INFO, Colors.TEXT_ON_PRIMARY),
}


class Styles:
    PRIMARY_BUTTON = f"""
        QPushButton {{
            background-color: {Colors.PRIMARY_BLUE};
            color: {Colors.TEXT_ON_PRIMARY};
            border: none;
            border-radius: 6px;
            padding: 10px 24px;
            font-weight: bold;
        }}
        QPushButton:hover {{ background-color: {Colors.PRIMARY_BLUE_HOVER}; }}
        QPushButton:disabled {{
            background-color: {Colors.DISABLED_BG};
            color: {Colors.TEXT_DISABLED};
        }}
    """
    
    CHOICE_BUTTON = f"""
        QPushButton {{
            text-align: left;
            background-color: {Colors.SURFACE};
            color: {Colors.TEXT_PRIMARY};
            border: 1px solid {Colors.BORDER};
            border-radius: 6px;
            padding: 10px 14px;
        }}
        QPushButton:hover {{ background-color: {Colors.HOVER}; }}
        QPushButton:checked {{
            background-color: {Colors.SELECTION_BG};
            border: 2px solid {Colors.PRIMARY_BLUE};
        }}
    """
    
    TAG_BUTTON = f"""
        QPushButton {{
            background-color: {Colors.SURFACE};
            color: {Colors.TEXT_SECONDARY};
            border: 1px solid {Colors.BORDER};
            border-radius: 10px;
            padding: 2px 10px;
        }}
        QPushButton:checked {{
            background-color: {Colors.WARNING};
            color: {Colors.TEXT_ON_PRIMARY};
            border: 1px solid {Colors.WARNING};
        }}
    """
    
    FEEDBACK_AREA = f"""
        QFrame#feedbackArea {{
            background-color: {Colors.SELECTION_BG};
            border: 1px solid {Colors.BORDER};
            border-radius: 6px;
        }}
    """


GLOBAL_STYLESHEET = f"""
    QMainWindow, QWidget#screen {{
        background-color: {Colors.BACKGROUND};
    }}
    QLabel {{
        color: {Colors.TEXT_PRIMARY};
    }}
"""
