"""Material Design icons via QtAwesome."""
import qtawesome as qta
from quiz_runner.gui.styles.theme import Colors

class MaterialIcons:
    """Centralized Material Design icon definitions using QtAwesome."""
    
    @staticmethod
    def pen(color=None):
        """Sketch pen icon."""
        return qta.icon('mdi6.pencil-outline', color=color or Colors.TEXT_PRIMARY)
    
    @staticmethod
    def eraser():
        return qta.icon('mdi6.eraser', color=Colors.TEXT_SECONDARY)
    
    @staticmethod
    def undo():
        return qta.icon('mdi6.undo', color=Colors.TEXT_SECONDARY)
    
    @staticmethod
    def clear():
        """Clear sketch icon."""
        return qta.icon('mdi6.delete-outline', color=Colors.ERROR)
    
    @staticmethod
    def confirm():
        return qta.icon('mdi6.check-circle-outline', color=Colors.TEXT_ON_PRIMARY)
    
    @staticmethod
    def restart():
        return qta.icon('mdi6.restart', color=Colors.TEXT_ON_PRIMARY)
    
    @staticmethod
    def open_file():
        """Open question file icon."""
        return qta.icon('mdi6.folder-open-outline', color=Colors.TEXT_SECONDARY)
    
    @staticmethod
    def correct():
        return qta.icon('mdi6.circle-outline', color=Colors.SUCCESS)
    
    @staticmethod
    def incorrect():
        return qta.icon('mdi6.close', color=Colors.ERROR)
