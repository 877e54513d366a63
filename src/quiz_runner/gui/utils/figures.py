"""
Figure loading for question diagrams.

Figures are optional and their failure must never affect the quiz: a
missing or unreadable figure yields None and the view shows a placeholder.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


class FigureProvider:
    """
    Loads and caches figure images relative to a base directory.
    
    Attributes:
        base_dir: Directory that relative figure references resolve against
        max_size: Figures larger than this (w, h) are downscaled
        
    Example:
        >>> provider = FigureProvider(Path("questions/"))
        >>> image = provider.get("figures/q1.png")
    """
    
    def __init__(self, base_dir: Optional[Path] = None, max_size: tuple[int, int] = (800, 600)) -> None:
        self.base_dir = base_dir
        self.max_size = max_size
        self._cache: Dict[str, Optional[Image.Image]] = {}
    
    def resolve(self, figure_ref: str) -> Path:
        """Resolve a figure reference to a filesystem path."""
        path = Path(figure_ref)
        if self.base_dir and not path.is_absolute():
            path = self.base_dir / path
        return path
    
    def get(self, figure_ref: Optional[str]) -> Optional[Image.Image]:
        """
        Load a figure as an RGBA PIL image.
        
        Args:
            figure_ref: Reference from Question.figure_ref
            
        Returns:
            Image, or None if there is no figure or it cannot be loaded
        """
        if not figure_ref:
            return None
        if figure_ref in self._cache:
            return self._cache[figure_ref]
        
        path = self.resolve(figure_ref)
        image: Optional[Image.Image] = None
        try:
            with Image.open(path) as img:
                image = img.convert("RGBA")
            image.thumbnail(self.max_size)
        except FileNotFoundError:
            logger.warning(f"Figure not found: {path}")
        except (UnidentifiedImageError, OSError) as e:
            logger.warning(f"Failed to load figure {path}: {e}")
        
        self._cache[figure_ref] = image
        return image
    
    def clear_cache(self) -> None:
        self._cache.clear()


def to_qpixmap(image: Image.Image):
    """Convert an RGBA PIL image to a QPixmap."""
    from PySide6.QtGui import QImage, QPixmap
    
    rgba = image.convert("RGBA")
    data = rgba.tobytes("raw", "RGBA")
    qimage = QImage(data, rgba.width, rgba.height, rgba.width * 4, QImage.Format.Format_RGBA8888)
    # copy() detaches from the Python buffer
    return QPixmap.fromImage(qimage.copy())
