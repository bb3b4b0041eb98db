from . import settings
from .rect import Rect, bounding_rect

__all__ = ['Rect', 'bounding_rect', 'settings']
