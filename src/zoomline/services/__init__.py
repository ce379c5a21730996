"""
Services - region generation on top of the zoom engine
"""

from .auto_zoom_service import generate_auto_zoom_regions, apply_auto_zoom

__all__ = ['generate_auto_zoom_regions', 'apply_auto_zoom']
