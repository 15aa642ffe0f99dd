"""
Tintscale

Color conversion, lightness scale generation, text contrast classification
and representative color extraction from images.
"""

__version__ = "1.0.0"
