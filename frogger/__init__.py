"""
Frogger: a small arcade crossing game built on pygame
"""

__version__ = "1.0.0"
