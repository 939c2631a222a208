"""
gridsnake - a headless grid snake game engine.
"""

__version__ = "0.1.0"
