"""
TabletGUI - settings for the TabletDriver companion application.
"""

__version__ = "0.1.0"
