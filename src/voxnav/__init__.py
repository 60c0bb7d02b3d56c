"""
voxnav

French voice-command interpreter: maps a speech-to-text transcript onto one
of the application's navigation intents.
"""

__version__ = "1.0.0"
