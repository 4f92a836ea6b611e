"""
Calculator CLI - terminal front end for the calculator engine

Commands:
- calc run KEYS - Replay a keystroke script and show the display
- calc repl - Interactive keypad
- calc keys - Keyboard map
- calc version
"""

__version__ = "0.1.0"
