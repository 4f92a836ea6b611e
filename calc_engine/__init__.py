"""
Calculator Engine

Pure, replayable state machine for a four-function calculator.
"""

__version__ = "0.1.0"
