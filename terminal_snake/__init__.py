"""
Terminal Snake - a curses Snake game driven by a fixed-tick state machine.
"""

__version__ = "0.1.0"
