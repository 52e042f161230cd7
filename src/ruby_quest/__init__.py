"""
The Magic Ruby - a text adventure.

This package provides:
- The fixed world of Uncle Simon's house and the other world
- A three-letter command parser
- The engine that plays the puzzles out
"""

__version__ = "0.1.0"
