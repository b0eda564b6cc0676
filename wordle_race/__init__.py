"""
Wordle race: a human player against an automatic Wordle solver.
"""

__version__ = "1.0.0"
