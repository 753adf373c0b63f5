"""
tracepaint CLI - Command-line interface for the paint exercise core.

Usage:
    tracepaint --catalog config/shapes.yaml shapes
    tracepaint --catalog config/shapes.yaml classify square 520 250
    tracepaint --config config/exercise.yaml coverage circle painted.png
"""

__version__ = "1.0.0"
