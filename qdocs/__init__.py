"""
qdocs - numbered Markdown stubs for interview question sets.
"""

__version__ = "0.1.0"
