"""
icons.py - Console status markers shared by qdocs scripts.
"""

SUCCESS = "✅"
WARNING = "⚠️"
ERROR = "❌"

FOLDER = "📁"


def fence(title: str, width: int = 70) -> None:
    """Print a section banner."""
    print()
    print("=" * width)
    print(title)
    print("=" * width)
