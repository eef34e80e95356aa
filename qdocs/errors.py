"""
errors.py - Exception hierarchy for qdocs.
"""


class QDocsError(Exception):
    """Base class for all qdocs errors"""
    pass


class QuestionSetError(QDocsError):
    """A question set file is missing, unreadable or malformed"""

    def __init__(self, source, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")
