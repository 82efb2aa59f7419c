"""API route modules."""
from api.routes import analysis, answer_keys, progress, scoring, tests

__all__ = ["analysis", "answer_keys", "progress", "scoring", "tests"]
