"""Contract classes shared by every predicate.

Exported so they can be imported directly from :mod:`semantic_attributes`.
"""

from .predicate import MessageKey, Predicate, Translator, ValidationPhase

__all__ = [
    "MessageKey",
    "Predicate",
    "Translator",
    "ValidationPhase",
]
