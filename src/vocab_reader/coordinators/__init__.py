"""Coordinators - Orchestration layer connecting UI with business logic."""

from .library_coordinator import LibraryCoordinator
from .reading_session import ReadingSession, SessionState
from .session_controller import SessionController
from .vocabulary_coordinator import VocabularyCoordinator
from .word_interaction_coordinator import WordInteractionCoordinator

__all__ = [
    "LibraryCoordinator",
    "ReadingSession",
    "SessionController",
    "SessionState",
    "VocabularyCoordinator",
    "WordInteractionCoordinator",
]
