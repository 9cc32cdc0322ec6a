"""UI layer - PySide6 presentation components."""

from .library_screen import LibraryScreen
from .main_window import MainWindow
from .reading_view import ReadingView
from .statistics_dialog import StatisticsDialog
from .vocabulary_screen import VocabularyScreen
from .word_popup import WordPopup

__all__ = [
    "LibraryScreen",
    "MainWindow",
    "ReadingView",
    "StatisticsDialog",
    "VocabularyScreen",
    "WordPopup",
]
