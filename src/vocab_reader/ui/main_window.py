"""Main Window - Application shell with menus and keyboard handling."""

from pathlib import Path
from typing_extensions import override

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QAction, QKeyEvent
from PySide6.QtWidgets import QFileDialog, QMainWindow, QMessageBox, QStackedWidget


ADVANCE_KEYS = (Qt.Key.Key_Space, Qt.Key.Key_Return, Qt.Key.Key_Enter, Qt.Key.Key_Right)


class MainWindow(QMainWindow):
    """Provides the application shell, stacked screens, and keyboard shortcuts."""

    # Signal emitted when the user picks a text file to import
    import_requested = Signal(Path)
    library_requested = Signal()
    vocabulary_requested = Signal()
    # Reading progression
    advance_requested = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Vocab Reader")
        self.setGeometry(100, 100, 1000, 760)

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        self._reading_view = None
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

    def _create_menu_bar(self):
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")

        import_action = QAction("&Import Article...", self)
        import_action.setShortcut("Ctrl+O")
        import_action.triggered.connect(self._on_import_article)
        file_menu.addAction(import_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        view_menu = menu_bar.addMenu("&View")

        library_action = QAction("&Library", self)
        library_action.setShortcut("Ctrl+L")
        library_action.triggered.connect(self.library_requested.emit)
        view_menu.addAction(library_action)

        vocabulary_action = QAction("&Vocabulary", self)
        vocabulary_action.setShortcut("Ctrl+W")
        vocabulary_action.triggered.connect(self.vocabulary_requested.emit)
        view_menu.addAction(vocabulary_action)

    def _on_import_article(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Import Article",
            str(Path.home()),
            "Text files (*.txt);;All files (*)",
        )
        if file_path:
            self.import_requested.emit(Path(file_path))

    def _show_screen(self, widget):
        if self.stack.indexOf(widget) < 0:
            self.stack.addWidget(widget)
        self.stack.setCurrentWidget(widget)

    def display_library_view(self, library_screen):
        self._show_screen(library_screen)

    def display_reading_view(self, reading_view):
        self._reading_view = reading_view
        self._show_screen(reading_view)

    def is_reading(self) -> bool:
        return self._reading_view is not None and self.stack.currentWidget() is self._reading_view

    def display_vocabulary_view(self, vocabulary_screen):
        self._show_screen(vocabulary_screen)

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def show_info(self, title: str, message: str):
        """Display an information message to the user."""
        QMessageBox.information(self, title, message)

    @override
    def keyPressEvent(self, event: QKeyEvent):
        """Space, Enter, and Right arrow reveal the next sentence on the reading screen."""
        if event.key() in ADVANCE_KEYS and self.is_reading():
            self.advance_requested.emit()
        else:
            super().keyPressEvent(event)
