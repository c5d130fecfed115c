"""Follow-typing practice window for TypeFollow."""

import logging

from PySide6.QtCore import QEvent, QObject, Qt, QTimer
from PySide6.QtGui import QBrush, QColor, QFont, QTextCharFormat, QTextCursor
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from core.focus_probe import FocusProbe
from core.models import (
    Classification,
    ClassificationResult,
    DisplayUnit,
    KeyAction,
    ScoreSnapshot,
    SessionStatus,
)
from core.score_report import format_duration, format_score_report
from core.session import PracticeSession
from utils.clipboard import copy_to_clipboard, get_clipboard_content
from utils.config import PracticeSettings

log = logging.getLogger("typefollow.practice_window")

CORRECT_COLOR = QColor(255, 165, 0, 128)
INCORRECT_COLOR = QColor("red")

KEY_ACTIONS = {
    Qt.Key_Backspace: KeyAction.BACKSPACE,
    Qt.Key_Return: KeyAction.ENTER,
    Qt.Key_Enter: KeyAction.ENTER,
}


def utf16_offsets(passage: tuple[DisplayUnit, ...]) -> list[int]:
    """Qt document position of each Display Unit.

    Qt counts UTF-16 code units, so codepoints outside the basic
    multilingual plane take two positions.
    """
    offsets = []
    position = 0
    for unit in passage:
        offsets.append(position)
        position += 2 if ord(unit.char) > 0xFFFF else 1
    return offsets


class CommitKeyGate:
    """Counts an IME commit and the key that triggered it as one keystroke.

    The commit is handled on its own; the key release that follows it is
    dropped. A key press clears a commit whose release never arrives.
    """

    def __init__(self):
        self.commit_pending = False

    def key_pressed(self) -> None:
        self.commit_pending = False

    def committed(self) -> None:
        self.commit_pending = True

    def accept_key_release(self) -> bool:
        """Whether a key release should be sent to the session."""
        if self.commit_pending:
            self.commit_pending = False
            return False
        return True


class PracticeWindow(QMainWindow):
    """Passage view above an input box, driven by a PracticeSession."""

    def __init__(self, settings: PracticeSettings, parent: QWidget | None = None):
        """Initialize practice window.

        Args:
            settings: Display and focus probe settings
            parent: Parent widget
        """
        super().__init__(parent)
        self.settings = settings
        self._offsets: list[int] = []
        self._passage: tuple[DisplayUnit, ...] = ()
        self.commit_gate = CommitKeyGate()

        self.session = PracticeSession(
            on_classified=self.apply_classifications,
            on_passage_loaded=self.show_passage,
            on_completed=self.on_completed,
        )
        self.focus_probe = FocusProbe(
            is_focused=self.input_has_focus,
            on_focus_lost=self.session.on_focus_lost,
            on_focus_regained=(
                self.session.on_focus_regained if settings.resume_on_focus else None
            ),
            interval_ms=settings.focus_probe_interval_ms,
        )

        self.init_ui()

        # Qt widgets must be polled from the GUI thread, so the probe is
        # driven by a QTimer instead of its own thread
        self.probe_timer = QTimer(self)
        self.probe_timer.timeout.connect(self.on_probe_tick)
        self.probe_timer.start(settings.focus_probe_interval_ms)

    def init_ui(self) -> None:
        """Initialize user interface."""
        self.setWindowTitle("TypeFollow")
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)

        font = QFont(self.settings.font_family, self.settings.font_size)

        self.passage_view = QTextEdit()
        self.passage_view.setReadOnly(True)
        self.passage_view.setFont(font)
        self.passage_view.setFocusPolicy(Qt.NoFocus)
        layout.addWidget(self.passage_view, stretch=3)

        self.input_edit = QPlainTextEdit()
        self.input_edit.setFont(font)
        self.input_edit.setReadOnly(True)
        self.input_edit.installEventFilter(self)
        layout.addWidget(self.input_edit, stretch=2)

        controls = QHBoxLayout()
        self.status_label = QLabel("Load a passage to start")
        controls.addWidget(self.status_label, stretch=1)

        load_btn = QPushButton("Load from clipboard")
        load_btn.clicked.connect(self.load_from_clipboard)
        controls.addWidget(load_btn)

        restart_btn = QPushButton("Restart")
        restart_btn.clicked.connect(self.restart)
        controls.addWidget(restart_btn)

        layout.addLayout(controls)
        self.setCentralWidget(central)
        self.resize(800, 500)

    def load_passage(self, text: str) -> None:
        self.session.load_passage(text)
        self.input_edit.setFocus()

    def load_from_clipboard(self) -> None:
        text = get_clipboard_content()
        if text is None:
            self.status_label.setText("Clipboard is empty")
            return
        self.load_passage(text)

    def restart(self) -> None:
        self.session.restart()
        self.input_edit.setFocus()

    def input_has_focus(self) -> bool:
        return self.isActiveWindow() and self.input_edit.hasFocus()

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        """Feed key releases and IME commits of the input box to the session."""
        if watched is self.input_edit:
            if event.type() == QEvent.KeyPress:
                self.commit_gate.key_pressed()
            elif event.type() == QEvent.KeyRelease and not event.isAutoRepeat():
                if self.commit_gate.accept_key_release():
                    action = KEY_ACTIONS.get(event.key(), KeyAction.OTHER)
                    self.handle_input(action)
            elif event.type() == QEvent.InputMethod and event.commitString():
                self.commit_gate.committed()
                # The committed text is inserted after this filter returns
                QTimer.singleShot(0, lambda: self.handle_input(KeyAction.OTHER))
        return super().eventFilter(watched, event)

    def handle_input(self, action: KeyAction) -> None:
        self.session.on_input_changed(self.input_edit.toPlainText(), action)
        self.update_status()

    def show_passage(self, passage: tuple[DisplayUnit, ...]) -> None:
        """Draw the passage with no classification applied."""
        self._passage = passage
        self._offsets = utf16_offsets(passage)
        self.passage_view.setPlainText("".join(unit.char for unit in passage))

        self.input_edit.blockSignals(True)
        self.input_edit.clear()
        self.input_edit.blockSignals(False)
        self.input_edit.setReadOnly(False)
        self.update_status()

    def apply_classifications(self, results: list[ClassificationResult]) -> None:
        """Colour passage characters from a classification batch."""
        for result in results:
            if result.index >= len(self._passage):
                continue  # overtyping past the passage end has nothing to colour

            start = self._offsets[result.index]
            length = 2 if ord(self._passage[result.index].char) > 0xFFFF else 1

            cursor = QTextCursor(self.passage_view.document())
            cursor.setPosition(start)
            cursor.setPosition(start + length, QTextCursor.KeepAnchor)
            cursor.setCharFormat(self._format_for(result.classification))

    def _format_for(self, classification: Classification) -> QTextCharFormat:
        fmt = QTextCharFormat()
        if classification == Classification.CORRECT:
            fmt.setForeground(QBrush(CORRECT_COLOR))
        elif classification == Classification.INCORRECT:
            fmt.setForeground(QBrush(INCORRECT_COLOR))
        else:
            fmt.setForeground(self.palette().text())
        return fmt

    def on_completed(self, snapshot: ScoreSnapshot) -> None:
        """Freeze input and publish the final score."""
        self.input_edit.setReadOnly(True)
        report = format_score_report(snapshot)
        log.info(f"Final score: {report}")

        if self.settings.copy_score_to_clipboard and not copy_to_clipboard(report):
            log.warning("Could not copy score report to clipboard")
        self.status_label.setText(report)

    def on_probe_tick(self) -> None:
        self.focus_probe.probe_once()
        self.update_status()

    def update_status(self) -> None:
        status = self.session.status
        if status == SessionStatus.COMPLETED:
            return

        snapshot = self.session.score_snapshot()
        self.status_label.setText(
            f"{status.value} | {format_duration(snapshot.elapsed_ms)} | "
            f"characters {snapshot.characters_typed} | "
            f"keystrokes {snapshot.keystrokes} | "
            f"backspaces {snapshot.backspace_count}"
        )

    def closeEvent(self, event) -> None:
        """Stop probing before the window goes away."""
        self.probe_timer.stop()
        self.focus_probe.stop()
        super().closeEvent(event)
