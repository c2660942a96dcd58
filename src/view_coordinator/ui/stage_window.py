"""Stage Window - Application shell whose content is swapped by the coordinator."""

from typing import Any, Protocol

from PySide6.QtWidgets import QMainWindow, QStackedWidget, QWidget

QWIDGETSIZE_MAX = (1 << 24) - 1


class StageWindow(Protocol):
    """The window operations the coordinator relies on."""

    def width(self) -> int: ...

    def height(self) -> int: ...

    def set_root(self, root: Any) -> None: ...

    def set_resizable(self, resizable: bool) -> None: ...

    def show(self) -> None: ...

    def set_width(self, width: int) -> None: ...

    def set_height(self, height: int) -> None: ...


class QtStageWindow(QMainWindow):
    """Main window hosting one view root at a time.

    Roots are kept in a stacked widget, so swapping back to a cached view
    reuses the same widget instead of rebuilding it.
    """

    def __init__(self, title: str = "View Coordinator", width: int = 1200, height: int = 800):
        super().__init__()
        self.setWindowTitle(title)
        self.resize(width, height)

        self._setup_ui()

    def _setup_ui(self):
        """Initialize the central stack that holds view roots."""
        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

    def set_root(self, root: QWidget) -> None:
        """Make ``root`` the visible content, adding it on first use."""
        if self._stack.indexOf(root) < 0:
            self._stack.addWidget(root)
        self._stack.setCurrentWidget(root)

    def current_root(self) -> QWidget | None:
        return self._stack.currentWidget()

    def set_resizable(self, resizable: bool) -> None:
        """Lift size constraints, or pin the window to its current size."""
        if resizable:
            self.setMinimumSize(0, 0)
            self.setMaximumSize(QWIDGETSIZE_MAX, QWIDGETSIZE_MAX)
        else:
            self.setFixedSize(self.size())

    def set_width(self, width: int) -> None:
        self.resize(width, self.height())

    def set_height(self, height: int) -> None:
        self.resize(self.width(), height)
