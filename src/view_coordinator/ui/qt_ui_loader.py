"""Qt UI Loader - builds views from Qt Designer .ui files."""

import logging
from pathlib import Path
from typing import Callable, Dict

from PySide6.QtCore import QFile, QIODevice
from PySide6.QtUiTools import QUiLoader
from PySide6.QtWidgets import QWidget

from view_coordinator.core import LoadedView, ViewContract, ViewLoadError
from view_coordinator.services import ViewLoader

logger = logging.getLogger(__name__)

ControllerFactory = Callable[[QWidget], ViewContract]


class QtUiLoader(ViewLoader):
    """
    Loads a .ui file per descriptor and pairs it with a controller.

    Descriptors are paths relative to ``ui_dir``. The controller for each
    descriptor is created by the factory registered for it, which receives
    the freshly built root widget.

    Widgets are created on the calling thread, so views loaded through this
    class must be shown from the GUI thread.
    """

    def __init__(self, ui_dir: Path):
        if ui_dir is None:
            raise ValueError("ui_dir must not be None")
        self.ui_dir = Path(ui_dir)
        self._controller_factories: Dict[str, ControllerFactory] = {}

    def register(self, descriptor: str, controller_factory: ControllerFactory) -> None:
        """Register the controller factory for a .ui descriptor."""
        self._controller_factories[descriptor] = controller_factory

    def register_view(
        self, view_type: type[ViewContract], controller_factory: ControllerFactory
    ) -> None:
        self.register(view_type.load_descriptor(), controller_factory)

    def load(self, descriptor: str) -> LoadedView:
        factory = self._controller_factories.get(descriptor)
        if factory is None:
            raise ViewLoadError(
                f"No controller registered for descriptor: {descriptor}",
                descriptor=descriptor,
            )

        root = self._load_widget(descriptor)

        try:
            controller = factory(root)
        except Exception as e:
            root.deleteLater()
            raise ViewLoadError(
                f"Failed to create controller for {descriptor}: {e}",
                descriptor=descriptor,
            ) from e

        logger.debug("Loaded %s from %s", type(controller).__name__, descriptor)
        return LoadedView(root=root, controller=controller)

    def _load_widget(self, descriptor: str) -> QWidget:
        path = self.ui_dir / descriptor
        if not path.is_file():
            raise ViewLoadError(f"UI file not found: {path}", descriptor=descriptor)

        ui_file = QFile(str(path))
        if not ui_file.open(QIODevice.OpenModeFlag.ReadOnly):
            raise ViewLoadError(
                f"Cannot open UI file {path}: {ui_file.errorString()}",
                descriptor=descriptor,
            )

        loader = QUiLoader()
        try:
            root = loader.load(ui_file)
        except RuntimeError as e:
            raise ViewLoadError(
                f"Malformed UI file {path}: {loader.errorString() or e}",
                descriptor=descriptor,
            ) from e
        finally:
            ui_file.close()

        # Older bindings report a parse failure by returning None

        if root is None:
            raise ViewLoadError(
                f"Malformed UI file {path}: {loader.errorString()}",
                descriptor=descriptor,
            )
        return root
