import logging
from typing import Optional

from PySide6 import QtCore, QtGui, QtWidgets

from radialcolor.config import DEFAULT_LAYOUT, DialogLayout
from radialcolor.core import ColorState, Rgba, build_synchronizer
from radialcolor.widgets.controls import ControlPanel
from radialcolor.widgets.display import DisplayPanel
from radialcolor.widgets.utils import rgba_to_qcolor, to_rgba

logger = logging.getLogger(__name__)


class RadialColorDialog(QtWidgets.QDialog):
    """
    Modal color picker: the radial display on the left, numeric controls on
    the right. Both are views of one ColorSynchronizer.
    """

    colorChanged = QtCore.Signal(QtGui.QColor)  # every composed-color update

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None, layout: DialogLayout = DEFAULT_LAYOUT):
        super().__init__(parent)
        self._initial = Rgba(0, 0, 0, 255)
        self._color = self._initial

        self._sync = build_synchronizer(layout, on_change=self._on_state_changed)
        self._display = DisplayPanel(self._sync, layout, self)
        self._controls = ControlPanel(self._sync, self)

        row = QtWidgets.QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)
        row.addWidget(self._display)
        row.addWidget(self._controls)
        row.setSizeConstraint(QtWidgets.QLayout.SizeConstraint.SetFixedSize)

        self.setWindowTitle("Select Color")
        self.setModal(True)

        self._controls.closeRequested.connect(self._close_dialog)

    # --- public API

    @property
    def synchronizer(self):
        return self._sync

    @property
    def display(self) -> DisplayPanel:
        return self._display

    @property
    def controls(self) -> ControlPanel:
        return self._controls

    def color(self) -> QtGui.QColor:
        return rgba_to_qcolor(self._color)

    def rgba(self) -> Rgba:
        return self._color

    def load_color(self, color: QtGui.QColor | Rgba) -> None:
        """Seed the dialog; Cancel will come back to this color."""
        self._initial = to_rgba(color)
        self._color = self._initial
        self._sync.load_color(self._initial)
        self._controls.refresh()
        self._display.update()

    def show_dialog(self, color: QtGui.QColor | Rgba, title: str = "Select Color") -> bool:
        """Run modally. Returns True when the user pressed Ok."""
        self.setWindowTitle(title)
        self.load_color(color)
        self._resolve_position()
        return self.exec() == QtWidgets.QDialog.DialogCode.Accepted

    @staticmethod
    def get_color(
            initial: QtGui.QColor | Rgba = Rgba(0, 0, 0, 255),
            parent: Optional[QtWidgets.QWidget] = None,
            title: str = "Select Color",
    ) -> Optional[QtGui.QColor]:
        dialog = RadialColorDialog(parent)
        try:
            if dialog.show_dialog(initial, title):
                return dialog.color()
            return None
        finally:
            dialog.deleteLater()

    # --- QDialog

    def accept(self) -> None:
        logger.info("Color selected: %r", self._color)
        super().accept()

    def reject(self) -> None:
        logger.info("Color selection canceled")
        self._color = self._initial
        super().reject()

    # --- internals

    @QtCore.Slot(bool)
    def _close_dialog(self, ok: bool) -> None:
        if ok:
            self.accept()
        else:
            self.reject()

    def _on_state_changed(self, state: ColorState) -> None:
        self._color = state.color
        self._controls.refresh()
        self._display.update()
        self.colorChanged.emit(rgba_to_qcolor(self._color))

    def _resolve_position(self) -> None:
        owner = self.parentWidget()
        if owner is None:
            return
        owner_geo = owner.frameGeometry()
        geo = self.frameGeometry()
        x = round(owner_geo.center().x() - geo.width() / 2)
        y = round(owner_geo.center().y() - geo.height() / 2)
        self.move(x, y)
