from PySide6 import QtCore, QtWidgets

from radialcolor.core import ColorSynchronizer, NumericField, TupleType


class NumericControl(QtWidgets.QWidget):
    """
    Label + spin box bound to one NumericField.
    Edits are dispatched to the synchronizer; refresh() pulls the field's
    value back into the spin box.
    """

    def __init__(self, field: NumericField, synchronizer: ColorSynchronizer, parent=None):
        super().__init__(parent)
        self._field = field
        self._sync = synchronizer

        self._label = QtWidgets.QLabel(field.name)
        self._spin = QtWidgets.QSpinBox()
        self._spin.setRange(field.minimum, field.maximum)
        self._spin.setFixedWidth(80)
        self._spin.setValue(field.value)

        row = QtWidgets.QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)
        row.addWidget(self._label)
        row.addStretch(1)
        row.addWidget(self._spin)

        self._spin.valueChanged.connect(self._on_value_changed)

    @property
    def field(self) -> NumericField:
        return self._field

    @property
    def spin_box(self) -> QtWidgets.QSpinBox:
        return self._spin

    def value(self) -> int:
        return self._spin.value()

    def refresh(self) -> None:
        if self._spin.value() != self._field.value:
            self._spin.setValue(self._field.value)

    @QtCore.Slot(int)
    def _on_value_changed(self, value: int) -> None:
        # a refresh pushed from the synchronizer, not a user edit
        if self._sync.is_suppressed:
            return
        self._sync.dispatch(self._field.edit(value))


class ControlPanel(QtWidgets.QWidget):
    """
    The seven numeric controls (RGB, HSB, alpha) and the Ok / Cancel buttons.
    """

    closeRequested = QtCore.Signal(bool)  # True for Ok, False for Cancel

    def __init__(self, synchronizer: ColorSynchronizer, parent=None):
        super().__init__(parent)
        self._sync = synchronizer
        self._controls: list[NumericControl] = []

        col = QtWidgets.QVBoxLayout(self)
        col.setContentsMargins(10, 10, 10, 10)

        previous_type = None
        for field in synchronizer.fields:
            if previous_type is not None and field.tuple_type != previous_type:
                col.addSpacing(20)
            previous_type = field.tuple_type
            control = NumericControl(field, synchronizer, self)
            self._controls.append(control)
            col.addWidget(control)

        col.addStretch(1)
        self.ok_button = QtWidgets.QPushButton("Ok")
        self.cancel_button = QtWidgets.QPushButton("Cancel")
        col.addWidget(self.ok_button)
        col.addWidget(self.cancel_button)

        self.setFixedWidth(180)

        self.ok_button.clicked.connect(lambda: self.closeRequested.emit(True))
        self.cancel_button.clicked.connect(lambda: self.closeRequested.emit(False))

    @property
    def controls(self) -> list[NumericControl]:
        return list(self._controls)

    def control(self, name: str) -> NumericControl:
        for c in self._controls:
            if c.field.name == name:
                return c
        raise KeyError(name)

    def refresh(self) -> None:
        """Mirror every field into its spin box without feeding the edits back."""
        with self._sync.suppressed():
            for c in self._controls:
                c.refresh()

    def alpha_control(self) -> NumericControl:
        for c in self._controls:
            if c.field.tuple_type is TupleType.ALPHA:
                return c
        raise KeyError("Alpha")
