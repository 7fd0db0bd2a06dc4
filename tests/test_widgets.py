import pytest
from PySide6 import QtCore, QtGui

from radialcolor.config import load_stylesheet
from radialcolor.core import Channel, Rgba, TupleType
from radialcolor.widgets import RadialColorDialog

CENTER = (230.0, 262.0)


@pytest.fixture
def dialog(qtbot):
    d = RadialColorDialog()
    qtbot.addWidget(d)
    d.load_color(QtGui.QColor(255, 0, 128, 128))
    return d


def world_to_screen(dialog, world):
    return QtCore.QPoint(round(world[0]), round(dialog.display.height() - world[1]))


def test_load_color_fills_spin_boxes(dialog):
    values = {c.field.name: c.value() for c in dialog.controls.controls}
    assert values == {
        "Red": 255, "Green": 0, "Blue": 128,
        "Hue": 330, "Saturation": 100, "Brightness": 100,
        "Alpha": 128,
    }
    assert dialog.color() == QtGui.QColor(255, 0, 128, 128)


def test_spin_box_edit_updates_other_model(dialog):
    dialog.controls.control("Red").spin_box.setValue(0)

    assert dialog.controls.control("Hue").value() == 240
    assert dialog.controls.control("Brightness").value() == 50
    assert dialog.synchronizer.band(TupleType.RGB, Channel.A).value == 0.0
    assert dialog.color() == QtGui.QColor(0, 0, 128, 128)
    assert dialog.synchronizer.current_color == Rgba(0, 0, 128, 128)
    assert not dialog.synchronizer.is_suppressed


def test_alpha_spin_box_moves_slider(dialog):
    dialog.controls.alpha_control().spin_box.setValue(200)
    assert dialog.synchronizer.alpha_slider.value == 200
    assert dialog.color().alpha() == 200


def test_pointer_drag_on_hue_band(qtbot, dialog):
    dialog.show()
    qtbot.waitExposed(dialog)
    display = dialog.display
    pos = world_to_screen(dialog, (CENTER[0] - 160.0, CENTER[1]))

    with qtbot.waitSignal(dialog.colorChanged, timeout=1000):
        qtbot.mousePress(display, QtCore.Qt.MouseButton.LeftButton, pos=pos)

    hue = dialog.synchronizer.band(TupleType.HSB, Channel.A)
    assert display.active_control is hue
    assert hue.value == pytest.approx(0.5)
    assert dialog.color() == QtGui.QColor(0, 255, 255, 128)
    assert dialog.controls.control("Green").value() == 255

    with qtbot.waitSignal(display.colorCommitted, timeout=1000) as blocker:
        qtbot.mouseRelease(display, QtCore.Qt.MouseButton.LeftButton, pos=pos)
    assert display.active_control is None
    assert blocker.args == [Rgba(0, 255, 255, 128)]
    assert dialog.synchronizer.current_color == Rgba(0, 255, 255, 128)


def test_press_outside_controls_grabs_nothing(dialog):
    assert not dialog.display.press_at(CENTER)
    assert dialog.display.active_control is None


def test_drag_alpha_slider(dialog):
    display = dialog.display
    assert display.press_at((40.0, 24.0))
    display.drag_to((600.0, 24.0))
    display.release()
    assert dialog.controls.alpha_control().value() == 255
    assert dialog.color().alpha() == 255


def test_cancel_restores_seed_color(dialog):
    dialog.display.press_at((CENTER[0] - 160.0, CENTER[1]))
    dialog.display.release()
    dialog.controls.cancel_button.click()
    assert dialog.color() == QtGui.QColor(255, 0, 128, 128)
    assert dialog.result() == RadialColorDialog.DialogCode.Rejected


def test_ok_keeps_chosen_color(dialog):
    dialog.display.press_at((CENTER[0] - 160.0, CENTER[1]))
    dialog.display.release()
    dialog.controls.ok_button.click()
    assert dialog.color() == QtGui.QColor(0, 255, 255, 128)
    assert dialog.result() == RadialColorDialog.DialogCode.Accepted


def test_display_paints(qtbot, dialog):
    dialog.show()
    qtbot.waitExposed(dialog)
    image = dialog.display.grab().toImage()
    assert not image.isNull()
    assert image.width() == 460


def test_display_blends_into_styled_dialog(qtbot, dialog):
    dialog.setStyleSheet(load_stylesheet())
    dialog.show()
    qtbot.waitExposed(dialog)

    image = dialog.grab().toImage()
    dpr = image.devicePixelRatio()
    background = QtGui.QColor("#2b2b2b")
    corner = dialog.display.mapTo(dialog, QtCore.QPoint(2, 2))
    assert image.pixelColor(round(corner.x() * dpr), round(corner.y() * dpr)) == background


def test_alpha_checkerboard_is_cached(qtbot, dialog):
    dialog.show()
    qtbot.waitExposed(dialog)
    display = dialog.display
    display.repaint()
    cached = display._alpha_bg
    display.repaint()
    assert display._alpha_bg is cached
    assert not cached.isNull()
