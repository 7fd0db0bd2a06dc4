import logging
from typing import Optional

from PySide6 import QtCore, QtGui, QtWidgets

from radialcolor.config import DEFAULT_LAYOUT, DialogLayout
from radialcolor.core import AlphaSlider, ColorBand, ColorSynchronizer, InteractiveControl, Point, rad_to_deg
from radialcolor.widgets.utils import checkerboard, point_to_qpoint, rgba_to_qcolor

logger = logging.getLogger(__name__)

# handle glyph steps (length along the pointing axis, half-width across it)
_L_STEP = 8.0
_W_STEP = 5.0


class DisplayPanel(QtWidgets.QWidget):
    """
    Qt view/controller for the bands and the alpha slider of a ColorSynchronizer.

    Painting happens in world coordinates (y up): the widget flips its painter
    once, and pointer positions are flipped the same way before they reach the
    controls.
    """

    colorCommitted = QtCore.Signal(object)  # emits the committed core.Rgba on pointer release

    def __init__(self, synchronizer: ColorSynchronizer, layout: DialogLayout = DEFAULT_LAYOUT, parent=None):
        super().__init__(parent)
        self._sync = synchronizer
        self._layout = layout
        self._active: Optional[InteractiveControl] = None

        # hit-test order: bands as built, then the alpha slider
        self._controls: list[InteractiveControl] = [*self._sync.bands, self._sync.alpha_slider]

        # background caches
        self._bg = QtGui.QImage()
        self._bg_dpr: Optional[float] = None
        self._alpha_bg = QtGui.QImage()

        size = QtCore.QSize(layout.panel_width, layout.panel_height)
        self.setFixedSize(size)

    @property
    def active_control(self) -> Optional[InteractiveControl]:
        return self._active

    # ---------- size hints ----------
    def sizeHint(self):
        return QtCore.QSize(self._layout.panel_width, self._layout.panel_height)

    # ---------- coordinates ----------
    def screen_to_world(self, pos: QtCore.QPointF) -> Point:
        return float(pos.x()), float(self._layout.panel_height - pos.y())

    def _world_transform(self) -> QtGui.QTransform:
        t = QtGui.QTransform()
        t.translate(0, self._layout.panel_height)
        t.scale(1.0, -1.0)
        return t

    # ---------- pointer handling ----------
    def press_at(self, world: Point) -> bool:
        """Grab the first control under world, if any, and move it there."""
        for control in self._controls:
            if control.contains_point(world):
                self._active = control
                self._sync.dispatch(control.update_from_point(world))
                self.update()
                return True
        return False

    def drag_to(self, world: Point) -> None:
        if self._active is None:
            return
        self._sync.dispatch(self._active.update_from_point(world))
        self.update()

    def release(self) -> None:
        if self._active is None:
            return
        self._active = None
        committed = self._sync.commit()
        logger.debug("Committed %r", committed)
        self.update()
        self.colorCommitted.emit(committed)

    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self.press_at(self.screen_to_world(e.position()))

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        self.drag_to(self.screen_to_world(e.position()))

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() == QtCore.Qt.MouseButton.LeftButton:
            self.release()

    # ---------- background cache ----------
    def _invalidate_background(self):
        self._bg = QtGui.QImage()
        self._bg_dpr = None
        self._alpha_bg = QtGui.QImage()

    def changeEvent(self, e: QtCore.QEvent):
        if e.type() in (QtCore.QEvent.Type.PaletteChange, QtCore.QEvent.Type.StyleChange):
            self._invalidate_background()
        super().changeEvent(e)

    def _window_color(self) -> QtGui.QColor:
        # the dialog carries the stylesheet background, this widget does not
        return self.window().palette().window().color()

    def ensure_bg_current(self):
        dpr = self.devicePixelRatioF()
        if self._bg.isNull() or self._alpha_bg.isNull() or self._bg_dpr != dpr:
            self._render_background()

    def _render_background(self):
        """
        Checkerboard visible only through the preview disc. Everything else
        stays transparent, so the parent's background shows around the wheel.
        """
        dpr = self.devicePixelRatioF()
        lay = self._layout
        w = max(1, int(lay.panel_width * dpr))
        h = max(1, int(lay.panel_height * dpr))

        img = QtGui.QImage(w, h, QtGui.QImage.Format.Format_ARGB32_Premultiplied)
        img.setDevicePixelRatio(dpr)
        img.fill(0)

        cx, cy = lay.center
        r = lay.preview_radius
        disc = QtGui.QPainterPath()
        disc.addEllipse(QtCore.QPointF(cx, lay.panel_height - cy), r, r)

        p = QtGui.QPainter(img)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        p.setClipPath(disc)
        p.drawImage(QtCore.QPointF(0, 0), checkerboard(lay.panel_width, lay.panel_height, lay.checker_size))
        p.end()
        self._bg = img
        self._bg_dpr = dpr

        b = self._sync.alpha_slider.bounds
        self._alpha_bg = checkerboard(int(round(b.width)), int(round(b.height)), lay.alpha_checker_size)

    # ---------- painting ----------
    def paintEvent(self, event):
        self.ensure_bg_current()
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.drawImage(0, 0, self._bg)
        painter.setTransform(self._world_transform())

        bands = self._sync.bands
        for band in bands:
            self._draw_band(painter, band)
        self._draw_alpha_slider(painter, self._sync.alpha_slider)
        self._draw_preview(painter)
        self._draw_outlines(painter, bands)
        for band in bands:
            self._draw_band_handle(painter, band)
        painter.end()

    def _draw_band(self, painter: QtGui.QPainter, band: ColorBand):
        pen = QtGui.QPen()
        pen.setWidthF(2.0)
        pen.setCapStyle(QtCore.Qt.PenCapStyle.FlatCap)
        for seg in band.segments(self._layout.segment_step):
            pen.setColor(rgba_to_qcolor(seg.color))
            painter.setPen(pen)
            painter.drawLine(point_to_qpoint(seg.inner), point_to_qpoint(seg.outer))

    def _draw_alpha_slider(self, painter: QtGui.QPainter, slider: AlphaSlider):
        b = slider.bounds
        rect = QtCore.QRectF(b.x, b.y, b.width, b.height)
        painter.drawImage(rect, self._alpha_bg)

        start, end = slider.gradient
        grad = QtGui.QLinearGradient(b.min_x, b.center_y, b.max_x, b.center_y)
        grad.setColorAt(0.0, rgba_to_qcolor(start))
        grad.setColorAt(1.0, rgba_to_qcolor(end))
        painter.fillRect(rect, grad)

        x = b.min_x + slider.handle_offset
        y = b.center_y
        glyph = QtGui.QPolygonF([
            QtCore.QPointF(x, y),
            QtCore.QPointF(x + _W_STEP, y + _L_STEP),
            QtCore.QPointF(x + _W_STEP, y + 2 * _L_STEP),
            QtCore.QPointF(x - _W_STEP, y + 2 * _L_STEP),
            QtCore.QPointF(x - _W_STEP, y + _L_STEP),
        ])
        self._draw_glyph(painter, glyph)

    def _draw_preview(self, painter: QtGui.QPainter):
        cx, cy = self._layout.center
        r = self._layout.preview_radius
        rect = QtCore.QRectF(cx - r, cy - r, 2 * r, 2 * r)
        painter.setPen(QtCore.Qt.PenStyle.NoPen)

        # NE/SW: live color, NW/SE: committed color
        painter.setBrush(rgba_to_qcolor(self._sync.dynamic_color))
        painter.drawPie(rect, 0 * 16, 90 * 16)
        painter.drawPie(rect, 180 * 16, 90 * 16)
        painter.setBrush(rgba_to_qcolor(self._sync.current_color))
        painter.drawPie(rect, 90 * 16, 90 * 16)
        painter.drawPie(rect, 270 * 16, 90 * 16)

    def _draw_outlines(self, painter: QtGui.QPainter, bands: list[ColorBand]):
        pen = QtGui.QPen(self._window_color(), 2.0)
        painter.setPen(pen)
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        center = point_to_qpoint(self._layout.center)
        painter.drawEllipse(center, self._layout.preview_radius - 1, self._layout.preview_radius - 1)

        # the RGB bands share one ring
        seen: set[tuple[float, float]] = set()
        for band in bands:
            key = (band.inner_radius, band.outer_radius)
            if key in seen:
                continue
            seen.add(key)
            painter.drawEllipse(center, band.inner_radius - 1, band.inner_radius - 1)
            painter.drawEllipse(center, band.outer_radius + 1, band.outer_radius + 1)

    def _draw_band_handle(self, painter: QtGui.QPainter, band: ColorBand):
        # laid out along +X at the band radius, then rotated to the handle angle
        x = band.radius
        glyph = QtGui.QPolygonF([
            QtCore.QPointF(x, 0),
            QtCore.QPointF(x + _L_STEP, -_W_STEP),
            QtCore.QPointF(x + 2 * _L_STEP, -_W_STEP),
            QtCore.QPointF(x + 2 * _L_STEP, _W_STEP),
            QtCore.QPointF(x + _L_STEP, _W_STEP),
        ])
        painter.save()
        painter.translate(point_to_qpoint(band.center))
        painter.rotate(rad_to_deg(band.handle_angle))
        self._draw_glyph(painter, glyph)
        painter.restore()

    @staticmethod
    def _draw_glyph(painter: QtGui.QPainter, glyph: QtGui.QPolygonF):
        painter.setBrush(QtGui.QColor(255, 255, 255))
        painter.setPen(QtGui.QPen(QtGui.QColor(0, 0, 0), 1.0))
        painter.drawPolygon(glyph)
