from PySide6 import QtCore, QtGui

from radialcolor.core import Point, Rgba


def point_to_qpoint(p: Point) -> QtCore.QPointF:
    return QtCore.QPointF(p[0], p[1])


def rgba_to_qcolor(color: Rgba) -> QtGui.QColor:
    return color.to_QColor()


def to_rgba(color: QtGui.QColor | Rgba) -> Rgba:
    if isinstance(color, Rgba):
        return color
    if isinstance(color, QtGui.QColor):
        return Rgba.from_qcolor(color)
    raise TypeError("color must be a QColor or an Rgba")


def checkerboard(width: int, height: int, grid: int) -> QtGui.QImage:
    """Black image with white cells on alternating squares."""
    img = QtGui.QImage(max(1, width), max(1, height), QtGui.QImage.Format.Format_ARGB32_Premultiplied)
    img.fill(QtGui.QColor(0, 0, 0))
    p = QtGui.QPainter(img)
    white = QtGui.QColor(255, 255, 255)
    for i in range(height // grid):
        for j in range(width // grid):
            if (i + j) % 2 == 1:
                p.fillRect(j * grid, i * grid, grid, grid, white)
    p.end()
    return img
