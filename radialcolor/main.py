import logging
import os
import sys

from PySide6 import QtGui, QtWidgets

from radialcolor.config import load_stylesheet
from radialcolor.widgets import RadialColorDialog


def main() -> int:
    logging.basicConfig(
        level=os.environ.get("RADIALCOLOR_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QtWidgets.QApplication(sys.argv)
    app.setStyleSheet(load_stylesheet())

    color = RadialColorDialog.get_color(QtGui.QColor(255, 0, 128, 128), title="Select Color")
    if color is not None:
        print(f">>Dialog selected color: rgba({color.red()}, {color.green()}, {color.blue()}, {color.alpha()})")
    else:
        print(">>Dialog Canceled.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
