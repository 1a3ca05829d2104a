"""
Non-modal warning popup presented in the bottom-right corner of the screen.
"""

from __future__ import annotations

from PySide6.QtCore import QPoint, QSize, Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QApplication,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QSizePolicy,
    QStyle,
    QToolButton,
    QVBoxLayout,
    QWidget,
)


class IdleWarningPopup(QWidget):
    dismissed = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        flags = Qt.WindowType.Tool | Qt.WindowType.FramelessWindowHint | Qt.WindowType.WindowStaysOnTopHint
        super().__init__(parent)
        self.setWindowFlags(flags)
        self.setObjectName("IdleWarningPopup")
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating, True)
        self.setWindowOpacity(0.92)

        self._container = QWidget(self)
        self._container.setObjectName("PopupCard")
        shadow = QGraphicsDropShadowEffect(self._container)
        shadow.setBlurRadius(24)
        shadow.setColor(QColor(0, 0, 0, 140))
        shadow.setOffset(0, 10)
        self._container.setGraphicsEffect(shadow)

        icon_label = QLabel()
        icon_label.setFixedSize(48, 48)
        icon_label.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        icon = self.style().standardIcon(QStyle.StandardPixmap.SP_MessageBoxWarning)
        icon_label.setPixmap(icon.pixmap(48, 48))

        self._title_label = QLabel()
        self._title_label.setObjectName("NotificationTitle")
        self._title_label.setStyleSheet("font-weight: bold; font-size: 14px;")

        self._message_label = QLabel()
        self._message_label.setWordWrap(True)
        self._message_label.setObjectName("NotificationMessage")
        self._message_label.setMaximumWidth(360)

        self._dismiss_button = QToolButton()
        self._dismiss_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._dismiss_button.setToolTip("Dismiss")
        self._dismiss_button.setIconSize(QSize(22, 22))
        self._dismiss_button.setFixedSize(36, 36)
        self._dismiss_button.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_DialogCloseButton))

        actions_layout = QHBoxLayout()
        actions_layout.setContentsMargins(0, 6, 0, 0)
        actions_layout.addStretch()
        actions_layout.addWidget(self._dismiss_button)

        text_layout = QVBoxLayout()
        text_layout.setSpacing(4)
        text_layout.addWidget(self._title_label)
        text_layout.addWidget(self._message_label)
        text_layout.addLayout(actions_layout)

        base_layout = QHBoxLayout(self)
        base_layout.setContentsMargins(0, 0, 0, 0)
        base_layout.addWidget(self._container)

        layout = QHBoxLayout(self._container)
        layout.addWidget(icon_label)
        layout.addLayout(text_layout)
        layout.setContentsMargins(12, 10, 12, 12)
        layout.setSpacing(10)
        self.setMinimumWidth(340)
        self.setMaximumWidth(460)

        self.setStyleSheet(
            """
            QWidget#PopupCard {
                background-color: rgba(40, 24, 20, 0.85);
                color: white;
                border-radius: 12px;
                border: 1px solid rgba(255, 180, 120, 0.25);
            }
            QWidget#PopupCard QLabel#NotificationTitle {
                color: white;
            }
            QWidget#PopupCard QLabel#NotificationMessage {
                color: rgba(255, 255, 255, 0.85);
                margin-top: 2px;
            }
            """
        )

        self._dismiss_button.clicked.connect(self._on_dismiss)  # type: ignore[arg-type]

    @property
    def message(self) -> str:
        return self._message_label.text()

    def show_message(self, title: str, message: str) -> None:
        self._title_label.setText(title)
        self._message_label.setText(message)
        self.adjustSize()
        self._position_bottom_right()
        self.show()

    def _on_dismiss(self) -> None:
        self.hide()
        self.dismissed.emit()

    def _position_bottom_right(self) -> None:
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        geometry = screen.availableGeometry()
        x = geometry.right() - self.width() - 20
        y = geometry.bottom() - self.height() - 20
        self.move(QPoint(x, y))
