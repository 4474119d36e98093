"""On-screen UI drawn over the animation."""

from ascii_splash.ui.help import HelpOverlay
from ascii_splash.ui.panel import OverlayPanel
from ascii_splash.ui.status_bar import StatusBar, StatusState
from ascii_splash.ui.toast import ToastKind, ToastManager

__all__ = ["HelpOverlay", "OverlayPanel", "StatusBar", "StatusState", "ToastKind", "ToastManager"]
