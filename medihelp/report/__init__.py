from medihelp.report.notifications import BaseNotifier, CollectingNotifier, Notification
from medihelp.report.panel import PanelStatus, ReportPanel
from medihelp.report.state_holder import ReportStateHolder

__all__ = [
    "BaseNotifier",
    "CollectingNotifier",
    "Notification",
    "PanelStatus",
    "ReportPanel",
    "ReportStateHolder",
]
