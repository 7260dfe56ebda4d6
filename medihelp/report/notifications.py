from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    """A toast-style message for the user."""

    description: str
    variant: str = "default"  # "default" | "destructive"


class BaseNotifier(ABC):
    """Contract for surfaces that display notifications."""

    @abstractmethod
    def notify(self, notification: Notification) -> None:
        """Show a notification to the user."""


class CollectingNotifier(BaseNotifier):
    """Keeps notifications in memory for front ends that render them later."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    def drain(self) -> list[Notification]:
        pending, self.notifications = self.notifications, []
        return pending
