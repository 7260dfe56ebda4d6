from collections.abc import Callable

from medihelp.logging.logger import Log

ReportListener = Callable[[str], None]


class ReportStateHolder:
    """Single owner of the confirmed report text.

    `confirm` is the only writer. Listeners are called synchronously, in
    subscription order, with the new text.
    """

    def __init__(self) -> None:
        self._confirmed: str | None = None
        self._listeners: list[ReportListener] = []

    @property
    def confirmed(self) -> str | None:
        return self._confirmed

    @property
    def report_data(self) -> str:
        """Text sent as chat context; empty until something is confirmed."""
        return self._confirmed or ""

    def subscribe(self, listener: ReportListener) -> None:
        self._listeners.append(listener)

    def confirm(self, text: str) -> None:
        self._confirmed = text
        Log.info(f"Report confirmed ({len(text)} chars)")
        for listener in self._listeners:
            listener(text)
