from typing import Any, Awaitable, Callable, List

from loguru import logger

from loadwatch.domains.report import PerformanceReport

ReportHandler = Callable[[PerformanceReport], Awaitable[None]]


class ReportEventSource:
    """
    Delivers interval reports to subscribed handlers.

    Every handler runs to completion for one report, in subscription order,
    before `publish` returns, so reports are processed one at a time.
    """

    def __init__(self):
        self._handlers: List[ReportHandler] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def subscribe(self, handler: ReportHandler) -> None:
        self._handlers.append(handler)

    async def publish(self, payload: Any) -> None:
        report = PerformanceReport.from_payload(payload)
        logger.debug(
            f"Publishing report with {len(report.entries)} entries "
            f"to {len(self._handlers)} handlers"
        )
        for handler in self._handlers:
            await handler(report)
