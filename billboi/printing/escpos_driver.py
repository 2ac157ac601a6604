from __future__ import annotations
from datetime import datetime
from typing import Callable

from escpos.escpos import Escpos
from escpos.printer import Dummy

from billboi.core.logging import get_logger
from billboi.fetchers.base import ATTRIBUTION, MAX_STORIES, Story
from billboi.printing.base import PrintError, PrinterBackend, PrintJob
from billboi.printing.formatter import format_date, format_time, sanitize
from billboi.printing.masthead import TITLE

logger = get_logger()

LINE_WIDTH = 48


class EscposPrinterBackend(PrinterBackend):
    """Builds the whole job as one ESC/POS command buffer, then writes it to the device in a single flush."""

    backend_name = "escpos"

    def __init__(self, device_factory: Callable[[], Escpos], line_width: int = LINE_WIDTH):
        self.device_factory = device_factory
        self.line_width = line_width

    def print_job(self, job: PrintJob) -> None:
        buf = Dummy()
        stories = job.stories[:MAX_STORIES]
        self._masthead(buf, job.generated_at)
        for idx, story in enumerate(stories):
            self._story(buf, story, last=idx == len(stories) - 1)
        self._footer(buf, job.generated_at)
        buf.cut()
        self._flush(buf.output)

    def print_text(self, content: str, cpi: int | None = None) -> None:
        # CPI is a spooler option; the driver always prints in font A.
        buf = Dummy()
        buf.set(align="left", bold=False, normal_textsize=True)
        buf.text(content)
        buf.cut()
        self._flush(buf.output)

    def _rule(self, buf: Dummy) -> None:
        buf.textln("-" * self.line_width)

    def _masthead(self, buf: Dummy, now: datetime) -> None:
        buf.set(align="center", bold=True, normal_textsize=True)
        buf.ln()
        buf.textln(TITLE)
        buf.set(align="center", bold=False, normal_textsize=True)
        buf.textln(format_date(now))
        buf.ln()
        self._rule(buf)
        buf.ln()

    def _story(self, buf: Dummy, story: Story, last: bool) -> None:
        buf.set(align="left", bold=False, normal_textsize=True)
        buf.textln(story.section.upper())
        buf.ln()

        buf.set(align="left", bold=True, double_height=True)
        buf.textln(sanitize(story.title))
        buf.set(align="left", bold=False, normal_textsize=True)
        buf.ln()

        buf.textln(sanitize(story.abstract))
        buf.ln()

        if story.byline:
            buf.set(align="left", invert=True)
            buf.textln(sanitize(story.byline))
            buf.set(align="left", invert=False)

        buf.ln()
        buf.textln(f"Read more: {story.url}")
        buf.ln()
        if not last:
            self._rule(buf)
            buf.ln()

    def _footer(self, buf: Dummy, now: datetime) -> None:
        buf.set(align="center", bold=False, normal_textsize=True)
        buf.ln()
        buf.textln(f"Printed by {ATTRIBUTION}")
        buf.textln(format_time(now))
        buf.ln(3)

    def _flush(self, data: bytes) -> None:
        try:
            device = self.device_factory()
        except Exception as exc:  # noqa: BLE001
            raise PrintError(f"Printer not connected: {exc}") from exc
        try:
            # Dummy.output is already encoded ESC/POS; public text() would re-encode it.
            device._raw(data)
        except Exception as exc:  # noqa: BLE001
            raise PrintError(f"Printing failed: {exc}") from exc
        finally:
            device.close()
        logger.info("print_job_sent", backend=self.backend_name, size=len(data))
