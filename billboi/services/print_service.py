from __future__ import annotations
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from billboi.core.logging import get_logger
from billboi.fetchers.registry import ADAPTERS
from billboi.printing.base import PrintError, PrinterBackend, PrintJob

logger = get_logger()

# Manual commands and the daily timer share one printer; jobs never overlap.
_job_lock = threading.Lock()


@dataclass
class JobResult:
    ok: bool
    story_count: int = 0
    error: str = ""


def run_print_job(printer: PrinterBackend, source: str, *args: Any) -> JobResult:
    """Fetch stories from ``source`` and print them. Print failures are reported, never raised."""
    with _job_lock:
        adapter_cls = ADAPTERS.get(source)
        if not adapter_cls:
            raise ValueError(f"missing adapter for source={source}")

        logger.info("print_job_started", source=source, args=list(args))
        stories = adapter_cls().fetch(*args)
        job = PrintJob(stories=stories, generated_at=datetime.now())

        try:
            printer.print_job(job)
        except PrintError as exc:
            logger.error("print_job_failed", source=source, backend=printer.backend_name, error=str(exc))
            return JobResult(ok=False, story_count=len(stories), error=str(exc))
        except Exception as exc:  # noqa: BLE001
            logger.error("print_job_crashed", source=source, backend=printer.backend_name, error=str(exc))
            return JobResult(ok=False, story_count=len(stories), error=f"Printing failed: {exc}")

        logger.info("print_job_completed", source=source, stories=len(stories))
        return JobResult(ok=True, story_count=len(stories))


def run_text_job(printer: PrinterBackend, content: str, cpi: int | None = None) -> JobResult:
    with _job_lock:
        try:
            printer.print_text(content, cpi=cpi)
        except PrintError as exc:
            logger.error("print_text_failed", backend=printer.backend_name, error=str(exc))
            return JobResult(ok=False, error=str(exc))
        except Exception as exc:  # noqa: BLE001
            logger.error("print_text_crashed", backend=printer.backend_name, error=str(exc))
            return JobResult(ok=False, error=f"Printing failed: {exc}")
        return JobResult(ok=True)
