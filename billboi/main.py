from __future__ import annotations
import sys
from datetime import datetime

from billboi.cli.shell import Shell
from billboi.core.config import Settings, settings
from billboi.core.logging import configure_logging, get_logger
from billboi.printing.base import PrinterBackend
from billboi.printing.registry import build_printer
from billboi.services.print_service import run_print_job
from billboi.services.scheduler import DailyScheduler


def build_scheduler(printer: PrinterBackend, cfg: Settings) -> DailyScheduler | None:
    """The daily edition goes through the same job runner as the `print` command."""
    if not cfg.schedule_enabled:
        return None
    return DailyScheduler(cfg.schedule_hour, cfg.schedule_minute, lambda: run_print_job(printer, "top_stories"))


def main() -> int:
    configure_logging(settings.log_level)
    logger = get_logger()

    print(f"{settings.app_name}: Starting up...")
    print(f"Current time: {datetime.now():%B %d %Y, %I:%M:%S %p}")
    if not settings.nyt_api_key:
        logger.warning("nyt_api_key_missing")

    printer = build_printer(settings)
    logger.info("printer_ready", backend=printer.backend_name)

    scheduler = build_scheduler(printer, settings)
    if scheduler is not None:
        scheduler.start()
        print(f"Scheduled daily print job for {settings.schedule_hour}:{settings.schedule_minute:02d}")

    try:
        return Shell(printer).run()
    except KeyboardInterrupt:
        print("Stopped by user.")
        return 0
    finally:
        if scheduler is not None:
            scheduler.stop()


if __name__ == "__main__":
    sys.exit(main())
