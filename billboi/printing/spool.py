from __future__ import annotations
import os
import subprocess
import tempfile

from billboi.core.logging import get_logger
from billboi.printing.base import PrintError, PrinterBackend, PrintJob
from billboi.printing.formatter import WRAP_WIDTH, render_print_content

logger = get_logger()


class SpoolPrinterBackend(PrinterBackend):
    """Renders the job as plain text and hands a temp file to the ``lp`` spooler."""

    backend_name = "spool"

    def __init__(self, printer_name: str, cpi: int = 5, timeout: float = 60.0, wrap_width: int = WRAP_WIDTH):
        self.printer_name = printer_name
        self.cpi = cpi
        self.timeout = timeout
        self.wrap_width = wrap_width

    def print_job(self, job: PrintJob) -> None:
        content = render_print_content(job.stories, job.generated_at, self.wrap_width)
        self.print_text(content)

    def print_text(self, content: str, cpi: int | None = None) -> None:
        path = self._write_temp(content)
        try:
            self._spool(path, cpi or self.cpi)
        finally:
            try:
                os.remove(path)
            except FileNotFoundError:
                pass

    def _write_temp(self, content: str) -> str:
        try:
            fd, path = tempfile.mkstemp(prefix="billboi-print-", suffix=".txt")
        except OSError as exc:
            raise PrintError(f"Printing failed: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(content)
        except OSError as exc:
            os.remove(path)
            raise PrintError(f"Printing failed: {exc}") from exc
        return path

    def _spool(self, path: str, cpi: int) -> None:
        cmd = ["lp", "-d", self.printer_name, "-o", f"cpi={cpi}", path]
        try:
            subprocess.run(cmd, check=True, capture_output=True, text=True, timeout=self.timeout)
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or "").strip()
            logger.error("lp_failed", printer=self.printer_name, returncode=exc.returncode, stderr=stderr)
            raise PrintError(f"Printing failed: {stderr or f'lp exited with status {exc.returncode}'}") from exc
        except subprocess.TimeoutExpired as exc:
            raise PrintError(f"Printing failed: lp did not finish within {self.timeout:g}s") from exc
        except OSError as exc:
            raise PrintError(f"Printing failed: {exc}") from exc
        logger.info("print_job_spooled", printer=self.printer_name, cpi=cpi)
