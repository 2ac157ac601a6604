from __future__ import annotations
from billboi.printing.base import PrintError, PrinterBackend, PrintJob
from billboi.printing.escpos_driver import EscposPrinterBackend
from billboi.printing.spool import SpoolPrinterBackend

__all__ = ["PrintError", "PrinterBackend", "PrintJob", "EscposPrinterBackend", "SpoolPrinterBackend"]
