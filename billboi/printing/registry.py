from __future__ import annotations
from functools import partial

from escpos.printer import File, Network, Usb

from billboi.core.config import Settings
from billboi.printing.base import PrinterBackend
from billboi.printing.escpos_driver import EscposPrinterBackend
from billboi.printing.spool import SpoolPrinterBackend


def escpos_device_factory(cfg: Settings):
    if cfg.escpos_connection == "usb":
        return partial(Usb, cfg.escpos_usb_vendor_id, cfg.escpos_usb_product_id)
    if cfg.escpos_connection == "file":
        return partial(File, cfg.escpos_device)
    return partial(Network, cfg.escpos_host, port=cfg.escpos_port, timeout=cfg.print_timeout_seconds)


def build_printer(cfg: Settings) -> PrinterBackend:
    if cfg.printer_backend == "escpos":
        return EscposPrinterBackend(escpos_device_factory(cfg))
    return SpoolPrinterBackend(
        cfg.printer_name,
        cpi=cfg.printer_cpi,
        timeout=cfg.print_timeout_seconds,
        wrap_width=cfg.wrap_width,
    )
