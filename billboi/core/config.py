from __future__ import annotations
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "billboi-print"
    log_level: str = "INFO"

    nyt_api_key: str = ""
    nyt_api_base_url: str = "https://api.nytimes.com/svc"
    request_timeout_seconds: float = 30.0

    printer_backend: Literal["spool", "escpos"] = "spool"
    printer_name: str = "Star_TSP100"
    printer_cpi: int = Field(default=5, ge=1)
    print_timeout_seconds: float = 60.0

    escpos_connection: Literal["network", "usb", "file"] = "network"
    escpos_host: str = "192.168.1.100"
    escpos_port: int = 9100
    escpos_usb_vendor_id: int = 0x0519
    escpos_usb_product_id: int = 0x0003
    escpos_device: str = "/dev/usb/lp0"

    wrap_width: int = Field(default=30, ge=1)

    schedule_enabled: bool = True
    schedule_hour: int = Field(default=7, ge=0, le=23)
    schedule_minute: int = Field(default=0, ge=0, le=59)


settings = Settings()
