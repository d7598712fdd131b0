# ##############################################################################
# MODULE: LOGGING
# DESCRIPTION: Thiết lập logging cho CLI: console (stderr) và file xoay vòng (tùy chọn).
#              Các module thư viện chỉ dùng logging.getLogger(__name__).
# ##############################################################################

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import os

from mstimecode.config import Config


def setup_logging(config: Config) -> None:
    level = getattr(logging, config.log_level.upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root.handlers.clear()

    # Console luôn ghi ra stderr để không lẫn với kết quả in ra stdout
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(fmt)
    root.addHandler(console_handler)

    if config.log_to_file:
        os.makedirs(config.log_dir, exist_ok=True)
        log_path = os.path.join(config.log_dir, config.log_file)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.log_max_bytes,
            backupCount=config.log_backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)
