# ##############################################################################
# MODULE: CONFIG
# DESCRIPTION: Quản lý cấu hình từ biến môi trường (Environment Variables).
#              Sử dụng python-dotenv để load file .env.
# ##############################################################################

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from mstimecode.utils.constants import DOT_SEPARATOR, VALID_SEPARATORS


# ------------------------------------------------------------------------------
# Helper: _get_bool
# Purpose: Chuyển đổi giá trị string từ env thành boolean an toàn.
# ------------------------------------------------------------------------------
def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default

    text = raw.strip().lower()
    if text in {"1", "true", "yes", "y", "on"}:
        return True
    if text in {"0", "false", "no", "n", "off"}:
        return False

    raise ValueError(f"Giá trị boolean không hợp lệ cho {name}: {raw!r}")


# ------------------------------------------------------------------------------
# Helper: _get_int
# Purpose: Chuyển đổi giá trị string từ env thành int, có giá trị mặc định.
# ------------------------------------------------------------------------------
def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _get_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip() or default


# ------------------------------------------------------------------------------
# Class: Config
# Purpose: Dataclass chứa toàn bộ thông tin cấu hình (immutable).
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Config:
    # Cấu hình định dạng đầu ra của CLI
    separator: str
    with_milli: bool

    # Cấu hình Logging
    log_level: str
    log_dir: str
    log_file: str
    log_to_file: bool
    log_max_bytes: int
    log_backup_count: int


# ------------------------------------------------------------------------------
# Function: load_config
# Purpose: Đọc file .env và validate các giá trị.
#          Trả về đối tượng Config hoàn chỉnh.
# ------------------------------------------------------------------------------
def load_config() -> Config:
    load_dotenv(override=False)

    # 1. Định dạng timecode
    # Không strip: "," và "." là giá trị hợp lệ duy nhất
    separator = os.getenv("TIMECODE_SEPARATOR") or DOT_SEPARATOR
    if separator not in VALID_SEPARATORS:
        raise ValueError(f"TIMECODE_SEPARATOR must be '.' or ',', got {separator!r}")

    with_milli = _get_bool("TIMECODE_WITH_MILLI", True)

    # 2. Logging Config
    log_level = _get_str("LOG_LEVEL", "WARNING")
    log_dir = _get_str("LOG_DIR", "logs")
    log_file = _get_str("LOG_FILE", "mstimecode.log")
    log_to_file = _get_bool("LOG_TO_FILE", False)

    log_max_bytes = _get_int("LOG_MAX_BYTES", 1024 * 1024)
    if log_max_bytes <= 0:
        raise ValueError("LOG_MAX_BYTES must be > 0")

    log_backup_count = _get_int("LOG_BACKUP_COUNT", 3)
    if log_backup_count < 0:
        raise ValueError("LOG_BACKUP_COUNT must be >= 0")

    return Config(
        separator=separator,
        with_milli=with_milli,
        log_level=log_level,
        log_dir=log_dir,
        log_file=log_file,
        log_to_file=log_to_file,
        log_max_bytes=log_max_bytes,
        log_backup_count=log_backup_count,
    )
