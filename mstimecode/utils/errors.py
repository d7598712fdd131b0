from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mstimecode.timecode import Timecode


class TimecodeError(Exception):
    pass


# ------------------------------------------------------------------------------
# Class: MalformedTimecodeError
# Purpose: Lỗi duy nhất của bộ parse: không tìm thấy timecode nào trong chuỗi.
#          Giữ lại chuỗi gốc để chẩn đoán, kèm giá trị ZERO làm kết quả mặc định.
#          args = (text, value) để copy/pickle dựng lại được lỗi.
# ------------------------------------------------------------------------------
class MalformedTimecodeError(TimecodeError, ValueError):
    def __init__(self, text: str, value: Timecode) -> None:
        super().__init__(text, value)
        self.text = text
        self.value = value

    def __str__(self) -> str:
        return f"not a timecode: {self.text!r}"
