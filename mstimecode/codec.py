# ##############################################################################
# MODULE: CODEC
# DESCRIPTION: Chuyển đổi giữa chuỗi và Timecode.
#              parse: tìm timecode đầu tiên nằm ở bất kỳ đâu trong chuỗi.
#              format: render ngược lại HH:MM:SS[.mmm] hoặc HH:MM:SS[,mmm].
# ##############################################################################

from __future__ import annotations

import logging
import re

from mstimecode.timecode import ZERO, Timecode
from mstimecode.utils.constants import (
    COMMA_SEPARATOR,
    DOT_SEPARATOR,
    HOUR_WIDTH,
    MILLI_WIDTH,
    MINUTE_WIDTH,
    SECOND_WIDTH,
)
from mstimecode.utils.errors import MalformedTimecodeError

logger = logging.getLogger(__name__)


# Dấu (tùy chọn), giờ 00-23, phút 00-59, giây 00-59, mili giây 3 chữ số (tùy chọn,
# phân cách bằng "." hoặc ","). Không neo đầu/cuối để bắt được timecode nằm giữa chuỗi.
# Dùng [0-9] thay vì \d để không khớp chữ số Unicode.
TIMECODE_RE = re.compile(r"(-)?([01][0-9]|2[0-3]):([0-5][0-9]):([0-5][0-9])(?:[.,]([0-9]{3}))?")

_SIGN_GROUP = 1
_HOUR_GROUP = 2
_MINUTE_GROUP = 3
_SECOND_GROUP = 4
_MILLI_GROUP = 5


def _parse_number(match: re.Match[str], group: int) -> int:
    raw = match.group(group)
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError:
        # Regex chỉ bắt chữ số nên nhánh này không nên xảy ra
        logger.warning("Non-numeric timecode group %d=%r in %r; using 0", group, raw, match.string)
        return 0


# ------------------------------------------------------------------------------
# Function: parse
# Purpose: Trích Timecode từ chuỗi. Ví dụ hợp lệ:
#            "01:02:03.456", "01:02:03,456", "-01:02:03.456", "01:02:03",
#            "crouching.tiger.01:02:03.456.hidden.timecode"
#          Không tìm thấy -> MalformedTimecodeError (kèm giá trị ZERO).
# ------------------------------------------------------------------------------
def parse(text: str) -> Timecode:
    m = TIMECODE_RE.search(text)
    if m is None:
        logger.debug("No timecode found in %r", text)
        raise MalformedTimecodeError(text, ZERO)

    return Timecode.from_params(
        bool(m.group(_SIGN_GROUP)),
        _parse_number(m, _HOUR_GROUP),
        _parse_number(m, _MINUTE_GROUP),
        _parse_number(m, _SECOND_GROUP),
        _parse_number(m, _MILLI_GROUP),
    )


def parse_or_zero(text: str) -> tuple[Timecode, MalformedTimecodeError | None]:
    """Giống parse nhưng trả về (giá trị, lỗi) thay vì raise."""
    try:
        return parse(text), None
    except MalformedTimecodeError as e:
        return e.value, e


# ------------------------------------------------------------------------------
# Function: format_timecode
# Purpose: Render Timecode thành chuỗi. with_milli=True thì nối phần mili giây
#          bằng separator. Giờ có ít nhất 2 chữ số (nhiều hơn nếu > 99).
# ------------------------------------------------------------------------------
def format_timecode(t: Timecode, with_milli: bool = True, separator: str = DOT_SEPARATOR) -> str:
    tc = Timecode(t)
    hour, minute, second, milli = tc.hour_minute_second_milli()

    result = f"{hour:0{HOUR_WIDTH}d}:{minute:0{MINUTE_WIDTH}d}:{second:0{SECOND_WIDTH}d}"
    if with_milli:
        result = f"{result}{separator}{milli:0{MILLI_WIDTH}d}"

    if tc.is_negative():
        return f"-{result}"
    return result


def format_dot(t: Timecode) -> str:
    # 01:02:03.004
    return format_timecode(t, True, DOT_SEPARATOR)


def format_comma(t: Timecode) -> str:
    # 01:02:03,004
    return format_timecode(t, True, COMMA_SEPARATOR)
