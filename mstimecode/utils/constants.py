# ##############################################################################
# MODULE: CONSTANTS
# DESCRIPTION: Tập trung các hằng số dùng khi chuyển đổi timecode.
#              Tránh hardcode hệ số quy đổi và ký tự phân cách ở nhiều nơi.
# ##############################################################################

from __future__ import annotations


# ==============================================================================
# SCALE CONSTANTS
# ==============================================================================

MS_PER_SECOND = 1000              # Số mili giây trong 1 giây
SECONDS_PER_MINUTE = 60           # Số giây trong 1 phút
MINUTES_PER_HOUR = 60             # Số phút trong 1 giờ

MS_PER_MINUTE = MS_PER_SECOND * SECONDS_PER_MINUTE    # 60_000
MS_PER_HOUR = MS_PER_MINUTE * MINUTES_PER_HOUR        # 3_600_000


# ==============================================================================
# SEPARATOR CONSTANTS
# ==============================================================================

DOT_SEPARATOR = "."               # 01:02:03.004 (WebVTT, ffmpeg)
COMMA_SEPARATOR = ","             # 01:02:03,004 (SRT)
VALID_SEPARATORS = frozenset({DOT_SEPARATOR, COMMA_SEPARATOR})


# ==============================================================================
# FIELD WIDTH CONSTANTS
# ==============================================================================

# Độ rộng tối thiểu khi zero-pad; giờ có thể dài hơn 2 chữ số
HOUR_WIDTH = 2
MINUTE_WIDTH = 2
SECOND_WIDTH = 2
MILLI_WIDTH = 3
