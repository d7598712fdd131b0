# ##############################################################################
# MODULE: TIMECODE
# DESCRIPTION: Kiểu giá trị Timecode: số mili giây có dấu, bất biến.
#              Cung cấp phép toán, tách/ghép thành phần giờ/phút/giây/mili giây.
#              Phần chuyển đổi chuỗi nằm ở mstimecode.codec.
# ##############################################################################

from __future__ import annotations

from mstimecode.utils.constants import (
    DOT_SEPARATOR,
    MINUTES_PER_HOUR,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    SECONDS_PER_MINUTE,
)


def _divide_and_round(a: int, b: int) -> int:
    # Chia nguyên, làm tròn về số chẵn gần nhất (giống datetime.timedelta)
    q, r = divmod(a, b)
    r *= 2
    greater_than_half = r > b if b > 0 else r < b
    if greater_than_half or (r == b and q % 2 == 1):
        q += 1
    return q


# ------------------------------------------------------------------------------
# Class: Timecode
# Purpose: Thời lượng/vị trí trong media (phụ đề, audio...) với độ phân giải
#          mili giây. Giá trị âm nghĩa là trước mốc 0.
#          Kế thừa int nên so sánh/hash giống hệt số nguyên; các phép toán
#          được override để kết quả vẫn là Timecode.
# ------------------------------------------------------------------------------
class Timecode(int):
    __slots__ = ()

    def __new__(cls, milliseconds: int = 0) -> Timecode:
        return super().__new__(cls, milliseconds)

    # --------------------------------------------------------------------------
    # Method: from_params
    # Purpose: Ghép Timecode từ dấu + 4 thành phần không âm.
    #          Không kiểm tra phạm vi: minute=70 sẽ cộng dồn sang giờ.
    # --------------------------------------------------------------------------
    @classmethod
    def from_params(
        cls,
        negative: bool,
        hour: int,
        minute: int,
        second: int,
        milli: int,
    ) -> Timecode:
        total = milli
        total += second * MS_PER_SECOND
        total += minute * MS_PER_MINUTE
        total += hour * MS_PER_HOUR
        if negative:
            total = -total
        return cls(total)

    @classmethod
    def parse(cls, text: str) -> Timecode:
        from mstimecode.codec import parse

        return parse(text)

    # --------------------------------------------------------------------------
    # Method: hour_minute_second_milli
    # Purpose: Tách giá trị tuyệt đối thành (giờ, phút, giây, mili giây).
    #          Dấu không nằm trong kết quả, dùng is_negative() nếu cần.
    # --------------------------------------------------------------------------
    def hour_minute_second_milli(self) -> tuple[int, int, int, int]:
        rest = abs(int(self))
        rest, milli = divmod(rest, MS_PER_SECOND)
        rest, second = divmod(rest, SECONDS_PER_MINUTE)
        hour, minute = divmod(rest, MINUTES_PER_HOUR)
        return hour, minute, second, milli

    def is_negative(self) -> bool:
        return int(self) < 0

    def total_seconds(self) -> float:
        return int(self) / MS_PER_SECOND

    # --------------------------------------------------------------------------
    # Method: with_hours / with_minutes / with_seconds / with_milli
    # Purpose: Thay một thành phần rồi ghép lại, giữ nguyên dấu.
    #          Trả về Timecode mới; giá trị cũ không đổi.
    # --------------------------------------------------------------------------
    def with_hours(self, hour: int) -> Timecode:
        _, minute, second, milli = self.hour_minute_second_milli()
        return self.from_params(self.is_negative(), hour, minute, second, milli)

    def with_minutes(self, minute: int) -> Timecode:
        hour, _, second, milli = self.hour_minute_second_milli()
        return self.from_params(self.is_negative(), hour, minute, second, milli)

    def with_seconds(self, second: int) -> Timecode:
        hour, minute, _, milli = self.hour_minute_second_milli()
        return self.from_params(self.is_negative(), hour, minute, second, milli)

    def with_milli(self, milli: int) -> Timecode:
        hour, minute, second, _ = self.hour_minute_second_milli()
        return self.from_params(self.is_negative(), hour, minute, second, milli)

    # --------------------------------------------------------------------------
    # Format
    # --------------------------------------------------------------------------
    def format(self, with_milli: bool = True, separator: str = DOT_SEPARATOR) -> str:
        from mstimecode.codec import format_timecode

        return format_timecode(self, with_milli, separator)

    def format_dot(self) -> str:
        from mstimecode.codec import format_dot

        return format_dot(self)

    def format_comma(self) -> str:
        from mstimecode.codec import format_comma

        return format_comma(self)

    def __str__(self) -> str:
        # Chỉ dùng cho log/hiển thị, KHÔNG đảm bảo ổn định định dạng.
        # Cần định dạng cố định thì gọi format_dot()/format_comma().
        return self.format_dot()

    def __repr__(self) -> str:
        return f"Timecode({int(self)})"

    # --------------------------------------------------------------------------
    # Arithmetic: cộng/trừ và nhân/chia với số vô hướng trả về Timecode
    # --------------------------------------------------------------------------
    def __add__(self, other: object) -> Timecode:
        if not isinstance(other, int):
            return NotImplemented
        return Timecode(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other: object) -> Timecode:
        if not isinstance(other, int):
            return NotImplemented
        return Timecode(int(self) - int(other))

    def __rsub__(self, other: object) -> Timecode:
        if not isinstance(other, int):
            return NotImplemented
        return Timecode(int(other) - int(self))

    def __mul__(self, other: object) -> Timecode | int:
        # Chỉ nhân với số vô hướng mới ra Timecode
        if isinstance(other, Timecode):
            return int(self) * int(other)
        if isinstance(other, int):
            return Timecode(int(self) * int(other))
        if isinstance(other, float):
            return Timecode(round(int(self) * other))
        return NotImplemented

    __rmul__ = __mul__

    def __floordiv__(self, other: object) -> Timecode | int:
        if isinstance(other, Timecode):
            return int(self) // int(other)
        if isinstance(other, int):
            return Timecode(int(self) // other)
        return NotImplemented

    def __truediv__(self, other: object) -> Timecode | float:
        if isinstance(other, Timecode):
            return int(self) / int(other)
        if isinstance(other, int):
            return Timecode(_divide_and_round(int(self), other))
        if isinstance(other, float):
            return Timecode(round(int(self) / other))
        return NotImplemented

    def __mod__(self, other: object) -> Timecode:
        if not isinstance(other, int):
            return NotImplemented
        return Timecode(int(self) % int(other))

    def __neg__(self) -> Timecode:
        return Timecode(-int(self))

    def __pos__(self) -> Timecode:
        return self

    def __abs__(self) -> Timecode:
        return Timecode(abs(int(self)))


# Các đơn vị cơ bản
ZERO = Timecode(0)
MILLISECOND = Timecode(1)
SECOND = MILLISECOND * MS_PER_SECOND
MINUTE = SECOND * SECONDS_PER_MINUTE
HOUR = MINUTE * MINUTES_PER_HOUR

from_params = Timecode.from_params
