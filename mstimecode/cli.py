# ##############################################################################
# MODULE: CLI
# DESCRIPTION: Giao diện dòng lệnh mỏng: parse timecode trong các chuỗi đầu vào,
#              dịch thời gian (tùy chọn) rồi in lại theo định dạng đã cấu hình.
# ##############################################################################

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from mstimecode.codec import format_timecode, parse
from mstimecode.config import Config, load_config
from mstimecode.timecode import ZERO, Timecode
from mstimecode.utils.constants import COMMA_SEPARATOR, DOT_SEPARATOR
from mstimecode.utils.errors import MalformedTimecodeError
from mstimecode.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mstimecode",
        description="Extract HH:MM:SS[.mmm] timecodes from text and print them normalized.",
    )
    sep = parser.add_mutually_exclusive_group()
    sep.add_argument("--dot", dest="separator", action="store_const", const=DOT_SEPARATOR,
                     help="separate milliseconds with '.' (01:02:03.004)")
    sep.add_argument("--comma", dest="separator", action="store_const", const=COMMA_SEPARATOR,
                     help="separate milliseconds with ',' (01:02:03,004)")
    parser.add_argument("--no-milli", dest="with_milli", action="store_false", default=None,
                        help="print HH:MM:SS only")
    parser.add_argument("--shift", metavar="OFFSET", default=None,
                        help="timecode added to every input, e.g. --shift=-00:00:01.500")
    parser.add_argument("texts", nargs="+", metavar="TEXT",
                        help="text containing a timecode (use -- before negative values)")
    return parser


# ------------------------------------------------------------------------------
# Function: run
# Purpose: Xử lý từng chuỗi, in kết quả ra stdout, lỗi ra stderr.
#          Trả về exit code: 0 nếu tất cả hợp lệ, 1 nếu có chuỗi lỗi.
# ------------------------------------------------------------------------------
def run(args: argparse.Namespace, config: Config) -> int:
    separator = args.separator or config.separator
    with_milli = config.with_milli if args.with_milli is None else args.with_milli

    offset: Timecode = ZERO
    if args.shift is not None:
        try:
            offset = parse(args.shift)
        except MalformedTimecodeError as e:
            print(f"invalid --shift: {e}", file=sys.stderr)
            return 2

    exit_code = 0
    for text in args.texts:
        try:
            value = parse(text)
        except MalformedTimecodeError as e:
            logger.info("Skip input without timecode: %r", e.text)
            print(e, file=sys.stderr)
            exit_code = 1
            continue

        shifted = value + offset
        logger.debug("Parsed %r -> %d ms (shifted %d ms)", text, value, shifted)
        print(format_timecode(shifted, with_milli, separator))

    return exit_code


def main(argv: Sequence[str] | None = None) -> int:
    # 1. Đọc tham số trước để --help không cần load config
    args = build_parser().parse_args(argv)

    # 2. Load cấu hình từ biến môi trường (.env)
    config = load_config()

    # 3. Thiết lập hệ thống logging
    setup_logging(config)

    return run(args, config)
