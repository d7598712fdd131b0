# ##############################################################################
# MODULE: MAIN
# DESCRIPTION: Điểm khởi chạy chính của ứng dụng (Entry Point).
#              Chạy: python main.py [--comma] [--no-milli] [--shift=OFFSET] TEXT...
# ##############################################################################

from __future__ import annotations

import sys

from mstimecode.cli import main


if __name__ == "__main__":
    sys.exit(main())
