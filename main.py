"""
Demo script for spans_by_key.
Splits a list of numbers into spans where each item is 1 larger than the preceding one.
"""

import os
import sys
from logging import DEBUG, Formatter, Logger, StreamHandler, getLogger

sys.path.append(os.path.abspath(os.path.join(__file__, "..")))

from spans import spans_by_key


def main() -> None:
    numbers = [1, 2, 5, 6, 7, 11, 13, 14, 15]
    spans = spans_by_key(numbers, lambda x: x, lambda a, b: a + 1 == b, logger=_create_logger())

    while (span := spans.next_span()) is not None:
        print(f"span = {list(span)}")


def _create_logger() -> Logger | None:
    if "--verbose" not in sys.argv[1:]:
        return None
    logger = getLogger("spans demo")
    logger.setLevel(DEBUG)
    handler = StreamHandler(sys.stderr)
    handler.setLevel(DEBUG)
    handler.setFormatter(Formatter("%(asctime)s    %(message)s", "%H:%M:%S"))
    logger.addHandler(handler)
    return logger


if __name__ == "__main__":
    main()
