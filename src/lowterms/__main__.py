"""Demo: adds 8/18 and 1/2 and prints operands and result."""
from __future__ import annotations

import logging

from lowterms.core.constants import DEFAULT_LOG_LEVEL, DEMO_LEFT, DEMO_RIGHT, LOGGER_NAME
from lowterms.core.fraction import Fraction


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, DEFAULT_LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger(LOGGER_NAME)

    a = Fraction(*DEMO_LEFT)
    print(f"a = {a}")

    b = Fraction(*DEMO_RIGHT)
    print(f"b = {b}")

    c = a + b
    logger.info("computed %s + %s = %s", a, b, c)
    print("a + b = ")
    print(c)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
