"""Name of the logger used by the command line entry point"""
LOGGER_NAME: str = "lowterms"

"""Log level of the command line entry point. Debug output of the library is hidden by default."""
DEFAULT_LOG_LEVEL: str = "WARNING"

"""Operands of the demo run by ``python -m lowterms``, given as (numerator, denominator)"""
DEMO_LEFT: tuple[int, int] = (8, 18)
DEMO_RIGHT: tuple[int, int] = (1, 2)
