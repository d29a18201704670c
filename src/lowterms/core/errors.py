class InvalidFraction(ValueError):
    """Raised when numerator and denominator do not describe a supported fraction.

    This covers a zero denominator and negative components.
    """
