class InvalidDurationFormat(ValueError):
    """Raised for any duration that cannot be parsed, normalized or computed.

    One error kind covers grammar violations, arithmetic overflow and
    normalization overflow. Callers only need to catch this class; the
    message tells the cases apart.
    """
