class InvalidConstruction(ValueError):
    """A register was described with an impossible length, seed or feedback."""


class InvalidSeed(InvalidConstruction):
    pass


class InvalidTap(InvalidConstruction):
    pass
