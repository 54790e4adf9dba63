"""Input validation errors raised while checking generation options."""


class PatternInputError(ValueError):
    """Base class for rejected generation input."""


class InvalidSeed(PatternInputError):
    pass


class InvalidDimension(PatternInputError):
    pass


class InvalidStyle(PatternInputError):
    pass


class InvalidFlag(PatternInputError):
    pass


class InvalidTags(PatternInputError):
    pass
