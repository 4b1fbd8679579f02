## gnuopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class GetoptError(Exception):
    def __init__(self, message: str = "", *, option: str | None = None):
        """Base class for all option-resolution errors."""
        super().__init__(message)
        self.option: str | None = option

class RequiresArgument(GetoptError):
    def __init__(self, option: str):
        super().__init__(f"Option `{option}` requires an argument.", option=option)

class AlreadySpecified(GetoptError):
    def __init__(self, option: str):
        super().__init__(f"Option `{option}` was already specified.", option=option)

class NotRecognized(GetoptError):
    def __init__(self, option: str):
        super().__init__(f"Option `{option}` is not recognized.", option=option)

class AmbiguousPrefix(GetoptError):
    def __init__(self, option: str, candidates: tuple[str, ...] = ()):
        super().__init__(f"Option `{option}` is ambiguous.", option=option)
        self.candidates = candidates


class GetoptSpecError(GetoptError, ValueError):
    """Malformed option specification, raised at compile time rather than carried."""
    def __init__(self, message, *, spec=None, column=None, token=None):
        super().__init__(message)
        self.spec = spec
        self.column = column
        self.token = token
