class FairRPSError(Exception):
    """Base class for every error raised by fairrps."""


class InvalidMoveSet(FairRPSError, ValueError):
    TOO_SHORT = "Invalid moves, you must provide an odd number of at least 3 non-repeating strings."
    DUPLICATES = "Invalid moves. You must provide non-repeating strings."


class UnsupportedAlgorithm(FairRPSError, ValueError):
    pass


class InvalidLength(FairRPSError, ValueError):
    pass


class InvalidInput(FairRPSError, TypeError):
    pass


class InvalidMove(FairRPSError, LookupError):
    pass


class InvalidUserInput(FairRPSError, ValueError):
    @classmethod
    def for_menu(cls, size: int) -> "InvalidUserInput":
        return cls(f"Invalid input. You must enter a number between 1 and {size}, 0 for exit, or ? for help.")


class InvalidTransition(FairRPSError, RuntimeError):
    pass
