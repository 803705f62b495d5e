from enum import Enum, auto


class SessionEvent(Enum):
    START = auto()
    MOVE = auto()
    REVEAL = auto()
