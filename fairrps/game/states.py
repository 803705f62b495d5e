from enum import Enum, auto


class SessionState(Enum):
    IDLE = auto()
    COMMITTED = auto()
    REVEALED = auto()
    DONE = auto()
