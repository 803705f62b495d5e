import random
from typing import Iterator, Sequence

from tabulate import tabulate

from fairrps.config import settings
from fairrps.errors import InvalidMove, InvalidMoveSet
from fairrps.game.models import Outcome


class MoveRules:
    """Cyclic win/lose rules over an odd, duplicate-free move catalog.

    Each move beats the ``half`` moves before it (wrapping around) and loses
    to the ``half`` moves after it, so ``rock, paper, scissors`` plays as the
    classic game: paper beats rock, scissors beats paper, rock beats scissors.
    """

    def __init__(self, moves: Sequence[str], rng: random.Random | None = None) -> None:
        moves = tuple(moves)
        if len(moves) < 3 or len(moves) % 2 == 0:
            raise InvalidMoveSet(InvalidMoveSet.TOO_SHORT)
        if len(set(moves)) != len(moves):
            raise InvalidMoveSet(InvalidMoveSet.DUPLICATES)

        self.moves: tuple[str, ...] = moves
        self.half: int = len(moves) // 2
        self._rank: dict[str, int] = {m: i for i, m in enumerate(moves)}
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[str]:
        return iter(self.moves)

    def __contains__(self, move: object) -> bool:
        return move in self._rank

    def index_of(self, move: str) -> int:
        try:
            return self._rank[move]
        except KeyError:
            raise InvalidMove(f"Unknown move: {move!r}") from None

    def pick_random(self) -> str:
        return self._rng.choice(self.moves)

    def compare(self, a: str, b: str) -> Outcome:
        """Outcome of ``a`` played against ``b``, from ``a``'s side.

        ``a`` wins when it sits at most ``half`` places after ``b``, i.e.
        ``(index(a) - index(b)) % N <= half``. The older formulation
        ``(index(b) - index(a)) % N`` gives every non-draw pair the opposite
        result (rock would beat paper); this one keeps the classic game.
        """
        ia = self.index_of(a)
        ib = self.index_of(b)
        if a == b:
            return Outcome.DRAW

        distance = (ia - ib) % len(self.moves)
        if distance <= self.half:
            return Outcome.WIN
        return Outcome.LOSE

    def beats(self, move: str) -> list[str]:
        return [other for other in self.moves if self.compare(move, other) is Outcome.WIN]

    def outcome_matrix(self) -> list[list[Outcome]]:
        return [[self.compare(a, b) for b in self.moves] for a in self.moves]

    def render_outcome_matrix(self) -> str:
        headers = [settings.TABLE_LABEL, *self.moves]
        rows = [
            [move, *(outcome.value.capitalize() for outcome in row)]
            for move, row in zip(self.moves, self.outcome_matrix())
        ]
        # tabulate sizes a column from its header, so padding every header to
        # the widest text in the table gives all columns the same width
        width = max(len(text) for text in [*headers, *(cell for row in rows for cell in row)])
        return tabulate(
            rows,
            headers=[h.center(width) for h in headers],
            tablefmt=settings.TABLE_FORMAT,
            stralign="center",
            disable_numparse=True,
        )
