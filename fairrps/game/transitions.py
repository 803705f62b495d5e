import logging
from dataclasses import dataclass
from typing import Callable

from fairrps.errors import InvalidMove, InvalidTransition, InvalidUserInput
from fairrps.game.events import SessionEvent
from fairrps.game.models import Commitment, Reveal, RoundResult
from fairrps.game.rules import MoveRules
from fairrps.game.states import SessionState
from fairrps.services.commitment import KEY_LENGTH, HashCommitment


logger = logging.getLogger(__name__)


@dataclass
class RoundCtx:
    rules: MoveRules
    hasher: HashCommitment
    key_length: int = KEY_LENGTH
    commitment: Commitment | None = None
    result: RoundResult | None = None


Handler = Callable[..., SessionState]


class FSM:
    def __init__(self, initial: SessionState) -> None:
        self.state: SessionState = initial
        self._table: dict[tuple[SessionState, SessionEvent], Handler] = {}

    def on(self, state: SessionState, event: SessionEvent):
        def decorator(fn: Handler):
            self._table[(state, event)] = fn
            return fn
        return decorator

    def send(self, event: SessionEvent, ctx: RoundCtx, **kwargs) -> SessionState:
        handler = self._table.get((self.state, event))
        if not handler:
            logger.warning("no transition %s --%s--> ?", self.state.name, event.name)
            raise InvalidTransition(f"{event.name} is not allowed in state {self.state.name}")
        new_state = handler(ctx, **kwargs)
        logger.debug("%s --%s--> %s", self.state.name, event.name, new_state.name)
        self.state = new_state
        return new_state


def build_transitions() -> FSM:
    fsm = FSM(SessionState.IDLE)

    @fsm.on(state=SessionState.IDLE, event=SessionEvent.START)
    def commit_automated_move(ctx: RoundCtx) -> SessionState:
        move = ctx.rules.pick_random()
        key = ctx.hasher.generate_key(ctx.key_length)
        ctx.commitment = Commitment(
            digest=ctx.hasher.commit(move, key),
            key=key,
            committed_move=move,
        )
        logger.debug("committed %r", ctx.commitment)
        return SessionState.COMMITTED

    @fsm.on(state=SessionState.COMMITTED, event=SessionEvent.MOVE)
    def resolve_round(ctx: RoundCtx, human_move: str) -> SessionState:
        automated_move = ctx.commitment.committed_move
        ctx.result = RoundResult(
            human_move=human_move,
            automated_move=automated_move,
            outcome=ctx.rules.compare(human_move, automated_move),
        )
        return SessionState.REVEALED

    @fsm.on(state=SessionState.REVEALED, event=SessionEvent.REVEAL)
    def disclose_key(ctx: RoundCtx) -> SessionState:
        return SessionState.DONE

    return fsm


class GameSession:
    """One commit-reveal round against the automated player.

    ``start()`` publishes only the digest. The automated move and the key
    become visible through ``reveal()`` once the human has played.
    """

    def __init__(self, rules: MoveRules, hasher: HashCommitment | None = None, key_length: int = KEY_LENGTH) -> None:
        self.ctx = RoundCtx(rules=rules, hasher=hasher or HashCommitment(), key_length=key_length)
        self.fsm = build_transitions()

    @property
    def rules(self) -> MoveRules:
        return self.ctx.rules

    @property
    def state(self) -> SessionState:
        return self.fsm.state

    @property
    def digest(self) -> str:
        if self.ctx.commitment is None:
            raise InvalidTransition("Nothing has been committed yet")
        return self.ctx.commitment.digest

    def start(self) -> str:
        self.fsm.send(SessionEvent.START, self.ctx)
        return self.ctx.commitment.digest

    def play(self, human_move: str) -> RoundResult:
        if self.state is SessionState.COMMITTED and human_move not in self.rules:
            raise InvalidMove(f"Unknown move: {human_move!r}")
        self.fsm.send(SessionEvent.MOVE, self.ctx, human_move=human_move)
        return self.ctx.result

    def play_index(self, selection: int) -> RoundResult:
        """Play the move shown as ``selection`` (1-based) in the menu."""
        size = len(self.rules)
        if not 1 <= selection <= size:
            raise InvalidUserInput.for_menu(size)
        return self.play(self.rules.moves[selection - 1])

    def reveal(self) -> Reveal:
        self.fsm.send(SessionEvent.REVEAL, self.ctx)
        return Reveal(
            result=self.ctx.result,
            digest=self.ctx.commitment.digest,
            key=self.ctx.commitment.key,
        )
