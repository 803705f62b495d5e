#!/usr/bin/env python3
# fairrps: provably fair N-move rock-paper-scissors against the computer
import logging
import sys

from fairrps.config import settings
from fairrps.errors import FairRPSError, InvalidUserInput
from fairrps.game.rules import MoveRules
from fairrps.game.transitions import GameSession


logger = logging.getLogger(__name__)

EXIT = "0"
HELP = "?"


def ask(prompt: str) -> str:
    try:
        return input(prompt)
    except (EOFError, KeyboardInterrupt):
        return EXIT


def print_menu(rules: MoveRules) -> None:
    lines = ["Available moves:"]
    lines += [f"{i} - {move}" for i, move in enumerate(rules, start=1)]
    lines += [f"{EXIT} - exit", f"{HELP} - help", ""]
    print("\n".join(lines))


def parse_selection(raw: str, size: int) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidUserInput.for_menu(size)
    return int(raw)


def play(session: GameSession) -> int:
    print(f"HMAC: {session.start()}")

    while True:
        print_menu(session.rules)
        raw = ask("Enter your move: ").strip()
        if raw == EXIT:
            print("bye!")
            return 0
        if raw == HELP:
            print(session.rules.render_outcome_matrix())
            continue
        try:
            session.play_index(parse_selection(raw, len(session.rules)))
        except InvalidUserInput as e:
            print(e)
            continue
        break

    reveal = session.reveal()
    print(f"Your move: {reveal.result.human_move}")
    print(f"Computer move: {reveal.result.automated_move}")
    print(f"You {reveal.result.outcome.value}!")
    print(f"HMAC key: {reveal.key}")
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    moves = sys.argv[1:] if argv is None else argv

    try:
        session = GameSession(MoveRules(moves))
    except FairRPSError as e:
        logger.debug("startup failed for moves %r", moves)
        print(e, file=sys.stderr)
        return 1

    return play(session)


if __name__ == "__main__":
    raise SystemExit(main())
