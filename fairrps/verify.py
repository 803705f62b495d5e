import argparse

from fairrps.services.commitment import verify_commitment


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fairrps-verify",
        description="Check a revealed move and key against the HMAC published before you played.",
    )
    parser.add_argument("hmac", help="HMAC printed at the start of the round")
    parser.add_argument("move", help="Computer move printed after your move")
    parser.add_argument("key", help="HMAC key printed at the end of the round")
    args = parser.parse_args(argv)

    if verify_commitment(args.hmac, args.move, args.key):
        print("OK: commitment matches")
        return 0
    print(f"MISMATCH: HMAC of {args.move!r} under the given key is not {args.hmac}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
