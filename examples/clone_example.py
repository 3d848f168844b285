"""Minimal example showing that clones share no containers with their source."""

import datetime

from objectutil import clone


def main() -> None:
    """Clone a nested record and mutate the copy."""
    original = {"user": {"name": "alice", "roles": ["admin"]}, "seen": datetime.datetime.now(tz=datetime.UTC)}
    copied = clone(original)
    copied["user"]["roles"].append("auditor")

    print(f"{original=}")
    print(f"{copied=}")
    print("same timestamp object:", copied["seen"] is original["seen"])


if __name__ == "__main__":
    main()
