"""Minimal example for update-or-append merging of keyed records."""

from objectutil import upsert_merge, upsert_merge_by_id


def main() -> None:
    """Merge one existing and one new record."""
    users = [{"id": 1, "name": "alice", "active": True}]

    users = upsert_merge_by_id(users, {"id": 1, "active": False})
    users = upsert_merge_by_id(users, {"id": 2, "name": "bob"})
    print("users:", users)

    devices = upsert_merge([{"serial": "A1", "fw": "1.0"}], {"serial": "A1", "fw": "1.1"}, "serial")
    print("devices:", devices)


if __name__ == "__main__":
    main()
