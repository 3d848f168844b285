"""Minimal example for null-safe navigation with wrap/unwrap."""

from objectutil import ABSENT, unwrap, wrap


def main() -> None:
    """Navigate present and missing paths without try/except."""
    config = wrap({"server": {"ports": [8080, 8443], "tls": {"enabled": True}}})

    print("tls enabled:", unwrap(config.server.tls.enabled))
    print("second port:", unwrap(config.server.ports[1]))
    print("missing:", unwrap(config.server.proxy.host))
    print("missing with default:", unwrap(config.server.proxy.host, default="localhost"))
    print("absent is falsy:", not ABSENT)


if __name__ == "__main__":
    main()
