"""Shopping Orders management CLI.

Usage:
    python src/manage.py seed-stores   # Write the reference stores
    python src/manage.py show-flags    # Print the flags the service would see
"""

import argparse
import json
import sys


def seed():
    """Seed the reference stores into the order store."""
    from orders.domain import orders
    from orders.store.seeding import SEED_STORES, seed_stores

    print("Initializing orders domain...")
    orders.init()
    with orders.domain_context():
        added = seed_stores()
    print(f"  {len(added)} of {len(SEED_STORES)} stores added.")
    print("Done.")


def show_flags(settings, flag_names=None):
    """Fetch and print flags from the configuration extension."""
    from orders.errors import ConfigurationFetchError
    from orders.flags import build_flag_client

    identity = settings.flag_identity
    client = build_flag_client(settings)
    try:
        flags = client.fetch_flags(
            identity.application,
            identity.environment,
            identity.configuration,
            flag_names,
        )
    except ConfigurationFetchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(flags.to_dict(), indent=2))
    return 0


def main():
    from orders.config import Settings

    parser = argparse.ArgumentParser(description="Shopping Orders management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("seed-stores", help="Write the reference stores")

    flags_parser = subparsers.add_parser("show-flags", help="Print the current feature flags")
    flags_parser.add_argument(
        "--flag",
        action="append",
        dest="flags",
        help="Fetch only this flag (repeatable)",
    )

    args = parser.parse_args()
    settings = Settings.from_env()

    if args.command == "seed-stores":
        seed()
        return 0
    return show_flags(settings, args.flags)


if __name__ == "__main__":
    sys.exit(main())
