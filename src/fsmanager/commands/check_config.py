"""Check-config command for fsmanager CLI."""

__all__ = ["register", "handle"]

import argparse
import sys


def register(subparsers):
    """Register the check-config command."""
    parser = subparsers.add_parser(
        "check-config",
        help="Show the effective configuration and validate it",
        description=(
            "Load defaults merged with the user config, print the namespaces "
            "and content types, and exit with code 1 if the config is invalid."
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to a fsmanager.yaml config file (default: auto-discovered).",
    )
    parser.set_defaults(func=handle)


def handle(args):
    """Handle the check-config command."""
    from ..config import ConfigError, load_config
    from ..console_utils import console

    try:
        config = load_config(args.config)
    except (ConfigError, OSError) as e:
        console.print_error(str(e))
        sys.exit(1)

    source = config.source or "packaged defaults"
    console.print_heading(f"Configuration: {source}")
    console.print_info(f"Root: {config.root}")
    console.print_info(f"Route prefix: {config.prefix or '/'}")
    console.print_info(f"Locale: {config.locale}")

    console.print_heading("Namespaces")
    missing = 0
    for name, root in sorted(config.namespaces.items()):
        if root.is_dir():
            console.print_item(f"{name}: {root}")
        else:
            missing += 1
            console.print_warning(f"{name}: {root} does not exist")

    console.print_heading("Content types")
    for slug, spec in config.contenttypes.items():
        console.print_item(f"{slug} ({spec.name}) -> /{spec.singular_slug}/<slug>")

    if missing:
        console.print_warning(f"{missing} namespace folder(s) missing")
    else:
        console.print_success("Configuration is valid")
