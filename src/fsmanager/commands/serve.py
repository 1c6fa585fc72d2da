"""Serve command for fsmanager CLI."""

__all__ = ["register", "handle"]

import argparse
import os
import sys
import textwrap


def register(subparsers):
    """Register the serve command."""
    serve_epilog = textwrap.dedent(
        r"""
        Examples:
          # Serve with fsmanager.yaml from the working directory
          fsmanager serve

          # Use a specific config file and port
          fsmanager serve --config /srv/site/fsmanager.yaml --port 8080

          # Auto-reload while developing
          fsmanager serve --reload
    """
    )

    parser = subparsers.add_parser(
        "serve",
        help="Run the file manager HTTP server",
        description="Run the file manager HTTP server with uvicorn.",
        epilog=serve_epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to a fsmanager.yaml config file (default: auto-discovered).",
    )
    parser.add_argument("--host", help="Bind address (default: from config)")
    parser.add_argument("--port", type=int, help="Port (default: from config)")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change",
    )
    parser.set_defaults(func=handle)


def handle(args):
    """Handle the serve command."""
    # Lazy imports
    import uvicorn

    from ..config import CONFIG_ENV_VAR, ConfigError, load_config
    from ..console_utils import console

    try:
        config = load_config(args.config)
    except ConfigError as e:
        console.print_error(str(e))
        sys.exit(1)

    host = args.host or config.host
    port = args.port or config.port

    console.print_heading(f"fsmanager on http://{host}:{port}{config.prefix}")
    for name, root in sorted(config.namespaces.items()):
        console.print_item(f"{name}: {root}")

    if args.reload:
        # The reloader imports the factory by name in a fresh process, so
        # hand the config over through the environment.
        if config.source:
            os.environ[CONFIG_ENV_VAR] = str(config.source.resolve())
        uvicorn.run(
            "fsmanager.api.main:create_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
        )
    else:
        from ..api.main import create_app

        uvicorn.run(create_app(config), host=host, port=port)
