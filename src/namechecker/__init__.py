"""
namechecker

Check whether a name is still free as a GitHub user/org and as an npm org scope.
"""

__version__ = "0.1.0"

USAGE = """Usage: namechecker <id> [id2] [id3] ...
Examples:
  namechecker abcd
  namechecker abcd myorg testname"""


def main():
    """Main entry point for the CLI."""
    import sys

    args = sys.argv[1:]

    if not args:
        print(USAGE)
        sys.exit(1)

    # Flags only count on their own so they never swallow a name list
    if len(args) == 1 and args[0] in ("--help", "-h"):
        print_help()
        sys.exit(0)

    if len(args) == 1 and args[0] in ("--version", "-V"):
        print(f"namechecker {__version__}")
        sys.exit(0)

    identifiers = [arg for arg in args if arg and arg.strip()]

    if not identifiers:
        print("Error: Please provide at least one valid ID", file=sys.stderr)
        sys.exit(1)

    import asyncio
    import logging

    from .config import setup_logging
    from .report import run

    setup_logging()

    try:
        asyncio.run(run(identifiers))
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        logging.getLogger(__name__).error(f"Error: {e}")
        sys.exit(1)

    sys.exit(0)


def print_help():
    """Print help message."""
    print(f"""namechecker {__version__}

Check whether a name is available as a GitHub user/organization
and as an npm organization scope.

{USAGE}

Options:
  -h, --help       Show this help
  -V, --version    Show version

Environment:
  NAMECHECKER_DEBUG=1       Verbose logging, including HTTP requests
  NAMECHECKER_TIMEOUT=10    Request timeout in seconds (default: 5)
  NO_COLOR=1                Plain output without ANSI colors

A lookup that fails is reported as taken, with the error on stderr.""")
