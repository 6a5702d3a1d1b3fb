import argparse
import asyncio
import logging
import sys

from system_navigator.config.settings import Settings, parse_log_level
from system_navigator.container import DependencyContainer
from system_navigator.exceptions import ConfigurationError, HomeDirectoryError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="navigator",
        description="Interactive file manager shell rooted at your home directory.",
    )
    parser.add_argument(
        "--home",
        default=None,
        help="Start (and sandbox 'up') at this directory instead of the user's home",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for diagnostics on stderr (default: NAVIGATOR_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--no-banner",
        dest="banner",
        action="store_false",
        help="Do not print the welcome banner",
    )
    args = parser.parse_args(argv)

    try:
        settings = Settings(home_directory=args.home)
        level = settings.log_level
        if args.log_level:
            level = parse_log_level(args.log_level)
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        container = DependencyContainer(settings)
        shell = container.get_shell()
    except HomeDirectoryError as e:
        print(
            "Critical error during initialization, could not change to home directory:",
            e,
            file=sys.stderr,
        )
        return 1
    except ConfigurationError as e:
        print("Critical error during initialization:", e, file=sys.stderr)
        return 1

    return asyncio.run(shell.run(show_banner=args.banner))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
