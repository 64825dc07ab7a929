"""
timeoutbot CLI entry point.

Provides command-line interface for running the bot and inspecting config.
"""

import argparse
import sys
from pathlib import Path

from timeoutbot import __version__
from timeoutbot.config.logging import get_logger, setup_logging
from timeoutbot.config.settings import Settings, load_settings
from timeoutbot.errors import ConfigurationError


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="timeoutbot",
        description="Discord moderation bot with a /timeout command",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"timeoutbot {__version__}",
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env file (default: .env in current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level from config",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "run",
        help="Connect to Discord and run the bot",
    )

    subparsers.add_parser(
        "config",
        help="Show current configuration",
    )

    return parser


def cmd_config(settings: Settings) -> int:
    """Show current configuration."""
    logger = get_logger(__name__)

    logger.info("\n=== timeoutbot Configuration ===\n")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Log File: {settings.log_file or 'None (console only)'}")
    logger.info(f"Token: {'Set' if settings.token.strip() else 'Not set'}")
    logger.info(f"\nBot Name: {settings.bot.name}")
    logger.info(f"Command Prefix: {settings.bot.command_prefix or '(mention only)'}")
    logger.info(f"Owner IDs: {settings.bot.owner_ids or '(application owner)'}")
    logger.info(f"Dev Guild ID: {settings.bot.dev_guild_id or 'None'}")
    logger.info(f"Sync On Startup: {settings.bot.sync_on_startup}")

    return 0


def cmd_run(settings: Settings) -> int:
    """Start the Discord bot."""
    logger = get_logger(__name__)

    try:
        token = settings.require_token()
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    from timeoutbot.bot import TimeoutBot

    bot = TimeoutBot(settings)
    logger.info(f"Starting {settings.bot.name}...")
    # log_handler=None: disable discord.py's default logging setup and use ours
    bot.run(token, log_handler=None)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load settings
    try:
        settings = load_settings(env_file=args.env_file)
    except ConfigurationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Override log level if specified
    if args.log_level:
        settings.log_level = args.log_level

    setup_logging(settings)

    if args.command == "config":
        return cmd_config(settings)
    elif args.command == "run":
        return cmd_run(settings)
    else:
        # Default: show help
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
