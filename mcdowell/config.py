"""
Configuration and environment variable validation.
"""
import os
import sys

from mcdowell.logger import logger

DEFAULT_BOT_NAME = "mcdowell"
DEFAULT_PORT = 8088


def validate_environment_variables() -> None:
    """
    Validate all required environment variables at startup.
    Exits the application with a clear error message if any are missing.
    """
    required_vars = {
        "SLACK_BOT_TOKEN": "Slack bot token for authentication",
        "SLACK_SIGNING_SECRET": "Slack signing secret for request verification",
    }

    optional_vars = {
        "BOT_NAME": f"Slack username of the bot account (defaults to {DEFAULT_BOT_NAME})",
        "BOT_DEV_MODE": "Set to 'true' for verbose logging (defaults to false)",
        "PORT": f"Server port (defaults to {DEFAULT_PORT} if not set)",
        "ENV": "Environment (prod/dev, defaults to dev if not set)",
    }

    missing_vars = []

    for var_name, description in required_vars.items():
        value = os.getenv(var_name)
        if not value or not value.strip():
            missing_vars.append(f"  - {var_name}: {description}")
            logger.error(f"Missing required environment variable: {var_name}")

    if missing_vars:
        error_message = (
            "Missing required environment variables:\n"
            + "\n".join(missing_vars)
            + "\n\nPlease set these variables before starting the application."
        )
        logger.critical(error_message)
        print(error_message, file=sys.stderr)
        sys.exit(1)

    for var_name, description in optional_vars.items():
        value = os.getenv(var_name)
        if not value or not value.strip():
            logger.info(f"Optional environment variable not set: {var_name} - {description}")
        else:
            logger.debug(f"Environment variable set: {var_name}")

    logger.info("Environment variable validation completed successfully")


def get_bot_name() -> str:
    return (os.getenv("BOT_NAME") or "").strip() or DEFAULT_BOT_NAME


def is_dev_mode() -> bool:
    return os.getenv("BOT_DEV_MODE", "").strip().lower() == "true"


def get_port() -> int:
    return int(os.getenv("PORT", DEFAULT_PORT))
