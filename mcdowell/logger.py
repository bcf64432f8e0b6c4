import logging
import os
import sys

DEV_MODE = os.getenv("BOT_DEV_MODE", "").strip().lower() == "true"

# Write to stderr (unbuffered, better for containers)
logging.basicConfig(
    level=logging.DEBUG if DEV_MODE else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

# Keep Slack SDK / HTTP client chatter out of the debug stream
logging.getLogger("slack_bolt").setLevel(logging.INFO)
logging.getLogger("slack_sdk").setLevel(logging.INFO)
logging.getLogger("urllib3").setLevel(logging.INFO)

logger = logging.getLogger("mcdowell")
