import os
import sys

from fastapi import FastAPI, Request
from slack_bolt import App
from slack_bolt.adapter.fastapi import SlackRequestHandler
from slack_sdk.errors import SlackApiError

from mcdowell.logger import logger
from mcdowell.bot import Bot, BotIdentityError
from mcdowell.config import (
    validate_environment_variables,
    get_bot_name,
    get_port,
    is_dev_mode,
)
from mcdowell.health import router as health_router
from mcdowell.listeners import register_listeners

# Validate environment variables at startup
validate_environment_variables()

# Slack app setup
slack_app = App(
    token=os.environ["SLACK_BOT_TOKEN"],
    signing_secret=os.environ["SLACK_SIGNING_SECRET"],
    # Ack first, then run listeners on Bolt's thread pool (one task per event)
    process_before_response=False,
)

logger.info("determining bot identity...")
try:
    bot = Bot(slack_app.client, name=get_bot_name(), debug=is_dev_mode())
except (SlackApiError, BotIdentityError) as e:
    logger.critical("Bot initialization failed: %s", e)
    sys.exit(1)

register_listeners(slack_app, bot)

fastapi_app = FastAPI()
fastapi_app.include_router(health_router)
handler = SlackRequestHandler(slack_app)


@fastapi_app.post("/slack/events")
async def slack_events(request: Request):
    # Delegate to Slack Bolt FastAPI handler
    return await handler.handle(request)


logger.info("McDowell's is now open for business!!!")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app:fastapi_app",
        host="0.0.0.0",
        port=get_port(),
        reload=os.getenv("ENV") != "prod",
    )
