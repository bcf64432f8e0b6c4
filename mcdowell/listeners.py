"""
Bolt event listeners. Bolt acks each event and runs the listener on its
worker pool, so one slow or failing reply never holds up the others.
"""
from slack_sdk.errors import SlackApiError

from mcdowell.bot import Bot
from mcdowell.logger import logger


def register_listeners(slack_app, bot: Bot) -> None:
    @slack_app.event("message")
    def handle_message(event):
        try:
            bot.on_new_message(event)
        except SlackApiError as e:
            logger.error(
                "Failed to reply in channel=%s: %s",
                event.get("channel"),
                e.response.get("error") if e.response is not None else e,
            )

    @slack_app.event("team_join")
    def handle_team_join(event):
        user = event.get("user") or {}
        logger.info("New team member: %s", user.get("name"))
        try:
            bot.on_team_joined(event)
        except SlackApiError as e:
            logger.error(
                "Failed to welcome user_id=%s: %s",
                user.get("id"),
                e.response.get("error") if e.response is not None else e,
            )
