"""
The McDowell bot: resolves its own identity at startup and reacts to
Slack message and team_join events.
"""
from typing import Any, Iterable, Optional, Protocol

from slack_sdk.errors import SlackApiError

from mcdowell.config import DEFAULT_BOT_NAME
from mcdowell.logger import logger
from mcdowell.responders import match

CONTRIBUTORS = ("willmadison", "xango")

WELCOME_TEMPLATE = """Yo {name}!

I’d like to welcome you to the Atlanta Black Tech Family. Our mission is to improve the quality, quantity, and connections for people of African descent within the overall Metro Atlanta tech ecosystem.

Please click on “Channels” to browse all of our sub-communities, and join the ones that are most relevant to you. Enjoy your time, and help us build the communities by inviting others in your network."""


class SlackClient(Protocol):
    """The subset of slack_sdk.WebClient the bot relies on."""

    def chat_postMessage(self, *, channel: str, text: str = "", **kwargs: Any) -> Any:
        ...

    def users_list(self, **kwargs: Any) -> Iterable[Any]:
        ...


class BotIdentityError(RuntimeError):
    """Raised when the bot's own Slack user cannot be found at startup."""


class Bot:
    """
    A single bot instance. Identity (own user ID and contributor IDs) is
    resolved once in the constructor and never mutated afterwards, so the
    event handlers are safe to run concurrently.
    """

    def __init__(
        self,
        client: SlackClient,
        name: str = DEFAULT_BOT_NAME,
        debug: bool = False,
        testing: bool = False,
    ):
        self.client = client
        self.name = name
        self.debug = debug
        self.testing = testing
        self.id = ""
        self.contributors: dict[str, str] = {}

        self._initialize()

    def _initialize(self) -> None:
        if self.debug:
            logger.debug("determining bot/contributor user IDs")

        # SlackApiError propagates: a bot that can't read the directory must not start
        for user in self._list_users():
            username = user.get("name")
            if username in CONTRIBUTORS:
                self.contributors[username] = user.get("id", "")
            elif username == self.name and user.get("is_bot"):
                self.id = user.get("id", "")

        if self.debug:
            logger.debug("contributors: %s", self.contributors)

        if not self.id and not self.testing:
            raise BotIdentityError(
                f'could not find bot in the list of names, ensure the bot is called "{self.name}"'
            )

        logger.info("Bot %s resolved (id=%s)", self.name, self.id or "<unset>")

    def _list_users(self) -> Iterable[dict]:
        # WebClient responses iterate over every page of a cursor-paginated call
        for page in self.client.users_list(limit=200):
            yield from page.get("members") or []

    def on_team_joined(self, event: dict) -> Any:
        """Send a welcome DM to a user who just joined the workspace."""
        user = event.get("user") or {}
        message = WELCOME_TEMPLATE.format(name=user.get("name", ""))

        return self.client.chat_postMessage(
            channel=user.get("id"),
            text=message,
            as_user=True,
            link_names=1,
        )

    def on_new_message(self, event: dict) -> None:
        """
        Reply to every canned fragment found in the message.

        Messages authored by bots (including this one) are ignored. Every
        matching reply is attempted; if any send failed, the last error is
        re-raised once all of them have been tried.
        """
        if event.get("bot_id") or not event.get("user") or event.get("subtype") == "bot_message":
            return

        channel = event.get("channel")
        last_error: Optional[SlackApiError] = None

        for fragment, reply in match(event.get("text")):
            logger.debug("Fragment %r matched in channel %s", fragment, channel)
            try:
                self.client.chat_postMessage(
                    channel=channel,
                    text="",
                    attachments=[reply.attachment()],
                    as_user=True,
                    unfurl_links=True,
                )
            except SlackApiError as e:
                last_error = e

        if last_error is not None:
            raise last_error
