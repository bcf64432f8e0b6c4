"""Tests for wiring Bolt events to the bot."""

from unittest.mock import MagicMock

import pytest
from slack_sdk.errors import SlackApiError

from mcdowell.listeners import register_listeners


class FakeBoltApp:
    def __init__(self):
        self.listeners = {}

    def event(self, name):
        def decorator(func):
            self.listeners[name] = func
            return func
        return decorator


@pytest.fixture
def wired():
    app = FakeBoltApp()
    bot = MagicMock()
    register_listeners(app, bot)
    return app, bot


class TestRegisterListeners:
    def test_registers_message_and_team_join(self, wired):
        app, _ = wired
        assert set(app.listeners) == {"message", "team_join"}

    def test_message_is_forwarded(self, wired):
        app, bot = wired
        event = {"channel": "C1", "user": "U1", "text": "soul glo"}
        app.listeners["message"](event)
        bot.on_new_message.assert_called_once_with(event)

    def test_team_join_is_forwarded(self, wired):
        app, bot = wired
        event = {"user": {"id": "U1", "name": "new"}}
        app.listeners["team_join"](event)
        bot.on_team_joined.assert_called_once_with(event)

    def test_send_failure_is_logged_not_raised(self, wired, caplog):
        app, bot = wired
        bot.on_new_message.side_effect = SlackApiError(
            "chat.postMessage failed", {"ok": False, "error": "channel_not_found"}
        )
        app.listeners["message"]({"channel": "C1", "user": "U1", "text": "soul glo"})
        assert "channel_not_found" in caplog.text

    def test_welcome_failure_is_logged_not_raised(self, wired, caplog):
        app, bot = wired
        bot.on_team_joined.side_effect = SlackApiError(
            "chat.postMessage failed", {"ok": False, "error": "user_not_found"}
        )
        app.listeners["team_join"]({"user": {"id": "U1", "name": "new"}})
        assert "user_not_found" in caplog.text
