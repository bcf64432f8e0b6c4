import pytest
from slack_sdk.errors import SlackApiError


class FakeSlackClient:
    """Records chat_postMessage calls and serves a canned user directory."""

    def __init__(self, members=None, pages=None, fail_with=None, users_error=None):
        self.pages = pages if pages is not None else [{"ok": True, "members": members or []}]
        self.fail_with = list(fail_with or [])
        self.users_error = users_error
        self.posted = []

    def users_list(self, **kwargs):
        if self.users_error is not None:
            raise SlackApiError("users.list failed", {"ok": False, "error": self.users_error})
        return iter(self.pages)

    def chat_postMessage(self, *, channel, text="", **kwargs):
        self.posted.append({"channel": channel, "text": text, **kwargs})
        if self.fail_with:
            error = self.fail_with.pop(0)
            if error:
                raise SlackApiError("chat.postMessage failed", {"ok": False, "error": error})
        return {"ok": True, "channel": channel, "ts": "123.456"}


@pytest.fixture
def client():
    return FakeSlackClient()


@pytest.fixture
def bot(client):
    from mcdowell.bot import Bot

    return Bot(client, testing=True)
