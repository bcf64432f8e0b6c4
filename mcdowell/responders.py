"""
Canned replies keyed by the lowercase text fragment that triggers them.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from mcdowell.utils import normalize

ZAMUNDA_MONEY_URL = "https://novembrepleut.files.wordpress.com/2011/06/zamundamoney_100.png"
SOUL_GLO_URL = "https://media.giphy.com/media/3Gz3vy81HkDa8/giphy.gif"
QUEEN_TO_BE_URL = (
    "https://img.memesuper.com/bc7ab2796bdb983d5434fc842efcee0b_"
    "coming-to-america-aha-meme-coming-to-america_500-263.gif"
)


@dataclass(frozen=True)
class CannedReply:
    image_url: str
    text: Optional[str] = None

    def attachment(self) -> dict:
        """Build the Slack attachment payload for this reply."""
        payload = {
            "image_url": self.image_url,
            # chat.postMessage wants a plain-text fallback when the body is empty
            "fallback": self.text or self.image_url,
        }
        if self.text:
            payload["text"] = self.text
        return payload


RESPONDERS: Mapping[str, CannedReply] = MappingProxyType({
    "show me the money": CannedReply(ZAMUNDA_MONEY_URL, "The boy has got his own money!"),
    "let me hold something": CannedReply(ZAMUNDA_MONEY_URL, "I got you!"),
    "soul glo": CannedReply(SOUL_GLO_URL),
    "looking for a queen": CannedReply(QUEEN_TO_BE_URL),
})


def match(text: str | None) -> list[tuple[str, CannedReply]]:
    """
    Return (fragment, reply) for every fragment contained in the normalized
    text, in table order. Depends on nothing but the text.
    """
    normalized = normalize(text)
    if not normalized:
        return []
    return [(fragment, reply) for fragment, reply in RESPONDERS.items() if fragment in normalized]
