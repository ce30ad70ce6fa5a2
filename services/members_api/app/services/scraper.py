import logging
from typing import Iterator, List

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from ..config.settings import Settings
from ..exceptions import MarkupParseError
from ..schemas import Member
from ..utils.http_client import UpstreamHTTPClient

logger = logging.getLogger(__name__)

MEMBER_CARD_SELECTOR = ".user-card"
GRADE_SELECTOR = ".user-pos"
NAME_SELECTOR = ".user-name-ja"
NAME_EN_SELECTOR = ".user-name-eng"
BIO_SELECTOR = ".user-email"
IMAGE_SELECTOR = "img"


def parse_document(markup: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(markup, "html.parser")
    except (ParserRejectedMarkup, TypeError) as e:
        logger.error(f"Unable to parse upstream markup: {e}")
        raise MarkupParseError(cause=e) from e


def strip_host_prefix(src: str, prefix: str) -> str:
    """Drop ``prefix`` from the start of ``src`` once, leaving other values untouched."""
    if prefix and src.startswith(prefix):
        return src[len(prefix):]
    return src


def _text(card: Tag, selector: str) -> str:
    # every match contributes, in document order; absent nodes give ""
    return "".join(node.get_text() for node in card.select(selector))


def iter_members(document: BeautifulSoup, host_prefix: str) -> Iterator[Member]:
    """
    Yield one member per card, in the order the cards appear in the document.

    Missing child nodes resolve to empty strings so a card is never dropped.
    """
    for card in document.select(MEMBER_CARD_SELECTOR):
        image = card.select_one(IMAGE_SELECTOR)
        src = image.get("src", "") if image is not None else ""
        yield Member(
            grade=_text(card, GRADE_SELECTOR),
            name=_text(card, NAME_SELECTOR),
            name_en=_text(card, NAME_EN_SELECTOR),
            bio=_text(card, BIO_SELECTOR),
            img_path=strip_host_prefix(src, host_prefix),
        )


def extract_members(document: BeautifulSoup, host_prefix: str) -> List[Member]:
    return list(iter_members(document, host_prefix))


class MemberScraper:
    def __init__(self, client: UpstreamHTTPClient, settings: Settings):
        self.client = client
        self.settings = settings

    async def get_members(self) -> List[Member]:
        markup = await self.client.fetch(self.settings.UPSTREAM_URL)
        document = parse_document(markup)
        members = extract_members(document, self.settings.UPSTREAM_HOST_PREFIX)
        if not members:
            logger.warning(
                f"No member cards matched {MEMBER_CARD_SELECTOR!r} at {self.settings.UPSTREAM_URL}; "
                "the upstream markup may have changed"
            )
        return members
