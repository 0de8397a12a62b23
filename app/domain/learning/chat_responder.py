"""
Chat responder domain service.

Answers newcomer questions by pointing at course and glossary pages.
Investment-advice requests are intercepted before any search runs:
the chat never comments on what to buy, sell or expect from prices.
"""

import logging
import re

from app.domain.learning.entities import (
    ChatLink,
    ChatReply,
    ContentType,
    ReplyType,
    SearchEntry,
)

logger = logging.getLogger(__name__)

ZH_LOCALE = "zh-CN"
MAX_RESULTS = 3

TITLE_SCORE = 10
KEYWORD_SCORE = 5
TEXT_SCORE = 2

BLOCKED_PATTERN = re.compile(
    r"买入|卖出|抄底|投资建议"
    r"|should\s*i\s*buy|when\s*to\s*buy|buy\s*now|sell\s*now"
    r"|price\s*predict|should\s*i\s*invest"
    r"|预测|点位|涨到|跌到|all\s*in|逃顶|合约|杠杆"
    r"|leverage|pump|dump",
    re.IGNORECASE,
)

SEARCH_INDEX: tuple[SearchEntry, ...] = (
    SearchEntry(
        type=ContentType.COURSE,
        slug="lesson-1",
        title_en="What Is Solana?",
        title_zh="什么是 Solana？",
        desc_en=(
            "Your first step into the Solana ecosystem. "
            "Learn what makes Solana unique."
        ),
        desc_zh="踏入 Solana 生态的第一步。了解 Solana 的独特之处。",
        keywords=(
            "solana blockchain speed cost energy fast cheap transaction "
            "nft dapp wallet 区块链 速度 成本 交易"
        ),
    ),
    SearchEntry(
        type=ContentType.GLOSSARY,
        slug="solana",
        title_en="Solana",
        title_zh="Solana",
        desc_en="A high-performance blockchain platform for fast, low-cost transactions.",
        desc_zh="一个高性能区块链平台，专为快速低成本交易而设计。",
        keywords=(
            "solana sol token proof of history poh smart contract validator "
            "staking 验证者 质押 智能合约"
        ),
    ),
)

# Suggested whenever the chat has nothing specific to offer.
STARTER_ENTRY = SEARCH_INDEX[0]

MESSAGES = {
    ReplyType.BLOCKED: {
        "en": (
            "I cannot provide investment advice. "
            "Please visit /security to learn about risks."
        ),
        ZH_LOCALE: "我无法提供投资建议。请查阅 /security 了解风险。",
    },
    ReplyType.RESULTS: {
        "en": "I found some relevant content that might help:",
        ZH_LOCALE: "我找到了以下相关内容，希望对你有帮助：",
    },
    ReplyType.FALLBACK: {
        "en": (
            "I couldn't find specific content for that. Try browsing our "
            "Course or Glossary, or submit your question in the Ask page."
        ),
        ZH_LOCALE: (
            "暂未找到相关内容。你可以尝试浏览我们的课程或术语表，"
            "或者在提问广场提交你的问题。"
        ),
    },
}


def is_investment_advice_request(message: str) -> bool:
    """Return True when the message asks for trading or price advice."""
    return BLOCKED_PATTERN.search(message) is not None


def score_entry(entry: SearchEntry, terms: list[str], locale: str) -> int:
    """Score one index entry against lower-cased query terms.

    Per term: a hit in the localized title is worth 10, in the
    keywords 5, anywhere in the searchable text 2.
    """
    title = entry.title_for(locale).lower()
    searchable = " ".join(
        (entry.title_en, entry.title_zh, entry.desc_en, entry.desc_zh, entry.keywords)
    ).lower()

    score = 0
    for term in terms:
        if term in title:
            score += TITLE_SCORE
        if term in entry.keywords:
            score += KEYWORD_SCORE
        if term in searchable:
            score += TEXT_SCORE
    return score


def search_content(
    query: str,
    locale: str,
    index: tuple[SearchEntry, ...] = SEARCH_INDEX,
) -> list[SearchEntry]:
    """Return up to three best-scoring entries, best first."""
    terms = query.lower().split()
    if not terms:
        return []

    scored = [(score_entry(entry, terms, locale), entry) for entry in index]
    matches = [pair for pair in scored if pair[0] > 0]
    # sort is stable: ties keep index order
    matches.sort(key=lambda pair: pair[0], reverse=True)
    return [entry for _, entry in matches[:MAX_RESULTS]]


class ChatResponder:
    """Turns a chat message into a blocked, results or fallback reply."""

    def __init__(self, index: tuple[SearchEntry, ...] = SEARCH_INDEX) -> None:
        self._index = index

    def respond(self, message: str, locale: str) -> ChatReply:
        """Answer a validated chat message.

        Args:
            message: Trimmed, non-empty user message.
            locale: UI locale; ``zh-CN`` gets Chinese text, others English.

        Returns:
            The reply. Advice requests are always ``blocked``.
        """
        if is_investment_advice_request(message):
            logger.info("Chat message intercepted as investment advice request")
            return self._reply(ReplyType.BLOCKED, locale, [STARTER_ENTRY])

        results = search_content(message, locale, self._index)
        if results:
            return self._reply(ReplyType.RESULTS, locale, results)

        return self._reply(ReplyType.FALLBACK, locale, [STARTER_ENTRY])

    @staticmethod
    def _reply(
        reply_type: ReplyType, locale: str, entries: list[SearchEntry]
    ) -> ChatReply:
        language = ZH_LOCALE if locale == ZH_LOCALE else "en"
        return ChatReply(
            type=reply_type,
            message=MESSAGES[reply_type][language],
            links=tuple(
                ChatLink(type=entry.type, slug=entry.slug, title=entry.title_for(locale))
                for entry in entries
            ),
        )
