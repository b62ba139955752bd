"""
Investment topic taxonomy.

Closed enumeration of investment topics with exhaustive lookup tables for
the canonical query expansion, the human-readable label and the fixed topic
summary. Tables are checked against the enum at import time, so adding a
topic without filling every table fails immediately.

Dependencies: None
System role: Topic vocabulary for query composition and insights
"""

from enum import Enum
from types import MappingProxyType


class InvestmentTopic(str, Enum):
    """Topics the insight operation can focus on."""

    INVESTMENT_PHILOSOPHY = "investment_philosophy"
    RISK_MANAGEMENT = "risk_management"
    MARKET_TIMING = "market_timing"
    BUSINESS_QUALITY = "business_quality"
    MANAGEMENT_EVALUATION = "management_evaluation"
    DIVIDEND_POLICY = "dividend_policy"
    ACQUISITIONS = "acquisitions"
    ECONOMIC_OUTLOOK = "economic_outlook"


DEFAULT_PRINCIPLE = "Investment Insight"
DEFAULT_TOPIC_SUMMARY = "Investment insights from Berkshire Hathaway letters"

TOPIC_QUERIES = MappingProxyType({
    InvestmentTopic.INVESTMENT_PHILOSOPHY: "investment philosophy value investing intrinsic value long-term",
    InvestmentTopic.RISK_MANAGEMENT: "risk management diversification margin safety permanent loss",
    InvestmentTopic.MARKET_TIMING: "market timing volatility Mr. Market emotional discipline",
    InvestmentTopic.BUSINESS_QUALITY: "business quality competitive moat durable advantage",
    InvestmentTopic.MANAGEMENT_EVALUATION: "management quality leadership integrity capital allocation",
    InvestmentTopic.DIVIDEND_POLICY: "dividends dividend policy shareholder returns capital",
    InvestmentTopic.ACQUISITIONS: "acquisitions mergers buyout criteria business purchase",
    InvestmentTopic.ECONOMIC_OUTLOOK: "economic outlook inflation interest rates recession growth",
})

TOPIC_LABELS = MappingProxyType({
    InvestmentTopic.INVESTMENT_PHILOSOPHY: "Investment Philosophy",
    InvestmentTopic.RISK_MANAGEMENT: "Risk Management",
    InvestmentTopic.MARKET_TIMING: "Market Approach",
    InvestmentTopic.BUSINESS_QUALITY: "Business Quality",
    InvestmentTopic.MANAGEMENT_EVALUATION: "Management Evaluation",
    InvestmentTopic.DIVIDEND_POLICY: "Capital Returns",
    InvestmentTopic.ACQUISITIONS: "Acquisition Strategy",
    InvestmentTopic.ECONOMIC_OUTLOOK: "Economic Perspective",
})

TOPIC_SUMMARIES = MappingProxyType({
    InvestmentTopic.INVESTMENT_PHILOSOPHY: "Warren Buffett's investment philosophy centers on value investing principles",
    InvestmentTopic.RISK_MANAGEMENT: "Berkshire's approach to risk focuses on avoiding permanent loss of capital",
    InvestmentTopic.MARKET_TIMING: "Buffett consistently advocates against market timing and short-term thinking",
    InvestmentTopic.BUSINESS_QUALITY: "Quality businesses with durable competitive advantages are preferred",
    InvestmentTopic.MANAGEMENT_EVALUATION: "Strong, honest management teams are crucial for long-term success",
    InvestmentTopic.DIVIDEND_POLICY: "Capital allocation decisions prioritize shareholder value creation",
    InvestmentTopic.ACQUISITIONS: "Acquisition criteria emphasize quality management and sustainable advantages",
    InvestmentTopic.ECONOMIC_OUTLOOK: "Long-term economic optimism tempered by short-term caution",
})


def _check_exhaustive() -> None:
    for name, table in (
        ("TOPIC_QUERIES", TOPIC_QUERIES),
        ("TOPIC_LABELS", TOPIC_LABELS),
        ("TOPIC_SUMMARIES", TOPIC_SUMMARIES),
    ):
        missing = set(InvestmentTopic) - set(table)
        if missing:
            raise RuntimeError(f"{name} is missing topics: {sorted(t.value for t in missing)}")


_check_exhaustive()


def parse_topic(value: "str | InvestmentTopic") -> InvestmentTopic:
    """
    Resolve a caller-supplied topic name.

    Raises:
        ValueError: When the name is not one of the enumerated topics
    """
    if isinstance(value, InvestmentTopic):
        return value
    try:
        return InvestmentTopic(value.strip().lower())
    except ValueError:
        allowed = ", ".join(t.value for t in InvestmentTopic)
        raise ValueError(f"Unknown topic '{value}'. Expected one of: {allowed}") from None


def topic_label(topic: InvestmentTopic | None) -> str:
    """Human-readable label for a topic, or the generic fallback."""
    if topic is None:
        return DEFAULT_PRINCIPLE
    return TOPIC_LABELS[topic]


def topic_summary(topic: InvestmentTopic | None) -> str:
    if topic is None:
        return DEFAULT_TOPIC_SUMMARY
    return TOPIC_SUMMARIES[topic]
