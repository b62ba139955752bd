"""
Query composition.

Expands a raw question into the text handed to the index store. Parts are
joined by single spaces in a fixed order, because order changes lexical
scores: context, base query, topic expansions, keywords. With nothing to add
the base query is returned untouched.

Dependencies: letters_rag.core.topics
System role: Query rewriting with conversation context and topic vocabulary
"""

from collections.abc import Sequence

from letters_rag.core.topics import TOPIC_QUERIES, InvestmentTopic


def expand_topic(topic: "InvestmentTopic | str") -> str:
    """Canonical stub for an enumerated topic; free-form strings pass through."""
    if isinstance(topic, InvestmentTopic):
        return TOPIC_QUERIES[topic]
    return topic


def compose(
    base_query: str,
    context: str | None = None,
    topics: Sequence["InvestmentTopic | str"] | None = None,
    keywords: Sequence[str] | None = None,
) -> str:
    """
    Compose the query string sent to the store.

    Args:
        base_query: The caller's question
        context: Prior conversation text, placed first
        topics: Enumerated topics (expanded to their stubs) or free-form topic words
        keywords: Extra refinement keywords, placed last

    Returns:
        str: Composed query; `base_query` itself when nothing is added
    """
    extras = [expand_topic(topic) for topic in topics or ()] + list(keywords or ())
    extras = [part for part in extras if part]
    if not context and not extras:
        return base_query

    parts = [context] if context else []
    if base_query:
        parts.append(base_query)
    parts.extend(extras)
    return " ".join(parts)


def topic_query(topic: InvestmentTopic, keywords: Sequence[str] | None = None) -> str:
    """Query for a topic: its canonical stub followed by any keywords."""
    return compose("", topics=[topic], keywords=keywords)
