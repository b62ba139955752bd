"""
Bundled sample corpus.

Six excerpts from the 2022 and 2023 shareholder letters, used to seed the
local store for offline development and as realistic test data.

Dependencies: letters_rag.models
System role: Development seed data
"""

from letters_rag.models.chunk import Chunk, ChunkMetadata

_LETTER_2023 = "2023-berkshire-hathaway-letter"
_LETTER_2022 = "2022-berkshire-hathaway-letter"


def _chunk(content: str, source: str, year: int, index: int, total: int) -> Chunk:
    return Chunk(
        content=content,
        metadata=ChunkMetadata(source=source, year=year, chunk_index=index, total_chunks=total),
    )


SAMPLE_CHUNKS: tuple[Chunk, ...] = (
    _chunk(
        "Warren Buffett has consistently advocated for long-term value investing, focusing on "
        "companies with strong competitive moats and excellent management teams. In his 2023 "
        "letter, he emphasized the importance of patience and discipline in investing, stating "
        "that time is the friend of the wonderful business and the enemy of the mediocre. Our "
        "approach has always been to buy wonderful businesses at fair prices rather than fair "
        "businesses at wonderful prices.",
        _LETTER_2023, 2023, 0, 3,
    ),
    _chunk(
        "Our policy regarding cryptocurrency remains unchanged: we do not view it as a productive "
        "asset. Unlike farms, apartment buildings, or businesses, Bitcoin produces nothing. Its "
        "value depends entirely on what others are willing to pay for it. This makes it purely "
        "speculative, and we prefer investments that generate intrinsic value over time through "
        "productive activities.",
        _LETTER_2023, 2023, 1, 3,
    ),
    _chunk(
        "We made several significant acquisitions in 2023, including increasing our stakes in "
        "Apple and Coca-Cola. These companies exemplify our investment criteria: strong brands, "
        "predictable earnings, excellent management, and reasonable prices. Apple, in particular, "
        "has become our largest holding due to its extraordinary consumer loyalty and ecosystem "
        "effects that create substantial competitive advantages.",
        _LETTER_2023, 2023, 2, 3,
    ),
    _chunk(
        "Market volatility is inevitable and should be viewed as an opportunity rather than a "
        "threat. When Mr. Market offers to buy or sell at foolish prices, the intelligent investor "
        "takes advantage. We never try to time the market; instead, we buy when we find wonderful "
        "businesses at attractive prices, regardless of current market sentiment or economic "
        "predictions.",
        _LETTER_2022, 2022, 0, 3,
    ),
    _chunk(
        "Management quality is perhaps the most important factor in our investment decisions. We "
        "look for leaders who think like owners, allocate capital wisely, and treat shareholders "
        "as partners. Charlie and I have found that exceptional managers can create substantial "
        "value even in ordinary businesses, while poor management can destroy value in otherwise "
        "excellent companies. We prefer managers who are honest about both successes and failures.",
        _LETTER_2022, 2022, 1, 3,
    ),
    _chunk(
        "Berkshire's strategy has evolved over decades but our core principles remain constant. "
        "We seek businesses with durable competitive advantages, strong free cash flow generation, "
        "and management teams that allocate capital effectively. Our holding period for truly "
        "wonderful businesses is forever, as these companies compound value over time through "
        "reinvestment and growth.",
        _LETTER_2022, 2022, 2, 3,
    ),
)
