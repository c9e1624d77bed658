from decimal import Decimal, ROUND_HALF_UP

from summarize_ai.schemas.summary import SummaryStats


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens in ``text``."""
    return len(text.split()) if text else 0


def reduction_percent(original_words: int, summary_words: int) -> int:
    """
    Percentage of words removed, rounded half away from zero.

    Negative when the summary is longer than the original; 0 when the
    original is empty.
    """
    if original_words == 0:
        return 0
    ratio = Decimal(100 * (original_words - summary_words)) / Decimal(original_words)
    # ROUND_HALF_UP rounds away from zero for negative values too
    return int(ratio.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def compute_stats(original_text: str, summary_text: str) -> SummaryStats:
    original_words = count_words(original_text)
    summary_words = count_words(summary_text)
    return SummaryStats(
        original_words=original_words,
        summary_words=summary_words,
        reduction_percent=reduction_percent(original_words, summary_words),
    )
