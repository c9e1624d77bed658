from typing import Dict

from summarize_ai.ai.errors import UnsupportedOptionError
from summarize_ai.schemas.summary import (
    SummarizationConfig,
    SummaryFormat,
    SummaryLength,
    SummaryTone,
)

LENGTH_PHRASES: Dict[SummaryLength, str] = {
    SummaryLength.BRIEF: "extremely concise (1-2 sentences)",
    SummaryLength.MEDIUM: "moderately detailed (1-2 paragraphs)",
    SummaryLength.DETAILED: "comprehensive and thorough",
}

TONE_PHRASES: Dict[SummaryTone, str] = {
    SummaryTone.PROFESSIONAL: "professional and business-like",
    SummaryTone.CASUAL: "conversational and easy-going",
    SummaryTone.ACADEMIC: "formal and rigorous",
    SummaryTone.SIMPLE: "easy to understand for a general audience",
}

FORMAT_PHRASES: Dict[SummaryFormat, str] = {
    SummaryFormat.PARAGRAPH: "as a cohesive paragraph",
    SummaryFormat.BULLETS: "as a structured bulleted list",
}


def _phrase(table: Dict, option: str, value) -> str:
    try:
        return table[value]
    except (KeyError, TypeError):
        raise UnsupportedOptionError(f"Unsupported {option} option: {value!r}")


def translate(config: SummarizationConfig) -> str:
    """
    Build the system instruction for a summary from the chosen options.

    Pure and deterministic: the same config always yields the same string.
    """
    length = _phrase(LENGTH_PHRASES, "length", config.length)
    tone = _phrase(TONE_PHRASES, "tone", config.tone)
    fmt = _phrase(FORMAT_PHRASES, "format", config.format)

    return "\n".join(
        [
            "You are an expert NLP summarization assistant.",
            f"Your goal is to provide a {length} summary of the provided text.",
            f"The tone should be {tone}.",
            f"The format should be {fmt}.",
            "Ensure the core meaning is preserved while eliminating unnecessary fluff.",
            'Do not include any introductory remarks like "Here is the summary:". '
            "Just provide the content.",
        ]
    )
