from __future__ import annotations

import logging
import re
from typing import List

from app.schemas.analysis import AnalysisResult, ChartData, Statistic
from app.services.extractors import (
    avg_words_per_sentence,
    extract_categories,
    extract_numbers,
    extract_timeline,
    rank_themes,
    split_sentences,
    split_words,
)

logger = logging.getLogger(__name__)

SUMMARY_FALLBACK = "Не удалось создать краткое содержание"

STAT_WORDS = "Количество слов"
STAT_SENTENCES = "Количество предложений"
STAT_AVG_WORDS = "Слов в предложении (среднее)"
STAT_NUMBERS = "Найдено чисел"

_DIGIT_RE = re.compile(r"\d")


def build_key_points(sentences: List[str], limit: int = 4) -> List[str]:
    """First sentence plus up to three sentences that mention a digit."""
    candidates = sentences[:1] + [s for s in sentences if _DIGIT_RE.search(s)][:3]
    # dict keeps first occurrence order
    return list(dict.fromkeys(candidates))[:limit]


def build_summary(sentences: List[str]) -> str:
    summary = ". ".join(sentences[:3]).strip()
    return summary or SUMMARY_FALLBACK


def build_statistics(word_count: int, sentence_count: int, numbers_found: int) -> List[Statistic]:
    return [
        Statistic(label=STAT_WORDS, value=str(word_count)),
        Statistic(label=STAT_SENTENCES, value=str(sentence_count)),
        Statistic(label=STAT_AVG_WORDS, value=str(avg_words_per_sentence(word_count, sentence_count))),
        Statistic(label=STAT_NUMBERS, value=str(numbers_found)),
    ]


# -----------------------------
# Analyzer
# -----------------------------
class TextAnalyzer:
    """Stateless rule-based analysis of a single text."""

    def __init__(self, settings=None):
        self.settings = settings
        self.context_window = int(getattr(settings, "context_window", 50))
        self.max_numbers = int(getattr(settings, "max_numbers", 10))
        self.max_timeline = int(getattr(settings, "max_timeline", 5))
        self.max_key_points = int(getattr(settings, "max_key_points", 4))
        self.display_themes = int(getattr(settings, "display_themes", 6))

    def analyze(self, text: str) -> AnalysisResult:
        sentences = split_sentences(text)
        words = split_words(text)

        numbers = extract_numbers(text, window=self.context_window)
        categories = extract_categories(text)
        timeline = extract_timeline(text)
        themes = rank_themes(words, limit=self.display_themes)

        logger.debug(
            "Extracted %d numbers, %d list categories, %d timeline entries",
            len(numbers), len(categories), len(timeline),
        )

        return AnalysisResult(
            key_points=build_key_points(sentences, limit=self.max_key_points),
            statistics=build_statistics(len(words), len(sentences), len(numbers)),
            themes=themes,
            summary=build_summary(sentences),
            chart_data=ChartData(
                numbers=numbers[: self.max_numbers],
                categories=categories,
                timeline=timeline[: self.max_timeline],
            ),
        )
