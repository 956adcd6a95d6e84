from __future__ import annotations

import math
import re
from collections import Counter
from typing import List

from app.schemas.analysis import Category, NumberMention, TimelineEntry


LIST_CATEGORY_NAME = "Основные пункты"

STOP_WORDS = frozenset(
    [
        "и", "в", "на", "с", "по", "для", "от", "до", "при", "за", "под", "над",
        "из", "к", "у", "о", "об", "про", "через", "между", "что", "как", "где",
        "когда", "кто", "который", "которая", "которое", "это", "то", "все",
        "весь", "его", "её", "их", "так", "также", "или", "но", "а", "да", "нет",
        "не", "ни",
    ]
)

# Stems so inflected forms ("марта", "сентябре") match as well
MONTH_STEMS = (
    "январ", "феврал", "март", "апрел", "ма[йя]", "июн",
    "июл", "август", "сентябр", "октябр", "ноябр", "декабр",
)

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_NUMBER_RE = re.compile(r"\d+(?:[.,]\d+)?%?")
_LIST_ITEM_RE = re.compile(r"^[ \t]*[-•][ \t]*([^\n]*)", re.MULTILINE)
_TIMELINE_RE = re.compile(
    # years are fenced by ASCII word chars only, so "2023г." still matches
    r"(?<![0-9A-Za-z_])\d{4}(?![0-9A-Za-z_])|\b(?:" + "|".join(MONTH_STEMS) + r")\w*\b",
    re.IGNORECASE,
)
_NON_ALNUM_RE = re.compile(r"[\W_]+")


# -----------------------------
# Tokenizer / segmenter
# -----------------------------
def split_sentences(text: str) -> List[str]:
    parts = (s.strip() for s in _SENTENCE_SPLIT_RE.split(text or ""))
    return [s for s in parts if s]


def split_words(text: str) -> List[str]:
    return (text or "").lower().split()


def avg_words_per_sentence(word_count: int, sentence_count: int) -> int:
    """Round-half-up average; 0 when there are no sentences."""
    if sentence_count <= 0:
        return 0
    return (2 * word_count + sentence_count) // (2 * sentence_count)


# -----------------------------
# Numbers
# -----------------------------
def _parse_number(token: str) -> float | None:
    try:
        value = float(token.replace("%", "").replace(",", "."))
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def extract_numbers(text: str, window: int = 50) -> List[NumberMention]:
    """Numeric literals with a +/- ``window`` character context.

    Labels follow the position among all matches, so a dropped match leaves a
    gap in the numbering.
    """
    out: List[NumberMention] = []
    for index, m in enumerate(_NUMBER_RE.finditer(text), start=1):
        value = _parse_number(m.group(0))
        if value is None:
            continue
        start = max(0, m.start() - window)
        end = min(len(text), m.end() + window)
        out.append(
            NumberMention(
                label=f"Значение {index}",
                value=value,
                context=text[start:end].strip(),
            )
        )
    return out


# -----------------------------
# Lists
# -----------------------------
def extract_list_items(text: str) -> List[str]:
    items = (m.group(1).strip() for m in _LIST_ITEM_RE.finditer(text))
    return [item for item in items if item]


def extract_categories(text: str) -> List[Category]:
    items = extract_list_items(text)
    if not items:
        return []
    return [Category(name=LIST_CATEGORY_NAME, items=items, count=len(items))]


# -----------------------------
# Timeline
# -----------------------------
def _enclosing_sentence(text: str, pos: int) -> str:
    start = text.rfind(".", 0, pos) + 1
    end = text.find(".", pos)
    if end == -1:
        end = len(text)
    return text[start:end].strip()


def extract_timeline(text: str) -> List[TimelineEntry]:
    out: List[TimelineEntry] = []
    for m in _TIMELINE_RE.finditer(text):
        sentence = _enclosing_sentence(text, m.start())
        if sentence:
            out.append(TimelineEntry(period=m.group(0), events=[sentence]))
    return out


# -----------------------------
# Themes
# -----------------------------
def clean_word(word: str) -> str:
    return _NON_ALNUM_RE.sub("", word).lower()


def word_frequencies(words: List[str]) -> Counter:
    freq: Counter = Counter()
    for word in words:
        w = clean_word(word)
        if len(w) > 3 and w not in STOP_WORDS:
            freq[w] += 1
    return freq


def rank_themes(words: List[str], limit: int = 6) -> List[str]:
    # most_common keeps first-seen order among equal counts
    return [w for w, _ in word_frequencies(words).most_common(limit)]
