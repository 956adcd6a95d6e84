import json

import pytest

from app.core.settings import Settings
from app.services.analyzer import (
    STAT_AVG_WORDS,
    STAT_NUMBERS,
    STAT_SENTENCES,
    STAT_WORDS,
    SUMMARY_FALLBACK,
    TextAnalyzer,
    build_key_points,
    build_summary,
)
from conftest import GROWTH_TEXT, PLAIN_TEXT


def test_growth_scenario(analyzer):
    result = analyzer.analyze(GROWTH_TEXT)

    assert [n.value for n in result.chart_data.numbers if n.value == 25] == [25.0]
    assert [t.period for t in result.chart_data.timeline] == ["2023"]
    assert result.chart_data.timeline[0].events == ["Рост составил 25% в 2023 году"]
    assert result.summary == "Рост составил 25% в 2023 году. Это хороший результат"
    assert result.key_points == ["Рост составил 25% в 2023 году"]


def test_statistics_fixed_labels_and_values(analyzer):
    result = analyzer.analyze(GROWTH_TEXT)

    assert [(s.label, s.value) for s in result.statistics] == [
        (STAT_WORDS, "9"),
        (STAT_SENTENCES, "2"),
        (STAT_AVG_WORDS, "5"),
        (STAT_NUMBERS, "2"),
    ]


def test_plain_text_has_no_chart_data(analyzer):
    result = analyzer.analyze(PLAIN_TEXT)

    assert result.chart_data.numbers == []
    assert result.chart_data.categories == []
    assert result.chart_data.timeline == []
    assert result.chart_data.is_empty
    assert result.themes == ["просто", "текст", "особых", "данных", "вообще"]


def test_stop_words_only_yield_no_themes(analyzer):
    result = analyzer.analyze("Это то, что как и когда. Но также между!")
    assert result.themes == []


def test_no_sentences_uses_fallbacks(analyzer):
    result = analyzer.analyze("...")

    assert result.summary == SUMMARY_FALLBACK
    assert result.key_points == []
    assert [s.value for s in result.statistics] == ["1", "0", "0", "0"]


def test_numbers_and_timeline_are_capped_in_scan_order(analyzer):
    numbers_text = " ".join(str(i) for i in range(1, 16)) + "."
    result = analyzer.analyze(numbers_text)

    assert [n.value for n in result.chart_data.numbers] == [float(i) for i in range(1, 11)]
    assert result.statistics[3].value == "15"

    years_text = " ".join(str(y) for y in range(2001, 2009)) + "."
    result = analyzer.analyze(years_text)
    assert [t.period for t in result.chart_data.timeline] == ["2001", "2002", "2003", "2004", "2005"]


def test_themes_capped_for_display(analyzer):
    result = analyzer.analyze("альфа бета гамма дельта эпсилон дзета тета каппа.")
    assert len(result.themes) == 6


def test_key_points_first_sentence_then_digit_sentences():
    sentences = ["Введение без цифр", "В 2020 было 5", "Третье 3", "Ещё 4 штуки", "Пятое 5"]
    assert build_key_points(sentences) == sentences[:4]


def test_key_points_deduplicated():
    sentences = ["1 раз", "2 раза", "3 раза", "4 раза"]
    assert build_key_points(sentences) == ["1 раз", "2 раза", "3 раза"]


def test_summary_joins_first_three_sentences():
    assert build_summary(["А", "Б", "В", "Г"]) == "А. Б. В"
    assert build_summary([]) == SUMMARY_FALLBACK


@pytest.mark.parametrize(
    "text",
    [
        GROWTH_TEXT,
        PLAIN_TEXT,
        "- пункт 1\n- пункт 2\nВ мае 2021 года выросло на 3,5%. В июне упало на 2%!",
        "1. 2. 3. 4. 5. 6. 7. 8. 9. 10. 11. 12.",
    ],
)
def test_result_invariants(analyzer, text):
    result = analyzer.analyze(text)

    assert len(result.key_points) <= 4
    assert len(set(result.key_points)) == len(result.key_points)
    assert len(result.statistics) == 4
    assert len(result.chart_data.numbers) <= 10
    assert len(result.chart_data.timeline) <= 5
    assert len(result.chart_data.categories) <= 1
    assert len(result.themes) <= 6
    assert result.summary


def test_analysis_is_idempotent(analyzer):
    text = "- пункт\nВ мае 2021 года рост 3,5%. Потом 2021 снова."
    first = json.dumps(analyzer.analyze(text).to_wire(), ensure_ascii=False)
    second = json.dumps(TextAnalyzer(Settings()).analyze(text).to_wire(), ensure_ascii=False)
    assert first == second


def test_wire_shape_uses_camel_case(analyzer):
    wire = analyzer.analyze(GROWTH_TEXT).to_wire()

    assert set(wire) == {"keyPoints", "statistics", "themes", "summary", "chartData"}
    assert set(wire["chartData"]) == {"numbers", "categories", "timeline"}


def test_settings_override_caps():
    small = TextAnalyzer(Settings(max_numbers=2, max_key_points=1))
    result = small.analyze("1 2 3. 4 5.")

    assert len(result.chart_data.numbers) == 2
    assert len(result.key_points) == 1
