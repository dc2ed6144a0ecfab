"""Tests for the wordmark metric analyzer."""

import pytest

from modules.wordmark_analyzer import WordmarkAnalyzer, analyze_wordmark, infer_font_weight


@pytest.fixture
def analyzer(tmp_path):
    # empty fonts directory: fonts resolve through the system or Pillow's default
    return WordmarkAnalyzer(fonts_dir=tmp_path)


class TestFontWeight:
    @pytest.mark.parametrize(
        "font, expected",
        [
            ("Inter Thin", 0.7),
            ("Roboto Hairline", 0.7),
            ("Lato Light", 0.85),
            ("Inter Medium", 1.0),
            ("Poppins SemiBold", 1.15),
            ("Montserrat Bold", 1.3),
            ("Inter Black", 1.5),
            ("Avenir Heavy", 1.5),
            ("Inter", 1.0),
            ("", 1.0),
        ],
    )
    def test_keywords(self, font, expected):
        assert infer_font_weight(font) == expected


class TestCharacters:
    def test_ascenders_and_descenders(self, analyzer):
        result = analyzer.analyze("Gym", "Inter")
        assert result.has_descenders
        assert not result.has_ascenders

        result = analyzer.analyze("HOLT", "Inter")
        assert result.has_ascenders
        assert not result.has_descenders

    def test_neither(self, analyzer):
        result = analyzer.analyze("acme", "Inter")
        assert not result.has_ascenders
        assert not result.has_descenders
        assert result.character_count == 4


class TestMeasurement:
    def test_height_from_base_size(self, analyzer):
        assert analyzer.analyze("Acme", "Inter").estimated_height == pytest.approx(120)
        assert analyzer.analyze("Acme", "Inter", base_size=50).estimated_height == pytest.approx(60)

    def test_width_grows_with_text(self, analyzer):
        short = analyzer.analyze("Ac", "Inter")
        long = analyzer.analyze("Acme Corporation", "Inter")
        assert 0 < short.estimated_width < long.estimated_width

    def test_weight_formula(self, analyzer):
        result = analyzer.analyze("Brightline", "Inter Bold")
        width_factor = min((result.estimated_width / 10) / 100, 1.2)
        expected = (1.3 * 0.5 + min(10 / 8, 1.5) * 0.3 + width_factor * 0.2) / 2
        assert result.visual_weight == pytest.approx(expected)

    def test_bolder_font_is_heavier(self, analyzer):
        light = analyzer.analyze("Northwind", "Inter Light")
        bold = analyzer.analyze("Northwind", "Inter Bold")
        assert bold.visual_weight > light.visual_weight

    def test_empty_text(self, analyzer):
        result = analyzer.analyze("", "Inter")
        assert result.character_count == 0
        assert result.estimated_width == 0
        assert result.visual_weight == pytest.approx(0.25)

    def test_module_level_helper(self):
        result = analyze_wordmark("Acme", "Inter")
        assert result.to_dict()["characterCount"] == 4
