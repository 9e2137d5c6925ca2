import pytest

from zerosetup.analysis import translate
from zerosetup.spec import (
    ArrowParentheses,
    IndentStyle,
    LegacyFormatterConfig,
    LineEnding,
    QuoteStyle,
    Semicolons,
    TrailingCommas,
    UnresolvedMappingError,
)


def legacy(**data):
    return LegacyFormatterConfig.from_mapping(data)


def test_scenario_single_quotes_without_semicolons():
    settings = translate(legacy(singleQuote=True, trailingComma="all", semi=False))

    assert settings.formatter_section() == {
        "indentStyle": "space",
        "indentWidth": 2,
        "lineWidth": 80,
        "lineEnding": "lf",
        "bracketSpacing": True,
    }
    assert settings.javascript_formatter_section() == {
        "quoteStyle": "single",
        "trailingCommas": "all",
        "semicolons": "asNeeded",
        "arrowParentheses": "always",
    }


def test_es5_requires_a_resolution():
    config = legacy(trailingComma="es5")

    assert config.needs_trailing_comma_resolution
    with pytest.raises(UnresolvedMappingError):
        translate(config)


@pytest.mark.parametrize("resolution", [TrailingCommas.NONE, TrailingCommas.ALL])
def test_es5_uses_the_supplied_resolution(resolution):
    settings = translate(legacy(trailingComma="es5"), resolution)
    assert settings.trailing_commas == resolution


def test_resolution_wins_over_legacy_value():
    settings = translate(legacy(trailingComma="all"), "none")
    assert settings.trailing_commas == TrailingCommas.NONE


def test_absent_fields_use_target_defaults():
    settings = translate(legacy())

    assert settings.quote_style == QuoteStyle.DOUBLE
    assert settings.trailing_commas == TrailingCommas.ALL
    assert settings.line_width == 80
    assert settings.indent_width == 2
    assert settings.indent_style == IndentStyle.SPACE
    assert settings.semicolons == Semicolons.ALWAYS
    assert settings.bracket_spacing is True
    assert settings.arrow_parentheses == ArrowParentheses.ALWAYS
    assert settings.line_ending == LineEnding.LF


def test_every_dimension_maps_independently():
    settings = translate(
        legacy(
            singleQuote=False,
            trailingComma="none",
            printWidth=120,
            tabWidth=4,
            useTabs=True,
            semi=True,
            bracketSpacing=False,
            arrowParens="avoid",
            endOfLine="crlf",
        )
    )

    assert settings.quote_style == QuoteStyle.DOUBLE
    assert settings.trailing_commas == TrailingCommas.NONE
    assert settings.line_width == 120
    assert settings.indent_width == 4
    assert settings.indent_style == IndentStyle.TAB
    assert settings.semicolons == Semicolons.ALWAYS
    assert settings.bracket_spacing is False
    assert settings.arrow_parentheses == ArrowParentheses.AS_NEEDED
    assert settings.line_ending == LineEnding.CRLF


@pytest.mark.parametrize(
    "end_of_line, expected",
    [("cr", LineEnding.CR), ("lf", LineEnding.LF), ("auto", LineEnding.LF)],
)
def test_line_endings(end_of_line, expected):
    assert translate(legacy(endOfLine=end_of_line)).line_ending == expected


def test_wrongly_typed_values_are_treated_as_absent():
    config = legacy(printWidth=True, tabWidth="4", semi="no", trailingComma="always")

    assert config.line_width is None
    assert config.indent_width is None
    assert config.use_semicolons is None
    assert config.trailing_comma_style is None
    assert translate(config).line_width == 80


def test_translation_is_deterministic():
    config = legacy(singleQuote=True, trailingComma="es5", printWidth=100)

    assert translate(config, "all") == translate(config, "all")

