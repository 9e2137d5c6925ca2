from typing import Optional, Union

from zerosetup.spec import (
    ArrowParentheses,
    IndentStyle,
    LegacyFormatterConfig,
    LineEnding,
    QuoteStyle,
    Semicolons,
    TargetFormatterSettings,
    TrailingCommas,
    UnresolvedMappingError,
)

DEFAULT_LINE_WIDTH = 80
DEFAULT_INDENT_WIDTH = 2


def _trailing_commas(
    legacy: LegacyFormatterConfig,
    resolution: Optional[Union[TrailingCommas, str]],
) -> TrailingCommas:
    if resolution is not None:
        return TrailingCommas(resolution)
    if legacy.trailing_comma_style == "none":
        return TrailingCommas.NONE
    if legacy.trailing_comma_style == "es5":
        raise UnresolvedMappingError(
            "Prettier 'es5' trailing commas have no Biome equivalent; "
            "a resolution ('none' or 'all') must be supplied."
        )
    return TrailingCommas.ALL


def _line_ending(value: Optional[str]) -> LineEnding:
    if value == "crlf":
        return LineEnding.CRLF
    if value == "cr":
        return LineEnding.CR
    return LineEnding.LF


def translate(
    legacy: LegacyFormatterConfig,
    trailing_comma_resolution: Optional[Union[TrailingCommas, str]] = None,
) -> TargetFormatterSettings:
    """
    Maps Prettier settings onto Biome formatter settings.

    Pure: no I/O and no prompting. When the legacy trailing-comma style is
    "es5" the caller must resolve it first and pass the decision in
    `trailing_comma_resolution`; otherwise UnresolvedMappingError is raised.
    A supplied resolution always wins over the legacy value.
    """
    return TargetFormatterSettings(
        quote_style=QuoteStyle.SINGLE if legacy.use_single_quotes else QuoteStyle.DOUBLE,
        trailing_commas=_trailing_commas(legacy, trailing_comma_resolution),
        line_width=legacy.line_width or DEFAULT_LINE_WIDTH,
        indent_width=legacy.indent_width or DEFAULT_INDENT_WIDTH,
        indent_style=IndentStyle.TAB if legacy.use_tabs else IndentStyle.SPACE,
        semicolons=(
            Semicolons.AS_NEEDED
            if legacy.use_semicolons is False
            else Semicolons.ALWAYS
        ),
        bracket_spacing=legacy.bracket_spacing is not False,
        arrow_parentheses=(
            ArrowParentheses.AS_NEEDED
            if legacy.arrow_parens == "avoid"
            else ArrowParentheses.ALWAYS
        ),
        line_ending=_line_ending(legacy.line_ending),
    )
