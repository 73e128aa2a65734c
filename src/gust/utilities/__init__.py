"""Utility parsers, one per CSS property family."""

from gust.utilities.backgrounds import BackgroundParser, GradientStopParser
from gust.utilities.base import (
    BaseParser,
    ParserCategory,
    ParserMetadata,
    UtilityParser,
)
from gust.utilities.borders import (
    BorderRadiusParser,
    BorderWidthParser,
    DivideParser,
    OutlineParser,
    RingParser,
)
from gust.utilities.colors import COLOR_PARSERS, ColorParser
from gust.utilities.effects import (
    BlendModeParser,
    OpacityParser,
    ShadowParser,
    TextShadowParser,
)
from gust.utilities.filters import BACKDROP_FILTER, FILTER, FilterParser
from gust.utilities.flexbox import AlignmentParser, FlexParser
from gust.utilities.grid import GridParser
from gust.utilities.interactivity import (
    SCROLL_MARGIN,
    SCROLL_PADDING,
    InteractivityParser,
)
from gust.utilities.layout import InsetParser, LayoutParser
from gust.utilities.masks import MaskParser
from gust.utilities.properties import ArbitraryPropertyParser
from gust.utilities.prose import ProseParser
from gust.utilities.sizing import SizingParser
from gust.utilities.spacing import (
    MARGIN,
    PADDING,
    BoxSpacingParser,
    GapParser,
    SpaceBetweenParser,
)
from gust.utilities.svg import StrokeWidthParser
from gust.utilities.tables import TableParser
from gust.utilities.transforms import TransformParser
from gust.utilities.transitions import AnimationParser, TransitionParser
from gust.utilities.typography import TypographyParser

__all__ = [
    "BUILTIN_PARSERS",
    "BaseParser",
    "BoxSpacingParser",
    "ColorParser",
    "FilterParser",
    "ParserCategory",
    "ParserMetadata",
    "UtilityParser",
]

# Registration order breaks priority ties.
BUILTIN_PARSERS: list[UtilityParser] = [
    PADDING,
    MARGIN,
    SpaceBetweenParser(),
    GapParser(),
    SizingParser(),
    InsetParser(),
    LayoutParser(),
    FlexParser(),
    AlignmentParser(),
    GridParser(),
    TypographyParser(),
    ProseParser(),
    GradientStopParser(),
    BackgroundParser(),
    BorderWidthParser(),
    BorderRadiusParser(),
    OutlineParser(),
    RingParser(),
    DivideParser(),
    TableParser(),
    ShadowParser(),
    TextShadowParser(),
    MaskParser(),
    OpacityParser(),
    BlendModeParser(),
    FILTER,
    BACKDROP_FILTER,
    TransformParser(),
    TransitionParser(),
    AnimationParser(),
    InteractivityParser(),
    SCROLL_MARGIN,
    SCROLL_PADDING,
    StrokeWidthParser(),
    *COLOR_PARSERS,
    ArbitraryPropertyParser(),
]
