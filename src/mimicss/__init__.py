"""mimicss: shorten CSS class names across stylesheets and the programs that use them."""

from mimicss.config import MinifierConfig, MinifierOptions, load_config
from mimicss.errors import ConfigError, MimicssError, ParseError
from mimicss.minifier import ClassMinifier

__version__ = "0.1.0"

__all__ = [
    "ClassMinifier",
    "MinifierConfig",
    "MinifierOptions",
    "load_config",
    # errors
    "MimicssError",
    "ParseError",
    "ConfigError",
]
