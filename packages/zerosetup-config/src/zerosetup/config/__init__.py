__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .constants import (
    MINIMUM_BIOME_VERSION,
    TARGET_PACKAGE,
    TEMPLATE_DESCRIPTIONS,
    TEMPLATES,
    VERSION,
)
from .loader import RuntimeConfig, load_runtime_config

__all__ = [
    "MINIMUM_BIOME_VERSION",
    "TARGET_PACKAGE",
    "TEMPLATE_DESCRIPTIONS",
    "TEMPLATES",
    "VERSION",
    "RuntimeConfig",
    "load_runtime_config",
]
