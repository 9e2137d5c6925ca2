__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .known_files import (
    BIOME_CONFIG,
    ESLINT_CONFIGS,
    ESLINT_IGNORE,
    MANIFEST,
    PRETTIER_CONFIGS,
    PRETTIER_IGNORE,
)
from .detector import ProjectDetector, detect_package_manager
from .dependencies import DependencyClassifier, FORMATTER, LINTER
from .legacy import LegacyConfigReader
from .translator import translate
from .ignores import IgnorePatternAggregator, merge_includes, normalize_exclude
from .document import BiomeDocument

__all__ = [
    "BIOME_CONFIG",
    "ESLINT_CONFIGS",
    "ESLINT_IGNORE",
    "MANIFEST",
    "PRETTIER_CONFIGS",
    "PRETTIER_IGNORE",
    "ProjectDetector",
    "detect_package_manager",
    "DependencyClassifier",
    "FORMATTER",
    "LINTER",
    "LegacyConfigReader",
    "translate",
    "IgnorePatternAggregator",
    "merge_includes",
    "normalize_exclude",
    "BiomeDocument",
]
