# This must be the very first line to allow this package to coexist with other
# namespace packages in editable installs.
__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .models import (
    ArrowParentheses,
    CreateOptions,
    IndentStyle,
    LegacyFormatterConfig,
    LineEnding,
    MigrateOptions,
    MigrationResult,
    PackageManager,
    ProcessResult,
    ProjectContext,
    ProjectInfo,
    QuoteStyle,
    Semicolons,
    TargetFormatterSettings,
    TrailingCommas,
    ValidationReport,
)
from .interaction import (
    CANCELLED,
    Answered,
    Cancelled,
    PromptHandler,
    PromptOutcome,
    is_yes,
)
from .outcomes import Abort, Continue, Stop, StepOutcome
from .protocols import ProcessRunnerProtocol
from .exceptions import (
    ProcessError,
    SecurityViolation,
    TemplateError,
    UnresolvedMappingError,
    ValidationError,
    ZeroSetupError,
)

__all__ = [
    # Models
    "ArrowParentheses",
    "CreateOptions",
    "IndentStyle",
    "LegacyFormatterConfig",
    "LineEnding",
    "MigrateOptions",
    "MigrationResult",
    "PackageManager",
    "ProcessResult",
    "ProjectContext",
    "ProjectInfo",
    "QuoteStyle",
    "Semicolons",
    "TargetFormatterSettings",
    "TrailingCommas",
    "ValidationReport",
    # Interaction
    "CANCELLED",
    "Answered",
    "Cancelled",
    "PromptHandler",
    "PromptOutcome",
    "is_yes",
    # Step outcomes
    "Abort",
    "Continue",
    "Stop",
    "StepOutcome",
    # Protocols
    "ProcessRunnerProtocol",
    # Errors
    "ProcessError",
    "SecurityViolation",
    "TemplateError",
    "UnresolvedMappingError",
    "ValidationError",
    "ZeroSetupError",
]
