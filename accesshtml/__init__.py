"""AccessHTML — static WCAG 2.1 compliance scanning for HTML."""

__version__ = "0.1.0"

from accesshtml.checker import NoFilesFoundError, WCAGChecker  # noqa: E402
from accesshtml.config import ScanConfig  # noqa: E402
from accesshtml.engine import ComplianceEngine  # noqa: E402
from accesshtml.models import ComplianceLevel, ScanResult, Severity, Violation  # noqa: E402

__all__ = [
    "ComplianceEngine",
    "ComplianceLevel",
    "NoFilesFoundError",
    "ScanConfig",
    "ScanResult",
    "Severity",
    "Violation",
    "WCAGChecker",
    "__version__",
]
