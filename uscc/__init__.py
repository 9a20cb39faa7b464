"""Unified Social Credit Code validation.

This package validates the 18-character unified social credit code (GB 32100-2015)
including the embedded organization code check character (GB 11714-1997).

Core Components:
    - types: Data structures (ValidationResult, RejectionReason, etc.)
    - constants: Alphabets, weights, department table and region prefixes
    - config_loader: Configuration loading with Pydantic validation
    - validator: Check functions and the boolean validate() contract
    - processor: Staged validator with structured results and batch support

Example:
    >>> from uscc import validate, USCCValidator
    >>> validate("91320213586657279T")
    True
    >>> result = USCCValidator().validate("91320213586657279A")
    >>> result.rejection_reason.constant
    'COMPOSITE_CHECK_MISMATCH'
"""

from .config_loader import (
    BatchConfig,
    Config,
    LoggingConfig,
    OutputConfig,
    ValidatorModuleConfig,
    get_default_config,
    load_config,
)
from .processor import USCCValidator
from .types import (
    DecisionStatus,
    FailureCause,
    RegistrationDepartment,
    RejectionReason,
    ValidationMetrics,
    ValidationResult,
    ValidationStage,
)
from .validator import (
    calculate_composite_check_char,
    calculate_org_check_char,
    normalize_code,
    validate,
    validate_composite_check_char,
    validate_department,
    validate_format,
    validate_org_check_char,
    validate_region,
)

__all__ = [
    # Types
    "DecisionStatus",
    "FailureCause",
    "RegistrationDepartment",
    "RejectionReason",
    "ValidationMetrics",
    "ValidationResult",
    "ValidationStage",
    # Configuration
    "Config",
    "ValidatorModuleConfig",
    "BatchConfig",
    "LoggingConfig",
    "OutputConfig",
    "load_config",
    "get_default_config",
    # Validation
    "validate",
    "normalize_code",
    "validate_format",
    "validate_department",
    "validate_region",
    "calculate_org_check_char",
    "calculate_composite_check_char",
    "validate_org_check_char",
    "validate_composite_check_char",
    # Processor
    "USCCValidator",
]
