"""Type definitions for USCC validation.

This module defines the data structures returned by the validation pipeline,
including decisions, failure causes, rejection reasons and per-check metrics.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DecisionStatus(Enum):
    """Decision status for a validation result."""

    PASS = "pass"
    REJECT = "reject"


class FailureCause(Enum):
    """Underlying cause of a rejection."""

    STRUCTURAL = "structural"  # Empty input, wrong length or character set
    POLICY = "policy"  # Department/sub-code pair or region prefix
    CHECKSUM = "checksum"  # Organization (mod 11) or composite (mod 31)


class ValidationStage(Enum):
    """Validation stages, in evaluation order."""

    FORMAT = "format"
    DEPARTMENT = "department"
    REGION = "region"
    ORG_CHECKSUM = "org_checksum"
    COMPOSITE_CHECKSUM = "composite_checksum"


class RegistrationDepartment(Enum):
    """Registration department encoded by the first character."""

    ESTABLISHMENT = "1"  # Institutional establishment registries
    CIVIL_AFFAIRS = "5"
    INDUSTRY_AND_COMMERCE = "9"
    OTHER = "Y"

    @classmethod
    def from_char(cls, char: str) -> Optional["RegistrationDepartment"]:
        """Look up the department for a leading character.

        Args:
            char: First character of a normalized code

        Returns:
            Matching department, or None if the character encodes none
        """
        try:
            return cls(char)
        except ValueError:
            return None


@dataclass
class RejectionReason:
    """Structured rejection reason with error code and context.

    Attributes:
        code: Error code (e.g., "USCC-E001")
        constant: String constant for programmatic checking (e.g., "EMPTY_INPUT")
        message: Human-readable explanation
        stage: Validation stage where the decision was made
        severity: Severity level ("ERROR" or "INFO")
    """

    code: str
    constant: str
    message: str
    stage: ValidationStage
    severity: str = "ERROR"


@dataclass
class ValidationMetrics:
    """Per-check outcome for a validated code.

    Attributes:
        format_valid: Length and character set are valid
        department_valid: Department/sub-code pair is recognized
        region_valid: Region prefix is whitelisted
        org_check_valid: Organization-body check character matches
        composite_check_valid: Composite check character matches
        org_check_expected: Computed organization check character
        org_check_actual: Character found at index 16
        composite_check_expected: Computed composite check character
        composite_check_actual: Character found at index 17
    """

    format_valid: bool = False
    department_valid: bool = False
    region_valid: bool = False
    org_check_valid: bool = False
    composite_check_valid: bool = False
    org_check_expected: Optional[str] = None
    org_check_actual: Optional[str] = None
    composite_check_expected: Optional[str] = None
    composite_check_actual: Optional[str] = None


@dataclass
class ValidationResult:
    """Final validation result with decision and diagnostics.

    Attributes:
        decision: Final decision (PASS or REJECT)
        code: Normalized code if PASS, None if REJECT
        raw_input: Input as received ("" when it was not a string)
        failure_cause: Cause of rejection, None on PASS
        stage: Stage where the decision was made
        rejection_reason: Structured reason (success entry on PASS)
        metrics: Per-check outcome
    """

    decision: DecisionStatus
    code: Optional[str]
    raw_input: str
    failure_cause: Optional[FailureCause]
    stage: ValidationStage
    rejection_reason: RejectionReason
    metrics: ValidationMetrics

    def is_pass(self) -> bool:
        """Check if decision is PASS."""
        return self.decision == DecisionStatus.PASS

    def is_reject(self) -> bool:
        """Check if decision is REJECT."""
        return self.decision == DecisionStatus.REJECT
