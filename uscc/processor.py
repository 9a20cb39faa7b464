"""USCC validation processor with a staged pipeline and structured results.

This module orchestrates the validation workflow:
    1. FORMAT: Length + character set
    2. DEPARTMENT: Registration department and organization category
    3. REGION: Coarse region-prefix whitelist
    4. ORG CHECKSUM: GB 11714 check character (mod 11)
    5. COMPOSITE CHECKSUM: GB 32100 check character (mod 31)

Example:
    >>> from uscc import USCCValidator
    >>> validator = USCCValidator()
    >>> result = validator.validate("91320213586657279T")
    >>> if result.is_pass():
    ...     print(f"Valid: {result.code}")
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional

from .config_loader import Config, get_default_config, load_config
from .constants import USCC_LENGTH
from .types import (
    DecisionStatus,
    FailureCause,
    RejectionReason,
    ValidationMetrics,
    ValidationResult,
    ValidationStage,
)
from .validator import (
    normalize_code,
    validate_composite_check_char,
    validate_department,
    validate_format,
    validate_org_check_char,
    validate_region,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
}


class USCCValidator:
    """Unified social credit code validator with structured results.

    Args:
        config_path: Optional path to config YAML file. If None, uses default config.

    Attributes:
        config: Full configuration object
    """

    def __init__(self, config_path: Optional[Path] = None):
        if config_path is None:
            self.config: Config = get_default_config()
        else:
            self.config: Config = load_config(config_path)

        logger.info(
            f"Initialized USCC validator: "
            f"max_workers={self.config.validator.batch.max_workers}, "
            f"log_rejections={self.config.validator.logging.log_rejections}"
        )

    def validate(self, code: object) -> ValidationResult:
        """Validate a code through the staged pipeline.

        Never raises; every failure becomes a REJECT result.

        Args:
            code: Candidate code, in any case

        Returns:
            ValidationResult with decision, cause and per-check metrics
        """
        metrics = ValidationMetrics()

        # ═══════════════════════════════════════════════════════════════
        # STAGE 1: FORMAT
        # ═══════════════════════════════════════════════════════════════
        if not isinstance(code, str) or not code.strip():
            return self._create_rejection(
                raw_input=code if isinstance(code, str) else "",
                cause=FailureCause.STRUCTURAL,
                reason=RejectionReason(
                    code="USCC-E001",
                    constant="EMPTY_INPUT",
                    message="Input is empty, whitespace-only or not a string",
                    stage=ValidationStage.FORMAT,
                ),
                metrics=metrics,
            )

        if len(code) != USCC_LENGTH:
            return self._create_rejection(
                raw_input=code,
                cause=FailureCause.STRUCTURAL,
                reason=RejectionReason(
                    code="USCC-E002",
                    constant="INVALID_LENGTH",
                    message=f"Code length {len(code)} != {USCC_LENGTH} (expected)",
                    stage=ValidationStage.FORMAT,
                ),
                metrics=metrics,
            )

        normalized = normalize_code(code)

        if not validate_format(normalized):
            return self._create_rejection(
                raw_input=code,
                cause=FailureCause.STRUCTURAL,
                reason=RejectionReason(
                    code="USCC-E003",
                    constant="INVALID_CHARACTER",
                    message="Code does not match pattern [0-9A-HJ-NPQRTUWXY]{18}",
                    stage=ValidationStage.FORMAT,
                ),
                metrics=metrics,
            )
        metrics.format_valid = True

        # ═══════════════════════════════════════════════════════════════
        # STAGE 2: DEPARTMENT / ORGANIZATION CATEGORY
        # ═══════════════════════════════════════════════════════════════
        if not validate_department(normalized):
            return self._create_rejection(
                raw_input=code,
                cause=FailureCause.POLICY,
                reason=RejectionReason(
                    code="USCC-E004",
                    constant="INVALID_DEPARTMENT",
                    message=f"Unrecognized department/category pair '{normalized[:2]}'",
                    stage=ValidationStage.DEPARTMENT,
                ),
                metrics=metrics,
            )
        metrics.department_valid = True

        # ═══════════════════════════════════════════════════════════════
        # STAGE 3: REGION PREFIX
        # ═══════════════════════════════════════════════════════════════
        if not validate_region(normalized):
            return self._create_rejection(
                raw_input=code,
                cause=FailureCause.POLICY,
                reason=RejectionReason(
                    code="USCC-E005",
                    constant="INVALID_REGION",
                    message=f"Region prefix '{normalized[2:4]}' is not recognized",
                    stage=ValidationStage.REGION,
                ),
                metrics=metrics,
            )
        metrics.region_valid = True

        # ═══════════════════════════════════════════════════════════════
        # STAGE 4: ORGANIZATION CHECKSUM (mod 11)
        # ═══════════════════════════════════════════════════════════════
        org_valid, org_expected, org_actual = validate_org_check_char(normalized)
        if self.config.validator.output.include_check_characters:
            metrics.org_check_expected = org_expected
            metrics.org_check_actual = org_actual

        if not org_valid:
            return self._create_rejection(
                raw_input=code,
                cause=FailureCause.CHECKSUM,
                reason=RejectionReason(
                    code="USCC-E006",
                    constant="ORG_CHECK_MISMATCH",
                    message=f"Organization check character mismatch: "
                    f"expected {org_expected}, got {org_actual}",
                    stage=ValidationStage.ORG_CHECKSUM,
                ),
                metrics=metrics,
            )
        metrics.org_check_valid = True

        # ═══════════════════════════════════════════════════════════════
        # STAGE 5: COMPOSITE CHECKSUM (mod 31)
        # ═══════════════════════════════════════════════════════════════
        composite_valid, composite_expected, composite_actual = (
            validate_composite_check_char(normalized)
        )
        if self.config.validator.output.include_check_characters:
            metrics.composite_check_expected = composite_expected
            metrics.composite_check_actual = composite_actual

        if not composite_valid:
            return self._create_rejection(
                raw_input=code,
                cause=FailureCause.CHECKSUM,
                reason=RejectionReason(
                    code="USCC-E007",
                    constant="COMPOSITE_CHECK_MISMATCH",
                    message=f"Composite check character mismatch: "
                    f"expected {composite_expected}, got {composite_actual}",
                    stage=ValidationStage.COMPOSITE_CHECKSUM,
                ),
                metrics=metrics,
            )
        metrics.composite_check_valid = True

        # ═══════════════════════════════════════════════════════════════
        # FINAL RESULT: PASS
        # ═══════════════════════════════════════════════════════════════
        return ValidationResult(
            decision=DecisionStatus.PASS,
            code=(
                normalized
                if self.config.validator.output.include_normalized_code
                else None
            ),
            raw_input=code,
            failure_cause=None,
            stage=ValidationStage.COMPOSITE_CHECKSUM,
            rejection_reason=RejectionReason(
                code="USCC-S000",
                constant="SUCCESS",
                message="Code validated successfully",
                stage=ValidationStage.COMPOSITE_CHECKSUM,
                severity="INFO",
            ),
            metrics=metrics,
        )

    def validate_batch(self, codes: Iterable[object]) -> List[ValidationResult]:
        """Validate many codes in parallel.

        Each code is validated independently; results keep input order.

        Args:
            codes: Candidate codes

        Returns:
            List of ValidationResult, one per input
        """
        codes = list(codes)
        if not codes:
            return []

        max_workers = min(self.config.validator.batch.max_workers, len(codes))
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(self.validate, codes))

        passed = sum(1 for result in results if result.is_pass())
        logger.info(
            f"Batch validation complete: {passed}/{len(results)} valid "
            f"(workers={max_workers})"
        )
        return results

    def _create_rejection(
        self,
        raw_input: str,
        cause: FailureCause,
        reason: RejectionReason,
        metrics: ValidationMetrics,
    ) -> ValidationResult:
        """Create a REJECT result and log it if configured.

        Args:
            raw_input: Input as received
            cause: Underlying failure cause
            reason: Rejection reason with error details
            metrics: Checks completed before the failure

        Returns:
            ValidationResult with REJECT decision
        """
        logging_config = self.config.validator.logging
        if logging_config.log_rejections:
            logger.log(
                _LOG_LEVELS[logging_config.rejection_level],
                f"Rejected '{raw_input}': {reason.code} {reason.constant} - {reason.message}",
            )

        return ValidationResult(
            decision=DecisionStatus.REJECT,
            code=None,
            raw_input=raw_input,
            failure_cause=cause,
            stage=reason.stage,
            rejection_reason=reason,
            metrics=metrics,
        )

    def get_processing_stats(self) -> dict:
        """Get validator statistics.

        Returns:
            Dictionary with validator configuration
        """
        return {
            "max_workers": self.config.validator.batch.max_workers,
            "log_rejections": self.config.validator.logging.log_rejections,
            "rejection_level": self.config.validator.logging.rejection_level,
            "include_check_characters": self.config.validator.output.include_check_characters,
            "include_normalized_code": self.config.validator.output.include_normalized_code,
        }
