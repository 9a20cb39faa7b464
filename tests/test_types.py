"""Unit tests for USCC type definitions."""

from uscc.types import (
    DecisionStatus,
    FailureCause,
    RegistrationDepartment,
    RejectionReason,
    ValidationMetrics,
    ValidationResult,
    ValidationStage,
)


class TestDecisionStatus:
    """Test DecisionStatus enum."""

    def test_enum_values(self):
        assert DecisionStatus.PASS.value == "pass"
        assert DecisionStatus.REJECT.value == "reject"


class TestFailureCause:
    """Test FailureCause enum."""

    def test_enum_values(self):
        assert FailureCause.STRUCTURAL.value == "structural"
        assert FailureCause.POLICY.value == "policy"
        assert FailureCause.CHECKSUM.value == "checksum"


class TestValidationStage:
    """Test ValidationStage enum."""

    def test_evaluation_order(self):
        assert [stage.value for stage in ValidationStage] == [
            "format",
            "department",
            "region",
            "org_checksum",
            "composite_checksum",
        ]


class TestRegistrationDepartment:
    """Test RegistrationDepartment lookup."""

    def test_known_characters(self):
        assert RegistrationDepartment.from_char("1") == RegistrationDepartment.ESTABLISHMENT
        assert RegistrationDepartment.from_char("5") == RegistrationDepartment.CIVIL_AFFAIRS
        assert (
            RegistrationDepartment.from_char("9")
            == RegistrationDepartment.INDUSTRY_AND_COMMERCE
        )
        assert RegistrationDepartment.from_char("Y") == RegistrationDepartment.OTHER

    def test_unknown_characters(self):
        for char in ["0", "2", "8", "A", "y", ""]:
            assert RegistrationDepartment.from_char(char) is None


class TestRejectionReason:
    """Test RejectionReason dataclass."""

    def test_default_severity(self):
        reason = RejectionReason(
            code="USCC-E002",
            constant="INVALID_LENGTH",
            message="Code length 17 != 18 (expected)",
            stage=ValidationStage.FORMAT,
        )
        assert reason.severity == "ERROR"


class TestValidationMetrics:
    """Test ValidationMetrics defaults."""

    def test_defaults(self):
        metrics = ValidationMetrics()
        assert metrics.format_valid is False
        assert metrics.composite_check_valid is False
        assert metrics.org_check_expected is None
        assert metrics.composite_check_actual is None


class TestValidationResult:
    """Test ValidationResult helpers."""

    def _result(self, decision):
        return ValidationResult(
            decision=decision,
            code=None,
            raw_input="",
            failure_cause=None,
            stage=ValidationStage.FORMAT,
            rejection_reason=RejectionReason(
                code="USCC-E001",
                constant="EMPTY_INPUT",
                message="Input is empty",
                stage=ValidationStage.FORMAT,
            ),
            metrics=ValidationMetrics(),
        )

    def test_is_pass(self):
        result = self._result(DecisionStatus.PASS)
        assert result.is_pass() is True
        assert result.is_reject() is False

    def test_is_reject(self):
        result = self._result(DecisionStatus.REJECT)
        assert result.is_pass() is False
        assert result.is_reject() is True
