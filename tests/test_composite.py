"""
Tests for the AND / OR combinators and their aggregation rules.
"""

import pytest
from structlog.testing import capture_logs

from fieldrules.validation import (
    CompositeValidator,
    ContainsValidator,
    MaxLengthValidator,
    MinLengthValidator,
    NotEmptyValidator,
    NumberRangeValidator,
    OrCompositeValidator,
    RegExpValidator,
    ValidationResult,
    ValidatorKind,
)


def passing(name="f"):
    return NotEmptyValidator(name, "x")


def failing(name="f"):
    return NotEmptyValidator(name, "")


class TestCompositeValidator:
    """AND semantics: all present children must pass, all are evaluated."""
    
    def test_empty_is_valid(self):
        """Test AND over no children is vacuously true."""
        result = CompositeValidator().validate()
        assert result == ValidationResult(valid=True, errors=())
    
    def test_all_pass(self):
        """Test every child passing."""
        result = CompositeValidator(passing(), passing()).validate()
        assert result.valid is True
        assert result.errors == ()
    
    def test_no_short_circuit(self):
        """Test every failing child is reported in construction order."""
        value = ""
        result = CompositeValidator(
            NotEmptyValidator("code", value),
            MinLengthValidator("code", value, 3),
            RegExpValidator("code", value, r"[A-Z]+"),
        ).validate()
        assert result.valid is False
        assert [e.kind for e in result.errors] == [
            ValidatorKind.NOT_EMPTY, ValidatorKind.MIN_LENGTH, ValidatorKind.REG_EXP]
    
    def test_error_count_is_sum_of_failures(self):
        """Test errors length equals the failing children's error counts."""
        result = CompositeValidator(failing("a"), passing("b"), failing("c")).validate()
        assert result.valid is False
        assert [e.field_name for e in result.errors] == ["a", "c"]
    
    def test_absent_slots_skipped(self):
        """Test None children count neither as pass nor fail."""
        assert CompositeValidator(None, passing(), None).validate().valid is True
        result = CompositeValidator(None, failing(), None).validate()
        assert result.valid is False
        assert len(result.errors) == 1
    
    def test_only_absent_slots_is_valid(self):
        """Test a composite of only absent slots behaves like an empty one."""
        assert CompositeValidator(None, None).validate().valid is True
    
    def test_present_and_validators(self):
        """Test the children are kept as given and present filters None."""
        a, b = passing("a"), failing("b")
        composite = CompositeValidator(a, None, b)
        assert composite.validators == (a, None, b)
        assert composite.present == (a, b)
    
    def test_nested_composite(self):
        """Test a composite child contributes its aggregated errors in place."""
        inner = CompositeValidator(failing("b"), failing("c"))
        result = CompositeValidator(failing("a"), inner, failing("d")).validate()
        assert [e.field_name for e in result.errors] == ["a", "b", "c", "d"]
    
    def test_multi_field(self):
        """Test one composite can span several fields."""
        result = CompositeValidator(
            NotEmptyValidator("name", "Ada"),
            NumberRangeValidator("age", "150", 0, 120),
            ContainsValidator("role", "root", ["admin", "user"]),
        ).validate()
        assert result.valid is False
        assert list(result.field_errors) == ["age", "role"]


class TestOrCompositeValidator:
    """OR semantics: one passing alternative is enough."""
    
    def test_empty_is_invalid(self):
        """Test OR over no children is false with no errors."""
        result = OrCompositeValidator().validate()
        assert result.valid is False
        assert result.errors == ()
    
    def test_only_absent_slots_is_invalid(self):
        """Test absent-only alternatives cannot succeed."""
        result = OrCompositeValidator(None, None).validate()
        assert result.valid is False
        assert result.errors == ()
    
    def test_one_pass_suppresses_errors(self):
        """Test a passing alternative hides the others' failures."""
        result = OrCompositeValidator(failing("a"), passing("b"), failing("c")).validate()
        assert result.valid is True
        assert result.errors == ()
    
    def test_all_fail_concatenates(self):
        """Test every alternative's errors are reported when all fail."""
        result = OrCompositeValidator(
            MinLengthValidator("x", "ab", 5),
            MaxLengthValidator("x", "ab", 1),
        ).validate()
        assert result.valid is False
        assert [e.kind for e in result.errors] == [ValidatorKind.MIN_LENGTH, ValidatorKind.MAX_LENGTH]
    
    def test_all_children_evaluated(self):
        """Test OR does not stop at the first passing alternative."""
        calls = []
        
        class Recording(NotEmptyValidator):
            def validate(self):
                calls.append(self.name)
                return super(Recording, self).validate()
        
        OrCompositeValidator(Recording("a", "x"), Recording("b", "x")).validate()
        assert calls == ["a", "b"]
    
    def test_nested_in_and(self):
        """Test OR inside AND, and AND inside OR."""
        either = OrCompositeValidator(failing("a"), passing("b"))
        assert CompositeValidator(either, passing("c")).validate().valid is True
        
        both = CompositeValidator(failing("a"), failing("b"))
        result = OrCompositeValidator(both, failing("c")).validate()
        assert [e.field_name for e in result.errors] == ["a", "b", "c"]
    
    def test_empty_or_inside_and(self):
        """Test an empty OR fails its parent AND without adding errors."""
        result = CompositeValidator(passing(), OrCompositeValidator()).validate()
        assert result.valid is False
        assert result.errors == ()


class TestOperators:
    """& and | build composites."""
    
    def test_and_operator(self):
        """Test & builds a flattened CompositeValidator."""
        a, b, c = passing("a"), failing("b"), failing("c")
        combined = a & b & c
        assert isinstance(combined, CompositeValidator)
        assert combined.validators == (a, b, c)
        assert [e.field_name for e in combined.validate().errors] == ["b", "c"]
    
    def test_or_operator(self):
        """Test | builds a flattened OrCompositeValidator."""
        a, b, c = failing("a"), failing("b"), passing("c")
        combined = a | b | c
        assert isinstance(combined, OrCompositeValidator)
        assert combined.validators == (a, b, c)
        assert combined.validate().valid is True
    
    def test_mixed_operators_nest(self):
        """Test mixing operators nests rather than flattens."""
        combined = (failing("a") | passing("b")) & failing("c")
        assert isinstance(combined, CompositeValidator)
        assert isinstance(combined.validators[0], OrCompositeValidator)
        assert [e.field_name for e in combined.validate().errors] == ["c"]
    
    def test_operator_with_absent_slot(self):
        """Test an absent right operand becomes a skipped slot."""
        combined = passing() & None
        assert combined.validators[1] is None
        assert combined.validate().valid is True


class TestEvaluationLogging:
    """Composite evaluation events are opt-in."""
    
    def test_silent_by_default(self, reset_logging):
        """Test nothing is logged unless enabled."""
        with capture_logs() as logs:
            CompositeValidator(failing()).validate()
        assert [e for e in logs if e["event"] == "composite_evaluated"] == []
    
    def test_logs_when_enabled(self, monkeypatch, reset_logging):
        """Test a debug event per composite when FIELDRULES_LOG_EVALUATIONS is set."""
        from fieldrules.config import get_settings
        monkeypatch.setenv("FIELDRULES_LOG_EVALUATIONS", "true")
        get_settings.cache_clear()
        
        with capture_logs() as logs:
            OrCompositeValidator(CompositeValidator(failing()), passing()).validate()
        
        events = [e for e in logs if e["event"] == "composite_evaluated"]
        assert [e["composite"] for e in events] == ["and", "or"]
        assert events[0]["valid"] is False
        assert events[0]["error_count"] == 1
        assert events[1]["valid"] is True
        assert events[1]["children"] == 2
        assert events[1]["log_level"] == "debug"


class TestChildChecks:
    """Composite children must be validators or absent slots."""
    
    @pytest.mark.parametrize("composite", [CompositeValidator, OrCompositeValidator])
    def test_non_validator_rejected(self, composite):
        """Test a bare value as a child is a construction error."""
        from fieldrules.errors import ValidatorConfigurationError
        with pytest.raises(ValidatorConfigurationError) as exc_info:
            composite(passing(), "abc")
        assert exc_info.value.error.metadata["parameter"] == "validators[1]"


class TestSettingsIsolation:
    """validate() depends only on state fixed at construction."""
    
    def test_bad_settings_do_not_break_validate(self, monkeypatch):
        """Test an invalid FIELDRULES_* value after construction cannot fault evaluation."""
        from fieldrules.config import get_settings
        and_rule = CompositeValidator(passing(), failing())
        or_rule = OrCompositeValidator(failing(), passing())
        
        monkeypatch.setenv("FIELDRULES_LOG_LEVEL", "verbose")
        get_settings.cache_clear()
        
        assert len(and_rule.validate().errors) == 1
        assert or_rule.validate().valid is True
    
    def test_logging_flag_fixed_at_construction(self, monkeypatch, reset_logging):
        """Test enabling evaluation logging later does not affect existing composites."""
        from fieldrules.config import get_settings
        rule = CompositeValidator(passing())
        
        monkeypatch.setenv("FIELDRULES_LOG_EVALUATIONS", "true")
        get_settings.cache_clear()
        
        with capture_logs() as logs:
            rule.validate()
            CompositeValidator(passing()).validate()
        events = [e for e in logs if e["event"] == "composite_evaluated"]
        assert len(events) == 1
        assert rule.log_evaluations is False
    
    def test_flag_ignored_by_equality(self, monkeypatch):
        """Test composites with the same children compare equal regardless of the logging flag."""
        from fieldrules.config import get_settings
        child = passing()
        before = CompositeValidator(child)
        monkeypatch.setenv("FIELDRULES_LOG_EVALUATIONS", "true")
        get_settings.cache_clear()
        assert CompositeValidator(child) == before
