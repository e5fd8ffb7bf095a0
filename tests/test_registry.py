"""Validator registry and rule application tests."""
import pytest

from tagvalidator.core.errors import ErrorCode
from tagvalidator.validation.parser import parse_tag
from tagvalidator.validation.registry import (
    PARAM_RULES,
    SIMPLE_RULES,
    RuleKind,
    ValidatorRegistry,
    as_text,
    format_message,
)
from tagvalidator.validation.rules import RuleInvocation


def invocation(tag: str) -> RuleInvocation:
    (inv,) = parse_tag(tag).unwrap()
    return inv


@pytest.fixture
def registry():
    return ValidatorRegistry()


# ---------- Resolution ----------


def test_builtin_tables_are_read_only():
    with pytest.raises(TypeError):
        SIMPLE_RULES["email"] = lambda s: True
    with pytest.raises(TypeError):
        PARAM_RULES["length"] = None


def test_resolves_simple_rule(registry):
    rule = registry.resolve(invocation("email")).unwrap()
    assert rule.kind is RuleKind.SIMPLE


@pytest.mark.parametrize("tag, args", [
    ("length(1|5)", (1, 5)),
    ("runelength(2|3)", (2, 3)),
    ("stringlength(0|10)", (0, 10)),
    ("range(-1.5|10)", (-1.5, 10.0)),
    ("in(a,b,c)", ("a", "b", "c")),
])
def test_resolves_parameterized_rule(registry, tag, args):
    rule = registry.resolve(invocation(tag)).unwrap()
    assert rule.kind is RuleKind.PARAMETERIZED
    assert rule.args == args


def test_unknown_rule(registry):
    error = registry.resolve(invocation("nope")).unwrap_err()
    assert error.code is ErrorCode.E8001_UNKNOWN_RULE
    assert error.message == "The following validator is invalid or can't be applied to the field: 'nope'"


@pytest.mark.parametrize("tag", ["length(abc)", "length(1)", "range(a|b)", "email(1)", "matches()"])
def test_malformed_parameters(registry, tag):
    error = registry.resolve(invocation(tag)).unwrap_err()
    assert error.code is ErrorCode.E8002_MALFORMED_PARAMETERS


def test_invalid_regex_is_malformed_with_cause(registry):
    inv = RuleInvocation(name="matches", order=0, params=("[",), raw_params="[")
    error = registry.resolve(inv).unwrap_err()
    assert error.code is ErrorCode.E8002_MALFORMED_PARAMETERS
    assert error.cause is not None


def test_custom_validator_shadows_builtin(registry):
    registry.register_custom("email", lambda ctx, value, root: True)
    assert registry.resolve(invocation("email")).unwrap().kind is RuleKind.CUSTOM


def test_resolve_uses_given_snapshot(registry):
    snapshot = registry.custom_snapshot()
    registry.register_custom("late", lambda ctx, value, root: True)
    assert "late" not in snapshot
    assert registry.resolve(invocation("late"), snapshot).is_err()
    assert registry.resolve(invocation("late")).is_ok()


def test_registries_do_not_share_custom_validators():
    first, second = ValidatorRegistry(), ValidatorRegistry()
    first.register_custom("mine", lambda ctx, value, root: True)
    assert first.resolve_custom("mine") is not None
    assert second.resolve_custom("mine") is None


def test_register_replaces_existing(registry):
    registry.register_custom("flag", lambda ctx, value, root: False)
    registry.register_custom("flag", lambda ctx, value, root: True)
    assert registry.resolve_custom("flag")(None, None, None) is True


@pytest.mark.parametrize("name", ["", "1abc", "has space", "required", "optional", "-"])
def test_register_rejects_bad_names(registry, name):
    with pytest.raises(ValueError):
        registry.register_custom(name, lambda ctx, value, root: True)


def test_register_rejects_non_callable(registry):
    with pytest.raises(TypeError):
        registry.register_custom("thing", "not callable")


# ---------- Application ----------


def test_failure_uses_generic_message(registry):
    result = registry.resolve(invocation("email")).unwrap().apply(None, "bob", None)
    assert not result.is_valid
    assert result.error_message == "bob does not validate as email"
    assert result.error_code is ErrorCode.E2005_CONSTRAINT_VIOLATION


def test_negated_rule(registry):
    rule = registry.resolve(invocation("!email")).unwrap()
    assert rule.apply(None, "bob", None).is_valid
    result = rule.apply(None, "a@b.io", None)
    assert result.error_message == "a@b.io does validate as email"


def test_predicate_errors_fail_the_rule():
    def strict_int(text):
        return int(text) > 0

    registry = ValidatorRegistry(simple={"positive": strict_int})
    result = registry.resolve(invocation("positive")).unwrap().apply(None, "²", None)
    assert not result.is_valid
    assert result.error_code is ErrorCode.E2005_CONSTRAINT_VIOLATION
    assert result.error_message == "² does not validate as positive"
    assert not registry.resolve(invocation("!positive")).unwrap().apply(None, "abc", None).is_valid


def test_custom_message_placeholders(registry):
    rule = registry.resolve(invocation("in(a,b)~%s is not allowed by %s")).unwrap()
    result = rule.apply(None, "z", None)
    assert result.error_message == "z is not allowed by in"
    assert result.custom_message


def test_simple_rules_see_text(registry):
    rule = registry.resolve(invocation("range(1|10)")).unwrap()
    assert rule.apply(None, 5, None).is_valid
    assert not rule.apply(None, 11, None).is_valid


def test_custom_rule_sees_raw_value_and_root(registry):
    seen = []
    registry.register_custom("spy", lambda ctx, value, root: seen.append((ctx, value, root)) or True)
    registry.resolve(invocation("spy")).unwrap().apply("ctx", [1, 2], "root")
    assert seen == [("ctx", [1, 2], "root")]


def test_custom_exception_text_is_the_message(registry):
    def explode(ctx, value, root):
        raise ValueError("value is haunted")

    registry.register_custom("haunted", explode)
    result = registry.resolve(invocation("haunted~ignored")).unwrap().apply(None, "x", None)
    assert not result.is_valid
    assert result.error_message == "value is haunted"
    assert result.error_code is ErrorCode.E2006_CUSTOM_VALIDATOR_ERROR


# ---------- Helpers ----------


@pytest.mark.parametrize("value, text", [
    ("abc", "abc"),
    (True, "true"),
    (False, "false"),
    (3.0, "3"),
    (2.5, "2.5"),
    (b"bytes", "bytes"),
    (42, "42"),
])
def test_as_text(value, text):
    assert as_text(value) == text


def test_format_message_leaves_extra_placeholders():
    assert format_message("%s via %s then %s", 1, "rule") == "1 via rule then %s"
