"""Tag parser tests."""
import pytest

from tagvalidator.core.errors import ErrorCode
from tagvalidator.validation.parser import parse_tag, split_top_level
from tagvalidator.validation.rules import RuleSet


# ---------- split_top_level ----------


def test_split_ignores_separators_inside_parentheses():
    assert split_top_level("a,in(b,c),d", ",") == ["a", "in(b,c)", "d"]


def test_split_keeps_escaped_parenthesis_out_of_depth():
    assert split_top_level(r"matches(^\($),email", ",") == [r"matches(^\($)", "email"]


def test_split_treats_message_text_literally():
    assert split_top_level("numeric~a)b,email", ",", literal_after="~") == ["numeric~a)b", "email"]
    assert split_top_level("numeric~a)b,email", ",") is None


@pytest.mark.parametrize("text", ["a(b", "a)b(", "in((a)"])
def test_split_rejects_unbalanced(text):
    assert split_top_level(text, ",") is None


# ---------- parse_tag ----------


@pytest.mark.parametrize("tag", [None, "", "   "])
def test_empty_declaration_yields_empty_ruleset(tag):
    rules = parse_tag(tag).unwrap()
    assert rules.is_empty
    assert rules == RuleSet.empty()


def test_rules_keep_declaration_order():
    rules = parse_tag("required,email,length(1|64)").unwrap()
    assert [r.name for r in rules] == ["email", "length"]
    assert [r.order for r in rules] == [1, 2]
    assert rules.required


def test_parameters_and_custom_message():
    (inv,) = parse_tag("length(1|5)~too long").unwrap()
    assert inv.name == "length"
    assert inv.raw_params == "1|5"
    assert inv.params == ("1|5",)
    assert inv.custom_message == "too long"
    assert inv.raw == "length(1|5)"


def test_parentheses_in_custom_message_are_text():
    rules = parse_tag("numeric~digits only :(,length(1|5)~keep it (short)").unwrap()
    assert [(r.name, r.custom_message) for r in rules] == [
        ("numeric", "digits only :("),
        ("length", "keep it (short)"),
    ]


def test_commas_inside_parameters_do_not_split_rules():
    rules = parse_tag("in(a,b,c),email").unwrap()
    assert len(rules) == 2
    assert rules.invocations[0].params == ("a", "b", "c")


def test_negation_prefix():
    (inv,) = parse_tag("!null").unwrap()
    assert inv.negated
    assert inv.name == "null"
    assert inv.display_name == "!null"


def test_markers():
    assert parse_tag("-").unwrap().skip
    optional = parse_tag("optional,email").unwrap()
    assert optional.optional and not optional.required
    required = parse_tag("required~please fill in %s").unwrap()
    assert required.required_message == "please fill in %s"


def test_required_by_default_respects_optional():
    assert parse_tag("email").unwrap().is_required(required_by_default=True)
    assert not parse_tag("optional,email").unwrap().is_required(required_by_default=True)
    assert not parse_tag("email").unwrap().is_required()


def test_escaped_parenthesis_in_regex():
    (inv,) = parse_tag(r"matches(^\($)").unwrap()
    assert inv.raw_params == r"^\($"


@pytest.mark.parametrize("tag", [
    "length(1|5",
    "email,,url",
    "length(1|5)x",
    "9lives",
    "email)(",
    "~message only",
])
def test_malformed_declarations(tag):
    result = parse_tag(tag)
    assert result.is_err()
    assert result.unwrap_err().code is ErrorCode.E8005_TAG_SYNTAX


@pytest.mark.parametrize("tag", [
    "required,length(1|5)~too long,!null,in(a,b)",
    "-",
    "optional,matches(^[a-z]+$)",
    "email~%s is not an email",
    "numeric~digits only :(,email",
])
def test_to_tag_reproduces_declaration(tag):
    assert parse_tag(tag).unwrap().to_tag() == tag


def test_to_tag_normalizes_whitespace():
    assert parse_tag(" email , url ").unwrap().to_tag() == "email,url"
