"""Tests for regex product grouping."""
import pytest

from ..errors import InvalidPatternError, InvalidRuleSyntaxError, RuleError
from ..processors.grouper import Grouper, load_rules, load_rules_file, parse_rule

def test_first_matching_rule_wins():
    """Test rule order decides, not the longest match."""
    grouper = Grouper(load_rules(["A | foo", "B | foobar"]))
    assert grouper.resolve("foobar widget") == "A"

    grouper = Grouper(load_rules(["B | foobar", "A | foo"]))
    assert grouper.resolve("foobar widget") == "B"
    assert grouper.resolve("foo widget") == "A"

def test_unmatched_name_is_returned_unchanged():
    """Test names matching no rule keep their own name."""
    grouper = Grouper(load_rules(["Foo | foo"]))
    assert grouper.resolve("ungrouped product") == "ungrouped product"
    assert grouper.group_for("ungrouped product") is None
    assert grouper.group_for("foo variant 1") == "Foo"

@pytest.mark.parametrize('name', ["", "Go mentoring", "foo", "  spaced  ", "Ünïcode"])
def test_empty_rule_set_is_identity(name):
    """Test resolve without rules returns its input."""
    assert Grouper().resolve(name) == name

def test_pattern_matches_anywhere():
    """Test patterns are searched, not anchored."""
    grouper = Grouper(load_rules(["Power | Power of Go"]))
    assert grouper.resolve("The Power of Go: Tools") == "Power"

def test_load_rules_trims_and_skips_blank_lines():
    """Test whitespace handling in rule lines."""
    rules = load_rules(["  Foo   |   foo  \n", "\n", "   \n", "Bar|bar"])
    assert [rule.name for rule in rules] == ["Foo", "Bar"]
    assert rules[0].pattern.pattern == "foo"
    assert rules[1].pattern.pattern == "bar"

def test_pattern_may_contain_alternation():
    """Test only the first separator splits name from pattern."""
    rules = load_rules(["Books | Love of Go|Power of Go"])
    assert rules[0].name == "Books"
    grouper = Grouper(rules)
    assert grouper.resolve("The Power of Go: Tests") == "Books"
    assert grouper.resolve("For the Love of Go") == "Books"

def test_duplicate_group_names_are_kept():
    """Test several rules may feed the same group."""
    rules = load_rules(["Go | Love of Go", "Go | Power of Go"])
    assert len(rules) == 2
    grouper = Grouper(rules)
    assert grouper.resolve("For the Love of Go") == "Go"
    assert grouper.resolve("The Power of Go") == "Go"

def test_missing_separator_raises_syntax_error():
    """Test a line without a separator is rejected with its line number."""
    with pytest.raises(InvalidRuleSyntaxError) as exc_info:
        load_rules(["Foo | foo", "", "Bar bar"], source="groups.txt")
    assert exc_info.value.line_number == 3
    assert exc_info.value.source == "groups.txt"
    assert "groups.txt, line 3" in str(exc_info.value)

@pytest.mark.parametrize('line', ["| foo", "Foo |", "  |  "])
def test_empty_fields_raise_syntax_error(line):
    """Test a rule needs both a name and a pattern."""
    with pytest.raises(InvalidRuleSyntaxError):
        parse_rule(line)

def test_bad_pattern_raises_pattern_error():
    """Test an uncompilable pattern is rejected."""
    with pytest.raises(InvalidPatternError) as exc_info:
        load_rules(["Foo | foo(", ])
    assert exc_info.value.line_number == 1
    assert isinstance(exc_info.value, RuleError)

def test_load_rules_file(rules_file):
    """Test loading rules from a file keeps file order."""
    rules = load_rules_file(rules_file)
    assert [rule.name for rule in rules] == ["The Power of Go: Tests", "For the Love of Go"]

    grouper = Grouper.from_file(rules_file)
    assert grouper.resolve("The Power of Go: Tests (Go 1.22 edition)") == "The Power of Go: Tests"
    assert grouper.resolve("For the Love of Go (Go 1.23 edition)") == "For the Love of Go"
    assert grouper.resolve("Buy For the Love of Go") == "Buy For the Love of Go"
    assert grouper.resolve("bogus product") == "bogus product"

def test_missing_rules_file_raises_os_error(tmp_path):
    """Test a missing rule file surfaces as an OSError."""
    with pytest.raises(OSError):
        load_rules_file(tmp_path / "missing.txt")

def test_rules_file_with_byte_order_mark(tmp_path):
    """Test a leading byte-order mark is not part of the first group name."""
    path = tmp_path / "bom.txt"
    path.write_text("Foo | foo\nBar | bar\n", encoding="utf-8-sig")
    rules = load_rules_file(path)
    assert [rule.name for rule in rules] == ["Foo", "Bar"]
