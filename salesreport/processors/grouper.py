"""Product grouping by regular expression rules.

A rule file holds one rule per line in the form::

    GROUP_NAME | GROUP_REGEX

Every product whose name contains a match for ``GROUP_REGEX`` is reported
under ``GROUP_NAME`` instead of its own name. Rules are tried in file order
and the first match wins, so several lines may feed the same group.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from ..errors import InvalidPatternError, InvalidRuleSyntaxError

logger = logging.getLogger(__name__)

RULE_SEPARATOR = '|'


@dataclass(frozen=True)
class GroupRule:
    """A named pattern that reassigns matching product names to a group."""

    name: str
    pattern: re.Pattern

    def matches(self, product_name: str) -> bool:
        return self.pattern.search(product_name) is not None


def parse_rule(line: str, source: str = '<rules>', line_number: int = 0) -> GroupRule:
    """Parse a single ``NAME | PATTERN`` line.

    The line is split on the first separator only, so the pattern itself may
    use ``|`` for alternation.

    Raises:
        InvalidRuleSyntaxError: If the separator is missing or a field is empty
        InvalidPatternError: If the pattern does not compile
    """
    name, sep, pattern_str = line.partition(RULE_SEPARATOR)
    if not sep:
        raise InvalidRuleSyntaxError(
            f"bad line format (missing {RULE_SEPARATOR}): {line.strip()}",
            source, line_number
        )
    name = name.strip()
    pattern_str = pattern_str.strip()
    if not name:
        raise InvalidRuleSyntaxError(f"missing group name: {line.strip()}", source, line_number)
    if not pattern_str:
        raise InvalidRuleSyntaxError(f"missing pattern: {line.strip()}", source, line_number)

    try:
        pattern = re.compile(pattern_str)
    except re.error as e:
        raise InvalidPatternError(
            f"invalid pattern {pattern_str!r}: {e}", source, line_number
        ) from e
    return GroupRule(name=name, pattern=pattern)


def load_rules(lines: Iterable[str], source: str = '<rules>') -> List[GroupRule]:
    """Load an ordered list of group rules.

    Args:
        lines: Rule lines; blank lines are skipped
        source: Name used in error messages (usually the file path)

    Returns:
        Rules in input order
    """
    rules = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        rules.append(parse_rule(line, source, line_number))
    logger.debug(f"Loaded {len(rules)} group rules from {source}")
    return rules


def load_rules_file(path: Union[str, Path]) -> List[GroupRule]:
    """Load group rules from a text file."""
    with open(path, 'r', encoding='utf-8-sig') as f:
        return load_rules(f, source=str(path))


class Grouper:
    """Maps raw product names to report keys."""

    def __init__(self, rules: Sequence[GroupRule] = ()):
        self.rules = tuple(rules)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'Grouper':
        return cls(load_rules_file(path))

    def group_for(self, product_name: str) -> Optional[str]:
        """Return the name of the first matching group, or None."""
        for rule in self.rules:
            if rule.matches(product_name):
                return rule.name
        return None

    def resolve(self, product_name: str) -> str:
        """Return the report key for a product name.

        Examples:
            >>> grouper = Grouper(load_rules(["A | foo", "B | foobar"]))
            >>> grouper.resolve("foobar widget")
            'A'
            >>> grouper.resolve("ungrouped product")
            'ungrouped product'
        """
        group = self.group_for(product_name)
        return product_name if group is None else group

    def __len__(self) -> int:
        return len(self.rules)
