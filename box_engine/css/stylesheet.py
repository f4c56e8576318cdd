"""
Stylesheet data model: declarations, rules and stylesheets.
"""

from typing import Iterable, List, Optional

from .selector import Selector
from .values import Value


class Declaration:
    """A single ``name: value`` pair."""

    __slots__ = ('name', 'value')

    def __init__(self, name: str, value: Value):
        self.name = name.lower()
        self.value = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Declaration):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __repr__(self) -> str:
        return f"Declaration({self.name!r}, {self.value!r})"


class Rule:
    """
    A rule: an ordered selector list (any one matching is enough) and the
    declarations it applies.
    """

    def __init__(self, selectors: Iterable[Selector], declarations: Iterable[Declaration]):
        """
        Initialize a rule.

        Args:
            selectors: Selectors in the order they are tried
            declarations: Declarations in source order

        Raises:
            ValueError: If the selector list is empty
        """
        self.selectors: List[Selector] = list(selectors)
        if not self.selectors:
            raise ValueError("A rule needs at least one selector")
        self.declarations: List[Declaration] = list(declarations)

    def __repr__(self) -> str:
        return f"Rule({self.selectors!r}, {len(self.declarations)} declarations)"


class Stylesheet:
    """An ordered sequence of rules; source order is preserved."""

    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        self.rules: List[Rule] = list(rules or [])

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def __repr__(self) -> str:
        return f"Stylesheet({len(self.rules)} rules)"
