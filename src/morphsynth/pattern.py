#!/usr/bin/env python

"""Tag patterns: '+'-separated alternatives matched against a tag inventory."""
import re
from typing import Iterable, List

from morphsynth._private.exceptions import TagPatternError

ALTERNATION = '+'


def is_pattern(tag: str) -> bool:
    """A tag is a pattern if it has an alternation marker after its first character."""
    return tag.find(ALTERNATION) > 0


class TagPattern:

    def __init__(self, pattern: str):
        """Compile pattern, e.g. 'subst:sg:nom+subst:sg:gen'.
           Each '+' becomes a regex alternation and the whole expression
           must match a complete tag."""
        self.pattern = pattern
        self.expression = pattern.replace(ALTERNATION, '|')
        try:
            self.regex = re.compile(self.expression)
        except re.error as e:
            raise TagPatternError(pattern, str(e)) from e

    def matches(self, tag: str) -> bool:
        return self.regex.fullmatch(tag) is not None

    def expand(self, inventory: Iterable[str]) -> List[str]:
        """Return the inventory tags this pattern matches, in inventory order."""
        return [tag for tag in inventory if self.matches(tag)]

    def __repr__(self):
        return f"TagPattern({self.pattern!r})"
