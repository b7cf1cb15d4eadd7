#!/usr/bin/env python

"""Negated forms: tag rewriting and prefixing of synthesized stems."""
from dataclasses import dataclass
from typing import Iterable, List, Optional

from morphsynth.tags import has_marker


@dataclass(frozen=True)
class NegationResolver:
    """Negation rules of a language.

       The dictionary only lists the affirmative paradigm, so a negated
       form is looked up under the potentially-negated tag and the negation
       prefix is glued onto each stem found."""
    negation_tag: str = ':neg'
    potential_negation_tag: str = ':aff'
    comparative_tag: str = 'com'
    superlative_tag: str = 'sup'
    prefix: str = 'nie'

    def is_negated(self, token_tag: Optional[str], requested_tag: str) -> bool:
        """Negation is requested explicitly, or inherited from the token's
           tag unless the requested tag is a comparative or superlative."""
        if has_marker(requested_tag, self.negation_tag):
            return True
        # an untagged token carries no markers; only an explicit :neg requested above negates it
        if token_tag is None or not has_marker(token_tag, self.negation_tag):
            return False
        return not (has_marker(requested_tag, self.comparative_tag)
                    or has_marker(requested_tag, self.superlative_tag))

    def lookup_tag(self, tag: str, negated: bool) -> str:
        """The concrete tag to query the dictionary with."""
        if negated:
            return tag.replace(self.negation_tag, self.potential_negation_tag, 1)
        return tag

    def pattern(self, pattern: str, negated: bool) -> str:
        """Make a pattern match the affirmative paradigm tags: every negation
           marker turns into the potential-negation marker with an optional
           last character."""
        if negated:
            return pattern.replace(self.negation_tag, self.potential_negation_tag + '?')
        return pattern

    def forms(self, stems: Iterable[Optional[str]], negated: bool) -> List[str]:
        """Turn looked-up stems into word forms. Empty placeholder stems are dropped."""
        if negated:
            return [self.prefix + stem for stem in stems if stem]
        return [stem for stem in stems if stem]


POLISH = NegationResolver()
