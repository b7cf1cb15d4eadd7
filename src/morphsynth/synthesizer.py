#!/usr/bin/env python

"""Word form synthesis from a lemma and a tag or tag pattern."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from morphsynth._private.lazy import Lazy
from morphsynth.dictionary import SynthesisDictionary, make_key
from morphsynth.negation import POLISH, NegationResolver
from morphsynth.pattern import TagPattern, is_pattern
from morphsynth.tags import TagInventory, correct_tag
from morphsynth import resources

logger = logging.getLogger(__file__)


@dataclass(frozen=True)
class AnalyzedToken:
    """A lemma together with the tag the token currently carries, if any."""
    lemma: str
    pos_tag: Optional[str] = None


def _lazy(resource) -> Lazy:
    if callable(resource):
        return Lazy(resource)
    return Lazy(lambda: resource)


class Synthesizer:

    def __init__(self,
                 dictionary: Union[SynthesisDictionary, Callable[[], SynthesisDictionary]],
                 tags: Union[TagInventory, Iterable[str], Callable[[], Iterable[str]]],
                 negation: Optional[NegationResolver] = None):
        """Synthesize word forms from a dictionary and a tag inventory.

           Both resources may be given as ready objects or as zero-argument
           loaders; loaders run once, on first use. The tag inventory is only
           needed for patterns.
           Keyword arguments:
           negation -- rules for negated forms, or None for a language without them
        """
        self._dictionary = _lazy(dictionary)
        # a loader may return any iterable; keep a tuple so every pattern sees all tags
        self._tags = Lazy(lambda: tuple(tags())) if callable(tags) else _lazy(tuple(tags))
        self.negation = negation

    @property
    def dictionary(self) -> SynthesisDictionary:
        return self._dictionary.get()

    @property
    def tags(self) -> Iterable[str]:
        return self._tags.get()

    def synthesize(self, token: AnalyzedToken, pos_tag: Optional[str],
                   pos_tag_regexp: bool = False) -> Optional[List[str]]:
        """Return the forms of token's lemma for pos_tag.

           pos_tag is a concrete tag, or a regular expression over tags if
           pos_tag_regexp is True or it contains '+' (alternation). Returns
           None if pos_tag is None, and [] if nothing matches."""
        if pos_tag is None:
            return None
        if pos_tag_regexp or is_pattern(pos_tag):
            return self._synthesize_pattern(token, pos_tag)
        negated = self._is_negated(token, pos_tag)
        return self._word_forms(self.dictionary, token, pos_tag, negated)

    def synthesize_regexp(self, token: AnalyzedToken, pattern: Optional[str]) -> Optional[List[str]]:
        return self.synthesize(token, pattern, pos_tag_regexp=True)

    def get_pos_tag_correction(self, pos_tag: str) -> str:
        return correct_tag(pos_tag)

    def _synthesize_pattern(self, token: AnalyzedToken, pattern: str) -> List[str]:
        inventory = self.tags
        negated = self._is_negated(token, pattern)
        if negated:
            pattern = self.negation.pattern(pattern, negated)
        matcher = TagPattern(pattern)
        dictionary = self.dictionary
        forms = {}
        for tag in matcher.expand(inventory):
            forms.update(dict.fromkeys(self._word_forms(dictionary, token, tag, negated)))
        logger.debug(f"{token.lemma} {matcher.pattern}: {len(forms)} forms")
        return list(forms)

    def _is_negated(self, token: AnalyzedToken, pos_tag: str) -> bool:
        if self.negation is None:
            return False
        return self.negation.is_negated(token.pos_tag, pos_tag)

    def _word_forms(self, dictionary: SynthesisDictionary, token: AnalyzedToken,
                    pos_tag: str, negated: bool) -> List[str]:
        if self.negation is None:
            stems = (stem for stem, _ in dictionary.lookup(make_key(token.lemma, pos_tag)))
            return [stem for stem in stems if stem]
        key = make_key(token.lemma, self.negation.lookup_tag(pos_tag, negated))
        return self.negation.forms((stem for stem, _ in dictionary.lookup(key)), negated)


class PolishSynthesizer(Synthesizer):
    """Polish synthesizer, with dictionary and tags read from the data directory."""

    LANG = "pl"

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        super().__init__(
            dictionary=lambda: resources.load_dictionary(self.LANG, data_dir),
            tags=lambda: resources.load_tags(self.LANG, data_dir),
            negation=POLISH,
        )
