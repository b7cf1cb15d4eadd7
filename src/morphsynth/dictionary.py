#!/usr/bin/env python

"""Synthesis dictionary: a pyfoma transducer from lemma|tag to word forms."""
import gzip
import logging
import pickle
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from pyfoma import FST
from tqdm import tqdm

from morphsynth._private.exceptions import ResourceUnavailableError

logger = logging.getLogger(__file__)

KEY_SEPARATOR = '|'
FST_SUFFIX = '.fst'

# rlg() treats these as quoting, escaping and epsilon alignment
_RLG_SPECIAL = re.compile(r"([\\' ])")


def make_key(lemma: str, tag: str) -> str:
    return lemma + KEY_SEPARATOR + tag


# '.' is pyfoma's wildcard; a literal dot is stored as this multichar symbol
DOT_SYMBOL = '<.>'


def _encode_dots(s: str) -> str:
    return s.replace('.', DOT_SYMBOL)


def _decode_dots(s: str) -> str:
    return s.replace(DOT_SYMBOL, '.')


def _rlg_escape(s: str) -> str:
    return _RLG_SPECIAL.sub(r"\\\1", s).replace('.', "'" + DOT_SYMBOL + "'")


def read_lexicon(path: Union[str, Path], encoding: str = 'utf-8') -> Iterator[Tuple[str, str, str]]:
    """Yield (form, lemma, tag) triples from a tab-separated lexicon.

    Format: one entry per line, form<TAB>lemma<TAB>tag
    Example: kota\tkot\tsubst:sg:gen:m2

    An empty form marks a placeholder entry; it is kept and filtered
    at synthesis time."""
    path = Path(path)
    try:
        with path.open(encoding=encoding) as f:
            for line_number, line in enumerate(f, 1):
                line = line.rstrip('\r\n')
                if not line.strip() or line.startswith('#'):
                    continue
                parts = line.split('\t')
                if len(parts) != 3:
                    logger.warning(f"{path}:{line_number}: expected 3 fields, got {len(parts)}")
                    continue
                form, lemma, tag = parts
                yield form, lemma.strip(), tag.strip()
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceUnavailableError(path, e) from e


class SynthesisDictionary:
    """Read-only lookup of word forms by lemma and tag.

       Keys are 'lemma|tag' strings, values the inflected forms."""

    def __init__(self, fst: FST):
        self.fst = fst

    @classmethod
    def compile(cls, entries: Iterable[Tuple[str, str, str]], progress=False) -> 'SynthesisDictionary':
        """Build a dictionary from (form, lemma, tag) triples.
           Keyword arguments:
           progress -- show a progress bar while reading entries
        """
        rules = []
        for form, lemma, tag in tqdm(entries, desc="Reading lexicon", unit=" entries", disable=not progress):
            rules.append(((_rlg_escape(make_key(lemma, tag)), _rlg_escape(form)), "#"))
        logger.info(f"Compiling {len(rules)} entries")
        fst = FST.rlg({"Root": rules}, "Root")
        fst = fst.determinize_as_dfa().minimize()
        logger.info(f"Compiled transducer with {len(fst.states)} states")
        return cls(fst)

    @classmethod
    def from_lexicon(cls, path: Union[str, Path], encoding='utf-8', progress=False) -> 'SynthesisDictionary':
        return cls.compile(read_lexicon(path, encoding=encoding), progress=progress)

    def save(self, path: Union[str, Path]) -> Path:
        """Save as a gzip-compressed pickle. Adds the .fst suffix if missing."""
        path = Path(path)
        if path.suffix != FST_SUFFIX:
            path = path.with_name(path.name + FST_SUFFIX)
        with gzip.open(path, 'wb') as f:
            pickle.dump(self.fst, f)
        logger.info(f"Saved dictionary to {path}")
        return path

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'SynthesisDictionary':
        """Load a dictionary written by save(). Plain pickles are accepted too."""
        path = Path(path)
        try:
            try:
                with gzip.open(path, 'rb') as f:
                    fst = pickle.load(f)
            except gzip.BadGzipFile:
                with path.open('rb') as f:
                    fst = pickle.load(f)
        except (OSError, EOFError, pickle.UnpicklingError) as e:
            raise ResourceUnavailableError(path, e) from e
        if not isinstance(fst, FST):
            raise ResourceUnavailableError(path, f"not a transducer: {type(fst).__name__}")
        logger.info(f"Loaded dictionary from {path}")
        return cls(fst)

    def lookup(self, key: str) -> List[Tuple[str, str]]:
        """Return (form, tag) pairs stored under key, or [] if there are none."""
        if not key or not set(key.replace('.', '')) <= self.fst.alphabet:
            return []
        if '.' in key and DOT_SYMBOL not in self.fst.alphabet:
            return []
        tag = key.split(KEY_SEPARATOR, 1)[-1]
        forms = sorted({_decode_dots(form) for form in self.fst.generate(_encode_dots(key))})
        logger.debug(f"lookup {key!r}: {forms}")
        return [(form, tag) for form in forms]

    def view(self, **kwargs):
        """Return the transducer as a graphviz.Digraph."""
        return self.fst.view(**kwargs)

    def __contains__(self, key):
        return bool(self.lookup(key))
