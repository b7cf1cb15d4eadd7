#!/usr/bin/env python

"""Tag strings, the tag inventory and dotted-tag correction."""
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

from morphsynth._private.exceptions import ResourceUnavailableError

logger = logging.getLogger(__file__)

FIELD_SEPARATOR = ':'

_ABBREVIATED_FIELD = re.compile(r"[a-z]\.[a-z]")


@dataclass(frozen=True)
class Tag:
    """A tag split into its colon-separated fields, e.g. subst:sg:nom:m1."""
    fields: Tuple[str, ...]

    @classmethod
    def parse(cls, tag: str) -> 'Tag':
        return cls(tuple(tag.split(FIELD_SEPARATOR)))

    def __str__(self):
        return FIELD_SEPARATOR.join(self.fields)

    def __len__(self):
        return len(self.fields)

    def replace_field(self, index: int, value: str) -> 'Tag':
        fields = list(self.fields)
        fields[index] = value
        return Tag(tuple(fields))


def has_marker(tag: str, marker: str) -> bool:
    """True if marker occurs in tag past its first character.
    Markers never start a tag, so a hit at offset 0 does not count."""
    return tag.find(marker) > 0


def _expand_abbreviation(field: str) -> str:
    return "(.*" + field.replace(".", ".*|.*") + ".*)"


def correct_tag(tag: str) -> str:
    """Rewrite abbreviated alternatives such as m.f into a regex group.

       >>> correct_tag("adj:sg:nom:m.f:pos")
       'adj:sg:nom:(.*m.*|.*f.*):pos'

       Tags without a dotted field come back unchanged."""
    if "." not in tag:
        return tag
    parsed = Tag.parse(tag)
    corrected = parsed
    for i, field in enumerate(parsed.fields):
        if _ABBREVIATED_FIELD.search(field):
            corrected = corrected.replace_field(i, _expand_abbreviation(field))
    if corrected is parsed:
        return tag
    return str(corrected)


class TagInventory:
    """All tags known for a language, in file order. Immutable once built."""

    def __init__(self, tags: Iterable[str]):
        self._tags = tuple(tags)

    @classmethod
    def load(cls, path: Union[str, Path], encoding: str = 'utf-8') -> 'TagInventory':
        """Read one tag per line, skipping blank lines and # comments."""
        path = Path(path)
        try:
            with path.open(encoding=encoding) as f:
                inventory = cls(_read_words(f))
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceUnavailableError(path, e) from e
        logger.info(f"Loaded {len(inventory)} tags from {path}")
        return inventory

    @property
    def tags(self) -> Tuple[str, ...]:
        return self._tags

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self):
        return len(self._tags)

    def __contains__(self, tag):
        return tag in self._tags

    def __repr__(self):
        return f"TagInventory({len(self._tags)} tags)"


def _read_words(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        yield line
