#!/usr/bin/env python

"""Where synthesis dictionaries and tag lists live.

The data directory is, in order of preference, the directory passed in,
the MORPHSYNTH_DATA_DIR environment variable, or the data/ directory
shipped with the package. Each language has a subdirectory:

    <lang>/<lang>_synth.fst    compiled dictionary (SynthesisDictionary.save)
    <lang>/<lang>_synth.tsv    source lexicon, compiled on load if no .fst exists
    <lang>/<lang>_tags.txt     tag inventory, one tag per line
"""
import logging
import os
from pathlib import Path
from typing import Optional, Union

from morphsynth._private.exceptions import ResourceUnavailableError
from morphsynth.dictionary import SynthesisDictionary
from morphsynth.tags import TagInventory

logger = logging.getLogger(__file__)

DATA_DIR_ENV = "MORPHSYNTH_DATA_DIR"
BUNDLED_DATA_DIR = Path(__file__).parent / "data"


def data_dir(override: Optional[Union[str, Path]] = None) -> Path:
    if override is not None:
        return Path(override)
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env)
    return BUNDLED_DATA_DIR


def dictionary_path(lang: str, directory: Optional[Union[str, Path]] = None) -> Path:
    base = data_dir(directory) / lang
    compiled = base / f"{lang}_synth.fst"
    if compiled.exists():
        return compiled
    lexicon = base / f"{lang}_synth.tsv"
    if lexicon.exists():
        return lexicon
    raise ResourceUnavailableError(compiled, "no compiled dictionary or lexicon")


def tags_path(lang: str, directory: Optional[Union[str, Path]] = None) -> Path:
    return data_dir(directory) / lang / f"{lang}_tags.txt"


def load_dictionary(lang: str, directory: Optional[Union[str, Path]] = None) -> SynthesisDictionary:
    path = dictionary_path(lang, directory)
    if path.suffix == ".tsv":
        logger.info(f"No compiled dictionary for {lang}, compiling {path}")
        return SynthesisDictionary.from_lexicon(path)
    return SynthesisDictionary.load(path)


def load_tags(lang: str, directory: Optional[Union[str, Path]] = None) -> TagInventory:
    return TagInventory.load(tags_path(lang, directory))
