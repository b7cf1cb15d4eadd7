#!/usr/bin/env python3

"""Command line: compile lexicons, synthesize forms, correct tags."""
import argparse
import logging
import sys

from morphsynth._private.exceptions import ResourceUnavailableError, TagPatternError
from morphsynth.dictionary import SynthesisDictionary
from morphsynth.negation import POLISH
from morphsynth.synthesizer import AnalyzedToken, Synthesizer
from morphsynth.tags import correct_tag
from morphsynth import resources

NEGATION_RULES = {"pl": POLISH}


def _compile(args):
    dictionary = SynthesisDictionary.from_lexicon(args.lexicon, encoding=args.encoding, progress=args.progress)
    path = dictionary.save(args.output)
    print(path)


def _synth(args):
    synthesizer = Synthesizer(
        dictionary=lambda: resources.load_dictionary(args.lang, args.data_dir),
        tags=lambda: resources.load_tags(args.lang, args.data_dir),
        negation=NEGATION_RULES.get(args.lang),
    )
    token = AnalyzedToken(args.lemma, args.token_tag)
    for form in synthesizer.synthesize(token, args.tag, args.pattern):
        print(form)


def _correct(args):
    print(correct_tag(args.tag))


def build_parser():
    parser = argparse.ArgumentParser(prog="morphsynth", description="Word form synthesis")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log more (repeat for debug)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("compile", help="compile a form<TAB>lemma<TAB>tag lexicon")
    p.add_argument("lexicon")
    p.add_argument("output", help="output file, .fst is appended if missing")
    p.add_argument("--encoding", default="utf-8")
    p.add_argument("--progress", action="store_true", help="show a progress bar")
    p.set_defaults(func=_compile)

    p = subparsers.add_parser("synth", help="print the forms of LEMMA for TAG")
    p.add_argument("lemma")
    p.add_argument("tag")
    p.add_argument("--token-tag", default=None, help="tag the token currently carries")
    p.add_argument("--pattern", action="store_true", help="treat TAG as a regular expression")
    p.add_argument("--lang", default="pl")
    p.add_argument("--data-dir", default=None)
    p.set_defaults(func=_synth)

    p = subparsers.add_parser("correct", help="expand dotted abbreviations in TAG")
    p.add_argument("tag")
    p.set_defaults(func=_correct)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    try:
        args.func(args)
    except (ResourceUnavailableError, TagPatternError) as e:
        print(f"morphsynth: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
