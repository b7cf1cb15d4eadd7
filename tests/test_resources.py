import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import mock

from morphsynth import AnalyzedToken, PolishSynthesizer, ResourceUnavailableError, SynthesisDictionary
from morphsynth import resources


class TestDataDirectory(unittest.TestCase):
    """Locating dictionaries and tag lists"""

    def test_precedence(self):
        with mock.patch.dict(os.environ, {resources.DATA_DIR_ENV: "/from/env"}):
            self.assertEqual(resources.data_dir("/explicit"), Path("/explicit"))
            self.assertEqual(resources.data_dir(), Path("/from/env"))
        with mock.patch.dict(os.environ, {resources.DATA_DIR_ENV: ""}):
            self.assertEqual(resources.data_dir(), resources.BUNDLED_DATA_DIR)

    def test_compiled_preferred(self):
        with TemporaryDirectory() as tmpdir:
            lang_dir = Path(tmpdir) / "pl"
            lang_dir.mkdir()
            (lang_dir / "pl_synth.tsv").write_text("kot\tkot\tsubst:sg:nom:m2\n", encoding="utf-8")
            self.assertEqual(resources.dictionary_path("pl", tmpdir).name, "pl_synth.tsv")
            dictionary = resources.load_dictionary("pl", tmpdir)
            dictionary.save(lang_dir / "pl_synth")
            self.assertEqual(resources.dictionary_path("pl", tmpdir).name, "pl_synth.fst")
            self.assertIsInstance(resources.load_dictionary("pl", tmpdir), SynthesisDictionary)

    def test_missing(self):
        with TemporaryDirectory() as tmpdir:
            with self.assertRaises(ResourceUnavailableError):
                resources.dictionary_path("pl", tmpdir)
            with self.assertRaises(ResourceUnavailableError):
                resources.load_tags("pl", tmpdir)


class TestPolishSynthesizer(unittest.TestCase):
    """The sample Polish data shipped with the package"""

    @classmethod
    def setUpClass(cls):
        cls.synth = PolishSynthesizer(resources.BUNDLED_DATA_DIR)

    def test_exact(self):
        self.assertEqual(self.synth.synthesize(AnalyzedToken("kot"), "subst:sg:gen:m2"), ["kota"])
        self.assertIsNone(self.synth.synthesize(AnalyzedToken("kot"), None))

    def test_pattern(self):
        token = AnalyzedToken("kot", "subst:sg:nom:m2")
        self.assertEqual(self.synth.synthesize(token, "subst:sg:(nom|gen):m2", True), ["kot", "kota"])
        self.assertEqual(self.synth.synthesize(token, "subst:sg:(gen|acc):m2", True), ["kota"])
        self.assertEqual(self.synth.synthesize(token, "subst:sg:(loc|voc):m2", True), ["kocie"])

    def test_placeholder(self):
        self.assertEqual(self.synth.synthesize(AnalyzedToken("kot"), "subst:pl:voc:m2"), [])

    def test_negated(self):
        token = AnalyzedToken("bić", "fin:sg:ter:imperf")
        self.assertEqual(self.synth.synthesize(token, "ger:sg:nom:n2:imperf:neg"), ["niebicie"])
        self.assertEqual(self.synth.synthesize(token, "pact:sg:nom:(m1|f):imperf:neg", True), ["niebijący", "niebijąca"])

    def test_corrected_tag(self):
        token = AnalyzedToken("dobry", "adj:sg:nom:m1:pos:aff")
        pattern = self.synth.get_pos_tag_correction("adj:sg:nom:m.f:pos:aff")
        self.assertEqual(self.synth.synthesize(token, pattern, True), ["dobry", "dobra"])

    def test_degree(self):
        token = AnalyzedToken("dobry", "adj:sg:nom:m1:pos:neg")
        self.assertEqual(self.synth.synthesize(token, "adj:sg:nom:m1:sup"), ["najlepszy"])
        self.assertEqual(self.synth.synthesize(token, "adj:sg:nom:f:pos:aff"), ["niedobra"])


if __name__ == "__main__":
    unittest.main()
