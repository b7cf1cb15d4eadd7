from morphsynth.dictionary import SynthesisDictionary, make_key
from morphsynth.tags import Tag, TagInventory, correct_tag
from morphsynth.pattern import TagPattern
from morphsynth.negation import NegationResolver
from morphsynth.synthesizer import AnalyzedToken, Synthesizer, PolishSynthesizer
from morphsynth._private.exceptions import ResourceUnavailableError, TagPatternError

__license__    = "Apache"
__version__    = "0.1"
__status__     = "Prototype"
