__all__ = (
    "exc",
    "CharacterSet",
    "Charset",
    "IntegerSeed",
    "TextSeed",
    "Seed",
    "SeededStream",
    "coerce_seed",
    "generate",
    "check_requirements",
    "matches_pattern",
    "CharsetRule",
    "Policy",
    "DEFAULT_POLICY",
    "expand_charset",
    "load_policy",
)
__version__ = "0.1.0"

from . import exc
from .charset import CharacterSet, Charset
from .generator import generate
from .policy import DEFAULT_POLICY, CharsetRule, Policy, expand_charset, load_policy
from .stream import IntegerSeed, Seed, SeededStream, TextSeed, coerce_seed
from .validator import check_requirements, matches_pattern
