"""English word form inference.

Derives the inflected forms of a word (verb tenses, noun plurals,
adjective degrees) in two passes:

1. Gloss extraction: dictionary definitions such as "past tense of run"
   or "plural of box" name the form directly.
2. Spelling fallback: when the definitions carry no such information,
   forms are guessed from the word's own suffix (-ing, -ed, -ies, -er ...).

Everything here is pure: no I/O, no shared state.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum, auto


class PartOfSpeech(StrEnum):
    """Parts of speech the engine knows how to inflect."""

    VERB = auto()
    NOUN = auto()
    ADJECTIVE = auto()
    ADVERB = auto()


class FormLabel(StrEnum):
    """Keys used in a form set."""

    BASE_FORM = "baseForm"
    # Verb
    PAST_TENSE = "pastTense"
    PAST_PARTICIPLE = "pastParticiple"
    PRESENT_PARTICIPLE = "presentParticiple"
    THIRD_PERSON_SINGULAR = "thirdPersonSingular"
    # Noun
    SINGULAR = "singular"
    PLURAL = "plural"
    # Adjective / adverb
    POSITIVE = "positive"
    COMPARATIVE = "comparative"
    SUPERLATIVE = "superlative"


@dataclass(frozen=True, slots=True)
class DictionarySense:
    """One part-of-speech block of a dictionary entry."""

    part_of_speech: str
    glosses: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class InferenceResult:
    """Chosen part of speech plus the inferred forms."""

    part_of_speech: PartOfSpeech
    forms: dict[str, str] = field(default_factory=dict)


def _pattern(phrase: str) -> re.Pattern[str]:
    return re.compile(phrase + r" of (\w+)", re.IGNORECASE | re.ASCII)


# (part of speech, label, pattern) in match order
GLOSS_PATTERNS: tuple[tuple[PartOfSpeech, FormLabel, re.Pattern[str]], ...] = (
    (PartOfSpeech.VERB, FormLabel.PAST_TENSE, _pattern("past tense")),
    (PartOfSpeech.VERB, FormLabel.PAST_PARTICIPLE, _pattern("past participle")),
    (PartOfSpeech.VERB, FormLabel.PRESENT_PARTICIPLE, _pattern("present participle")),
    (PartOfSpeech.VERB, FormLabel.THIRD_PERSON_SINGULAR, _pattern("third person singular")),
    (PartOfSpeech.VERB, FormLabel.PAST_TENSE, _pattern("simple past")),
    (PartOfSpeech.VERB, FormLabel.PRESENT_PARTICIPLE, _pattern("gerund")),
    (PartOfSpeech.NOUN, FormLabel.PLURAL, _pattern("plural")),
    (PartOfSpeech.NOUN, FormLabel.PLURAL, _pattern("plural form")),
    (PartOfSpeech.NOUN, FormLabel.PLURAL, _pattern("irregular plural")),
    (PartOfSpeech.ADJECTIVE, FormLabel.COMPARATIVE, _pattern("comparative")),
    (PartOfSpeech.ADJECTIVE, FormLabel.SUPERLATIVE, _pattern("superlative")),
    (PartOfSpeech.ADJECTIVE, FormLabel.COMPARATIVE, _pattern("comparative form")),
    (PartOfSpeech.ADJECTIVE, FormLabel.SUPERLATIVE, _pattern("superlative form")),
    (PartOfSpeech.ADVERB, FormLabel.COMPARATIVE, _pattern("comparative")),
    (PartOfSpeech.ADVERB, FormLabel.SUPERLATIVE, _pattern("superlative")),
)

_VOWELS = frozenset("aeiou")
_SIBILANT_ENDINGS = ("s", "sh", "ch", "x", "z")


# ============================================================================
# Spelling helpers
# ============================================================================


def is_consonant(char: str) -> bool:
    """Any letter outside a/e/i/o/u counts as a consonant, including y."""
    return char.lower() not in _VOWELS


def _ends_in_consonant_y(word: str) -> bool:
    return len(word) >= 2 and word.endswith("y") and is_consonant(word[-2])


def _strip_suffix(word: str, length: int) -> str:
    """Strip an inflectional suffix and undo consonant doubling.

    When the stem ends in two consonants after a vowel the last one is
    dropped: runn -> run, stopp -> stop, and also walk -> wal.
    """
    base = word[:-length]
    if (
        len(base) > 2
        and is_consonant(base[-1])
        and is_consonant(base[-2])
        and not is_consonant(base[-3])
    ):
        base = base[:-1]
    return base


def third_person_singular(verb: str) -> str:
    if verb.endswith(_SIBILANT_ENDINGS):
        return verb + "es"
    if _ends_in_consonant_y(verb):
        return verb[:-1] + "ies"
    return verb + "s"


def past_tense(verb: str) -> str:
    """Regular past tense. Irregular verbs are not special-cased."""
    if verb.endswith("e"):
        return verb + "d"
    if _ends_in_consonant_y(verb):
        return verb[:-1] + "ied"
    if verb.endswith("c"):
        return verb + "ked"
    return verb + "ed"


def past_participle(verb: str) -> str:
    return past_tense(verb)


def present_participle(verb: str) -> str:
    if verb.endswith("e"):
        return verb[:-1] + "ing"
    if verb.endswith("y"):
        return verb + "ing"
    if verb.endswith("c"):
        return verb + "king"
    return verb + "ing"


def plural_form(noun: str) -> str:
    """Pluralize a singular noun.

    Examples:
        >>> plural_form("box")
        'boxes'
        >>> plural_form("city")
        'cities'
        >>> plural_form("knife")
        'knives'
    """
    if noun.endswith(_SIBILANT_ENDINGS):
        return noun + "es"
    if _ends_in_consonant_y(noun):
        return noun[:-1] + "ies"
    if noun.endswith("f"):
        return noun[:-1] + "ves"
    if noun.endswith("fe"):
        return noun[:-2] + "ves"
    return noun + "s"


def singular_form(noun: str) -> str:
    """Guess the singular of a noun that looks plural (ends in s, length > 3).

    Nouns that do not look plural are returned unchanged.
    """
    if not (noun.endswith("s") and len(noun) > 3):
        return noun
    if noun.endswith("ies"):
        return noun[:-3] + "y"
    if noun.endswith("ves"):
        stem = noun[:-3]
        # knives -> knife, wolves -> wolf
        return stem + ("fe" if stem.endswith("i") else "f")
    if noun.endswith(("ches", "shes", "xes", "zes", "oes")):
        return noun[:-2]
    return noun[:-1]


# ============================================================================
# Spelling-based inference
# ============================================================================


def infer_verb_forms(word: str) -> dict[str, str]:
    """Infer verb forms from spelling.

    Args:
        word: A verb in base, -ing or -ed form

    Returns:
        Form set keyed by FormLabel values

    Examples:
        >>> infer_verb_forms("running")["baseForm"]
        'run'
        >>> infer_verb_forms("make")["pastTense"]
        'maked'
    """
    if word.endswith("ing") and len(word) > 3:
        base = _strip_suffix(word, 3)
        return {
            FormLabel.BASE_FORM: base,
            FormLabel.PRESENT_PARTICIPLE: word,
            FormLabel.THIRD_PERSON_SINGULAR: third_person_singular(base),
            FormLabel.PAST_TENSE: past_tense(base),
            FormLabel.PAST_PARTICIPLE: past_participle(base),
        }

    if word.endswith("ed") and len(word) > 2:
        base = _strip_suffix(word, 2)
        return {
            FormLabel.BASE_FORM: base,
            FormLabel.PAST_TENSE: word,
            FormLabel.PAST_PARTICIPLE: word,
            FormLabel.THIRD_PERSON_SINGULAR: third_person_singular(base),
            FormLabel.PRESENT_PARTICIPLE: present_participle(base),
        }

    return {
        FormLabel.BASE_FORM: word,
        FormLabel.THIRD_PERSON_SINGULAR: third_person_singular(word),
        FormLabel.PAST_TENSE: past_tense(word),
        FormLabel.PAST_PARTICIPLE: past_participle(word),
        FormLabel.PRESENT_PARTICIPLE: present_participle(word),
    }


def infer_noun_forms(word: str) -> dict[str, str]:
    """Infer singular and plural from spelling."""
    singular = singular_form(word)
    if singular != word:
        return {FormLabel.SINGULAR: singular, FormLabel.PLURAL: word}
    return {FormLabel.SINGULAR: word, FormLabel.PLURAL: plural_form(word)}


def infer_adjective_forms(word: str) -> dict[str, str]:
    """Infer positive, comparative and superlative degrees from spelling."""
    if word.endswith("er") and len(word) > 2:
        base = word[:-2]
        return {
            FormLabel.POSITIVE: base,
            FormLabel.COMPARATIVE: word,
            FormLabel.SUPERLATIVE: base + "est",
        }
    if word.endswith("est") and len(word) > 3:
        base = word[:-3]
        return {
            FormLabel.POSITIVE: base,
            FormLabel.COMPARATIVE: base + "er",
            FormLabel.SUPERLATIVE: word,
        }
    return {
        FormLabel.POSITIVE: word,
        FormLabel.COMPARATIVE: word + "er",
        FormLabel.SUPERLATIVE: word + "est",
    }


def infer_from_spelling(word: str, part_of_speech: PartOfSpeech) -> dict[str, str]:
    """Dispatch to the spelling rules for a part of speech.

    Adverbs have no spelling rule and yield nothing.
    """
    match part_of_speech:
        case PartOfSpeech.VERB:
            return infer_verb_forms(word)
        case PartOfSpeech.NOUN:
            return infer_noun_forms(word)
        case PartOfSpeech.ADJECTIVE:
            return infer_adjective_forms(word)
        case _:
            return {}


# ============================================================================
# Dictionary gloss extraction
# ============================================================================


def _as_part_of_speech(tag: str | None) -> PartOfSpeech | None:
    try:
        return PartOfSpeech((tag or "").strip().lower())
    except ValueError:
        return None


def choose_part_of_speech(senses: Iterable[DictionarySense]) -> PartOfSpeech:
    """Pick the headline part of speech of an entry.

    Verb wins over everything. Noun is the default and replaces anything
    but verb. Adjective and adverb only replace noun.
    """
    chosen = PartOfSpeech.NOUN
    for sense in senses:
        match _as_part_of_speech(sense.part_of_speech):
            case PartOfSpeech.VERB:
                chosen = PartOfSpeech.VERB
            case PartOfSpeech.NOUN:
                if chosen != PartOfSpeech.VERB:
                    chosen = PartOfSpeech.NOUN
            case PartOfSpeech.ADJECTIVE | PartOfSpeech.ADVERB as pos:
                if chosen == PartOfSpeech.NOUN:
                    chosen = pos
    return chosen


def extract_gloss_forms(
    senses: Iterable[DictionarySense],
    forms: dict[str, str],
) -> dict[str, str]:
    """Fill `forms` from phrases like "past tense of run" in the glosses.

    The first match per label wins; keys already in `forms` are kept.

    Args:
        senses: Dictionary senses in entry order
        forms: Form set to update in place

    Returns:
        The same `forms` mapping
    """
    for sense in senses:
        pos = _as_part_of_speech(sense.part_of_speech)
        if pos is None:
            continue
        patterns = [(label, regex) for p, label, regex in GLOSS_PATTERNS if p == pos]
        for gloss in sense.glosses:
            for label, regex in patterns:
                if label in forms:
                    continue
                match = regex.search(gloss or "")
                if match:
                    forms[label] = match.group(1)
    return forms


def infer_forms(
    word: str,
    senses: Iterable[DictionarySense] | None = None,
    part_of_speech: PartOfSpeech | str | None = None,
) -> InferenceResult:
    """Infer the part of speech and inflected forms of a word.

    Args:
        word: Lowercase headword
        senses: Dictionary senses, if any
        part_of_speech: Force a part of speech instead of choosing one
            from the senses

    Returns:
        InferenceResult with a fresh form set
    """
    senses = list(senses or ())
    pos = _as_part_of_speech(part_of_speech) if part_of_speech else None
    if pos is None:
        pos = choose_part_of_speech(senses)

    forms: dict[str, str] = {FormLabel.BASE_FORM: word}
    extract_gloss_forms(senses, forms)

    if len(forms) == 1:
        forms.update(infer_from_spelling(word, pos))

    # StrEnum keys compare equal to plain strings; normalise for callers
    return InferenceResult(
        part_of_speech=pos,
        forms={str(label): value for label, value in forms.items() if value},
    )
