"""Tests for English word form inference."""

import pytest

from services.morphology import (
    DictionarySense,
    FormLabel,
    GLOSS_PATTERNS,
    PartOfSpeech,
    choose_part_of_speech,
    extract_gloss_forms,
    infer_adjective_forms,
    infer_forms,
    infer_noun_forms,
    infer_verb_forms,
    past_tense,
    plural_form,
    present_participle,
    singular_form,
    third_person_singular,
)


class TestVerbForms:
    @pytest.mark.parametrize("word", ["running", "singing", "making", "swimming", "playing"])
    def test_ing_word_is_its_own_present_participle(self, word):
        assert infer_verb_forms(word)["presentParticiple"] == word

    def test_undoes_consonant_doubling(self):
        forms = infer_verb_forms("running")
        assert forms["baseForm"] == "run"
        assert forms["thirdPersonSingular"] == "runs"
        assert forms["pastTense"] == "runed"
        assert forms["pastParticiple"] == "runed"

    def test_drops_last_of_any_two_consonants_after_a_vowel(self):
        assert infer_verb_forms("walking")["baseForm"] == "wal"
        assert infer_verb_forms("helped")["baseForm"] == "hel"
        assert infer_verb_forms("helped")["presentParticiple"] == "heling"

    def test_keeps_stem_ending_in_vowel_and_consonant(self):
        assert infer_verb_forms("playing")["baseForm"] == "play"
        assert infer_verb_forms("reading")["baseForm"] == "read"

    def test_ed_word(self):
        forms = infer_verb_forms("stopped")
        assert forms == {
            "baseForm": "stop",
            "pastTense": "stopped",
            "pastParticiple": "stopped",
            "thirdPersonSingular": "stops",
            "presentParticiple": "stoping",
        }

    def test_base_form_has_no_irregular_correction(self):
        forms = infer_verb_forms("make")
        assert forms["baseForm"] == "make"
        assert forms["pastTense"] == "maked"
        assert forms["pastParticiple"] == "maked"
        assert forms["presentParticiple"] == "making"
        assert forms["thirdPersonSingular"] == "makes"

    def test_go_becomes_goed(self):
        assert infer_verb_forms("go")["pastTense"] == "goed"

    def test_bare_suffix_is_treated_as_base(self):
        assert infer_verb_forms("ed")["baseForm"] == "ed"
        assert infer_verb_forms("ing")["baseForm"] == "ing"

    @pytest.mark.parametrize(
        "verb, expected",
        [("pass", "passes"), ("wish", "wishes"), ("watch", "watches"), ("fix", "fixes"),
         ("buzz", "buzzes"), ("cry", "cries"), ("play", "plays"), ("walk", "walks")],
    )
    def test_third_person_singular(self, verb, expected):
        assert third_person_singular(verb) == expected

    @pytest.mark.parametrize(
        "verb, expected",
        [("love", "loved"), ("cry", "cried"), ("play", "played"), ("panic", "panicked"), ("jump", "jumped")],
    )
    def test_past_tense(self, verb, expected):
        assert past_tense(verb) == expected

    @pytest.mark.parametrize(
        "verb, expected",
        [("make", "making"), ("play", "playing"), ("cry", "crying"), ("panic", "panicking"), ("jump", "jumping")],
    )
    def test_present_participle(self, verb, expected):
        assert present_participle(verb) == expected


class TestNounForms:
    def test_sibilant_plural(self):
        assert infer_noun_forms("boxes") == {"singular": "box", "plural": "boxes"}

    def test_ves_plural(self):
        assert infer_noun_forms("knives") == {"singular": "knife", "plural": "knives"}
        assert infer_noun_forms("wolves") == {"singular": "wolf", "plural": "wolves"}

    @pytest.mark.parametrize(
        "plural, singular",
        [("cities", "city"), ("churches", "church"), ("dishes", "dish"),
         ("tomatoes", "tomato"), ("books", "book")],
    )
    def test_plural_looking_nouns(self, plural, singular):
        assert infer_noun_forms(plural) == {"singular": singular, "plural": plural}

    def test_short_s_word_is_singular(self):
        assert infer_noun_forms("bus") == {"singular": "bus", "plural": "buses"}

    @pytest.mark.parametrize(
        "noun, expected",
        [("box", "boxes"), ("city", "cities"), ("day", "days"), ("leaf", "leaves"),
         ("knife", "knives"), ("cat", "cats")],
    )
    def test_plural_form(self, noun, expected):
        assert plural_form(noun) == expected

    @pytest.mark.parametrize("noun", ["cat", "book", "table", "pen", "garden"])
    def test_regular_plural_round_trip(self, noun):
        plural = plural_form(noun)
        assert plural == noun + "s"
        assert singular_form(plural) == noun


class TestAdjectiveForms:
    def test_comparative(self):
        assert infer_adjective_forms("faster") == {
            "positive": "fast",
            "comparative": "faster",
            "superlative": "fastest",
        }

    def test_superlative(self):
        assert infer_adjective_forms("fastest") == {
            "positive": "fast",
            "comparative": "faster",
            "superlative": "fastest",
        }

    def test_positive(self):
        assert infer_adjective_forms("tall") == {
            "positive": "tall",
            "comparative": "taller",
            "superlative": "tallest",
        }


class TestPartOfSpeech:
    def test_default_is_noun(self):
        assert choose_part_of_speech([]) == PartOfSpeech.NOUN

    def test_verb_wins(self):
        senses = [DictionarySense("noun"), DictionarySense("verb"), DictionarySense("adjective")]
        assert choose_part_of_speech(senses) == PartOfSpeech.VERB

    def test_adjective_overrides_noun(self):
        senses = [DictionarySense("noun"), DictionarySense("adjective")]
        assert choose_part_of_speech(senses) == PartOfSpeech.ADJECTIVE

    def test_later_noun_resets_adjective(self):
        senses = [DictionarySense("adjective"), DictionarySense("noun")]
        assert choose_part_of_speech(senses) == PartOfSpeech.NOUN

    def test_adverb_does_not_replace_adjective(self):
        senses = [DictionarySense("adjective"), DictionarySense("adverb")]
        assert choose_part_of_speech(senses) == PartOfSpeech.ADJECTIVE

    def test_unknown_tags_are_ignored(self):
        senses = [DictionarySense("interjection"), DictionarySense("adverb")]
        assert choose_part_of_speech(senses) == PartOfSpeech.ADVERB


class TestGlossExtraction:
    def test_pattern_table_is_static(self):
        labels = {(pos, label) for pos, label, _ in GLOSS_PATTERNS}
        assert (PartOfSpeech.VERB, FormLabel.PAST_TENSE) in labels
        assert (PartOfSpeech.ADVERB, FormLabel.SUPERLATIVE) in labels
        assert all(regex.flags & 2 for _, _, regex in GLOSS_PATTERNS)  # re.IGNORECASE

    def test_past_tense_gloss(self):
        senses = [DictionarySense("verb", ("Simple past tense of run.",))]
        result = infer_forms("ran", senses)
        assert result.part_of_speech == PartOfSpeech.VERB
        assert result.forms == {"baseForm": "ran", "pastTense": "run"}

    def test_first_match_wins(self):
        senses = [
            DictionarySense("verb", ("past tense of go", "simple past of wend")),
            DictionarySense("verb", ("past tense of went",)),
        ]
        forms = extract_gloss_forms(senses, {"baseForm": "went"})
        assert forms["pastTense"] == "go"

    def test_first_match_wins_within_one_gloss(self):
        senses = [DictionarySense("verb", ("past tense of go; simple past of wend",))]
        forms = extract_gloss_forms(senses, {"baseForm": "went"})
        assert forms["pastTense"] == "go"

    def test_existing_keys_are_not_overwritten(self):
        forms = {"baseForm": "x", "plural": "kept"}
        extract_gloss_forms([DictionarySense("noun", ("plural of ox",))], forms)
        assert forms["plural"] == "kept"

    def test_noun_and_adjective_patterns(self):
        senses = [
            DictionarySense("noun", ("Irregular plural of mouse",)),
            DictionarySense("adjective", ("comparative form of good", "superlative of good")),
        ]
        forms = infer_forms("better", senses).forms
        assert forms["plural"] == "mouse"
        assert forms["comparative"] == "good"
        assert forms["superlative"] == "good"

    def test_patterns_only_apply_to_their_part_of_speech(self):
        senses = [DictionarySense("noun", ("past tense of run",))]
        forms = extract_gloss_forms(senses, {})
        assert forms == {}

    def test_case_insensitive(self):
        senses = [DictionarySense("verb", ("PRESENT PARTICIPLE OF Swim",))]
        assert extract_gloss_forms(senses, {}) == {"presentParticiple": "Swim"}


class TestInferForms:
    def test_no_senses_falls_back_to_noun_spelling(self):
        result = infer_forms("cats")
        assert result.part_of_speech == PartOfSpeech.NOUN
        assert result.forms == {"baseForm": "cats", "singular": "cat", "plural": "cats"}

    def test_fallback_uses_chosen_part_of_speech(self):
        senses = [DictionarySense("verb", ("To move swiftly on foot.",))]
        result = infer_forms("running", senses)
        assert result.forms["baseForm"] == "run"
        assert result.forms["presentParticiple"] == "running"

    def test_fallback_skipped_when_gloss_found(self):
        senses = [DictionarySense("verb", ("past tense of run",))]
        forms = infer_forms("ran", senses).forms
        assert "thirdPersonSingular" not in forms
        assert "presentParticiple" not in forms

    def test_adverb_only_has_base_form(self):
        senses = [DictionarySense("adverb", ("In a quick manner.",))]
        result = infer_forms("quickly", senses)
        assert result.part_of_speech == PartOfSpeech.ADVERB
        assert result.forms == {"baseForm": "quickly"}

    def test_part_of_speech_override(self):
        result = infer_forms("faster", part_of_speech="adjective")
        assert result.part_of_speech == PartOfSpeech.ADJECTIVE
        assert result.forms["positive"] == "fast"

    def test_base_form_first_and_values_never_empty(self):
        for word, pos in [("running", "verb"), ("boxes", "noun"), ("faster", "adjective"), ("so", "adverb")]:
            forms = infer_forms(word, part_of_speech=pos).forms
            assert next(iter(forms)) == "baseForm"
            assert all(forms.values())

    def test_idempotent(self):
        senses = [DictionarySense("verb", ("gerund of swim",))]
        first = infer_forms("swimming", senses)
        second = infer_forms("swimming", senses)
        assert first == second
        assert first.forms is not second.forms
