# coding=utf-8

import pytest

from snowstem.lang.snowball import english
from snowstem.lang.snowball.english import EnglishStemmer, WordState


def test_normalize_apostrophes():
    s = EnglishStemmer()
    assert s._normalize("’tis") == "tis"
    assert s._normalize("it‘s") == "it's"
    assert s._normalize("''s") == "'s"


def test_normalize_y():
    s = EnglishStemmer()
    assert s._normalize("youth") == "Youth"
    assert s._normalize("boyish") == "boYish"
    assert s._normalize("flying") == "flying"
    assert s._normalize("sayyid") == "saYyid"
    assert s._normalize("'yes") == "Yes"


@pytest.mark.parametrize("word,r1,r2", [
    ("beautiful", "iful", "ul"),
    ("beauty", "y", ""),
    ("beau", "", ""),
    ("animadversion", "imadversion", "adversion"),
    ("sprinkled", "kled", ""),
    ("eucharist", "harist", "ist"),
])
def test_standard_regions(word, r1, r2):
    assert EnglishStemmer()._regions(word) == (r1, r2)


def test_prefix_regions():
    s = EnglishStemmer()
    assert s._regions("generous") == ("ous", "")
    assert s._regions("arsenal") == ("al", "")
    assert s._regions("communism") == ("ism", "m")
    # Without the prefix rule R1 would start much earlier
    assert s._r1r2_standard("generous", english.VOWELS) == ("erous", "ous")


def test_marked_y_is_not_a_vowel():
    s = EnglishStemmer()
    assert s._regions("aYe") == ("e", "")
    assert s._regions("aye") == ("", "")


def test_trace_steps():
    s = EnglishStemmer()
    names = [name for name, _ in s.trace("generously")]
    assert names == ["start", "0", "1a", "1b", "1c", "2", "3", "4", "5"]

    states = dict(s.trace("generously"))
    assert states["start"] == WordState("generously", "ously", "ly")
    assert states["1c"] == WordState("generousli", "ousli", "li")
    assert states["2"] == WordState("generous", "ous", "")
    assert states["5"].word == "generous"


def test_region_invariants():
    s = EnglishStemmer()
    for word in ("generously", "abeyance", "consolidated", "conspirators",
                 "hopefulness", "relational", "knight's", "communication",
                 "bowlful", "fully", "controlling", "arsenals", "agreed",
                 "luxuriating", "happy", "y's'", "eyeing"):
        for name, state in s.trace(word):
            assert len(state.r2) <= len(state.r1) <= len(state.word), name
            assert state.word.endswith(state.r1), (word, name)
            assert state.r1.endswith(state.r2), (word, name)


def test_step1a():
    s = EnglishStemmer()
    assert s._step1a(WordState("caresses", "esses", "es")).word == "caress"
    assert s._step1a(WordState("ties", "", "")).word == "tie"
    assert s._step1a(WordState("cries", "", "")).word == "cri"
    assert s._step1a(WordState("gas", "", "")).word == "gas"
    assert s._step1a(WordState("gaps", "", "")).word == "gap"
    assert s._step1a(WordState("kiwis", "is", "")).word == "kiwi"
    assert s._step1a(WordState("bus", "", "")).word == "bus"
    assert s._step1a(WordState("press", "", "")).word == "press"


def test_step1b_eed():
    s = EnglishStemmer()
    assert s._step1b(WordState("agreed", "eed", "")) == \
        WordState("agree", "ee", "")
    # "eed" outside R1 is left alone and stops the step
    assert s._step1b(WordState("feed", "", "")) == WordState("feed", "", "")


def test_step1b_tidy():
    s = EnglishStemmer()
    assert s._step1b(WordState("luxuriated", "uriated", "iated")).word == \
        "luxuriate"
    assert s._step1b(WordState("hopping", "ping", "")).word == "hop"
    assert s._step1b(WordState("hoped", "ed", "")).word == "hope"
    assert s._step1b(WordState("filing", "ing", "")).word == "file"
    assert s._step1b(WordState("falling", "ling", "")).word == "fall"
    # No vowel before the suffix
    assert s._step1b(WordState("sing", "", "")).word == "sing"
    assert s._step1b(WordState("bed", "", "")).word == "bed"


def test_step1c():
    s = EnglishStemmer()
    assert s._step1c(WordState("cry", "", "")).word == "cri"
    assert s._step1c(WordState("by", "", "")).word == "by"
    assert s._step1c(WordState("saY", "", "")).word == "saY"
    assert s._step1c(WordState("happy", "y", "")) == \
        WordState("happi", "i", "")


def test_step2():
    s = EnglishStemmer()
    assert s._step2(WordState("relational", "ational", "onal")) == \
        WordState("relate", "ate", "e")
    assert s._step2(WordState("hopefulness", "efulness", "ulness")) == \
        WordState("hopeful", "eful", "ul")
    # "ogi" needs a preceding l
    assert s._step2(WordState("analogi", "alogi", "ogi")).word == "analog"
    assert s._step2(WordState("phagogi", "agogi", "ogi")).word == "phagogi"
    # "li" needs a valid li-ending
    assert s._step2(WordState("brightli", "htli", "")).word == "bright"
    assert s._step2(WordState("easili", "ili", "")).word == "easili"
    # The suffix has to be inside R1
    assert s._step2(WordState("nation", "", "")).word == "nation"


def test_step3():
    s = EnglishStemmer()
    assert s._step3(WordState("electrical", "ectrical", "rical")) == \
        WordState("electric", "ectric", "ric")
    assert s._step3(WordState("hopeful", "eful", "ul")).word == "hope"
    # "ative" must also be inside R2
    assert s._step3(WordState("demonstrative", "onstrative",
                              "strative")).word == "demonstr"
    assert s._step3(WordState("creative", "ative", "ive")).word == \
        "creative"


def test_step4():
    s = EnglishStemmer()
    assert s._step4(WordState("adoption", "option", "tion")).word == "adopt"
    assert s._step4(WordState("adjustment", "ustment", "tment")).word == \
        "adjust"
    # "ion" needs s or t before it
    assert s._step4(WordState("communion", "ion", "n")).word == "communion"
    assert s._step4(WordState("legion", "ion", "ion")).word == "legion"
    # R1 is not enough
    assert s._step4(WordState("general", "al", "")).word == "general"


def test_step5():
    s = EnglishStemmer()
    assert s._step5(WordState("controll", "troll", "ll")).word == "control"
    assert s._step5(WordState("roll", "", "")).word == "roll"
    assert s._step5(WordState("probate", "ate", "e")).word == "probat"
    assert s._step5(WordState("rate", "e", "")).word == "rate"
    assert s._step5(WordState("bridge", "ge", "")).word == "bridg"


def test_preceded_by_short_word():
    assert not english._preceded_by("ion", "ion", "st")
    assert english._preceded_by("tion", "ion", "st")


def test_tables_are_ordered():
    for rules in (english.STEP2_RULES, english.STEP3_RULES,
                  english.STEP4_RULES):
        suffixes = [rule.suffix for rule in rules]
        assert len(suffixes) == len(set(suffixes))
        # A suffix never comes after a shorter suffix it ends with
        for i, suffix in enumerate(suffixes):
            for earlier in suffixes[:i]:
                assert not suffix.endswith(earlier)
