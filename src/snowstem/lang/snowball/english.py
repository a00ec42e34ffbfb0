# coding=utf-8

# Copyright 2007 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.

from collections import namedtuple

from snowstem.lang.snowball.bases import _StandardStemmer
from snowstem.lang.stopwords import words


# A marked Y is not in this set, so it is treated as a non-vowel
VOWELS = "aeiouy"
DOUBLE_CONSONANTS = ("bb", "dd", "ff", "gg", "mm", "nn", "pp", "rr", "tt")
LI_ENDING = "cdeghkmnrt"

# Apostrophe look-alikes folded to U+0027 before stemming
APOSTROPHES = ("\u2019", "\u2018", "\u201b")

# Words starting with these get R1 directly after the prefix
SPECIAL_PREFIXES = ("gener", "arsen", "commun")

# Forms the rules would stem wrongly, mapped to their stems
SPECIAL_WORDS = {
    "skis": "ski",
    "skies": "sky",
    "dying": "die",
    "lying": "lie",
    "tying": "tie",
    "idly": "idl",
    "gently": "gentl",
    "ugly": "ugli",
    "early": "earli",
    "only": "onli",
    "singly": "singl",
    "sky": "sky",
    "news": "news",
    "howe": "howe",
    "atlas": "atlas",
    "cosmos": "cosmos",
    "bias": "bias",
    "andes": "andes",
    "inning": "inning",
    "innings": "inning",
    "outing": "outing",
    "outings": "outing",
    "canning": "canning",
    "cannings": "canning",
    "herring": "herring",
    "herrings": "herring",
    "earring": "earring",
    "earrings": "earring",
    "proceed": "proceed",
    "proceeds": "proceed",
    "proceeded": "proceed",
    "proceeding": "proceed",
    "exceed": "exceed",
    "exceeds": "exceed",
    "exceeded": "exceed",
    "exceeding": "exceed",
    "succeed": "succeed",
    "succeeds": "succeed",
    "succeeded": "succeed",
    "succeeding": "succeed",
}


# The word being stemmed together with its regions R1 and R2. Both regions
# are always suffixes of the word, and R2 is always a suffix of R1.
WordState = namedtuple("WordState", "word r1 r2")

# One entry of a suffix table. When the entry fires, ``strip`` characters are
# removed from the end of the word and ``append`` is added in their place.
# ``condition`` is an optional test of (state, suffix) that must also hold.
Rule = namedtuple("Rule", "suffix strip append r2_default condition")


def _rule(suffix, strip=None, append="", r2_default="", condition=None):
    if strip is None:
        strip = len(suffix)
    return Rule(suffix, strip, append, r2_default, condition)


def _cut(region, strip, append="", default=""):
    # Regions too short to contain the stripped text are reset to the default
    if len(region) >= strip:
        return region[:-strip] + append
    return default


def _rewrite(state, strip, append="", r2_default=""):
    word, r1, r2 = state
    return WordState(word[:-strip] + append,
                     _cut(r1, strip, append),
                     _cut(r2, strip, append, r2_default))


def _has_vowel(text):
    for letter in text:
        if letter in VOWELS:
            return True
    return False


def _preceded_by(word, suffix, letters):
    """Returns True if the letter just before ``suffix`` at the end of
    ``word`` is one of ``letters``. Returns False if there is no such letter.
    """

    i = len(word) - len(suffix) - 1
    return i >= 0 and word[i] in letters


def _after(letters):
    def condition(state, suffix):
        return _preceded_by(state.word, suffix, letters)
    return condition


def _in_r2(state, suffix):
    return state.r2.endswith(suffix)


def _apply_rules(state, rules, gate):
    """Finds the first rule whose suffix ends the word and applies it if the
    suffix also lies inside the region named by ``gate`` (``"r1"`` or
    ``"r2"``). Only the first matching suffix is considered, even when its
    rule does not fire.
    """

    for rule in rules:
        if state.word.endswith(rule.suffix):
            if (getattr(state, gate).endswith(rule.suffix) and
                    (rule.condition is None or
                     rule.condition(state, rule.suffix))):
                state = _rewrite(state, rule.strip, rule.append,
                                 rule.r2_default)
            break
    return state


# Suffix tables, longest suffixes first where they overlap

STEP0_SUFFIXES = ("'s'", "'s", "'")
STEP1A_SUFFIXES = ("sses", "ied", "ies", "us", "ss", "s")
STEP1B_SUFFIXES = ("eedly", "ingly", "edly", "eed", "ing", "ed")

STEP2_RULES = (
    _rule("ization", append="ize"),
    _rule("ational", append="ate", r2_default="e"),
    _rule("fulness", strip=4),
    _rule("ousness", append="ous"),
    _rule("iveness", append="ive", r2_default="e"),
    _rule("tional", strip=2),
    _rule("biliti", append="ble"),
    _rule("lessli", strip=2),
    _rule("entli", strip=2),
    _rule("ation", append="ate", r2_default="e"),
    _rule("alism", append="al"),
    _rule("aliti", append="al"),
    _rule("ousli", append="ous"),
    _rule("iviti", append="ive", r2_default="e"),
    _rule("fulli", strip=2),
    _rule("enci", strip=1, append="e"),
    _rule("anci", strip=1, append="e"),
    _rule("abli", strip=1, append="e"),
    _rule("izer", append="ize"),
    _rule("ator", append="ate", r2_default="e"),
    _rule("alli", append="al"),
    _rule("bli", append="ble"),
    _rule("ogi", strip=1, condition=_after("l")),
    _rule("li", condition=_after(LI_ENDING)),
)

STEP3_RULES = (
    _rule("ational", append="ate"),
    _rule("tional", strip=2),
    _rule("alize", strip=3),
    _rule("icate", append="ic"),
    _rule("iciti", append="ic"),
    _rule("ative", condition=_in_r2),
    _rule("ical", append="ic"),
    _rule("ness"),
    _rule("ful"),
)

STEP4_RULES = tuple(
    _rule(suffix) for suffix in ("ement", "ance", "ence", "able", "ible",
                                 "ment", "ant", "ent", "ism", "ate", "iti",
                                 "ous", "ive", "ize")
) + (
    _rule("ion", condition=_after("st")),
    _rule("al"),
    _rule("er"),
    _rule("ic"),
)


class EnglishStemmer(_StandardStemmer):
    """
    The English Snowball stemmer, also known as the Porter2 stemmer.

    >>> EnglishStemmer().stem("generously")
    'generous'

    Words are expected to be lowercase already: stop words and special words
    are looked up exactly as given, and upper case letters are stemmed like
    any other non-vowel.

    :cvar stopwords: Words returned unchanged, the ``"snowball"`` stop word
                     list.
    :type stopwords: frozenset
    :note: A detailed description of the English
           stemming algorithm can be found under
           http://snowball.tartarus.org/algorithms/english/stemmer.html
    """

    stopwords = words("snowball")

    def stem(self, word):
        """
        Stem an English word and return the stemmed form.

        :param word: The word that is stemmed.
        :type word: str
        :return: The stemmed form.
        :rtype: str

        """

        if word in self.stopwords:
            return word
        if word in SPECIAL_WORDS:
            return SPECIAL_WORDS[word]
        if len(word) <= 2:
            return word

        for _, state in self.trace(word):
            pass
        return state.word.replace("Y", "y")

    def trace(self, word):
        """
        Run the suffix steps on a word and yield a ``(name, state)`` pair
        after each one, starting with the freshly normalized word. Each state
        is a :class:`WordState`; the last one holds the stem, still carrying
        the internal ``Y`` markers.

        Stop words, special words and short words are not checked here.

        :param word: The word that is stemmed.
        :type word: str
        :rtype: generator

        """

        word = self._normalize(word)
        r1, r2 = self._regions(word)
        state = WordState(word, r1, r2)
        yield "start", state

        for name, step in (("0", self._step0),
                           ("1a", self._step1a),
                           ("1b", self._step1b),
                           ("1c", self._step1c),
                           ("2", self._step2),
                           ("3", self._step3),
                           ("4", self._step4),
                           ("5", self._step5)):
            state = step(state)
            yield name, state

    def _normalize(self, word):
        for apostrophe in APOSTROPHES:
            word = word.replace(apostrophe, "'")

        if word.startswith("'"):
            word = word[1:]

        # Set initial y, or y after a vowel, to Y
        if word.startswith("y"):
            word = "Y" + word[1:]
        for i in range(1, len(word)):
            if word[i] == "y" and word[i - 1] in VOWELS:
                word = "".join((word[:i], "Y", word[i + 1:]))

        return word

    def _regions(self, word):
        for prefix in SPECIAL_PREFIXES:
            if word.startswith(prefix):
                r1 = word[len(prefix):]
                return r1, self._region_after_vc(r1, VOWELS)

        return self._r1r2_standard(word, VOWELS)

    def _step0(self, state):
        # Possessive apostrophes
        for suffix in STEP0_SUFFIXES:
            if state.word.endswith(suffix):
                return _rewrite(state, len(suffix))
        return state

    def _step1a(self, state):
        word = state.word
        for suffix in STEP1A_SUFFIXES:
            if word.endswith(suffix):
                if suffix == "sses":
                    state = _rewrite(state, 2)
                elif suffix in ("ied", "ies"):
                    # "ties" -> "tie" but "cries" -> "cri"
                    if len(word) - len(suffix) > 1:
                        state = _rewrite(state, 2)
                    else:
                        state = _rewrite(state, 1)
                elif suffix == "s":
                    # "gaps" -> "gap" but "gas" -> "gas"
                    if _has_vowel(word[:-2]):
                        state = _rewrite(state, 1)
                break
        return state

    def _step1b(self, state):
        word, r1 = state.word, state.r1
        for suffix in STEP1B_SUFFIXES:
            if word.endswith(suffix):
                if suffix in ("eed", "eedly"):
                    if r1.endswith(suffix):
                        return _rewrite(state, len(suffix), "ee")
                    return state

                if not _has_vowel(word[:-len(suffix)]):
                    return state
                return self._step1b_tidy(_rewrite(state, len(suffix)))
        return state

    def _step1b_tidy(self, state):
        word, r1, r2 = state

        if word.endswith(("at", "bl", "iz")):
            word += "e"
            r1 += "e"
            if len(word) > 5 or len(r1) >= 3:
                r2 += "e"
            return WordState(word, r1, r2)

        if word.endswith(DOUBLE_CONSONANTS):
            return _rewrite(state, 1)

        if self._is_short(word, r1):
            return WordState(word + "e",
                             r1 + "e" if r1 else r1,
                             r2 + "e" if r2 else r2)

        return state

    def _is_short(self, word, r1):
        """
        A word is short if R1 is empty and it ends in a short syllable: a
        vowel followed by a non-vowel other than w, x or Y and preceded by a
        non-vowel, or, for two letter words, a vowel followed by a non-vowel.
        """

        if r1:
            return False
        if len(word) >= 3:
            return (word[-1] not in VOWELS and word[-1] not in "wxY" and
                    word[-2] in VOWELS and word[-3] not in VOWELS)
        if len(word) == 2:
            return word[0] in VOWELS and word[1] not in VOWELS
        return False

    def _step1c(self, state):
        word = state.word
        if len(word) > 2 and word[-1] in "yY" and word[-2] not in VOWELS:
            return _rewrite(state, 1, "i")
        return state

    def _step2(self, state):
        return _apply_rules(state, STEP2_RULES, "r1")

    def _step3(self, state):
        return _apply_rules(state, STEP3_RULES, "r1")

    def _step4(self, state):
        return _apply_rules(state, STEP4_RULES, "r2")

    def _step5(self, state):
        word, r1, r2 = state

        if r2.endswith("l") and word.endswith("ll"):
            return _rewrite(state, 1)

        if r2.endswith("e"):
            return _rewrite(state, 1)

        if r1.endswith("e") and len(word) >= 4:
            if (word[-2] in VOWELS or word[-2] in "wxY" or
                    word[-3] not in VOWELS or word[-4] in VOWELS):
                return _rewrite(state, 1)

        return state
