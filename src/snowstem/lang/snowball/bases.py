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

from snowstem.ifaces.stemmers import Stemmer


class _LanguageSpecificStemmer(Stemmer):
    """
    Base class for the Snowball stemmers of a single language.

    :cvar stopwords: Words that are returned unchanged by ``stem()``.
    :type stopwords: frozenset
    """

    stopwords = frozenset()


class _StandardStemmer(_LanguageSpecificStemmer):
    """
    Base class for the Snowball stemmers that use the standard definition of
    the regions R1 and R2.
    """

    @staticmethod
    def _region_after_vc(text, vowels):
        """
        Return the part of ``text`` after the first non-vowel that follows a
        vowel, or an empty string if there is no such non-vowel.

        :param text: The text to scan.
        :type text: str
        :param vowels: The letters that count as vowels.
        :type vowels: str
        :rtype: str

        """
        for i in range(1, len(text)):
            if text[i] not in vowels and text[i - 1] in vowels:
                return text[i + 1:]
        return ""

    def _r1r2_standard(self, word, vowels):
        """
        Return the standard interpretations of the string regions R1 and R2.

        R1 is the region after the first non-vowel following a vowel,
        or is the null region at the end of the word if there is no
        such non-vowel.

        R2 is the region after the first non-vowel following a vowel
        in R1, or is the null region at the end of the word if there
        is no such non-vowel.

        :param word: The word whose regions R1 and R2 are determined.
        :type word: str
        :param vowels: The vowels of the respective language that are
                       used to determine the regions R1 and R2.
        :type vowels: str
        :return: (r1, r2), the regions R1 and R2 for the respective word.
        :rtype: tuple
        :note: A detailed description of how to define R1 and R2
               can be found under
               http://snowball.tartarus.org/texts/r1r2.html

        """
        r1 = self._region_after_vc(word, vowels)
        r2 = self._region_after_vc(r1, vowels)
        return r1, r2
