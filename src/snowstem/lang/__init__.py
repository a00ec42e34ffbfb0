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

import logging

from snowstem.lang.stopwords import NoStopWords


logger = logging.getLogger(__name__)


# Exceptions

class NoStemmer(Exception):
    pass


# Data and functions for working with different languages

languages = ("en", )

aliases = {
    "english": "en",
    "eng": "en",
}


def two_letter_code(name):
    """Returns the two-letter code for a language name or code, or None if
    the language is unknown. The lookup ignores case.
    """

    name = name.lower()
    if name in languages:
        return name
    return aliases.get(name)


def has_stemmer(lang):
    try:
        return bool(stemmer_for_language(lang))
    except NoStemmer:
        return False


def has_stopwords(lang):
    try:
        return bool(stopwords_for_language(lang))
    except NoStopWords:
        return False


def stemmer_for_language(lang):
    """Returns a new stemmer object for the given language name or code.

    >>> stemmer_for_language("english").stem("running")
    'run'

    :raises NoStemmer: if there is no stemmer for the language.
    """

    from snowstem.lang.snowball import classes

    tlc = two_letter_code(lang)
    if tlc in classes:
        logger.debug("Creating %s stemmer for %r", tlc, lang)
        return classes[tlc]()

    raise NoStemmer("No stemmer available for %r" % (lang,))


def stopwords_for_language(lang):
    """Returns a frozenset of common words for the given language name or
    code, suitable for filtering out of a search index.

    :raises NoStopWords: if there is no stop word list for the language.
    """

    from snowstem.lang.stopwords import stoplists

    tlc = two_letter_code(lang)
    if tlc in stoplists:
        return stoplists[tlc]

    logger.debug("No stop word list for %r", lang)
    raise NoStopWords("No stop-word list available for %r" % (lang,))
