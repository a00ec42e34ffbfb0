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

"""
Stop word lists. Each list is stored under a corpus identifier in
:data:`stoplists` and can be fetched with :func:`words`.

The ``"snowball"`` corpus is the list consulted by the Snowball English
stemmer: words on it are considered function words and are never stemmed.
The same list is also available as ``"nltk"``, since it is the English list
shipped with NLTK. The ``"en"`` corpus is Whoosh's much shorter index list:
words so common that search indexes usually skip them.
"""

import logging


logger = logging.getLogger(__name__)


# Exceptions

class NoStopWords(Exception):
    pass


# Stop word lists

SNOWBALL_ENGLISH = frozenset("""
i me my myself we our ours ourselves you you're you've you'll you'd your yours
yourself yourselves he him his himself she she's her hers herself it it's its
itself they them their theirs themselves what which who whom this that that'll
these those am is are was were be been being have has had having do does did
doing a an the and but if or because as until while of at by for with about
against between into through during before after above below to from up down
in out on off over under again further then once here there when where why
how all any both each few more most other some such no nor not only own same
so than too very s t can will just don don't should should've now d ll m o re
ve y ain aren aren't couldn couldn't didn didn't doesn doesn't hadn hadn't hasn
hasn't haven haven't isn isn't ma mightn mightn't mustn mustn't needn needn't
shan shan't shouldn shouldn't wasn wasn't weren weren't won won't wouldn
wouldn't
""".split())

ENGLISH = frozenset(('a', 'an', 'and', 'are', 'as', 'at', 'be', 'by', 'can',
                     'for', 'from', 'have', 'if', 'in', 'is', 'it', 'may',
                     'not', 'of', 'on', 'or', 'tbd', 'that', 'the', 'this',
                     'to', 'us', 'we', 'when', 'will', 'with', 'yet',
                     'you', 'your'))

stoplists = {
    "snowball": SNOWBALL_ENGLISH,
    "nltk": SNOWBALL_ENGLISH,
    "en": ENGLISH,
}


def words(corpus):
    """Returns the frozenset of stop words stored under the given corpus
    identifier.

    >>> "their" in words("snowball")
    True

    :param corpus: a key of :data:`stoplists`, such as ``"snowball"``.
    :raises NoStopWords: if there is no list for the identifier.
    """

    try:
        wordset = stoplists[corpus]
    except KeyError:
        logger.debug("No stop word list named %r", corpus)
        raise NoStopWords("No stop word list named %r" % (corpus,))

    logger.debug("Loaded %d stop words from %r", len(wordset), corpus)
    return wordset
