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
from functools import lru_cache

from snowstem.ifaces.stemmers import Stemmer


logger = logging.getLogger(__name__)


class CachingStemmer(Stemmer):
    """Remembers the stems of recently seen words so that repeated words are
    only run through the stemming algorithm once.

    >>> stemmer = CachingStemmer(EnglishStemmer())
    >>> stemmer.stem("knitting")
    'knit'

    You can pass any stemmer object, or a plain function that takes a word
    and returns its stem.

    By default, this class wraps an LRU cache around the stemming function.
    The ``cachesize`` keyword argument sets the size of the cache. To make the
    cache unbounded (the class caches every input), use ``cachesize=-1``. To
    disable caching, use ``cachesize=None``.
    """

    def __init__(self, stemfn, ignore=None, cachesize=50000):
        """
        :param stemfn: the stemmer object or function to use for stemming.
        :param ignore: a set/list of words that should not be stemmed. This is
            converted into a frozenset. If you omit this argument, all words
            are stemmed.
        :param cachesize: the maximum number of words to cache. Use ``-1`` for
            an unbounded cache, or ``None`` for no caching.
        """

        if hasattr(stemfn, "stem"):
            stemfn = stemfn.stem
        elif not callable(stemfn):
            raise TypeError("%r is not a stemmer or a function" % (stemfn,))

        self.stemfn = stemfn
        self.ignore = frozenset() if ignore is None else frozenset(ignore)
        self.cachesize = cachesize
        # clear() sets the _stem attr to a cached wrapper around self.stemfn
        self.clear()

    def __getstate__(self):
        # Can't pickle a dynamic function, so we have to remove the _stem
        # attribute from the state
        return dict((k, v) for k, v in self.__dict__.items() if k != "_stem")

    def __setstate__(self, state):
        self.__dict__.update(state)
        # Set the _stem attribute
        self.clear()

    def __eq__(self, other):
        return (other is not None and self.__class__ is other.__class__
                and self.stemfn == other.stemfn
                and self.ignore == other.ignore)

    def __hash__(self):
        return hash((self.__class__, self.stemfn, self.ignore))

    def __repr__(self):
        return "%s(%r, cachesize=%r)" % (self.__class__.__name__, self.stemfn,
                                         self.cachesize)

    def _cached(self):
        return self.cachesize is not None and (self.cachesize < 0 or
                                               self.cachesize > 1)

    def clear(self):
        """Throws away all cached stems."""

        if self._cached():
            maxsize = None if self.cachesize < 0 else self.cachesize
            self._stem = lru_cache(maxsize=maxsize)(self.stemfn)
        else:
            self._stem = self.stemfn
        logger.debug("Stem cache reset (cachesize=%r)", self.cachesize)

    def cache_info(self):
        """Returns the ``(hits, misses, maxsize, currsize)`` statistics of the
        cache, or None if caching is disabled.
        """

        if not self._cached():
            return None
        return self._stem.cache_info()

    def stem(self, word):
        if word in self.ignore:
            return word
        return self._stem(word)
