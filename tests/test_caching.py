import pickle

import pytest

from snowstem.caching import CachingStemmer
from snowstem.lang.snowball import EnglishStemmer


def test_cached_stems():
    cs = CachingStemmer(EnglishStemmer(), cachesize=100)
    assert cs.stem("knitting") == "knit"
    assert cs("knitting") == "knit"
    assert cs.stem("running") == "run"

    hits, misses, maxsize, currsize = cs.cache_info()
    assert hits == 1
    assert misses == 2
    assert maxsize == 100
    assert currsize == 2

    cs.clear()
    assert cs.cache_info()[3] == 0


def test_unbounded_cache():
    cs = CachingStemmer(EnglishStemmer(), cachesize=-1)
    assert cs.stem("generously") == "generous"
    assert cs.cache_info()[2] is None


def test_no_cache():
    cs = CachingStemmer(EnglishStemmer(), cachesize=None)
    assert cs.cache_info() is None
    assert cs.stem("knitted") == "knit"

    cs = CachingStemmer(EnglishStemmer(), cachesize=1)
    assert cs.cache_info() is None


def test_ignore():
    cs = CachingStemmer(EnglishStemmer(), ignore=["knitting", "stars"])
    assert cs.stem("knitting") == "knitting"
    assert cs.stem("stars") == "stars"
    assert cs.stem("knits") == "knit"


def test_plain_function():
    calls = []

    def chop(word):
        calls.append(word)
        return word[:3]

    cs = CachingStemmer(chop)
    assert cs.stem("alfa") == "alf"
    assert cs.stem("alfa") == "alf"
    assert calls == ["alfa"]


def test_not_a_stemmer():
    with pytest.raises(TypeError):
        CachingStemmer(42)


def test_pickle():
    cs = CachingStemmer(EnglishStemmer(), ignore=["stars"], cachesize=10)
    cs.stem("knitting")

    cs2 = pickle.loads(pickle.dumps(cs))
    assert cs2.ignore == frozenset(["stars"])
    assert cs2.cachesize == 10
    assert cs2.cache_info()[3] == 0
    assert cs2.stem("knitting") == "knit"


def test_equality():
    stemmer = EnglishStemmer()
    cs = CachingStemmer(stemmer, ignore=["stars"])
    assert cs == CachingStemmer(stemmer, ignore=["stars"])
    assert cs != CachingStemmer(stemmer)
    assert (cs == None) is False
    assert (cs != None) is True
