import pytest

from snowstem import lang
from snowstem.lang import stopwords
from snowstem.lang.snowball import EnglishStemmer, classes


def test_two_letter_code():
    assert lang.two_letter_code("en") == "en"
    assert lang.two_letter_code("English") == "en"
    assert lang.two_letter_code("ENG") == "en"
    assert lang.two_letter_code("klingon") is None


def test_has_stemmer():
    assert lang.has_stemmer("en")
    assert lang.has_stemmer("english")
    assert not lang.has_stemmer("fr")


def test_stemmer_for_language():
    s = lang.stemmer_for_language("english")
    assert isinstance(s, EnglishStemmer)
    assert s.stem("running") == "run"
    assert classes["en"] is EnglishStemmer

    with pytest.raises(lang.NoStemmer):
        lang.stemmer_for_language("french")


def test_stopwords_for_language():
    assert lang.has_stopwords("en")
    assert not lang.has_stopwords("de")
    words = lang.stopwords_for_language("English")
    assert "the" in words
    assert words is stopwords.stoplists["en"]

    with pytest.raises(lang.NoStopWords):
        lang.stopwords_for_language("german")


def test_stopword_corpora():
    words = stopwords.words("snowball")
    assert isinstance(words, frozenset)
    assert "wasn" in words
    assert "their" in words
    assert "don't" in words
    assert "running" not in words
    assert EnglishStemmer.stopwords == words

    assert stopwords.words("nltk") is words
    assert stopwords.words("en") == stopwords.ENGLISH
    assert len(stopwords.words("en")) < len(words)

    with pytest.raises(stopwords.NoStopWords):
        stopwords.words("nltk-klingon")
