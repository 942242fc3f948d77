import pytest

from algokit.trie import WeightedTrie

WORDS = {"dassd": 34, "dasse": 45, "dassegfmkldgm": 54}


@pytest.fixture
def trie():
    t = WeightedTrie()
    for word, weight in WORDS.items():
        t.insert(word, weight)
    return t


def test_source_example(trie):
    assert trie.best_suggestion("dass") == 54


def test_full_words_and_prefixes(trie):
    assert trie.best_suggestion("dassd") == WORDS["dassd"]
    assert trie.best_suggestion("dasse") == WORDS["dassegfmkldgm"]
    for word, weight in WORDS.items():
        assert trie.best_suggestion(word) >= weight


def test_every_prefix_reports_max_of_matching_words(trie):
    for word in WORDS:
        for end in range(1, len(word) + 1):
            prefix = word[:end]
            matching = [w for name, w in WORDS.items() if name.startswith(prefix)]
            assert trie.best_suggestion(prefix) == max(matching)


def test_missing_prefix_returns_none(trie):
    assert trie.best_suggestion("x") is None
    assert trie.best_suggestion("dassz") is None


def test_lower_weight_does_not_overwrite():
    t = WeightedTrie()
    t.insert("ab", 9)
    t.insert("ab", 3)
    assert t.best_suggestion("ab") == 9


def test_empty_word_rejected():
    with pytest.raises(ValueError):
        WeightedTrie().insert("", 1)