"""Tests for scanning, density, check and replace."""

import pytest

from trie_density import InvalidInput, Match, Trie
from trie_density import scanner
from trie_density.scanner import is_word_boundary


# =============================================================================
# Density
# =============================================================================

def test_density_in_symbolic_language():
    trie = Trie(True)
    trie.insert("Hello")
    trie.insert("World")
    trie.insert("Hell")

    assert trie.density("here is a fragment of text") == {}

    text = 'here is a fragment of text with "Hello"'
    assert trie.density(text) == {"Hello": 1}

    text = 'here is a fragment of text with "Hello World"'
    assert trie.density(text) == {"Hello": 1, "World": 1}

    text = 'here is a fragment of text with "Hello World" and "Hello" should be 2'
    assert trie.density(text) == {"Hello": 2, "World": 1}

    text = ('here is a fragment of text with "Hello World" and "Hello" should be 2, '
            '"Hell" should be 1, no matter if "eHell" or eHello presented')
    assert trie.density(text) == {"Hello": 2, "World": 1, "Hell": 1}


def test_density_in_pictographic_language():
    trie = Trie()
    trie.insert("关键字")
    trie.insert("关键")

    assert trie.density('这段文字一共包括2个"关键"，1个"关键字"') == {"关键": 2, "关键字": 1}


def test_density_counts_repeats_and_overlaps():
    trie = Trie(words=["aa"])
    assert trie.density("aaaa") == {"aa": 3}


def test_single_character_keywords_are_never_reported():
    trie = Trie(words=["好"])
    assert trie.contains("好")
    assert trie.density("好好学习") == {}
    assert trie.check("好好学习") is None
    assert trie.replace("好好学习") == "好好学习"

    assert Trie(words=["a", "ab"]).density("ab") == {"ab": 1}
    assert Trie(symbolic=True, words=["a"]).density("a cat a") == {}


def test_symbolic_mode_treats_cjk_as_word_characters():
    trie = Trie(True, ["关键"])
    assert trie.density("这是关键词") == {}
    assert trie.density("这是 关键 词") == {"关键": 1}


def test_density_multi_unit_code_points():
    trie = Trie(words=["😀😀", "𠀀𠀁"])
    assert trie.density("a😀😀b𠀀𠀁") == {"😀😀": 1, "𠀀𠀁": 1}


@pytest.mark.parametrize("text", ["", None, 42])
def test_invalid_text(text):
    trie = Trie(words=["a"])
    with pytest.raises(InvalidInput):
        trie.density(text)
    with pytest.raises(InvalidInput):
        trie.check(text)
    with pytest.raises(InvalidInput):
        trie.replace(text)
    with pytest.raises(InvalidInput):
        trie.scan(text)


# =============================================================================
# Scan Order
# =============================================================================

def test_scan_order():
    trie = Trie(words=["abc", "bc", "c", "ab"])
    assert list(trie.scan("abcab")) == [
        Match("ab", 1),
        Match("abc", 2),
        Match("bc", 2),
        Match("ab", 4),
    ]


def test_match_start():
    match = Match("关键字", 12)
    assert match.start == 10
    assert Match("a", 0).start == 0


def test_scan_on_empty_trie():
    assert list(Trie().scan("anything")) == []


# =============================================================================
# Check / Exec
# =============================================================================

def test_check():
    trie = Trie(symbolic=True, words=["World", "Hello"])
    assert trie.check("nothing to see") is None
    assert trie.check("Hello World") == "Hello"
    assert trie.check("eHello World") == "World"


def test_check_stops_at_first_match(monkeypatch):
    calls = []

    def counting_boundary(text, word, end):
        calls.append(word)
        return is_word_boundary(text, word, end)

    monkeypatch.setattr(scanner, "is_word_boundary", counting_boundary)

    trie = Trie(symbolic=True, words=["Hello"])
    assert trie.check("Hello Hello Hello") == "Hello"
    assert calls == ["Hello"]


def test_exec_stops_when_callback_returns_false():
    trie = Trie(words=["aa"])
    seen = []

    def callback(word, end):
        seen.append((word, end))
        return False

    trie.exec("aaaa", callback)
    assert seen == [("aa", 1)]


def test_exec_runs_to_completion():
    trie = Trie(words=["aa"])
    seen = []
    trie.exec("aaaa", lambda word, end: seen.append(end))
    assert seen == [1, 2, 3]


# =============================================================================
# Replace
# =============================================================================

def test_replace():
    trie = Trie(words=["关键"])
    assert trie.replace("这是关键词") == "这是**词"
    assert trie.replace("没有") == "没有"


def test_replace_symbolic():
    trie = Trie(symbolic=True, words=["Hello"])
    assert trie.replace("Hello eHello Hello!") == "***** eHello *****!"


def test_replace_placeholder():
    trie = Trie(words=["ab"])
    assert trie.replace("xabx", "#") == "x##x"
    assert trie.replace("xabx", None) == "x**x"
    assert trie.replace("xabx", "") == "x**x"
    assert trie.replace("xabx", "<>") == "x<><>x"
    with pytest.raises(InvalidInput):
        trie.replace("xabx", 1)


def test_replace_greedy_overlap_masks_tail_only():
    trie = Trie(words=["abc", "cde"])
    assert trie.replace("xabcdex", "#") == "x#####x"

    # Each position is masked once even with a multi-character placeholder
    assert trie.replace("xabcdex", "<>") == "x<><><><><>x"


def test_replace_same_end_matches():
    trie = Trie(words=["abc", "bc"])
    assert trie.replace("abcd") == "***d"


def test_replace_contained_match_reported_first():
    # "bc" ends before "abcd" does, so only the tail of "abcd" is masked
    trie = Trie(words=["abcd", "bc"])
    assert trie.replace("abcd") == "a***"


def test_replace_adjacent_matches():
    trie = Trie(words=["ab"])
    assert trie.replace("ababx") == "****x"


@pytest.mark.parametrize("text", [
    "Hello World Hello",
    "HelloWorld",
    "xxHellxHelloxx",
    "World",
    "a😀😀b",
])
def test_replace_preserves_length(text):
    trie = Trie(words=["Hello", "Hell", "World", "loW", "😀"])
    assert len(trie.replace(text)) == len(text)


# =============================================================================
# Word Boundaries
# =============================================================================

@pytest.mark.parametrize("text,word,end,expected", [
    ("Hello", "Hello", 4, True),
    ('"Hello"', "Hello", 5, True),
    ("eHello", "Hello", 5, False),
    ("Hellox", "Hello", 4, False),
    ("Hello_", "Hello", 4, False),
    ("1Hello", "Hello", 5, False),
    ("éHello", "Hello", 5, False),
    ("Hello, World", "World", 11, True),
])
def test_is_word_boundary(text, word, end, expected):
    assert is_word_boundary(text, word, end) is expected
