import string

from pwdg.charset import ALL_CHARS, BASE_SETS, CATEGORIES, SPECIAL_CHARS, Category, filtered


def test_special_set():
    assert len(SPECIAL_CHARS) == 32
    assert len(set(SPECIAL_CHARS)) == 32
    assert "\\" in SPECIAL_CHARS and "`" in SPECIAL_CHARS and '"' in SPECIAL_CHARS


def test_base_sets():
    assert Category.UPPER.chars == string.ascii_uppercase
    assert Category.LOWER.chars == string.ascii_lowercase
    assert Category.DIGIT.chars == string.digits
    assert len(ALL_CHARS) == 26 + 26 + 10 + 32
    assert set(BASE_SETS) == set(CATEGORIES)


def test_filtered():
    assert filtered("abc") == "abc"
    assert filtered("abc", "b") == "ac"
    assert filtered("abc", "abc") == ""
    assert filtered("abc", "xyz") == "abc"
    assert filtered("", "a") == ""
