from pwdg.charset import Category
from pwdg.errors import EmptyCategory, EmptyPool, LengthTooShort, MinimumsExceedLength


def test_length_message():
    e = LengthTooShort(6, 8)
    assert "Password length must be at least 8 characters." in str(e)
    assert e.to_dict() == {
        "error": "LENGTH_TOO_SHORT",
        "message": "Password length must be at least 8 characters.",
        "details": {"length": 6, "minimum": 8},
    }


def test_minimums_message():
    e = MinimumsExceedLength(12, 10)
    assert "Sum of minimum character requirements exceeds password length." in str(e)
    assert e.details == {"total": 12, "length": 10}


def test_empty_category_message():
    e = EmptyCategory(Category.UPPER)
    assert "Insufficient characters available for upper" in str(e)
    assert e.to_dict()["details"] == {"category": "upper"}


def test_empty_pool_has_no_details():
    assert EmptyPool().to_dict() == {
        "error": "EMPTY_POOL",
        "message": "No characters available after exclusions.",
    }
