from dsdrills.book import Book


def test_iadd_then_isub_round_trip():
    a = Book("청춘", 20000, 300)
    a += 500
    assert a.price > 20000
    a -= 500
    assert a.price == 20000


def test_isub_lowers_price():
    b = Book("미래", 30000, 500)
    b -= 500
    assert b.price < 30000


def test_eq_price():
    a = Book("명품 C++", 30000, 500)
    assert a == 30000
    assert (a == 1) is False


def test_eq_title():
    a = Book("명품 C++", 30000, 500)
    assert a == "명품 C++"
    assert (a == "고품 C++") is False


def test_eq_book_compares_title_and_pages():
    a = Book("명품 C++", 30000, 500)
    b = Book("고품 C++", 30000, 500)
    assert (a == b) is False
    assert a == Book("명품 C++", 1, 500)
    assert (a == Book("명품 C++", 30000, 501)) is False


def test_free_book_is_falsy():
    assert not Book("벼룩시장", 0, 50)
    assert bool(Book("청춘", 20000, 300)) is True


def test_str():
    assert str(Book("청춘", 20000, 300)) == "청춘 20000원 300 페이지"


def test_defaults():
    book = Book()
    assert (book.title, book.price, book.pages) == ("", 0, 0)
    assert not book