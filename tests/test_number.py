import pytest

from rualias.languages.russian import is_plural_form, singular_form


@pytest.mark.parametrize("word", ["столы", "книги", "армии", "статья", "Столы"])
def test_plural_looking_words(word):
    assert is_plural_form(word)


@pytest.mark.parametrize("word", ["стол", "книга", "окно", "тетрадь"])
def test_singular_looking_words(word):
    assert not is_plural_form(word)


@pytest.mark.parametrize(
    "plural, singular",
    [
        ("столы", "стол"),
        ("армии", "армия"),
        ("книги", "книга"),
        ("линия", "лини"),
        ("стол", "стол"),
    ],
)
def test_singular_form(plural, singular):
    assert singular_form(plural) == singular
