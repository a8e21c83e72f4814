import pytest

from core.r.scripts import r_identifier, r_string_literal


def test_r_string_literal_quotes_plain_paths():
    assert r_string_literal("/models/fraud.rds") == "'/models/fraud.rds'"


def test_r_string_literal_escapes_delimiters():
    literal = r_string_literal("/models/it's\\here.rds")

    assert literal == "'/models/it\\'s\\\\here.rds'"


def test_r_string_literal_cannot_be_broken_out_of():
    literal = r_string_literal("x'); system('rm -rf /'); ('")

    body = literal[1:-1]
    unescaped_quotes = [
        index for index, char in enumerate(body) if char == "'" and body[index - 1] != "\\"
    ]
    assert unescaped_quotes == []


def test_r_string_literal_escapes_line_breaks():
    assert r_string_literal("a\nb\tc\r") == "'a\\nb\\tc\\r'"


def test_r_string_literal_rejects_nul():
    with pytest.raises(ValueError, match="NUL"):
        r_string_literal("a\x00b")


@pytest.mark.parametrize("name", ["loadModel", "model", ".hidden", "get_class.dist2"])
def test_r_identifier_accepts_syntactic_names(name):
    assert r_identifier(name) == name


@pytest.mark.parametrize("name", ["", "2model", ".2x", "my-model", "a b", "function", "TRUE"])
def test_r_identifier_rejects_non_syntactic_names(name):
    with pytest.raises(ValueError, match="Not a syntactic R name"):
        r_identifier(name)
