import json

import pytest

from wordchain.data import format_result, read_tokens, write_result
from wordchain.utils import ChainResult


def test_read_literal_string(builder):
    assert read_tokens("ab bc  cd", builder) == ["ab", "bc", "cd"]


def test_read_text_file(builder, tmp_path):
    path = tmp_path / "text3.in"
    path.write_text("ab bc\ncd\n\nde\n", encoding="utf-8")

    assert read_tokens(str(path), builder) == ["ab", "bc", "cd", "de"]


def test_read_json_list(builder, tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["ab bc", "cd"]), encoding="utf-8")

    assert read_tokens(str(path), builder) == ["ab", "bc", "cd"]


def test_read_missing_json(builder, tmp_path):
    with pytest.raises(FileNotFoundError):
        read_tokens(str(tmp_path / "missing.json"), builder)


def test_read_json_wrong_shape(builder, tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"words": ["ab"]}), encoding="utf-8")

    with pytest.raises(TypeError):
        read_tokens(str(path), builder)


def test_format_result():
    result = ChainResult(total_tokens=5, excluded=2, chain=["ab", "bc", "cd"])
    assert format_result(result) == "5\n2\nab\nbc\ncd\n"


def test_format_empty_result():
    assert format_result(ChainResult(2, 2, [])) == "2\n2\n"


def test_write_text(tmp_path):
    path = tmp_path / "out" / "text3.out"
    write_result(ChainResult(3, 1, ["ab", "bc"]), str(path))

    assert path.read_text(encoding="utf-8") == "3\n1\nab\nbc\n"


def test_write_json(tmp_path):
    path = tmp_path / "chain.json"
    write_result(ChainResult(3, 1, ["ab", "bc"]), str(path))

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "total_tokens": 3,
        "excluded": 1,
        "chain": ["ab", "bc"],
    }


def test_read_missing_text_file(builder, tmp_path):
    with pytest.raises(FileNotFoundError):
        read_tokens(str(tmp_path / "text3.in"), builder)


@pytest.mark.parametrize("source", ["data/missing", "words.txt", "text3.in"])
def test_read_missing_path_like_source(builder, source):
    with pytest.raises(FileNotFoundError):
        read_tokens(source, builder)


@pytest.mark.parametrize("source", ["apple", "e.g.", "Giraffe,", "ab bc/cd"])
def test_read_literal_that_is_not_a_path(builder, source):
    assert read_tokens(source, builder) == source.split()


def test_read_shipped_sample(builder, sample_path):
    tokens = read_tokens(str(sample_path), builder)

    assert tokens[:3] == ["Apple", "egg", "Giraffe"]
    assert len(tokens) == 11
