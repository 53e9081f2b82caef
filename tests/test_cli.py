import json

import pytest

from cli import main


def test_solve_literal(capsys):
    main(["--input", "ab bc bxc cd"])
    assert capsys.readouterr().out == "4\n1\nab\nbc\ncd\n"


def test_solve_with_naive_model(capsys):
    main(["--model", "NaiveChainBuilder", "--input", "dog cat fish"])
    assert capsys.readouterr().out == "3\n2\ndog\n"


def test_solve_no_chain(capsys):
    main(["--input", "a1 1b"])
    assert capsys.readouterr().out == "2\n2\n"


def test_solve_file_to_json(tmp_path, capsys):
    source = tmp_path / "text3.in"
    source.write_text("abba atla alla\n", encoding="utf-8")
    target = tmp_path / "chain.json"

    main(["--input", str(source), "--output", str(target)])

    assert json.loads(target.read_text(encoding="utf-8"))["chain"] == ["abba", "atla", "alla"]
    assert "written to" in capsys.readouterr().out


def test_benchmark_compare(capsys):
    main(["-m", "ChainBuilder", "NaiveChainBuilder", "--input", "ab bc cd", "--benchmark", "--compare"])
    assert "Same chain length:   yes" in capsys.readouterr().out


def test_compare_requires_benchmark():
    with pytest.raises(SystemExit):
        main(["-m", "ChainBuilder", "NaiveChainBuilder", "--input", "ab", "--compare"])


def test_compare_requires_two_models():
    with pytest.raises(SystemExit):
        main(["--input", "ab", "--benchmark", "--compare"])


def test_missing_json_input(tmp_path):
    with pytest.raises(SystemExit):
        main(["--input", str(tmp_path / "missing.json")])


def test_missing_text_input(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main(["--input", str(tmp_path / "text3.in")])
    assert capsys.readouterr().out == ""


def test_solve_shipped_sample(sample_path, capsys):
    main(["--input", str(sample_path)])
    lines = capsys.readouterr().out.splitlines()

    assert lines[:2] == ["11", "3"]
    assert lines[2:] == ["Apple", "egg", "Giraffe", "elephant", "tiger", "rabbit", "tomato", "otter"]
