import io

import pytest

from labstructs.vowels import copy_without_vowels, main, strip_vowels


def test_strip_vowels_example():
    assert strip_vowels("education") == "dctn"


def test_no_lowercase_vowel_survives():
    text = "The quick brown fox jumps over the lazy dog\nagain and again"
    result = strip_vowels(text)
    assert result == "Th qck brwn fx jmps vr th lzy dg\ngn nd gn"
    assert all(c not in "aeiou" for c in result)


def test_uppercase_vowels_are_kept():
    assert strip_vowels("AEIOU aeiou") == "AEIOU "


def test_other_characters_are_kept_in_order():
    text = "xyz 123\n!?"
    assert strip_vowels(text) == text


def test_copy_round_trip(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    content = "hello world\nline two\r\nend"
    source.write_bytes(content.encode("utf-8"))
    written = copy_without_vowels(source, target)
    result = target.read_bytes().decode("utf-8")
    assert result == "hll wrld\nln tw\r\nnd"
    assert written == len(result)


def test_copy_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_without_vowels(tmp_path / "absent.txt", tmp_path / "out.txt")


def test_main_with_arguments(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("banana", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == "bnn"


def test_main_prompts_for_names(tmp_path, monkeypatch):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("piano", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{source}\n{target}\n"))
    assert main([]) == 0
    assert target.read_text(encoding="utf-8") == "pn"


def test_main_missing_file_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt"), str(tmp_path / "out.txt")]) == 1
    assert "ERROR" in capsys.readouterr().err