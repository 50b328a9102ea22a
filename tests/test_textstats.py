import pytest

from drillbook.textstats import TextCounts, count_file, count_words_and_chars, third_angle


def test_empty_text():
    assert count_words_and_chars("") == TextCounts(characters=0, words=0)


def test_words_terminated_by_whitespace():
    text = "hello world\n"
    counts = count_words_and_chars(text)
    assert counts.words == 2
    assert counts.characters == len(text)


def test_trailing_word_without_whitespace_is_not_counted():
    assert count_words_and_chars("hello world").words == 1


def test_runs_of_whitespace_count_once():
    single = count_words_and_chars("a b c\n")
    spread = count_words_and_chars("a \t\n b\v\f\r  c \n")
    assert single.words == spread.words


def test_whitespace_only():
    text = " \t\n\n "
    assert count_words_and_chars(text) == TextCounts(characters=len(text), words=0)


def test_count_file_matches_text(tmp_path):
    content = "one two three\nfour five\n"
    path = tmp_path / "sample.txt"
    path.write_text(content, encoding="utf-8")
    assert count_file(path) == count_words_and_chars(content)


def test_count_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        count_file(tmp_path / "absent.txt")


@pytest.mark.parametrize("a, b", [(60, 60), (30.5, 89.25), (1, 1), (179 - 1e-6, 1e-7)])
def test_third_angle_completes_triangle(a, b):
    c = third_angle(a, b)
    assert c > 0
    assert a + b + c == pytest.approx(180)


@pytest.mark.parametrize(
    "a, b, message",
    [
        (0, 60, "angle1 is invalid"),
        (180, 10, "angle1 is invalid"),
        (60, -5, "angle2 is invalid"),
        (60, 200, "angle2 is invalid"),
        (90, 90, r"angle1 \+ angle2 is invalid"),
        (100, 120, r"angle1 \+ angle2 is invalid"),
    ],
)
def test_third_angle_rejects(a, b, message):
    with pytest.raises(ValueError, match=message):
        third_angle(a, b)