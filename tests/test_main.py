import json

from log_utils import logger
from main import EXAMPLE_SENTENCES, main


def test_valid_sentence(capsys):
    assert main(["the student reads a book"]) == 0
    out = capsys.readouterr().out
    assert "the student reads a book: valid" in out
    assert "    Det\tthe" in out


def test_invalid_sentence(capsys):
    assert main(["the dog barks"]) == 1
    out = capsys.readouterr().out
    assert 'the dog barks: Unknown word: "barks" (position 2) [word: barks]' in out


def test_json_output(capsys):
    assert main(["--json", "a teacher writes", "reads the book"]) == 1
    lines = capsys.readouterr().out.splitlines()
    first, second = (json.loads(line) for line in lines)
    assert first["sentence"] == "a teacher writes"
    assert first["is_valid"] is True
    assert second["kind"] == "structural"
    assert second["error_position"] == 0


def test_data_file(tmp_path, capsys):
    data = tmp_path / "data.txt"
    data.write_text("the cat likes the apple\n\na dog eats\n")
    assert main(["--data_file", str(data)]) == 0
    out = capsys.readouterr().out
    assert out.count(": valid") == 2


def test_examples_and_grammar(capsys):
    assert main(["--examples", "--show_grammar"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("S -> NP VP\n")
    assert out.count(": valid") == len(EXAMPLE_SENTENCES)


def test_max_tokens(capsys):
    assert main(["--max_tokens", "2", "a teacher writes"]) == 1
    assert "Sentence too long: 3 words (maximum 2)" in capsys.readouterr().out


def test_json_stays_clean_with_log_dir(tmp_path, capsys):
    log_dir = tmp_path / "logs"
    assert main(["--json", "--log_dir", str(log_dir), "a teacher writes", "the dog barks"]) == 1
    captured = capsys.readouterr()
    results = [json.loads(line) for line in captured.out.splitlines()]
    assert [r["sentence"] for r in results] == ["a teacher writes", "the dog barks"]
    assert "Logging to" in captured.err
    (log_file,) = log_dir.iterdir()
    assert "validated 2 sentences" in log_file.read_text()


def test_handlers_are_detached_after_each_run(tmp_path, capsys):
    before = list(logger.handlers)
    main(["--verbose", "a cat eats"])
    main(["--log_dir", str(tmp_path), "a cat eats"])
    assert logger.handlers == before
    err = capsys.readouterr().err
    assert err.count("validated 1 sentences") == 2


def test_examples_include_every_playground_sentence():
    assert EXAMPLE_SENTENCES == [
        'the student reads a book',
        'a teacher writes',
        'the dog chases the cat',
        'a chatbot talks',
        'the student teaches the teacher',
    ]
