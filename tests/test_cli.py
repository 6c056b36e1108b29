import json

import pytest

from truthguard import cli


def _run(capsys, *argv):
    code = cli.main(list(argv))
    return code, json.loads(capsys.readouterr().out)


def test_languages(capsys):
    code, payload = _run(capsys, "languages")
    assert code == cli.EXIT_OK
    assert payload["total_supported"] == 12
    assert payload["languages"]["hi"]["name"] == "Hindi"
    assert payload["languages"]["hi"]["model_id"] == "truthguard-bert-hi-v1.0"
    assert payload["languages"]["en"]["accuracy"] == 0.92


def test_analyze(capsys):
    code, payload = _run(
        capsys,
        "analyze",
        "--title",
        "BREAKING: You won't believe this shocking news!!!",
        "--content",
        "Shocking! Amazing! Incredible! Doctors hate this one simple trick!",
        "--language",
        "en",
    )
    assert code == cli.EXIT_OK
    assert payload["detected_language"] == "en"
    assert payload["score"]["is_fake"] is True
    assert "Key factors" in payload["explanation"]


def test_analyze_rejects_blank_title(capsys):
    code, payload = _run(capsys, "analyze", "--title", "  ", "--content", "Some content")
    assert code == cli.EXIT_INVALID
    assert payload["error"] == "invalid-input"
    assert payload["details"][0]["loc"] == ["title"]


def test_detect(capsys):
    code, payload = _run(capsys, "detect", "Le gouvernement a annoncé une nouvelle réforme des retraites ce matin.")
    assert code == cli.EXIT_OK
    assert payload["detected_language"] == "fr"
    assert payload["language_name"] == "French"
    assert payload["is_supported"] is True


def test_detect_requires_text(capsys):
    code, payload = _run(capsys, "detect", "   ")
    assert code == cli.EXIT_INVALID
    assert payload == {"error": "Text is required"}


def test_profiles(capsys):
    code, payload = _run(capsys, "profiles")
    assert code == cli.EXIT_OK
    assert payload["problems"] == {}
    assert payload["profiles"]["en"]["clickbait_phrases"] == 4


def test_profiles_with_problems(tmp_path, capsys):
    (tmp_path / "_generic.json").write_text("{}", encoding="utf-8")
    code, payload = _run(capsys, "profiles", "--profiles-dir", str(tmp_path))
    assert code == cli.EXIT_INVALID
    assert payload["problems"]["en"] == ["profile file missing"]


def test_command_is_required():
    with pytest.raises(SystemExit):
        cli.main([])


def test_stats_summarizes_compact_results(tmp_path, capsys):
    lines = []
    for title, content in (
        ("BREAKING: You won't believe this shocking news!!!", "Shocking! Amazing! Incredible! Doctors hate this trick!"),
        ("City council approves new budget", "The budget was reported by Jane Doe, see www.example.org for details."),
    ):
        code = cli.main(["analyze", "--title", title, "--content", content, "--language", "en", "--compact"])
        assert code == cli.EXIT_OK
        output = capsys.readouterr().out
        assert output.count("\n") == 1
        lines.append(output)
    results = tmp_path / "results.jsonl"
    results.write_text("".join(lines) + "\n", encoding="utf-8")

    code, payload = _run(capsys, "stats", str(results))
    assert code == cli.EXIT_OK
    assert payload["total"] == 2
    assert payload["fake_count"] == 1
    assert payload["fake_percentage"] == 50.0
    assert payload["by_language"] == {"en": {"total": 2, "fake": 1}}


def test_stats_rejects_malformed_line(tmp_path, capsys):
    results = tmp_path / "results.jsonl"
    results.write_text('{"title": "only a title"}\n', encoding="utf-8")
    code, payload = _run(capsys, "stats", str(results))
    assert code == cli.EXIT_INVALID
    assert payload == {"error": "invalid-result", "line": 1}
