"""Tests for the devboard CLI."""

from typer.testing import CliRunner

from devboard.cli.app import app

runner = CliRunner()


def test_sanitize_stdin() -> None:
    result = runner.invoke(app, ["sanitize"], input='<p onclick="x">Hi</p><script>alert(1)</script>')
    assert result.exit_code == 0
    assert result.stdout == "<p>Hi</p>alert(1)\n"


def test_sanitize_file(tmp_path) -> None:
    path = tmp_path / "desc.html"
    path.write_text('<a href="https://example.com">x</a>')
    result = runner.invoke(app, ["sanitize", str(path)])
    assert result.exit_code == 0
    assert 'rel="noopener noreferrer"' in result.stdout


def test_sanitize_missing_file(tmp_path) -> None:
    result = runner.invoke(app, ["sanitize", str(tmp_path / "nope.html")])
    assert result.exit_code == 1


def test_sanitize_text_mode() -> None:
    result = runner.invoke(app, ["sanitize", "--mode", "text"], input="<p>a</p><p>b &amp; c</p>")
    assert result.exit_code == 0
    assert result.stdout == "a\n\nb & c\n"


def test_sanitize_description_mode_placeholder() -> None:
    result = runner.invoke(app, ["sanitize", "-m", "description"], input="<script></script>")
    assert result.exit_code == 0
    assert "No description provided" in result.stdout


def test_sanitize_markdown_mode() -> None:
    result = runner.invoke(app, ["sanitize", "-m", "markdown"], input="**hi**")
    assert result.exit_code == 0
    assert "<strong>hi</strong>" in result.stdout


def test_sanitize_comment_mode() -> None:
    result = runner.invoke(app, ["sanitize", "-m", "comment"], input="<div>a</div>")
    assert result.exit_code == 0
    assert result.stdout == "a<br />\n"


def test_sanitize_strict() -> None:
    result = runner.invoke(app, ["sanitize", "--strict"], input="<p>x<img src=y onerror=z></p>")
    assert result.exit_code == 0
    assert result.stdout == "<p>x</p>\n"


def test_sanitize_truncates_long_input(isolated_env) -> None:
    (isolated_env / "pyproject.toml").write_text("[project]\nname = 'x'\n")
    (isolated_env / "config").mkdir()
    (isolated_env / "config" / "default.yaml").write_text("sanitizer:\n  max_input_length: 10\n")
    result = runner.invoke(app, ["sanitize"], input="x" * 50)
    assert result.exit_code == 0
    assert "x" * 10 in result.stdout
    assert "x" * 11 not in result.stdout


def test_check_url() -> None:
    ok = runner.invoke(app, ["check-url", "https://example.com"])
    assert ok.exit_code == 0
    assert ok.stdout.strip() == "safe"

    bad = runner.invoke(app, ["check-url", "javascript:alert(1)"])
    assert bad.exit_code == 1
    assert "unsafe" in bad.stdout


def test_style() -> None:
    result = runner.invoke(app, ["style", "background: url(evil.com); color: red;"])
    assert result.exit_code == 0
    assert result.stdout == "color: red\n"


def test_time_commands() -> None:
    assert runner.invoke(app, ["time", "format", "90"]).stdout == "1h 30m\n"
    assert runner.invoke(app, ["time", "parse", "1h 30m"]).stdout == "90\n"
    assert runner.invoke(app, ["time", "parse", "soon"]).exit_code == 1

    split = runner.invoke(app, ["time", "split", "400"])
    assert split.exit_code == 0
    assert "3h 0m" in split.stdout
    assert "40m" in split.stdout


def test_time_split_custom_max() -> None:
    result = runner.invoke(app, ["time", "split", "150", "--max", "60"])
    assert result.exit_code == 0
    assert result.stdout.count("1h 0m") == 2
    assert "30m" in result.stdout


def test_estimate_over() -> None:
    result = runner.invoke(app, ["estimate", "--original", "10", "--completed", "8", "--remaining", "5"])
    assert result.exit_code == 0
    assert "Over estimate" in result.stdout
    assert "severe" in result.stdout


def test_estimate_missing() -> None:
    result = runner.invoke(app, ["estimate", "--completed", "3"])
    assert result.exit_code == 0
    assert "No original estimate" in result.stdout


def test_config_show() -> None:
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert '"backend": "regex"' in result.stdout


def test_config_invalid(monkeypatch) -> None:
    monkeypatch.setenv("DEVBOARD_SANITIZER_BACKEND", "dom")
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 1


def test_time_split_invalid_config(monkeypatch) -> None:
    monkeypatch.setenv("DEVBOARD_SANITIZER_BACKEND", "dom")
    result = runner.invoke(app, ["time", "split", "400"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_time_split_reads_config_file(tmp_path) -> None:
    path = tmp_path / "devboard.yaml"
    path.write_text("time:\n  max_minutes_per_entry: 60\n")
    result = runner.invoke(app, ["time", "split", "90", "-c", str(path)])
    assert result.exit_code == 0
    assert "1h 0m" in result.stdout
    assert "30m" in result.stdout
