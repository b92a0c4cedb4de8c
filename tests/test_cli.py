import json

from scripts.run_search import main


def _corpus(tmp_path) -> tuple[str, str]:
    (tmp_path / "noise.txt").write_text("of", encoding="utf-8")
    (tmp_path / "docs.txt").write_text("x.txt y.txt", encoding="utf-8")
    (tmp_path / "x.txt").write_text("cats of cats", encoding="utf-8")
    (tmp_path / "y.txt").write_text("dogs dogs dogs cats", encoding="utf-8")
    return str(tmp_path / "docs.txt"), str(tmp_path / "noise.txt")


def test_cli_prints_results(tmp_path, capsys) -> None:
    docs, noise = _corpus(tmp_path)
    assert main(["--docs", docs, "--noise", noise, "--query", "cats", "dogs"]) == 0
    out = capsys.readouterr().out
    assert "Documents: 2" in out
    assert "cats OR dogs: y.txt, x.txt" in out


def test_cli_json_output(tmp_path, capsys) -> None:
    docs, noise = _corpus(tmp_path)
    assert main(["--docs", docs, "--noise", noise, "--query", "of", "birds", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["keywords"] == 2
    assert payload["results"] == [{"kw1": "of", "kw2": "birds", "documents": []}]


def test_cli_missing_file(tmp_path, capsys) -> None:
    assert main(["--docs", str(tmp_path / "nope.txt"), "--noise", str(tmp_path / "nope.txt")]) == 1
    assert "error" in capsys.readouterr().err
