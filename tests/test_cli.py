from __future__ import annotations

import json

from websearch_mcp.cli import build_parser, main


def test_parser_search_args():
    args = build_parser().parse_args(["search", "--query", "weather", "--max-results", "2"])
    assert args.query == "weather"
    assert args.max_results == 2
    assert args.language == "zh-CN"


def test_tools_command_prints_json_lines(capsys):
    assert main(["tools"]) == 0
    lines = [json.loads(ln) for ln in capsys.readouterr().out.splitlines() if ln.strip()]
    assert [t["name"] for t in lines] == ["web_search", "web_scrape", "web_search_and_scrape"]


def test_search_command_placeholder(capsys, monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SEARCH_API_KEY", raising=False)
    monkeypatch.delenv("SEARCH_ENGINE_ID", raising=False)
    assert main(["search", "--query", "weather", "--max-results", "2"]) == 0
    out = capsys.readouterr().out
    assert "weather" in out
    assert "2. **" in out


def test_scrape_command_error_exit_code(capsys):
    assert main(["scrape", "--url", "not-a-url"]) == 1
    assert "Scrape failed" in capsys.readouterr().err
