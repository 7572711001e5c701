import json
import logging

from typer.testing import CliRunner

from top_headlines import cli
from top_headlines.service import NewsService

from tests.fakes import API_URL, FakeTransport, ok

runner = CliRunner()


def _patch_service(monkeypatch, *responses):
    transport = FakeTransport(*responses)
    original = cli.build_service

    def fake_build_service(cfg):
        return original(cfg, transport)

    monkeypatch.setattr(cli, "build_service", fake_build_service)
    return transport


def test_headlines_prints_table(monkeypatch):
    transport = _patch_service(monkeypatch, ok({"data": [{"title": "Big story", "source": "x.com"}]}))

    result = runner.invoke(cli.app, ["headlines", "--locale", "gb", "--page", "0", "--api-token", "t"])

    assert result.exit_code == 0, result.output
    assert "Big story" in result.output
    url, params = transport.calls[0]
    assert url == API_URL
    assert params["locale"] == "gb"
    assert params["page"] == 1
    assert params["api_token"] == "t"


def test_headlines_empty_state(monkeypatch):
    _patch_service(monkeypatch)

    result = runner.invoke(cli.app, ["headlines"])

    assert result.exit_code == 0, result.output
    assert "No headlines for us/general page 1" in result.output


def test_render_writes_page(monkeypatch, tmp_path):
    _patch_service(monkeypatch, ok({"data": [{"title": "Rendered"}]}))
    output = tmp_path / "news.html"

    result = runner.invoke(cli.app, ["render", "-o", str(output), "--category", "science"])

    assert result.exit_code == 0, result.output
    assert "Rendered" in output.read_text(encoding="utf-8")


def test_options_lists_codes():
    result = runner.invoke(cli.app, ["options"])

    assert result.exit_code == 0
    assert "United Kingdom" in result.output
    assert "technology" in result.output


def test_service_type(monkeypatch):
    _patch_service(monkeypatch)
    assert isinstance(cli.build_service(cli.AppConfig()), NewsService)


def test_log_dir_writes_jsonl_events(monkeypatch, tmp_path):
    _patch_service(monkeypatch, ok({"data": [{"title": "Logged"}]}))
    log_dir = tmp_path / "logs"

    result = runner.invoke(cli.app, ["headlines", "--log-dir", str(log_dir), "--api-token", "t"])

    logger = logging.getLogger("top_headlines")
    for handler in logger.handlers:
        handler.flush()
    assert result.exit_code == 0, result.output
    lines = (log_dir / "headlines.jsonl").read_text(encoding="utf-8").splitlines()
    events = [json.loads(line).get("event") for line in lines]
    assert "news_cache_store" in events

    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
