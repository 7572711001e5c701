import logging

from fastapi.testclient import TestClient

from top_headlines.config import AppConfig
from top_headlines.web import create_app

from tests.fakes import failed, ok

ONE_ARTICLE = {"data": [{"title": "T", "url": "https://x", "source": "x.com"}]}


def _client(make_service, *responses):
    service, transport = make_service(*responses)
    return TestClient(create_app(service, AppConfig())), transport


def test_news_page_renders_articles(make_service):
    client, transport = _client(make_service, ok(ONE_ARTICLE))

    resp = client.get("/news", params={"locale": "gb", "category": "technology", "page": 2})

    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert '<a href="https://x"' in resp.text
    _, params = transport.calls[0]
    assert (params["locale"], params["categories"], params["page"]) == ("gb", "technology", 2)


def test_news_page_defaults(make_service):
    client, transport = _client(make_service, ok(ONE_ARTICLE))

    resp = client.get("/news")

    assert resp.status_code == 200
    _, params = transport.calls[0]
    assert (params["locale"], params["categories"], params["page"]) == ("us", "general", 1)


def test_invalid_page_is_normalized(make_service):
    client, transport = _client(make_service, ok(ONE_ARTICLE))

    assert client.get("/news", params={"page": "-4"}).status_code == 200
    assert client.get("/news", params={"page": "abc"}).status_code == 200
    assert len(transport.calls) == 1
    assert transport.calls[0][1]["page"] == 1


def test_upstream_failure_renders_empty_state(make_service):
    client, _ = _client(make_service, failed())

    resp = client.get("/news", params={"locale": "us"})

    assert resp.status_code == 200
    assert "No headlines available" in resp.text


def test_json_endpoint(make_service):
    client, _ = _client(make_service, ok(ONE_ARTICLE))

    resp = client.get("/api/news", params={"category": "business"})

    assert resp.status_code == 200
    assert resp.json() == [
        {
            "title": "T",
            "description": "",
            "url": "https://x",
            "image_url": "",
            "published_at": "",
            "source": "x.com",
        }
    ]


def test_json_endpoint_failure_is_empty_list(make_service):
    client, _ = _client(make_service, failed())

    resp = client.get("/api/news")

    assert resp.status_code == 200
    assert resp.json() == []


def test_health_and_index_redirect(make_service):
    client, _ = _client(make_service)

    assert client.get("/api/health").json() == {"status": "ok"}
    resp = client.get("/", follow_redirects=False)
    assert resp.status_code in (302, 307)
    assert resp.headers["location"] == "/news"


def test_factory_loads_dotenv_and_config_file(tmp_path, monkeypatch):
    # Registered so the variable load_dotenv sets is removed afterwards.
    monkeypatch.setenv("NEWS_API_TOKEN", "placeholder")
    monkeypatch.delenv("NEWS_API_TOKEN")
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("NEWS_API_TOKEN=from-dotenv\n", encoding="utf-8")
    log_dir = tmp_path / "logs"
    config_path = tmp_path / "headlines.yaml"
    config_path.write_text(
        "server:\n  title: Evening Edition\n"
        f"logging:\n  console: false\n  file: true\n  dir: {log_dir}\n"
        "cache:\n  max_entries: 7\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("TOP_HEADLINES_CONFIG", str(config_path))

    app = create_app()

    service = app.state.news_service
    assert service.api_token == "from-dotenv"
    assert service.cache.max_entries == 7
    assert app.title == "Evening Edition"
    assert (log_dir / "headlines.jsonl").exists()

    logger = logging.getLogger("top_headlines")
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
