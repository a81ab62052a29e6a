"""Tests for the link-crawler CLI entry point."""

import httpx
import pytest
import respx
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()

_SEED = "https://site.test/"


@pytest.fixture
def site():
    """Serve a two-level fake site; yields the routes keyed by URL."""
    with respx.mock(assert_all_called=False) as router:
        seed = router.get(_SEED).mock(
            return_value=httpx.Response(
                200,
                text='<a href="https://site.test/docs">Docs</a>'
                     '<a href="https://site.test/gone">Gone</a>',
            )
        )
        docs = router.get("https://site.test/docs").mock(
            return_value=httpx.Response(200, text='<a href="https://site.test/api">API</a>')
        )
        gone = router.get("https://site.test/gone").mock(return_value=httpx.Response(410))
        yield {_SEED: seed, "https://site.test/docs": docs, "https://site.test/gone": gone}


def test_crawl_prints_links(site, monkeypatch):
    monkeypatch.setattr("crawler.config.settings.max_depth", 2)

    result = runner.invoke(app, [_SEED])

    assert result.exit_code == 0
    assert "Docs (0) - https://site.test/docs\n" in result.stdout
    assert "\tAPI (1) - https://site.test/api\n" in result.stdout
    assert "Gone (0) - https://site.test/gone\n" in result.stdout
    assert result.stdout.index("Docs (0)") < result.stdout.index("\tAPI (1)")
    assert result.stdout.index("\tAPI (1)") < result.stdout.index("Gone (0)")


def test_max_depth_setting_limits_output(site, monkeypatch):
    monkeypatch.setattr("crawler.config.settings.max_depth", 1)

    result = runner.invoke(app, [_SEED])

    assert result.exit_code == 0
    assert "Docs (0)" in result.stdout
    assert "API" not in result.stdout
    assert site[_SEED].called
    assert not site["https://site.test/docs"].called


def test_log_level_option_accepted(site, monkeypatch):
    monkeypatch.setattr("crawler.config.settings.max_depth", 1)

    result = runner.invoke(app, ["--log-level", "debug", _SEED])

    assert result.exit_code == 0
    assert "Docs (0)" in result.stdout


def test_unknown_log_level_is_usage_error():
    result = runner.invoke(app, ["--log-level", "chatty", _SEED])
    assert result.exit_code == 2


def test_missing_url_is_usage_error():
    result = runner.invoke(app, [])
    assert result.exit_code == 2


def test_extra_argument_is_usage_error():
    result = runner.invoke(app, [_SEED, "https://other.test/"])
    assert result.exit_code == 2
