from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from table2dsv import cli
from table2dsv.cli import app
from table2dsv.config.schema import RenderSettings

FRAGMENT = (
    "<table><tr><td>1-1</td><td>1-=\n2</td></tr>"
    "<tr><td>2=\n-1</td><td>2-2</td></tr></table>"
)
# innerText of FRAGMENT's rows as rendered by Chromium
RENDERED = ["1-1\t1-= 2", "2= -1\t2-2"]


class FakeRenderer:
    def __init__(self, rows: list[str]) -> None:
        self.rows = rows
        self.uris: list[str] = []
        self.settings: RenderSettings | None = None

    def render(self, uri: str) -> list[str]:
        self.uris.append(uri)
        return list(self.rows)


@pytest.fixture()
def fake(monkeypatch: pytest.MonkeyPatch) -> FakeRenderer:
    renderer = FakeRenderer(RENDERED)

    def factory(settings: RenderSettings) -> FakeRenderer:
        renderer.settings = settings
        return renderer

    monkeypatch.setattr(cli, "create_renderer", factory)
    return renderer


def test_inline_fragment(fake: FakeRenderer) -> None:
    result = CliRunner().invoke(app, [FRAGMENT])
    assert result.exit_code == 0
    assert result.stdout == "1-1\t1-2\n2-1\t2-2\n"
    assert "= " not in result.stdout
    assert fake.uris[0].startswith("data:text/html,")


def test_url_passed_through(fake: FakeRenderer) -> None:
    url = "https://bench.cr.yp.to/results-sign/amd64-hertz.html"
    result = CliRunner().invoke(app, [url])
    assert result.exit_code == 0
    assert fake.uris == [url]


def test_local_file(fake: FakeRenderer, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    page = tmp_path / "zoo.mhtml"
    page.write_text("<table></table>", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    result = CliRunner().invoke(app, ["zoo.mhtml"])
    assert result.exit_code == 0
    assert fake.uris == [(Path.cwd() / "zoo.mhtml").as_uri()]


def test_local_file_base_dir_option(fake: FakeRenderer, tmp_path: Path) -> None:
    (tmp_path / "t.html").write_text("<table></table>", encoding="utf-8")
    result = CliRunner().invoke(app, ["t.html", "--base-dir", str(tmp_path)])
    assert result.exit_code == 0
    assert fake.uris == [(tmp_path / "t.html").as_uri()]


def test_local_file_base_dir_env(
    fake: FakeRenderer, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "t.htm").write_text("<table></table>", encoding="utf-8")
    monkeypatch.setenv("TABLE2DSV_BASE_DIR", str(tmp_path))
    result = CliRunner().invoke(app, ["t.htm"])
    assert result.exit_code == 0
    assert fake.uris == [(tmp_path / "t.htm").as_uri()]


def test_delimiter_option(fake: FakeRenderer) -> None:
    result = CliRunner().invoke(app, [FRAGMENT, "--delimiter", ","])
    assert result.exit_code == 0
    assert result.stdout == "1-1,1-2\n2-1,2-2\n"


def test_render_options_forwarded(fake: FakeRenderer) -> None:
    result = CliRunner().invoke(app, [FRAGMENT, "--browser", "webkit", "--timeout", "2.5"])
    assert result.exit_code == 0
    assert fake.settings is not None
    assert fake.settings.browser == "webkit"
    assert fake.settings.timeout_ms == 2500


def test_out_file(fake: FakeRenderer, tmp_path: Path) -> None:
    out = tmp_path / "nested" / "rows.tsv"
    result = CliRunner().invoke(app, [FRAGMENT, "--out", str(out)])
    assert result.exit_code == 0
    assert result.stdout == ""
    assert out.read_text(encoding="utf-8") == "1-1\t1-2\n2-1\t2-2\n"


def test_no_rows_prints_empty_line(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "create_renderer", lambda settings: FakeRenderer([]))
    result = CliRunner().invoke(app, ["<table></table>"])
    assert result.exit_code == 0
    assert result.stdout == "\n"


def test_verbose_reports_progress(fake: FakeRenderer) -> None:
    result = CliRunner().invoke(app, [FRAGMENT, "--verbose"])
    assert result.exit_code == 0
    assert "Rendered 2 rows" in result.stderr
    assert result.stdout == "1-1\t1-2\n2-1\t2-2\n"


@pytest.mark.parametrize(
    ("value", "expected"),
    [("0", 0), ("0.0004", 1), ("30", 30000)],
)
def test_timeout_conversion(fake: FakeRenderer, value: str, expected: int) -> None:
    result = CliRunner().invoke(app, [FRAGMENT, "--timeout", value])
    assert result.exit_code == 0
    assert fake.settings is not None
    assert fake.settings.timeout_ms == expected
