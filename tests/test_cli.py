"""Unit tests for the command-line interface (sitegen.cli).

Tests cover:
- Argument parsing for every sub-command
- presets / layouts listing
- render: HTML and JSON output, bad fixtures, unserved industries
- run: unknown presets, successful and failing batches (backend patched)
"""

from __future__ import annotations

import json

import pytest

from sitegen import cli
from sitegen.utils import console


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    monkeypatch.setattr(console, "width", 200)


@pytest.fixture
def fixture_file(tmp_path):
    path = tmp_path / "fixture.json"
    path.write_text(
        json.dumps(
            {
                "business": {"name": "Mario's Pizza", "industry": "pizza", "phone": "555-0101"},
                "menu": [{"name": "Pizzas", "items": [{"name": "Margherita", "price": "$14"}]}],
            }
        ),
        encoding="utf-8",
    )
    return path


class _PatchedBackend:
    """Stands in for HttpGenerationBackend; ``from_config`` returns *instance*."""

    instance = None

    @classmethod
    def from_config(cls, config):
        return cls.instance


class _FailingBackend:
    async def assemble(self, payload):
        raise RuntimeError("backend exploded")

    async def orchestrate(self, payload):
        raise RuntimeError("backend exploded")


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class TestParser:
    @pytest.mark.unit
    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])

    @pytest.mark.unit
    def test_run_arguments(self):
        args = cli.build_parser().parse_args(["run", "pizza-L1", "saas-L1", "--cleanup"])
        assert args.presets == ["pizza-L1", "saas-L1"]
        assert args.cleanup is True
        assert args.deploy is False
        assert args.func is cli.cmd_run

    @pytest.mark.unit
    def test_render_defaults(self):
        args = cli.build_parser().parse_args(["render", "f.json"])
        assert args.format == "html"
        assert args.output is None
        assert args.layout is None

    @pytest.mark.unit
    def test_render_rejects_unknown_format(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["render", "f.json", "--format", "pdf"])


# ---------------------------------------------------------------------------
# Listing commands
# ---------------------------------------------------------------------------


class TestListing:
    @pytest.mark.unit
    def test_presets(self, capsys):
        assert cli.main(["presets"]) == 0
        out = capsys.readouterr().out
        assert "pizza-L1" in out
        assert "orchestrate-saas" in out

    @pytest.mark.unit
    def test_presets_by_tier(self, capsys):
        assert cli.main(["presets", "--tier", "L4"]) == 0
        out = capsys.readouterr().out
        assert "pizza-L1" not in out

    @pytest.mark.unit
    def test_layouts(self, capsys):
        assert cli.main(["layouts"]) == 0
        assert "patient-focused" in capsys.readouterr().out

    @pytest.mark.unit
    def test_industry_layouts(self, capsys):
        assert cli.main(["layouts", "--industry", "Pizza"]) == 0
        out = capsys.readouterr().out
        assert "pizza-restaurant" in out
        assert "family-fun" in out

    @pytest.mark.unit
    def test_layout_css(self, capsys):
        assert cli.main(["layouts", "--css", "elegant-dining"]) == 0
        out = capsys.readouterr().out
        assert ":root {" in out
        assert "--layout-spacing: 48px;" in out


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


class TestRender:
    @pytest.mark.unit
    def test_html(self, fixture_file, tmp_path):
        out = tmp_path / "site"
        assert cli.main(["render", str(fixture_file), "-o", str(out)]) == 0
        assert (out / "index.html").exists()
        assert (out / "reservations.html").exists()
        assert "Margherita" in (out / "menu.html").read_text(encoding="utf-8")

    @pytest.mark.unit
    def test_json_with_layout(self, fixture_file, tmp_path):
        out = tmp_path / "json"
        code = cli.main(
            ["render", str(fixture_file), "--layout", "elegant-dining", "--format", "json", "-o", str(out)]
        )
        assert code == 0
        site = json.loads((out / "site.json").read_text(encoding="utf-8"))
        assert site["layout"]["id"] == "elegant-dining"

    @pytest.mark.unit
    def test_missing_fixture(self, tmp_path):
        assert cli.main(["render", str(tmp_path / "nope.json")]) == 1

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert cli.main(["render", str(path), "-o", str(tmp_path / "out")]) == 1

    @pytest.mark.unit
    def test_fixture_missing_business(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("{}", encoding="utf-8")
        assert cli.main(["render", str(path), "-o", str(tmp_path / "out")]) == 1

    @pytest.mark.unit
    def test_output_defaults_to_configured_dir(self, fixture_file, tmp_path, monkeypatch):
        out = tmp_path / "from-env"
        monkeypatch.setenv("SITEGEN_OUTPUT_DIR", str(out))
        assert cli.main(["render", str(fixture_file)]) == 0
        assert (out / "index.html").exists()

    @pytest.mark.unit
    def test_catalogue_industry_uses_universal_pages(self, tmp_path):
        path = tmp_path / "salon.json"
        path.write_text(json.dumps({"business": {"name": "Glow", "industry": "salon"}}), encoding="utf-8")
        out = tmp_path / "out"
        assert cli.main(["render", str(path), "-o", str(out)]) == 0
        assert (out / "team.html").exists()
        assert (out / "gallery.html").exists()

    @pytest.mark.unit
    def test_unserved_industry(self, tmp_path):
        path = tmp_path / "agency.json"
        path.write_text(json.dumps({"business": {"name": "Pixel", "industry": "agency"}}), encoding="utf-8")
        assert cli.main(["render", str(path), "-o", str(tmp_path / "out")]) == 1
        assert not (tmp_path / "out").exists()


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


class TestRun:
    @pytest.mark.unit
    def test_unknown_preset_exits_2(self, monkeypatch, recording_backend):
        monkeypatch.setattr(_PatchedBackend, "instance", recording_backend)
        monkeypatch.setattr(cli, "HttpGenerationBackend", _PatchedBackend)
        assert cli.main(["run", "pizza-L1", "no-such-preset"]) == 2
        assert recording_backend.calls == []

    @pytest.mark.unit
    def test_successful_batch(self, monkeypatch, recording_backend, capsys):
        monkeypatch.setattr(_PatchedBackend, "instance", recording_backend)
        monkeypatch.setattr(cli, "HttpGenerationBackend", _PatchedBackend)
        assert cli.main(["run", "pizza-L1", "orchestrate-saas"]) == 0
        assert sorted(method for method, _ in recording_backend.calls) == ["assemble", "orchestrate"]
        assert "Test Summary" in capsys.readouterr().out

    @pytest.mark.unit
    def test_router_timeout_from_config(self, monkeypatch, recording_backend):
        monkeypatch.setattr(_PatchedBackend, "instance", recording_backend)
        monkeypatch.setattr(cli, "HttpGenerationBackend", _PatchedBackend)
        monkeypatch.setenv("SITEGEN_BACKEND_TIMEOUT", "42")
        routers = []
        real_router = cli.GenerationRouter

        def capture_router(*args, **kwargs):
            router = real_router(*args, **kwargs)
            routers.append(router)
            return router

        monkeypatch.setattr(cli, "GenerationRouter", capture_router)
        assert cli.main(["run", "pizza-L1"]) == 0
        assert [router.timeout for router in routers] == [42]

    @pytest.mark.unit
    def test_failing_batch_exits_1(self, monkeypatch):
        monkeypatch.setattr(_PatchedBackend, "instance", _FailingBackend())
        monkeypatch.setattr(cli, "HttpGenerationBackend", _PatchedBackend)
        assert cli.main(["run", "pizza-L1"]) == 1

    @pytest.mark.unit
    def test_deploy_without_service_warns(self, monkeypatch, recording_backend, capsys):
        monkeypatch.setattr(_PatchedBackend, "instance", recording_backend)
        monkeypatch.setattr(cli, "HttpGenerationBackend", _PatchedBackend)
        assert cli.main(["run", "pizza-L1", "--deploy"]) == 0
        assert "No deploy service configured" in capsys.readouterr().out
