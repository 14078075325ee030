"""
Tests for the atlas command line.
"""
import json

import pytest

from atlas import main as cli
from atlas.main import main


@pytest.fixture
def answers(monkeypatch):
    """Feed canned answers to every rich Prompt.ask call."""
    def install(*values):
        it = iter(values)
        monkeypatch.setattr(cli.Prompt, "ask", lambda *args, **kwargs: next(it))
    return install


class TestGenerateCommand:
    """Tests for `atlas generate`."""

    def test_generate_writes_files(self, tmp_path):
        out = tmp_path / "ds"
        code = main(["generate", "-t", "minimal", "-s", "acme", "-o", str(out), "-f", "css", "json"])
        assert code == 0
        assert (out / "tokens.css").exists()
        assert (out / "tokens.json").exists()
        assert (out / "README.md").exists()

    def test_aliases(self, tmp_path):
        assert main(["gen", "-o", str(tmp_path / "a"), "-f", "json"]) == 0
        assert main(["g", "-o", str(tmp_path / "b"), "-f", "json"]) == 0

    def test_defaults_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ATLAS_THEME", "forest")
        monkeypatch.setenv("ATLAS_SEED", "env-seed")
        monkeypatch.setenv("ATLAS_FORMATS", "json")
        monkeypatch.setenv("ATLAS_OUTPUT_DIR", str(tmp_path / "env-out"))
        assert main(["gen"]) == 0
        data = json.loads((tmp_path / "env-out" / "tokens.json").read_text(encoding="utf-8"))
        assert data["theme"] == "forest"
        assert data["seed"] == "env-seed"

    def test_defaults_from_project_dotenv(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("ATLAS_THEME=nature\nATLAS_SEED=dotenv-seed\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert main(["gen", "-o", "out", "-f", "json"]) == 0
        data = json.loads((tmp_path / "out" / "tokens.json").read_text(encoding="utf-8"))
        assert data["theme"] == "nature"
        assert data["seed"] == "dotenv-seed"

    def test_flags_override_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ATLAS_THEME", "forest")
        out = tmp_path / "out"
        assert main(["gen", "-t", "arctic", "-o", str(out), "-f", "json"]) == 0
        data = json.loads((out / "tokens.json").read_text(encoding="utf-8"))
        assert data["theme"] == "arctic"

    def test_same_seed_same_output(self, tmp_path):
        for name in ("a", "b"):
            main(["gen", "-t", "sunset", "-s", "same", "-o", str(tmp_path / name), "-f", "css", "--no-components"])
        assert (tmp_path / "a" / "tokens.css").read_text() == (tmp_path / "b" / "tokens.css").read_text()

    def test_no_components(self, tmp_path):
        out = tmp_path / "out"
        assert main(["gen", "-o", str(out), "-f", "json", "--no-components"]) == 0
        data = json.loads((out / "tokens.json").read_text(encoding="utf-8"))
        assert "components" not in data

    def test_custom_theme(self, tmp_path):
        theme_file = tmp_path / "brand.json"
        theme_file.write_text(json.dumps({"name": "Acme", "primaryHue": 15}), encoding="utf-8")
        out = tmp_path / "out"
        assert main(["gen", "--custom-theme", str(theme_file), "-o", str(out), "-f", "json"]) == 0
        data = json.loads((out / "tokens.json").read_text(encoding="utf-8"))
        assert data["theme"] == "Acme"

    def test_unknown_theme_fails(self, tmp_path, capsys):
        out = tmp_path / "out"
        assert main(["gen", "-t", "nope", "-o", str(out)]) == 1
        assert "not found" in capsys.readouterr().out
        assert not out.exists()

    def test_unknown_format_fails(self, tmp_path):
        assert main(["gen", "-o", str(tmp_path / "out"), "-f", "pdf"]) == 1

    def test_missing_custom_theme_fails(self, tmp_path):
        assert main(["gen", "--custom-theme", str(tmp_path / "missing.json"), "-o", str(tmp_path)]) == 1

    def test_interactive(self, tmp_path, answers):
        answers("demo", "gaming", "1", "demo-seed")
        out = tmp_path / "out"
        assert main(["gen", "-i", "-o", str(out), "-f", "json"]) == 0
        data = json.loads((out / "tokens.json").read_text(encoding="utf-8"))
        assert data["theme"] == "cyberpunk"
        assert data["seed"] == "demo-seed"


class TestInfoCommands:
    """Tests for `atlas themes`, `atlas recommend` and the bare command."""

    def test_themes(self, capsys):
        assert main(["themes"]) == 0
        out = capsys.readouterr().out
        assert "cyberpunk" in out
        assert "glassmorphism" in out

    def test_recommend(self, capsys):
        assert main(["recommend", "-k", "healthcare fintech"]) == 0
        out = capsys.readouterr().out
        assert "Arctic" in out
        assert "atlas gen --theme arctic" in out

    def test_recommend_prompts_without_keywords(self, capsys, answers):
        answers("blockchain")
        assert main(["recommend"]) == 0
        assert "Cyberpunk" in capsys.readouterr().out

    def test_no_command_shows_help(self, capsys):
        assert main([]) == 0
        assert "atlas generate -i" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "atlas 1.0.0" in capsys.readouterr().out
