"""
Tests for the command line entry point.
"""

import pytest

from kleene.__main__ import main


class TestMain:
    def test_default_runs_demo(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Example: demo" in out
        assert "Proposition: (pvq)<->(p->~q)" in out
        assert "Derivation of" in out

    def test_quiet_skips_derivation(self, capsys):
        assert main(["--quiet"]) == 0
        out = capsys.readouterr().out
        assert "Proposition:" in out
        assert "Derivation of" not in out

    def test_list(self, capsys):
        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        assert "demo" in out
        assert "precedence" in out
        assert "tables" in out
        assert "Proposition:" not in out

    @pytest.mark.parametrize("name", ["precedence", "tables"])
    def test_each_example(self, name, capsys):
        assert main(["--example", name]) == 0
        assert f"Example: {name}" in capsys.readouterr().out

    def test_dot_export(self, tmp_path):
        path = tmp_path / "demo.dot"
        assert main(["--quiet", "--dot", str(path)]) == 0
        assert path.read_text().startswith("digraph kleene {")

    def test_unknown_example_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--example", "nope"])
        assert exc.value.code == 2
