"""
Smoke tests for the command-line scripts.
"""

import importlib.util
import sys

import plotly.graph_objects as go
import pytest


def load_script(project_root, name):
    """Import a script from scripts/ as a module."""
    spec = importlib.util.spec_from_file_location(name, project_root / "scripts" / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def find_path_cli(project_root):
    return load_script(project_root, "find_path")


@pytest.fixture
def demo_cli(project_root):
    return load_script(project_root, "random_walk_demo")


@pytest.fixture
def example_dot(project_root):
    return str(project_root / "data" / "example.dot")


class TestFindPathScript:
    """Test scripts/find_path.py."""

    def test_bfs(self, find_path_cli, example_dot, monkeypatch, capsys):
        """Reachable target exits 0 and prints the path."""
        monkeypatch.setattr(sys, "argv", ["find_path", "--graph", example_dot, "--start", "A", "--target", "D"])
        assert find_path_cli.main() == 0
        out = capsys.readouterr().out
        assert "Path found (3 edges)" in out

    def test_unreachable(self, find_path_cli, example_dot, monkeypatch, capsys):
        """Unreachable target exits 1."""
        monkeypatch.setattr(
            sys, "argv", ["find_path", "--graph", example_dot, "--start", "A", "--target", "Z", "--algorithm", "dfs"]
        )
        assert find_path_cli.main() == 1
        assert "No path found" in capsys.readouterr().out

    def test_unknown_node(self, find_path_cli, example_dot, monkeypatch, capsys):
        """Unknown node exits 2 with an error message."""
        monkeypatch.setattr(sys, "argv", ["find_path", "--graph", example_dot, "--start", "Q", "--target", "D"])
        assert find_path_cli.main() == 2
        assert "Source node doesn't exist: Q" in capsys.readouterr().err

    def test_missing_graph(self, find_path_cli, tmp_path, monkeypatch):
        """Unreadable graph file exits 2."""
        monkeypatch.setattr(
            sys, "argv", ["find_path", "--graph", str(tmp_path / "nope.dot"), "--start", "A", "--target", "B"]
        )
        assert find_path_cli.main() == 2

    def test_random_with_render(self, find_path_cli, example_dot, tmp_path, monkeypatch):
        """Random walk with a seed, rendering the result as DOT."""
        output = tmp_path / "out.dot"
        monkeypatch.setattr(
            sys,
            "argv",
            [
                "find_path", "--graph", example_dot, "--start", "A", "--target", "B",
                "--algorithm", "random", "--seed", "1", "--render", str(output),
            ],
        )
        assert find_path_cli.main() == 0
        assert "A -> B [color=red];" in output.read_text(encoding="utf-8")

    def test_default_graph(self, find_path_cli, monkeypatch, capsys):
        """Without --graph the bundled example is used."""
        monkeypatch.setattr(sys, "argv", ["find_path", "--start", "A", "--target", "D"])
        assert find_path_cli.main() == 0
        assert "Path found" in capsys.readouterr().out

    def test_bare_render_name_goes_to_output_dir(self, find_path_cli, tmp_path, monkeypatch):
        """A bare file name lands in the output directory, which is created."""
        monkeypatch.setattr(find_path_cli, "OUTPUT_DIR", tmp_path / "out")
        assert find_path_cli.resolve_output(find_path_cli.Path("graph.dot")) == tmp_path / "out" / "graph.dot"
        assert (tmp_path / "out").is_dir()

    def test_render_path_with_directory_is_kept(self, find_path_cli, tmp_path, monkeypatch):
        """Paths with a directory part are used as given."""
        monkeypatch.setattr(find_path_cli, "OUTPUT_DIR", tmp_path / "out")
        target = tmp_path / "graph.dot"
        assert find_path_cli.resolve_output(target) == target
        assert not (tmp_path / "out").exists()

    def test_image_export_unavailable(self, find_path_cli, example_dot, tmp_path, monkeypatch, capsys):
        """A failed PNG export exits 2 with a hint instead of a traceback."""

        def fail(*args, **kwargs):
            raise RuntimeError("Image export requires the Kaleido package")

        monkeypatch.setattr(go.Figure, "write_image", fail)
        monkeypatch.setattr(
            sys,
            "argv",
            ["find_path", "--graph", example_dot, "--start", "A", "--target", "B", "--render", str(tmp_path / "out.png")],
        )
        assert find_path_cli.main() == 2
        assert "dotpath[images]" in capsys.readouterr().err


class TestRandomWalkDemoScript:
    """Test scripts/random_walk_demo.py."""

    def test_demo(self, demo_cli, project_root, monkeypatch, capsys):
        """Seeded demo finds the a -> b -> c route."""
        graph = str(project_root / "data" / "random_walk_demo.dot")
        monkeypatch.setattr(
            sys,
            "argv",
            ["random_walk_demo", "--graph", graph, "--start", "a", "--target", "c", "--attempts", "30", "--seed", "5"],
        )
        assert demo_cli.main() == 0
        out = capsys.readouterr().out
        assert "Random Walk Summary" in out
        assert "a->b->c" in out

    def test_no_path(self, demo_cli, monkeypatch, capsys):
        """Every walk fails when the target is unreachable; exits 1."""
        monkeypatch.setattr(
            sys,
            "argv",
            ["random_walk_demo", "--start", "a", "--target", "d", "--attempts", "3", "--min-attempts", "3", "--seed", "1"],
        )
        assert demo_cli.main() == 1
        out = capsys.readouterr().out
        assert out.count("no path found") == 3
        assert "Found 0 different successful paths" in out
