"""
Unit tests for the command-line entry point.
"""

import io
import subprocess

import pytest
import yaml

from vimi import cli
from vimi.launcher import Launcher


class FakeRunner:
    def __init__(self, results):
        self.results = results
        self.calls = []
    
    def __call__(self, command, **kwargs):
        self.calls.append(command)
        returncode, stdout = self.results[command[0]]
        return subprocess.CompletedProcess(args=command, returncode=returncode, stdout=stdout)


def _launcher(results, available=("fd", "fzf", "nvim")):
    runner = FakeRunner(results)
    launcher = Launcher(
        which=lambda name: f"/usr/bin/{name}" if name in available else None,
        runner=runner,
    )
    return launcher, runner


@pytest.fixture(autouse=True)
def clean_root_env(monkeypatch):
    for name in ("PROJECT_DIR", "WORK_DIR", "ASSET_DIR", "VIMI_EDITOR", "VIMI_PICKER"):
        monkeypatch.delenv(name, raising=False)


class TestArguments:
    """Test cases for argument parsing."""
    
    def test_defaults(self):
        args = cli.build_parser().parse_args([])
        
        assert args.paths == []
        assert args.preview is False
        assert args.dirs is False
        assert args.depth == 0
        assert args.dry_run is False
    
    def test_flags(self):
        args = cli.build_parser().parse_args(["-p", "-f", "-d", "2", "/a", "/b"])
        
        assert args.preview is True
        assert args.dirs is True
        assert args.depth == 2
        assert args.paths == ["/a", "/b"]
    
    def test_negative_depth(self):
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--depth", "-1"])
        assert excinfo.value.code == 2
    
    def test_help_mentions_blank_roots(self):
        help_text = " ".join(cli.build_parser().format_help().split())
        assert "blank roots are rejected" in help_text
    
    def test_help_exits_zero(self):
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--help"])
        assert excinfo.value.code == 0


class TestMain:
    """Test cases for complete command-line runs."""
    
    def test_directory_mode(self, capsys):
        launcher, runner = _launcher({'fd': (0, "/a/x\n/a/y\n"), 'fzf': (0, "/a/y\n")})
        
        assert cli.main(["-f", "/a"], launcher=launcher) == 0
        assert capsys.readouterr().out == "/a/y\n"
        assert not any(command[0] == "nvim" for command in runner.calls)
    
    def test_file_mode(self):
        launcher, runner = _launcher({'fd': (0, "/a/x.txt\n"), 'fzf': (0, "/a/x.txt\n"), 'nvim': (4, "")})
        
        assert cli.main(["/a"], launcher=launcher) == 4
        assert runner.calls[-1] == ["nvim", "/a/x.txt"]
    
    def test_editor_killed_by_signal(self):
        launcher, _ = _launcher({'fd': (0, "/a/x.txt\n"), 'fzf': (0, "/a/x.txt\n"), 'nvim': (-9, "")})
        assert cli.main(["/a"], launcher=launcher) == 137
    
    def test_roots_from_environment(self, monkeypatch):
        monkeypatch.setenv("WORK_DIR", "/work")
        launcher, runner = _launcher({'fd': (0, "")})
        
        assert cli.main([], launcher=launcher) == 0
        assert runner.calls[0][-3:] == ["--search-path", "/work", "."]
    
    def test_cancelled(self, capsys):
        launcher, _ = _launcher({'fd': (0, "/a/x\n"), 'fzf': (130, "")})
        
        assert cli.main(["/a"], launcher=launcher) == 0
        assert "No file selected." in capsys.readouterr().err
    
    def test_no_backend(self, capsys):
        launcher, _ = _launcher({}, available=("fzf",))
        
        assert cli.main(["/a"], launcher=launcher) == 1
        assert "vimi: neither fd nor find is installed" in capsys.readouterr().err
    
    def test_enumeration_error(self, capsys):
        launcher, _ = _launcher({'fd': (1, "[fd error]: Search path '/nope' is not a directory.\n")})
        
        assert cli.main(["/nope"], launcher=launcher) == 1
        assert "is not a directory" in capsys.readouterr().err
    
    def test_picker_error(self, capsys):
        launcher, _ = _launcher({'fd': (0, "/a/x\n"), 'fzf': (2, "")})
        
        assert cli.main(["/a"], launcher=launcher) == 1
        assert "fzf failed" in capsys.readouterr().err
    
    def test_invalid_editor_override(self, monkeypatch, capsys):
        monkeypatch.setenv("VIMI_EDITOR", "code --wait")
        
        assert cli.main(["/a"]) == 1
        assert "Invalid configuration" in capsys.readouterr().err
    
    def test_blank_root(self):
        launcher, _ = _launcher({})
        
        with pytest.raises(SystemExit) as excinfo:
            cli.main([""], launcher=launcher)
        assert excinfo.value.code == 2


class TestDryRun:
    """Test cases for --dry-run output."""
    
    def test_prints_plan(self, capsys):
        launcher, runner = _launcher({})
        
        assert cli.main(["--dry-run", "-d", "2", "/a", "/b"], launcher=launcher) == 0
        assert runner.calls == []
        
        plan = yaml.safe_load(capsys.readouterr().out)
        assert plan['backend'] == "fd"
        assert plan['options'] == {'item_type': 'file', 'depth': 2, 'roots': ["/a", "/b"]}
        assert plan['enumerator_command'][-1] == "."
        assert plan['editor_command'] == ["nvim"]
    
    def test_render_plan(self):
        launcher, _ = _launcher({})
        options = cli.SearchOptions(roots=["."])
        
        rendered = cli.render_plan(launcher.plan(options))
        assert rendered.startswith("options:")
