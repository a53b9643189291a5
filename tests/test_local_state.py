"""
Tests for installed version lookup (pacaudit/local_state.py).
"""

import subprocess
from unittest.mock import MagicMock, patch

from pacaudit.local_state import get_installed_version, parse_pacman_version


PACMAN_QI_DOCKER = """\
Name            : docker
Version         : 1:19.03.2-1
Description     : Pack, ship and run any application as a lightweight container
Architecture    : x86_64
"""

PACMAN_QI_GIT = """\
Name            : git
Version         : 2.46.0-1
Description     : the fast distributed version control system
"""


class TestParsePacmanVersion:
    """Tests for parse_pacman_version()."""

    def test_plain_version(self):
        assert parse_pacman_version(PACMAN_QI_GIT) == "2.46.0-1"

    def test_strips_epoch(self):
        assert parse_pacman_version(PACMAN_QI_DOCKER) == "19.03.2-1"

    def test_missing_version_field(self):
        assert parse_pacman_version("Name : foo\n") is None

    def test_empty_output(self):
        assert parse_pacman_version("") is None


class TestGetInstalledVersion:
    """Tests for get_installed_version()."""

    def test_installed(self):
        result = MagicMock(returncode=0, stdout=PACMAN_QI_GIT)
        with patch("subprocess.run", return_value=result) as mock_run:
            assert get_installed_version("git") == "2.46.0-1"
        args = mock_run.call_args[0][0]
        assert args == ["pacman", "-Qi", "git"]

    def test_not_installed(self):
        result = MagicMock(returncode=1, stdout="", stderr="error: package 'nope' was not found")
        with patch("subprocess.run", return_value=result):
            assert get_installed_version("nope") is None

    def test_pacman_missing(self):
        with patch("subprocess.run", side_effect=FileNotFoundError("pacman")):
            assert get_installed_version("git") is None

    def test_timeout(self):
        with patch("subprocess.run", side_effect=subprocess.TimeoutExpired(["pacman"], 10)):
            assert get_installed_version("git") is None

    def test_permission_denied(self):
        with patch("subprocess.run", side_effect=PermissionError("pacman")):
            assert get_installed_version("git") is None

    def test_runs_with_c_locale(self):
        """Test that pacman is forced to print untranslated field labels."""
        result = MagicMock(returncode=0, stdout=PACMAN_QI_GIT)
        with patch.dict("os.environ", {"LANG": "es_ES.UTF-8"}), \
                patch("subprocess.run", return_value=result) as mock_run:
            assert get_installed_version("git") == "2.46.0-1"
        env = mock_run.call_args.kwargs["env"]
        assert env["LC_ALL"] == "C"
        assert env["LANG"] == "es_ES.UTF-8"

    def test_translated_output_is_not_parsed(self):
        assert parse_pacman_version("Versión         : 2.46.0-1\n") is None
