"""Unit tests for the GitPython backend."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from .git_backend import GitPythonBackend


def describe_GitPythonBackend():

    def describe_clone():

        def it_clones_single_branch_shallowly(tmp_path: Path):
            with patch("github_repo_mirror.git_backend.Repo") as repo_cls:
                GitPythonBackend().clone("https://github.com/o/r.git", tmp_path / "main", branch="main")

            repo_cls.clone_from.assert_called_once_with(
                "https://github.com/o/r.git",
                str(tmp_path / "main"),
                depth=1,
                branch="main",
                single_branch=True,
            )

        def it_clones_default_branch_without_branch_options(tmp_path: Path):
            with patch("github_repo_mirror.git_backend.Repo") as repo_cls:
                GitPythonBackend().clone("https://github.com/o/r.git", tmp_path / "r")

            repo_cls.clone_from.assert_called_once_with(
                "https://github.com/o/r.git", str(tmp_path / "r"), depth=1
            )

    def describe_update_submodules():

        def it_inits_then_updates_recursively(tmp_path: Path):
            repo = MagicMock()
            with patch("github_repo_mirror.git_backend.Repo", return_value=repo):
                GitPythonBackend().update_submodules(tmp_path)

            assert repo.git.submodule.call_args_list[0].args == ("init",)
            assert repo.git.submodule.call_args_list[1].args == (
                "update", "--recursive", "--init", "--depth", "1",
            )
            repo.close.assert_called_once()
