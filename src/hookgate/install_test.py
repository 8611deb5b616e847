import os
import shutil
import subprocess

import pytest

from hookgate.install import HOOK_SCRIPT, HookExistsError, HookInstallError, install_hook

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


@pytest.fixture
def repo(tmp_path):
    subprocess.run(["git", "init", "-q", str(tmp_path)], check=True)
    return tmp_path


def test_install_hook_writes_executable_script(repo):
    hook = install_hook(cwd=str(repo))

    assert hook == (repo / ".git" / "hooks" / "pre-commit").resolve()
    assert hook.read_text() == HOOK_SCRIPT
    assert os.access(hook, os.X_OK)


def test_install_hook_keeps_existing_hook(repo):
    hook = repo / ".git" / "hooks" / "pre-commit"
    hook.parent.mkdir(parents=True, exist_ok=True)
    hook.write_text("#!/bin/sh\nexit 0\n")

    with pytest.raises(HookExistsError):
        install_hook(cwd=str(repo))
    assert hook.read_text() == "#!/bin/sh\nexit 0\n"

    install_hook(cwd=str(repo), force=True)
    assert hook.read_text() == HOOK_SCRIPT


def test_install_hook_follows_core_hooks_path(repo):
    subprocess.run(["git", "config", "core.hooksPath", "githooks"], cwd=repo, check=True)

    hook = install_hook(cwd=str(repo))

    assert hook == (repo / "githooks" / "pre-commit").resolve()


def test_install_hook_outside_repository(tmp_path, monkeypatch):
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    plain = tmp_path / "plain"
    plain.mkdir()

    with pytest.raises(HookInstallError, match="not inside a git repository"):
        install_hook(cwd=str(plain))
