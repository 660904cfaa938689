"""Shared fixtures: a recording System double rooted in a temp directory."""

import os

import pytest

from alpine_wsl_setup.lib.command import CmdResult, CommandError
from alpine_wsl_setup.lib.system import System


class FakeSystem(System):
    """System that records commands instead of running them.

    - ``installed``: names reported by ``apk list -I``
    - ``repo_packages``: names for which ``apk info NAME`` succeeds
    - ``failing``: argv tuples (or argv prefixes) that exit 1
    """

    def __init__(self, root, *, euid=0, commands=None, installed=None, repo_packages=None, failing=None):
        super().__init__(str(root))
        self.euid = euid
        self.commands = set(commands if commands is not None else {"apk", "pip3", "passwd", "chsh"})
        self.installed = list(installed or [])
        self.repo_packages = set(repo_packages or [])
        self.failing = [tuple(f) for f in (failing or [])]
        self.calls = []

    def geteuid(self):
        return self.euid

    def command_exists(self, name):
        return name in self.commands

    def _respond(self, argv):
        for f in self.failing:
            if tuple(argv[: len(f)]) == f:
                return 1, ""
        if argv[:3] == ["apk", "list", "-I"]:
            lines = [f"{n}-1.0-r0 x86_64 {{{n}}} (MIT) [installed]" for n in self.installed]
            return 0, "\n".join(lines) + "\n"
        if argv[:2] == ["apk", "info"]:
            return (0 if argv[2] in self.repo_packages else 1), ""
        return 0, ""

    def run(self, argv, *, check=True, readonly=False, interactive=False):
        argv = list(argv)
        self.calls.append(argv)
        rc, out = self._respond(argv)
        result = CmdResult(argv=argv, returncode=rc, stdout=out, stderr="boom" if rc else "")
        if check and rc != 0:
            raise CommandError(result)
        return result

    def mutating_calls(self):
        return [c for c in self.calls if c[:2] not in (["apk", "info"], ["apk", "list"])]


def make_root(tmp_path, os_id="alpine"):
    etc = tmp_path / "etc"
    (etc / "apk").mkdir(parents=True)
    (etc / "os-release").write_text(
        f'NAME="Alpine Linux"\nID={os_id}\nVERSION_ID=3.19.1\n', encoding="utf-8"
    )
    (etc / "apk" / "repositories").write_text(
        "https://dl-cdn.alpinelinux.org/alpine/v3.19/main\n"
        "https://dl-cdn.alpinelinux.org/alpine/v3.19/community\n",
        encoding="utf-8",
    )
    bash = tmp_path / "bin" / "bash"
    bash.parent.mkdir(parents=True)
    bash.write_text("#!/bin/sh\n", encoding="utf-8")
    os.chmod(bash, 0o755)
    return tmp_path


@pytest.fixture
def alpine_root(tmp_path):
    return make_root(tmp_path)


@pytest.fixture
def fake_system(alpine_root):
    return FakeSystem(alpine_root)
