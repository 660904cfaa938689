import pytest

from alpine_wsl_setup.lib.apk import (
    apk_add,
    apk_has_package,
    apk_list_installed,
    split_pkgver,
    switch_repositories,
)
from alpine_wsl_setup.lib.command import CmdResult

from conftest import FakeSystem


@pytest.mark.parametrize(
    "pkgver, name",
    [
        ("curl-8.5.0-r0", "curl"),
        ("py3-pip-23.3.1-r0", "py3-pip"),
        ("libxml2-2.11.6-r0", "libxml2"),
        ("util-linux-misc-2.39.3-r0", "util-linux-misc"),
        ("bash-completion-2.11-r5", "bash-completion"),
        ("curl", "curl"),
    ],
)
def test_split_pkgver(pkgver, name):
    assert split_pkgver(pkgver) == name


def test_list_installed_parses_apk_output(alpine_root):
    system = FakeSystem(alpine_root)
    output = (
        "WARNING: opening from cache https://dl-cdn.alpinelinux.org/alpine/edge/main: No such file\n"
        "curl-8.5.0-r0 x86_64 {curl} (curl) [installed]\n"
        "\n"
        "py3-pip-23.3.1-r0 noarch {py3-pip} (MIT) [installed]\n"
    )
    system.run = lambda argv, **kw: CmdResult(argv=list(argv), returncode=0, stdout=output, stderr="")
    assert apk_list_installed(system) == ["curl", "py3-pip"]


def test_has_package_uses_exit_status(alpine_root):
    system = FakeSystem(alpine_root, repo_packages={"git-doc"})
    assert apk_has_package(system, "git-doc") is True
    assert apk_has_package(system, "nope-doc") is False


def test_add_with_index_refresh(alpine_root):
    system = FakeSystem(alpine_root)
    apk_add(system, ["bash", "curl"], update_index=True)
    assert system.calls == [["apk", "add", "-U", "bash", "curl"]]


def test_add_nothing(alpine_root):
    system = FakeSystem(alpine_root)
    apk_add(system, [])
    assert system.calls == []


class TestSwitchRepositories:
    def test_rewrites_release_to_edge(self, alpine_root):
        system = FakeSystem(alpine_root)
        assert switch_repositories(system) is True
        content = (alpine_root / "etc" / "apk" / "repositories").read_text()
        assert content == (
            "https://dl-cdn.alpinelinux.org/alpine/edge/main\n"
            "https://dl-cdn.alpinelinux.org/alpine/edge/community\n"
        )

    def test_already_on_edge(self, alpine_root):
        system = FakeSystem(alpine_root)
        switch_repositories(system)
        assert switch_repositories(system) is False

    def test_missing_file_raises(self, tmp_path):
        system = FakeSystem(tmp_path)
        with pytest.raises(FileNotFoundError):
            switch_repositories(system)
