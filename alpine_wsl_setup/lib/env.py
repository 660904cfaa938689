from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Paths:
    os_release: str = "/etc/os-release"
    apk_repositories: str = "/etc/apk/repositories"
    wsl_conf: str = "/etc/wsl.conf"
    doas_conf: str = "/etc/doas.d/doas.conf"
    modules: str = "/etc/modules"
    subuid: str = "/etc/subuid"
    subgid: str = "/etc/subgid"
    login_shell: str = "/bin/bash"
    log_default: str = "/var/log/alpine-wsl-setup.log"


PATHS = Paths()
