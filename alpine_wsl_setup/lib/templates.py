from __future__ import annotations

# Boot command: start OpenRC's default runlevel, and make / rshared so
# rootless podman stops warning about mount propagation.
WSL_BOOT_COMMAND = "openrc default; mount --make-rshared /"


def render_wsl_conf(username: str) -> str:
    return "\n".join(
        [
            "[user]",
            f"default={username}",
            "",
            "[boot]",
            f'command="{WSL_BOOT_COMMAND}"',
            "",
        ]
    )


def render_doas_conf(group: str = "wheel") -> str:
    return f"permit :{group}\n"


def render_subid_line(username: str, start: int, count: int) -> str:
    return f"{username}:{start}:{count}\n"
