from __future__ import annotations

from .system import System


def rc_update_add(system: System, service: str, runlevel: str | None = None) -> None:
    """Register an OpenRC service (default runlevel unless one is given)."""
    argv = ["rc-update", "add", service]
    if runlevel:
        argv.append(runlevel)
    system.run(argv)
