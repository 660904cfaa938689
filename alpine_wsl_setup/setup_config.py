from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

from .lib.env import PATHS

DEFAULT_PACKAGES: Tuple[str, ...] = (
    "bash",
    "bash-completion",
    "binutils",
    "buildah",
    "curl",
    "ca-certificates",
    "coreutils",
    "cosign",
    "direnv",
    "doas",
    "fd",
    "findutils",
    "git",
    "make",
    "openrc",
    "openssh",
    "py3-pip",
    "podman",
    "podman-docker",
    "ripgrep",
    "shellcheck",
    "shfmt",
    "skopeo",
    "util-linux-misc",
    "wslu",
    "zoxide",
)

# man(1) and a pager, needed before -doc packages are of any use.
DEFAULT_DOC_PACKAGES: Tuple[str, ...] = ("mandoc", "man-pages", "mandoc-apropos", "less", "less-doc")

_LIST_KEYS = {"packages", "doc_packages", "pip_packages", "services"}
_INT_KEYS = {"subid_start", "subid_count"}
_STR_KEYS = {"completion_suffix", "doc_suffix", "doas_group", "admin_group", "login_shell", "rootless_module"}
_BOOL_KEYS = {"set_password"}
_KNOWN_KEYS = _LIST_KEYS | _INT_KEYS | _STR_KEYS | _BOOL_KEYS


def _dedup(items) -> Tuple[str, ...]:
    out: list[str] = []
    for i in items:
        s = str(i).strip()
        if s and s not in out:
            out.append(s)
    return tuple(out)


@dataclass(frozen=True)
class SetupConfig:
    username: str
    packages: Tuple[str, ...] = DEFAULT_PACKAGES
    doc_packages: Tuple[str, ...] = DEFAULT_DOC_PACKAGES
    completion_suffix: str = "bash-completion"
    doc_suffix: str = "doc"
    services: Tuple[str, ...] = ("cgroups", "podman")
    doas_group: str = "wheel"
    admin_group: str = "wheel"
    rootless_module: str = "tun"
    subid_start: int = 100000
    subid_count: int = 65536
    pip_packages: Tuple[str, ...] = ("podman-compose",)
    login_shell: str = PATHS.login_shell
    set_password: bool = True
    dry_run: bool = False
    root: str = "/"

    @property
    def is_root_user(self) -> bool:
        return self.username == "root"

    def with_overrides(self, **overrides: Any) -> "SetupConfig":
        return dataclasses.replace(self, **overrides)


def _coerce(raw: Dict[str, Any]) -> Dict[str, Any]:
    unknown = sorted(str(k) for k in raw if k not in _KNOWN_KEYS)
    if unknown:
        raise ValueError(f"setup config: unknown keys: {', '.join(unknown)}")

    out: Dict[str, Any] = {}
    for key, value in raw.items():
        if key in _LIST_KEYS:
            if isinstance(value, str):
                value = value.split()
            if not isinstance(value, list) or not all(isinstance(v, (str, int, float)) for v in value):
                raise ValueError(f"setup config: {key} must be a list of strings")
            out[key] = _dedup(value)
        elif key in _INT_KEYS:
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, (int, str)):
                raise ValueError(f"setup config: {key} must be an integer")
            try:
                out[key] = int(value)
            except ValueError:
                raise ValueError(f"setup config: {key} must be an integer, got {value!r}") from None
            if out[key] <= 0:
                raise ValueError(f"setup config: {key} must be positive")
        elif key in _STR_KEYS:
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"setup config: {key} must be a non-empty string")
            out[key] = value.strip()
        elif key in _BOOL_KEYS:
            if not isinstance(value, bool):
                raise ValueError(f"setup config: {key} must be true or false")
            out[key] = value
    return out


def load_setup_config(path: str, *, username: str) -> SetupConfig:
    """Build a SetupConfig from a YAML file, defaults filling the gaps.

    Unknown keys and wrongly typed values raise ValueError.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("setup config must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:
        raise RuntimeError("PyYAML is required to read the setup config") from e

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"setup config is not valid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError("setup config must contain a mapping/object")

    return SetupConfig(username=username, **_coerce(raw))
