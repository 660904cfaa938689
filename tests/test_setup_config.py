import pytest

from alpine_wsl_setup.setup_config import DEFAULT_PACKAGES, SetupConfig, load_setup_config


def write(tmp_path, name, text):
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return str(p)


def test_defaults():
    cfg = SetupConfig(username="bob")
    assert cfg.packages == DEFAULT_PACKAGES
    assert "podman" in cfg.packages
    assert cfg.services == ("cgroups", "podman")
    assert (cfg.subid_start, cfg.subid_count) == (100000, 65536)
    assert cfg.is_root_user is False
    assert SetupConfig(username="root").is_root_user is True


def test_yaml_overrides(tmp_path):
    path = write(
        tmp_path,
        "setup.yml",
        "packages: bash git git\n"
        "services: [cgroups]\n"
        "subid_start: '200000'\n"
        "doas_group: admins\n"
        "set_password: false\n",
    )
    cfg = load_setup_config(path, username="bob")
    assert cfg.packages == ("bash", "git")
    assert cfg.services == ("cgroups",)
    assert cfg.subid_start == 200000
    assert cfg.subid_count == 65536
    assert cfg.doas_group == "admins"
    assert cfg.set_password is False


def test_empty_yaml_gives_defaults(tmp_path):
    cfg = load_setup_config(write(tmp_path, "setup.yaml", ""), username="bob")
    assert cfg == SetupConfig(username="bob")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_setup_config(str(tmp_path / "nope.yaml"), username="bob")


def test_must_be_yaml(tmp_path):
    with pytest.raises(ValueError, match="must be YAML"):
        load_setup_config(write(tmp_path, "setup.json", "{}"), username="bob")


def test_must_be_mapping(tmp_path):
    with pytest.raises(ValueError, match="mapping"):
        load_setup_config(write(tmp_path, "setup.yaml", "- bash\n- git\n"), username="bob")


def test_bad_list(tmp_path):
    with pytest.raises(ValueError, match="packages"):
        load_setup_config(write(tmp_path, "setup.yaml", "packages: {a: 1}\n"), username="bob")


def test_with_overrides_keeps_original():
    cfg = SetupConfig(username="bob")
    dry = cfg.with_overrides(dry_run=True)
    assert dry.dry_run is True
    assert cfg.dry_run is False


class TestRejectsBadValues:
    @pytest.mark.parametrize("key", ["suffixes", "hostname", "subid-start"])
    def test_unknown_key(self, tmp_path, key):
        path = write(tmp_path, "setup.yaml", f"{key}: [zsh-completion]\n")
        with pytest.raises(ValueError, match=f"unknown keys: {key}"):
            load_setup_config(path, username="bob")

    @pytest.mark.parametrize(
        "text, key",
        [
            ("subid_start:\n", "subid_start"),
            ("subid_start: [1, 2]\n", "subid_start"),
            ("subid_count: lots\n", "subid_count"),
            ("subid_count: true\n", "subid_count"),
            ("subid_count: 0\n", "subid_count"),
            ("doas_group:\n", "doas_group"),
            ("login_shell: 42\n", "login_shell"),
            ("set_password: 'false'\n", "set_password"),
            ("set_password:\n", "set_password"),
            ("services:\n", "services"),
            ("packages: [[bash]]\n", "packages"),
        ],
    )
    def test_wrong_type(self, tmp_path, text, key):
        with pytest.raises(ValueError, match=key):
            load_setup_config(write(tmp_path, "setup.yaml", text), username="bob")

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ValueError, match="not valid YAML"):
            load_setup_config(write(tmp_path, "setup.yaml", "packages: [bash\n"), username="bob")

    def test_explicit_suffix_keys(self, tmp_path):
        path = write(tmp_path, "setup.yaml", "completion_suffix: zsh-completion\ndoc_suffix: man\n")
        cfg = load_setup_config(path, username="bob")
        assert (cfg.completion_suffix, cfg.doc_suffix) == ("zsh-completion", "man")
