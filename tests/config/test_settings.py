"""Test suite for discovery configuration loading."""

from pathlib import Path
from unittest.mock import patch

from slnscout.config.settings import (
    DiscoveryConfig,
    choose_by_patterns,
    get_config_file_path,
    ignore_by_patterns,
    load_config,
)


class TestDiscoveryConfig:
    def test_defaults(self) -> None:
        config = DiscoveryConfig()

        assert config.broad_search is False
        assert config.ignore_target is None
        assert config.choose_target is None
        assert config.debug is False


class TestPatterns:
    def test_ignore_by_patterns(self) -> None:
        predicate = ignore_by_patterns(["*/legacy/*", "*.slnf"])

        assert predicate(Path("/repo/legacy/Old.sln"))
        assert predicate(Path("/repo/Web.slnf"))
        assert not predicate(Path("/repo/App.sln"))

    def test_choose_by_patterns_follows_pattern_order(self) -> None:
        choose = choose_by_patterns(["*/Main.sln", "*.slnf"])
        targets = [Path("/repo/Web.slnf"), Path("/repo/Main.sln")]

        assert choose(targets) == Path("/repo/Main.sln")

    def test_choose_by_patterns_no_match(self) -> None:
        choose = choose_by_patterns(["*/Main.sln"])

        assert choose([Path("/repo/App.sln")]) is None


class TestLoadConfig:
    def test_full_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "slnscout.yaml"
        config_file.write_text(
            "broad_search: true\n"
            "debug: true\n"
            "ignore_targets:\n"
            "  - '*/legacy/*'\n"
            "prefer_targets:\n"
            "  - '*/Main.sln'\n"
        )

        config = load_config(config_file)

        assert config.broad_search is True
        assert config.debug is True
        assert config.ignore_target is not None
        assert config.ignore_target(Path("/r/legacy/A.sln"))
        assert config.choose_target is not None
        assert config.choose_target([Path("/r/Main.sln")]) == Path("/r/Main.sln")
        assert config.validation_errors == []

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "missing.yaml")

        assert config.broad_search is False
        assert config.ignore_target is None

    def test_invalid_yaml_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "slnscout.yaml"
        config_file.write_text("broad_search: [unclosed\n")

        config = load_config(config_file)

        assert config.broad_search is False

    def test_invalid_values_reported(self, tmp_path: Path) -> None:
        config_file = tmp_path / "slnscout.yaml"
        config_file.write_text("broad_search: maybe\nignore_targets: 3\n")

        config = load_config(config_file)

        assert config.broad_search is False
        assert config.ignore_target is None
        assert len(config.validation_errors) == 2

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        config_file = tmp_path / "slnscout.yaml"
        config_file.write_text("- a\n- b\n")

        config = load_config(config_file)

        assert config.validation_errors == ["Configuration root must be a mapping"]

    def test_single_pattern_string(self, tmp_path: Path) -> None:
        config_file = tmp_path / "slnscout.yaml"
        config_file.write_text("ignore_targets: '*.slnf'\n")

        config = load_config(config_file)

        assert config.ignore_target is not None
        assert config.ignore_target(Path("/r/A.slnf"))


class TestConfigFilePath:
    def test_explicit_file_wins(self) -> None:
        with patch("slnscout.config.settings.SLNSCOUT_CONFIG_FILE", "/etc/slnscout.yaml"), patch(
            "slnscout.config.settings.SLNSCOUT_HOME", "/home/u/.slnscout"
        ):
            assert get_config_file_path() == Path("/etc/slnscout.yaml")

    def test_home_fallback(self) -> None:
        with patch("slnscout.config.settings.SLNSCOUT_CONFIG_FILE", ""), patch(
            "slnscout.config.settings.SLNSCOUT_HOME", "/home/u/.slnscout"
        ):
            assert get_config_file_path() == Path("/home/u/.slnscout/config/slnscout.yaml")

    def test_nothing_configured(self) -> None:
        with patch("slnscout.config.settings.SLNSCOUT_CONFIG_FILE", ""), patch(
            "slnscout.config.settings.SLNSCOUT_HOME", ""
        ):
            assert get_config_file_path() is None
