"""
Tests for package list parsing (pacaudit/config.py).
"""

from pathlib import Path

import pytest

from pacaudit.config import (
    ConfigError,
    PackageEntry,
    load_package_list,
    parse_package_list,
)


FIXTURES_DIR = Path(__file__).parent / "fixtures"
LIST_VALID = FIXTURES_DIR / "package_list_valid.yml"
LIST_INVALID_YAML = FIXTURES_DIR / "package_list_invalid_yaml.yml"
LIST_NOT_MAPPING = FIXTURES_DIR / "package_list_not_mapping.yml"
LIST_BAD_FLAG = FIXTURES_DIR / "package_list_bad_flag.yml"


class TestPackageEntry:
    """Tests for PackageEntry normalization."""

    def test_bare_name(self):
        """Test that a bare string is an official-repo entry."""
        assert PackageEntry.from_raw("foo") == PackageEntry(name="foo", aur=False)

    def test_mapping_with_aur_flag(self):
        entry = PackageEntry.from_raw({"name": "yay-bin", "aur": True})
        assert entry.name == "yay-bin"
        assert entry.aur is True

    def test_mapping_with_use_secondary_source_alias(self):
        entry = PackageEntry.from_raw({"name": "pkgB", "useSecondarySource": True})
        assert entry.aur is True

    def test_mapping_without_flag_defaults_to_official(self):
        assert PackageEntry.from_raw({"name": "htop"}).aur is False

    def test_missing_name_raises(self):
        with pytest.raises(ConfigError, match="missing a package name"):
            PackageEntry.from_raw({"aur": True}, "extra")

    def test_empty_name_raises(self):
        with pytest.raises(ConfigError, match="Empty package name"):
            PackageEntry.from_raw("  ")

    def test_both_flag_keys_agreeing(self):
        entry = PackageEntry.from_raw({"name": "pkgB", "aur": True, "useSecondarySource": True})
        assert entry.aur is True

    def test_both_flag_keys_conflicting_raises(self):
        with pytest.raises(ConfigError, match="conflicting values"):
            PackageEntry.from_raw({"name": "pkgB", "aur": False, "useSecondarySource": True}, "extra")

    def test_non_boolean_flag_raises(self):
        with pytest.raises(ConfigError, match="source flag"):
            PackageEntry.from_raw({"name": "pkgB", "aur": "yes"})

    def test_invalid_type_raises(self):
        with pytest.raises(ConfigError, match="Invalid entry"):
            PackageEntry.from_raw(42, "base")

    def test_entry_immutable(self):
        entry = PackageEntry(name="foo")
        with pytest.raises(AttributeError):
            entry.name = "bar"


class TestParsePackageList:
    """Tests for parse_package_list()."""

    def test_preserves_group_and_entry_order(self):
        data = {"zeta": ["b", "a"], "alpha": ["c"]}
        package_list = parse_package_list(data)
        assert list(package_list) == ["zeta", "alpha"]
        assert [e.name for e in package_list["zeta"]] == ["b", "a"]

    def test_null_group_is_empty(self):
        assert parse_package_list({"empty": None}) == {"empty": []}

    def test_non_list_group_raises(self):
        with pytest.raises(ConfigError, match="must contain a list"):
            parse_package_list({"base": "linux"})

    def test_non_mapping_raises(self):
        with pytest.raises(ConfigError, match="must be a mapping"):
            parse_package_list(["linux"])

    def test_none_document_raises(self):
        with pytest.raises(ConfigError):
            parse_package_list(None)


class TestLoadPackageList:
    """Tests for load_package_list()."""

    def test_load_valid(self):
        package_list = load_package_list(LIST_VALID)
        assert list(package_list) == ["base", "extra", "empty"]
        assert package_list["base"] == [PackageEntry("pkgA"), PackageEntry("linux")]
        assert package_list["extra"] == [
            PackageEntry("pkgB", aur=True),
            PackageEntry("yay-bin", aur=True),
            PackageEntry("htop", aur=False),
        ]
        assert package_list["empty"] == []

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Could not read"):
            load_package_list(tmp_path / "nope.yml")

    def test_load_invalid_yaml(self):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_package_list(LIST_INVALID_YAML)

    def test_load_not_mapping(self):
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_package_list(LIST_NOT_MAPPING)

    def test_load_bad_flag(self):
        with pytest.raises(ConfigError, match="source flag"):
            load_package_list(LIST_BAD_FLAG)

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        with pytest.raises(ConfigError):
            load_package_list(path)
