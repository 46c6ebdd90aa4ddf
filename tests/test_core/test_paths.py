from __future__ import annotations

import sys

import pytest

from ablscope.core.paths import POSIX, WINDOWS, PathStyle, normalize_path


class TestNormalizePath:
    def test_empty_and_none(self):
        assert normalize_path("", POSIX) == ""
        assert normalize_path(None, WINDOWS) == ""

    def test_appends_trailing_separator(self):
        assert normalize_path("/ws/app", POSIX) == "/ws/app/"

    def test_keeps_existing_separator(self):
        assert normalize_path("/ws/app/", POSIX) == "/ws/app/"

    def test_posix_preserves_case(self):
        assert normalize_path("/Ws/App", POSIX) == "/Ws/App/"

    def test_windows_lowercases_and_uses_backslash(self):
        assert normalize_path(r"C:\Projects\MyApp", WINDOWS) == "c:\\projects\\myapp\\"

    def test_windows_keeps_existing_backslash(self):
        assert normalize_path("C:\\Projects\\", WINDOWS) == "c:\\projects\\"

    def test_partial_segment_is_not_a_prefix(self):
        root = normalize_path("/a/b", POSIX)
        assert not normalize_path("/a/bc/x", POSIX).startswith(root)
        assert normalize_path("/a/b/x", POSIX).startswith(root)


class TestPathStyle:
    def test_native_matches_platform(self):
        expected = WINDOWS if sys.platform == "win32" else POSIX
        assert PathStyle.native() == expected

    @pytest.mark.parametrize("name, style", [("posix", POSIX), ("WINDOWS", WINDOWS), (" posix ", POSIX)])
    def test_from_name(self, name: str, style: PathStyle):
        assert PathStyle.from_name(name) is style

    def test_from_name_native(self):
        assert PathStyle.from_name("native") == PathStyle.native()

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown path style"):
            PathStyle.from_name("vms")

    def test_is_frozen(self):
        with pytest.raises(Exception):
            POSIX.separator = "\\"  # type: ignore[misc]
