"""Tests for Android project resolution."""

import json

import pytest

from platforms.android import android_manifest_path, get_android_package_name, resolve_android, supports_package_name
from versioning.cache import PackageVersionCache
from versioning.codec import v
from fs_mock import MemoryFileSystem, react_native_project

APP_JSON = json.dumps({
    "name": "AppName",
    "displayName": "AppDisplayName",
    "android": {"package": "com.contoso.application.id"},
    "resources": ["dist/res", "dist/main.android.jsbundle"],
})


def make_fs(cli_android, app_json=APP_JSON):
    files = {"android/build.gradle": ""}
    if app_json is not None:
        files["app.json"] = app_json
    return MemoryFileSystem(react_native_project(cli_android=cli_android, files=files))


def package_name_for(cli_android, app_json=APP_JSON):
    fs = make_fs(cli_android, app_json)
    return get_android_package_name("/project/android", PackageVersionCache("/project", fs), fs)


class TestPackageName:
    """Test version-gated package name derivation."""

    @pytest.mark.parametrize("version", ["12.3.6", "11.0.0", "13.0.0", "13.3.1", "13.6.8"])
    def test_unsupported_versions_skip(self, version):
        assert package_name_for(version) is None

    @pytest.mark.parametrize("version", ["12.3.7", "12.9.9", "13.6.9", "14.0.0"])
    def test_supported_versions_read_app_json(self, version):
        assert package_name_for(version) == "com.contoso.application.id"

    def test_prerelease_plugin_version(self):
        assert package_name_for("13.6.9-rc.0") == "com.contoso.application.id"

    def test_missing_app_json(self):
        assert package_name_for("14.0.0", app_json=None) is None

    def test_missing_package_field(self):
        assert package_name_for("14.0.0", app_json=json.dumps({"name": "AppName"})) is None

    def test_missing_plugin_is_unsupported(self):
        assert package_name_for(None) is None

    def test_malformed_app_json_propagates(self):
        with pytest.raises(json.JSONDecodeError):
            package_name_for("14.0.0", app_json="{ not json")

    def test_rule_boundaries(self):
        assert not supports_package_name(v(12, 3, 6))
        assert supports_package_name(v(12, 3, 7))
        assert not supports_package_name(v(13, 0, 0))
        assert not supports_package_name(v(13, 6, 8))
        assert supports_package_name(v(13, 6, 9))


class TestResolveAndroid:
    """Test the Android config record."""

    def test_explicit_package_name_wins(self):
        for version in ["12.3.6", "13.0.0", "14.0.0"]:
            fs = make_fs(version)
            config = resolve_android(
                {"sourceDir": "android", "packageName": "com.example.explicit"},
                "/project",
                "/project/node_modules/react-native-test-app",
                PackageVersionCache("/project", fs),
                fs,
            )
            assert config.package_name == "com.example.explicit"

    def test_derived_package_name(self):
        fs = make_fs("14.0.0")
        config = resolve_android(
            {"sourceDir": "android"},
            "/project",
            "/project/node_modules/react-native-test-app",
            PackageVersionCache("/project", fs),
            fs,
        )
        assert config.platform == "android"
        assert config.source_dir == "android"
        assert config.package_name == "com.contoso.application.id"
        assert config.manifest_path == "../node_modules/react-native-test-app/android/app/src/main/AndroidManifest.xml"
        assert config.to_dict() == {
            "sourceDir": "android",
            "manifestPath": "../node_modules/react-native-test-app/android/app/src/main/AndroidManifest.xml",
            "packageName": "com.contoso.application.id",
        }

    def test_unset_package_name_is_omitted(self):
        fs = make_fs("12.3.6")
        config = resolve_android(
            {"sourceDir": "android"},
            "/project",
            "/project/node_modules/react-native-test-app",
            PackageVersionCache("/project", fs),
            fs,
        )
        assert config.package_name is None
        assert "packageName" not in config.to_dict()

    def test_manifest_path_is_relative(self):
        assert android_manifest_path("/project/example/android", "/project") == "../../android/app/src/main/AndroidManifest.xml"


class TestPackageVersionCache:
    """Test memoization of installed versions."""

    def test_versions_are_memoized(self):
        fs = make_fs("14.0.0")
        cache = PackageVersionCache("/project", fs)
        assert cache.get("@react-native-community/cli-platform-android") == v(14, 0, 0)

        fs.write_text(
            "/project/node_modules/@react-native-community/cli-platform-android/package.json",
            json.dumps({"version": "12.0.0"}),
        )
        assert cache.get("@react-native-community/cli-platform-android") == v(14, 0, 0)

        cache.clear()
        assert cache.get("@react-native-community/cli-platform-android") == v(12, 0, 0)

    def test_resolves_from_react_native_dir(self):
        fs = MemoryFileSystem(react_native_project(files={
            "node_modules/react-native/node_modules/@react-native-community/cli-platform-android/package.json":
                json.dumps({"version": "13.6.9"}),
        }))
        cache = PackageVersionCache("/project", fs)
        assert cache.get("@react-native-community/cli-platform-android") == v(13, 6, 9)
        assert "@react-native-community/cli-platform-android" in cache
