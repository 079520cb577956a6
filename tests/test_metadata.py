import json
from pathlib import Path

import pytest

from magisk_hluda.env_utils import Settings
from magisk_hluda.exceptions import FileSystemError
from magisk_hluda.metadata import (
    MetadataRenderer,
    build_update_manifest,
    module_version,
    render_module_prop,
    render_update_json,
    version_code,
)

pytestmark = pytest.mark.unit

CHANGELOG = (
    "https://gist.githubusercontent.com/znmn/d18d6bcbb4a8a0dbfe24e243c19b4195"
    "/raw/077a548931b8101c31722bc52b1a34b4bbf206c0/gistfile1.txt"
)


@pytest.mark.parametrize(
    "tag, version, code",
    [
        ("17.2.0", "17.2.0", "1720"),
        ("17.2.0-android", "17.2.0", "1720-android"),
        ("16.5.9-1-beta", "16.5.9", "1659-1-beta"),
        ("v1.0", "v1.0", "v10"),
    ],
)
def test_version_derivation(tag, version, code):
    assert module_version(tag) == version
    assert version_code(tag) == code


def test_render_module_prop_defaults():
    assert render_module_prop("17.2.0", Settings()) == (
        "id=magisk-hluda\n"
        "name=Frida(Florida) Server on Boot\n"
        "version=17.2.0\n"
        "versionCode=1720\n"
        "author=The Community - Ylarod - Exo1i\n"
        "description=Runs a stealthier frida-server on boot\n"
        "updateJson=https://github.com/znmn/magiskhluda/releases/latest/download/update.json"
    )


def test_render_module_prop_uses_identity_settings():
    settings = Settings(repository="someone/fork", author="octocat")

    prop = render_module_prop("17.2.0-android", settings)

    assert "version=17.2.0\n" in prop
    assert "versionCode=1720-android\n" in prop
    assert "author=octocat - Ylarod - Exo1i\n" in prop
    assert prop.endswith(
        "updateJson=https://github.com/someone/fork/releases/latest/download/update.json"
    )


def test_update_manifest_numeric_version_code():
    manifest = build_update_manifest("17.2.0", Settings())

    assert manifest == {
        "version": "17.2.0",
        "versionCode": 1720,
        "zipUrl": "https://github.com/znmn/magiskhluda/releases/download/17.2.0/Magisk-Florida-Universal-17.2.0.zip",
        "changelog": CHANGELOG,
    }


def test_update_manifest_suffixed_tag_keeps_string_version_code():
    manifest = build_update_manifest("17.2.0-android", Settings())

    assert manifest["version"] == "17.2.0-android"
    assert manifest["versionCode"] == "1720-android"


def test_render_update_json_layout():
    rendered = render_update_json("17.2.0", Settings(repository="a/b"))

    assert rendered.startswith('{\n  "version": "17.2.0",\n  "versionCode": 1720,\n')
    assert rendered.endswith("}\n")
    assert json.loads(rendered)["zipUrl"] == (
        "https://github.com/a/b/releases/download/17.2.0/Magisk-Florida-Universal-17.2.0.zip"
    )


def test_render_update_json_is_valid_for_suffixed_tags():
    assert json.loads(render_update_json("17.2.0-android", Settings()))[
        "versionCode"
    ] == "1720-android"


class TestMetadataRenderer:
    def test_write_all_default_locations(self):
        module_prop, update_json = MetadataRenderer(Settings()).write_all("17.2.0")

        assert module_prop == Path("module_template/module.prop")
        assert update_json == Path("update.json")
        assert module_prop.read_text().startswith("id=magisk-hluda\n")
        assert json.loads(update_json.read_text())["version"] == "17.2.0"

    def test_write_all_overwrites_existing_files(self):
        renderer = MetadataRenderer(Settings())
        renderer.write_all("1.0")
        renderer.write_all("2.0")

        assert "version=2.0\n" in Path("module_template/module.prop").read_text()
        assert json.loads(Path("update.json").read_text())["version"] == "2.0"

    def test_custom_paths(self, tmp_path):
        settings = Settings(
            module_template_dir=tmp_path / "tpl",
            update_json_path=tmp_path / "out" / "feed.json",
        )

        module_prop, update_json = MetadataRenderer(settings).write_all("v1")

        assert module_prop == tmp_path / "tpl" / "module.prop"
        assert update_json.is_file()

    def test_write_failure_raises(self, mocker):
        mocker.patch(
            "magisk_hluda.download.files.os.replace",
            side_effect=OSError("read-only file system"),
        )

        with pytest.raises(FileSystemError, match="module.prop"):
            MetadataRenderer(Settings()).write_all("v1")
