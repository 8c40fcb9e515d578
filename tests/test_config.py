import pytest

from assets.types import AssetType, BuildOptions
from assets.errors import UnknownAssetType
from config import TestingConfig, build_options_from_config, detect_dev_host


def test_detect_dev_host():
    assert detect_dev_host("dev-web01")
    assert detect_dev_host("devbox")
    assert not detect_dev_host("web01")
    assert not detect_dev_host("de")


def test_defaults_on_dev_host():
    options = BuildOptions.resolve(is_dev_host=True)
    assert options.debug and not options.minify
    assert options.cache_enabled and options.cache_create
    assert options.cache_dir == "/tmp/cb_min"


def test_defaults_on_production_host():
    options = BuildOptions.resolve(is_dev_host=False)
    assert options.minify and not options.debug


def test_explicit_values_win():
    options = BuildOptions.resolve(is_dev_host=True, minify=True, debug=False)
    assert options.minify and not options.debug


def test_trailing_separator_is_stripped():
    assert BuildOptions.resolve(cache_dir="/var/cache/assets/").cache_dir == "/var/cache/assets"


def test_options_are_immutable():
    options = BuildOptions.resolve()
    with pytest.raises(AttributeError):
        options.minify = False


def test_options_from_config_mapping():
    options = build_options_from_config({
        "ASSETS_DEV_HOST": True,
        "ASSETS_CACHE_DIR": "/srv/cache",
        "ASSETS_MINIFY": None,
        "ASSETS_DEBUG": None,
    })
    assert options == BuildOptions(True, True, "/srv/cache", False, True)


def test_testing_config_pins_production_behaviour():
    options = build_options_from_config(
        {k: getattr(TestingConfig, k) for k in dir(TestingConfig) if k.isupper()}
    )
    assert options.minify and not options.debug


def test_asset_type_parse():
    assert AssetType.parse("CSS") is AssetType.CSS
    assert AssetType.parse(AssetType.JS) is AssetType.JS
    assert AssetType.CSS.mime_type == "text/css"
    assert AssetType.JS.extension == "js"
    with pytest.raises(UnknownAssetType):
        AssetType.parse("scss")


def test_detected_dev_host_reaches_app_configs():
    from config import Config, DevelopmentConfig, ProductionConfig
    assert DevelopmentConfig.ASSETS_DEV_HOST == Config.ASSETS_DEV_HOST
    assert ProductionConfig.ASSETS_DEV_HOST == Config.ASSETS_DEV_HOST


def test_detected_dev_host_drives_app_options(tmp_path):
    from app import create_app
    for dev_host in (True, False):
        app = create_app("production", overrides={
            "ASSETS_DEV_HOST": dev_host,
            "ASSETS_MINIFY": None,
            "ASSETS_DEBUG": None,
            "ASSETS_CACHE_DIR": str(tmp_path / "cache"),
            "LOG_DIR": None,
        })
        options = app.extensions["asset_pipeline"].options
        assert options.debug is dev_host
        assert options.minify is not dev_host
