import pytest

from commonlib.config import load_store_config


def test_defaults(tmp_path):
    config = load_store_config(tmp_path, {})
    assert config.product_file == tmp_path / "products.json"
    assert config.backups == 2
    assert config.secret == ""
    assert not config.encrypted
    assert config.log_level == "INFO"


def test_relative_product_file_resolves_against_base_dir(tmp_path):
    config = load_store_config(tmp_path, {"PRODUCT_FILE": "data/catalog.json"})
    assert config.product_file == tmp_path / "data" / "catalog.json"


def test_absolute_product_file_is_kept(tmp_path):
    target = tmp_path / "elsewhere" / "catalog.json"
    config = load_store_config(tmp_path / "base", {"PRODUCT_FILE": str(target)})
    assert config.product_file == target


def test_backups_are_clamped_and_validated(tmp_path):
    assert load_store_config(tmp_path, {"PRODUCT_BACKUPS": "-3"}).backups == 0
    assert load_store_config(tmp_path, {"PRODUCT_BACKUPS": " 5 "}).backups == 5
    with pytest.raises(ValueError):
        load_store_config(tmp_path, {"PRODUCT_BACKUPS": "many"})


def test_secret_and_log_level(tmp_path):
    config = load_store_config(tmp_path, {"PRODUCT_SECRET": " s3cret ", "LOG_LEVEL": "debug"})
    assert config.secret == "s3cret"
    assert config.encrypted
    assert config.log_level == "DEBUG"


def test_dotenv_file_is_loaded(tmp_path, monkeypatch):
    # Registered with monkeypatch so the value load_dotenv writes is undone.
    monkeypatch.setenv("PRODUCT_FILE", "")
    monkeypatch.delenv("PRODUCT_FILE")
    (tmp_path / ".env").write_text("PRODUCT_FILE=from-dotenv.json\n", encoding="utf-8")
    config = load_store_config(tmp_path)
    assert config.product_file == tmp_path / "from-dotenv.json"


def test_unknown_log_level_is_rejected(tmp_path):
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        load_store_config(tmp_path, {"LOG_LEVEL": "chatty"})
