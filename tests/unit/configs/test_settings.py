from flyer_extraction.configs.settings import Settings


def test_settings_default_values(monkeypatch):
    """Test default values for settings."""
    monkeypatch.delenv("FLYER_LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_JSON is False
    assert settings.OCR_LANGUAGE == "eng"
    assert settings.TESSERACT_CMD is None
    assert settings.EXTRACTION_CONFIG_PATH is None


def test_settings_from_environment(monkeypatch):
    """Test FLYER_-prefixed environment variables override defaults."""
    monkeypatch.setenv("FLYER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("FLYER_LOG_JSON", "true")
    monkeypatch.setenv("FLYER_OCR_LANGUAGE", "spa")
    settings = Settings(_env_file=None)
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_JSON is True
    assert settings.OCR_LANGUAGE == "spa"


def test_unprefixed_variables_ignored(monkeypatch):
    """Test variables without the prefix are not picked up."""
    monkeypatch.delenv("FLYER_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    assert Settings(_env_file=None).LOG_LEVEL == "INFO"


def test_config_path(monkeypatch, tmp_path):
    """Test the tables path is parsed as a Path."""
    monkeypatch.setenv("FLYER_EXTRACTION_CONFIG_PATH", str(tmp_path / "t.yaml"))
    settings = Settings(_env_file=None)
    assert settings.EXTRACTION_CONFIG_PATH == tmp_path / "t.yaml"
