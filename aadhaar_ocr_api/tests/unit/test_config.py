from app.core.config import Settings, _tokens_from_env


def test_tokens_default_when_unset(monkeypatch):
    monkeypatch.delenv("AADHAAR_GAZETTEER", raising=False)
    assert _tokens_from_env("AADHAAR_GAZETTEER", ("Kerala",)) == ("Kerala",)


def test_tokens_from_comma_separated_env(monkeypatch):
    monkeypatch.setenv("AADHAAR_GAZETTEER", " Springfield, Shelbyville ,,")
    assert _tokens_from_env("AADHAAR_GAZETTEER", ("Kerala",)) == ("Springfield", "Shelbyville")


def test_tesseract_config():
    assert Settings().tesseract_config == "--oem 3 --psm 3"


def test_front_end_origins_from_env(monkeypatch):
    monkeypatch.setenv("FRONT_END", "http://localhost:3000, https://app.example.com")
    assert _tokens_from_env("FRONT_END", ()) == ("http://localhost:3000", "https://app.example.com")
