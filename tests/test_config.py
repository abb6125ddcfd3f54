import pytest
from pydantic import ValidationError
from app.config import Settings
from app.schemas.property import PropertyFilter

def test_default_filter_from_environment(monkeypatch):
    monkeypatch.setenv("DEFAULT_FILTER", "rent")
    assert Settings().DEFAULT_FILTER == PropertyFilter.SHOW_RENT

def test_default_filter_defaults_to_all(monkeypatch):
    monkeypatch.delenv("DEFAULT_FILTER", raising=False)
    assert Settings(_env_file=None).DEFAULT_FILTER == PropertyFilter.SHOW_ALL

def test_unknown_default_filter_rejected(monkeypatch):
    monkeypatch.setenv("DEFAULT_FILTER", "lease")
    with pytest.raises(ValidationError):
        Settings()
