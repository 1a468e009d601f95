import pytest
from pydantic import ValidationError

from textmine.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_stop_words(self) -> None:
        s = Settings()
        assert s.stop_words == "english"
        assert s.extra_stop_words == []

    def test_default_top_n(self) -> None:
        s = Settings()
        assert s.top_n == 15

    def test_default_grouping_key(self) -> None:
        s = Settings()
        assert (s.document_field, s.term_field) == ("document_id", "term")


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_top_n(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOP_N", "5")
        s = Settings()
        assert s.top_n == 5

    def test_loads_extra_stop_words_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXTRA_STOP_WORDS", '["chapter", "miss"]')
        s = Settings()
        assert s.extra_stop_words == ["chapter", "miss"]

    def test_loads_token_file(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOKEN_FILE", "/data/austen.tsv")
        s = Settings()
        assert s.token_file == "/data/austen.tsv"


class TestSettingsValidation:
    def test_invalid_top_n_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOP_N", "abc")
        with pytest.raises(ValidationError):
            Settings()

    def test_zero_top_n_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOP_N", "0")
        with pytest.raises(ValidationError):
            Settings()
