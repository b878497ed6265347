"""Unit tests for the command line entry point."""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from text_extractor.cli import build_parser, main
from text_extractor.core.errors import ProviderError

MOCK_BUILDER = "text_extractor.cli.ServiceBuilder"
MOCK_PYPERCLIP = "text_extractor.services.clipboard.pyperclip"


@pytest.fixture(autouse=True)
def _no_config_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def mock_service():
    service = MagicMock()
    service.extract_text = AsyncMock(return_value="Hello World")
    with patch(MOCK_BUILDER) as mock_builder_cls:
        mock_builder_cls.return_value.build.return_value = service
        yield service


class TestParser:
    def test_extract_requires_a_source(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["extract"])

    def test_file_and_url_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["extract", "--file", "a.png", "--url", "https://x.test/a.png"])

    def test_copy_defaults_to_false(self):
        assert build_parser().parse_args(["extract", "--url", "https://x.test/a.png"]).copy is False

    def test_serve_defaults(self):
        args = build_parser().parse_args(["serve"])
        assert args.host == "127.0.0.1"
        assert args.port == 8000


class TestExtractCommand:
    def test_file_is_sent_as_data_url(self, mock_service, tmp_path, capsys):
        image = tmp_path / "note.png"
        image.write_bytes(b"\x00\x00\x00")

        assert main(["extract", "--file", str(image)]) == 0

        mock_service.extract_text.assert_awaited_once_with("data:image/png;base64,AAAA")
        assert capsys.readouterr().out == "Hello World\n"

    def test_url_is_forwarded(self, mock_service, capsys):
        assert main(["extract", "--url", "https://example.com/a.png"]) == 0
        mock_service.extract_text.assert_awaited_once_with("https://example.com/a.png")

    def test_invalid_url_prints_toast(self, mock_service, capsys):
        assert main(["extract", "--url", "not-a-link"]) == 1
        assert "Invalid link: Please paste an http(s) link to an image." in capsys.readouterr().err
        mock_service.extract_text.assert_not_called()

    def test_missing_file_exits_with_error(self, mock_service, tmp_path, capsys):
        assert main(["extract", "--file", str(tmp_path / "missing.png")]) == 1
        assert "Error:" in capsys.readouterr().err
        mock_service.extract_text.assert_not_called()

    def test_provider_error_prints_error_toast(self, mock_service, capsys):
        mock_service.extract_text.side_effect = ProviderError("Text extraction failed: rate limited")

        assert main(["extract", "--url", "https://example.com/a.png"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: Text extraction failed: rate limited" in captured.err

    def test_missing_api_key_exits_with_error(self, monkeypatch, capsys):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        assert main(["extract", "--url", "https://example.com/a.png"]) == 1

        assert "Error:" in capsys.readouterr().err

    def test_unknown_provider_exits_with_error(self, tmp_path, capsys):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("llm_provider: unknown\n")

        assert main(["--config", str(config_file), "extract", "--url", "https://example.com/a.png"]) == 1

        assert "Unknown LLM provider" in capsys.readouterr().err


class TestCopyOption:
    def test_copies_text_to_clipboard(self, mock_service, capsys):
        with patch(MOCK_PYPERCLIP) as mock_pyperclip:
            assert main(["extract", "--url", "https://example.com/a.png", "--copy"]) == 0
        mock_pyperclip.copy.assert_called_once_with("Hello World")
        assert capsys.readouterr().out == "Hello World\n"

    def test_clipboard_failure_exits_with_error(self, mock_service, capsys):
        with patch(MOCK_PYPERCLIP) as mock_pyperclip:
            mock_pyperclip.copy.side_effect = RuntimeError("no clipboard mechanism")
            assert main(["extract", "--url", "https://example.com/a.png", "--copy"]) == 1
        assert "Failed to copy the text to the clipboard." in capsys.readouterr().err

    def test_no_copy_without_flag(self, mock_service):
        with patch(MOCK_PYPERCLIP) as mock_pyperclip:
            main(["extract", "--url", "https://example.com/a.png"])
        mock_pyperclip.copy.assert_not_called()


class TestServeCommand:
    def test_runs_uvicorn_with_app_factory(self):
        with patch("uvicorn.run") as mock_run:
            assert main(["serve", "--port", "9000"]) == 0
        mock_run.assert_called_once_with(
            "text_extractor.api:create_app", factory=True, host="127.0.0.1", port=9000
        )
