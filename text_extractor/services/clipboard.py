import pyperclip

from text_extractor.session import Clipboard


class PyperclipClipboard(Clipboard):
    """System clipboard via pyperclip."""

    def write_text(self, text: str) -> None:
        pyperclip.copy(text)
