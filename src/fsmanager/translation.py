"""Message catalogues for user-facing strings."""

from pathlib import Path

import yaml

LOCALES_DIR = Path(__file__).parent / "locales"


class Translator:
    """
    Translate source messages using a YAML catalogue.

    A catalogue is a flat mapping of source message to translated message,
    stored as <locales_dir>/<locale>.yaml. Messages missing from the
    catalogue (or an unknown locale) fall back to the source text.
    """

    def __init__(self, locale: str = "en", locales_dir=None):
        self.locale = locale
        self.locales_dir = Path(locales_dir) if locales_dir else LOCALES_DIR
        self.messages = self._load_catalogue(locale)

    def _load_catalogue(self, locale: str) -> dict:
        path = self.locales_dir / f"{locale}.yaml"
        if not path.is_file():
            return {}
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return {str(k): str(v) for k, v in data.items()}

    def trans(self, message: str, params: dict | None = None) -> str:
        """
        Translate a message and substitute its placeholders.

        Args:
            message: Source message, e.g. "Files in %s".
            params: Placeholder -> value, e.g. {"%s": "images"}.
        """
        text = self.messages.get(message, message)
        for placeholder, value in (params or {}).items():
            text = text.replace(placeholder, str(value))
        return text

    __call__ = trans
