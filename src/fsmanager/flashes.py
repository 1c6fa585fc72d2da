"""One-shot user notifications shown by the next rendered page."""

LEVELS = ("error", "warning", "info", "success")


class FlashBag:
    """Collects messages per level until they are drained by a template."""

    def __init__(self):
        self._messages: dict[str, list[str]] = {level: [] for level in LEVELS}

    def add(self, level: str, message: str) -> None:
        if level not in self._messages:
            raise ValueError(f"Unknown flash level: {level}")
        self._messages[level].append(message)

    def error(self, message: str) -> None:
        self.add("error", message)

    def warning(self, message: str) -> None:
        self.add("warning", message)

    def info(self, message: str) -> None:
        self.add("info", message)

    def success(self, message: str) -> None:
        self.add("success", message)

    def peek_all(self) -> dict[str, list[str]]:
        return {level: list(messages) for level, messages in self._messages.items()}

    def all(self) -> dict[str, list[str]]:
        """Return every pending message and clear the bag."""
        messages = self.peek_all()
        for level in self._messages:
            self._messages[level].clear()
        return messages

    def __bool__(self) -> bool:
        return any(self._messages.values())
