import os
import sys
from contextlib import contextmanager
from queue import Queue


class ConsoleUtils:
    """
    Operator console output for the file manager server, with ANSI colors.
    Respects NO_COLOR and FORCE_COLOR environment variables.

    Every message is also pushed to the queues registered through
    capture_output(), so tests and embedding code can observe it.
    """

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"

    def __init__(self):
        self.use_colors = self._should_use_colors()
        self._quiet = False
        self._capture_queues: list[Queue] = []

    def _should_use_colors(self) -> bool:
        """
        Determine if colors should be used based on environment and TTY.
        """
        # https://no-color.org/
        if os.environ.get("NO_COLOR"):
            return False

        if os.environ.get("FORCE_COLOR"):
            return True

        return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

    def _emit(self, msg_type: str, message: str) -> None:
        for q in self._capture_queues:
            q.put_nowait({"type": msg_type, "message": message})

    @contextmanager
    def capture_output(self):
        """
        Context manager that collects every console message in a queue.

        Usage:
            with console.capture_output() as queue:
                client.post("/async/file/delete", data={...})
                # queue.get_nowait() returns {"type": "...", "message": "..."}
        """
        q: Queue = Queue()
        self._capture_queues.append(q)
        try:
            yield q
        finally:
            self._capture_queues.remove(q)

    @contextmanager
    def quiet(self):
        """Silence terminal output while still feeding capture queues."""
        previous = self._quiet
        self._quiet = True
        try:
            yield
        finally:
            self._quiet = previous

    def _format(self, text: str, color: str = "", style: str = "") -> str:
        if not self.use_colors:
            return text
        return f"{style}{color}{text}{self.RESET}"

    def _print(self, line: str, stream=None) -> None:
        if not self._quiet:
            print(line, file=stream or sys.stdout)

    def print_heading(self, message: str):
        """Prints a bold, colored heading."""
        self._print(f"\n{self._format(message, self.CYAN, self.BOLD)}")
        self._print(self._format("-" * len(message), self.CYAN, self.DIM))
        self._emit("heading", message)

    def print_operation(self, operation: str, target: str):
        """Prints a filesystem operation about to be performed."""
        self._print(f"{self._format(operation + ':', self.BLUE, self.BOLD)} {target}")
        self._emit("operation", f"{operation}: {target}")

    def print_success(self, message: str):
        """Prints a success message."""
        self._print(f"{self._format('[OK]', self.GREEN, self.BOLD)} {message}")
        self._emit("success", message)

    def print_warning(self, message: str):
        """Prints a warning message."""
        self._print(f"{self._format('Warning:', self.YELLOW, self.BOLD)} {message}")
        self._emit("warning", message)

    def print_error(self, message: str):
        """Prints an error message."""
        self._print(f"{self._format('Error:', self.RED, self.BOLD)} {message}", sys.stderr)
        self._emit("error", message)

    def print_info(self, message: str):
        """Prints a general info message."""
        self._print(f"{self._format('[INFO]', self.BLUE)} {message}")
        self._emit("info", message)

    def print_item(self, message: str):
        """Prints an indented list item."""
        self._print(f"  - {message}")
        self._emit("item", message)


# Global instance
console = ConsoleUtils()
