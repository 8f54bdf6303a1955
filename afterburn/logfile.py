"""The game's plain-text log file."""


class GameLog:
    """A line-per-message log that silently does nothing if it cannot be opened."""

    def __init__(self, path):
        self.path = path
        try:
            self._file = open(path, "w", encoding="utf-8")
        except OSError:
            self._file = None
        self.active = self._file is not None

    def write(self, message):
        """Append *message* as one line, if the log is open."""
        if self._file is not None:
            self._file.write(f"{message}\n")
            self._file.flush()

    def close(self):
        """Close the log; later writes are ignored."""
        if self._file is not None:
            self._file.close()
            self._file = None
        self.active = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()