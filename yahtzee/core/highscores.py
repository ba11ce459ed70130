"""Highscore table stored as a plain text file of ``name: score`` lines."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union


logger = logging.getLogger(__name__)

DEFAULT_NAME = "Anonymous"


class HighscoreError(Exception):
    """Raised when the highscore file cannot be read or written."""


@dataclass
class Highscore:
    name: str
    score: int

    def __str__(self):
        return f"{self.name}: {self.score}"

    @classmethod
    def parse(cls, line: str) -> "Highscore":
        """Parse a ``name: score`` line; raises ValueError if malformed."""
        parts = line.rstrip("\n").split(":")
        if len(parts) != 2:
            raise ValueError(f"Malformed highscore line: {line!r}")
        name, score_str = parts
        return cls(name=name, score=int(score_str.strip()))


def clean_name(name: str) -> str:
    """Make a player name safe to store on a single ``name: score`` line."""
    cleaned = name.replace(":", " ").replace("\n", " ").replace("\r", " ").strip()
    return cleaned or DEFAULT_NAME


class HighscoreTable:
    """Scores sorted best first."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.entries: List[Highscore] = []

    def load(self) -> "HighscoreTable":
        """Read the file; a missing file is an empty table."""
        self.entries = []
        if not self.path.exists():
            return self

        try:
            with self.path.open(encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise HighscoreError(f"Cannot read highscores from {self.path}: {e}") from e

        for line in lines:
            try:
                self.entries.append(Highscore.parse(line))
            except ValueError:
                logger.debug("Skipping highscore line %r", line)

        self.entries.sort(key=lambda h: h.score, reverse=True)
        return self

    def save(self):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                for entry in self.entries:
                    f.write(f"{entry}\n")
        except OSError as e:
            raise HighscoreError(f"Cannot write highscores to {self.path}: {e}") from e
        logger.info("Saved %d highscores to %s", len(self.entries), self.path)

    def top(self, n: int = 10) -> List[Highscore]:
        return self.entries[:n]

    @property
    def best(self) -> Union[Highscore, None]:
        return self.entries[0] if self.entries else None

    def is_new_highscore(self, score: int) -> bool:
        """True if the score would top the table."""
        return self.best is None or self.best.score < score

    def add(self, name: str, score: int) -> int:
        """Insert a score after any equal scores; returns its position."""
        entry = Highscore(clean_name(name), score)
        position = len(self.entries)
        for i, existing in enumerate(self.entries):
            if existing.score < score:
                position = i
                break
        self.entries.insert(position, entry)
        return position

    def __len__(self):
        return len(self.entries)
