"""ADRRecord and StatusEntry: the parsed view of an ADR file."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class StatusEntry:
    date: str
    status: str
    link: Optional[str] = None

    def to_line(self) -> str:
        parts = [self.date, self.status]
        if self.link:
            parts.append(self.link)
        return ' '.join(parts)


@dataclass
class ADRRecord:
    title: str = ''
    index: int = 0
    created_date: str = ''
    status_history: list[StatusEntry] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)

    @property
    def current_status(self) -> Optional[StatusEntry]:
        """The most recent status entry, or None when the history is empty."""
        if not self.status_history:
            return None
        return self.status_history[-1]

    def has_tags(self, wanted: list[str]) -> bool:
        own = {tag.lower() for tag in self.tags}
        return all(tag.lower() in own for tag in wanted)

    def summary(self) -> str:
        current = self.current_status
        status = current.status if current else '(no status)'
        return f"{self.index}. {self.title}: {status}"
