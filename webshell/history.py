from typing import Optional


class History:
    """Back/forward navigation list with a single cursor"""

    def __init__(self, initial: str) -> None:
        self._entries: list[str] = [initial]
        self._index: int = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"History(entries={self._entries!r}, index={self._index})"

    @property
    def entries(self) -> list[str]:
        """Copy of all visited locations, oldest first"""
        return self._entries.copy()

    @property
    def index(self) -> int:
        """Position of the cursor in entries"""
        return self._index

    def push(self, location: str) -> None:
        """Record a visited location and move the cursor onto it"""
        if self.current() == location:
            return

        # Visiting from the middle of history drops the forward branch
        del self._entries[self._index + 1:]
        self._entries.append(location)
        self._index = len(self._entries) - 1

    def replace_current(self, location: str) -> None:
        """Overwrite the location at the cursor without touching other entries"""
        self._entries[self._index] = location

    def can_go_back(self) -> bool:
        """Check if there is an earlier entry"""
        return self._index > 0

    def can_go_forward(self) -> bool:
        """Check if there is a later entry"""
        return self._index + 1 < len(self._entries)

    def current(self) -> Optional[str]:
        """Get the location at the cursor"""
        if 0 <= self._index < len(self._entries):
            return self._entries[self._index]
        return None

    def back(self) -> Optional[str]:
        """Move to the previous location, or return None at the start"""
        if self.can_go_back():
            self._index -= 1
            return self.current()
        return None

    def forward(self) -> Optional[str]:
        """Move to the next location, or return None at the end"""
        if self.can_go_forward():
            self._index += 1
            return self.current()
        return None
