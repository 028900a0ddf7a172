from typing import List

from .models import IDLE


class SequenceRecorder:
    """Compressed, length-capped record of CPU occupants.

    Appends past the cap are ignored and an append equal to the current
    tail is a no-op, so no two adjacent recorded entries are ever equal.
    """

    def __init__(self, max_len: int):
        self.max_len = max_len
        self.entries: List[int] = []

    @property
    def full(self) -> bool:
        return len(self.entries) >= self.max_len

    def append(self, entry: int) -> bool:
        if self.full:
            return False
        if self.entries and self.entries[-1] == entry:
            return False
        self.entries.append(entry)
        return True

    def idle(self) -> bool:
        return self.append(IDLE)

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
