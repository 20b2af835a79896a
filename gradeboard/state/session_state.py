from dataclasses import dataclass, field
from typing import Tuple

from gradeboard.services.gradebook_service import GradebookService


BANNER_MESSAGES: Tuple[str, ...] = (
    "Welcome to Academic Dashboard",
    "Track your student performance",
    "Top performers highlighted",
    "Real-time statistics",
    "Enter student marks below",
)


@dataclass
class SessionState:
    gradebook: GradebookService = field(default_factory=GradebookService)
    status_message: str = ""
    banner_index: int = 0
    banner_messages: Tuple[str, ...] = BANNER_MESSAGES

    @property
    def banner(self) -> str:
        return self.banner_messages[self.banner_index]

    def next_banner(self) -> str:
        self.banner_index = (self.banner_index + 1) % len(self.banner_messages)
        return self.banner
