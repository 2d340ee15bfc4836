from typing import List, Optional, TYPE_CHECKING
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field, field_validator, ValidationInfo

from wiki_race.utils.wiki_helpers import titles_equal, validate_page_title

if TYPE_CHECKING:
    from wiki_race.navigation.navigator import Navigator

# --- Enums ---

class NavigatorStatus(Enum):
    """Represents the lifecycle state of a navigator."""
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (NavigatorStatus.SUCCEEDED, NavigatorStatus.FAILED, NavigatorStatus.CANCELLED)

# --- Data Models ---

class Task(BaseModel):
    """A start/goal pair to race between."""
    start_page_title: str = Field(..., description="The title of the starting article.")
    target_page_title: str = Field(..., description="The title of the goal article.")

    @field_validator("start_page_title", "target_page_title")
    @classmethod
    def titles_must_be_valid(cls, v: str):
        validate_page_title(v)
        return v

    @field_validator("target_page_title")
    @classmethod
    def titles_must_be_different(cls, v: str, info: ValidationInfo):
        if "start_page_title" in info.data and titles_equal(v, info.data["start_page_title"]):
            raise ValueError("Start and target page titles must be different.")
        return v

class NavigationStep(BaseModel):
    """One article reached by a navigator."""
    article: str = Field(..., description="Title of the article reached.")
    order: int = Field(..., ge=0, description="Position of this step in the path; the start is 0.")
    reasoning: Optional[str] = Field(None, description="Short human-readable explanation of the choice.")
    timestamp: datetime = Field(default_factory=datetime.now, description="When the step was taken.")

class ScoredCandidate(BaseModel):
    """A link considered as the next hop, with its relevance score."""
    article: str = Field(..., description="Title of the candidate link.")
    score: int = Field(..., ge=0, description="Relevance toward the goal; higher is more promising.")

class NavigationResult(BaseModel):
    """Summarizes the outcome of a finished navigation run."""
    navigation_id: str = Field(..., description="Unique identifier of the run.")
    strategy: str = Field(..., description="Name of the path-finding strategy used.")
    start_title: str = Field(..., description="The start article.")
    goal_title: str = Field(..., description="The goal article.")
    status: NavigatorStatus = Field(..., description="Terminal status of the run.")
    path: List[NavigationStep] = Field(default_factory=list, description="The path produced by the run.")
    oracle_calls: int = Field(0, description="Number of oracle requests the run issued.")
    start_timestamp: Optional[datetime] = Field(None, description="When the run started.")
    end_timestamp: Optional[datetime] = Field(None, description="When the run finished.")

    @property
    def path_titles(self) -> List[str]:
        return [step.article for step in self.path]

    @property
    def hops(self) -> int:
        """Number of links followed."""
        return max(len(self.path) - 1, 0)

    @property
    def reached_goal(self) -> bool:
        return bool(self.path) and titles_equal(self.path[-1].article, self.goal_title)

    @property
    def duration_ms(self) -> float:
        if not self.start_timestamp or not self.end_timestamp:
            return 0.0
        return (self.end_timestamp - self.start_timestamp).total_seconds() * 1000

    @classmethod
    def from_navigator(cls, navigator: "Navigator") -> "NavigationResult":
        """Snapshot a navigator into a result."""
        return cls(
            navigation_id=navigator.navigation_id,
            strategy=navigator.strategy_name,
            start_title=navigator.start_title,
            goal_title=navigator.goal_title,
            status=navigator.status,
            path=navigator.current_path(),
            oracle_calls=navigator.oracle_calls,
            start_timestamp=navigator.start_timestamp,
            end_timestamp=navigator.end_timestamp,
        )
