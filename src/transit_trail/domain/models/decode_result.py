"""Results of decoding collections where one bad entry must not sink the rest."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from transit_trail.domain.models.trip import Plan


class SegmentDecodeFailure(BaseModel):
    """A segment that could not be decoded, reported instead of the segment."""

    model_config = ConfigDict(frozen=True)

    index: int  # position in the plan's segment list
    error: str  # error class name, e.g. "SegmentShapeMismatch"
    message: str
    path: str = ""


@dataclass(frozen=True)
class PlanDecodeResult:
    """A plan built from every segment that decoded, plus the ones that did not."""

    plan: Plan
    failures: tuple[SegmentDecodeFailure, ...] = ()

    @property
    def is_complete(self) -> bool:
        """True when every segment of the payload made it into the plan."""
        return not self.failures
