from dataclasses import dataclass


@dataclass
class StaleSpanError(Exception):
    """A span was pulled after its sequencer had already handed out a newer one."""

    span_index: int
    active_index: int

    def __str__(self) -> str:
        return f"span #{self.span_index} is stale, span #{self.active_index} is now active"
