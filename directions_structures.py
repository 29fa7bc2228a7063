# Defines the standardized, internal data structures for the directions command.

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommandInput:
    """A single slash command invocation: who asked and what they typed."""
    requester_name: str
    raw_text: str


@dataclass(frozen=True)
class Waypoints:
    """The origin and destination parsed out of the command text."""
    origin: str
    destination: str


@dataclass
class Step:
    """One maneuver within a leg, with its instruction reduced to plain text."""
    index: int
    text: str
    duration: str
    distance: str


@dataclass
class DirectionsResult:
    """
    The directions extracted from a successful API response.
    Everything except the waypoints and the map link stays None when
    Google returned no route (or a route without legs).
    """
    origin: str
    destination: str
    link: str
    summary: str | None = None
    copyright: str | None = None
    duration: str | None = None
    distance: str | None = None
    steps: list[Step] = field(default_factory=list)
