"""Enumerations shared across all Traveler contracts."""

from enum import Enum


class TransportMode(str, Enum):
    """How the traveler moves between the two places."""
    DRIVING = "driving"
    FLYING = "flying"
    WALKING = "walking"
    TRANSIT = "transit"


class Algorithm(str, Enum):
    """Path-finding algorithm label selected by the user.

    Presentation only: it picks the path color and is forwarded to the
    routes backend, but never changes the computed geometry.
    """
    DIJKSTRA = "dijkstra"
    ASTAR = "a-star"
    BFS = "bfs"
    DFS = "dfs"

    @classmethod
    def _missing_(cls, value):
        # Spelling variants: "astar", "A*", "a_star", "Dijkstra"
        if not isinstance(value, str):
            return None
        key = value.strip().lower().replace("*", "star")
        key = key.replace("-", "").replace("_", "").replace(" ", "")
        for member in cls:
            if member.value.replace("-", "") == key:
                return member
        return None


class LegKind(str, Enum):
    GROUND = "ground"
    AIR = "air"


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
