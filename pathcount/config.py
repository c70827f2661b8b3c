"""Configuration for the shortest-path engine."""

import math
from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Defaults used by ``ShortestPathEngine`` when arguments are omitted."""

    # Two path lengths within this distance are treated as equal
    tolerance: float = 1e-9

    # Reject negative or NaN edge weights met during relaxation
    check_weights: bool = True

    # Edge attribute read as the weight when wrapping NetworkX graphs
    weight_attr: str = "cost"

    # Weight for NetworkX edges that lack ``weight_attr``
    default_weight: float = 1.0

    def validate(self) -> None:
        """Raise ValueError if any field is out of range.

        Called by the engine and the NetworkX adapter whenever they fall back
        to ``ENGINE_CONFIG``.
        """
        validate_tolerance(self.tolerance)
        validate_weight_attr(self.weight_attr)
        validate_default_weight(self.default_weight)


def validate_tolerance(tolerance: float) -> float:
    """Return ``tolerance`` as a float, or raise ValueError if it is unusable."""
    tolerance = float(tolerance)
    if not math.isfinite(tolerance) or tolerance < 0:
        raise ValueError(
            f"tolerance must be finite and non-negative, got {tolerance!r}"
        )
    return tolerance


def validate_weight_attr(weight_attr: str) -> str:
    if not isinstance(weight_attr, str) or not weight_attr:
        raise ValueError(f"weight_attr must be a non-empty string, got {weight_attr!r}")
    return weight_attr


def validate_default_weight(default_weight: float) -> float:
    if not (default_weight >= 0 and math.isfinite(default_weight)):
        raise ValueError(
            "default_weight must be finite and non-negative, "
            f"got {default_weight!r}"
        )
    return default_weight


# Global configuration instance
ENGINE_CONFIG = EngineConfig()
