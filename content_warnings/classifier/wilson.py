"""Wilson score confidence interval."""

import math
from statistics import NormalDist

from content_warnings.classifier.models import WilsonInterval


def z_for_confidence(confidence_level: float) -> float:
    """Convert a two-sided confidence level to a standard normal z-value.

    Args:
        confidence_level: Confidence level in (0, 1), e.g. 0.90.

    Returns:
        The z-value (about 1.645 for 0.90).

    Raises:
        ValueError: If the level is outside (0, 1).
    """
    if not 0.0 < confidence_level < 1.0:
        msg = f"Confidence level must be between 0 and 1, got {confidence_level}"
        raise ValueError(msg)
    return NormalDist().inv_cdf((1.0 + confidence_level) / 2.0)


def wilson_interval(yes: int, total: int, z: float) -> WilsonInterval:
    """Compute the Wilson score interval for a yes-proportion.

    Args:
        yes: Number of yes votes.
        total: Total number of votes; must be positive.
        z: Standard normal z-value for the confidence level.

    Returns:
        WilsonInterval with bounds clamped to [0, 1].

    Raises:
        ValueError: If total is not positive or yes is out of range.
    """
    if total <= 0:
        msg = f"Total votes must be positive, got {total}"
        raise ValueError(msg)
    if not 0 <= yes <= total:
        msg = f"Yes votes must be within [0, {total}], got {yes}"
        raise ValueError(msg)

    p = yes / total
    z2 = z * z
    denom = 1 + z2 / total
    center = p + z2 / (2 * total)
    spread = z * math.sqrt((p * (1 - p) + z2 / (4 * total)) / total)

    return WilsonInterval(
        lower=max(0.0, (center - spread) / denom),
        upper=min(1.0, (center + spread) / denom),
    )
