"""Recomputation counters for observability.

Usage:
    from bonus_conversion.monitoring.metrics import RecomputeMetrics

    metrics = RecomputeMetrics(recomputations=20, failed_recomputations=3)
    print(f"Failure rate: {metrics.failure_rate}%")  # 15.0%
"""

from dataclasses import dataclass


@dataclass
class RecomputeMetrics:
    """Track how often a calculator recomputes and how often it falls back.

    Attributes:
        recomputations: Number of completed two-stage recomputations
        failed_recomputations: Recomputations whose result holds sentinel values
        stage_a_failures: Hedge stake computations that committed the sentinel
        stage_b_failures: Payout/profit/quality computations that failed on
            their own (not counting those zeroed because Stage A failed)
    """

    recomputations: int = 0
    failed_recomputations: int = 0
    stage_a_failures: int = 0
    stage_b_failures: int = 0

    @property
    def failure_rate(self) -> float:
        """Percentage of recomputations that ended with sentinel results.

        Returns 0.0 if nothing has been recomputed yet.
        """
        if self.recomputations == 0:
            return 0.0
        return round(self.failed_recomputations / self.recomputations * 100, 1)

    def to_dict(self) -> dict:
        """Export metrics as a dictionary, including the computed rate."""
        return {
            "recomputations": self.recomputations,
            "failed_recomputations": self.failed_recomputations,
            "stage_a_failures": self.stage_a_failures,
            "stage_b_failures": self.stage_b_failures,
            "failure_rate": self.failure_rate,
        }
