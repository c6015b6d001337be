"""Engine configuration."""

from dataclasses import dataclass

UNMAPPED_POLICIES = ("raise", "zero")

@dataclass
class EngineConfig:
    """High-level knobs for the impact engine and its presentation.

    `unmapped_policy`:
      - "raise": an unknown magnitude code aborts the whole computation.
      - "zero": the offending record's damage counts as 0 (lossy); occurrences
        are tallied on the engine and logged.

    `damage_scale` / `damage_unit` are display-only; engine results are
    always in US$.
    """
    # How many groups each ranked table holds
    top_n: int = 10
    unmapped_policy: str = "raise"
    damage_scale: float = 1e6
    damage_unit: str = "million US$"

    def validate(self) -> "EngineConfig":
        if isinstance(self.top_n, bool) or not isinstance(self.top_n, int) or self.top_n < 1:
            raise ValueError(f"top_n must be a positive integer, got {self.top_n!r}")
        if self.unmapped_policy not in UNMAPPED_POLICIES:
            raise ValueError(f"unmapped_policy must be one of {UNMAPPED_POLICIES}, got {self.unmapped_policy!r}")
        if not self.damage_scale > 0:
            raise ValueError(f"damage_scale must be positive, got {self.damage_scale!r}")
        return self
