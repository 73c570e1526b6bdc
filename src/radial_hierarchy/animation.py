"""Damped spring used to settle the ring radius after a pinch."""

import math
from dataclasses import dataclass

# Remaining fraction of the travel at which a spring counts as settled
SETTLE_TOLERANCE = 1e-3


@dataclass(frozen=True)
class SpringAnimation:
    """Spring from start to target with zero initial velocity.

    response is the undamped period in seconds; damping_fraction is 1.0 for a
    critically damped spring and below 1.0 for a bouncy one.
    """

    start: float
    target: float
    response: float = 0.3
    damping_fraction: float = 0.7

    @property
    def _omega(self) -> float:
        return 2 * math.pi / max(self.response, 1e-6)

    def _displacement(self, t: float) -> float:
        """Remaining fraction of the travel at time t (1.0 at t=0)."""
        omega = self._omega
        zeta = max(self.damping_fraction, 0.0)

        if zeta < 1.0:
            omega_d = omega * math.sqrt(1 - zeta**2)
            decay = math.exp(-zeta * omega * t)
            return decay * (math.cos(omega_d * t) + zeta * omega / omega_d * math.sin(omega_d * t))

        if zeta == 1.0:
            return math.exp(-omega * t) * (1 + omega * t)

        # Overdamped: sum of two decaying exponentials
        root = math.sqrt(zeta**2 - 1)
        r1 = -omega * (zeta - root)
        r2 = -omega * (zeta + root)
        c1 = r2 / (r2 - r1)
        c2 = -r1 / (r2 - r1)
        return c1 * math.exp(r1 * t) + c2 * math.exp(r2 * t)

    def _amplitude_bound(self, t: float) -> float:
        """Upper bound of |displacement| from time t onward."""
        omega = self._omega
        zeta = max(self.damping_fraction, 0.0)
        if zeta < 1.0:
            omega_d = omega * math.sqrt(1 - zeta**2)
            return math.exp(-zeta * omega * t) * (1 + zeta * omega / omega_d)
        return abs(self._displacement(t))

    def value_at(self, t: float) -> float:
        """Animated value t seconds after the start."""
        if t <= 0:
            return self.start
        if self.is_finished(t):
            return self.target
        return self.target + (self.start - self.target) * self._displacement(t)

    def is_finished(self, t: float) -> bool:
        if self.start == self.target:
            return True
        return t >= self.response and self._amplitude_bound(t) < SETTLE_TOLERANCE
