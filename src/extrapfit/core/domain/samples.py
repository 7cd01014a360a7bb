"""Sample containers for extrapolation runs.

A ``SampleSet`` holds the (x, y) pairs produced by an external solver for a
single extrapolation run. It is immutable: rescaling and omission return new
instances that share no mutable state with the original.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from extrapfit.core.shared.exceptions import InsufficientDataError

if TYPE_CHECKING:
    from extrapfit.core.shared.typing import FloatArray, OmitDirection


class Sample(NamedTuple):
    """A single (control parameter, observed value) pair."""

    x: float
    y: float


def _readonly(values: FloatArray) -> FloatArray:
    values = np.array(values, dtype=np.float64)
    values.setflags(write=False)
    return values


@dataclass(frozen=True, eq=False)
class SampleSet:
    """Ordered, validated collection of samples.

    Samples are stored sorted by decreasing x: the cheapest, coarsest
    computation comes first and the most expensive one last.

    Attributes
    ----------
        x: Control parameter values, all strictly positive
        y: Observed values
        x_scale: Factor the original x values were divided by (1.0 if unscaled)
    """

    x: FloatArray
    y: FloatArray
    x_scale: float = field(default=1.0)

    def __post_init__(self) -> None:
        x = np.asarray(self.x, dtype=np.float64).ravel()
        y = np.asarray(self.y, dtype=np.float64).ravel()

        if x.shape != y.shape:
            msg = f"x and y must have the same length, got {x.size} and {y.size}"
            raise ValueError(msg)
        if x.size == 0:
            msg = "A sample set needs at least one sample"
            raise InsufficientDataError(msg)
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            msg = "Sample values must be finite"
            raise ValueError(msg)
        if np.any(x <= 0.0):
            msg = "Control parameter x must be strictly positive"
            raise ValueError(msg)
        if not (np.isfinite(self.x_scale) and self.x_scale > 0.0):
            msg = f"x_scale must be a positive number, got {self.x_scale}"
            raise ValueError(msg)

        order = np.argsort(-x, kind="stable")
        object.__setattr__(self, "x", _readonly(x[order]))
        object.__setattr__(self, "y", _readonly(y[order]))
        object.__setattr__(self, "x_scale", float(self.x_scale))

    @classmethod
    def from_arrays(cls, x: Iterable[float], y: Iterable[float]) -> SampleSet:
        """Build a sample set from separate x and y sequences."""
        return cls(np.asarray(list(x), dtype=np.float64), np.asarray(list(y), dtype=np.float64))

    @classmethod
    def from_samples(cls, samples: Iterable[tuple[float, float]]) -> SampleSet:
        """Build a sample set from an iterable of (x, y) pairs."""
        pairs = [Sample(float(x), float(y)) for x, y in samples]
        return cls.from_arrays((s.x for s in pairs), (s.y for s in pairs))

    def __len__(self) -> int:
        return int(self.x.size)

    def __iter__(self) -> Iterator[Sample]:
        for x, y in zip(self.x, self.y, strict=True):
            yield Sample(float(x), float(y))

    @property
    def n_distinct_x(self) -> int:
        """Number of distinct control parameter values."""
        return int(np.unique(self.x).size)

    def rescaled(self, scale: float | None = None) -> SampleSet:
        """Return a copy with x divided by ``scale`` (default: the largest x).

        The accumulated scale is kept in ``x_scale`` so fitted models can
        still be evaluated on the original axis.
        """
        factor = float(np.max(self.x)) if scale is None else float(scale)
        if not (np.isfinite(factor) and factor > 0.0):
            msg = f"Rescaling factor must be a positive number, got {factor}"
            raise ValueError(msg)
        return SampleSet(self.x / factor, self.y, x_scale=self.x_scale * factor)

    def omit(self, k: int, direction: OmitDirection = "largest") -> SampleSet:
        """Return the nested subset with ``k`` samples removed.

        Args:
            k: Number of samples to drop
            direction: ``"largest"`` drops the k largest-x (coarsest) samples,
                ``"smallest"`` drops the k smallest-x (most expensive) ones

        Raises
        ------
            ValueError: If k is negative or the direction is unknown
            InsufficientDataError: If no sample would remain
        """
        if direction not in ("largest", "smallest"):
            msg = f"Unknown omission direction: {direction!r}"
            raise ValueError(msg)
        if k < 0:
            msg = f"Number of omitted samples must be >= 0, got {k}"
            raise ValueError(msg)
        if k >= len(self):
            msg = f"Cannot omit {k} of {len(self)} samples"
            raise InsufficientDataError(msg)
        if k == 0:
            return self
        # Stored by decreasing x: the largest values sit at the front.
        keep = slice(k, None) if direction == "largest" else slice(None, len(self) - k)
        return SampleSet(self.x[keep], self.y[keep], x_scale=self.x_scale)

    def as_array(self) -> FloatArray:
        """Return an (n, 2) array of [x, y] rows."""
        return np.column_stack([self.x, self.y])


__all__ = ["Sample", "SampleSet"]
