"""Immutable piecewise-linear lookup tables backed by numpy.

Tables are built from (key, value) samples. A key is a number for a
one-dimensional table or a tuple for a multi-key table, where the first
element is the outer key and the rest index a nested table. Values outside
the sampled domain clamp to the boundary sample; nothing is extrapolated.

Typical usage example:
    from takeoffperf.interpolation import LookupTable, VectorLookupTable

    t_ref = LookupTable([(-2000, 48), (0, 44), (9200, 13.5)])
    t_ref.get(1500.0)

    vmu = LookupTable([((0, 291_646), 126), ((0, 324_051), 126), ((1000, 291_646), 126)])
    vmu.get(500.0, 300_000.0)

    limits = VectorLookupTable([(262_481, (15, 32.5)), (324_051, (15, 37))])
    lower, upper = limits.get(300_000.0)
"""

from collections.abc import Iterable, Sequence
from typing import Union

import numpy as np
import numpy.typing as npt

Key = Union[float, tuple[float, ...]]


def _normalize_key(key: Key) -> tuple[float, ...]:
    if isinstance(key, tuple):
        return tuple(float(k) for k in key)
    return (float(key),)


class VectorLookupTable:
    """Lookup table mapping one or more keys to a fixed-width output vector.

    Interpolation is applied per component. With two keys the outer key
    selects the two bracketing inner tables, each inner table is evaluated
    at the inner key and the two results are blended linearly.

    Attributes:
        key_count: Number of keys ``get`` expects.
        width: Number of components in every output.

    Examples:
        >>> table = VectorLookupTable([(0, (1.0, 10.0)), (10, (2.0, 20.0))])
        >>> table.get(5)
        (1.5, 15.0)
        >>> table.get(50)
        (2.0, 20.0)
    """

    def __init__(self, samples: Iterable[tuple[Key, Sequence[float]]]) -> None:
        """Build the table.

        Args:
            samples: (key, vector) pairs in any order. Keys must be unique
                and all of the same arity; vectors must share one width.

        Raises:
            ValueError: If the samples are empty, ragged, or repeat a key.
        """
        rows = [(_normalize_key(key), tuple(float(v) for v in values)) for key, values in samples]
        if not rows:
            raise ValueError("Lookup table requires at least one sample")

        self.key_count = len(rows[0][0])
        self.width = len(rows[0][1])
        if self.width == 0:
            raise ValueError("Lookup table outputs must have at least one component")

        for key, values in rows:
            if len(key) != self.key_count:
                raise ValueError(f"Inconsistent key arity in lookup table sample {key}")
            if len(values) != self.width:
                raise ValueError(f"Inconsistent output width in lookup table sample {key}")

        self._children: list[VectorLookupTable] | None = None

        if self.key_count == 1:
            rows.sort(key=lambda row: row[0][0])
            self._breakpoints: npt.NDArray[np.float64] = np.array([key[0] for key, _ in rows])
            self._values: npt.NDArray[np.float64] = np.array([values for _, values in rows])
            if np.any(np.diff(self._breakpoints) <= 0):
                raise ValueError("Lookup table keys must be strictly monotonic")
        else:
            groups: dict[float, list[tuple[tuple[float, ...], tuple[float, ...]]]] = {}
            for key, values in rows:
                groups.setdefault(key[0], []).append((key[1:], values))

            outer_keys = sorted(groups)
            self._breakpoints = np.array(outer_keys)
            self._values = np.empty((0, self.width))
            self._children = [VectorLookupTable(groups[outer]) for outer in outer_keys]

    def get(self, *keys: float) -> tuple[float, ...]:
        """Interpolate the table.

        Args:
            *keys: One value per key, outer key first.

        Returns:
            Interpolated output vector.

        Raises:
            ValueError: If the number of keys does not match the table.
        """
        if len(keys) != self.key_count:
            raise ValueError(f"Lookup table expects {self.key_count} key(s), got {len(keys)}")
        return tuple(float(v) for v in self._evaluate(keys))

    def _evaluate(self, keys: Sequence[float]) -> npt.NDArray[np.float64]:
        key = float(keys[0])

        if self._children is None:
            return np.array(
                [np.interp(key, self._breakpoints, self._values[:, i]) for i in range(self.width)]
            )

        breakpoints = self._breakpoints
        if key <= breakpoints[0]:
            return self._children[0]._evaluate(keys[1:])
        if key >= breakpoints[-1]:
            return self._children[-1]._evaluate(keys[1:])

        upper = int(np.searchsorted(breakpoints, key, side="right"))
        lower = upper - 1
        fraction = (key - breakpoints[lower]) / (breakpoints[upper] - breakpoints[lower])

        low = self._children[lower]._evaluate(keys[1:])
        high = self._children[upper]._evaluate(keys[1:])
        return low + (high - low) * fraction

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={self.key_count}, width={self.width}, samples={self._sample_count()})"

    def _sample_count(self) -> int:
        if self._children is None:
            return len(self._breakpoints)
        return sum(child._sample_count() for child in self._children)


class LookupTable(VectorLookupTable):
    """Lookup table mapping one or more keys to a single value.

    Examples:
        >>> table = LookupTable([(0, 55), (9200, 38)])
        >>> table.get(4600)
        46.5
        >>> table.get(-500)
        55.0
    """

    def __init__(self, samples: Iterable[tuple[Key, float]]) -> None:
        super().__init__((key, (value,)) for key, value in samples)

    def get(self, *keys: float) -> float:  # type: ignore[override]
        """Interpolate the table and return the single output value."""
        return super().get(*keys)[0]
