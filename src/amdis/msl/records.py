from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np


@dataclass(frozen=True, slots=True)
class Peak:
    mass_to_charge_ratio: int
    height: int


@dataclass(frozen=True, slots=True)
class Record:
    """
    One compound entry of an MSL library.

    ``peaks_count`` is the count declared in the document and is not checked
    against ``len(peaks)``.
    """
    compound_id: int
    compound_name: str
    molecular_formula: str
    molecular_weight: float
    cas_number: Optional[str]
    retention_index: float
    retention_time: float
    response_factor: float
    resolution: float
    comment: str
    peaks_count: int
    peaks: tuple[Peak, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of peaks but always store a tuple
        if not isinstance(self.peaks, tuple):
            object.__setattr__(self, "peaks", tuple(self.peaks))

    @property
    def base_peak(self) -> Optional[Peak]:
        """Tallest peak, first in source order on ties; None for an empty spectrum."""
        if not self.peaks:
            return None
        return max(self.peaks, key=lambda p: p.height)

    def spectrum(self) -> tuple[np.ndarray, np.ndarray]:
        """
        Return the spectrum as two integer arrays.

        Returns:
            (mz, height), both in source order
        """
        mz = np.array([p.mass_to_charge_ratio for p in self.peaks], dtype=np.int64)
        height = np.array([p.height for p in self.peaks], dtype=np.int64)
        return mz, height
