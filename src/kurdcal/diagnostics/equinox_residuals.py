from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Mapping

import kurdcal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "kurdcal[diagnostics]"') from e


@dataclass(frozen=True)
class ResidualSummary:
    residuals_min: Dict[int, float]  # computed - reference, minutes
    mean_min: float
    max_abs_min: float
    rms_min: float


def residuals(reference: Mapping[int, datetime]) -> ResidualSummary:
    """
    Compare computed equinoxes against reference UTC instants (e.g. Espenak's tables).
    """
    np = _need_numpy()
    if not reference:
        raise ValueError("reference must not be empty")

    years = sorted(reference)
    diffs = np.array(
        [(kurdcal.compute_spring_equinox(y) - reference[y]).total_seconds() / 60.0 for y in years],
        dtype=float,
    )
    return ResidualSummary(
        residuals_min={y: float(d) for y, d in zip(years, diffs)},
        mean_min=float(np.mean(diffs)),
        max_abs_min=float(np.max(np.abs(diffs))),
        rms_min=float(np.sqrt(np.mean(diffs ** 2))),
    )
