# -*- coding: utf-8 -*-
"""pandas-ta-cycle.stateful -- streaming / stateful indicator package.

Category modules populate STATEFUL_REGISTRY at import time.  This
package re-exports it plus the shared base API.
"""
from __future__ import annotations

# Base API (always available)
from ._base import (
    NAN,
    StatefulIndicator,
    STATEFUL_REGISTRY,
    replay_seed,
    stateful_run,
    stateful_supported_kinds,
    _param,
)

# ---------------------------------------------------------------------------
# Category modules - each populates the shared registry on import
# ---------------------------------------------------------------------------
from . import _cycle        # noqa: F401  ht_dcperiod, ht_dcphase, ht_phasor, …
from . import _overlap      # noqa: F401  mama, ht_trendline

from ._cycle import HilbertBar, HilbertState, hilbert_advance, hilbert_make
from ._overlap import MamaState

__all__ = [
    # base
    "NAN",
    "StatefulIndicator",
    "STATEFUL_REGISTRY",
    "replay_seed",
    "stateful_run",
    "stateful_supported_kinds",
    # states
    "HilbertBar",
    "HilbertState",
    "MamaState",
    "hilbert_advance",
    "hilbert_make",
]
