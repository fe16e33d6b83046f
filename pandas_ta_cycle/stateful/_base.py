# -*- coding: utf-8 -*-
"""pandas-ta-cycle stateful -- shared base: helpers, descriptor, registry.

The category modules (``_cycle``, ``_overlap``) import from here and
populate ``STATEFUL_REGISTRY`` at load time.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

NAN = float("nan")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _param(params: Dict[str, Any], key: str, default: Any) -> Any:
    """Pull *key* from *params*; treat None as missing -> default."""
    value = params.get(key, default)
    return default if value is None else value


# ---------------------------------------------------------------------------
# Indicator descriptor & registry  (populated by category modules)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StatefulIndicator:
    """Immutable descriptor for a single stateful indicator."""
    kind:         str
    inputs:       Tuple[str, ...]
    init:         Callable[[Dict[str, Any]], Any]
    update:       Callable[[Any, Dict[str, Any], Dict[str, Any]],
                           Tuple[List[Optional[float]], Any]]
    output_names: Callable[[Dict[str, Any]], List[str]]


# Populated by category modules at import time.
STATEFUL_REGISTRY: Dict[str, StatefulIndicator] = {}


def _indicator(kind: str) -> StatefulIndicator:
    indicator = STATEFUL_REGISTRY.get(kind)
    if indicator is None:
        raise ValueError(f"Indicator '{kind}' not found in STATEFUL_REGISTRY")
    return indicator


def _bars(inputs: Dict[str, Any]) -> Iterator[Optional[Dict[str, float]]]:
    """Yields one bar dict per row, or None for rows holding a NaN."""
    import pandas as pd          # lazy - pandas not required at module load
    keys = list(inputs.keys())
    if not keys:
        return
    n = len(inputs[keys[0]])
    for i in range(n):
        bar: Dict[str, float] = {}
        for k in keys:
            v = inputs[k].iloc[i]
            if pd.isna(v):
                bar = None
                break
            bar[k] = float(v)
        yield bar


# ---------------------------------------------------------------------------
# Replay helpers
# ---------------------------------------------------------------------------

def replay_seed(kind: str, inputs: Dict[str, Any], params: Dict[str, Any]) -> Any:
    """Replays the stateful update over historical Series.

    *inputs* values must be ``pd.Series`` (or any indexable with ``.iloc``).
    Returns the final *State* after processing all rows; rows with a NaN
    input are skipped and leave the state untouched.
    """
    indicator = _indicator(kind)
    state = indicator.init(params)
    for bar in _bars(inputs):
        if bar is None:
            continue
        _, state = indicator.update(state, bar, params)
    return state


def stateful_run(kind: str, inputs: Dict[str, Any], params: Dict[str, Any] = None):
    """Runs *kind* bar by bar over *inputs* and collects every output.

    Returns a ``pd.DataFrame`` indexed like the first input whose columns
    are the indicator's output names.  Skipped (NaN) rows hold NaN.  For
    NaN free input the values equal the batch indicator's.
    """
    import pandas as pd
    params = {} if params is None else params
    indicator = _indicator(kind)
    names = indicator.output_names(params)
    state = indicator.init(params)

    rows: List[List[Any]] = []
    for bar in _bars(inputs):
        if bar is None:
            rows.append([NAN] * len(names))
            continue
        values, state = indicator.update(state, bar, params)
        rows.append(values)

    index = next(iter(inputs.values())).index if inputs else None
    return pd.DataFrame(rows, columns=names, index=index)


def stateful_supported_kinds() -> List[str]:
    """Return sorted list of supported indicator kinds."""
    return sorted(STATEFUL_REGISTRY.keys())
