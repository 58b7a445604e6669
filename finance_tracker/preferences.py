"""Lightweight persistent storage for remembered filter and sort selections."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from . import config
from .models import FilterState, SortConfig

logger = logging.getLogger(__name__)

DEFAULT_PREFERENCES: Dict[str, Any] = {
    'expense_filters': FilterState().to_dict(),
    'expense_sort': None,
    'report_projections': {},
}


def _defaults() -> Dict[str, Any]:
    return json.loads(json.dumps(DEFAULT_PREFERENCES))


def load_preferences(path: Optional[Path] = None) -> Dict[str, Any]:
    target = path or config.PREFERENCES_PATH
    if not target.exists():
        return _defaults()
    try:
        with target.open('r', encoding='utf-8') as handle:
            data = json.load(handle)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read preferences from %s: %s", target, exc)
        return _defaults()
    if not isinstance(data, dict):
        return _defaults()
    merged = _defaults()
    merged.update({k: v for k, v in data.items() if k in DEFAULT_PREFERENCES})
    return merged


def save_preferences(preferences: Dict[str, Any], path: Optional[Path] = None) -> None:
    target = path or config.PREFERENCES_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open('w', encoding='utf-8') as handle:
        json.dump(preferences, handle, indent=2, sort_keys=True)


def load_expense_view(path: Optional[Path] = None) -> Tuple[FilterState, Optional[SortConfig]]:
    """Load the remembered filters and sort of the fixed-expenses table.

    Stored values that no longer map onto a valid filter or sort fall back
    to the defaults rather than failing.
    """
    preferences = load_preferences(path)
    try:
        filters = FilterState.from_dict(preferences.get('expense_filters'))
    except (ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring stored expense filters: %s", exc)
        filters = FilterState()
    try:
        sort = SortConfig.from_dict(preferences.get('expense_sort'))
    except (ValueError, TypeError, KeyError, AttributeError) as exc:
        logger.warning("Ignoring stored expense sort: %s", exc)
        sort = None
    return filters, sort


def save_expense_view(
    filters: FilterState,
    sort: Optional[SortConfig],
    path: Optional[Path] = None,
) -> None:
    preferences = load_preferences(path)
    preferences['expense_filters'] = filters.to_dict()
    preferences['expense_sort'] = sort.to_dict() if sort else None
    save_preferences(preferences, path)


def load_projections(path: Optional[Path] = None) -> Dict[str, Dict[str, float]]:
    projections = load_preferences(path).get('report_projections') or {}
    return projections if isinstance(projections, dict) else {}


def save_projections(projections: Dict[str, Dict[str, float]], path: Optional[Path] = None) -> None:
    preferences = load_preferences(path)
    preferences['report_projections'] = projections or {}
    save_preferences(preferences, path)
