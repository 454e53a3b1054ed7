"""Environment-driven defaults.

``ZMANIM_USE_ELEVATION`` selects the default elevation policy of
``ZmanimCalendar``: ``no`` (default), ``hanetz_shkia`` or ``all``.
"""

import os

from zmanimcalc.models import UseElevation


def default_use_elevation() -> UseElevation:
    """Read the elevation policy from the environment.

    Raises:
        ValueError: If ``ZMANIM_USE_ELEVATION`` holds an unknown value.
    """
    raw = os.environ.get("ZMANIM_USE_ELEVATION", UseElevation.NO.value)
    try:
        return UseElevation(raw.strip().lower())
    except ValueError:
        choices = ", ".join(p.value for p in UseElevation)
        raise ValueError(
            f"ZMANIM_USE_ELEVATION must be one of {choices}: {raw!r}"
        ) from None
