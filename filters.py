"""URL checks applied before a job ad is scraped."""

from __future__ import annotations

import re
from typing import Optional

from config import DEFAULT_JOB_URL_PATTERN


def is_valid_job_url(url: str, pattern: Optional[str] = None) -> bool:
    """
    Returns True if the URL looks like a single job ad on the configured board.
    The default pattern accepts Finn.no ads, either ``/<finnkode>`` or ``...?finnkode=<id>``.
    """
    if not url:
        return False
    return re.fullmatch(pattern or DEFAULT_JOB_URL_PATTERN, url.strip()) is not None
