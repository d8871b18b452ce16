"""Environment-based settings for the job-ad scraper."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_JOB_URL_PATTERN = r"^https://www\.finn\.no/(?:\d+|.*\?finnkode=\d+)$"


def _parse_timeout(env_name: str, default: str) -> Optional[float]:
    raw = os.getenv(env_name, default).strip()
    if not raw:
        return None
    value = float(raw)
    return value if value > 0 else None


@dataclass
class Settings:
    user_agent: Optional[str]
    request_timeout: Optional[float]
    proxy: Optional[str]
    verify_ssl: bool
    job_url_pattern: str
    output_path: str
    openai_model: str
    temperature: float
    resume_path: str

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            user_agent=os.getenv("SCRAPER_USER_AGENT") or None,
            request_timeout=_parse_timeout("REQUEST_TIMEOUT", "30"),
            proxy=os.getenv("HTTP_PROXY") or os.getenv("HTTPS_PROXY") or None,
            verify_ssl=os.getenv("VERIFY_SSL", "true").lower() not in {"0", "false", "no"},
            job_url_pattern=os.getenv("JOB_URL_PATTERN") or DEFAULT_JOB_URL_PATTERN,
            output_path=os.getenv("OUTPUT_PATH", "scraped_jobs.csv"),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            temperature=float(os.getenv("COVER_LETTER_TEMPERATURE", "0.7")),
            resume_path=os.getenv("RESUME_PATH", "resume.txt"),
        )
