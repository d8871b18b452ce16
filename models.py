"""Data model for a scraped job posting."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

TITLE_NOT_FOUND = "Title not found"
COMPANY_NOT_FOUND = "Company not found"
LOCATION_NOT_SPECIFIED = "Not specified"
NO_DESCRIPTION = "No description available"


@dataclass(frozen=True)
class ScrapedJobPosting:
    title: str
    company: str
    location: str
    description: str

    @classmethod
    def from_extracted(
        cls,
        title: Optional[str],
        company: Optional[str],
        location: Optional[str],
        description: Optional[str],
    ) -> "ScrapedJobPosting":
        """Build a posting, replacing every missing or empty field with its placeholder."""
        return cls(
            title=title or TITLE_NOT_FOUND,
            company=company or COMPANY_NOT_FOUND,
            location=location or LOCATION_NOT_SPECIFIED,
            description=description or NO_DESCRIPTION,
        )

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
