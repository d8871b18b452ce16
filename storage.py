"""Persistence utilities for scraped job postings."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Mapping

from models import ScrapedJobPosting


def save_postings_to_csv(postings: Mapping[str, ScrapedJobPosting], path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    header = ["url", "title", "company", "location", "description"]

    with open(path, "w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(header)
        for url, posting in postings.items():
            writer.writerow(
                [
                    url,
                    posting.title,
                    posting.company,
                    posting.location,
                    posting.description,
                ]
            )
