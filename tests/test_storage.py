import csv

from models import ScrapedJobPosting
from storage import save_postings_to_csv


def test_save_postings_to_csv(tmp_path):
    path = tmp_path / "out" / "jobs.csv"
    postings = {
        "https://www.finn.no/1": ScrapedJobPosting("Utvikler", "Acme", "Oslo", "Linje 1\nLinje 2"),
    }
    save_postings_to_csv(postings, str(path))

    with open(path, newline="", encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert rows == [
        {
            "url": "https://www.finn.no/1",
            "title": "Utvikler",
            "company": "Acme",
            "location": "Oslo",
            "description": "Linje 1\nLinje 2",
        }
    ]
