from models import ScrapedJobPosting


def test_from_extracted_keeps_values():
    posting = ScrapedJobPosting.from_extracted("Utvikler", "Acme", "Oslo", "Beskrivelse")
    assert posting == ScrapedJobPosting("Utvikler", "Acme", "Oslo", "Beskrivelse")


def test_from_extracted_replaces_empty_and_missing():
    posting = ScrapedJobPosting.from_extracted("", None, "", None)
    assert posting.title == "Title not found"
    assert posting.company == "Company not found"
    assert posting.location == "Not specified"
    assert posting.description == "No description available"
