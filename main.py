"""CLI entry for scraping Finn.no job ads and drafting cover letters."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from tqdm import tqdm

from config import Settings
from cover_letter import (
    CoverLetterError,
    CoverLetterOptions,
    generate_cover_letter,
    generate_edit,
    load_resume_text,
)
from filters import is_valid_job_url
from models import ScrapedJobPosting
from scraper import JobPostingExtractor, ScrapeError, make_session
from storage import save_postings_to_csv

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

INVALID_URL_MESSAGE = "Please enter a valid Finn.no job advertisement URL."
SCRAPE_FAILED_MESSAGE = "Failed to scrape job information. Please try again or enter details manually."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrape Finn.no job ads and draft cover letters for them.")
    commands = parser.add_subparsers(dest="command", required=True)

    scrape = commands.add_parser("scrape", help="scrape job ads into title, company, location and description")
    scrape.add_argument("urls", nargs="+", help="job ad URLs")
    scrape.add_argument("--output", help="write scraped postings to this CSV file")
    scrape.add_argument("--cover-letter", action="store_true", help="draft a cover letter for each posting")
    scrape.add_argument("--ideas", action="store_true", help="ask for cover-letter ideas instead of a complete letter")
    scrape.add_argument("--resume", help="résumé file (PDF, DOC/DOCX, TXT or YAML) used for cover letters")
    scrape.add_argument("--witty", action="store_true", help="end cover letters with a job-related joke")
    scrape.add_argument("--model", help="OpenAI model (default: OPENAI_MODEL)")
    scrape.add_argument("--temperature", type=float, help="creativity, 0.0-2.0 (default: COVER_LETTER_TEMPERATURE)")
    letter_options = scrape.add_argument_group("cover-letter options")
    for option in fields(CoverLetterOptions):
        letter_options.add_argument("--" + option.name.replace("_", "-"), dest=option.name, action="store_true")

    edit = commands.add_parser("edit", help="revise one passage of a cover letter")
    edit.add_argument("text", help="the passage to revise")
    edit.add_argument("--improvement", required=True, help='what the passage should become more of, e.g. "formal"')
    edit.add_argument("--model", help="model the letter was written with (default: OPENAI_MODEL)")
    return parser


def format_posting(url: str, posting: ScrapedJobPosting) -> str:
    return "\n".join(
        [
            f"URL: {url}",
            f"Title: {posting.title}",
            f"Company: {posting.company}",
            f"Location: {posting.location}",
            "",
            posting.description,
        ]
    )


def scrape_urls(urls: List[str], extractor: JobPostingExtractor) -> Tuple[Dict[str, ScrapedJobPosting], int]:
    """Scrape each URL in turn. Returns the postings by URL and the number of failed fetches."""
    postings: Dict[str, ScrapedJobPosting] = {}
    failed = 0
    for url in tqdm(urls, desc="Scraping job ads", disable=len(urls) < 2):
        try:
            postings[url] = extractor.extract(url)
        except ScrapeError as exc:
            logger.error("%s", exc)
            print(f"{url}: {SCRAPE_FAILED_MESSAGE}")
            failed += 1
    return postings, failed


def write_cover_letters(args: argparse.Namespace, settings: Settings, postings: Dict[str, ScrapedJobPosting]) -> int:
    try:
        resume = load_resume_text(Path(args.resume or settings.resume_path))
    except CoverLetterError as exc:
        logger.error("%s", exc)
        print(exc)
        return len(postings)

    options = CoverLetterOptions(**{option.name: getattr(args, option.name) for option in fields(CoverLetterOptions)})
    failed = 0
    for url, posting in postings.items():
        try:
            letter = generate_cover_letter(
                resume,
                posting,
                model=args.model or settings.openai_model,
                temperature=settings.temperature if args.temperature is None else args.temperature,
                complete=not args.ideas,
                witty=args.witty,
                options=options,
            )
        except CoverLetterError as exc:
            logger.error("Cover letter failed for %s: %s", url, exc)
            failed += 1
            continue
        print(f"--- Cover letter for {posting.title} ---")
        print(letter)
        print()
    return failed


def run_scrape(args: argparse.Namespace, settings: Settings, extractor: Optional[JobPostingExtractor]) -> int:
    valid_urls = []
    failed = 0
    for url in args.urls:
        if is_valid_job_url(url, settings.job_url_pattern):
            valid_urls.append(url.strip())
        else:
            logger.warning("Rejected URL %s", url)
            print(f"{url}: {INVALID_URL_MESSAGE}")
            failed += 1

    if extractor is None:
        session = make_session(settings.user_agent, settings.proxy, settings.verify_ssl)
        extractor = JobPostingExtractor(session=session, timeout=settings.request_timeout)
    postings, scrape_failures = scrape_urls(valid_urls, extractor)
    failed += scrape_failures

    for url, posting in postings.items():
        print(format_posting(url, posting))
        print()

    if args.output and postings:
        save_postings_to_csv(postings, args.output)
        logger.info("Saved %d postings to %s", len(postings), args.output)

    if args.cover_letter and postings:
        failed += write_cover_letters(args, settings, postings)

    return 1 if failed else 0


def run_edit(args: argparse.Namespace, settings: Settings) -> int:
    try:
        revision = generate_edit(args.text, args.improvement, model=args.model or settings.openai_model)
    except CoverLetterError as exc:
        logger.error("Edit failed: %s", exc)
        print(exc)
        return 1
    print(revision)
    return 0


def main(argv: Optional[List[str]] = None, extractor: Optional[JobPostingExtractor] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    if args.command == "edit":
        return run_edit(args, settings)
    return run_scrape(args, settings, extractor)


if __name__ == "__main__":
    sys.exit(main())
