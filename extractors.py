"""Field and section extractors for Finn.no job ads.

Each extractor takes the parsed document and returns the extracted text, or
``None`` when the page does not carry that field. None of them raise on
missing markup; placeholders are applied later by ``ScrapedJobPosting``.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, List, Optional, Sequence

from bs4.element import Tag

import dom

logger = logging.getLogger(__name__)

Extractor = Callable[[Tag], Optional[str]]

LOCATION_LABEL = "Sted"
QUALIFICATIONS_LABEL = "Ønskede kvalifikasjoner"
QUALIFICATIONS_HEADING = QUALIFICATIONS_LABEL + ":"
ABOUT_EMPLOYER_LABEL = "Om arbeidsgiveren"
SKILLS_LABEL = "Ferdigheter"
JOB_INFO_LABEL = "Jobbinfo"

MAX_MAIN_PARAGRAPHS = 5
SECTION_BOUNDARY_TAGS = ("strong",) + dom.HEADING_TAGS

_EXCESS_NEWLINES = re.compile(r"(\n\s*){3,}")
_TRAILING_COLONS = re.compile(r"[:：]+$")
_LEADING_COLON = re.compile(r"^:")


def first_match(root: Tag, extractors: Sequence[Extractor]) -> Optional[str]:
    """Run extractors in order and return the first non-empty result."""
    for extractor in extractors:
        value = extractor(root)
        if value:
            return value
        logger.debug("%s found nothing", extractor.__name__)
    return None


def collect(root: Tag, extractors: Sequence[Extractor]) -> List[str]:
    """Run every extractor and keep the non-empty results, in order."""
    blocks = []
    for extractor in extractors:
        value = extractor(root)
        if value:
            blocks.append(value)
        else:
            logger.debug("%s found nothing", extractor.__name__)
    return blocks


def _article_paragraphs(root: Tag) -> Iterable[str]:
    for paragraph in dom.find_within(root, "article", "p"):
        text = dom.text_of(paragraph)
        if text:
            yield text


# -- title / company ---------------------------------------------------------


def extract_title(root: Tag) -> Optional[str]:
    return dom.text_of(dom.find_first(root, "h1")) or None


def extract_company(root: Tag, title: Optional[str]) -> Optional[str]:
    """First non-empty article paragraph that is not a repeat of the title."""
    for text in _article_paragraphs(root):
        if text != title:
            return text
    return None


# -- location ----------------------------------------------------------------


def location_from_label(root: Tag) -> Optional[str]:
    """``<span>Sted</span><span>Oslo</span>``: the element right after the label."""
    label = dom.find_containing(root, "span", LOCATION_LABEL)
    if label is None:
        return None
    return dom.text_of(dom.next_element(label)) or None


def location_from_list_item(root: Tag) -> Optional[str]:
    """``<li><span>Sted</span>: Oslo</li>``: the item's own text after the label."""
    for item in dom.find_all(root, "li"):
        if not dom.text_of(dom.find_first(item, "span")).startswith(LOCATION_LABEL):
            continue
        text = " ".join(dom.own_text_fragments(item))
        text = _LEADING_COLON.sub("", text).strip()
        if text:
            return text
    return None


LOCATION_EXTRACTORS: Sequence[Extractor] = (location_from_label, location_from_list_item)


def extract_location(root: Tag) -> Optional[str]:
    return first_match(root, LOCATION_EXTRACTORS)


# -- description sections ----------------------------------------------------


def main_paragraphs(root: Tag) -> Optional[str]:
    paragraphs = []
    for text in _article_paragraphs(root):
        if text == QUALIFICATIONS_HEADING:
            continue
        paragraphs.append(text)
        if len(paragraphs) == MAX_MAIN_PARAGRAPHS:
            break
    return "\n".join(paragraphs) or None


def about_employer_section(root: Tag) -> Optional[str]:
    header = dom.find_containing(root, "h2", ABOUT_EMPLOYER_LABEL, class_name="t3")
    text = dom.text_of(dom.next_element(header, class_name="import-decoration"))
    if not text:
        return None
    return f"{ABOUT_EMPLOYER_LABEL}:\n{text}"


def qualifications_section(root: Tag) -> Optional[str]:
    """Paragraphs following the "Ønskede kvalifikasjoner" label, up to the next strong or heading."""
    label = dom.find_containing(root, "strong", QUALIFICATIONS_LABEL)
    if label is None or label.parent is None:
        return None
    qualifications = []
    for element in dom.following_elements(label.parent):
        if dom.is_any_of(element, SECTION_BOUNDARY_TAGS):
            break
        if element.name == "p":
            text = dom.text_of(element)
            if text:
                qualifications.append(text)
    if not qualifications:
        return None
    return f"{QUALIFICATIONS_HEADING}\n" + "\n".join(qualifications)


def skills_section(root: Tag) -> Optional[str]:
    """Spans of the list right after every "Ferdigheter" header; headers without a list are skipped."""
    skills = []
    for header in dom.find_all(root, "h2", class_name="t3"):
        if SKILLS_LABEL not in dom.text_of(dom.find_first(header, "div")):
            continue
        skill_list = dom.next_element(header, tag="ul")
        if skill_list is None:
            continue
        for span in dom.find_all(skill_list, "span"):
            skill = dom.text_of(span)
            if skill:
                skills.append(skill)
    if not skills:
        return None
    return f"{SKILLS_LABEL}:\n" + ", ".join(skills)


def job_info_section(root: Tag) -> Optional[str]:
    """Key/value list, ``<li><span class="font-bold">Startdato:</span> 1. januar</li>``."""
    info_list = dom.find_first(root, "ul", class_name="space-y-6")
    if info_list is None:
        return None
    pairs = []
    for item in dom.find_all(info_list, "li"):
        label = _TRAILING_COLONS.sub("", dom.text_of(dom.find_first(item, "span", class_name="font-bold")))
        value = dom.text_without_children(item, "span", class_name="font-bold")
        if label and value:
            pairs.append(f"{label}: {value}")
    if not pairs:
        return None
    return f"{JOB_INFO_LABEL}:\n" + " | ".join(pairs)


DESCRIPTION_SECTIONS: Sequence[Extractor] = (
    main_paragraphs,
    about_employer_section,
    qualifications_section,
    skills_section,
    job_info_section,
)


def assemble_description(blocks: Sequence[str]) -> Optional[str]:
    text = "\n\n".join(block for block in blocks if block)
    text = _EXCESS_NEWLINES.sub("\n\n", text).strip()
    return text or None


def extract_description(root: Tag) -> Optional[str]:
    return assemble_description(collect(root, DESCRIPTION_SECTIONS))
