"""LLM-based cover-letter writing from a résumé and a scraped job posting."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, List, Optional

import yaml
from docx import Document
from openai import OpenAI
from PyPDF2 import PdfReader

from models import ScrapedJobPosting

logger = logging.getLogger(__name__)

COMPLETE_LETTER_PROMPT = """Write a cover letter as the job applicant themselves, in first person, the way they would actually write it.
Write in the same language as the job description and sound like a real person who wants this specific job.
Cover why this job is exciting, how your actual experience connects to what they need, concrete examples from your background, your contact info and genuine interest in next steps.
Don't follow a template."""

WITTY_REMARK_PROMPT = COMPLETE_LETTER_PROMPT + "\nEnd with a natural, job-related joke that does not feel forced."

IDEAS_PROMPT = (
    "Generate natural, human-sounding ideas for a cover letter. Focus on genuine connections "
    "between the applicant's experience and job requirements. Avoid generic suggestions."
)

EDITOR_PROMPT = (
    "You are a cover letter editor. You will be given a piece of isolated text from within a cover letter "
    "and told how you can improve it. Only respond with the revision. Make sure the revision is in the same "
    "language as the given isolated text."
)

BASE_REQUIREMENTS = [
    "Use natural expressions and idioms in the same language as the job description",
    "Use contractions and informal language where appropriate",
    "Avoid overly polished or perfect sentence structures",
    "Use varied sentence starters and avoid repetitive patterns",
    "Don't use bullet points or structured formatting",
    "Write in flowing paragraphs like natural speech",
]

STYLE_INSTRUCTIONS = {
    "conversational_tone": "Write like you're talking to a friend, with casual expressions in the same language as the job description",
    "vary_sentence_length": "Mix very short sentences with longer ones. Some can be fragments, others can ramble a bit.",
    "add_personal_anecdote": "Share a specific, personal story from your actual experience.",
}

CONTENT_INSTRUCTIONS = {
    "use_industry_terminology": "Use specific technical terms from the industry, explained naturally",
    "include_confident_uncertainty": "Be confident but not arrogant, and admit what you don't know while being eager to learn",
    "add_rhetorical_question": "Ask a genuine question that shows you've thought about the role",
}

ANTI_AI_INSTRUCTIONS = {
    "add_typos_and_informal_spelling": "Include small typos and informal spellings that humans naturally make",
    "use_regional_expressions": "Use regional expressions and local slang appropriate to the language",
    "include_incomplete_thoughts": "Include thoughts that trail off naturally, like real speech",
    "mix_formal_informal_registers": "Mix formal and informal language within the same paragraph",
    "add_personal_interjections": "Add filler words like 'forresten', 'altså', 'liksom' in Norwegian",
    "use_run_on_sentences": "Use run-on sentences occasionally, like people do when excited",
    "include_self_corrections": "Include self-corrections like 'eller rettere sagt'",
    "jump_between_topics": "Jump between topics naturally instead of being too structured",
    "include_personal_opinions": "Include personal opinions that aren't perfectly balanced",
    "reference_current_trends": "Reference current trends or recent events when relevant to the job",
}


class CoverLetterError(Exception):
    pass


@dataclass
class CoverLetterOptions:
    conversational_tone: bool = False
    vary_sentence_length: bool = False
    add_personal_anecdote: bool = False
    use_industry_terminology: bool = False
    include_confident_uncertainty: bool = False
    add_rhetorical_question: bool = False
    add_typos_and_informal_spelling: bool = False
    use_regional_expressions: bool = False
    include_incomplete_thoughts: bool = False
    mix_formal_informal_registers: bool = False
    add_personal_interjections: bool = False
    use_run_on_sentences: bool = False
    include_self_corrections: bool = False
    jump_between_topics: bool = False
    include_personal_opinions: bool = False
    reference_current_trends: bool = False

    def enabled(self) -> List[str]:
        return [f.name for f in fields(self) if getattr(self, f.name)]


def _bullets(lines: List[str]) -> str:
    return "\n".join(f"- {line}" for line in lines)


def build_system_prompt(complete: bool = True, witty: bool = False, options: Optional[CoverLetterOptions] = None) -> str:
    if complete:
        prompt = WITTY_REMARK_PROMPT if witty else COMPLETE_LETTER_PROMPT
    else:
        prompt = IDEAS_PROMPT
    prompt += "\n\nANTI-AI-DETECTION REQUIREMENTS:\n" + _bullets(BASE_REQUIREMENTS)
    if options is None:
        return prompt

    enabled = options.enabled()
    for heading, instructions in (
        ("STYLE REQUIREMENTS", STYLE_INSTRUCTIONS),
        ("CONTENT REQUIREMENTS", CONTENT_INSTRUCTIONS),
        ("ANTI-AI PERSONALIZATION", ANTI_AI_INSTRUCTIONS),
    ):
        lines = [text for name, text in instructions.items() if name in enabled]
        if lines:
            prompt += f"\n\n{heading}:\n" + _bullets(lines)
    return prompt


def build_user_message(resume: str, posting: ScrapedJobPosting) -> str:
    return f"My Resume: {resume}. Job title: {posting.title} Job Description: {posting.description}."


RESUME_NOT_PROVIDED = "Resume not provided."
UNSUPPORTED_RESUME = "Unsupported file type. Please upload a PDF, TXT, DOC, or DOCX file."


def _pdf_text(path: Path) -> str:
    with path.open("rb") as fh:
        reader = PdfReader(fh)
        return "\n".join((page.extract_text() or "").strip() for page in reader.pages).strip()


def _word_text(path: Path) -> str:
    doc = Document(str(path))
    return "\n".join(para.text for para in doc.paragraphs).strip()


def load_resume_text(path: Path) -> str:
    """
    Read a résumé as plain text. YAML profiles are re-dumped as readable text,
    PDF and Word files have their text extracted. Other file types are rejected.
    """
    if not path.exists():
        return RESUME_NOT_PROVIDED
    suffix = path.suffix.lower()
    try:
        if suffix in {".yaml", ".yml"}:
            with path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
            return yaml.dump(data, sort_keys=False, allow_unicode=True)
        if suffix in {".txt", ".md"}:
            return path.read_text(encoding="utf-8")
        if suffix == ".pdf":
            return _pdf_text(path)
        if suffix in {".doc", ".docx"}:
            return _word_text(path)
    except Exception as exc:
        logger.error("Could not read résumé %s (%s)", path, exc)
        raise CoverLetterError(f"Could not read résumé {path}: {exc}") from exc
    raise CoverLetterError(UNSUPPORTED_RESUME)


def edit_model_for(user_model: str) -> str:
    return "gpt-4o" if user_model in {"gpt-4", "gpt-4o"} else "gpt-4o-mini"


def _complete(client: Any, model: str, system: str, user: str, temperature: float) -> str:
    try:
        resp = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            temperature=temperature,
        )
    except Exception as exc:
        logger.error("OpenAI request failed (%s)", exc)
        raise CoverLetterError(f"OpenAI request failed: {exc}") from exc
    content = resp.choices[0].message.content if resp.choices else None
    if not content:
        raise CoverLetterError("GPT returned an empty response")
    return content


def generate_cover_letter(
    resume: str,
    posting: ScrapedJobPosting,
    *,
    model: str = "gpt-4o-mini",
    temperature: float = 0.7,
    complete: bool = True,
    witty: bool = False,
    options: Optional[CoverLetterOptions] = None,
    client: Any = None,
) -> str:
    logger.info("Writing cover letter for %r with %s", posting.title, model)
    return _complete(
        client or OpenAI(),
        model,
        build_system_prompt(complete=complete, witty=witty, options=options),
        build_user_message(resume, posting),
        temperature,
    )


def generate_edit(text: str, improvement: str, *, model: str = "gpt-4o-mini", client: Any = None) -> str:
    """Rewrite one passage of a letter so it becomes more ``improvement``."""
    return _complete(
        client or OpenAI(),
        edit_model_for(model),
        EDITOR_PROMPT,
        f"Isolated text from within cover letter: {text}. It should be improved by making it more: {improvement}",
        0.5,
    )
