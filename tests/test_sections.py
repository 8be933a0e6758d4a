import unittest

from jobgoblin.schemas.tailor import Entry, SectionKind
from jobgoblin.tailoring.sections import (
    clean_model_text,
    extract_section,
    limit_sentences,
    parse_bullets,
    parse_nested_experience_bullets,
    parse_nested_project_bullets,
    parse_tailored_text,
    sanitize_pdf_text,
    split_sections,
)

HEADINGS = [
    "## Summary",
    "## Technical Skills",
    "## Highlighted Projects",
    "## Professional Experience",
    "## Education",
]

REPLY = (
    "Here is your tailored resume.\n"
    "## Summary\n"
    "Backend engineer with six years of Python experience. Ships reliable APIs.\n"
    "\n"
    "## Technical Skills\n"
    "- Languages: Python, Go\n"
    "- Cloud: AWS, Docker\n"
    "\n"
    "## Highlighted Projects\n"
    "• Job tracker\n"
    "- Built a FastAPI backend\n"
    "- Added PDF exports\n"
    "\n"
    "• Resume parser\n"
    "- Parsed 10k resumes a day\n"
    "\n"
    "## Professional Experience\n"
    "• Senior Engineer, Acme (2020-2024)\n"
    "- Cut API latency by 38%\n"
    "\n"
    "## Education\n"
    "- BSc Computer Science, State University\n"
)


class ExtractSectionTests(unittest.TestCase):
    def test_extracts_between_headers(self):
        self.assertEqual(
            extract_section(REPLY, "## Technical Skills", "## Highlighted Projects"),
            "- Languages: Python, Go\n- Cloud: AWS, Docker",
        )

    def test_runs_to_end_without_next_header(self):
        self.assertEqual(extract_section(REPLY, "## Education"), "- BSc Computer Science, State University")
        self.assertEqual(
            extract_section(REPLY, "## Education", "## Nothing Like This"),
            "- BSc Computer Science, State University",
        )

    def test_missing_header_returns_empty(self):
        self.assertEqual(extract_section(REPLY, "## Certifications", "## Education"), "")

    def test_header_match_is_case_insensitive(self):
        self.assertEqual(
            extract_section(REPLY.lower(), "## SUMMARY", "## TECHNICAL SKILLS"),
            "backend engineer with six years of python experience. ships reliable apis.",
        )

    def test_sections_cover_the_text_without_headings(self):
        body = REPLY.split("## Summary", 1)[1]
        text = "## Summary" + body
        parts = []
        for index, header in enumerate(HEADINGS):
            next_header = HEADINGS[index + 1] if index + 1 < len(HEADINGS) else None
            section = extract_section(text, header, next_header)
            self.assertEqual(section, extract_section(text, header, next_header))
            parts.append(section)

        stripped = text
        for header in HEADINGS:
            stripped = stripped.replace(header, "")
        self.assertEqual("".join("".join(parts).split()), "".join(stripped.split()))


class SplitSectionsTests(unittest.TestCase):
    def test_all_five_sections_found(self):
        sections = split_sections(REPLY)
        self.assertTrue(sections[SectionKind.SUMMARY].startswith("Backend engineer"))
        self.assertIn("- Cloud: AWS, Docker", sections[SectionKind.TECHNICAL_SKILLS])
        self.assertNotIn("Here is your tailored resume", " ".join(sections.values()))

    def test_missing_heading_yields_empty_section_and_warning(self):
        reply = REPLY.replace("## Professional Experience\n", "")
        with self.assertLogs("jobgoblin.tailoring.sections", level="WARNING") as logs:
            sections = split_sections(reply)
        self.assertEqual(sections[SectionKind.PROFESSIONAL_EXPERIENCE], "")
        self.assertTrue(any("Professional Experience" in line for line in logs.output))

    def test_heading_variants_are_recognised(self):
        sections = split_sections("# SUMMARY\nShort.\nEducation:\n- BSc\n")
        self.assertEqual(sections[SectionKind.SUMMARY], "Short.")
        self.assertEqual(sections[SectionKind.EDUCATION], "- BSc")


class BulletParsingTests(unittest.TestCase):
    def test_parse_bullets_keeps_only_prefixed_lines_in_order(self):
        text = "- one\nnot a bullet\n• two\n  - three\n-missing space\n"
        self.assertEqual(parse_bullets(text), ["one", "two", "three"])

    def test_nested_project_bullets(self):
        result = parse_nested_project_bullets("• A\n- d1\n- d2\n\n• B\n- d3")
        self.assertEqual(result, [Entry(title="A", details=["d1", "d2"]), Entry(title="B", details=["d3"])])

    def test_nested_details_before_any_title_are_ignored(self):
        result = parse_nested_experience_bullets("- orphan\nplain text\n• Role\n- did things")
        self.assertEqual(result, [Entry(title="Role", details=["did things"])])

    def test_last_entry_is_flushed(self):
        result = parse_nested_experience_bullets("• Only role")
        self.assertEqual(result, [Entry(title="Only role", details=[])])


class CleaningTests(unittest.TestCase):
    def test_clean_model_text_drops_emphasis_and_phrase(self):
        self.assertEqual(clean_model_text("**Bold** work by The Candidate."), "Bold work by .")

    def test_sanitizer_keeps_bullets_as_asterisks(self):
        self.assertEqual(sanitize_pdf_text("• Café – naïve ✓"), "* Caf - nave ")

    def test_sanitizer_keeps_line_breaks_as_word_breaks(self):
        self.assertEqual(
            sanitize_pdf_text("linkedin.com/in/jane\ngithub.com/jane\r\nBerlin"),
            "linkedin.com/in/jane github.com/jane  Berlin",
        )

    def test_sanitizer_handles_empty(self):
        self.assertEqual(sanitize_pdf_text(None), "")

    def test_limit_sentences(self):
        self.assertEqual(limit_sentences("One. Two! Three? Four.", 2), "One. Two!")
        self.assertEqual(limit_sentences("No terminal punctuation", 2), "No terminal punctuation")


class ParseTailoredTextTests(unittest.TestCase):
    def test_full_reply(self):
        sections = parse_tailored_text(REPLY)
        self.assertEqual(sections.technical_skills, ["Languages: Python, Go", "Cloud: AWS, Docker"])
        self.assertEqual([entry.title for entry in sections.highlighted_projects], ["Job tracker", "Resume parser"])
        self.assertEqual(sections.professional_experience[0].details, ["Cut API latency by 38%"])
        self.assertEqual(sections.education, ["BSc Computer Science, State University"])
        self.assertEqual(sections.missing, [])

    def test_off_format_reply_degrades_to_empty_sections(self):
        sections = parse_tailored_text("I could not follow the format, sorry.")
        self.assertEqual(sections.summary, "")
        self.assertEqual(sections.highlighted_projects, [])
        self.assertEqual(len(sections.missing), 5)


if __name__ == "__main__":
    unittest.main()
