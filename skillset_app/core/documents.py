"""HTML documents derived from certificates and notes."""

from __future__ import annotations

from skillset_app.constants.catalog_constants import ACADEMY_NAME
from skillset_app.core.markdown_renderer import MarkdownRenderer, renderer
from skillset_app.core.models import Certificate, Course, Note


def certificate_markdown(certificate: Certificate, holder_name: str = "Course Graduate") -> str:
    issued = certificate.issued_at.strftime("%B %d, %Y")
    return "\n\n".join(
        [
            "# Certificate of Completion",
            "This certifies that",
            f"**{holder_name}**",
            "has successfully completed the course",
            f"## {certificate.course_name}",
            "| Instructor | Final Score | Date Issued |\n| --- | --- | --- |\n"
            f"| {certificate.instructor_name} | {certificate.score}% | {issued} |",
            f"*{ACADEMY_NAME}*",
            f"Certificate #{certificate.certificate_number}",
        ]
    )


def render_certificate_html(
    certificate: Certificate,
    holder_name: str = "Course Graduate",
    markdown: MarkdownRenderer = renderer,
) -> str:
    return markdown.render_full_document(
        certificate_markdown(certificate, holder_name),
        title=f"Certificate {certificate.certificate_number}",
        css_class="certificate",
    )


def certificate_file_name(certificate: Certificate) -> str:
    return f"skillset-certificate-{certificate.certificate_number}.html"


def certificate_share_text(certificate: Certificate) -> str:
    return (
        f'I just completed "{certificate.course_name}" with a score of {certificate.score}% '
        "and earned my Skillset certificate! #SkillsetAcademy #OnlineLearning"
    )


def lesson_title_for_note(note: Note, course: Course) -> str:
    if not note.lesson_id:
        return "General Notes"
    lesson = next((lesson for lesson in course.lessons if lesson.id == note.lesson_id), None)
    return lesson.title if lesson else "Unknown Lesson"


def note_preview(note: Note, length: int = 100) -> str:
    """Single-line excerpt of the note body."""
    flat = note.content.replace("\n", " ")
    return flat[:length] + ("..." if len(flat) > length else "")


def render_note_html(note: Note, markdown: MarkdownRenderer = renderer) -> str:
    return markdown.render_fragment(note.content)
