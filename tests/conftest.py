"""
Pytest configuration and fixtures for BoldRead tests.

PDFs are generated in memory with PyMuPDF so no binary fixtures are
checked in.
"""

from pathlib import Path

import fitz
import pytest

from boldread.models import Paragraph
from boldread.readers.pdf_reader import RawDocument, RawPage

# Each sentence is well over the default 80-character paragraph minimum
SAMPLE_SENTENCES = [
    "Reading speed depends on how quickly the eye can find the start of every word on the page.",
    "Bold prefixes give the eye an anchor, so a reader can skim a line without losing the thread.",
    "The effect is strongest on long passages where the reader would otherwise tire after a while.",
    "Typography matters as much as content, and the spacing between lines shapes comprehension.",
    "Short words need only a single bold letter, while long words benefit from a longer prefix.",
    "A good layout never splits a word across two lines, even when the word is unusually long.",
    "Pagination must keep every line of the excerpt, in order, without repeating any of them.",
    "Exported documents should look exactly like the preview that the reader already approved.",
]


def fixed_measure(text: str, is_bold: bool, font_size: float) -> float:
    """Deterministic width: 6 points per character, bold or not."""
    return len(text) * 6.0


def make_pdf(page_texts: list[str], *, encrypt: bool = False) -> bytes:
    """Build a PDF with one page per entry, text wrapped into a text box."""
    doc = fitz.open()
    for text in page_texts:
        page = doc.new_page(width=612, height=792)
        page.insert_textbox(fitz.Rect(50, 50, 562, 742), text, fontsize=11, fontname="helv")
    if encrypt:
        data = doc.tobytes(
            encryption=fitz.PDF_ENCRYPT_AES_256,
            owner_pw="owner",
            user_pw="user",
        )
    else:
        data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture(scope="session")
def sample_pdf_bytes() -> bytes:
    """Two-page PDF with eight paragraph-length sentences."""
    return make_pdf([" ".join(SAMPLE_SENTENCES[:4]), " ".join(SAMPLE_SENTENCES[4:])])


@pytest.fixture
def sample_pdf(tmp_path, sample_pdf_bytes) -> Path:
    """sample_pdf_bytes written to disk."""
    path = tmp_path / "sample.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path


@pytest.fixture(scope="session")
def encrypted_pdf_bytes() -> bytes:
    return make_pdf([SAMPLE_SENTENCES[0]], encrypt=True)


@pytest.fixture
def sample_raw() -> RawDocument:
    """RawDocument built directly, bypassing PDF extraction."""
    pages = [
        RawPage(index=0, text="\n".join(SAMPLE_SENTENCES[:4])),
        RawPage(index=1, text="\n".join(SAMPLE_SENTENCES[4:])),
    ]
    return RawDocument(source_path=None, page_count=2, pages=pages, metadata={})


@pytest.fixture
def paragraphs() -> list[Paragraph]:
    """Ten short numbered paragraphs."""
    return [Paragraph(index=i, text=f"Paragraph number {i} of the pool.") for i in range(10)]


@pytest.fixture
def measure():
    return fixed_measure


@pytest.fixture
def sample_sentences() -> list[str]:
    return list(SAMPLE_SENTENCES)
