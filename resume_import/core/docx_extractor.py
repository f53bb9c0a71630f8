from io import BytesIO
from typing import List

from docx import Document


def extract_docx_lines(docx_bytes: bytes) -> List[str]:
    """
    Deterministically extract non-empty paragraph text from a DOCX, in document order.
    Table cells are appended after body paragraphs (one line per cell).
    """
    doc = Document(BytesIO(docx_bytes))
    out: List[str] = []
    for p in doc.paragraphs:
        t = (p.text or "").strip()
        if t:
            out.append(t)
    for table in doc.tables:
        for row in table.rows:
            prev = None
            for cell in row.cells:
                t = (cell.text or "").strip()
                # merged cells repeat across the row
                if t and t != prev:
                    out.append(t)
                prev = t
    return out


def extract_docx_text(docx_bytes: bytes) -> str:
    return "\n".join(extract_docx_lines(docx_bytes))
