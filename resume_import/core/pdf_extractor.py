import logging
import re
from io import BytesIO
from typing import Any, List, Sequence, Tuple

import pdfplumber

logger = logging.getLogger(__name__)

X_TOLERANCES = (1.5, 2, 2.5, 3)
LINE_BUCKET = 3  # points; words whose tops round into the same bucket share a line


def _page_text(page: Any, x_tolerance: float) -> str:
    """
    Rebuild a page's text from word boxes: bucket words by their top
    coordinate, order each bucket left to right, join with single spaces.
    """
    words = page.extract_words(
        x_tolerance=x_tolerance,
        y_tolerance=2,
        keep_blank_chars=False,
        use_text_flow=True,
    )
    if not words:
        return ""

    rows: List[List[str]] = []
    last_bucket = None
    for w in sorted(words, key=lambda w: (round(w["top"] / LINE_BUCKET), w["x0"])):
        bucket = round(w["top"] / LINE_BUCKET)
        if bucket != last_bucket:
            rows.append([])
            last_bucket = bucket
        rows[-1].append(w["text"])

    return "\n".join(" ".join(r) for r in rows)


def _artifact_score(text: str) -> int:
    """
    Lower is better. Long alphabetic runs mean glued words, a flood of
    single letters means characters were split apart.
    """
    tokens = re.findall(r"[A-Za-z]+", text)
    if not tokens:
        return 10**9
    glued = sum(1 for t in tokens if len(t) >= 18)
    singles = sum(1 for t in tokens if len(t) == 1)
    return glued * 10 + max(0, singles - 10) * 3


def _best_page_text(page: Any, tolerances: Sequence[float] = X_TOLERANCES) -> Tuple[str, float]:
    scored = [(_artifact_score(t), xt, t) for xt in tolerances for t in [_page_text(page, xt)]]
    scored.sort(key=lambda c: c[0])
    _, xt, text = scored[0]
    return text, xt


def extract_pdf_lines(pdf_bytes: bytes) -> List[str]:
    """
    Text-layer lines of every page, blank lines dropped. Scanned PDFs
    (no text layer) yield an empty list; OCR is not attempted.
    """
    out: List[str] = []
    with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
        for page_i, page in enumerate(pdf.pages, start=1):
            text, xt = _best_page_text(page)
            lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
            logger.debug(f"pdf page {page_i}: {len(lines)} lines (x_tolerance={xt})")
            out.extend(lines)
    return out


def extract_pdf_text(pdf_bytes: bytes) -> str:
    return "\n".join(extract_pdf_lines(pdf_bytes))
