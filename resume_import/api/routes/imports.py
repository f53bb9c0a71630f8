import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from resume_import.config import Settings, get_settings
from resume_import.core.docx_extractor import extract_docx_text
from resume_import.core.free_text_parser import parse_free_text
from resume_import.core.pdf_extractor import extract_pdf_text
from resume_import.core.resume_ops import apply_import
from resume_import.core.schemas import ApplyImportRequest, ImportTextRequest, ParsedResume, ResumeData

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/import", tags=["import"])

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@router.post(
    "/text",
    response_model=ParsedResume,
    summary="Import Pasted Text",
    description="Heuristically extract resume fields from pasted plain text (e.g. a LinkedIn profile). Never fails on odd input; low confidence signals a poor match.",
    responses={
        200: {
            "description": "Parsed resume with confidence score",
            "content": {
                "application/json": {
                    "example": {
                        "personalInfo": {
                            "fullName": "Jane Doe",
                            "email": "jane@example.com",
                            "phone": "",
                            "location": "",
                            "linkedIn": "",
                            "github": "",
                            "twitter": "",
                            "instagram": "",
                            "website": "",
                            "summary": ""
                        },
                        "education": [],
                        "experience": [
                            {
                                "position": "Software Engineer",
                                "company": "Acme Corp",
                                "startDate": "Jan 2020",
                                "endDate": "Dec 2021",
                                "description": "Built things. "
                            }
                        ],
                        "skills": ["Python", "Go"],
                        "projects": [],
                        "confidence": 25
                    }
                }
            }
        }
    }
)
def import_text(body: ImportTextRequest):
    return parse_free_text(body.text)


@router.post(
    "/file",
    response_model=ParsedResume,
    summary="Import Resume File",
    description="Extract text from an uploaded TXT, Markdown, DOCX or PDF file and run the free-text import on it.",
    responses={
        400: {"description": "Empty file uploaded"},
        413: {"description": "File larger than the configured upload limit"},
        415: {"description": "Unsupported file format"},
        422: {"description": "File has no extractable text"}
    }
)
async def import_file(
    file: UploadFile = File(..., description="Resume file (TXT, MD, DOCX or PDF)"),
    settings: Settings = Depends(get_settings),
):
    """
    **Supported formats:**
    - TXT / MD
    - DOCX (.docx)
    - PDF (.pdf) - text layer only, OCR not supported
    """
    limit = settings.max_upload_bytes
    too_large = HTTPException(status_code=413, detail=f"File exceeds the {limit} byte upload limit.")
    if file.size is not None and file.size > limit:
        raise too_large
    # never buffer more than one byte past the limit
    raw = await file.read(limit + 1)
    if len(raw) > limit:
        raise too_large
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")

    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").lower()
    logger.info(f"Import upload: filename='{filename}', content_type='{content_type}', bytes={len(raw)}")

    # DOCX
    if filename.endswith(".docx") or content_type == DOCX_CONTENT_TYPE:
        return parse_free_text(extract_docx_text(raw))

    # PDF
    if filename.endswith(".pdf") or content_type == "application/pdf":
        text = extract_pdf_text(raw)
        if not text:
            raise HTTPException(
                status_code=422,
                detail="PDF appears to have no extractable text. OCR is not supported."
            )
        return parse_free_text(text)

    # Text
    if content_type in {"text/plain", "text/markdown"} or filename.endswith((".txt", ".md")):
        return parse_free_text(raw.decode("utf-8-sig", errors="replace"))

    raise HTTPException(status_code=415, detail=f"Unsupported content type: {file.content_type}")


@router.post(
    "/apply",
    response_model=ResumeData,
    summary="Apply Import",
    description="Merge an import result into the resume being edited: personal info overridden, entry lists appended, skills de-duplicated."
)
def apply(body: ApplyImportRequest):
    return apply_import(body.resume, body.parsed)
