import logging
from typing import Any, Dict

from fastapi.concurrency import run_in_threadpool

from domain.analysis_schema import ANALYSIS_SCHEMA
from domain.errors import ClientInputError
from domain.ports import AnalysisRequester, TextExtractor
from domain.schemas import UploadedFile

logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "No readable text found in PDF (the file might be an image scan)."


async def extract_resume_text(upload: UploadedFile, extractor: TextExtractor) -> str:
    raw = await run_in_threadpool(extractor.extract_text, upload.data)
    text = (raw or "").strip()
    if not text:
        raise ClientInputError(NO_TEXT_MESSAGE)
    return text


async def run_analysis(
    upload: UploadedFile,
    extractor: TextExtractor,
    requester: AnalysisRequester,
) -> Dict[str, Any]:
    logger.info("Received %s (%d bytes)", upload.filename, upload.size)

    resume_text = await extract_resume_text(upload, extractor)
    logger.info("Extracted %d chars of text", len(resume_text))
    logger.debug("Text preview: %s...", resume_text[:300])

    logger.info("Requesting analysis from model service")
    analysis = await requester.request_analysis(resume_text, ANALYSIS_SCHEMA)
    logger.info("Analysis received: ats_score=%s", analysis.get("ats_score"))
    return analysis
