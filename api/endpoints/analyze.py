from typing import Optional

from fastapi import APIRouter, File, Request, UploadFile

from api.upload_gate import read_upload
from domain.schemas import AnalyzeResponse, ErrorResponse
from domain.services.analysis_pipeline import run_analysis

router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(request: Request, file: Optional[UploadFile] = File(default=None)) -> AnalyzeResponse:
    state = request.app.state
    upload = await read_upload(file, state.settings.MAX_UPLOAD_BYTES)
    analysis = await run_analysis(upload, state.extractor, state.requester)
    return AnalyzeResponse(analysis=analysis)
