from fastapi import APIRouter, File, Request, UploadFile

from engine.logs import analyze_bytes, analyze_file
from api.responses import LogStatsResponse
from api.routes.common import discard_spool, read_body, run_bounded, spool_upload
from api.routes.exception import handle_exceptions

router = APIRouter(prefix="/analyze", tags=["Analyze"])


@router.post(
    "/text",
    response_model=LogStatsResponse,
    summary="Analyze log text sent as the raw request body",
    openapi_extra={
        "requestBody": {"content": {"text/plain": {"schema": {"type": "string"}}}, "required": False},
    },
)
@handle_exceptions
async def analyze_text(request: Request) -> LogStatsResponse:
    body = await read_body(request)
    stats = await run_bounded(analyze_bytes, body)
    return LogStatsResponse.from_stats(stats)


@router.post("/file", response_model=LogStatsResponse, summary="Analyze an uploaded log file")
@handle_exceptions
async def analyze_upload(file: UploadFile = File(...)) -> LogStatsResponse:
    path = await spool_upload(file)
    try:
        stats = await run_bounded(analyze_file, path)
    finally:
        discard_spool(path)
        await file.close()
    return LogStatsResponse.from_stats(stats)
