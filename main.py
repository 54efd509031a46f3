from enum import Enum
from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.responses import Response
from xliff_fixer.services.xliff_fixer import XliffFixer
from xliff_fixer.services.ai_repairer import AIRepairError
from xliff_fixer.models.repair_result import RepairResult
from xliff_fixer.models.file_data import FileData
from xliff_fixer.utils.file_utils import FileRejectedError, check_upload, fixed_file_name, load_upload
from xliff_fixer.logconf import logger

app = FastAPI()

fixer = XliffFixer()


class RepairMode(str, Enum):
    heuristic = "heuristic"
    ai = "ai"


async def _repair_upload(file: UploadFile, mode: RepairMode) -> tuple[FileData, RepairResult]:
    name = file.filename or "upload.xml"
    try:
        # reject oversized uploads before buffering them
        if file.size is not None:
            check_upload(name, file.size)
        data = load_upload(name, await file.read())
    except FileRejectedError as e:
        logger.error("%s", e)
        raise HTTPException(status_code=400, detail=str(e))

    try:
        result = await fixer.repair(data, use_ai=mode is RepairMode.ai)
    except AIRepairError as e:
        raise HTTPException(status_code=502, detail=f"AI Repair Failed: {e}")
    return data, result


@app.post("/repair/")
async def repair_endpoint(
    file: UploadFile = File(...),
    mode: RepairMode = Query(RepairMode.heuristic),
):
    data, result = await _repair_upload(file, mode)
    return {
        "fileName": data.name,
        "fixedFileName": fixed_file_name(data.name),
        "result": result.to_dict(),
    }


@app.post("/repair/download/")
async def repair_download_endpoint(
    file: UploadFile = File(...),
    mode: RepairMode = Query(RepairMode.heuristic),
):
    data, result = await _repair_upload(file, mode)
    name = fixed_file_name(data.name)
    logger.info("Downloaded %s", name)
    return Response(
        content=result.fixed_content,
        media_type="application/xml",
        headers={"Content-Disposition": f'attachment; filename="{name}"'},
    )


@app.get("/")
async def root():
    return {"message": "XLIFF Fixer API is running."}
