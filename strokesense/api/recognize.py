"""POST /api/recognize — classify one stroke."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from strokesense.config import Settings
from strokesense.dependencies import get_settings
from strokesense.engine.recognizer import recognize
from strokesense.errors import InvalidConfigError, InvalidInputError, RecognitionError
from strokesense.models.requests import RecognizeRequest
from strokesense.models.responses import RecognizeResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/recognize", response_model=RecognizeResponse)
async def recognize_stroke(
    req: RecognizeRequest,
    settings: Settings = Depends(get_settings),
) -> RecognizeResponse:
    start = time.perf_counter()
    try:
        config = settings.recognizer_config(
            epsilon=req.epsilon,
            area_stride=req.area_stride,
            perimeter_stride=req.perimeter_stride,
        )
        result = recognize(req.points, config)
    except (InvalidInputError, InvalidConfigError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except RecognitionError as e:
        logger.error("Recognition failed: %s", e.errors)
        raise HTTPException(status_code=500, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    return RecognizeResponse.from_result(result, round(elapsed, 3))
