from pydantic import BaseModel
from typing import Any, Dict


class UploadedFile(BaseModel):
    filename: str
    content_type: str
    data: bytes

    model_config = {"frozen": True}

    @property
    def size(self) -> int:
        return len(self.data)


class AnalyzeResponse(BaseModel):
    analysis: Dict[str, Any]


class ErrorResponse(BaseModel):
    error: str
