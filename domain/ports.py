from typing import Any, Dict, Protocol

from domain.analysis_schema import AnalysisSchema


class TextExtractor(Protocol):
    def extract_text(self, data: bytes) -> str:
        ...


class AnalysisRequester(Protocol):
    async def request_analysis(self, text: str, schema: AnalysisSchema) -> Dict[str, Any]:
        ...
