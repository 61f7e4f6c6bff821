"""Declarative description of the critique the model must return.

The schema is plain data: an ordered tuple of fields. ``AnalysisSchema.render``
turns it into the OpenAPI-subset dialect the Gemini ``responseSchema``
option accepts, including ``propertyOrdering`` so ``ats_score`` comes first.
"""
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, model_validator

NUMBER = "NUMBER"
STRING = "STRING"
ARRAY = "ARRAY"

FieldType = Literal["NUMBER", "STRING", "ARRAY"]


class SchemaField(BaseModel):
    name: str
    type: FieldType
    description: str
    items: Optional[FieldType] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _items_only_on_arrays(self):
        if self.type == ARRAY and self.items is None:
            raise ValueError(f"array field {self.name!r} needs an item type")
        if self.type != ARRAY and self.items is not None:
            raise ValueError(f"only array fields take an item type: {self.name!r}")
        return self

    def render(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type, "description": self.description}
        if self.items:
            out["items"] = {"type": self.items}
        if self.minimum is not None:
            out["minimum"] = self.minimum
        if self.maximum is not None:
            out["maximum"] = self.maximum
        return out


class AnalysisSchema(BaseModel):
    entries: Tuple[SchemaField, ...]

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _ordered_unique_fields(self):
        names = self.names
        if not names:
            raise ValueError("analysis schema has no fields")
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate field names in analysis schema: {names}")
        if names[0] != "ats_score":
            raise ValueError("ats_score must be the first field of the analysis schema")
        return self

    @property
    def names(self):
        return [f.name for f in self.entries]

    def render(self) -> Dict[str, Any]:
        return {
            "type": "OBJECT",
            "properties": {f.name: f.render() for f in self.entries},
            "required": self.names,
            "propertyOrdering": self.names,
        }


ANALYSIS_SCHEMA = AnalysisSchema(entries=(
    SchemaField(
        name="ats_score",
        type=NUMBER,
        description=(
            "The Applicant Tracking System (ATS) compatibility score as a number "
            "between 0 and 100, where 100 is perfect compatibility."
        ),
        minimum=0,
        maximum=100,
    ),
    SchemaField(
        name="structure",
        type=STRING,
        description=(
            "An evaluation of the resume's logical organization (e.g., clarity of "
            "sections, flow, use of headers)."
        ),
    ),
    SchemaField(
        name="format",
        type=STRING,
        description=(
            "A critique of the visual presentation, layout, and readability "
            "(e.g., font choice, white space, consistency)."
        ),
    ),
    SchemaField(
        name="keywords",
        type=ARRAY,
        items=STRING,
        description=(
            "A list of the top 5-10 relevant technical and soft skills/keywords "
            "found in the resume."
        ),
    ),
    SchemaField(
        name="suggestions",
        type=ARRAY,
        items=STRING,
        description=(
            "Specific, actionable, and prioritized suggestions for improving the "
            "resume's content and presentation."
        ),
    ),
))
