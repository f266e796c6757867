"""
Pydantic models for the generation endpoint's wire format.

The endpoint speaks camelCase JSON; the models use snake_case attributes
with camelCase aliases. ``PitchResult`` is frozen: it is received once and
replaced wholesale on the next successful request, never merged.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


FormField = Literal["website", "facebook", "instagram", "linkedin", "description"]

FORM_FIELDS: tuple[str, ...] = ("website", "facebook", "instagram", "linkedin", "description")


class CompanyData(BaseModel):
    """The five free-text form inputs, sent verbatim."""

    website: str = ""
    facebook: str = ""
    instagram: str = ""
    linkedin: str = ""
    description: str = ""

    def has_input(self) -> bool:
        return any(getattr(self, name).strip() for name in FORM_FIELDS)


class PitchRequest(WireModel):
    type: Literal["pitch"] = "pitch"
    company_data: CompanyData


class SuggestionRequest(WireModel):
    type: Literal["suggestion"] = "suggestion"
    suggestion: str
    user_agent: str | None = None


class Automation(WireModel):
    title: str
    productivity_gain: str | None = None
    cost_savings: str | None = None


class Solution(WireModel):
    title: str
    summary: str
    expanded_detail: str | None = None


class DeepDiveExample(WireModel):
    zoho_app: str
    feature: str
    benefit: str
    implementation: str


class PitchResult(WireModel):
    industry: str | None = None
    # high / medium / low are recognised; anything else renders a neutral badge.
    industry_confidence: str | None = None
    research_summary: str | None = None
    pain_points: tuple[str, ...] = ()
    automations: tuple[Automation, ...] = ()
    solutions: tuple[Solution, ...] = ()
    proposal_benefits: tuple[str, ...] = ()
    sales_tip: str | None = None
    deep_dive_examples: tuple[DeepDiveExample, ...] = ()

    @field_validator(
        "pain_points", "automations", "solutions", "proposal_benefits", "deep_dive_examples",
        mode="before",
    )
    @classmethod
    def null_as_empty(cls, v):
        return () if v is None else v
