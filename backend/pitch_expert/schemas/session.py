"""
Per-browser session state.

``RequestState`` is a tagged union discriminated by ``kind``; exactly one
variant is active. The ``PitchResult`` lives inside ``SuccessState`` (or an
``ErrorState`` left by a failed validation) so a result can never outlive
the state that carries it.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from pitch_expert.core.i18n import Language
from pitch_expert.schemas.pitch import CompanyData, PitchResult

SLIDE_COUNT = 4


class IdleState(BaseModel):
    kind: Literal["idle"] = "idle"


class LoadingState(BaseModel):
    kind: Literal["loading"] = "loading"
    generation: int


class ErrorState(BaseModel):
    kind: Literal["error"] = "error"
    message: str
    # A failed validation keeps the result that was on screen.
    result: PitchResult | None = None


class SuccessState(BaseModel):
    kind: Literal["success"] = "success"
    result: PitchResult


RequestState = Annotated[
    Union[IdleState, LoadingState, ErrorState, SuccessState],
    Field(discriminator="kind"),
]

RequestStatus = Literal["idle", "loading", "error", "success"]
SuggestionStatus = Literal["success", "error"]


class PresentationState(BaseModel):
    visible: bool = False
    slide_index: int = 0


class PitchSession(BaseModel):
    id: str
    language: Language = Language.en
    form: CompanyData = Field(default_factory=CompanyData)
    request: RequestState = Field(default_factory=IdleState)
    presentation: PresentationState = Field(default_factory=PresentationState)
    expanded_solution: int | None = None

    # Bumped whenever an in-flight response must be discarded (clear, new submit).
    generation: int = 0

    suggestion_submitting: bool = False
    suggestion_status: SuggestionStatus | None = None
    suggestion_status_until: float | None = None
    copied_until: float | None = None

    @property
    def result(self) -> PitchResult | None:
        if isinstance(self.request, (SuccessState, ErrorState)):
            return self.request.result
        return None

    @property
    def error(self) -> str | None:
        if isinstance(self.request, ErrorState):
            return self.request.message
        return None

    @property
    def is_loading(self) -> bool:
        return isinstance(self.request, LoadingState)
