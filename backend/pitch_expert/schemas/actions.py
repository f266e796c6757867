from pydantic import BaseModel

from pitch_expert.schemas.pitch import FormField


class FieldUpdate(BaseModel):
    field: FormField
    value: str


class SlideUpdate(BaseModel):
    index: int


class SuggestionCreate(BaseModel):
    suggestion: str
