"""
View models produced by ``pitch_expert.core.renderer``.

These are what the page template and the JSON API render. Every label is
already resolved for the session language; nothing here needs a lookup.
"""

from __future__ import annotations

from pydantic import BaseModel

from pitch_expert.core.i18n import Language
from pitch_expert.schemas.pitch import CompanyData
from pitch_expert.schemas.session import RequestStatus


class ConfidenceBadge(BaseModel):
    level: str
    label: str
    color_class: str


class IndustrySection(BaseModel):
    title: str
    label: str
    value: str
    badge: ConfidenceBadge | None = None


class TextSection(BaseModel):
    title: str
    text: str


class ListSection(BaseModel):
    title: str
    items: list[str]


class AutomationMetric(BaseModel):
    key: str
    label: str
    value: str


class AutomationCard(BaseModel):
    title: str
    metrics: list[AutomationMetric]


class AutomationsSection(BaseModel):
    title: str
    cards: list[AutomationCard]


class SolutionCard(BaseModel):
    index: int
    title: str
    summary: str
    expanded: bool
    toggle_label: str
    paragraphs: list[str] = []


class SolutionsSection(BaseModel):
    title: str
    cards: list[SolutionCard]


class ProposalSection(BaseModel):
    title: str
    benefits: list[str]
    closing: str
    share_text: str


class DeepDiveCard(BaseModel):
    zoho_app: str
    feature: str
    benefit: str
    implementation: str


class DeepDiveSection(BaseModel):
    title: str
    feature_label: str
    benefit_label: str
    how_to_build_label: str
    examples: list[DeepDiveCard]


class DisplaySections(BaseModel):
    heading: str
    industry: IndustrySection
    research_summary: TextSection | None = None
    pain_points: ListSection | None = None
    automations: AutomationsSection | None = None
    solutions: SolutionsSection | None = None
    proposal: ProposalSection | None = None
    sales_tip: TextSection | None = None
    deep_dive: DeepDiveSection | None = None


class Slide(BaseModel):
    index: int
    title: str
    headline: str | None = None
    subheadline: str | None = None
    points: list[str] = []


class PresentationView(BaseModel):
    visible: bool
    slide_index: int
    slide_count: int
    slides: list[Slide] = []


class PublicConfig(BaseModel):
    project_name: str
    logo_eand_url: str
    logo_zoho_url: str
    enable_presentation_mode: bool
    enable_feature_suggestions: bool
    default_language: Language


class SessionView(BaseModel):
    language: Language
    direction: str
    status: RequestStatus
    is_loading: bool
    error: str | None = None
    form: CompanyData
    results: DisplaySections | None = None
    presentation: PresentationView
    suggestion_submitting: bool = False
    suggestion_message: str | None = None
    suggestion_status: str | None = None
    copied: bool = False
    config: PublicConfig


class GenerateResponse(BaseModel):
    view: SessionView
    scroll_to: str | None = None
    scroll_delay_ms: int = 0


class ShareLinks(BaseModel):
    share_text: str
    mailto: str
    whatsapp: str


class ClipboardCopy(BaseModel):
    text: str
    ack_label: str
    ack_seconds: float


class SuggestionStatusRead(BaseModel):
    status: str
    message: str
