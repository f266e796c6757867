"""
Pure projections from session state into view models.

Nothing here touches the network or mutates its inputs. Presence of an
optional field is decided with ``is None``; sequences render when
non-empty. An empty string is a value, not an absence.
"""

from __future__ import annotations

from pitch_expert.core.config import Settings
from pitch_expert.core.i18n import Language, confidence_key, t, text_direction
from pitch_expert.schemas.display import (
    AutomationCard,
    AutomationMetric,
    AutomationsSection,
    ConfidenceBadge,
    DeepDiveCard,
    DeepDiveSection,
    DisplaySections,
    IndustrySection,
    ListSection,
    PresentationView,
    ProposalSection,
    PublicConfig,
    SessionView,
    Slide,
    SolutionCard,
    SolutionsSection,
    TextSection,
)
from pitch_expert.schemas.pitch import PitchResult
from pitch_expert.schemas.session import SLIDE_COUNT, PitchSession

CONFIDENCE_COLORS = {
    "high": "text-green-600",
    "medium": "text-yellow-600",
    "low": "text-red-600",
}
NEUTRAL_CONFIDENCE_COLOR = "text-gray-600"

DEEP_DIVE_LIMIT = 2
BULLET_SEPARATOR = "\n• "


def build_share_text(result: PitchResult, language: Language) -> str:
    """Benefits joined by bullets, a blank line, then the closing statement."""
    return BULLET_SEPARATOR.join(result.proposal_benefits) + "\n\n" + t("proposalClosing", language)


def _confidence_badge(level: str, language: Language) -> ConfidenceBadge:
    return ConfidenceBadge(
        level=level,
        label=t(confidence_key(level), language),
        color_class=CONFIDENCE_COLORS.get(level, NEUTRAL_CONFIDENCE_COLOR),
    )


def _industry(result: PitchResult, language: Language) -> IndustrySection:
    badge = None
    if result.industry_confidence is not None:
        badge = _confidence_badge(result.industry_confidence, language)
    return IndustrySection(
        title=t("partATitle", language),
        label=t("detectedIndustry", language),
        value=result.industry if result.industry is not None else t("noData", language),
        badge=badge,
    )


def _automations(result: PitchResult, language: Language) -> AutomationsSection | None:
    if not result.automations:
        return None
    cards = []
    for automation in result.automations:
        metrics = []
        if automation.productivity_gain is not None:
            metrics.append(AutomationMetric(
                key="productivityGain",
                label=t("productivityGain", language),
                value=automation.productivity_gain,
            ))
        if automation.cost_savings is not None:
            metrics.append(AutomationMetric(
                key="costSavings",
                label=t("costSavings", language),
                value=automation.cost_savings,
            ))
        cards.append(AutomationCard(title=automation.title, metrics=metrics))
    return AutomationsSection(title=t("partBTitle", language), cards=cards)


def _solutions(
    result: PitchResult, language: Language, expanded_solution: int | None
) -> SolutionsSection | None:
    if not result.solutions:
        return None
    cards = []
    for index, solution in enumerate(result.solutions):
        expanded = expanded_solution == index
        paragraphs: list[str] = []
        if expanded and solution.expanded_detail is not None:
            paragraphs = solution.expanded_detail.split("\n")
        cards.append(SolutionCard(
            index=index,
            title=solution.title,
            summary=solution.summary,
            expanded=expanded,
            toggle_label=t("collapseDetails" if expanded else "expandDetails", language),
            paragraphs=paragraphs,
        ))
    return SolutionsSection(title=t("partCTitle", language), cards=cards)


def _proposal(result: PitchResult, language: Language) -> ProposalSection | None:
    if not result.proposal_benefits:
        return None
    return ProposalSection(
        title=t("partDTitle", language),
        benefits=list(result.proposal_benefits),
        closing=t("proposalClosing", language),
        share_text=build_share_text(result, language),
    )


def _deep_dive(result: PitchResult, language: Language) -> DeepDiveSection | None:
    if not result.deep_dive_examples:
        return None
    return DeepDiveSection(
        title=t("deepDiveTitle", language),
        feature_label=t("feature", language),
        benefit_label=t("benefit", language),
        how_to_build_label=t("howToBuild", language),
        examples=[
            DeepDiveCard(
                zoho_app=example.zoho_app,
                feature=example.feature,
                benefit=example.benefit,
                implementation=example.implementation,
            )
            for example in result.deep_dive_examples[:DEEP_DIVE_LIMIT]
        ],
    )


def render_results(
    result: PitchResult,
    language: Language,
    expanded_solution: int | None = None,
) -> DisplaySections:
    """Project a PitchResult into the result sections for *language*."""
    research_summary = None
    if result.research_summary is not None:
        research_summary = TextSection(title=t("researchSummaryTitle", language), text=result.research_summary)

    pain_points = None
    if result.pain_points:
        pain_points = ListSection(title=t("painPointsTitle", language), items=list(result.pain_points))

    sales_tip = None
    if result.sales_tip is not None:
        sales_tip = TextSection(title=t("salesTipTitle", language), text=result.sales_tip)

    return DisplaySections(
        heading=t("resultsGenerated", language),
        industry=_industry(result, language),
        research_summary=research_summary,
        pain_points=pain_points,
        automations=_automations(result, language),
        solutions=_solutions(result, language, expanded_solution),
        proposal=_proposal(result, language),
        sales_tip=sales_tip,
        deep_dive=_deep_dive(result, language),
    )


def build_slides(result: PitchResult, language: Language) -> list[Slide]:
    """The four presentation slides, in order."""
    overview_points = []
    if result.research_summary is not None:
        overview_points.append(result.research_summary)
    confidence = None
    if result.industry_confidence is not None:
        confidence = t(confidence_key(result.industry_confidence), language)

    return [
        Slide(
            index=0,
            title=t("presentationSlide1", language),
            headline=result.industry if result.industry is not None else t("noData", language),
            subheadline=confidence,
            points=overview_points,
        ),
        Slide(
            index=1,
            title=t("presentationSlide2", language),
            points=list(result.pain_points),
        ),
        Slide(
            index=2,
            title=t("presentationSlide3", language),
            points=[f"{s.title}: {s.summary}" for s in result.solutions],
        ),
        Slide(
            index=3,
            title=t("presentationSlide4", language),
            subheadline=t("proposalClosing", language),
            points=list(result.proposal_benefits),
        ),
    ]


def public_config(settings: Settings) -> PublicConfig:
    return PublicConfig(
        project_name=settings.PROJECT_NAME,
        logo_eand_url=settings.LOGO_EAND_URL,
        logo_zoho_url=settings.LOGO_ZOHO_URL,
        enable_presentation_mode=settings.ENABLE_PRESENTATION_MODE,
        enable_feature_suggestions=settings.ENABLE_FEATURE_SUGGESTIONS,
        default_language=settings.DEFAULT_LANGUAGE,
    )


def render_presentation(session: PitchSession) -> PresentationView:
    result = session.result
    visible = session.presentation.visible and result is not None
    return PresentationView(
        visible=visible,
        slide_index=session.presentation.slide_index,
        slide_count=SLIDE_COUNT,
        slides=build_slides(result, session.language) if visible else [],
    )


def render_view(session: PitchSession, settings: Settings, now: float) -> SessionView:
    """
    Project the whole session into what the page shows.

    *now* is a ``time.monotonic()`` reading used to expire the transient
    suggestion status and "copied" acknowledgement.
    """
    language = session.language
    result = session.result

    suggestion_status = None
    if session.suggestion_status is not None and (
        session.suggestion_status_until is None or now < session.suggestion_status_until
    ):
        suggestion_status = session.suggestion_status

    suggestion_message = None
    if suggestion_status == "success":
        suggestion_message = t("featureSuccess", language)
    elif suggestion_status == "error":
        suggestion_message = t("featureError", language)

    return SessionView(
        language=language,
        direction=text_direction(language),
        status=session.request.kind,
        is_loading=session.is_loading,
        error=session.error,
        form=session.form,
        results=render_results(result, language, session.expanded_solution) if result is not None else None,
        presentation=render_presentation(session),
        suggestion_submitting=session.suggestion_submitting,
        suggestion_status=suggestion_status,
        suggestion_message=suggestion_message,
        copied=session.copied_until is not None and now < session.copied_until,
        config=public_config(settings),
    )
