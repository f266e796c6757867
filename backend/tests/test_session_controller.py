import asyncio

import pytest
from fastapi import HTTPException

from conftest import SAMPLE_PAYLOAD, FakeHttp, FakeResponse
from pitch_expert.controllers import session_controller
from pitch_expert.core.i18n import Language, t
from pitch_expert.schemas.pitch import CompanyData
from pitch_expert.schemas.session import ErrorState, LoadingState, PresentationState, SuccessState


def _submit(session, client):
    return asyncio.run(session_controller.submit(session, client))


def test_update_field_sets_value_and_clears_error(session):
    session.request = ErrorState(message="boom")

    session_controller.update_field(session, "website", "acme.com")

    assert session.form.website == "acme.com"
    assert session.request.kind == "idle"


def test_update_field_keeps_success_result(session, sample_result):
    session.request = SuccessState(result=sample_result)
    session_controller.update_field(session, "description", "more")
    assert session.result is sample_result


def test_update_field_rejects_unknown_field(session):
    with pytest.raises(HTTPException) as excinfo:
        session_controller.update_field(session, "email", "x")
    assert excinfo.value.status_code == 422


def test_clear_resets_everything(session, sample_result):
    session.form = CompanyData(website="acme.com", linkedin="acme")
    session.request = SuccessState(result=sample_result)
    session.expanded_solution = 1
    session.presentation = PresentationState(visible=True, slide_index=2)

    session_controller.clear(session)

    assert session.form == CompanyData()
    assert session.request.kind == "idle"
    assert session.expanded_solution is None
    assert session.presentation == PresentationState()
    assert session.generation == 1


def test_blank_form_sets_localized_validation_error_without_network(session, client_for):
    session.language = Language.ar
    session.form = CompanyData(website="   ", description="\n\t")
    http = FakeHttp(FakeResponse(200, SAMPLE_PAYLOAD))

    assert _submit(session, client_for(http)) is False

    assert session.error == t("validationError", Language.ar)
    assert http.calls == []


def test_blank_form_keeps_previous_result(session, sample_result, client_for):
    session.request = SuccessState(result=sample_result)
    http = FakeHttp()

    assert _submit(session, client_for(http)) is False

    assert session.request.kind == "error"
    assert session.error == t("validationError", Language.en)
    assert session.result is sample_result
    assert http.calls == []


def test_editing_after_validation_error_restores_result(session, sample_result, client_for):
    session.request = SuccessState(result=sample_result)
    _submit(session, client_for(FakeHttp()))

    session_controller.update_field(session, "website", "acme.com")

    assert session.request.kind == "success"
    assert session.error is None
    assert session.result is sample_result


def test_view_shows_results_alongside_validation_error(session, settings, sample_result, client_for):
    session.request = SuccessState(result=sample_result)
    _submit(session, client_for(FakeHttp()))

    view = session_controller.get_view(session, settings)

    assert view.status == "error"
    assert view.error == t("validationError", Language.en)
    assert view.results.industry.value == "Retail"


def test_successful_submit_stores_result(session, client_for):
    session.form = CompanyData(instagram="@acme")
    session.expanded_solution = 0
    session.presentation = PresentationState(visible=True, slide_index=3)

    assert _submit(session, client_for(FakeHttp(FakeResponse(200, SAMPLE_PAYLOAD)))) is True

    assert session.request.kind == "success"
    assert session.result.industry == "Retail"
    assert session.expanded_solution is None
    assert session.presentation == PresentationState()


def test_failed_submit_stores_error_message(session, client_for):
    session.form = CompanyData(website="acme.com")

    assert _submit(session, client_for(FakeHttp(FakeResponse(200, {"error": "quota exceeded"})))) is False

    assert session.error == "quota exceeded"
    assert session.result is None


def test_server_error_uses_session_language_fallback(session, client_for):
    session.language = Language.ar
    session.form = CompanyData(website="acme.com")

    _submit(session, client_for(FakeHttp(FakeResponse(500))))

    assert session.error == t("errorFallback", Language.ar)


def test_session_is_loading_while_request_in_flight(session, client_for):
    seen = []
    http = FakeHttp(FakeResponse(200, SAMPLE_PAYLOAD), on_post=lambda: seen.append(session.request.kind))
    session.form = CompanyData(website="acme.com")

    _submit(session, client_for(http))

    assert seen == ["loading"]


def test_response_arriving_after_clear_is_discarded(session, client_for):
    http = FakeHttp(FakeResponse(200, SAMPLE_PAYLOAD), on_post=lambda: session_controller.clear(session))
    session.form = CompanyData(website="acme.com")

    assert _submit(session, client_for(http)) is False

    assert session.request.kind == "idle"
    assert session.result is None
    assert session.form == CompanyData()


def test_second_submit_while_loading_is_refused(session, client_for):
    session.form = CompanyData(website="acme.com")
    session.request = LoadingState(generation=1)
    http = FakeHttp()

    with pytest.raises(HTTPException) as excinfo:
        _submit(session, client_for(http))

    assert excinfo.value.status_code == 409
    assert http.calls == []


def test_unexpected_client_crash_sets_fallback_and_raises(session, client_for):
    http = FakeHttp(RuntimeError("bug"))
    session.form = CompanyData(website="acme.com")

    with pytest.raises(HTTPException) as excinfo:
        _submit(session, client_for(http))

    assert excinfo.value.status_code == 500
    assert session.error == t("errorFallback", Language.en)


def test_toggle_language_round_trip(session):
    assert session_controller.toggle_language(session) == Language.ar
    assert session_controller.toggle_language(session) == Language.en


def test_toggle_solution_expands_and_collapses(session, sample_result):
    session.request = SuccessState(result=sample_result)

    assert session_controller.toggle_solution(session, 0) == 0
    assert session_controller.toggle_solution(session, 1) == 1
    assert session_controller.toggle_solution(session, 1) is None


def test_toggle_solution_errors(session, sample_result):
    with pytest.raises(HTTPException) as excinfo:
        session_controller.toggle_solution(session, 0)
    assert excinfo.value.status_code == 409

    session.request = SuccessState(result=sample_result)
    with pytest.raises(HTTPException) as excinfo:
        session_controller.toggle_solution(session, 5)
    assert excinfo.value.status_code == 404


def test_get_view_reflects_state(session, settings, sample_result):
    session.language = Language.ar
    session.request = SuccessState(result=sample_result)

    view = session_controller.get_view(session, settings)

    assert view.direction == "rtl"
    assert view.status == "success"
    assert view.results.industry.value == "Retail"
