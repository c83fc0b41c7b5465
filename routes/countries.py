"""UI routes for the Country Management page.

Every action posts its own form back here; the page is re-rendered with the
action's result in its output slot and the submitted values kept in place.
"""

from __future__ import annotations

from flask import Blueprint, current_app, redirect, render_template, request, session

from services import country_actions
from services.country_api_client import CountryApiClient
from utils.forms import (
    ADD_COUNTRY_INPUTS,
    DELETE_CODE_INPUT,
    FIELD_LABELS,
    GET_CODE_INPUT,
    UPDATE_COUNTRY_INPUTS,
    OutputTarget,
    RequestFormState,
)

countries_bp = Blueprint("countries", __name__)

# Session key holding the rendered result of each output target
RESULTS_KEY = "country_results"


def _client() -> CountryApiClient:
    return current_app.extensions["country_api_client"]


def _stored_results() -> OutputTarget:
    return OutputTarget(session.get(RESULTS_KEY))


def _render_page(form: RequestFormState | None = None, output: OutputTarget | None = None):
    return render_template(
        "country_management.html",
        outputs=(output or _stored_results()).contents,
        values=request.form if request.method == "POST" else {},
        focus=form.focused if form else None,
        add_inputs=ADD_COUNTRY_INPUTS,
        update_inputs=UPDATE_COUNTRY_INPUTS,
        labels=FIELD_LABELS,
        get_code_input=GET_CODE_INPUT,
        delete_code_input=DELETE_CODE_INPUT,
    )


def _run(action, **kwargs):
    form = RequestFormState(request.form)
    output = _stored_results()
    action(
        form,
        output,
        _client(),
        render_mode=current_app.config["RESPONSE_RENDER_MODE"],
        **kwargs,
    )
    if output.unreachable:
        # The API never answered; the browser keeps the page it has
        return "", 204
    session[RESULTS_KEY] = {target: str(html) for target, html in output.contents.items()}
    return _render_page(form, output)


@countries_bp.route("/")
def show_management():
    """Render the management page with the latest result of each action."""
    return _render_page()


@countries_bp.post("/country/get")
def get_country():
    return _run(country_actions.get_country)


@countries_bp.post("/country/add")
def add_country():
    return _run(country_actions.add_country)


@countries_bp.post("/country/update")
def update_country():
    return _run(
        country_actions.update_country,
        validate=current_app.config["VALIDATE_UPDATES"],
    )


@countries_bp.post("/country/delete")
def delete_country():
    return _run(country_actions.delete_country)


@countries_bp.get("/country/list")
def list_countries():
    """Send the browser to the API's own list page."""
    return redirect(country_actions.list_countries(_client()))
