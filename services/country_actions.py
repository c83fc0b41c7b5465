"""Action handlers behind the Country Management page.

Each handler is one straight sequence: collect inputs, check them, make a
single API call, render the envelope into its output target. Handlers must
run inside a Flask app context (they log through ``current_app.logger``).
"""

from __future__ import annotations

from typing import Optional

from flask import current_app

from domain.models.country import Country
from domain.models.response_envelope import ResponseEnvelope
from middleware.errors import TransportError
from services.country_api_client import CountryApiClient
from services.response_renderer import render_envelope
from utils.forms import (
    ADD_COUNTRY_INPUTS,
    DELETE_CODE_INPUT,
    FIELD_LABELS,
    GET_CODE_INPUT,
    UPDATE_COUNTRY_INPUTS,
    FormState,
    OutputTarget,
    collect_inputs,
)
from utils.validation import validate_required

GET_RESULT = "getResult"
POST_RESULT = "postResult"
PUT_RESULT = "putResult"
DELETE_RESULT = "deleteResult"

MISSING_CODE_MESSAGE = "Please enter Country Code!"


def _missing_field_message(field: str) -> str:
    return f"Please enter {FIELD_LABELS.get(field, field)}!"


def _read_code(form: FormState, handle: str) -> Optional[str]:
    """Trimmed code from ``handle``; alerts and focuses the input when empty."""
    code = form.value(handle).strip()
    if code == "":
        form.alert(MISSING_CODE_MESSAGE)
        form.focus(handle)
        return None
    return code


def _read_valid_country(form: FormState, field_inputs) -> Optional[Country]:
    record = collect_inputs(form, field_inputs)
    result = validate_required(record)
    if not result:
        current_app.logger.info("Country form rejected: %s is empty", result.field)
        form.alert(_missing_field_message(result.field))
        form.focus(field_inputs[result.field])
        return None
    return Country.from_record(record)


def _send(call, target: str, output: OutputTarget, render_mode: str) -> Optional[ResponseEnvelope]:
    """Run one API call and render its envelope; transport failures are only logged."""
    try:
        envelope = call()
    except TransportError as exc:
        current_app.logger.exception("Country API call for %s failed: %s", target, exc.message)
        output.mark_unreachable(target)
        return None
    output.write(target, render_envelope(envelope, render_mode))
    return envelope


def get_country(
    form: FormState,
    output: OutputTarget,
    client: CountryApiClient,
    render_mode: str = "table",
) -> Optional[ResponseEnvelope]:
    code = _read_code(form, GET_CODE_INPUT)
    if code is None:
        return None
    current_app.logger.debug("GET country %s", code)
    return _send(lambda: client.get_country(code), GET_RESULT, output, render_mode)


def add_country(
    form: FormState,
    output: OutputTarget,
    client: CountryApiClient,
    render_mode: str = "table",
) -> Optional[ResponseEnvelope]:
    """Create a country. Every field is required; the first empty one blocks the call."""
    country = _read_valid_country(form, ADD_COUNTRY_INPUTS)
    if country is None:
        return None
    current_app.logger.debug("POST country %s", country.code)
    return _send(lambda: client.add_country(country), POST_RESULT, output, render_mode)


def update_country(
    form: FormState,
    output: OutputTarget,
    client: CountryApiClient,
    render_mode: str = "table",
    validate: bool = False,
) -> Optional[ResponseEnvelope]:
    """
    Update a country.

    Unlike ``add_country`` the record is sent as-is by default, empty fields
    included, and the API decides what to reject. Pass ``validate=True``
    to apply the same fail-fast check as ``add_country``.
    """
    if validate:
        country = _read_valid_country(form, UPDATE_COUNTRY_INPUTS)
        if country is None:
            return None
    else:
        country = Country.from_record(collect_inputs(form, UPDATE_COUNTRY_INPUTS))
    current_app.logger.debug("PUT country %s", country.code)
    return _send(lambda: client.update_country(country), PUT_RESULT, output, render_mode)


def delete_country(
    form: FormState,
    output: OutputTarget,
    client: CountryApiClient,
    render_mode: str = "table",
) -> Optional[ResponseEnvelope]:
    code = _read_code(form, DELETE_CODE_INPUT)
    if code is None:
        return None
    current_app.logger.debug("DELETE country %s", code)
    return _send(lambda: client.delete_country(code), DELETE_RESULT, output, render_mode)


def list_countries(client: CountryApiClient) -> str:
    """URL of the API's own country list page; the caller redirects the browser there."""
    return client.countries_list_url()
