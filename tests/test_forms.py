from markupsafe import Markup

from domain.models.country import COUNTRY_FIELDS
from tests.fakes import MemoryFormState
from utils.forms import (
    ADD_COUNTRY_INPUTS,
    UPDATE_COUNTRY_INPUTS,
    OutputTarget,
    RequestFormState,
    collect_inputs,
)


def test_input_maps_cover_every_country_field_in_order():
    assert tuple(ADD_COUNTRY_INPUTS) == COUNTRY_FIELDS
    assert tuple(UPDATE_COUNTRY_INPUTS) == COUNTRY_FIELDS
    assert ADD_COUNTRY_INPUTS["gnp"] == "newGNP"
    assert UPDATE_COUNTRY_INPUTS["gnpOld"] == "updateGNPOld"
    assert len(set(ADD_COUNTRY_INPUTS.values())) == len(COUNTRY_FIELDS)


def test_collect_inputs_reads_raw_values():
    form = MemoryFormState({"newCode": " CHN ", "newName": "China"})
    record = collect_inputs(form, ADD_COUNTRY_INPUTS)
    assert record["code"] == " CHN "
    assert record["name"] == "China"
    assert record["gnp"] == ""
    assert list(record) == list(COUNTRY_FIELDS)


def test_collect_inputs_can_strip():
    form = MemoryFormState({"newCode": " CHN "})
    assert collect_inputs(form, {"code": "newCode"}, strip=True) == {"code": "CHN"}


def test_collect_inputs_has_no_side_effects():
    form = MemoryFormState({"newCode": "CHN"})
    collect_inputs(form, ADD_COUNTRY_INPUTS)
    assert form.alerts == []
    assert form.focused is None


def test_request_form_state_flashes_alerts():
    from flask import Flask, get_flashed_messages

    app = Flask(__name__)
    app.secret_key = "test"
    with app.test_request_context("/", method="POST", data={"countryCode": "FRA"}):
        from flask import request

        form = RequestFormState(request.form)
        assert form.value("countryCode") == "FRA"
        assert form.value("missing") == ""
        form.alert("Please enter Country Code!")
        form.focus("countryCode")
        assert form.focused == "countryCode"
        assert get_flashed_messages(with_categories=True) == [("warning", "Please enter Country Code!")]


def test_output_target_write_replaces():
    output = OutputTarget()
    assert output.read("getResult") == ""
    output.write("getResult", Markup("<b>first</b>"))
    output.write("getResult", Markup("<b>second</b>"))
    assert output.read("getResult") == Markup("<b>second</b>")
    assert "getResult" in output
    assert "postResult" not in output
    assert output.contents == {"getResult": Markup("<b>second</b>")}
