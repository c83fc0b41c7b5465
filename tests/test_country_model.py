from domain.models.country import COUNTRY_FIELDS, Country
from domain.models.response_envelope import ResponseEnvelope


def test_country_to_api_uses_wire_names_in_order():
    record = {field: f"v-{field}" for field in COUNTRY_FIELDS}
    body = Country.from_record(record).to_api()
    assert list(body) == list(COUNTRY_FIELDS)
    assert body["surfaceArea"] == "v-surfaceArea"
    assert body["gnpOld"] == "v-gnpOld"


def test_country_keeps_strings_uncoerced():
    country = Country.from_record({"code": "CHN", "population": "1400000000", "gnp": ""})
    body = country.to_api()
    assert body["population"] == "1400000000"
    assert body["gnp"] == ""
    assert body["capital"] == ""


def test_country_from_record_drops_unknown_keys():
    country = Country.from_record({"code": "CHN", "bogus": "x"})
    assert "bogus" not in country.to_api()
    assert country.code == "CHN"


def test_envelope_parses_server_json():
    env = ResponseEnvelope.model_validate({
        "ifSuccess": True,
        "infoMessage": "OK",
        "data": {"name": "China"},
        "status": "OK",
        "extra": 1,
    })
    assert env.if_success is True
    assert env.message == "OK"
    assert env.status == "OK"
    assert env.data == {"name": "China"}


def test_envelope_keeps_numeric_status():
    env = ResponseEnvelope.model_validate({"ifSuccess": False, "errorMessage": "Not found", "status": 404})
    assert env.status == 404
    assert env.message == "Not found"


def test_envelope_message_follows_outcome():
    ok = ResponseEnvelope.model_validate({"ifSuccess": True, "infoMessage": "done", "errorMessage": "stale"})
    assert ok.message == "done"
    failed = ResponseEnvelope.model_validate({"ifSuccess": False, "infoMessage": "stale", "errorMessage": "boom"})
    assert failed.message == "boom"
    assert failed.data is None
