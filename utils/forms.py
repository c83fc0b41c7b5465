"""Form state, output targets and the input collector.

Handlers never read ``flask.request`` directly. They receive a ``FormState``
(what the user typed, plus the alert/focus side channel) and an
``OutputTarget`` (where rendered results go), so they can be exercised in
tests without a browser or a real request.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, List, Optional, Protocol

from flask import flash
from markupsafe import Markup


# Field name -> form input name. Spelled out once so a renamed input fails loudly
# in review instead of silently reading "".
ADD_COUNTRY_INPUTS: Dict[str, str] = {
    "code": "newCode",
    "name": "newName",
    "continent": "newContinent",
    "region": "newRegion",
    "surfaceArea": "newSurfaceArea",
    "indepYear": "newIndepYear",
    "population": "newPopulation",
    "lifeExpectancy": "newLifeExpectancy",
    "gnp": "newGNP",
    "gnpOld": "newGNPOld",
    "localName": "newLocalName",
    "governmentForm": "newGovernmentForm",
    "headOfState": "newHeadOfState",
    "capital": "newCapital",
    "code2": "newCode2",
}

UPDATE_COUNTRY_INPUTS: Dict[str, str] = {
    "code": "updateCode",
    "name": "updateName",
    "continent": "updateContinent",
    "region": "updateRegion",
    "surfaceArea": "updateSurfaceArea",
    "indepYear": "updateIndepYear",
    "population": "updatePopulation",
    "lifeExpectancy": "updateLifeExpectancy",
    "gnp": "updateGNP",
    "gnpOld": "updateGNPOld",
    "localName": "updateLocalName",
    "governmentForm": "updateGovernmentForm",
    "headOfState": "updateHeadOfState",
    "capital": "updateCapital",
    "code2": "updateCode2",
}

GET_CODE_INPUT = "countryCode"
DELETE_CODE_INPUT = "deleteCode"

FIELD_LABELS: Dict[str, str] = {
    "code": "Code",
    "name": "Name",
    "continent": "Continent",
    "region": "Region",
    "surfaceArea": "Surface Area",
    "indepYear": "Independence Year",
    "population": "Population",
    "lifeExpectancy": "Life Expectancy",
    "gnp": "GNP",
    "gnpOld": "GNP (Old)",
    "localName": "Local Name",
    "governmentForm": "Government Form",
    "headOfState": "Head of State",
    "capital": "Capital",
    "code2": "Code (2 letters)",
}


class FormState(Protocol):
    """The current form state as seen by an action handler."""

    def value(self, handle: str) -> str: ...

    def alert(self, message: str) -> None: ...

    def focus(self, handle: str) -> None: ...


class RequestFormState:
    """FormState over a submitted werkzeug form; alerts become flash messages."""

    def __init__(self, form: Mapping[str, str]) -> None:
        self._form = form
        self.focused: Optional[str] = None

    def value(self, handle: str) -> str:
        return self._form.get(handle) or ""

    def alert(self, message: str) -> None:
        flash(message, "warning")

    def focus(self, handle: str) -> None:
        self.focused = handle


class OutputTarget:
    """Rendered results keyed by output id (getResult, postResult, ...).

    Starts from whatever the page already showed, so an action only replaces
    its own target. Targets whose call never reached the API are listed in
    ``unreachable`` and keep their previous content.
    """

    def __init__(self, contents: Optional[Mapping[str, str]] = None) -> None:
        self._contents: Dict[str, Markup] = {
            target: Markup(html) for target, html in (contents or {}).items()
        }
        self.unreachable: List[str] = []

    def write(self, target: str, html: Markup) -> None:
        """Replace whatever the target held; never appends."""
        self._contents[target] = html

    def read(self, target: str) -> Markup:
        return self._contents.get(target, Markup(""))

    def mark_unreachable(self, target: str) -> None:
        self.unreachable.append(target)

    def __contains__(self, target: str) -> bool:
        return target in self._contents

    @property
    def contents(self) -> Dict[str, Markup]:
        return dict(self._contents)


def collect_inputs(
    form: FormState,
    field_inputs: Mapping[str, str],
    strip: bool = False,
) -> Dict[str, str]:
    """Read every mapped input into a flat record keyed by field name."""
    record: Dict[str, str] = {}
    for field, handle in field_inputs.items():
        raw = form.value(handle)
        record[field] = raw.strip() if strip else raw
    return record
