from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# Wire names in the order the forms present them and the validator checks them.
COUNTRY_FIELDS: tuple[str, ...] = (
    "code",
    "name",
    "continent",
    "region",
    "surfaceArea",
    "indepYear",
    "population",
    "lifeExpectancy",
    "gnp",
    "gnpOld",
    "localName",
    "governmentForm",
    "headOfState",
    "capital",
    "code2",
)


class Country(BaseModel):
    """
    Country record as sent to the Country API.

    Every value is kept as the raw string typed into the form; the API is
    responsible for any coercion. Attribute names are snake_case, the JSON
    body uses the camelCase aliases.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    code: str = Field("", description="ISO 3166-1 alpha-3 code like 'CHN'")
    name: str = ""
    continent: str = ""
    region: str = ""
    surface_area: str = Field("", alias="surfaceArea")
    indep_year: str = Field("", alias="indepYear")
    population: str = ""
    life_expectancy: str = Field("", alias="lifeExpectancy")
    gnp: str = ""
    gnp_old: str = Field("", alias="gnpOld")
    local_name: str = Field("", alias="localName")
    government_form: str = Field("", alias="governmentForm")
    head_of_state: str = Field("", alias="headOfState")
    capital: str = ""
    code2: str = ""

    def to_api(self) -> dict[str, str]:
        """Return the JSON body, keyed by wire names in COUNTRY_FIELDS order."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_record(cls, record: dict[str, str]) -> "Country":
        """Build from a flat record keyed by wire names; unknown keys are dropped."""
        return cls(**{key: record[key] for key in COUNTRY_FIELDS if key in record})
