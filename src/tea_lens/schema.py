"""Data models for tea-lens input records."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CatalogModel(BaseModel):
    """Frozen record that accepts both snake_case and catalog camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Processing(_CatalogModel):
    """Processing steps applied to the leaf."""

    methods: list[str] = Field(default_factory=list)
    oxidation_level: float | None = None


class Geography(_CatalogModel):
    """Growing location and harvest conditions."""

    latitude: float | None = None
    longitude: float | None = None
    altitude: float | None = None
    humidity: float | None = None
    temperature: float | None = None
    solar_radiation: float | None = None
    harvest_month: int | None = None


class Tea(_CatalogModel):
    """Tea record as supplied by the catalog."""

    name: str | None = None
    type: str | None = None
    sub_type: str | None = None
    origin: str | None = None
    caffeine_level: float | None = None
    l_theanine_level: float | None = None
    flavor_profile: list[str] = Field(default_factory=list)
    processing: Processing | None = None
    geography: Geography | None = None
