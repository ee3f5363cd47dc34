"""Wire schema for ArcGIS ImageServer identify responses."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel, to_pascal

from aqfcst.models.point import Point


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class SpatialReference(_CamelModel):
    wkid: int | None = None
    latest_wkid: int | None = None


class Location(_CamelModel):
    x: float | None = None
    y: float | None = None
    spatial_reference: SpatialReference | None = None


class Properties(BaseModel):
    """Pixel values, one per raster slice. The service spells this object in PascalCase."""

    model_config = ConfigDict(alias_generator=to_pascal, extra="ignore")

    values: list[str]


class RasterAttributes(BaseModel):
    """
    Per-slice catalog attributes.

    The service does not promise any of these, so every field is optional.
    Epoch fields (``idp_*date``, ``idp_*time``) are milliseconds since 1970 UTC.
    """

    model_config = ConfigDict(extra="ignore")

    category: int | None = None
    centerx: float | None = None
    centery: float | None = None
    groupname: str | None = None
    highps: float | None = None
    idp_current_forecast: int | None = None
    idp_fcst_hour: int | None = None
    idp_filedate: int | None = None
    idp_grb_elem: str | None = None
    idp_grb_level: str | None = None
    idp_ingestdate: int | None = None
    idp_issueddate: int | None = None
    idp_source: str | None = None
    idp_subset: str | None = None
    idp_time_series: int | None = None
    idp_validendtime: int | None = None
    idp_validtime: int | None = None
    lowps: float | None = None
    maxps: float | None = None
    minps: float | None = None
    name: str | None = None
    objectid: int | None = None
    productname: str | None = None
    st_area_shape_: float | None = None
    tag: str | None = None
    zorder: float | None = None


ATTRIBUTE_FIELDS: tuple[str, ...] = tuple(RasterAttributes.model_fields)


class Feature(BaseModel):
    model_config = ConfigDict(extra="ignore")

    attributes: RasterAttributes = Field(default_factory=RasterAttributes)


class CatalogItems(BaseModel):
    model_config = ConfigDict(extra="ignore")

    features: list[Feature]


class RasterResponse(_CamelModel):
    """Body of a successful identify call."""

    object_id: int | None = None
    name: str | None = None
    value: str | None = None
    location: Location | None = None
    properties: Properties
    catalog_items: CatalogItems
    catalog_item_visibilities: list[int] = Field(default_factory=list)

    @property
    def values(self) -> list[str]:
        return self.properties.values

    @property
    def attributes(self) -> list[RasterAttributes]:
        return [feature.attributes for feature in self.catalog_items.features]


@dataclass(frozen=True)
class IdentifyResult:
    """A single identify call: the point asked about, when, where, and what came back."""

    point: Point
    requested_on: str
    url: str
    response: RasterResponse
