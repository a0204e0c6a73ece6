"""Typed models for the JMA forecast JSON.

Each per-area series is optional: which of them a section carries decides
how it is merged, so presence is kept explicit (``None`` = absent) rather
than defaulting to an empty list.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from jma_weather_gen.datasources.jma.client import PRIMARY_AREA_INDEX


class AreaForecast(BaseModel):
    """Per-area payload of a section, index-aligned with ``timeDefines``."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    weathers: list[str | None] | None = None
    weather_codes: list[str | None] | None = Field(default=None, alias="weatherCodes")
    pops: list[str | None] | None = None
    temps_min: list[str | None] | None = Field(default=None, alias="tempsMin")
    temps_max: list[str | None] | None = Field(default=None, alias="tempsMax")


class ForecastSection(BaseModel):
    """One ``timeSeries`` entry: a set of timestamps and per-area payloads.

    Only the primary area is ever read, so the other entries of ``areas``
    are kept raw and never validated.
    """

    model_config = ConfigDict(populate_by_name=True)

    time_defines: list[str] = Field(alias="timeDefines")
    areas: list[Any] = Field(min_length=1)

    @classmethod
    def from_raw(cls, raw: Any) -> ForecastSection | None:
        """Validate a raw section, returning None if it has the wrong shape."""
        try:
            return cls.model_validate(raw)
        except ValidationError:
            return None

    @property
    def primary_area(self) -> AreaForecast | None:
        """The area this system reads (first entry of ``areas``).

        None if ``areas`` is empty or its first entry has the wrong shape.
        """
        if len(self.areas) <= PRIMARY_AREA_INDEX:
            return None
        raw = self.areas[PRIMARY_AREA_INDEX]
        if isinstance(raw, AreaForecast):
            return raw
        try:
            return AreaForecast.model_validate(raw)
        except ValidationError:
            return None


class ForecastReport(BaseModel):
    """One report of the forecast response (short-range or weekly)."""

    model_config = ConfigDict(populate_by_name=True)

    publishing_office: str | None = Field(default=None, alias="publishingOffice")
    time_series: list[Any] = Field(default_factory=list, alias="timeSeries")

    @classmethod
    def from_raw(cls, raw: Any) -> ForecastReport | None:
        """Validate a raw report, returning None if it has the wrong shape."""
        try:
            return cls.model_validate(raw)
        except ValidationError:
            return None

    def sections(self) -> list[ForecastSection]:
        """Sections that match the expected shape, in report order."""
        parsed = (ForecastSection.from_raw(raw) for raw in self.time_series)
        return [s for s in parsed if s is not None]
