"""
Period models.

A period is a whole calendar year or one month within a year. Periods are
derived from the match dates on demand and only ever used to select matches.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

MONTH_NAMES = {
    "01": "January",
    "02": "February",
    "03": "March",
    "04": "April",
    "05": "May",
    "06": "June",
    "07": "July",
    "08": "August",
    "09": "September",
    "10": "October",
    "11": "November",
    "12": "December",
}


class PeriodMode(str, Enum):
    """Granularity of a period."""

    YEAR = "year"
    MONTH = "month"


class Period(BaseModel):
    """A year, or a month within a year."""

    model_config = ConfigDict(frozen=True)

    mode: PeriodMode
    year: str = Field(pattern=r"^\d{4}$")
    month: str | None = Field(default=None, description="Zero-padded '01'..'12'")

    @model_validator(mode="after")
    def _check_month(self) -> "Period":
        if self.mode == PeriodMode.MONTH:
            if self.month not in MONTH_NAMES:
                raise ValueError(f"month must be '01'..'12', got {self.month!r}")
        elif self.month is not None:
            raise ValueError("a year period cannot carry a month")
        return self

    @classmethod
    def for_year(cls, year: str | int) -> "Period":
        return cls(mode=PeriodMode.YEAR, year=str(year))

    @classmethod
    def for_month(cls, year: str | int, month: str | int) -> "Period":
        if isinstance(month, int):
            month = f"{month:02d}"
        return cls(mode=PeriodMode.MONTH, year=str(year), month=month)

    @property
    def is_year(self) -> bool:
        return self.mode == PeriodMode.YEAR

    @property
    def label(self) -> str:
        """Display label, e.g. '2025 • Year' or '2025 • March'."""
        if self.is_year:
            return f"{self.year} • Year"
        return f"{self.year} • {MONTH_NAMES[self.month]}"


class YearPeriods(BaseModel):
    """Selectable periods for one year."""

    month_periods: list[Period] = Field(
        description="Months with at least one match, January first"
    )
    year_period: Period
