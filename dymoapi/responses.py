"""Typed responses for the utility (non-verification) endpoints."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


@dataclass
class SendEmailResponse:
    status: bool
    error: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SendEmailResponse":
        return cls(status=bool(data.get("status")), error=data.get("error"))


@dataclass
class SRNGResponse:
    values: List[Dict[str, Any]]
    execution_time: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SRNGResponse":
        values = data.get("values")
        return cls(
            values=list(values) if isinstance(values, list) else [],
            execution_time=data.get("executionTime"),
        )


@dataclass
class PrayerTimes:
    coordinates: Optional[str] = None
    date: Optional[str] = None
    calculation_parameters: Optional[str] = None
    fajr: Optional[str] = None
    sunrise: Optional[str] = None
    dhuhr: Optional[str] = None
    asr: Optional[str] = None
    sunset: Optional[str] = None
    maghrib: Optional[str] = None
    isha: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PrayerTimes":
        return cls(
            coordinates=data.get("coordinates"),
            date=data.get("date"),
            calculation_parameters=data.get("calculationParameters"),
            fajr=data.get("fajr"),
            sunrise=data.get("sunrise"),
            dhuhr=data.get("dhuhr"),
            asr=data.get("asr"),
            sunset=data.get("sunset"),
            maghrib=data.get("maghrib"),
            isha=data.get("isha"),
        )


@dataclass
class PrayerTimesByTimezone:
    timezone: Optional[str]
    prayer_times: PrayerTimes


@dataclass
class PrayerTimesResponse:
    country: Optional[str]
    prayer_times_by_timezone: List[PrayerTimesByTimezone] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PrayerTimesResponse":
        rows = data.get("prayerTimesByTimezone")
        by_tz = [
            PrayerTimesByTimezone(
                timezone=_mapping(row).get("timezone"),
                prayer_times=PrayerTimes.from_dict(_mapping(_mapping(row).get("prayerTimes"))),
            )
            for row in (rows if isinstance(rows, list) else [])
        ]
        return cls(country=data.get("country"), prayer_times_by_timezone=by_tz)


@dataclass
class SatinizeResponse:
    input: Optional[str]
    formats: Dict[str, bool] = field(default_factory=dict)  # e.g. "email", "ipv6", "semver"
    includes: Dict[str, bool] = field(default_factory=dict)  # e.g. "hasSql", "digits"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SatinizeResponse":
        return cls(
            input=data.get("input"),
            formats=dict(_mapping(data.get("formats"))),
            includes=dict(_mapping(data.get("includes"))),
        )


@dataclass
class PasswordDetail:
    validation: Optional[str]
    message: Optional[str]


@dataclass
class PasswordResponse:
    valid: bool
    password: Optional[str] = None
    details: List[PasswordDetail] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PasswordResponse":
        details = data.get("details")
        return cls(
            valid=bool(data.get("valid")),
            password=data.get("password"),
            details=[
                PasswordDetail(_mapping(d).get("validation"), _mapping(d).get("message"))
                for d in (details if isinstance(details, list) else [])
            ],
        )


@dataclass
class UrlEncryptResponse:
    original: Optional[str]
    code: Optional[str]
    encrypt: Optional[str]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UrlEncryptResponse":
        return cls(
            original=data.get("original"),
            code=data.get("code"),
            encrypt=data.get("encrypt"),
        )
