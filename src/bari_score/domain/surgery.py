"""Bariatric surgery variants and surgery-type string normalization."""

from enum import Enum
from types import MappingProxyType


class SurgeryType(Enum):
    """Supported surgery variants, valued by their display label."""

    GASTRIC_BYPASS = "Gastric Bypass (Roux-en-Y)"
    SLEEVE = "Sleeve Gastrectomy"
    GASTRIC_BAND = "Adjustable Gastric Band"
    BPD_DS = "Biliopancreatic Diversion (BPD/DS)"
    MINI_BYPASS = "Mini Gastric Bypass"
    UNSPECIFIED = "Not specified (general bariatric)"


_ALIASES = MappingProxyType(
    {
        "gastric bypass (roux-en-y)": SurgeryType.GASTRIC_BYPASS,
        "gastric bypass": SurgeryType.GASTRIC_BYPASS,
        "roux-en-y": SurgeryType.GASTRIC_BYPASS,
        "sleeve gastrectomy": SurgeryType.SLEEVE,
        "gastric sleeve": SurgeryType.SLEEVE,
        "sleeve": SurgeryType.SLEEVE,
        "adjustable gastric band": SurgeryType.GASTRIC_BAND,
        "gastric band": SurgeryType.GASTRIC_BAND,
        "lap band": SurgeryType.GASTRIC_BAND,
        "biliopancreatic diversion (bpd/ds)": SurgeryType.BPD_DS,
        "biliopancreatic diversion": SurgeryType.BPD_DS,
        "bpd/ds": SurgeryType.BPD_DS,
        "bpd": SurgeryType.BPD_DS,
        "ds": SurgeryType.BPD_DS,
        "mini gastric bypass": SurgeryType.MINI_BYPASS,
        "mini bypass": SurgeryType.MINI_BYPASS,
        "not specified (general bariatric)": SurgeryType.UNSPECIFIED,
        "not specified": SurgeryType.UNSPECIFIED,
        "other (default scoring)": SurgeryType.UNSPECIFIED,
    }
)

BYPASS_OR_SLEEVE = frozenset(
    {SurgeryType.GASTRIC_BYPASS, SurgeryType.MINI_BYPASS, SurgeryType.SLEEVE}
)


def resolve_surgery_type(value: "str | SurgeryType | None") -> SurgeryType:
    """Map a free-form surgery description to a variant.

    Matching is case-insensitive and ignores surrounding whitespace. Missing,
    blank and unrecognized values fall back to ``SurgeryType.UNSPECIFIED``.
    """
    if isinstance(value, SurgeryType):
        return value
    if value is None:
        return SurgeryType.UNSPECIFIED
    return _ALIASES.get(value.strip().lower(), SurgeryType.UNSPECIFIED)


def all_surgery_types() -> list[str]:
    """Return display labels for every variant, general last."""
    return [surgery_type.value for surgery_type in SurgeryType]
