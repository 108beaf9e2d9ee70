"""Canonical device type/status labels and the free-text normalizers.

``DEVICE_TYPES`` is the single reference table for labels, accepted aliases
(misspellings included) and display metadata. The normalizer and the
aggregators both read it, so a new alias only ever needs adding here.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class DeviceTypeInfo:
    label: str
    icon: str
    color: str
    aliases: tuple[str, ...] = ()


DEVICE_TYPES: tuple[DeviceTypeInfo, ...] = (
    DeviceTypeInfo("Computer", "laptop", "text-blue-600 bg-blue-100", ("compuetr",)),
    DeviceTypeInfo("Laptop", "laptop", "text-cyan-600 bg-cyan-100"),
    DeviceTypeInfo("Printer", "printer", "text-green-600 bg-green-100"),
    DeviceTypeInfo("Scanner", "scan", "text-purple-600 bg-purple-100"),
    DeviceTypeInfo("SIM Card", "smartphone", "text-amber-600 bg-amber-100"),
    DeviceTypeInfo("Office Phone", "phone", "text-rose-600 bg-rose-100"),
    DeviceTypeInfo("Router", "wifi", "text-indigo-600 bg-indigo-100"),
    DeviceTypeInfo("Pocket Wifi", "globe", "text-pink-600 bg-pink-100"),
    DeviceTypeInfo("UPS", "monitor", "text-gray-700 bg-gray-100"),
    DeviceTypeInfo("Modem", "globe", "text-yellow-700 bg-yellow-100", ("mordem",)),
    DeviceTypeInfo("Tablet", "smartphone", "text-green-700 bg-green-100"),
    DeviceTypeInfo("Phone", "phone", "text-blue-700 bg-blue-100"),
    DeviceTypeInfo("Server", "monitor", "text-gray-800 bg-gray-200"),
    DeviceTypeInfo("Firewall", "globe", "text-red-700 bg-red-100"),
)

OTHER_LABEL = "Other"
DEFAULT_ICON = "monitor"
DEFAULT_COLOR = "text-gray-700 bg-gray-100"

DEVICE_STATUSES: tuple[str, ...] = ("Active", "Available", "Maintenance", "Inactive")
DEFAULT_STATUS = "Available"


def _build_alias_table(types) -> Mapping[str, DeviceTypeInfo]:
    table = {}
    for info in types:
        table[info.label.lower()] = info
        for alias in info.aliases:
            table[alias.lower()] = info
    return MappingProxyType(table)


TYPE_ALIASES: Mapping[str, DeviceTypeInfo] = _build_alias_table(DEVICE_TYPES)
TYPES_BY_LABEL: Mapping[str, DeviceTypeInfo] = MappingProxyType({t.label: t for t in DEVICE_TYPES})
_STATUS_LOOKUP = MappingProxyType({s.lower(): s for s in DEVICE_STATUSES})


def _capitalize_first(key: str) -> str:
    return key[:1].upper() + key[1:]


def resolve_type(raw: Optional[str], aliases: Mapping[str, DeviceTypeInfo] = TYPE_ALIASES) -> Optional[str]:
    """Strict lookup: the canonical label for ``raw`` or None when unknown."""
    if raw is None:
        return None
    info = aliases.get(str(raw).strip().lower())
    return info.label if info else None


def normalize_type(raw: Optional[str], aliases: Mapping[str, DeviceTypeInfo] = TYPE_ALIASES) -> str:
    """Map free text to a canonical type label. Never raises.

    Unknown values keep their (lowercased) text with the first letter
    upper-cased; blank input becomes ``"Other"``. The result of a fallback is
    not guaranteed to normalize to itself a second time.
    """
    key = str(raw).strip().lower() if raw is not None else ""
    if not key:
        return OTHER_LABEL
    info = aliases.get(key)
    return info.label if info else _capitalize_first(key)


def normalize_status(raw: Optional[str]) -> str:
    key = str(raw).strip().lower() if raw is not None else ""
    if not key:
        return DEFAULT_STATUS
    return _STATUS_LOOKUP.get(key) or _capitalize_first(key)


def type_metadata(label: str, types: Mapping[str, DeviceTypeInfo] = TYPES_BY_LABEL) -> dict:
    info = types.get(label)
    if info is None:
        return {"icon": DEFAULT_ICON, "color": DEFAULT_COLOR}
    return {"icon": info.icon, "color": info.color}
