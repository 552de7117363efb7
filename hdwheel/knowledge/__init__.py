"""Gate/line knowledge the wheel generators dock into."""

from .positioning import (
    GATE_SEQUENCE,
    DockingData,
    adjacent_pairs,
    angle_of,
    docking_data,
    gate_data_attributes,
    line_data_attributes,
)

__all__ = [
    "GATE_SEQUENCE",
    "DockingData",
    "adjacent_pairs",
    "angle_of",
    "docking_data",
    "gate_data_attributes",
    "line_data_attributes",
]
