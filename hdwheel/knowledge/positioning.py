"""Gate and line positions on the wheel plus the attributes derived from them.

Everything here is computed from two immutable tables: the order in which
the 64 gates sit around the wheel and each gate's six-line binary pattern.
Binary strings are stored bottom to top, so index 0 is line 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Mapping, Optional, Tuple

__all__ = [
    "GATE_SEQUENCE",
    "BINARY_IDENTITY",
    "DEGREES_PER_LINE",
    "LINES_PER_GATE",
    "TOTAL_GATES",
    "TOTAL_LINES",
    "WheelPosition",
    "Trigrams",
    "DockingData",
    "wheel_position",
    "angle_of",
    "binary_of",
    "codon_of",
    "amino_acid_of",
    "quarter_of",
    "face_of",
    "trigrams_of",
    "opposite_gate",
    "adjacent_pairs",
    "docking_data",
    "gate_data_attributes",
    "line_data_attributes",
]

DEGREES_PER_LINE = 0.9375
LINES_PER_GATE = 6
TOTAL_GATES = 64
TOTAL_LINES = TOTAL_GATES * LINES_PER_GATE

# Wheel order starting at 0° and running clockwise.
GATE_SEQUENCE: Tuple[int, ...] = (
    41, 19, 13, 49, 30, 55, 37, 63, 22, 36, 25, 17, 21, 51, 42, 3,
    27, 24, 2, 23, 8, 20, 16, 35, 45, 12, 15, 52, 39, 53, 62, 56,
    31, 33, 7, 4, 29, 59, 40, 64, 47, 6, 46, 18, 48, 57, 32, 50,
    28, 44, 1, 43, 14, 34, 9, 5, 26, 11, 10, 58, 38, 54, 61, 60,
)

BINARY_IDENTITY: Mapping[int, str] = {
    1: "111111", 2: "000000", 3: "100010", 4: "010001",
    5: "111010", 6: "010111", 7: "010000", 8: "000010",
    9: "111011", 10: "110111", 11: "111000", 12: "000111",
    13: "101111", 14: "111101", 15: "001000", 16: "000100",
    17: "100110", 18: "011001", 19: "110000", 20: "000011",
    21: "100101", 22: "101001", 23: "000001", 24: "100000",
    25: "100111", 26: "111001", 27: "100001", 28: "011110",
    29: "010010", 30: "101101", 31: "001110", 32: "011100",
    33: "001111", 34: "111100", 35: "000101", 36: "101000",
    37: "101011", 38: "110101", 39: "001010", 40: "010100",
    41: "110001", 42: "100011", 43: "111110", 44: "011111",
    45: "000110", 46: "011000", 47: "010110", 48: "011010",
    49: "101110", 50: "011101", 51: "100100", 52: "001001",
    53: "001011", 54: "110100", 55: "101100", 56: "001101",
    57: "011011", 58: "110110", 59: "010011", 60: "110010",
    61: "110011", 62: "001100", 63: "101010", 64: "010101",
}

_WHEEL_INDEX: Dict[int, int] = {gate: index for index, gate in enumerate(GATE_SEQUENCE)}

_BIGRAM_LETTERS = {"11": "A", "00": "U", "10": "C", "01": "G"}

_QUARTERS = {
    "11": "Mutation",
    "10": "Initiation",
    "01": "Duality",
    "00": "Civilisation",
}

_FACES = {
    "AA": "Hades", "AC": "Prometheus", "AG": "Vishnu", "AU": "Keepers of the Wheel",
    "CA": "Kali", "CC": "Mitra", "CG": "Michael", "CU": "Janus",
    "GA": "Minerva", "GC": "Christ", "GG": "Harmonia", "GU": "Thoth",
    "UA": "Maat", "UC": "Parvati", "UG": "Lakshmi", "UU": "Maia",
}

_TRIGRAMS = {
    "111": "Heaven", "000": "Earth", "001": "Mountain", "100": "Thunder",
    "110": "Lake", "011": "Wind", "101": "Fire", "010": "Water",
}

# Standard genetic code, codons ordered U, C, A, G at each position.
_CODE_BASES = "UCAG"
_CODE_TABLE = "FFLLSSSSYY**CC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG"
_AMINO_NAMES = {
    "A": "Alanine", "R": "Arginine", "N": "Asparagine", "D": "Aspartic Acid",
    "C": "Cysteine", "Q": "Glutamine", "E": "Glutamic Acid", "G": "Glycine",
    "H": "Histidine", "I": "Isoleucine", "L": "Leucine", "K": "Lysine",
    "M": "Methionine", "F": "Phenylalanine", "P": "Proline", "S": "Serine",
    "T": "Threonine", "W": "Tryptophan", "Y": "Tyrosine", "V": "Valine",
    "*": "Terminator",
}


def _check_gate(gate: int) -> int:
    if isinstance(gate, bool) or not isinstance(gate, int) or not 1 <= gate <= TOTAL_GATES:
        raise ValueError(f"Invalid gate number: {gate!r} (must be 1-64)")
    return gate


def _check_line(line: Optional[int]) -> int:
    if line is None:
        return 1
    if isinstance(line, bool) or not isinstance(line, int) or not 1 <= line <= LINES_PER_GATE:
        raise ValueError(f"Invalid line number: {line!r} (must be 1-6)")
    return line


@dataclass(frozen=True, slots=True)
class WheelPosition:
    gate: int
    line: int
    wheel_index: int
    line_position: int
    angle: float


def wheel_position(gate: int, line: Optional[int] = None) -> WheelPosition:
    """Return where ``gate``/``line`` sits on the wheel (line defaults to 1)."""

    _check_gate(gate)
    line_number = _check_line(line)
    index = _WHEEL_INDEX[gate]
    line_position = index * LINES_PER_GATE + (line_number - 1)
    return WheelPosition(
        gate=gate,
        line=line_number,
        wheel_index=index,
        line_position=line_position,
        angle=line_position * DEGREES_PER_LINE,
    )


def angle_of(gate: int, line: Optional[int] = None) -> float:
    """Domain angle (degrees, clockwise from 0°) of ``gate``/``line``."""

    return wheel_position(gate, line).angle


def binary_of(gate: int) -> str:
    return BINARY_IDENTITY[_check_gate(gate)]


def codon_of(gate: int) -> str:
    """Three letter RNA codon spelled by the gate's three line pairs."""

    bits = binary_of(gate)
    return "".join(_BIGRAM_LETTERS[bits[i : i + 2]] for i in range(0, 6, 2))


def amino_acid_of(gate: int) -> str:
    codon = codon_of(gate)
    index = sum(
        _CODE_BASES.index(base) * weight for base, weight in zip(codon, (16, 4, 1))
    )
    return _AMINO_NAMES[_CODE_TABLE[index]]


def quarter_of(gate: int) -> str:
    return _QUARTERS[binary_of(gate)[:2]]


def face_of(gate: int) -> str:
    return _FACES[codon_of(gate)[:2]]


@dataclass(frozen=True, slots=True)
class Trigrams:
    upper: str
    lower: str


def trigrams_of(gate: int) -> Trigrams:
    bits = binary_of(gate)
    return Trigrams(upper=_TRIGRAMS[bits[3:]], lower=_TRIGRAMS[bits[:3]])


@lru_cache(maxsize=None)
def _gate_by_binary() -> Dict[str, int]:
    return {binary: gate for gate, binary in BINARY_IDENTITY.items()}


def opposite_gate(gate: int) -> int:
    """Gate whose lines are the inversion of ``gate``'s lines."""

    inverted = "".join("0" if bit == "1" else "1" for bit in binary_of(gate))
    return _gate_by_binary()[inverted]


def adjacent_pairs() -> Tuple[Tuple[int, int], ...]:
    """Every pair of neighbouring gates around the wheel, wrapping 60 -> 41."""

    return tuple(
        (GATE_SEQUENCE[i], GATE_SEQUENCE[(i + 1) % TOTAL_GATES]) for i in range(TOTAL_GATES)
    )


@dataclass(frozen=True, slots=True)
class DockingData:
    """Everything the wheel knows about one gate (and optionally one line)."""

    gate: int
    line: Optional[int]
    binary: str
    codon: str
    amino_acid: str
    wheel_index: int
    line_position: int
    angle: float
    quarter: str
    face: str
    trigrams: Trigrams
    opposite_gate: int

    def to_payload(self) -> Dict[str, object]:
        return {
            "gate": self.gate,
            "line": self.line,
            "binary": self.binary,
            "codon": self.codon,
            "amino_acid": self.amino_acid,
            "wheel_index": self.wheel_index,
            "line_position": self.line_position,
            "angle": self.angle,
            "quarter": self.quarter,
            "face": self.face,
            "trigrams": {"upper": self.trigrams.upper, "lower": self.trigrams.lower},
            "opposite_gate": self.opposite_gate,
        }


def docking_data(gate: int, line: Optional[int] = None) -> DockingData:
    position = wheel_position(gate, line)
    return DockingData(
        gate=gate,
        line=line,
        binary=binary_of(gate),
        codon=codon_of(gate),
        amino_acid=amino_acid_of(gate),
        wheel_index=position.wheel_index,
        line_position=position.line_position,
        angle=position.angle,
        quarter=quarter_of(gate),
        face=face_of(gate),
        trigrams=trigrams_of(gate),
        opposite_gate=opposite_gate(gate),
    )


def gate_data_attributes(
    gate: int,
    *,
    include_wheel_index: bool = True,
    include_angle: bool = False,
    include_opposite: bool = False,
) -> Dict[str, object]:
    """Queryable ``data-*`` attributes for SVG elements that represent ``gate``."""

    data = docking_data(gate)
    attrs: Dict[str, object] = {
        "data-gate": gate,
        "data-binary": data.binary,
        "data-codon": data.codon,
        "data-quarter": data.quarter,
        "data-face": data.face,
        "data-trigram-upper": data.trigrams.upper,
        "data-trigram-lower": data.trigrams.lower,
    }
    if include_wheel_index:
        attrs["data-wheel-index"] = data.wheel_index
    if include_angle:
        attrs["data-angle"] = data.angle
    if include_opposite:
        attrs["data-opposite-gate"] = data.opposite_gate
    return attrs


def line_data_attributes(gate: int, line: int, **options: bool) -> Dict[str, object]:
    """Gate attributes plus ``data-line`` and the line's ``data-polarity``."""

    line_number = _check_line(line)
    attrs = gate_data_attributes(gate, **options)
    attrs["data-line"] = line_number
    attrs["data-polarity"] = "YANG" if binary_of(gate)[line_number - 1] == "1" else "YIN"
    return attrs
