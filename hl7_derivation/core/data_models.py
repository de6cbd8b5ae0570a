"""
Field Derivation Data Models

This module defines the thin value wrappers, closed code sets and result
types shared by the derivation functions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..exceptions import FieldAccessError


class EncounterStatus(Enum):
    """FHIR R4 encounter status codes."""
    PLANNED = "planned"
    ARRIVED = "arrived"
    TRIAGED = "triaged"
    IN_PROGRESS = "in-progress"
    ONLEAVE = "onleave"
    FINISHED = "finished"
    CANCELLED = "cancelled"
    ENTERED_IN_ERROR = "entered-in-error"
    UNKNOWN = "unknown"

    def to_code(self) -> str:
        """Return the wire code for this status."""
        return self.value


class AddressUse(Enum):
    """Address use codes produced from XAD.7, XAD.16 and XAD.17."""
    HOME = "home"
    WORK = "work"
    TEMP = "temp"
    OLD = "old"
    BILLING = "billing"


class AddressType(Enum):
    """Address type codes produced from XAD.7 and XAD.18."""
    POSTAL = "postal"
    PHYSICAL = "physical"


@dataclass(frozen=True)
class Field:
    """A single (non-repeating) field value split into its components."""
    components: Tuple[str, ...] = ()

    @classmethod
    def of(cls, *components: Optional[str]) -> "Field":
        """Build a field from component strings; None becomes an empty component."""
        return cls(tuple('' if c is None else str(c) for c in components))

    @classmethod
    def parse(cls, text: str, separator: str = '^') -> "Field":
        """Build a field from its encoded form, e.g. ``"650^555^1234"``."""
        if not text:
            return cls()
        return cls(tuple(text.split(separator)))

    @property
    def value(self) -> Optional[str]:
        """First component, or None for an empty field."""
        if not self.components:
            return None
        return self.components[0]

    def encode(self, separator: str = '^') -> str:
        """Join all components, dropping trailing empty ones."""
        parts = list(self.components)
        while parts and parts[-1] == '':
            parts.pop()
        return separator.join(parts)

    def __str__(self) -> str:
        return self.encode()


@dataclass(frozen=True)
class RepetitionCount:
    """Outcome of inspecting how many times a segment field repeats."""
    ok: bool
    count: int = 0
    error: Optional[str] = None

    @classmethod
    def success(cls, count: int) -> "RepetitionCount":
        return cls(ok=True, count=count)

    @classmethod
    def failure(cls, error: str) -> "RepetitionCount":
        return cls(ok=False, error=error)


@dataclass
class Segment:
    """
    Minimal segment stand-in exposing repeating fields by 1-based position.

    Message parsing is done elsewhere; this is what callers hand to
    ``get_address_district`` when they have no richer segment object.
    """
    name: str
    fields: Dict[int, List[Any]] = field(default_factory=dict)
    field_count: Optional[int] = None

    def get_field(self, number: int) -> Sequence[Any]:
        """Return every repetition of field ``number``."""
        if number < 1 or (self.field_count is not None and number > self.field_count):
            raise FieldAccessError(
                f"Field {number} is not defined for segment {self.name}", field_number=number
            )
        return list(self.fields.get(number, []))


@dataclass
class BatchStatistics:
    """Statistics for a batch derivation session."""
    function_name: str = ''
    total_processed: int = 0
    derived: int = 0
    not_derived: int = 0
    value_counts: Dict[str, int] = field(default_factory=dict)

    def record(self, result: Any) -> None:
        """Count one derived value."""
        self.total_processed += 1
        if result is None or result == '':
            self.not_derived += 1
            return
        self.derived += 1
        key = str(result)
        self.value_counts[key] = self.value_counts.get(key, 0) + 1

    def get_derivation_rate(self) -> float:
        """Share of rows that produced a value."""
        if self.total_processed == 0:
            return 0.0
        return self.derived / self.total_processed
