"""Declarative data model of a calendar.

A calendar is described by three pieces of plain data:

* an ``IntEnum`` of period types ordered finest first (``DAY = 0``);
* a tree of :class:`PeriodStructure` objects, one root for the coarsest type,
  each structure listing the concrete sub-periods it is made of;
* a :class:`LocaleNames` table used to display structures in a locale.

:class:`CalendarDefinition` binds them together with the epoch offset.  All of
these objects are immutable once built, so a definition can be shared freely
between requests and threads.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from django.conf import settings

from .exceptions import CalendarConfigurationError

# Day counts and structure lengths are kept within signed 64 bits so that the
# results can be stored in a BigIntegerField or exchanged as JSON numbers.
MAX_DAYS: int = 2**63 - 1

FALLBACK_LOCALE = "bg"


def default_locale() -> str:
    return getattr(settings, "LETO_DEFAULT_LOCALE", FALLBACK_LOCALE)


class LocaleNames:
    """Lookup of display names keyed by structure key and locale.

    ``table`` maps a key to ``{locale: name}``.  Unknown locales fall back to
    the configured default locale and then to any available translation.
    """

    def __init__(self, table: Mapping[str, Mapping[str, str]]):
        self._table = {key: dict(names) for key, names in table.items()}

    def __contains__(self, key: str) -> bool:
        return key in self._table

    def keys(self) -> list[str]:
        return list(self._table)

    def locales(self, key: str) -> list[str]:
        return list(self._table[key])

    def __call__(self, key: str, locale: str | None = None) -> str:
        try:
            names = self._table[key]
        except KeyError:
            raise KeyError(f"No display name registered for {key!r}") from None
        for candidate in (locale, default_locale(), FALLBACK_LOCALE):
            if candidate and candidate in names:
                return names[candidate]
        return next(iter(names.values()))

    def merged(self, other: Mapping[str, Mapping[str, str]]) -> LocaleNames:
        """Return a new table extended with ``other``."""

        table = {key: dict(names) for key, names in self._table.items()}
        for key, names in other.items():
            table.setdefault(key, {}).update(names)
        return LocaleNames(table)


@dataclass(frozen=True, eq=False)
class PeriodStructure:
    """One concrete shape of a period.

    ``children`` lists the sub-periods in chronological order; the finest
    period type has none.  ``counted`` is ``False`` for intercalary periods
    (they occupy days but do not advance the numbering of their type).
    """

    period_type: IntEnum
    length: int
    children: Sequence[PeriodStructure] = ()
    key: str = ""
    counted: bool = True
    _counts: tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))
        label = self.key or self.period_type.name.lower()

        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise CalendarConfigurationError(f"Length of {label!r} must be an integer")
        if self.length <= 0:
            raise CalendarConfigurationError(
                f"Length of {label!r} must be positive, got {self.length}"
            )
        if self.length > MAX_DAYS:
            raise CalendarConfigurationError(f"Length of {label!r} exceeds {MAX_DAYS} days")

        if self.period_type == 0:
            if self.children:
                raise CalendarConfigurationError(
                    f"{label!r} belongs to the finest period type and cannot have sub-periods"
                )
        else:
            if not self.children:
                raise CalendarConfigurationError(
                    f"{label!r} does not define its sub-periods, so it is not defined "
                    f"how long its {self.period_type.name.lower()} parts are"
                )
            finer = type(self.period_type)(self.period_type - 1)
            for child in self.children:
                if child.period_type is not finer:
                    raise CalendarConfigurationError(
                        f"{label!r} contains a {child.period_type.name.lower()} period, "
                        f"expected {finer.name.lower()}"
                    )

        counts = [0] * (self.period_type + 1)
        for child in self.children:
            for index, value in enumerate(child._counts):
                counts[index] += value
        counts[self.period_type] = 1 if self.counted else 0
        object.__setattr__(self, "_counts", tuple(counts))

    def length_in(self, period_type: int) -> int:
        """Number of counted periods of ``period_type`` this structure holds.

        Zero for types coarser than the structure's own type.
        """

        if period_type < len(self._counts):
            return self._counts[period_type]
        return 0

    @property
    def counts(self) -> tuple[int, ...]:
        return self._counts

    @property
    def children_length(self) -> int:
        return sum(child.length for child in self.children)

    def offset_of(self, index: int) -> int:
        """Days from the start of this structure to the start of child ``index``."""

        return sum(child.length for child in self.children[:index])


@dataclass(frozen=True)
class PeriodInstance:
    """The resolved value of one period type for one day."""

    period_type: IntEnum
    number: int
    absolute_number: int
    structure: PeriodStructure
    start: int
    names: LocaleNames = field(repr=False, compare=False)

    @property
    def ordinal(self) -> int:
        """1-based position within the parent period."""
        return self.number + 1

    @property
    def length(self) -> int:
        return self.structure.length

    @property
    def counted(self) -> bool:
        return self.structure.counted

    def name(self, locale: str | None = None) -> str:
        return self.names(self.structure.key, locale)


@dataclass(frozen=True)
class CalendarDefinition:
    """A complete calendar: period types, root structure and epoch.

    ``epoch_offset`` is the number of days from the start of the calendar to
    the Unix epoch (1970-01-01).
    """

    name: str
    period_types: type[IntEnum]
    root: PeriodStructure
    epoch_offset: int
    names: LocaleNames = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        types = list(self.period_types)
        if not types:
            raise CalendarConfigurationError(f"Calendar {self.name!r} does not define any periods")
        if [int(t) for t in types] != list(range(len(types))):
            raise CalendarConfigurationError(
                f"Period types of {self.name!r} must be numbered 0..{len(types) - 1}, finest first"
            )
        coarsest = types[-1]
        if type(self.root.period_type) is not self.period_types:
            raise CalendarConfigurationError(
                f"Root structure of {self.name!r} uses foreign period types"
            )
        candidates = {t: 0 for t in types}
        for structure in self.structures():
            candidates[structure.period_type] += 1
        for period_type, count in candidates.items():
            if count == 0:
                raise CalendarConfigurationError(
                    f"Calendar {self.name!r} does not define any structure for the period "
                    f"type {period_type.name.lower()!r}, so it is not defined how long "
                    f"in days this period could be"
                )
        if candidates[coarsest] != 1 or self.root.period_type is not coarsest:
            raise CalendarConfigurationError(
                f"The coarsest period type {coarsest.name.lower()!r} of {self.name!r} must "
                f"have exactly one structure, found {candidates[coarsest]}"
            )
        if abs(self.epoch_offset) > MAX_DAYS:
            raise CalendarConfigurationError(f"Epoch offset of {self.name!r} is out of range")

    @property
    def types(self) -> tuple[IntEnum, ...]:
        return tuple(self.period_types)

    @property
    def coarsest(self) -> IntEnum:
        return self.types[-1]

    def period_type(self, name: str | int | IntEnum) -> IntEnum:
        """Return the period type addressed by enum member, index or name."""

        if isinstance(name, str):
            try:
                return self.period_types[name.upper()]
            except KeyError:
                raise KeyError(f"{self.name!r} has no period type {name!r}") from None
        return self.period_types(int(name))

    def structures(self) -> Iterator[PeriodStructure]:
        """Yield every distinct structure of the calendar, root first."""

        seen: set[int] = set()
        stack = [self.root]
        while stack:
            structure = stack.pop()
            if id(structure) in seen:
                continue
            seen.add(id(structure))
            yield structure
            stack.extend(reversed(structure.children))

    def candidates(self, period_type: int) -> list[PeriodStructure]:
        return [s for s in self.structures() if s.period_type == period_type]
