"""Race DTOs for shutuba watch.

This module provides immutable data transfer objects for the raw facts
collected from a shutuba page and for the races and horses built from them.
"""

from dataclasses import dataclass, field

from shutuba_watch.constants import SURFACE_DIRT


@dataclass(frozen=True)
class SireProfile:
    """Represents the favorable race conditions of a sire.

    Attributes:
        surface: "Turf", "Dirt" or "Both".
        min_distance: Lower bound of the favorable distance (inclusive).
        max_distance: Upper bound of the favorable distance (inclusive).
    """

    surface: str
    min_distance: int
    max_distance: int


@dataclass(frozen=True)
class HorseRow:
    """A horse row whose sire is on the watch-list, as read from the page.

    Attributes:
        number: 1-based position among rows with a horse name.
        horse_name: The horse's name.
        sire_name: The sire's name.
        dam_sire_name: The dam-sire's name.
        row_key: Index of the enclosing HorseList row, if any.
    """

    number: int
    horse_name: str
    sire_name: str
    dam_sire_name: str
    row_key: int | None = None


@dataclass(frozen=True)
class JockeyCell:
    """A jockey cell as read from the page.

    Attributes:
        index: 1-based encounter index among all jockey cells.
        jockey_name: The jockey's name.
        row_key: Index of the enclosing HorseList row, if any.
    """

    index: int
    jockey_name: str
    row_key: int | None = None


@dataclass(frozen=True)
class RaceFacts:
    """Raw facts accumulated while walking one shutuba page.

    Each field handler returns a new RaceFacts; nothing is mutated in place.
    """

    detail_text: str = ""
    name_text: str = ""
    number_text: str = ""
    race_id: int = 0
    surface: str = SURFACE_DIRT
    jump: bool = False
    distance: int = 0
    row_count: int = 0
    jockey_count: int = 0
    horse_rows: tuple[HorseRow, ...] = ()
    jockeys: tuple[JockeyCell, ...] = ()


@dataclass(frozen=True)
class Horse:
    """Represents a watched horse entered in a race.

    Attributes:
        number: Sequence number in the page (not the official program number).
        horse_name: The horse's name.
        sire_name: The sire's name.
        dam_sire_name: The dam-sire's name.
        jockey_name: The jockey's name ("" if no jockey was matched).
        optimal: Whether the race suits the sire; None when not evaluated.
    """

    number: int
    horse_name: str
    sire_name: str
    dam_sire_name: str
    jockey_name: str = ""
    optimal: bool | None = None

    def to_dict(self) -> dict:
        data = {
            "id": self.number,
            "horsename": self.horse_name,
            "stallionname": self.sire_name,
            "bnsname": self.dam_sire_name,
            "jockeyname": self.jockey_name,
        }
        if self.optimal is not None:
            data["optimal"] = self.optimal
        return data


@dataclass(frozen=True)
class Race:
    """Represents one race and its watched horses.

    Attributes:
        race_id: The race number parsed from the page (0 if absent).
        race_text: Label "<number>:<name>:<conditions>".
        surface: "Turf" or "Dirt".
        jump: Whether the race is a jump (steeplechase) race.
        distance: The race distance as written in the conditions.
        horses: Tuple of watched horses (immutable).
        parse_warnings: Non-fatal problems found while parsing.
    """

    race_id: int = 0
    race_text: str = ""
    surface: str = SURFACE_DIRT
    jump: bool = False
    distance: int = 0
    horses: tuple[Horse, ...] = ()
    parse_warnings: tuple[str, ...] = field(default=(), compare=False)

    def to_dict(self) -> dict:
        return {
            "id": self.race_id,
            "racetext": self.race_text,
            "horsedata": [horse.to_dict() for horse in self.horses],
        }


@dataclass(frozen=True)
class RaceBatch:
    """Races of one race day that have at least one watched horse."""

    races: tuple[Race, ...] = ()

    def to_dict(self) -> dict:
        return {"racedata": [race.to_dict() for race in self.races]}
