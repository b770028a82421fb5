"""Shutuba past (race entry with past performances) scraper for netkeiba.

This module extracts the race conditions and the horses sired by watched
stallions from race.netkeiba.com's shutuba_past page.

Extraction runs in two phases. Field handlers first collect raw facts in
document order, then assemble_race() builds the Race once every race-level
fact is known.
"""

import logging
from dataclasses import replace

from bs4 import BeautifulSoup, Tag

from shutuba_watch.config.sire_profiles import ExtractionConfig
from shutuba_watch.constants import (
    JUMP_KEYWORD,
    SHUTUBA_PAST_URL,
    SURFACE_DIRT,
    SURFACE_TURF,
    TURF_KEYWORD,
)
from shutuba_watch.models.race import (
    Horse,
    HorseRow,
    JockeyCell,
    Race,
    RaceFacts,
)
from shutuba_watch.scrapers.base import BaseScraper
from shutuba_watch.scrapers.field_extractor import FieldHandler, extract_fields
from shutuba_watch.services.correlator import correlate_jockeys
from shutuba_watch.services.eligibility import is_optimal
from shutuba_watch.utils.text import extract_int, squash, to_utf8

logger = logging.getLogger(__name__)


def _child_text(element: Tag, selector: str) -> str:
    """Concatenated text of all descendants matching selector."""
    return "".join(child.get_text() for child in element.select(selector))


def _row_key(element: Tag) -> int | None:
    """Index of the HorseList row containing element, if any."""
    row = element.find_parent("tr", class_="HorseList")
    if row is None:
        return None
    return len(row.find_all_previous("tr", class_="HorseList"))


def _prepend(text: str, existing: str) -> str:
    if not existing:
        return text
    return f"{text}:{existing}"


def handle_race_detail(facts: RaceFacts, element: Tag) -> RaceFacts:
    """Handle .RaceData01: surface, jump flag and distance."""
    raw = _child_text(element, "span").strip()
    text = to_utf8(raw)
    return replace(
        facts,
        detail_text=raw,
        surface=SURFACE_TURF if TURF_KEYWORD in text else SURFACE_DIRT,
        jump=JUMP_KEYWORD in text,
        distance=extract_int(text),
    )


def handle_race_name(facts: RaceFacts, element: Tag) -> RaceFacts:
    """Handle .RaceName."""
    return replace(facts, name_text=_prepend(element.get_text(), facts.name_text))


def handle_race_number(facts: RaceFacts, element: Tag) -> RaceFacts:
    """Handle .RaceNum: label fragment and race id (e.g. "11R" -> 11)."""
    raw = element.get_text()
    try:
        race_id = int(raw.replace("\n", "").replace("R", ""))
    except ValueError:
        race_id = 0
    return replace(
        facts,
        number_text=_prepend(raw, facts.number_text),
        race_id=race_id,
    )


def make_horse_row_handler(config: ExtractionConfig):
    """Build the .Horse_Info handler for the given watch-list."""

    def handle_horse_row(facts: RaceFacts, element: Tag) -> RaceFacts:
        # 照合用に種牡馬名は先にデコードする
        sire_name = to_utf8(_child_text(element, ".Horse01").strip())
        horse_name = _child_text(element, ".Horse02").strip()
        dam_sire_name = _child_text(element, ".Horse04").strip()

        if not horse_name:
            return facts

        number = facts.row_count + 1
        facts = replace(facts, row_count=number)

        sire = config.match_sire(sire_name)
        if sire is None:
            return facts

        row = HorseRow(
            number=number,
            horse_name=to_utf8(horse_name),
            sire_name=sire,
            dam_sire_name=to_utf8(dam_sire_name),
            row_key=_row_key(element),
        )
        return replace(facts, horse_rows=facts.horse_rows + (row,))

    return handle_horse_row


def handle_jockey(facts: RaceFacts, element: Tag) -> RaceFacts:
    """Handle .Jockey: every cell advances the jockey counter."""
    index = facts.jockey_count + 1
    facts = replace(facts, jockey_count=index)

    jockey_name = _child_text(element, "a").strip()
    if not jockey_name:
        return facts

    cell = JockeyCell(
        index=index,
        jockey_name=to_utf8(jockey_name),
        row_key=_row_key(element),
    )
    return replace(facts, jockeys=facts.jockeys + (cell,))


def build_handlers(config: ExtractionConfig) -> list[FieldHandler[RaceFacts]]:
    """Field handlers for the shutuba_past page."""
    return [
        FieldHandler("race_detail", ".RaceData01", handle_race_detail),
        FieldHandler("race_name", ".RaceName", handle_race_name),
        FieldHandler("race_number", ".RaceNum", handle_race_number),
        FieldHandler("horse_row", ".Horse_Info", make_horse_row_handler(config)),
        FieldHandler("jockey", ".Jockey", handle_jockey),
    ]


def assemble_race(facts: RaceFacts, config: ExtractionConfig) -> Race:
    """Build a Race from the collected facts.

    Args:
        facts: Facts collected by the field handlers.
        config: Extraction settings.

    Returns:
        Race with jockeys merged in and, if enabled, the optimal flag set.
        Jump races carry no horses.
    """
    fragments = [
        text
        for text in (facts.number_text, facts.name_text, facts.detail_text)
        if text
    ]
    race_text = squash(to_utf8(":".join(fragments)))

    horses = [
        Horse(
            number=row.number,
            horse_name=row.horse_name,
            sire_name=row.sire_name,
            dam_sire_name=row.dam_sire_name,
        )
        for row in facts.horse_rows
    ]
    horses, warnings = correlate_jockeys(
        horses,
        list(facts.jockeys),
        row_count=facts.row_count,
        jockey_count=facts.jockey_count,
        horse_row_keys=[row.row_key for row in facts.horse_rows],
    )

    if config.evaluate_optimal:
        horses = [
            replace(
                horse,
                optimal=is_optimal(
                    horse.sire_name, facts.surface, facts.distance, config.profiles
                ),
            )
            for horse in horses
        ]

    if facts.jump:
        horses = []

    return Race(
        race_id=facts.race_id,
        race_text=race_text,
        surface=facts.surface,
        jump=facts.jump,
        distance=facts.distance,
        horses=tuple(horses),
        parse_warnings=tuple(warnings),
    )


class ShutubaPastScraper(BaseScraper):
    """Scraper for netkeiba shutuba_past pages.

    Attributes:
        BASE_URL: URL of the shutuba_past page.

    Example:
        >>> scraper = ShutubaPastScraper()
        >>> race = scraper.fetch_race(scraper.build_url("202408050411"), default_config())
        >>> print(race.race_text)
        11R:アルゼンチン共和国杯:芝2500m
    """

    BASE_URL = SHUTUBA_PAST_URL

    def build_url(self, race_id: str) -> str:
        """Build the shutuba_past URL for a race ID.

        Args:
            race_id: The race ID string (e.g., "202408050411").

        Returns:
            Full URL for the shutuba_past page.
        """
        return f"{self.BASE_URL}?race_id={race_id}"

    def fetch_race(self, url: str, config: ExtractionConfig) -> Race:
        """Fetch and parse one shutuba_past page.

        Args:
            url: The shutuba_past URL.
            config: Extraction settings.

        Returns:
            The parsed Race.

        Raises:
            requests.RequestException: If the HTTP request fails.
        """
        content = self.fetch(url)
        soup = self.get_soup(content)
        return self.parse(soup, config)

    def parse(self, soup: BeautifulSoup, config: ExtractionConfig) -> Race:
        """Parse a shutuba_past page.

        Args:
            soup: BeautifulSoup object of the page.
            config: Extraction settings.

        Returns:
            The parsed Race.
        """
        facts = extract_fields(soup, build_handlers(config), RaceFacts())
        logger.debug(
            "race %s: %d horse rows, %d watched",
            facts.race_id,
            facts.row_count,
            len(facts.horse_rows),
        )
        return assemble_race(facts, config)
