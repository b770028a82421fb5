"""Scraper modules for shutuba watch."""

from shutuba_watch.scrapers.base import BaseScraper
from shutuba_watch.scrapers.field_extractor import FieldHandler, extract_fields
from shutuba_watch.scrapers.shutuba_past import ShutubaPastScraper

__all__ = [
    "BaseScraper",
    "FieldHandler",
    "ShutubaPastScraper",
    "extract_fields",
]
