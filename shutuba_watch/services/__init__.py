"""Services module"""

from shutuba_watch.services.correlator import correlate_jockeys
from shutuba_watch.services.eligibility import is_optimal

__all__ = [
    "correlate_jockeys",
    "is_optimal",
]
