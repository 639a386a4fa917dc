import asyncio
import logging
import random

from app.mappers.headlines import (
    REGENERATE_HEADLINE_TEMPLATES,
    REPORT_HEADLINE_TEMPLATES,
    normalize_business_input,
    render_headline,
)
from app.schemas.report import BusinessReport

logger = logging.getLogger(__name__)

RATING_MIN = 3.8
RATING_MAX = 4.9
REVIEWS_MIN = 50
REVIEWS_MAX = 499


def sample_rating(rng: random.Random) -> float:
    """Uniform rating in [3.8, 4.9], rounded to one decimal."""
    value = round(RATING_MIN + rng.random() * (RATING_MAX - RATING_MIN), 1)
    return min(max(value, RATING_MIN), RATING_MAX)


def sample_review_count(rng: random.Random) -> int:
    return rng.randint(REVIEWS_MIN, REVIEWS_MAX)


class ReportGenerator:
    """Builds simulated business reports.

    Nothing is looked up: the numbers are sampled and the headline is a
    template filled with the caller's inputs. The delays only make the
    dashboard feel like it is waiting on an analysis.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        report_delay: float = 1.0,
        headline_delay: float = 0.8,
    ):
        self._rng = rng or random.Random()
        self._report_delay = report_delay
        self._headline_delay = headline_delay

    async def generate_report(
        self, name: str | None, location: str | None
    ) -> BusinessReport:
        name, location = normalize_business_input(name, location)

        await asyncio.sleep(self._report_delay)

        report = BusinessReport(
            rating=sample_rating(self._rng),
            reviews=sample_review_count(self._rng),
            headline=render_headline(
                self._rng.choice(REPORT_HEADLINE_TEMPLATES), name, location
            ),
        )
        logger.info(
            "Generated report for %r in %r: rating=%s reviews=%d",
            name, location, report.rating, report.reviews,
        )
        return report

    async def regenerate_headline(
        self, name: str | None, location: str | None
    ) -> str:
        name, location = normalize_business_input(name, location)

        await asyncio.sleep(self._headline_delay)

        headline = render_headline(
            self._rng.choice(REGENERATE_HEADLINE_TEMPLATES), name, location
        )
        logger.debug("Regenerated headline for %r in %r", name, location)
        return headline
