"""Service for converting standings between HTML and .dat."""

from loguru import logger

from standings_dat.domain.exceptions import RoundTripMismatch
from standings_dat.domain.models import Contest, StandingsRow
from standings_dat.infrastructure.parsers import (
    DatDecoderProtocol,
    DatEncoderProtocol,
    StandingsParserProtocol,
)

from .standings import compute_standings


class ConversionService:
    """Converts standings pages to .dat and checks round trips."""

    def __init__(
        self,
        *,
        page_parser: StandingsParserProtocol,
        encoder: DatEncoderProtocol,
        decoder: DatDecoderProtocol,
    ):
        """Initialize service with dependencies."""
        self.page_parser = page_parser
        self.encoder = encoder
        self.decoder = decoder

    def parse_html(self, html: str) -> Contest:
        return self.page_parser.parse(html)

    def parse_dat(self, data: str) -> Contest:
        return self.decoder.decode(data)

    def html_to_dat(self, html: str, verify: bool = False) -> str:
        """
        Convert a standings page to .dat text.

        Args:
            html: Standings page HTML
            verify: Decode the result again and compare standings

        Raises:
            RoundTripMismatch: verify is set and standings changed
        """
        contest = self.parse_html(html)
        data = self.encoder.encode(contest)
        if verify:
            self._check_round_trip(contest, data)
        return data

    def verify_round_trip(self, contest: Contest) -> list[StandingsRow]:
        """
        Encode and decode a contest and check its standings survive.

        Returns:
            The standings, identical before and after
        """
        return self._check_round_trip(contest, self.encoder.encode(contest))

    def _check_round_trip(self, contest: Contest, data: str) -> list[StandingsRow]:
        before = compute_standings(contest)
        after = compute_standings(self.decoder.decode(data))
        if before != after:
            logger.error("Standings differ after .dat round trip")
            raise RoundTripMismatch(before, after)

        logger.debug(f"Round trip verified for {len(before)} contestants")
        return before
