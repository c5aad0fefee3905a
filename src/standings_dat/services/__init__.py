from standings_dat.services.conversion import ConversionService
from standings_dat.services.standings import compute_standings


def create_conversion_service(html_parser: str | None = None) -> ConversionService:
    """Factory function to create conversion service with all dependencies."""
    from standings_dat.config import get_settings
    from standings_dat.infrastructure.dat import DatDecoder, DatEncoder
    from standings_dat.infrastructure.parsers import StandingsPageParser

    page_parser = StandingsPageParser(html_parser or get_settings().html_parser)

    return ConversionService(
        page_parser=page_parser,
        encoder=DatEncoder(),
        decoder=DatDecoder(),
    )


__all__ = ["ConversionService", "compute_standings", "create_conversion_service"]
