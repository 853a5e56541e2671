import sys
import asyncio
import json
from typing import List, Optional

# --- Settings/Logging ---
from src.logging.setup import setup_logging
from src.config.settings import settings

setup_logging()

from loguru import logger

# Core Logic Imports
from src.clients.sleeper_client import SleeperClient
from src.clients.base_client import DataSourceUnavailableError, SleeperClientError
from src.models.league import League
from src.transformer.service import TransformerService

from rich import print
from rich.markup import escape
from rich.panel import Panel


def write_league(league: League, output_filename: str) -> None:
    """Writes the league as JSON, leaving out every absent field."""
    with open(output_filename, "w", encoding="utf-8") as f:
        json.dump(league.model_dump(exclude_none=True), f, indent=4, ensure_ascii=False)
    logger.success(f"Successfully saved league to {output_filename}")


def print_summary(league: League) -> None:
    lines = [f"[bold]{escape(league.name or 'Unnamed league')}[/bold] {league.season or ''} {league.sport or ''}"]
    for team in league.teams or []:
        record = "-".join(
            str(value) for value in (team.wins, team.losses, team.ties) if value is not None
        )
        lines.append(
            f" {escape(team.name):<30} {record:<8} "
            f"starters={len(team.starters or [])} bench={len(team.bench or [])} "
            f"reserve={len(team.reserves or [])} taxi={len(team.taxis or [])}"
        )
    print(Panel("\n".join(lines), title="League"))


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point: `python main.py [league_id] [sport]`."""
    args = sys.argv[1:] if argv is None else argv
    league_id = args[0] if args else settings.league_id
    sport = args[1] if len(args) > 1 else settings.sport

    if not league_id:
        logger.critical("No league id given (argument or LEAGUE_ID setting). Exiting.")
        return 2

    logger.info(f"Starting Sleeper league transform for {league_id} ({sport})")

    async with SleeperClient() as sleeper_client:
        service = TransformerService(sleeper_client)
        try:
            league = await service.serve_league(sport, league_id)
        except DataSourceUnavailableError as e:
            logger.critical(f"Sleeper data source unavailable: {e}")
            return 1
        except SleeperClientError as e:
            logger.error(f"Sleeper client error: {e}")
            return 1

    try:
        write_league(league, settings.output_file)
    except IOError as e:
        logger.error(f"Failed to write league to {settings.output_file}: {e}")
        return 1

    print_summary(league)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
