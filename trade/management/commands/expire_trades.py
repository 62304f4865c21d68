import logging
from collections.abc import Sequence
from typing import Any

from django.core.management.base import BaseCommand
from django.utils import timezone

from trade.services.trades import expire_trades, find_expired_trades

logger = logging.getLogger(__name__)


class Command(BaseCommand):
	"""Expire pending trades whose expiration time has passed."""

	help = "Expire pending trades whose expiration time has passed"

	def add_arguments(self, parser) -> None:  # noqa: ANN001, D102, PLR6301
		parser.add_argument("--league", type=int, default=None, help="Only sweep this league")
		parser.add_argument(
			"--dry-run",
			action="store_true",
			help="List the trades that would expire without changing them",
			default=False,
		)
		parser.add_argument(
			"--verbose",
			action="store_true",
			help="Enable verbose logging",
			default=False,
		)

	def handle(self, *_: Sequence[Any], **options: dict[str, Any]) -> None:  # noqa: D102
		verbose: bool = options["verbose"] or False  # pyright: ignore[reportAssignmentType]
		now = timezone.now()

		if verbose:
			self.stdout.write(f"Starting trade expiration sweep at {now}")

		if options["dry_run"]:
			overdue = list(find_expired_trades(now=now, league_id=options["league"]))  # pyright: ignore[reportArgumentType]

			for trade in overdue:
				self.stdout.write(f"Would expire trade {trade.pk} (expired at {trade.expires_at})")

			self.stdout.write(f"{len(overdue)} trades would expire")
			return

		expired = expire_trades(now=now, league_id=options["league"])  # pyright: ignore[reportArgumentType]

		if expired:
			logger.warning(f"Expired trades: {', '.join(str(trade_id) for trade_id in expired)}")
			self.stdout.write(self.style.SUCCESS(f"Expired {len(expired)} trades"))

		elif verbose:
			self.stdout.write("No expired trades found")
