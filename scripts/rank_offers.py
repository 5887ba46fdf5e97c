"""Rank a saved batch of provider offers into hotel cards."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tour_ranker.config.run_config import RunConfig
from tour_ranker.config.settings import EngineSettings
from tour_ranker.core.logging import configure_logging
from tour_ranker.hotels import TourCard
from tour_ranker.offers import build_tour_offers
from tour_ranker.ranking import rank_and_group
from tour_ranker.storage import JsonStore

logger = logging.getLogger(__name__)


def _print_summary(cards: list[TourCard], limit: int) -> None:
    print("Score | Hotel | Stars | Options | Best price | Badges")
    for card in cards[:limit]:
        print(
            f"{card.match_score:5.1f} | {card.hotel.name} | {card.hotel.stars} | "
            f"{len(card.options)} | {card.best_price.price:,.0f} {card.price_range.currency} | "
            f"{', '.join(card.badge_types) or '-'}"
        )


def main(offers_path: Path, config_path: Path, *, output_name: str, limit: int) -> Path:
    settings = EngineSettings()
    run_config = RunConfig.load(config_path)
    run_config.apply_to(settings, base_dir=config_path.parent)
    log_path = configure_logging(settings.log_level, settings.log_dir)

    store = JsonStore(settings.output_dir)
    offers = build_tour_offers(store.read_items(offers_path))
    logger.info("Loaded %d offers from %s (profile=%s, log=%s)", len(offers), offers_path, run_config.profile, log_path)

    cards = rank_and_group(
        offers,
        run_config.search_request(),
        run_config.priority_weights(),
        settings=settings,
    )
    output_path = store.write(
        TourCard.from_iterable(cards),
        filename=output_name,
        metadata={"profile": run_config.profile, "offers": len(offers), "cards": len(cards)},
    )
    _print_summary(cards, limit)
    logger.info("Wrote %d cards to %s", len(cards), output_path)
    return output_path


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Deduplicate and rank tour offers by user priorities")
    parser.add_argument("offers", type=Path, help="JSON file with a list of provider offers")
    parser.add_argument("--config", type=Path, required=True, help="Run config TOML with search and priorities")
    parser.add_argument("--output", default="cards.json", help="Output filename inside the output directory")
    parser.add_argument("--limit", type=int, default=20, help="How many cards to print")
    args = parser.parse_args()
    main(args.offers, args.config, output_name=args.output, limit=args.limit)
