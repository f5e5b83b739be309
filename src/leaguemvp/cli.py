"""Command-line interface for ranking players from season files."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from leaguemvp.config import iter_formulas, iter_weight_tables
from leaguemvp.config_loader import RankingProfile
from leaguemvp.engine import build_ranking
from leaguemvp.export import export_rankings_to_csv
from leaguemvp.ingest import load_season_directory
from leaguemvp.models import ALL_SEASONS


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank league players by position-weighted MVP score")
    parser.add_argument("data_dir", type=Path, help="Directory of <year>.json or <year>.csv season files")
    parser.add_argument(
        "--season",
        default=ALL_SEASONS,
        help="Season to rank, or 'all' for every known season",
    )
    parser.add_argument(
        "--formula",
        default=None,
        help="Formula preset (" + ", ".join(formula.name for formula in iter_formulas()) + ")",
    )
    parser.add_argument(
        "--positions",
        default=None,
        help="Position weight table (" + ", ".join(table.name for table in iter_weight_tables()) + ")",
    )
    parser.add_argument("--min-matches", type=int, default=None, help="Minimum aggregated matches to qualify")
    parser.add_argument("--top", type=int, default=None, help="Number of players to keep (0 keeps all)")
    parser.add_argument("--load-profile", type=Path, help="Load ranking profile JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save ranking profile JSON", default=None)
    parser.add_argument("--output", type=Path, default=None, help="Optional CSV output path")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional path to write ranking summary JSON",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    profile = RankingProfile.load(args.load_profile) if args.load_profile else RankingProfile()
    if args.formula:
        profile.formula = args.formula
    if args.positions:
        profile.position_table = args.positions
    if args.min_matches is not None:
        profile.min_matches = args.min_matches
    if args.top is not None:
        profile.top_n = args.top

    try:
        formula = profile.resolve_formula()
        weights = profile.resolve_weights()
        store = load_season_directory(args.data_dir)
    except (KeyError, TypeError, ValueError, FileNotFoundError) as exc:
        raise SystemExit(f"error: {exc}") from exc

    if args.save_profile:
        profile.save(args.save_profile)
        print(f"Saved ranking profile to {args.save_profile}")

    if args.season != ALL_SEASONS and not store.has_season(args.season):
        known = ", ".join(store.seasons()) or "none"
        print(f"Season {args.season} not found (known seasons: {known})")

    result = build_ranking(
        store,
        args.season,
        formula,
        profile.min_matches,
        profile.top_n,
        weights=weights,
    )

    print(
        f"{result.scope_label}: {result.eligible_players}/{result.total_players} players qualified "
        f"({formula.name} formula)"
    )
    for entry in result.entries:
        stats = entry.stats
        marker = " *" if stats.is_multi_position else ""
        print(
            f"{entry.rank:>3}. {stats.player_name:<24} {entry.mvp_score:6.1f}  "
            f"{stats.display_position}{marker}  {stats.matches}M {stats.goals}G "
            f"x{stats.effective_multiplier:.2f} {stats.win_pct:.1f}% WR"
        )
    if not result.entries:
        print("No players met the minimum match requirement.")

    if args.output:
        args.output.write_text(export_rankings_to_csv(result.entries), encoding="utf-8")
        print(f"Wrote ranking CSV to {args.output}")

    if args.report:
        summary = result.summary
        report_payload = {
            "scope": result.scope_label,
            "formula": formula.describe(),
            "total_players": result.total_players,
            "eligible_players": result.eligible_players,
            "selected_players": summary.selected_players,
            "max_matches": summary.max_matches,
            "score_mean": summary.score_mean,
            "score_median": summary.score_median,
            "score_std": summary.score_std,
        }
        args.report.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")
        print(f"Wrote ranking report to {args.report}")


if __name__ == "__main__":
    main()
