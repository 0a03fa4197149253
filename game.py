#!/usr/bin/env python3
"""Module Defense - headless runner.

Runs the simulation without a front end, optionally with a small scripted
build order, and prints a summary. Useful for balancing and for checking
that long runs keep the droid ledger consistent.
"""

import argparse
import logging
import sys

from module_defense.engine import commands
from module_defense.engine.droids import assigned_droids, ledger_balanced
from module_defense.engine.game_setup import new_game
from module_defense.engine.tick_executor import TickExecutor
from module_defense.models.game import Game
from module_defense.utils.constants import RNG_SEED_DEFAULT

logger = logging.getLogger("module_defense.runner")

# Offsets from the starting production module for the scripted build
BUILD_ORDER = [
    ("recruitment", 70, 0),
    ("defense", 70, 70),
    ("defense", 70, -70),
    ("energy", 140, 0),
    ("production", 140, 70),
]


def scripted_build(game: Game) -> None:
    """Place the BUILD_ORDER modules around the starting base."""
    anchor = game.module_at_index(1)
    for kind, dx, dy in BUILD_ORDER:
        module = commands.place_module(game, anchor.x + dx, anchor.y + dy, kind)
        if module is None:
            logger.info(f"Could not place {kind} at offset ({dx}, {dy})")
    recruiter = next((m for m in game.modules.values() if m.kind == "recruitment"), None)
    if recruiter is not None:
        commands.transfer_droid(game, recruiter.id)


def print_summary(game: Game, ticks: int) -> None:
    print("\n" + "=" * 60)
    print(f"Module Defense - seed {game.seed}")
    print("=" * 60)
    print(f"Ticks run:      {ticks}")
    print(f"Game clock:     {game.clock / 1000:.1f}s")
    print(f"Status:         {game.status}")
    print(f"Wave:           {game.wave_number}")
    print(f"Resources:      {game.resources:.0f}")
    print(f"Droids:         {game.total_droids} (assigned {assigned_droids(game)})")
    print(f"Ledger ok:      {ledger_balanced(game)}")
    print(f"Enemies:        {len(game.enemies)}")
    print("\nModules:")
    for index, module in enumerate(game.modules.values()):
        state = "on " if module.connected else "off"
        print(
            f"  [{index}] #{module.id:<3} {module.kind:<12} L{module.level} {state} "
            f"droids={module.droids:<2} hp={module.health:.0f}"
        )


def main():
    parser = argparse.ArgumentParser(
        description="Run a headless Module Defense simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python game.py --seconds 600 --speed 4
  python game.py --seed 7 --build --seconds 1200 --debug
        """,
    )
    parser.add_argument("--seed", type=int, default=RNG_SEED_DEFAULT, help="RNG seed")
    parser.add_argument(
        "--seconds", type=float, default=300, help="Real seconds to simulate (default: 300)"
    )
    parser.add_argument(
        "--dt", type=float, default=16, help="Milliseconds per tick (default: 16)"
    )
    parser.add_argument(
        "--speed", type=int, choices=[1, 2, 4], default=1, help="Clock multiplier"
    )
    parser.add_argument(
        "--resources", type=float, default=None, help="Override starting resources"
    )
    parser.add_argument("--build", action="store_true", help="Run the scripted build order")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    options = {} if args.resources is None else {"resources": args.resources}
    game = new_game(seed=args.seed, **options)
    while game.speed != args.speed:
        commands.cycle_speed(game)
    if args.build:
        scripted_build(game)

    executor = TickExecutor()
    ticks = 0
    for _ in range(int(args.seconds * 1000 / args.dt)):
        ticks += 1
        if executor.advance(game, args.dt).game_over:
            break

    print_summary(game, ticks)
    return 0 if ledger_balanced(game) else 1


if __name__ == "__main__":
    sys.exit(main())
