"""
Run Conway's Game of Life on a toroidal grid for a fixed number of generations
"""
import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm import tqdm

sys.path.append(str(Path(__file__).parent.parent))

from toruslife.utils.game_of_life import (
    GameOfLife,
    seed_grid,
    DEFAULT_GENERATIONS,
    DEFAULT_GRID_SIZE,
)
from toruslife.utils.patterns import get_pattern, place_pattern, PATTERN_CATEGORIES
from toruslife.utils.visualization import (
    print_grid,
    create_animation,
    visualize_state,
    visualize_trajectory,
)
from toruslife.evaluation.metrics import population, flip_activity


def parse_args(argv=None):
    available = [name for cat in PATTERN_CATEGORIES.values() for name in cat]

    parser = argparse.ArgumentParser(description='Run Game of Life on a torus')
    parser.add_argument('--rows', type=int, default=DEFAULT_GRID_SIZE[0],
                        help='Grid height')
    parser.add_argument('--cols', type=int, default=DEFAULT_GRID_SIZE[1],
                        help='Grid width')
    parser.add_argument('--generations', type=int, default=DEFAULT_GENERATIONS,
                        help='Number of generations to run (never stops early)')
    parser.add_argument('--pattern', type=str, default='glider', choices=available,
                        help='Seed pattern')
    parser.add_argument('--position', type=int, nargs=2, default=[0, 0],
                        metavar=('ROW', 'COL'),
                        help='Grid cell for the pattern origin')
    parser.add_argument('--center', action='store_true',
                        help='Center the pattern instead of using --position')
    parser.add_argument('--render', choices=['text', 'none'], default='text',
                        help='Print every generation or only a summary')
    parser.add_argument('--alive', type=str, default='1', help='Glyph for live cells')
    parser.add_argument('--dead', type=str, default='0', help='Glyph for dead cells')
    parser.add_argument('--delay', type=float, default=0.0,
                        help='Seconds to pause after printing each generation')
    parser.add_argument('--gif', type=str, default=None,
                        help='Also save the trajectory as an animated GIF')
    parser.add_argument('--plot', type=str, default=None,
                        help='Also save evenly spaced trajectory frames as an image')
    parser.add_argument('--snapshot', type=str, default=None,
                        help='Also save the final grid as an image')
    parser.add_argument('--log-level', type=str.upper, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level')
    args = parser.parse_args(argv)
    if args.generations < 0:
        parser.error('--generations must be non-negative')
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    gol = GameOfLife((args.rows, args.cols))
    position = None if args.center else tuple(args.position)
    seed = place_pattern(gol.grid_size, get_pattern(args.pattern), position=position, wrap=True)

    grid = gol.new_grid()
    seed_grid(grid, seed)
    initial_state = grid.copy()

    if args.render == 'text':
        def render(state):
            print_grid(state, alive=args.alive, dead=args.dead)
            if args.delay > 0:
                time.sleep(args.delay)

        flip_counts = gol.run(grid, args.generations, render=render)
    else:
        flip_counts = []
        for _ in tqdm(range(args.generations), desc="Generations"):
            flip_counts.append(len(gol.advance(grid)))

    print("=" * 60)
    print(f"Grid: {args.rows}x{args.cols}  Pattern: {args.pattern}  "
          f"Generations: {args.generations}")
    print(f"Final population: {population(grid)}")
    print(f"Total flips: {sum(flip_counts)}")

    if args.gif or args.plot:
        trajectory = gol.simulate(initial_state, args.generations)
        if args.gif:
            create_animation(trajectory, pattern_name=args.pattern, save_path=args.gif)
            print(f"Animation: {args.gif} ({len(flip_activity(trajectory))} transitions)")
        if args.plot:
            visualize_trajectory(trajectory, pattern_name=args.pattern, save_path=args.plot)
            print(f"Trajectory plot: {args.plot}")

    if args.snapshot:
        visualize_state(grid, title=f"{args.pattern} - Step {args.generations}",
                        save_path=args.snapshot)
        print(f"Final state: {args.snapshot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
