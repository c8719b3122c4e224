#!/usr/bin/env python3
"""
Langton's Ant Simulation

Headless driver for single and multi-agent Langton's ant runs, where agents
that land on the same cell spawn new agents.

Usage:
    langton-ca [--config configs/swarm.yaml] [options]

Examples:
    langton-ca --config configs/classic.yaml
    langton-ca --config configs/swarm.yaml --agents 10 --gif --out-dir results/
    langton-ca --config configs/capped.yaml --max-agents 50 --seed 42
    langton-ca --steps 500 --rate 600 --no-csv --no-snapshot --quiet
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import (THEMES, PlacementStrategy, SimulationConfig, SpawnVariant,
                     load_config)
from .model.engine import SimulationEngine, batch_size
from .export.csv_writer import CSVWriter
from .export.visualizer import Visualizer
from .export.reporter import Reporter


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Langton's Ant Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    langton-ca --config configs/classic.yaml
    langton-ca --config configs/swarm.yaml --agents 10 --gif --out-dir results/
    langton-ca --config configs/capped.yaml --max-agents 50 --seed 42
        """
    )

    parser.add_argument('--config', type=Path, default=None,
                        help='Path to YAML configuration file (defaults if omitted)')

    # Optional overrides
    parser.add_argument('--steps', type=int, default=None,
                        help='Override max simulation steps (0 = until interrupted)')
    parser.add_argument('--agents', type=int, default=None,
                        help='Initial agent count (clamped to 1-100)')
    parser.add_argument('--strategy', choices=[s.value for s in PlacementStrategy],
                        default=None, help='Initial placement strategy')
    parser.add_argument('--spawn-variant', choices=[v.value for v in SpawnVariant],
                        default=None, help='Collision spawn rule')
    parser.add_argument('--max-agents', type=int, default=None,
                        help='Roster cap for the capped variant (0 = unlimited)')
    parser.add_argument('--rate', type=int, default=None,
                        help='Steps per second; sets ticks per 60 Hz frame')
    parser.add_argument('--theme', choices=THEMES, default=None,
                        help='Colour theme for images')
    parser.add_argument('--out-dir', type=Path, default=Path('./output'),
                        help='Output directory for exports (default: ./output)')

    # Export toggles
    parser.add_argument('--csv', dest='csv', action='store_true', default=None,
                        help='Enable CSV export (default)')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable CSV export')

    parser.add_argument('--snapshot', dest='snapshot', action='store_true', default=None,
                        help='Enable final snapshot (default)')
    parser.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                        help='Disable final snapshot')

    parser.add_argument('--gif', action='store_true', default=False,
                        help='Enable GIF animation export')
    parser.add_argument('--gif-every', type=int, default=5,
                        help='Buffer a GIF frame every N frames (default: 5)')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress stdout output')

    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')

    return parser.parse_args(argv)


def apply_overrides(config: SimulationConfig, args: argparse.Namespace) -> SimulationConfig:
    """Apply CLI overrides on top of the loaded configuration."""
    if args.steps is not None:
        config.max_steps = args.steps
    if args.agents is not None:
        config.reset.agent_count = args.agents
    if args.strategy is not None:
        config.reset.strategy = PlacementStrategy(args.strategy)
    if args.spawn_variant is not None:
        config.reset.spawn_variant = SpawnVariant(args.spawn_variant)
    if args.max_agents is not None:
        config.reset.max_agents = args.max_agents
    if args.rate is not None:
        config.step_rate = args.rate
    if args.theme is not None:
        config.theme = args.theme
    if args.csv is not None:
        config.csv_enabled = args.csv
    if args.snapshot is not None:
        config.snapshot_enabled = args.snapshot
    if args.gif:
        config.gif_enabled = True
    config.quiet = args.quiet
    if args.seed is not None:
        config.seed = args.seed
    config.out_dir = args.out_dir

    config.reset.validate()
    if config.max_steps < 0 or config.step_rate < 0:
        raise ValueError("steps and rate must be >= 0")
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = load_config(args.config) if args.config else SimulationConfig()
        config = apply_overrides(config, args)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if not config.quiet:
        print("Initializing simulation...")
        print(f"  Agents: {config.reset.agent_count} ({config.reset.strategy.value})")
        print(f"  Spawn variant: {config.reset.spawn_variant.value}")
        print(f"  Max steps: {config.max_steps or 'unlimited'}")
        print(f"  Ticks per frame: {batch_size(config.step_rate)}")

    engine = SimulationEngine(config)
    placement = engine.placement

    if placement.degraded:
        print(f"Warning: placed {placement.placed} of {placement.requested} agents "
              f"(retry budget {config.placement.retry_budget} exhausted)",
              file=sys.stderr)
    elif not config.quiet:
        print(f"  Placed: {placement.placed} agents")

    # Initialize exporters
    csv_writer = None
    if config.csv_enabled:
        csv_writer = CSVWriter(config.out_dir / 'simulation_log.csv')
        csv_writer.open()

    visualizer = Visualizer(config.theme)
    reporter = Reporter(str(args.config) if args.config else '(defaults)', config.seed)

    # Main loop: one batch of ticks per frame
    if not config.quiet:
        print("\nRunning simulation...")

    final_state = engine.snapshot()
    frame = 0
    try:
        while not engine.is_finished():
            engine.run_frame()
            frame += 1
            state = engine.snapshot()
            final_state = state

            if csv_writer:
                csv_writer.append(state)

            # Buffer GIF frame (every N frames to reduce memory)
            if config.gif_enabled:
                if frame % max(1, args.gif_every) == 0 or engine.is_finished():
                    visualizer.buffer_frame(state)

            reporter.update(state)

            if not config.quiet and frame % 100 == 0:
                print(f"  Step {state.step}: {len(state.agents)} agents, "
                      f"{int(state.metrics['visited_cells'])} cells visited")

    except KeyboardInterrupt:
        if not config.quiet:
            print("\nSimulation interrupted by user.")

    # Cleanup and final exports
    if csv_writer:
        csv_writer.close()
        if not config.quiet:
            print(f"\nCSV saved: {config.out_dir / 'simulation_log.csv'} "
                  f"({csv_writer.rows_written} rows)")

    if config.snapshot_enabled:
        snapshot_path = config.out_dir / 'final_state.png'
        visualizer.save_snapshot(final_state, snapshot_path)
        if not config.quiet:
            print(f"Snapshot saved: {snapshot_path}")

    if config.gif_enabled:
        gif_path = config.out_dir / 'simulation.gif'
        if not config.quiet:
            print(f"Generating GIF ({len(visualizer.frames)} frames)...")
        visualizer.generate_gif(gif_path, fps=10)
        if not config.quiet:
            print(f"Animation saved: {gif_path}")

    if not config.quiet:
        report = reporter.generate_summary(
            engine.get_summary(),
            config.out_dir,
            config.csv_enabled,
            config.snapshot_enabled,
            config.gif_enabled
        )
        print(report)

    return 0


if __name__ == '__main__':
    sys.exit(main())
