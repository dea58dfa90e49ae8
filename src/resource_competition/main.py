"""Main entry point for the resource competition viewer."""

import argparse
import logging

from .config import Config
from .renderer import PygameRenderer
from .simulation import World


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="2D resource competition simulation")
    parser.add_argument("--seed", type=int, default=None, help="seed for the first world")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run the resource competition simulation."""
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Load configuration
    config = Config.default()

    # Create world
    world = World.from_config(config.world, args.seed)

    # Create renderer
    renderer = PygameRenderer(config.renderer, max_health=config.world.agent_hp)

    print("Starting resource competition simulation...")
    print(f"  Seed: {world.seed}")
    print(f"  Agents: {len(world.agents)}")
    print(f"  World size: {world.width}x{world.height}")
    print()
    print("Controls:")
    print("  - Click 'Run' or press SPACE to start simulation")
    print("  - Click 'Step' or press S when paused to advance one tick")
    print("  - Click 'Reset' or press R to build a fresh world")
    print("  - ESC to quit")
    print()

    # Main loop
    running = True
    while running:
        # Handle input
        running = renderer.handle_events()

        if renderer.consume_reset():
            world = World.from_config(config.world)
            print(f"Reset: new world with seed {world.seed}")

        # Update simulation if due
        if renderer.should_step():
            world.update()

            if world.stats.agents_alive == 0 and world.stats.deaths_this_tick > 0:
                print(f"All agents have died after {world.tick} ticks.")
                print(f"Total deaths: {world.stats.total_deaths}")
                renderer.pause()

        # Render
        renderer.render(world)

        # Tick
        renderer.tick()

    # Cleanup
    renderer.cleanup()
    print("Simulation ended.")


if __name__ == "__main__":
    main()
