#!/usr/bin/env python3
"""
Minefield Escape - Main entry point.

Usage:
    python main.py play [--seed S] [--mines N]
    python main.py route [--seed S] [--mines N]
    python main.py evaluate [--agent {random,route}]
    python main.py compare
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import (  # noqa: E402
    BoardConfig,
    GamePhase,
    LandingResult,
    MinefieldError,
    apply_move,
    create_initial_state,
    escape_route,
    generate,
    get_directional_target,
)
from agents import RandomAgent, RouteAgent  # noqa: E402
from training import Evaluator  # noqa: E402


def board_config(args: argparse.Namespace) -> BoardConfig:
    """Build a board configuration from command-line flags."""
    return BoardConfig(
        seed=args.seed,
        cols=args.cols,
        rows=args.rows,
        mine_count=args.mines,
    )


def render_board(board, state=None, route=None, reveal=False) -> str:
    """Render a board as text, one character per cell."""
    route_cells = set(route or ())
    lines = []
    for row in range(board.rows):
        row_str = ""
        for col in range(board.cols):
            index = row * board.cols + col
            if state is not None and index == state.current_index:
                char = "X" if state.is_dead else "@"
            elif index == board.goal_index:
                char = "G"
            elif reveal and board.is_mine(index):
                char = "*"
            elif index in route_cells:
                char = "+"
            elif state is not None and index in state.visited_safe:
                char = "o"
            else:
                char = "."
            row_str += char + " "
        lines.append(row_str)
    return "\n".join(lines)


def play(args: argparse.Namespace) -> None:
    """Play a round with direction keys on the terminal."""
    try:
        board = generate(board_config(args))
    except MinefieldError as error:
        print(f"Could not build a board: {error}")
        return

    state = create_initial_state(board.start_index)
    print(f"Board seed {board.seed} | {board.mine_count} mines")
    print("Keys: w/a/s/d move, q/e/z/c move diagonally, h hint, x quit")

    while not state.is_terminal:
        print()
        print(render_board(board, state))
        key = input("> ").strip().lower()
        if key == "x":
            return
        if key == "h":
            path = escape_route(board, state.current_index)
            if path is None:
                print("No escape route on this board.")
            else:
                print(render_board(board, state, path))
                print(f"Shortest escape route: {len(path) - 1} moves")
            continue

        target = get_directional_target(
            state.current_index, key, board.cols, board.rows
        )
        landing = None if target is None else apply_move(board, state, target)
        if landing is None:
            print("You can only move one cell, diagonals included.")
        elif landing == LandingResult.SAFE:
            print(f"Tile {board.tiles[target].id} is safe.")

    print()
    print(render_board(board, state, reveal=True))
    if state.phase == GamePhase.CLEAR:
        print(f"Escaped in {state.steps} moves!")
    else:
        tile_id = board.tiles[state.current_index].id
        print(f"Mine triggered on tile {tile_id} after {state.steps} moves.")


def route(args: argparse.Namespace) -> None:
    """Print a board with its shortest escape route."""
    try:
        board = generate(board_config(args))
    except MinefieldError as error:
        print(f"Could not build a board: {error}")
        return

    path = escape_route(board)
    print(f"Board seed {board.seed} | {board.mine_count} mines")
    print(render_board(board, route=path, reveal=args.reveal))
    if path is None:
        print("No escape route on this board.")
    else:
        print(f"Shortest escape route: {len(path) - 1} moves")
        print(" -> ".join(str(board.tiles[i].id) for i in path))


def make_agent(name: str, config: BoardConfig):
    """Create an agent by name."""
    if name == "random":
        return RandomAgent(config.rows, config.cols), "Random"
    return RouteAgent(config.rows, config.cols), "Route"


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate a specific agent."""
    config = board_config(args)
    agent, name = make_agent(args.agent, config)
    evaluate_agent(agent, name, config, args.games)


def evaluate_agent(
    agent,
    name: str,
    config: BoardConfig = None,
    num_episodes: int = 100,
) -> None:
    """Evaluate a single agent and print results."""
    config = config or BoardConfig()
    evaluator = Evaluator(config, num_episodes=num_episodes)

    print(f"\nEvaluating {name} over {num_episodes} games...")
    results = evaluator.evaluate(agent)

    print(f"Results for {name}:")
    print(f"  Clear rate: {results['clear_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg visited: {results['avg_visited']:.1f} cells")


def compare(args: argparse.Namespace) -> None:
    """Compare all agents."""
    config = board_config(args)

    agents = {
        "Random": RandomAgent(config.rows, config.cols),
        "Route": RouteAgent(config.rows, config.cols),
    }

    evaluator = Evaluator(config, num_episodes=args.games)
    results = evaluator.compare(agents)

    print("\n" + "=" * 50)
    print("Agent Comparison Results")
    print("=" * 50)
    print(f"{'Agent':<20} {'Clear Rate':<12} {'Avg Reward':<12} {'Avg Steps':<10}")
    print("-" * 50)

    for name, metrics in results.items():
        print(
            f"{name:<20} {metrics['clear_rate']:>10.1%} "
            f"{metrics['avg_reward']:>10.2f} "
            f"{metrics['avg_steps']:>10.1f}"
        )


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add board configuration flags to a subcommand."""
    defaults = BoardConfig()
    parser.add_argument("--seed", default=None, help="Board seed")
    parser.add_argument(
        "--cols", type=int, default=defaults.cols, help="Number of columns"
    )
    parser.add_argument(
        "--rows", type=int, default=defaults.rows, help="Number of rows"
    )
    parser.add_argument(
        "--mines", type=int, default=defaults.mine_count, help="Number of mines"
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield Escape - Generate boards and play rounds"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a round")
    add_board_arguments(play_parser)

    # Route command
    route_parser = subparsers.add_parser(
        "route", help="Show a board and its escape route"
    )
    add_board_arguments(route_parser)
    route_parser.add_argument(
        "--reveal", action="store_true", help="Show mine positions"
    )

    # Evaluate command
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate an agent")
    add_board_arguments(eval_parser)
    eval_parser.add_argument(
        "--agent",
        choices=["random", "route"],
        default="route",
        help="Agent to evaluate",
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    # Compare command
    compare_parser = subparsers.add_parser("compare", help="Compare all agents")
    add_board_arguments(compare_parser)
    compare_parser.add_argument(
        "--games", type=int, default=100, help="Number of games per agent"
    )

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    elif args.command == "route":
        route(args)
    elif args.command == "evaluate":
        evaluate(args)
    elif args.command == "compare":
        compare(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
