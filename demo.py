#!/usr/bin/env python3
"""Watch an agent escape the minefield."""
import os
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import BoardConfig, MinefieldEnv  # noqa: E402
from agents import RandomAgent, RouteAgent  # noqa: E402


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, mines: int = 10, agent_name: str = "route"):
    """Run demo games with visualization."""
    config = BoardConfig(mine_count=mines)
    env = MinefieldEnv(config=config, render_mode="ansi")
    agent_cls = RouteAgent if agent_name == "route" else RandomAgent
    agent = agent_cls(config.rows, config.cols)

    print(f"Board: {config.cols}x{config.rows} with {mines} mines")
    print("Starting in 2 seconds...")
    time.sleep(2)

    clears = 0

    for game in range(games):
        obs, info = env.reset(seed=game)
        agent.reset()

        clear_screen()
        print(f"=== Game {game + 1}/{games} | Board seed {info['board_seed']} ===")
        print(f"Clears so far: {clears}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done and step < 100:
            valid_actions = env.get_action_mask()
            action = agent.select_action(obs, valid_actions, info)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Clears so far: {clears}")
            print(f"Last reward: {reward}\n")
            print(env.render())

            if done:
                if info.get("phase") == "clear":
                    clears += 1
                    print(f"\n*** ESCAPED! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {clears}/{games} escapes ({100*clears/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--agent", choices=["random", "route"], default="route")
    args = parser.parse_args()

    demo(delay=args.delay, games=args.games, mines=args.mines, agent_name=args.agent)
