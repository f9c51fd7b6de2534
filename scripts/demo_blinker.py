#!/usr/bin/env python3
"""
Blinker Oscillation Demonstration Script

Runs a period-2 blinker on a small toroidal frame with the Game of Life rule
and logs the live cells of every generation.
"""

import sys
import os
import logging

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from cellframe.life import game_of_life, life_frame, live_cells

logger = logging.getLogger(__name__)


def run_blinker_demo(width=4, height=4, steps=4):
    """Run the blinker and return the live cell sets of every generation."""
    logger.info("=== BLINKER DEMONSTRATION ===")
    logger.info(f"Frame size: {width}x{height}")
    logger.info(f"Evolution steps: {steps}")

    frame = life_frame(width, height, alive=[(1, 0), (1, 1), (1, 2)])
    history = [live_cells(frame)]
    logger.info(f"Step 0: live={sorted(history[0])}")

    for step, generation in enumerate(frame.generations(game_of_life), start=1):
        if step > steps:
            break
        history.append(live_cells(generation))
        logger.info(f"Step {step}: live={sorted(history[-1])}")

    period_2 = all(history[i] == history[i + 2] for i in range(len(history) - 2))
    logger.info(f"Period-2 oscillation: {'YES' if period_2 else 'NO'}")
    return history


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Blinker Oscillation Demonstration")
    parser.add_argument("--width", type=int, default=4, help="Frame width")
    parser.add_argument("--height", type=int, default=4, help="Frame height")
    parser.add_argument("--steps", type=int, default=4, help="Evolution steps")
    parser.add_argument("--log-level", default="INFO", help="Logging level")

    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        run_blinker_demo(args.width, args.height, args.steps)
    except Exception as e:
        logger.error(f"Demonstration failed: {e}")
        sys.exit(1)
