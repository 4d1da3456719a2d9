#!/usr/bin/env python3
"""
Fit a k-nearest-neighbour value function on a toy grid world.

Targets are the discounted values γ^d of each cell, where d is the Manhattan
distance to the goal in the far corner. Only every other cell is used for
training; the printed table shows predictions for the whole grid.
"""
import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fitted_vfa.supervised import (
    KNNConfig,
    NumericVariableFeatures,
    SupervisedVFAInstance,
    get_knn_trainer
)


def grid_instances(size: int, gamma: float):
    """Training instances for the cells whose coordinates sum to an even number."""
    goal = (size - 1, size - 1)
    instances = []
    for x in range(size):
        for y in range(size):
            if (x + y) % 2:
                continue
            distance = abs(goal[0] - x) + abs(goal[1] - y)
            instances.append(SupervisedVFAInstance({'x': x, 'y': y}, gamma ** distance))
    return instances


def format_value_table(vfa, size: int) -> str:
    """Format predicted values as a grid, row y = size-1 on top."""
    lines = []
    for y in reversed(range(size)):
        values = vfa.values({'x': x, 'y': y} for x in range(size))
        lines.append(" ".join(f"{v:6.3f}" for v in values))
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(
        description='Fit a KNN value function on a toy grid world'
    )
    parser.add_argument('--k', type=int, default=4,
                        help='Number of nearest neighbours (default: 4)')
    parser.add_argument('--size', type=int, default=7,
                        help='Grid width and height (default: 7)')
    parser.add_argument('--gamma', type=float, default=0.9,
                        help='Discount factor for target values (default: 0.9)')
    parser.add_argument('--uniform', action='store_true',
                        help='Use unweighted voting instead of inverse-distance weights')
    parser.add_argument('--normalize', action='store_true',
                        help='Min-max scale features before neighbour search')
    parser.add_argument('--verbose', action='store_true',
                        help='Print training log messages')
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = KNNConfig(
        weights='uniform' if args.uniform else 'distance',
        normalize=args.normalize
    )
    trainer = get_knn_trainer(NumericVariableFeatures(['x', 'y']), k=args.k, config=config)

    instances = grid_instances(args.size, args.gamma)
    vfa = trainer.train(instances)

    print(f"\n=== KNN value function ({len(instances)} training cells, k={args.k}) ===")
    print(format_value_table(vfa, args.size))


if __name__ == '__main__':
    main()
