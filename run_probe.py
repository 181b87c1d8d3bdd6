#!/usr/bin/env python3
"""Probe an idle-time insertion policy on a job set.

Usage:
    python run_probe.py --jobs jobs.csv --policy p-rm [--cores 2] [--output results/probe.csv]

Every job is queried at its earliest arrival with an empty scheduled set; the
resulting latest start times are printed and optionally written as CSV.

Schema: task_id,job_id,priority,phase,now,latest_start,blocks
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

import argparse

from src.analysis.space import AnalysisSpace
from src.evaluation.config import AnalysisConfig, load_config
from src.evaluation.probe import probe_policy
from src.policies.registry import available_policies, make_policy
from src.utils.io import write_dataframe
from src.utils.logger import configure_logger, get_logger
from src.workloads.loader import load_jobs

LOGGER = get_logger("experiments.probe")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--jobs", type=Path, required=True, help="Job-set CSV file")
    parser.add_argument("--policy", choices=available_policies(), default=None)
    parser.add_argument("--cores", type=int, default=None, help="Number of cores")
    parser.add_argument("--config", type=Path, default=None, help="JSON run configuration")
    parser.add_argument("--output", type=Path, default=None, help="Write the probe table here")
    parser.add_argument(
        "--parity-phases",
        action="store_true",
        default=None,
        help="Derive AER phases from job-id parity when the CSV has no Phase column",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log policy decisions")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    config = load_config(args.config) if args.config else AnalysisConfig()
    config = config.merged(
        policy=args.policy,
        num_cores=args.cores,
        parity_phases=args.parity_phases,
        log_level="DEBUG" if args.verbose else None,
    )
    configure_logger(level=config.log_level)

    workload = load_jobs(args.jobs, parity_phases=config.parity_phases)
    space = AnalysisSpace(workload, num_cores=config.num_cores)
    policy = make_policy(config.policy, space, workload)

    df = probe_policy(policy, workload)
    print(df.to_string(index=False))

    if args.output:
        write_dataframe(df, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
