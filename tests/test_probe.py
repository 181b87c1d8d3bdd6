from src.analysis.space import AnalysisSpace
from src.evaluation.probe import PROBE_COLUMNS, probe_policy
from src.policies.null import NullPolicy
from src.policies.precautious_rm import PrecautiousRMPolicy
from src.theory.time_model import Interval
from src.workloads.jobs import Job
from src.workloads.workload import Workload


def sample_workload():
    return Workload([
        Job(task_id=1, job_id=1, priority=1, arrival=Interval(10, 12), deadline=20, cost=Interval(2, 3)),
        Job(task_id=2, job_id=1, priority=2, arrival=Interval(0, 0), deadline=50, cost=Interval(4, 5)),
    ])


def test_probe_precautious_rm():
    workload = sample_workload()
    policy = PrecautiousRMPolicy(AnalysisSpace(workload), workload)
    df = probe_policy(policy, workload)

    assert list(df.columns) == PROBE_COLUMNS
    assert len(df) == 2
    low = df[df["task_id"] == 2].iloc[0]
    assert low["latest_start"] == 12
    assert bool(low["blocks"])
    high = df[df["task_id"] == 1].iloc[0]
    assert not bool(high["blocks"])


def test_probe_null_policy_never_blocks():
    workload = sample_workload()
    df = probe_policy(NullPolicy(AnalysisSpace(workload), workload), workload)
    assert not df["blocks"].any()
