import pandas as pd
import pytest

from src.workloads.jobs import Phase
from src.workloads.loader import jobs_from_dataframe, load_jobs

JOB_SET = """Task ID, Job ID, Arrival min, Arrival max, Cost min, Cost max, Deadline, Priority
1, 1, 0, 0, 1, 2, 10, 1
1, 2, 10, 12, 1, 2, 20, 1
2, 1, 0, 5, 3, 4, 30, 2
"""


def sample_frame():
    return pd.DataFrame({
        "Task ID": [1, 1],
        "Job ID": [1, 2],
        "Arrival min": [0, 5],
        "Arrival max": [0, 5],
        "Cost min": [1, 1],
        "Cost max": [1, 1],
        "Deadline": [5, 10],
        "Priority": [1, 1],
    })


def test_load_jobs_from_csv(tmp_path):
    path = tmp_path / "jobs.csv"
    path.write_text(JOB_SET)

    workload = load_jobs(path)
    assert len(workload) == 3
    assert workload.task_ids == frozenset({1, 2})

    second = workload[1]
    assert second.arrival.min == 10 and second.arrival.max == 12
    assert second.maximal_cost == 2
    assert second.deadline == 20
    assert isinstance(second.deadline, int)
    assert second.phase is None


def test_parity_phases():
    jobs = jobs_from_dataframe(sample_frame(), parity_phases=True)
    assert [j.phase for j in jobs] == [Phase.ACQUISITION, Phase.RESTITUTION]


def test_phase_column_wins_over_parity():
    df = sample_frame()
    df["Phase"] = ["R", "A"]
    jobs = jobs_from_dataframe(df, parity_phases=True)
    assert [j.phase for j in jobs] == [Phase.RESTITUTION, Phase.ACQUISITION]


def test_missing_columns_are_reported():
    df = sample_frame().drop(columns=["Deadline"])
    with pytest.raises(ValueError, match="Deadline"):
        jobs_from_dataframe(df)


def test_dense_time_values_are_kept():
    df = sample_frame()
    df["Deadline"] = [5.5, 10.0]
    jobs = jobs_from_dataframe(df)
    assert jobs[0].deadline == 5.5
    assert jobs[1].deadline == 10
