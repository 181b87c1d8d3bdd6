import pytest

from src.analysis.errors import ContractViolation
from src.analysis.space import AnalysisSpace, IndexSet, ResponseTimeTable
from src.theory.time_model import Interval
from src.workloads.jobs import Job
from src.workloads.workload import Workload


def sample_workload():
    return Workload([
        Job(task_id=1, job_id=1, priority=1, arrival=Interval(0, 0), deadline=10, cost=Interval(1, 2)),
        Job(task_id=2, job_id=1, priority=2, arrival=Interval(3, 3), deadline=20, cost=Interval(2, 3)),
    ])


def test_index_set_is_immutable():
    empty = IndexSet()
    one = empty.with_index(1)
    assert 1 not in empty
    assert 1 in one
    assert one.contains(1)
    assert len(one.with_index(1)) == 1
    assert list(IndexSet([3, 0])) == [0, 3]
    assert IndexSet([0, 1]) == IndexSet([1, 0])


def test_response_times_are_write_once():
    workload = sample_workload()
    table = ResponseTimeTable()
    table.finalize(workload[0], Interval(1, 2))

    assert workload[0] in table
    assert table[workload[0]] == Interval(1, 2)
    assert len(table) == 1
    with pytest.raises(ContractViolation):
        table.finalize(workload[0], Interval(1, 3))


def test_reading_unfinalized_response_time_fails_fast():
    workload = sample_workload()
    table = ResponseTimeTable()
    assert not table.is_final(workload[1])
    with pytest.raises(ContractViolation):
        table[workload[1]]


def test_incomplete_follows_scheduled_set():
    workload = sample_workload()
    space = AnalysisSpace(workload, num_cores=2)
    assert space.num_cores == 2
    assert space.incomplete(IndexSet(), workload[0])
    assert not space.incomplete(IndexSet([0]), workload[0])
    assert space.incomplete(IndexSet([0]), workload[1])


def test_space_forwards_workload_indices():
    workload = sample_workload()
    space = AnalysisSpace(workload)
    assert space.jobs_by_window_containing(5) == [workload[0], workload[1]]
    assert list(space.jobs_by_earliest_arrival_after(0)) == [workload[1]]


def test_space_requires_a_core():
    with pytest.raises(ValueError):
        AnalysisSpace(sample_workload(), num_cores=0)
