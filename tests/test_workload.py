import pytest

from src.theory.time_model import INFINITY, Interval, is_infinite
from src.workloads.jobs import Job, Phase
from src.workloads.workload import Workload


def job(task_id, job_id, arrival, deadline, cost=(1, 1)):
    return Job(
        task_id=task_id,
        job_id=job_id,
        priority=task_id,
        arrival=Interval(*arrival),
        deadline=deadline,
        cost=Interval(*cost),
    )


def sample_workload():
    return Workload([
        job(1, 1, arrival=(5, 6), deadline=15),
        job(2, 1, arrival=(0, 0), deadline=10),
        job(3, 1, arrival=(5, 5), deadline=8),
        job(1, 2, arrival=(20, 22), deadline=30),
    ])


def test_infinity_arithmetic():
    assert INFINITY > 10 ** 18
    assert is_infinite(INFINITY - 1000)
    assert min(INFINITY, 7) - 2 == 5


def test_interval_validation():
    assert Interval(1, 3).contains(1)
    assert 3 in Interval(1, 3)
    assert 4 not in Interval(1, 3)
    with pytest.raises(ValueError):
        Interval(3, 1)


def test_job_properties():
    j = job(1, 1, arrival=(5, 6), deadline=15, cost=(2, 4))
    assert j.earliest_arrival == 5
    assert j.latest_arrival == 6
    assert j.least_cost == 2
    assert j.maximal_cost == 4
    assert j.scheduling_window == Interval(5, 15)
    assert j.phase is None
    with pytest.raises(ValueError):
        job(1, 1, arrival=(0, 0), deadline=5, cost=(-1, 1))


def test_phase_parsing():
    assert Phase.from_job_id(7) is Phase.ACQUISITION
    assert Phase.from_job_id(8) is Phase.RESTITUTION
    assert Phase.parse(" r ") is Phase.RESTITUTION
    assert Phase.parse("acquisition") is Phase.ACQUISITION
    with pytest.raises(ValueError):
        Phase.parse("x")


def test_duplicate_jobs_are_rejected():
    with pytest.raises(ValueError):
        Workload([job(1, 1, (0, 0), 5), job(1, 1, (3, 3), 9)])


def test_index_of():
    workload = sample_workload()
    assert [workload.index_of(j) for j in workload] == [0, 1, 2, 3]
    with pytest.raises(KeyError):
        workload.index_of(job(9, 9, (0, 0), 1))


def test_jobs_by_earliest_arrival_after_is_strict_and_stable():
    workload = sample_workload()
    after_zero = [j.key for j in workload.jobs_by_earliest_arrival_after(0)]
    assert after_zero == [(1, 1), (3, 1), (1, 2)]
    assert [j.key for j in workload.jobs_by_earliest_arrival_after(5)] == [(1, 2)]
    assert list(workload.jobs_by_earliest_arrival_after(20)) == []


def test_jobs_by_window_containing():
    workload = sample_workload()
    assert [j.key for j in workload.jobs_by_window_containing(5)] == [(2, 1), (1, 1), (3, 1)]
    assert [j.key for j in workload.jobs_by_window_containing(12)] == [(1, 1)]
    assert workload.jobs_by_window_containing(17) == []


def test_task_ids():
    assert sample_workload().task_ids == frozenset({1, 2, 3})
