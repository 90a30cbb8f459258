from pathlib import Path

import pytest

from scheduler_sim.errors import InvalidInput
from scheduler_sim.models import Process
from scheduler_sim.workload_io import (
    load_workload,
    prompt_process_count,
    prompt_processes,
    prompt_quantum,
)


def _answers(*lines):
    it = iter(lines)
    return lambda prompt: next(it)


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"arrival_time":0,"burst_time":3,"name":"A"},'
                 '{"arrival_time":1,"burst_time":2}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert [q.pid for q in procs] == [1, 2]
    assert procs[1].arrival_time == 1
    assert procs[1].remaining_time == 2


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("arrival_time,burst_time\n0,3\n4,2\n")
    procs = load_workload(p)
    assert [(q.pid, q.arrival_time, q.burst_time) for q in procs] == [(1, 0, 3), (2, 4, 2)]


def test_load_rejects_missing_field(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("arrival_time,burst_time\n0,\n")
    with pytest.raises(InvalidInput):
        load_workload(p)


def test_load_rejects_non_positive_burst(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"arrival_time":0,"burst_time":0}]')
    with pytest.raises(InvalidInput):
        load_workload(p)


def test_load_rejects_empty_workload(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text("[]")
    with pytest.raises(InvalidInput):
        load_workload(p)


def test_load_rejects_malformed_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text("{not json")
    with pytest.raises(InvalidInput):
        load_workload(p)


def test_load_rejects_unknown_suffix(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("0 3\n")
    with pytest.raises(InvalidInput):
        load_workload(p)


def test_load_rejects_missing_file(tmp_path: Path):
    with pytest.raises(InvalidInput):
        load_workload(tmp_path / "nope.json")


def test_prompt_reads_processes_in_order():
    ask = _answers("3", "0 5", " 1  3 ", "2 8", "2")
    n = prompt_process_count(ask)
    procs = prompt_processes(ask, n)
    assert [(p.pid, p.arrival_time, p.burst_time) for p in procs] == [(1, 0, 5), (2, 1, 3), (3, 2, 8)]
    assert prompt_quantum(ask) == 2


@pytest.mark.parametrize("text", ["0", "-2", "three"])
def test_prompt_rejects_bad_count(text):
    with pytest.raises(InvalidInput):
        prompt_process_count(_answers(text))


@pytest.mark.parametrize("line", ["0", "0 x", "0 0", "-1 4", "1 2 3"])
def test_prompt_rejects_bad_process_line(line):
    with pytest.raises(InvalidInput):
        prompt_processes(_answers(line), 1)


@pytest.mark.parametrize("text", ["0", "-1", "1.5"])
def test_prompt_rejects_bad_quantum(text):
    with pytest.raises(InvalidInput):
        prompt_quantum(_answers(text))
