"""Tests for dedup.py — seen-jobs persistence and new-job detection."""

import json

from dedup import find_new_jobs, load_seen_jobs, save_seen_jobs


# --- load / save ---


def test_missing_file_is_empty(seen_path):
    assert load_seen_jobs(seen_path) == set()


def test_invalid_json_is_empty(seen_path):
    with open(seen_path, "w") as f:
        f.write("{not json")
    assert load_seen_jobs(seen_path) == set()


def test_non_list_json_is_empty(seen_path):
    with open(seen_path, "w") as f:
        json.dump({"https://jobs.wordpress.net/job/1": True}, f)
    assert load_seen_jobs(seen_path) == set()


def test_round_trip(seen_path):
    """Saving then loading yields the same membership."""
    seen = {"https://jobs.wordpress.net/job/2", "https://jobs.wordpress.net/job/1"}
    save_seen_jobs(seen, seen_path)
    assert load_seen_jobs(seen_path) == seen


def test_saved_as_pretty_json_array(seen_path):
    save_seen_jobs({"b", "a"}, seen_path)
    with open(seen_path) as f:
        content = f.read()
    assert json.loads(content) == ["a", "b"]
    assert content == '[\n  "a",\n  "b"\n]'


def test_save_overwrites(seen_path):
    save_seen_jobs({"a", "b", "c"}, seen_path)
    save_seen_jobs({"d"}, seen_path)
    assert load_seen_jobs(seen_path) == {"d"}


# --- find_new_jobs ---


def test_unseen_jobs_returned_in_order(make_job):
    jobs = [
        make_job(link="https://jobs.wordpress.net/job/3"),
        make_job(link="https://jobs.wordpress.net/job/1"),
        make_job(link="https://jobs.wordpress.net/job/2"),
    ]
    new = find_new_jobs(jobs, {"https://jobs.wordpress.net/job/1"})
    assert [job.id for job in new] == [
        "https://jobs.wordpress.net/job/3",
        "https://jobs.wordpress.net/job/2",
    ]


def test_all_seen_returns_empty(make_job):
    jobs = [make_job(link="https://jobs.wordpress.net/job/1")]
    assert find_new_jobs(jobs, {"https://jobs.wordpress.net/job/1"}) == []


def test_empty_seen_returns_everything(make_job):
    jobs = [make_job(link="https://jobs.wordpress.net/job/1"), make_job(link="https://jobs.wordpress.net/job/2")]
    assert find_new_jobs(jobs, set()) == jobs


def test_identity_is_the_url(make_job):
    """A retitled posting at a known URL is not new."""
    job = make_job(link="https://jobs.wordpress.net/job/1", title="Renamed Role")
    assert find_new_jobs([job], {"https://jobs.wordpress.net/job/1"}) == []


def test_duplicates_within_run_kept(make_job):
    job = make_job()
    assert len(find_new_jobs([job, job], set())) == 2


def test_seen_set_not_mutated(make_job):
    seen = {"https://jobs.wordpress.net/job/9"}
    find_new_jobs([make_job()], seen)
    assert seen == {"https://jobs.wordpress.net/job/9"}
