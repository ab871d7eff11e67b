import pytest

from gptkit.fine_tunes import FineTuneEvent
from gptkit.fine_tuning_job import (
    FineTuningJob,
    FineTuningJobEvent,
    FineTuningJobEventList,
    FineTuningJobRequest,
    Hyperparameters,
    fine_tuning_job_events_path,
)

TEST_JOB_ID = "fine-tuning-job-id"


def test_job_from_dict():
    job = FineTuningJob.from_dict(
        {
            "object": "fine_tuning.job",
            "id": TEST_JOB_ID,
            "model": "davinci-002",
            "created_at": 1692661014,
            "finished_at": 1692661190,
            "fine_tuned_model": "ft:davinci-002:my-org:custom_suffix:7q8mpxmy",
            "organization_id": "org-123",
            "result_files": ["file-abc123"],
            "status": "succeeded",
            "validation_file": None,
            "training_file": "file-abc123",
            "hyperparameters": {
                "n_epochs": "auto",
                "learning_rate_multiplier": "auto",
                "batch_size": "auto",
            },
            "trained_tokens": 5768,
        }
    )
    assert job == FineTuningJob(
        id=TEST_JOB_ID,
        object="fine_tuning.job",
        created_at=1692661014,
        finished_at=1692661190,
        model="davinci-002",
        fine_tuned_model="ft:davinci-002:my-org:custom_suffix:7q8mpxmy",
        organization_id="org-123",
        status="succeeded",
        hyperparameters=Hyperparameters("auto", "auto", "auto"),
        training_file="file-abc123",
        validation_file="",
        result_files=["file-abc123"],
        trained_tokens=5768,
    )


def test_empty_job_decodes_to_defaults():
    assert FineTuningJob.from_dict({}) == FineTuningJob()
    assert FineTuningJobEventList.from_dict({}) == FineTuningJobEventList()


def test_hyperparameters_round_trip():
    params = Hyperparameters(epochs=3, learning_rate_multiplier="auto", batch_size=0)
    assert params.to_dict() == {
        "n_epochs": 3,
        "learning_rate_multiplier": "auto",
        "batch_size": 0,
    }
    assert Hyperparameters.from_dict(params.to_dict()) == params
    assert Hyperparameters().to_dict() == {}


def test_request_to_dict():
    assert FineTuningJobRequest().to_dict() == {"training_file": ""}
    req = FineTuningJobRequest(
        training_file="file-1",
        validation_file="file-2",
        model="gpt-3.5-turbo",
        hyperparameters=Hyperparameters(epochs=2),
        suffix="mine",
    )
    assert req.to_dict() == {
        "training_file": "file-1",
        "validation_file": "file-2",
        "model": "gpt-3.5-turbo",
        "hyperparameters": {"n_epochs": 2},
        "suffix": "mine",
    }


def test_event_list_and_event():
    events = FineTuningJobEventList.from_dict(
        {
            "object": "list",
            "data": [{"object": "fine_tuning.job.event", "level": "info", "message": "ok"}],
            "has_more": True,
        }
    )
    assert events.has_more is True
    assert events.data == [FineTuneEvent("fine_tuning.job.event", 0, "info", "ok")]

    event = FineTuningJobEvent.from_dict(
        {"id": "ev-1", "created_at": 5, "data": {"step": 1}, "type": "metrics"}
    )
    assert event == FineTuningJobEvent(
        id="ev-1", created_at=5, data={"step": 1}, type="metrics"
    )


@pytest.mark.parametrize(
    ("after", "limit", "expected"),
    [
        (None, None, "/fine_tuning/jobs/fine-tuning-job-id/events"),
        ("last-event-id", None, "/fine_tuning/jobs/fine-tuning-job-id/events?after=last-event-id"),
        (None, 10, "/fine_tuning/jobs/fine-tuning-job-id/events?limit=10"),
        (
            "last-event-id",
            10,
            "/fine_tuning/jobs/fine-tuning-job-id/events?after=last-event-id&limit=10",
        ),
    ],
)
def test_events_path(after, limit, expected):
    assert fine_tuning_job_events_path(TEST_JOB_ID, after, limit) == expected


def test_events_path_escapes_values():
    path = fine_tuning_job_events_path("job", after="a b&c")
    assert path == "/fine_tuning/jobs/job/events?after=a+b%26c"