import json

from gptkit.files import File
from gptkit.fine_tunes import (
    FineTune,
    FineTuneDeleteResponse,
    FineTuneEvent,
    FineTuneEventList,
    FineTuneHyperParams,
    FineTuneList,
    FineTuneRequest,
)

TEST_FINE_TUNE_ID = "fine-tune-id"


def test_empty_request_keeps_only_training_file():
    assert FineTuneRequest().to_dict() == {"training_file": ""}


def test_full_request_to_dict():
    req = FineTuneRequest(
        training_file="file-1",
        validation_file="file-2",
        model="davinci",
        epochs=4,
        batch_size=8,
        learning_rate_multiplier=0.5,
        prompt_loss_rate=0.01,
        compute_classification_metrics=True,
        classification_classes=2,
        classification_positive_class="yes",
        classification_betas=[0.5, 1.0],
        suffix="custom",
    )
    assert req.to_dict() == {
        "training_file": "file-1",
        "validation_file": "file-2",
        "model": "davinci",
        "n_epochs": 4,
        "batch_size": 8,
        "learning_rate_multiplier": 0.5,
        "prompt_loss_rate": 0.01,
        "compute_classification_metrics": True,
        "classification_n_classes": 2,
        "classification_positive_class": "yes",
        "classification_betas": [0.5, 1.0],
        "suffix": "custom",
    }


def test_empty_responses_decode_to_defaults():
    assert FineTuneList.from_dict({}) == FineTuneList()
    assert FineTune.from_dict({}) == FineTune()
    assert FineTuneDeleteResponse.from_dict({}) == FineTuneDeleteResponse()
    assert FineTuneEventList.from_dict({}) == FineTuneEventList()


def test_fine_tune_from_json():
    payload = json.loads(
        json.dumps(
            {
                "id": TEST_FINE_TUNE_ID,
                "object": "fine-tune",
                "model": "curie",
                "created_at": 1614807352,
                "events": [
                    {
                        "object": "fine-tune-event",
                        "created_at": 1614807352,
                        "level": "info",
                        "message": "Job enqueued.",
                    }
                ],
                "fine_tuned_model": None,
                "hyperparams": {
                    "batch_size": 4,
                    "learning_rate_multiplier": 0.1,
                    "n_epochs": 4,
                    "prompt_loss_weight": 0.1,
                },
                "organization_id": "org-123",
                "result_files": [],
                "status": "pending",
                "validation_files": [],
                "training_files": [{"id": "file-abc", "bytes": 1547276}],
                "updated_at": 1614807352,
            }
        )
    )
    tune = FineTune.from_dict(payload)
    assert tune.id == TEST_FINE_TUNE_ID
    assert tune.fine_tuned_model == ""
    assert tune.events == [
        FineTuneEvent("fine-tune-event", 1614807352, "info", "Job enqueued.")
    ]
    assert tune.hyperparams == FineTuneHyperParams(4, 0.1, 4, 0.1)
    assert tune.training_files == [File(id="file-abc", bytes=1547276)]
    assert tune.result_files == []


def test_delete_response_and_event_list():
    deleted = FineTuneDeleteResponse.from_dict(
        {"id": TEST_FINE_TUNE_ID, "object": "fine-tune", "deleted": True}
    )
    assert deleted == FineTuneDeleteResponse(TEST_FINE_TUNE_ID, "fine-tune", True)
    events = FineTuneEventList.from_dict(
        {"object": "list", "data": [{"level": "warn", "message": "m"}]}
    )
    assert events.object == "list"
    assert events.data == [FineTuneEvent(level="warn", message="m")]


def test_fine_tune_list():
    listing = FineTuneList.from_dict({"object": "list", "data": [{"id": "a"}, {"id": "b"}]})
    assert [t.id for t in listing.data] == ["a", "b"]