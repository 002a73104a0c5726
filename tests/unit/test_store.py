import copy
import datetime

import pytest

from portal.errors import InvalidTransitionError, NotFoundError, ValidationError
from portal.models import Submission, SubmissionDraft, SubmissionStatus
from portal.store import NOTIFICATION_LOG_SIZE, SubmissionStore, demo_submissions


def _draft(**overrides) -> SubmissionDraft:
    data = {"title": "Logo", "client_email": "c@x.com", "description": "First pass"}
    data.update(overrides)
    return SubmissionDraft(**data)


def test_create_forces_initial_state(store) -> None:
    store.connect_drive()
    submission = store.create(_draft())

    assert submission.status == SubmissionStatus.PENDING
    assert submission.feedback == ""
    assert submission.is_archived is False
    assert submission.drive_linked is True
    assert submission.date == datetime.date.today()
    assert submission.image_url == "https://img.test/placeholder.png"


def test_drive_flag_is_snapshotted_at_creation(store) -> None:
    before = store.create(_draft(title="Before"))
    store.connect_drive()
    after = store.create(_draft(title="After"))

    assert store.get(before.id).drive_linked is False
    assert store.get(after.id).drive_linked is True


def test_create_prepends_and_assigns_unique_ids(store) -> None:
    first = store.create(_draft(title="One"))
    second = store.create(_draft(title="Two"))
    third = store.create(_draft(title="Three"))

    assert [s.title for s in store.submissions] == ["Three", "Two", "One"]
    assert len({first.id, second.id, third.id}) == 3
    assert first.id < second.id < third.id


@pytest.mark.parametrize("overrides", [{"client_email": ""}, {"client_email": "   "}, {"title": ""}])
def test_create_requires_client_email_and_title(store, overrides) -> None:
    with pytest.raises(ValidationError):
        store.create(_draft(**overrides))
    assert store.submissions == []


def test_client_sees_own_submission_with_normalized_email(store) -> None:
    submission = store.create(_draft(client_email="c@x.com", title="Logo"))
    assert submission.status == SubmissionStatus.PENDING

    visible = store.visible("client", "C@X.com ")
    assert [s.id for s in visible] == [submission.id]


def test_client_never_sees_foreign_or_archived_submissions(store) -> None:
    own = store.create(_draft(client_email="c@x.com"))
    archived = store.create(_draft(client_email="c@x.com", title="Old"))
    store.create(_draft(client_email="other@x.com", title="Not yours"))
    store.archive(archived.id)

    visible = store.visible("client", "c@x.com")
    assert [s.id for s in visible] == [own.id]
    assert store.visible("client", None) == []


def test_designer_tabs_partition_the_collection(store) -> None:
    ids = [store.create(_draft(title=f"T{i}")).id for i in range(4)]
    store.archive(ids[1])
    store.archive(ids[3])

    active = {s.id for s in store.visible("designer", tab="active")}
    archived = {s.id for s in store.visible("designer", tab="archived")}

    assert active | archived == set(ids)
    assert active & archived == set()
    assert archived == {ids[1], ids[3]}


def test_approved_submission_cannot_be_rejected_later(store) -> None:
    submission = store.create(_draft())
    store.update_status(submission.id, "approved", "Great")

    with pytest.raises(InvalidTransitionError):
        store.update_status(submission.id, "rejected", "Changed my mind")

    current = store.get(submission.id)
    assert current.status == SubmissionStatus.APPROVED
    assert current.feedback == "Great"


def test_transition_back_to_pending_is_rejected(store) -> None:
    submission = store.create(_draft())
    with pytest.raises(InvalidTransitionError):
        store.update_status(submission.id, "pending", "")
    with pytest.raises(ValidationError):
        store.update_status(submission.id, "shipped", "")
    assert store.get(submission.id).status == SubmissionStatus.PENDING


def test_archive_hides_from_client_and_active_tab(store) -> None:
    submission = store.create(_draft(client_email="c@x.com"))
    store.archive(submission.id)

    assert store.visible("designer", tab="active") == []
    assert store.visible("client", "C@X.com ") == []
    assert [s.id for s in store.visible("designer", tab="archived")] == [submission.id]

    store.unarchive(submission.id)
    assert [s.id for s in store.visible("client", "c@x.com")] == [submission.id]


def test_archive_is_independent_of_status(store) -> None:
    submission = store.create(_draft())
    store.update_status(submission.id, "rejected", "Too dark")
    toggled = store.toggle_archive(submission.id)

    assert toggled.is_archived is True
    assert toggled.status == SubmissionStatus.REJECTED
    assert store.toggle_archive(submission.id).is_archived is False


def test_unknown_ids_raise_not_found(store) -> None:
    for operation in (store.archive, store.unarchive, store.toggle_archive, store.delete, store.get):
        with pytest.raises(NotFoundError):
            operation(404)
    with pytest.raises(NotFoundError):
        store.update_status(404, "approved", "")


def test_delete_removes_submission(store) -> None:
    keep = store.create(_draft(title="Keep"))
    drop = store.create(_draft(title="Drop"))
    store.delete(drop.id)
    assert [s.id for s in store.submissions] == [keep.id]


def test_storage_usage_counts_every_submission() -> None:
    store = SubmissionStore(admin_email="a@b.c", placeholder_image_url="p", storage_limit=100)
    store.create(_draft(file_size=30))
    archived = store.create(_draft(file_size=50))
    store.archive(archived.id)

    assert store.used_storage == 80
    assert store.storage_percentage == 80
    assert store.storage_warning is False

    store.create(_draft(file_size=40))
    assert store.storage_percentage == 100
    assert store.storage_warning is True


def test_notification_log_is_bounded_newest_first(store) -> None:
    for i in range(8):
        store.log_notification(f"line {i}")

    assert len(store.notification_log) == NOTIFICATION_LOG_SIZE
    assert store.notification_log == ["line 7", "line 6", "line 5", "line 4", "line 3"]


def test_session_operations(store) -> None:
    with pytest.raises(ValidationError):
        store.login("  ")
    store.login("c@x.com")
    assert store.view_mode.value == "client"
    store.logout()
    assert store.client_session is None

    with pytest.raises(ValidationError):
        store.set_admin_email("")
    assert store.set_admin_email(" boss@studio.com ") == "boss@studio.com"


def test_current_view_follows_session_fields(store) -> None:
    mine = store.create(_draft(client_email="c@x.com"))
    store.create(_draft(client_email="d@x.com"))

    assert len(store.current_view()) == 2
    store.login("c@x.com")
    assert [s.id for s in store.current_view()] == [mine.id]


def test_demo_seed_serializes_with_original_field_names() -> None:
    store = SubmissionStore(admin_email="a@b.c", placeholder_image_url="p", submissions=demo_submissions())
    created = store.create(_draft())
    assert created.id > 1

    data = store.get(1).model_dump(mode="json", by_alias=True)
    assert data["clientEmail"] == "client@tech.com"
    assert data["isArchived"] is False
    assert data["driveLinked"] is True
    assert data["date"] == "2023-10-25"
    assert Submission.model_validate(data).client_email == "client@tech.com"


def test_session_copies_do_not_share_state(store) -> None:
    submission = store.create(_draft(client_email="c@x.com"))
    session_a = copy.deepcopy(store)
    session_b = copy.deepcopy(store)

    session_a.archive(submission.id)
    session_a.log_notification("line")
    session_a.login("c@x.com")
    session_a.create(_draft(title="Only in A"))

    assert session_b.get(submission.id).is_archived is False
    assert session_b.notification_log == []
    assert session_b.client_session is None
    assert [s.id for s in session_b.submissions] == [submission.id]
    assert store.get(submission.id).is_archived is False
