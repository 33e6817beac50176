import json
import pytest

from feedbox.errors import StorageError
from feedbox.models.user import User
from feedbox.services.feedback_service import FeedbackStore
from feedbox.storage.keys import StorageKeys
from feedbox.storage.memory import MemoryStorage

STATUSES = ["pending", "accepted", "denied"]


class FlakyStorage(MemoryStorage):
    """Memory storage whose writes can be switched off."""

    def __init__(self):
        super().__init__()
        self.fail_writes = False
        self.writes = 0

    def save(self, key, value):
        if self.fail_writes:
            raise StorageError("disk full", key=key)
        self.writes += 1
        super().save(key, value)


@pytest.fixture()
def storage():
    return FlakyStorage()


@pytest.fixture()
def store(storage):
    return FeedbackStore(storage, StorageKeys("afb_"))


@pytest.fixture()
def alice():
    return User(id="stu_alice@x.com", role="student", name="Anonymous123", email="alice@x.com", avatar="🧑🏻")


@pytest.fixture()
def bob():
    return User(id="stu_bob@x.com", role="student", name="Anonymous124", email="bob@x.com")


def persisted(storage):
    return json.loads(storage.load("afb_feedbacks"))


def test_submit_prepends_pending_record(store, alice):
    first = store.submit(alice, "faculty", "More office hours")
    second = store.submit(alice, "sports", "Fix the court lights")

    items = store.list_all()
    assert [f.id for f in items] == [second.id, first.id]
    assert first.status == "pending"
    assert first.votes == [] and first.comments == []
    assert first.author_id == alice.id
    assert first.author_name == "Anonymous123"
    assert first.author_avatar == "🧑🏻"
    assert first.id.startswith("fb_")


def test_submit_persists_whole_collection(store, storage, alice):
    store.submit(alice, "faculty", "one")
    store.submit(alice, "faculty", "two")
    data = persisted(storage)
    assert [d["content"] for d in data] == ["two", "one"]
    assert data[0]["status"] == "pending"
    assert "customCategory" not in data[0]


@pytest.mark.parametrize("content", ["", "   ", "\n\t"])
def test_blank_content_is_ignored(store, storage, alice, content):
    assert store.submit(alice, "faculty", content) is None
    assert store.list_all() == []
    assert storage.writes == 0


def test_submit_strips_content(store, alice):
    fb = store.submit(alice, "faculty", "  padded  ")
    assert fb.content == "padded"


def test_custom_category_only_kept_for_others(store, alice):
    wifi = store.submit(alice, "others", "Wifi is slow", custom_category="Wifi")
    ignored = store.submit(alice, "faculty", "Good lectures", custom_category="Wifi")
    blank = store.submit(alice, "others", "Misc", custom_category="   ")

    assert wifi.category == "others" and wifi.custom_category == "Wifi"
    assert ignored.custom_category is None
    assert blank.custom_category is None


def test_filter_by_custom_topic_not_base_category(store, alice):
    wifi = store.submit(alice, "others", "Wifi is slow", custom_category="Wifi")
    plain_other = store.submit(alice, "others", "Something else")
    store.submit(alice, "faculty", "Good lectures")

    assert [f.id for f in store.filter_by_category("Wifi")] == [wifi.id]
    assert [f.id for f in store.filter_by_category("others")] == [plain_other.id]
    assert len(store.filter_by_category("all")) == 3
    assert store.filter_by_category("sports") == []


def test_toggle_vote_is_an_involution(store, alice, bob):
    fb = store.submit(alice, "faculty", "More office hours")
    store.toggle_vote(fb.id, bob.id)
    before = list(fb.votes)

    store.toggle_vote(fb.id, alice.id)
    assert fb.votes == [bob.id, alice.id]
    store.toggle_vote(fb.id, alice.id)
    assert fb.votes == before


def test_toggle_vote_unknown_id_is_noop(store, storage, alice):
    store.submit(alice, "faculty", "x")
    writes = storage.writes
    assert store.toggle_vote("fb_missing", alice.id) is None
    assert storage.writes == writes


def test_add_comment_appends_in_order(store, storage, alice, bob):
    fb = store.submit(alice, "faculty", "More office hours")
    c1 = store.add_comment(fb.id, bob, "Agreed")
    c2 = store.add_comment(fb.id, alice, "Thanks")

    assert [c.id for c in fb.comments] == [c1.id, c2.id]
    assert c1.author_name == "Anonymous124"
    assert c1.id.startswith("c_")
    assert [c["text"] for c in persisted(storage)[0]["comments"]] == ["Agreed", "Thanks"]


def test_add_comment_noops(store, storage, alice):
    fb = store.submit(alice, "faculty", "x")
    writes = storage.writes
    assert store.add_comment("fb_missing", alice, "hello") is None
    assert store.add_comment(fb.id, alice, "   ") is None
    assert fb.comments == []
    assert storage.writes == writes


@pytest.mark.parametrize("start", STATUSES)
@pytest.mark.parametrize("target", STATUSES)
def test_every_status_transition_is_allowed(store, alice, start, target):
    fb = store.submit(alice, "faculty", "x")
    store.set_status(fb.id, start)
    store.set_status(fb.id, target)
    assert store.get(fb.id).status == target
    store.set_status(fb.id, target)
    assert store.get(fb.id).status == target


def test_set_status_rejects_unknown_status(store, alice):
    fb = store.submit(alice, "faculty", "x")
    with pytest.raises(ValueError):
        store.set_status(fb.id, "archived")
    assert fb.status == "pending"


def test_set_status_unknown_id_is_noop(store):
    assert store.set_status("fb_missing", "accepted") is None


def test_aggregate_by_category(store, alice):
    a = store.submit(alice, "faculty", "a")
    store.submit(alice, "faculty", "b")
    c = store.submit(alice, "others", "c", custom_category="Wifi")
    store.submit(alice, "sports", "d")
    store.submit(alice, "faculty", "e")
    store.set_status(a.id, "accepted")
    store.set_status(c.id, "denied")

    aggregate = store.aggregate_by_category()
    assert list(aggregate)[0] == "faculty"
    assert aggregate["faculty"] == {"pending": 2, "accepted": 1, "denied": 0, "total": 3}
    assert aggregate["Wifi"] == {"pending": 0, "accepted": 0, "denied": 1, "total": 1}
    assert "others" not in aggregate
    assert sum(b["total"] for b in aggregate.values()) == len(store.list_all())
    for bucket in aggregate.values():
        assert bucket["pending"] + bucket["accepted"] + bucket["denied"] == bucket["total"]


def test_status_counts(store, alice):
    a = store.submit(alice, "faculty", "a")
    store.submit(alice, "faculty", "b")
    store.set_status(a.id, "denied")
    assert store.status_counts() == {"pending": 1, "accepted": 0, "denied": 1, "total": 2}


def test_categories_list(store, alice):
    store.submit(alice, "others", "a", custom_category="Wifi")
    store.submit(alice, "others", "b", custom_category="Parking")
    store.submit(alice, "others", "c", custom_category="Wifi")

    assert store.categories() == [
        "all", "faculty", "food and mess", "sports", "academics", "facilities", "others",
        "Wifi", "Parking",
    ]


def test_list_by_author_and_notifications(store, alice, bob):
    mine = store.submit(alice, "faculty", "x" * 100)
    store.submit(bob, "faculty", "not mine")
    store.set_status(mine.id, "accepted")

    assert [f.id for f in store.list_by_author(alice.id)] == [mine.id]
    notes = store.notifications_for(alice.id)
    assert notes == [{"id": mine.id, "text": "x" * 80, "status": "accepted"}]


def test_reload_reads_persisted_snapshot(storage, alice):
    keys = StorageKeys("afb_")
    writer = FeedbackStore(storage, keys)
    fb = writer.submit(alice, "others", "Wifi is slow", custom_category="Wifi")
    writer.add_comment(fb.id, alice, "still slow")
    writer.toggle_vote(fb.id, alice.id)

    reader = FeedbackStore(storage, keys)
    loaded = reader.get(fb.id)
    assert loaded.to_dict() == fb.to_dict()


def test_corrupt_snapshot_starts_empty(storage):
    storage.save("afb_feedbacks", "{not json")
    store = FeedbackStore(storage, StorageKeys("afb_"))
    assert store.list_all() == []


def test_failed_write_keeps_previous_snapshot(store, storage, alice):
    first = store.submit(alice, "faculty", "kept")
    storage.fail_writes = True

    with pytest.raises(StorageError):
        store.submit(alice, "faculty", "only in memory")

    # in-memory copy has the change, the persisted snapshot does not
    assert len(store.list_all()) == 2
    assert [d["id"] for d in persisted(storage)] == [first.id]

    # next successful write brings the snapshot up to date
    storage.fail_writes = False
    store.toggle_vote(first.id, alice.id)
    assert len(persisted(storage)) == 2


def test_reload_picks_up_external_writes(storage, alice):
    keys = StorageKeys("afb_")
    mine = FeedbackStore(storage, keys)
    assert mine.list_all() == []

    FeedbackStore(storage, keys).submit(alice, "sports", "written elsewhere")
    assert mine.list_all() == []
    mine.reload()
    assert [f.content for f in mine.list_all()] == ["written elsewhere"]


def test_snapshot_with_unknown_status_starts_empty(storage):
    storage.save("afb_feedbacks", json.dumps([{
        "id": "fb_1", "authorId": "stu_a@x.com", "authorName": "Anonymous123",
        "category": "faculty", "content": "x", "status": "archived",
        "votes": [], "comments": [], "createdAt": 1,
    }]))
    store = FeedbackStore(storage, StorageKeys("afb_"))

    assert store.list_all() == []
    assert store.status_counts() == {"pending": 0, "accepted": 0, "denied": 0, "total": 0}
    assert store.aggregate_by_category() == {}
