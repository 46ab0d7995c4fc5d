from datetime import datetime, timezone

import pytest

from estudos.polls.models import Poll, PollOption
from estudos.polls.storage import OptionNotFound, PollNotFound, PollStore

START = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)
END = datetime(2024, 3, 8, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def store():
    with PollStore(":memory:") as s:
        yield s


def _poll(title="Lunch"):
    return Poll(title=title, start_date=START, end_date=END,
                options=[PollOption(description=d) for d in ("Pizza", "Soup", "Salad")])


def test_create_assigns_ids(store):
    poll = store.create(_poll())
    assert poll.id >= 1
    assert all(option.poll_id == poll.id for option in poll.options)
    assert len({option.id for option in poll.options}) == 3
    assert poll.updated_at == poll.created_at


def test_get_returns_stored_poll(store):
    poll = store.create(_poll())
    assert store.get(poll.id) == poll
    assert store.get(str(poll.id)) == poll


def test_list_all_in_creation_order(store):
    first = store.create(_poll("one"))
    second = store.create(_poll("two"))
    assert store.list_all() == [first, second]


@pytest.mark.parametrize("poll_id", [99, "abc", None])
def test_get_missing_raises(store, poll_id):
    with pytest.raises(PollNotFound):
        store.get(poll_id)


def test_delete_hides_poll(store):
    poll = store.create(_poll())
    assert store.delete(poll.id) is True
    with pytest.raises(PollNotFound):
        store.get(poll.id)
    assert store.list_all() == []
    assert store.delete(poll.id) is False


def test_delete_non_integer_id_raises(store):
    with pytest.raises(PollNotFound):
        store.delete("abc")


def test_vote_increments_and_persists(store):
    poll = store.create(_poll())
    target = poll.options[1]
    assert store.vote(poll.id, target.id).votes == 1
    assert store.vote(str(poll.id), str(target.id)).votes == 2
    votes = {o.id: o.votes for o in store.get(poll.id).options}
    assert votes == {poll.options[0].id: 0, target.id: 2, poll.options[2].id: 0}


def test_vote_for_option_of_other_poll_raises(store):
    first = store.create(_poll("one"))
    second = store.create(_poll("two"))
    with pytest.raises(OptionNotFound):
        store.vote(second.id, first.options[0].id)


def test_vote_with_bad_ids_raises(store):
    poll = store.create(_poll())
    with pytest.raises(OptionNotFound):
        store.vote(poll.id, "abc")


def test_save_updates_and_keeps_existing_options(store):
    poll = store.create(_poll())
    loaded = store.get(poll.id)
    loaded.title = "Dinner"
    loaded.options = [PollOption(description="Curry")]
    store.save(loaded)
    again = store.get(poll.id)
    assert again.title == "Dinner"
    assert [o.description for o in again.options] == ["Pizza", "Soup", "Salad", "Curry"]


def test_save_without_id_inserts(store):
    poll = store.save(Poll(title="fresh"))
    assert store.get(poll.id).title == "fresh"


def test_data_survives_reopening(tmp_path):
    path = tmp_path / "polls.db"
    with PollStore(path) as first:
        poll = first.create(_poll())
    with PollStore(path) as second:
        assert second.get(poll.id) == poll