"""
Tests for ProjectStore.
"""

import pytest

from landingwise.io.project_store import ProjectStore
from landingwise.models import ChatMessage, Conversation, MessageRole, Project, WaitlistEntry


@pytest.fixture
def store(tmp_path):
    return ProjectStore(tmp_path / "projects")


@pytest.fixture
def project():
    return Project(owner_id="u1", title="Bakery", prompt="A page", slug="bakery-00000000")


def test_save_and_load_project(store, project):
    path = store.save_project(project)

    assert path.name == "project.json"
    assert store.load_project(project.id) == project


def test_save_writes_html_alongside(store, project):
    project = project.model_copy(update={"html_content": "<html></html>"})
    store.save_project(project)

    html_path = store.data_dir / project.id / "generated.html"
    assert html_path.read_text(encoding="utf-8") == "<html></html>"


def test_load_missing_or_invalid_id_returns_none(store):
    assert store.load_project("00000000-0000-0000-0000-000000000000") is None
    assert store.load_project("../../etc") is None


def test_list_and_find_by_slug(store, project):
    other = Project(owner_id="u2", title="Gym", prompt="A page", slug="gym-11111111")
    store.save_project(project)
    store.save_project(other)

    assert {p.id for p in store.list_projects()} == {project.id, other.id}
    assert store.find_by_slug("gym-11111111") == other
    assert store.find_by_slug("nope") is None


def test_delete_project(store, project):
    store.save_project(project)

    assert store.delete_project(project.id)
    assert store.load_project(project.id) is None
    assert not store.delete_project(project.id)


def test_conversations_append_in_order(store, project):
    store.save_project(project)
    first = Conversation(project_id=project.id, messages=[ChatMessage(role=MessageRole.USER, content="one")])
    second = Conversation(project_id=project.id, messages=[ChatMessage(role=MessageRole.USER, content="two")])

    store.append_conversation(first)
    store.append_conversation(second)

    assert store.load_conversations(project.id) == [first, second]


def test_waitlist_entries_round_trip(store, project):
    store.save_project(project)
    entry = WaitlistEntry(project_id=project.id, email="ada@example.com", metadata={"source": "hero"})

    store.append_waitlist_entry(entry)

    assert store.load_waitlist_entries(project.id) == [entry]


def test_append_for_unknown_project_raises(store):
    entry = WaitlistEntry(project_id="00000000-0000-0000-0000-000000000000", email="ada@example.com")

    with pytest.raises(FileNotFoundError):
        store.append_waitlist_entry(entry)
