"""
Tests for ProjectService.
"""

import pytest
from pydantic import ValidationError

from landingwise.errors import GenerationTransportError, ProjectNotFoundError, PublishError
from landingwise.io.project_store import ProjectStore
from landingwise.models import ChatMessage, MessageRole, ProjectStatus, StylePreset
from landingwise.pipeline.generation import LandingPageGenerator
from landingwise.projects import ProjectService, make_slug


@pytest.fixture
def make_service(tmp_path, scripted_client):
    def _make(replies):
        client = scripted_client(replies)
        service = ProjectService(ProjectStore(tmp_path / "projects"), LandingPageGenerator(client=client))
        return service, client
    return _make


@pytest.fixture
def service(make_service, valid_html):
    return make_service([valid_html])[0]


def test_make_slug():
    assert make_slug("My Cool App!", "abcdef12-3456") == "my-cool-app--abcdef12"


def test_create_project(service):
    project = service.create_project("u1", "Bakery", "A page for my bakery", style=StylePreset.MINIMAL)

    assert project.status == ProjectStatus.DRAFT
    assert project.slug == f"bakery-{project.id[:8]}"
    assert project.style == StylePreset.MINIMAL
    assert service.get_project("u1", project.id) == project


def test_create_project_rejects_empty_prompt(service):
    with pytest.raises(ValidationError):
        service.create_project("u1", "Bakery", "")


def test_other_owner_cannot_see_project(service):
    project = service.create_project("u1", "Bakery", "A page")

    with pytest.raises(ProjectNotFoundError):
        service.get_project("u2", project.id)
    with pytest.raises(ProjectNotFoundError):
        service.delete_project("u2", project.id)


def test_generate_stores_html_and_conversation(service, valid_html):
    project = service.create_project("u1", "Bakery", "A page")

    project, result = service.generate("u1", project.id, "A page for my bakery")

    assert result.success
    assert project.html_content == valid_html
    assert project.updated_at is not None
    assert service.get_conversation("u1", project.id) == [
        ChatMessage(role=MessageRole.USER, content="A page for my bakery"),
        ChatMessage(role=MessageRole.ASSISTANT, content=valid_html),
    ]


def test_generate_uses_project_style_and_current_content(make_service, valid_html):
    service, client = make_service([valid_html])
    project = service.create_project("u1", "Bakery", "A page", style=StylePreset.CORPORATE)
    service.update_project("u1", project.id, html_content="<html>old</html>")

    service.generate("u1", project.id, "Change the headline")

    system_prompt = client.calls[0]["messages"][0].content
    assert "Apply a corporate design style" in system_prompt
    assert "<html>old</html>" in system_prompt


def test_failed_generation_keeps_previous_html(make_service):
    service, _ = make_service([GenerationTransportError("down")])
    project = service.create_project("u1", "Bakery", "A page")
    service.update_project("u1", project.id, html_content="<html>old</html>")

    project, result = service.generate("u1", project.id, "Change it")

    assert not result.success
    assert project.html_content == "<html>old</html>"


def test_update_rejects_unknown_fields(service):
    project = service.create_project("u1", "Bakery", "A page")

    with pytest.raises(ValueError, match="owner_id"):
        service.update_project("u1", project.id, owner_id="u2")


def test_list_projects_most_recent_first(service):
    first = service.create_project("u1", "First", "A page")
    second = service.create_project("u1", "Second", "A page")
    service.create_project("u2", "Other", "A page")
    service.update_project("u1", first.id, title="First again")

    projects = service.list_projects("u1")

    assert [p.id for p in projects] == [first.id, second.id]
    assert len(service.list_projects("u1", limit=1)) == 1
    with pytest.raises(ValueError):
        service.list_projects("u1", limit=0)


def test_publish_requires_content(service):
    project = service.create_project("u1", "Bakery", "A page")

    with pytest.raises(PublishError):
        service.publish("u1", project.id)


def test_published_page_is_public(service, valid_html):
    project = service.create_project("u1", "Bakery", "A page")
    service.generate("u1", project.id, "A page")

    with pytest.raises(ProjectNotFoundError):
        service.get_by_slug(project.slug)

    service.publish("u1", project.id)

    assert service.get_by_slug(project.slug).id == project.id
    page = service.render_public_page(project.slug)
    assert "data-waitlist" in page
    assert project.id in page


def test_waitlist_requires_published_project(service):
    project = service.create_project("u1", "Bakery", "A page")

    with pytest.raises(ProjectNotFoundError):
        service.add_waitlist_entry(project.id, "ada@example.com")


def test_waitlist_entries_newest_first(service):
    project = service.create_project("u1", "Bakery", "A page")
    service.generate("u1", project.id, "A page")
    service.publish("u1", project.id)

    service.add_waitlist_entry(project.id, "ada@example.com")
    service.add_waitlist_entry(project.id, "grace@example.com", metadata={"source": "footer"})

    entries = service.get_waitlist_entries("u1", project.id)
    assert [e.email for e in entries] == ["grace@example.com", "ada@example.com"]

    with pytest.raises(ValidationError):
        service.add_waitlist_entry(project.id, "not-an-email")


def test_delete_project(service):
    project = service.create_project("u1", "Bakery", "A page")

    assert service.delete_project("u1", project.id)
    with pytest.raises(ProjectNotFoundError):
        service.get_project("u1", project.id)
