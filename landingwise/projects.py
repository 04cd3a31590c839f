"""
Project operations: creation, generation, publishing and waitlist collection.

Owner identity comes from the caller's authentication layer and is treated
as an opaque string. A project owned by someone else is reported exactly
like a missing one.
"""

import re
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

from landingwise.errors import ProjectNotFoundError, PublishError
from landingwise.io.project_store import ProjectStore
from landingwise.models import (
    ChatMessage,
    Conversation,
    GenerationContext,
    GenerationResult,
    MessageRole,
    Project,
    ProjectStatus,
    StylePreset,
    WaitlistEntry,
)
from landingwise.orchestration.cancellation import CancellationToken
from landingwise.pipeline.generation import LandingPageGenerator
from landingwise.rendering.waitlist import WAITLIST_ENDPOINT, inject_waitlist_script

UPDATABLE_FIELDS = {"title", "description", "html_content", "status", "metadata"}


def make_slug(title: str, project_id: str) -> str:
    """Lowercased title with non-alphanumerics replaced, plus an id prefix."""
    return f"{re.sub(r'[^a-z0-9]', '-', title.lower())}-{project_id[:8]}"


def _paginate(items: List[Any], limit: int, offset: int, max_limit: int) -> List[Any]:
    if not 1 <= limit <= max_limit:
        raise ValueError(f"limit must be between 1 and {max_limit}")
    if offset < 0:
        raise ValueError("offset must be non-negative")
    return items[offset:offset + limit]


class ProjectService:
    """Project workflows over a ProjectStore and a LandingPageGenerator."""

    def __init__(self, store: ProjectStore, generator: LandingPageGenerator):
        self.store = store
        self.generator = generator

    def _owned_project(self, owner_id: str, project_id: str) -> Project:
        project = self.store.load_project(project_id)
        if project is None or project.owner_id != owner_id:
            raise ProjectNotFoundError("Project not found or access denied")
        return project

    def _published_project(self, project: Optional[Project], message: str) -> Project:
        if project is None or project.status != ProjectStatus.PUBLISHED:
            raise ProjectNotFoundError(message)
        return project

    def create_project(
        self,
        owner_id: str,
        title: str,
        prompt: str,
        description: Optional[str] = None,
        style: StylePreset = StylePreset.MODERN,
    ) -> Project:
        """
        Create a draft project.

        Raises:
            pydantic.ValidationError: Empty or over-long title, or empty prompt.
        """
        project_id = str(uuid4())
        project = Project(
            id=project_id,
            owner_id=owner_id,
            title=title,
            description=description,
            prompt=prompt,
            slug=make_slug(title, project_id),
            metadata={"style": StylePreset(style).value},
        )
        self.store.save_project(project)
        return project

    def generate(
        self,
        owner_id: str,
        project_id: str,
        prompt: str,
        conversation_history: Optional[List[ChatMessage]] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> Tuple[Project, GenerationResult]:
        """
        Run the generation workflow for a project and persist the outcome.

        Args:
            owner_id: Caller identity.
            project_id: Project to generate for.
            prompt: User message for this turn.
            conversation_history: Prior turns shown to the model.
            cancel_token: Optional cancellation token / deadline.

        Returns:
            Tuple of (updated Project, GenerationResult).
        """
        if not prompt:
            raise ValueError("prompt must not be empty")

        project = self._owned_project(owner_id, project_id)
        history = list(conversation_history or [])

        context = GenerationContext(
            user_prompt=prompt,
            previous_messages=history,
            current_content=project.html_content,
            style=project.style,
        )
        result = self.generator.generate_landing_page(prompt, context=context, cancel_token=cancel_token)

        project = project.model_copy(update={
            "html_content": result.html or project.html_content,
            "updated_at": datetime.now(),
        })
        self.store.save_project(project)

        self.store.append_conversation(Conversation(
            project_id=project.id,
            messages=history + [
                ChatMessage(role=MessageRole.USER, content=prompt),
                ChatMessage(role=MessageRole.ASSISTANT, content=result.html),
            ],
        ))

        return project, result

    def list_projects(self, owner_id: str, limit: int = 20, offset: int = 0) -> List[Project]:
        """Owner's projects, most recently updated first."""
        projects = [p for p in self.store.list_projects() if p.owner_id == owner_id]
        projects.sort(key=lambda p: p.updated_at or p.created_at, reverse=True)
        return _paginate(projects, limit, offset, max_limit=100)

    def get_project(self, owner_id: str, project_id: str) -> Project:
        return self._owned_project(owner_id, project_id)

    def get_by_slug(self, slug: str) -> Project:
        """Public lookup; only published projects are visible."""
        return self._published_project(self.store.find_by_slug(slug), "Landing page not found")

    def update_project(self, owner_id: str, project_id: str, **changes: Any) -> Project:
        """
        Update editable fields of a project.

        Raises:
            ValueError: If a field outside the editable set is given.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

        project = self._owned_project(owner_id, project_id)
        data = project.model_dump()
        data.update(changes)
        data["updated_at"] = datetime.now()
        project = Project.model_validate(data)
        self.store.save_project(project)
        return project

    def publish(self, owner_id: str, project_id: str) -> Project:
        """Make a project publicly reachable by its slug."""
        project = self._owned_project(owner_id, project_id)
        if not project.html_content:
            raise PublishError("Cannot publish project without generated content")

        project = project.model_copy(update={
            "status": ProjectStatus.PUBLISHED,
            "updated_at": datetime.now(),
        })
        self.store.save_project(project)
        return project

    def get_conversation(self, owner_id: str, project_id: str) -> List[ChatMessage]:
        """Messages of the latest conversation record, or an empty list."""
        self._owned_project(owner_id, project_id)
        conversations = self.store.load_conversations(project_id)
        if not conversations:
            return []
        return conversations[-1].messages

    def add_waitlist_entry(
        self,
        project_id: str,
        email: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> WaitlistEntry:
        """
        Record an email for a published project.

        Raises:
            ProjectNotFoundError: Unknown or unpublished project.
            pydantic.ValidationError: Invalid email address.
        """
        project = self._published_project(
            self.store.load_project(project_id),
            "Landing page not found or not published",
        )
        entry = WaitlistEntry(project_id=project.id, email=email, metadata=metadata)
        self.store.append_waitlist_entry(entry)
        return entry

    def get_waitlist_entries(
        self,
        owner_id: str,
        project_id: str,
        limit: int = 50,
        offset: int = 0,
    ) -> List[WaitlistEntry]:
        """Owner's view of collected emails, newest first."""
        self._owned_project(owner_id, project_id)
        entries = self.store.load_waitlist_entries(project_id)
        entries.reverse()
        return _paginate(entries, limit, offset, max_limit=100)

    def delete_project(self, owner_id: str, project_id: str) -> bool:
        self._owned_project(owner_id, project_id)
        return self.store.delete_project(project_id)

    def render_public_page(self, slug: str, endpoint: str = WAITLIST_ENDPOINT) -> str:
        """Published HTML with the waitlist submit script injected."""
        project = self.get_by_slug(slug)
        if not project.html_content:
            raise ProjectNotFoundError("Landing page not found")
        return inject_waitlist_script(project.html_content, project.id, endpoint)
