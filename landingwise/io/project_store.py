"""
File-backed storage for projects, conversations and waitlist entries.

Layout, one directory per project:

    <data_dir>/<project_id>/project.json
    <data_dir>/<project_id>/generated.html
    <data_dir>/<project_id>/conversations.jsonl
    <data_dir>/<project_id>/waitlist.jsonl
"""

import shutil
import uuid
from pathlib import Path
from typing import List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from landingwise.models import Conversation, Project, WaitlistEntry

RecordT = TypeVar("RecordT", bound=BaseModel)


class ProjectStore:
    """Reads and writes project artifacts on disk."""

    def __init__(self, data_dir: Union[str, Path] = "outputs/projects"):
        """
        Initialize project store.

        Args:
            data_dir: Root directory for project data.
        """
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _project_dir(self, project_id: str) -> Optional[Path]:
        # Ids are UUIDs; anything else cannot name a project directory
        try:
            uuid.UUID(str(project_id))
        except ValueError:
            return None
        return self.data_dir / str(project_id)

    def save_project(self, project: Project) -> Path:
        """
        Write project metadata and its current HTML.

        Args:
            project: Project to save.

        Returns:
            Path to project.json.
        """
        project_dir = self._project_dir(project.id)
        if project_dir is None:
            raise ValueError(f"Invalid project id: {project.id}")
        project_dir.mkdir(parents=True, exist_ok=True)

        project_path = project_dir / "project.json"
        project_path.write_text(project.model_dump_json(indent=2), encoding="utf-8")

        if project.html_content is not None:
            self.save_html(project.id, project.html_content)

        return project_path

    def load_project(self, project_id: str) -> Optional[Project]:
        """Load a project, or None when it does not exist."""
        project_dir = self._project_dir(project_id)
        if project_dir is None:
            return None

        project_path = project_dir / "project.json"
        if not project_path.exists():
            return None
        return Project.model_validate_json(project_path.read_text(encoding="utf-8"))

    def list_projects(self) -> List[Project]:
        """Load every stored project, in no particular order."""
        projects = []
        for project_path in self.data_dir.glob("*/project.json"):
            projects.append(Project.model_validate_json(project_path.read_text(encoding="utf-8")))
        return projects

    def find_by_slug(self, slug: str) -> Optional[Project]:
        for project in self.list_projects():
            if project.slug == slug:
                return project
        return None

    def delete_project(self, project_id: str) -> bool:
        """Remove a project and everything stored with it."""
        project_dir = self._project_dir(project_id)
        if project_dir is None or not project_dir.exists():
            return False
        shutil.rmtree(project_dir)
        return True

    def save_html(self, project_id: str, html_content: str, filename: str = "generated.html") -> Path:
        """
        Save generated HTML to disk.

        Args:
            project_id: Project identifier.
            html_content: HTML content to save.
            filename: Output filename.

        Returns:
            Path to saved HTML file.
        """
        html_path = self._project_dir(project_id) / filename
        html_path.parent.mkdir(parents=True, exist_ok=True)
        html_path.write_text(html_content, encoding="utf-8")
        return html_path

    def _append_record(self, project_id: str, filename: str, record: BaseModel):
        project_dir = self._project_dir(project_id)
        if project_dir is None or not project_dir.exists():
            raise FileNotFoundError(f"Project directory not found: {project_id}")

        with open(project_dir / filename, "a", encoding="utf-8") as f:
            f.write(record.model_dump_json() + "\n")

    def _load_records(self, project_id: str, filename: str, model: Type[RecordT]) -> List[RecordT]:
        project_dir = self._project_dir(project_id)
        if project_dir is None:
            return []

        path = project_dir / filename
        if not path.exists():
            return []

        records = []
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                if line.strip():
                    records.append(model.model_validate_json(line))
        return records

    def append_conversation(self, conversation: Conversation):
        self._append_record(conversation.project_id, "conversations.jsonl", conversation)

    def load_conversations(self, project_id: str) -> List[Conversation]:
        """Conversation records in the order they were written."""
        return self._load_records(project_id, "conversations.jsonl", Conversation)

    def append_waitlist_entry(self, entry: WaitlistEntry):
        self._append_record(entry.project_id, "waitlist.jsonl", entry)

    def load_waitlist_entries(self, project_id: str) -> List[WaitlistEntry]:
        """Waitlist entries in the order they were written."""
        return self._load_records(project_id, "waitlist.jsonl", WaitlistEntry)
