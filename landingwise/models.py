"""
Data models for landing page generation, validation and projects.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, EmailStr, Field


class StylePreset(str, Enum):
    """Visual style presets, consumed as prompt text."""
    MODERN = "modern"
    MINIMAL = "minimal"
    CORPORATE = "corporate"
    CREATIVE = "creative"


class MessageRole(str, Enum):
    """Conversation roles."""
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """One turn of a project conversation."""
    role: MessageRole
    content: str

    class Config:
        frozen = True


class GenerationContext(BaseModel):
    """Immutable input to one workflow run."""
    user_prompt: str
    previous_messages: List[ChatMessage] = Field(default_factory=list)
    current_content: Optional[str] = None
    style: StylePreset = StylePreset.MODERN
    requirements: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


MISSING_STRUCTURE = "- Missing proper HTML structure"
MISSING_FORM = "- Missing waitlist email form"
MISSING_STYLE_FRAMEWORK = "- Missing Tailwind CSS"


class ValidationVerdict(BaseModel):
    """Result of the heuristic content checks."""
    has_document_structure: bool = False
    has_collection_form: bool = False
    has_style_framework: bool = False

    class Config:
        frozen = True

    @property
    def is_basic_valid(self) -> bool:
        return (
            self.has_document_structure
            and self.has_collection_form
            and self.has_style_framework
        )

    def missing_issues(self) -> List[str]:
        """Issue lines for the failed checks only, in a fixed order."""
        issues = []
        if not self.has_document_structure:
            issues.append(MISSING_STRUCTURE)
        if not self.has_collection_form:
            issues.append(MISSING_FORM)
        if not self.has_style_framework:
            issues.append(MISSING_STYLE_FRAMEWORK)
        return issues


class GenerationResult(BaseModel):
    """Terminal output of a workflow run."""
    html: str = ""
    success: bool = False
    errors: List[str] = Field(default_factory=list)
    iterations: int = 0

    class Config:
        frozen = True


class ProjectStatus(str, Enum):
    """Publication state of a project."""
    DRAFT = "draft"
    PUBLISHED = "published"


def _new_id() -> str:
    return str(uuid4())


class Project(BaseModel):
    """A user's landing page project."""
    id: str = Field(default_factory=_new_id)
    owner_id: str
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    prompt: str = Field(min_length=1)
    slug: str
    status: ProjectStatus = ProjectStatus.DRAFT
    html_content: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None

    @property
    def style(self) -> StylePreset:
        """Style preset stored in metadata, defaulting to modern."""
        try:
            return StylePreset(self.metadata.get("style", StylePreset.MODERN.value))
        except ValueError:
            return StylePreset.MODERN


class Conversation(BaseModel):
    """Snapshot of a project's chat history after one generation."""
    id: str = Field(default_factory=_new_id)
    project_id: str
    messages: List[ChatMessage] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)


class WaitlistEntry(BaseModel):
    """An email collected from a published landing page."""
    id: str = Field(default_factory=_new_id)
    project_id: str
    email: EmailStr
    metadata: Optional[Dict[str, Any]] = None
    created_at: datetime = Field(default_factory=datetime.now)
