from pydantic import BaseModel, Field


class MessagePart(BaseModel):
    """One content part of a chat message. Only ``text`` parts carry text."""
    type: str = "text"
    text: str = ""


class ChatMessage(BaseModel):
    role: str  # user, assistant, system, tool, ...
    parts: list[MessagePart] = []


class GenerateResumeRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=200, description="Display title for the resume")
    messages: list[ChatMessage] = Field(..., max_length=500)
    selected_chat_model: str | None = Field(None, description="Chat model identifier; defaults to settings")
    system_context: str | None = Field(None, max_length=20000, description="Background information about the user")
    include_projects: bool = True
    include_certifications: bool = True


class UpdateResumeRequest(BaseModel):
    content: str = Field(..., max_length=100000, description="Persisted resume JSON")
    description: str = Field(..., min_length=1, max_length=5000, description="Requested edits")
    selected_chat_model: str | None = None


class PreviewResumeRequest(BaseModel):
    content: str = Field(..., max_length=100000)
