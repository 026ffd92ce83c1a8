import logging
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class ContentPart(BaseModel):
    model_config = ConfigDict(extra='allow')

    type: Optional[str] = None
    text: Optional[str] = None

    @field_validator('type', 'text', mode='before')
    def drop_non_string(cls, v):
        return v if isinstance(v, str) else None


class Turn(BaseModel):
    """One message of the conversation, as the host hands it over."""

    model_config = ConfigDict(extra='allow')

    role: Optional[str] = None
    content: Union[str, List[ContentPart], None] = None

    @field_validator('role', mode='before')
    def drop_non_string_role(cls, v):
        return v if isinstance(v, str) else None

    @field_validator('content', mode='before')
    def normalize_content(cls, v):
        if isinstance(v, str):
            return v
        if isinstance(v, (list, tuple)):
            # parts that aren't objects carry no text
            return [p if isinstance(p, (dict, ContentPart)) else {} for p in v]
        return None


def _turn_items(v):
    if isinstance(v, (list, tuple)):
        # turns that aren't objects carry no role
        return [t if isinstance(t, (dict, Turn)) else {} for t in v]
    return None


class Prompt(BaseModel):
    model_config = ConfigDict(extra='allow')

    messages: Optional[List[Turn]] = None

    @field_validator('messages', mode='before')
    def normalize_messages(cls, v):
        return _turn_items(v)


class GenerateOptions(BaseModel):
    """
    A single generation call from the host.

    Turns are read from `prompt.messages` first and from `messages` second.
    A bare list under `prompt` is accepted as the turn list; any other
    non-object `prompt` is ignored.
    """

    model_config = ConfigDict(extra='allow')

    prompt: Optional[Prompt] = None
    messages: Optional[List[Turn]] = None

    @field_validator('prompt', mode='before')
    def wrap_bare_prompt(cls, v):
        if isinstance(v, (list, tuple)):
            return {'messages': list(v)}
        if isinstance(v, (dict, Prompt)):
            return v
        return None

    @field_validator('messages', mode='before')
    def normalize_messages(cls, v):
        return _turn_items(v)

    @property
    def turns(self) -> List[Turn]:
        if self.prompt is not None and self.prompt.messages is not None:
            return self.prompt.messages
        return self.messages or []

    @classmethod
    def parse(cls, raw: Any) -> 'GenerateOptions':
        if raw is None:
            return cls()
        if isinstance(raw, GenerateOptions):
            return raw
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            logger.warning(
                'unreadable generation request (%d errors); treating as empty',
                exc.error_count(),
            )
            return cls()


class Usage(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class GenerateResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    text: str
    finish_reason: Literal['stop'] = 'stop'
    usage: Usage = Field(default_factory=Usage)

    @classmethod
    def stop(cls, text: str) -> 'GenerateResult':
        return cls(text=text)
