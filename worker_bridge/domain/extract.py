from collections.abc import Mapping
from typing import Sequence, Union

from worker_bridge.domain.models import Turn


def _turn_text(turn: Turn) -> str:
    if isinstance(turn.content, str):
        return turn.content.strip()
    parts = turn.content or []
    return '\n'.join(p.text for p in parts if p.text).strip()


def last_user_question(turns: Sequence[Union[Turn, Mapping]]) -> str:
    """
    Return the text of the latest user turn that has any.

    Supports both plain string content and [{'type': 'text', 'text': '...'}].
    Empty user turns are skipped; no user text at all gives ''.
    """
    for raw in reversed(turns):
        if isinstance(raw, Turn):
            turn = raw
        elif isinstance(raw, Mapping):
            turn = Turn.model_validate(raw)
        else:
            continue
        if turn.role != 'user':
            continue
        text = _turn_text(turn)
        if text:
            return text
    return ''
