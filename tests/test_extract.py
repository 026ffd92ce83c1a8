import pytest

from worker_bridge.domain.extract import last_user_question
from worker_bridge.domain.models import Turn


def test_string_content_is_trimmed():
    assert last_user_question([{'role': 'user', 'content': '  hello  '}]) == 'hello'


def test_multipart_content_is_joined_with_newlines():
    turns = [{
        'role': 'user',
        'content': [{'type': 'text', 'text': 'a'}, {'type': 'text', 'text': 'b'}],
    }]
    assert last_user_question(turns) == 'a\nb'


def test_latest_user_turn_wins():
    turns = [
        {'role': 'user', 'content': 'first question'},
        {'role': 'assistant', 'content': 'an answer'},
        {'role': 'user', 'content': ' second question '},
        {'role': 'assistant', 'content': 'another answer'},
    ]
    assert last_user_question(turns) == 'second question'


def test_empty_user_turn_falls_back_to_earlier_one():
    turns = [
        {'role': 'user', 'content': 'What is the Kitáb-i-Aqdas?'},
        {'role': 'assistant', 'content': 'It is...'},
        {'role': 'user', 'content': '   '},
    ]
    assert last_user_question(turns) == 'What is the Kitáb-i-Aqdas?'


def test_parts_without_text_are_skipped():
    turns = [{
        'role': 'user',
        'content': [
            {'type': 'image', 'image': 'data:...'},
            {'type': 'text', 'text': ''},
            {'type': 'text', 'text': 42},
            'stray',
            {'type': 'text', 'text': ' only this '},
        ],
    }]
    assert last_user_question(turns) == 'only this'


@pytest.mark.parametrize('turns', [
    [],
    [{'role': 'assistant', 'content': 'hi there'}],
    [{'role': 'system', 'content': 'be nice'}, {'role': 'user', 'content': ''}],
    [{'role': 'user', 'content': [{'type': 'text', 'text': '  '}]}],
    [{'role': 'user'}],
    [{'role': 'user', 'content': {'text': 'not a list'}}],
    ['not a turn', None],
])
def test_no_user_text_gives_empty_string(turns):
    assert last_user_question(turns) == ''


def test_accepts_parsed_turns():
    turns = [Turn(role='user', content='parsed'), Turn(role='assistant', content='x')]
    assert last_user_question(turns) == 'parsed'
