from enum import Enum

PROVIDER_NAME = 'bahai-worker'
MODEL_NAME = 'bahai-rag'


class ModelId(str, Enum):
    CHAT = 'chat-model'
    CHAT_REASONING = 'chat-model-reasoning'
    TITLE = 'title-model'
    ARTIFACT = 'artifact-model'


EMPTY_QUESTION_TEXT = 'Please enter a question.'

MISSING_URL_TEXT = (
    'Server is missing CF_WORKER_ASK_URL. Set it in .env and redeploy.'
)

BACKEND_ERROR_PREFIX = 'Backend error from Bahá’í assistant: '

NO_ANSWER_TEXT = 'Sorry, the Bahá’í assistant returned no answer.'

TRANSPORT_ERROR_TEXT = 'An error occurred contacting the Bahá’í assistant backend.'
