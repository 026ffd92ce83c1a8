from typing import List

from pydantic import BaseModel


class ModelsOut(BaseModel):
    models: List[str]
