from typing import Optional

from pydantic import BaseModel


class User(BaseModel):
    username: str
    password: str
    age: Optional[int] = None
    gender: Optional[str] = None
