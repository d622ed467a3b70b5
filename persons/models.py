from typing import Optional

from pydantic import BaseModel


class Person(BaseModel):
    # no constraints here: whatever the client sends goes straight to the database
    id: Optional[int] = None
    name: Optional[str] = None
    age: Optional[int] = None
