from pydantic import BaseModel
from pydantic import ConfigDict

class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    slug: str
    name: str
    description: str
