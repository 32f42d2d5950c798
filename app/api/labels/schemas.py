from pydantic import BaseModel

class LabelBase(BaseModel):
    name: str

class LabelCreate(LabelBase):
    pass

class LabelOut(LabelBase):
    id: int

    model_config = {
        "from_attributes": True
    }
