from pydantic import BaseModel, field_validator

from app.db.models.todo.label import DEFAULT_LABEL_COLOR

class LabelBase(BaseModel):
    name: str
    color: str = DEFAULT_LABEL_COLOR  # "R G B"

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value

    @field_validator("color")
    @classmethod
    def color_is_rgb_triplet(cls, value: str) -> str:
        channels = value.split()
        if len(channels) != 3 or not all(c.isdigit() and int(c) <= 255 for c in channels):
            raise ValueError("color must be an RGB triplet like '59 130 246'")
        return " ".join(str(int(c)) for c in channels)

class LabelCreate(LabelBase):
    pass

class LabelOut(LabelBase):
    id: int

    model_config = {
        "from_attributes": True
    }
