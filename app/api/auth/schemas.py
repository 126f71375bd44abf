from typing import Optional
from pydantic import BaseModel, EmailStr

class GoogleUserInfo(BaseModel):
    sub: str
    email: EmailStr
    name: Optional[str] = None
    picture: Optional[str] = None

class UserOut(BaseModel):
    id: int
    email: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None

    model_config = {
        "from_attributes": True
    }
