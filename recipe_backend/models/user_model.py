from pydantic import BaseModel


class UserOut(BaseModel):
    id: str
    username: str


class LoginResponse(BaseModel):
    success: bool = True
    accessToken: str
    data: UserOut
