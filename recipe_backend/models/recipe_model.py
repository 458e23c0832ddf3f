from pydantic import BaseModel
from typing import List, Union


class RecipeOut(BaseModel):
    id: str
    name: str
    difficulty: Union[int, float]
    vegetarian: bool


class RecipeResponse(BaseModel):
    success: bool = True
    data: RecipeOut


class RecipeListResponse(BaseModel):
    success: bool = True
    data: List[RecipeOut]


class MessageResponse(BaseModel):
    success: bool = True
    message: str
