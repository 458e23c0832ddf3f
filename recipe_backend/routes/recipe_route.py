import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from recipe_backend.database.services import recipes as recipe_service
from recipe_backend.models.recipe_model import MessageResponse, RecipeListResponse, RecipeResponse
from recipe_backend.utils.auth_helper import get_current_user
from recipe_backend.utils.exceptions import ValidationError
from recipe_backend.utils.user_helper import recipe_helper
from recipe_backend.utils.validators import validate_new_recipe, validate_recipe_update

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found(recipe_id: str) -> HTTPException:
    return HTTPException(status_code=400, detail=f"Recipe with id {recipe_id} does not exist")


async def _read_json(request: Request):
    # đọc body sau khi get_current_user đã chạy, để thiếu token luôn trả 403
    if not await request.body():
        return None
    try:
        return await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="request body should be a JSON object")


# Tạo công thức mới
@router.post("", status_code=status.HTTP_201_CREATED, response_model=RecipeResponse)
async def create_recipe(request: Request, user=Depends(get_current_user)):
    payload = await _read_json(request)
    try:
        recipe = validate_new_recipe(payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    try:
        saved = await recipe_service.save_recipe(recipe)
    except Exception:
        logger.exception("Failed to save recipe")
        raise HTTPException(status_code=500, detail="Failed to save recipes!")

    logger.info("Recipe %s created by %s", saved["_id"], user.get("username"))
    return {"success": True, "data": recipe_helper(saved)}


# Lấy tất cả công thức
@router.get("", response_model=RecipeListResponse)
async def list_recipes():
    try:
        recipes = await recipe_service.all_recipes()
    except Exception:
        logger.exception("Failed to list recipes")
        raise HTTPException(status_code=500, detail="Some error occurred while retrieving recipes.")
    return {"success": True, "data": [recipe_helper(r) for r in recipes]}


# Lấy công thức theo ID
@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(recipe_id: str):
    try:
        recipe = await recipe_service.fetch_by_id(recipe_id)
    except Exception:
        logger.exception("Failed to fetch recipe %s", recipe_id)
        raise HTTPException(
            status_code=500, detail="Some error occurred while retrieving recipe details."
        )
    if not recipe:
        raise _not_found(recipe_id)
    return {"success": True, "data": recipe_helper(recipe)}


# Cập nhật một phần công thức
@router.patch("/{recipe_id}", response_model=RecipeResponse)
async def update_recipe(recipe_id: str, request: Request, user=Depends(get_current_user)):
    payload = await _read_json(request)
    try:
        changes = validate_recipe_update(payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    try:
        updated = await recipe_service.fetch_by_id_and_update(recipe_id, changes)
    except Exception:
        logger.exception("Failed to update recipe %s", recipe_id)
        raise HTTPException(status_code=500, detail="An error occured while updating recipe")
    if not updated:
        raise _not_found(recipe_id)

    logger.info("Recipe %s updated by %s", recipe_id, user.get("username"))
    return {"success": True, "data": recipe_helper(updated)}


# Xóa công thức
@router.delete("/{recipe_id}", response_model=MessageResponse)
async def delete_recipe(recipe_id: str, user=Depends(get_current_user)):
    try:
        deleted = await recipe_service.fetch_by_id_and_delete(recipe_id)
    except Exception:
        logger.exception("Failed to delete recipe %s", recipe_id)
        raise HTTPException(status_code=500, detail="An error occured while deleting recipe")
    if not deleted:
        raise _not_found(recipe_id)

    logger.info("Recipe %s deleted by %s", recipe_id, user.get("username"))
    return {"success": True, "message": "Recipe successfully deleted"}
