def user_helper(user) -> dict:
    return {
        "id": str(user["_id"]),
        "username": user["username"],
    }


def recipe_helper(recipe) -> dict:
    return {
        "id": str(recipe["_id"]),
        "name": recipe.get("name", ""),
        "difficulty": recipe.get("difficulty"),
        "vegetarian": recipe.get("vegetarian"),
    }
