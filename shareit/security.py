from fastapi import Header

USER_ID_HEADER = "X-Sharer-User-Id"


async def get_current_user_id(
    user_id: int = Header(..., alias=USER_ID_HEADER, gt=0),
) -> int:
    """Id del usuario que hace la petición (lo pone el gateway)."""
    return user_id
