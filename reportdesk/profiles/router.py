from fastapi import APIRouter, Depends
from typing import Optional
from reportdesk.authentication.schemas import UserContext
from reportdesk.authentication.security import get_current_user, get_optional_user
from reportdesk.errors.exceptions import ForbiddenError, NotFoundError
from reportdesk.profiles import schemas, utils

router = APIRouter(prefix="/profiles", tags=["Profiles"])


def _own_id(profile_id: Optional[str], user: UserContext) -> str:
    profile_id = profile_id or user.user_id
    if profile_id != user.user_id:
        raise ForbiddenError("Profiles can only be managed by their owner")
    return profile_id


# Self profile
@router.get("/me", response_model=schemas.Profile)
def get_my_profile(user: Optional[UserContext] = Depends(get_optional_user)):
    """Profile of the signed-in user."""
    profile = utils.get_current_user_profile(user)
    if profile is None:
        raise NotFoundError("Profile", user.user_id)
    return profile


@router.put("/me", response_model=schemas.Profile)
def save_my_profile(profile: schemas.ProfileUpdate, user: UserContext = Depends(get_current_user)):
    """Create or update the signed-in user's profile."""
    data = profile.model_dump(exclude_unset=True)
    data["id"] = user.user_id
    return utils.upsert_profile(data)


@router.post("/", response_model=schemas.Profile, status_code=201)
def create_profile(profile: schemas.ProfileCreate, user: UserContext = Depends(get_current_user)):
    data = profile.model_dump(exclude_unset=True)
    data["id"] = _own_id(profile.id, user)
    return utils.create_profile(data)


@router.get("/{profile_id}", response_model=schemas.Profile)
def get_profile(profile_id: str):
    return utils.get_profile(profile_id)


@router.patch("/{profile_id}", response_model=schemas.Profile)
def update_profile(
    profile_id: str,
    updates: schemas.ProfileUpdate,
    user: UserContext = Depends(get_current_user),
):
    _own_id(profile_id, user)
    return utils.update_profile(profile_id, updates.model_dump(exclude_unset=True))
