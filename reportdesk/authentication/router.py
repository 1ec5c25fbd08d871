from fastapi import APIRouter, Depends
from reportdesk.authentication import schemas
from reportdesk.authentication.security import get_current_user

router = APIRouter(prefix="/auth", tags=["authentication"])


# Who Am I
@router.get("/whoami", response_model=schemas.UserContext)
def whoami(current_user: schemas.UserContext = Depends(get_current_user)):
    return current_user
