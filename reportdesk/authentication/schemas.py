from pydantic import BaseModel
from typing import Optional


# IDENTITY CONTRACT (resolved from the store's auth service)
class UserContext(BaseModel):
    user_id: str
    email: Optional[str] = None
    role: Optional[str] = None  # auth role claim, e.g. "authenticated"
    is_guest: bool = False
