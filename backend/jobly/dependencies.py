from fastapi import Depends, Header, HTTPException

from jobly.config import settings
from jobly.database import Store, get_store
from jobly.repositories.job_repo import JobRepository
from jobly.utils.security import verify_token


async def require_admin(authorization: str = Header(...)):
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing bearer token")
    token = authorization[7:]
    if settings.admin_token_hash is None or not verify_token(settings.admin_token_hash, token):
        raise HTTPException(status_code=401, detail="Admin token required")
    return token


def get_job_repository(store: Store = Depends(get_store)) -> JobRepository:
    return JobRepository(store)
