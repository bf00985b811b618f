from fastapi import APIRouter, Depends, Query

from jobly.dependencies import get_job_repository, require_admin
from jobly.repositories.job_repo import JobRepository
from jobly.schemas.job import (
    JobCreate,
    JobDeletedResponse,
    JobEnvelope,
    JobListResponse,
    JobUpdate,
)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post(
    "",
    response_model=JobEnvelope,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
async def create_job(req: JobCreate, repo: JobRepository = Depends(get_job_repository)):
    job = repo.create(
        title=req.title,
        salary=req.salary,
        equity=req.equity,
        company_handle=req.company_handle,
    )
    return {"job": job}


@router.get("", response_model=JobListResponse)
async def list_jobs(
    title: str | None = None,
    min_salary: int | None = Query(None, ge=0),
    has_equity: bool = False,
    repo: JobRepository = Depends(get_job_repository),
):
    filters = {"title": title, "min_salary": min_salary, "has_equity": has_equity}
    jobs = repo.find_all({k: v for k, v in filters.items() if v is not None})
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=JobEnvelope)
async def get_job(job_id: int, repo: JobRepository = Depends(get_job_repository)):
    return {"job": repo.get(job_id)}


@router.patch(
    "/{job_id}",
    response_model=JobEnvelope,
    dependencies=[Depends(require_admin)],
)
async def update_job(
    job_id: int,
    req: JobUpdate,
    repo: JobRepository = Depends(get_job_repository),
):
    job = repo.update(job_id, req.model_dump(exclude_unset=True))
    return {"job": job}


@router.delete(
    "/{job_id}",
    response_model=JobDeletedResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_job(job_id: int, repo: JobRepository = Depends(get_job_repository)):
    repo.remove(job_id)
    return {"deleted": job_id}
