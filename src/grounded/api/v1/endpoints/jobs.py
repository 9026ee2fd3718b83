"""
Jobs API endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from grounded.api.v1.dependencies import get_current_user
from grounded.core.dependencies import get_db
from grounded.schemas.jobs import JobCreate, JobResponse, JobStatusUpdate, JobUpdate
from grounded.services.job_service import JobService
from grounded.utils.exceptions import PersistenceError
from grounded.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/jobs", response_model=List[JobResponse])
async def get_jobs(db: Session = Depends(get_db)):
    """
    Get all jobs: scheduled ones by date, then unscheduled, newest first.
    """
    try:
        return [JobResponse.model_validate(job) for job in JobService(db).list_jobs()]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error fetching jobs:[/red] {e}")
        raise PersistenceError("Failed to fetch jobs")


@router.post("/jobs", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(payload: JobCreate, db: Session = Depends(get_db)):
    """
    Create a job. It starts as ``scheduled`` when a date is given,
    otherwise ``pending``.
    """
    try:
        job = JobService(db).create_job(payload)
        return JobResponse.model_validate(job)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error creating job:[/red] {e}")
        raise PersistenceError("Failed to create job")


@router.get("/jobs/{job_id}", response_model=JobResponse)
async def get_job(job_id: int, db: Session = Depends(get_db)):
    try:
        return JobResponse.model_validate(JobService(db).get(job_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error fetching job {job_id}:[/red] {e}")
        raise PersistenceError("Failed to fetch job")


@router.put("/jobs/{job_id}", response_model=JobResponse)
async def update_job(job_id: int, payload: JobUpdate, db: Session = Depends(get_db)):
    try:
        job = JobService(db).update_job(job_id, payload)
        return JobResponse.model_validate(job)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error updating job {job_id}:[/red] {e}")
        raise PersistenceError("Failed to update job")


@router.patch("/jobs/{job_id}/status", response_model=JobResponse)
async def update_job_status(job_id: int, payload: JobStatusUpdate, db: Session = Depends(get_db)):
    try:
        job = JobService(db).change_status(job_id, payload.status)
        return JobResponse.model_validate(job)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"[red]Error updating job {job_id} status:[/red] {e}")
        raise PersistenceError("Failed to update job")
