"""
Job board repository for database access.

Encapsulates all Supabase queries and data mapping for:
- job_postings
- proposals
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import JobPosting, JobStatus, JobFilters, Proposal, ProposalStatus


class JobRepository(BaseRepository[JobPosting]):
    """Repository for job postings."""

    TABLE = "job_postings"

    def create(self, client_id: str, data: dict[str, Any]) -> JobPosting:
        row = {
            **data,
            "client_id": client_id,
            "status": JobStatus.OPEN.value,
            "proposal_count": 0,
            "created_at": self._now(),
        }
        result = self._db.table(self.TABLE).insert(row).execute()
        return self._map_to_job(result.data[0])

    def find(self, filters: JobFilters) -> list[JobPosting]:
        query = self._db.table(self.TABLE).select("*")
        if filters.client_id:
            query = query.eq("client_id", filters.client_id)
        if filters.category:
            query = query.eq("category", filters.category)
        if filters.status:
            query = query.eq("status", filters.status.value)
        elif not filters.client_id:
            query = query.eq("status", JobStatus.OPEN.value)
        query = query.order("created_at", desc=True)
        if filters.limit:
            query = query.limit(filters.limit)
        result = query.execute()
        return [self._map_to_job(row) for row in result.data]

    def get_by_id(self, job_id: str) -> Optional[JobPosting]:
        result = self._db.table(self.TABLE).select("*").eq("id", job_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_job(row)

    def update_status(self, job_id: str, status: JobStatus) -> Optional[JobPosting]:
        result = self._db.table(self.TABLE).update({"status": status.value}).eq("id", job_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_job(row)

    def increment_proposal_count(self, job_id: str) -> None:
        self._db.rpc("increment_proposal_count", {"p_job_id": job_id}).execute()

    def delete(self, job_id: str) -> None:
        self._db.table(self.TABLE).delete().eq("id", job_id).execute()

    def _map_to_job(self, data: dict[str, Any]) -> JobPosting:
        return JobPosting(
            id=str(data["id"]),
            client_id=str(data["client_id"]),
            title=data["title"],
            description=data.get("description") or "",
            category=data["category"],
            budget=float(data.get("budget") or 0),
            deadline=self._parse_timestamp(data.get("deadline")),
            status=JobStatus(data.get("status") or JobStatus.OPEN.value),
            proposal_count=data.get("proposal_count") or 0,
            created_at=self._parse_timestamp(data.get("created_at")),
        )


class ProposalRepository(BaseRepository[Proposal]):
    """Repository for proposals."""

    TABLE = "proposals"

    def create(self, job_id: str, freelancer_id: str, data: dict[str, Any]) -> Proposal:
        row = {
            **data,
            "job_id": job_id,
            "freelancer_id": freelancer_id,
            "status": ProposalStatus.PENDING.value,
            "created_at": self._now(),
        }
        result = self._db.table(self.TABLE).insert(row).execute()
        return self._map_to_proposal(result.data[0])

    def list_by_job(self, job_id: str) -> list[Proposal]:
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("job_id", job_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_proposal(row) for row in result.data]

    def list_by_freelancer(self, freelancer_id: str) -> list[Proposal]:
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("freelancer_id", freelancer_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_proposal(row) for row in result.data]

    def update_status(self, proposal_id: str, status: ProposalStatus) -> Optional[Proposal]:
        result = (
            self._db.table(self.TABLE)
            .update({"status": status.value})
            .eq("id", proposal_id)
            .execute()
        )
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_proposal(row)

    def _map_to_proposal(self, data: dict[str, Any]) -> Proposal:
        return Proposal(
            id=str(data["id"]),
            job_id=str(data["job_id"]),
            freelancer_id=str(data["freelancer_id"]),
            price=float(data.get("price") or 0),
            cover_letter=data.get("cover_letter") or "",
            duration=data.get("duration") or "",
            status=ProposalStatus(data.get("status") or ProposalStatus.PENDING.value),
            created_at=self._parse_timestamp(data.get("created_at")),
        )
