"""Upload entity: a stored asset belonging to a file."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from market.domain.model.common import DomainModel
from market.domain.value import FileId, UploadId


class Upload(DomainModel):
    id: Optional[UploadId] = None
    file_id: FileId
    filename: str = Field(min_length=1, max_length=255)
    size: int = Field(default=0, ge=0)  # Bytes
    approved: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
