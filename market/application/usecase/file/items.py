"""File response items."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from market.domain.model import File, Upload
from market.domain.value.types import Handle


class UploadItem(BaseModel):
    """Upload item in response."""

    upload_id: int
    filename: str
    size: int
    created_at: datetime


class FileSummary(BaseModel):
    """Compact file item used in listings."""

    file_id: int
    title: str
    overview_short: str
    price: Decimal
    owner_id: int
    owner_handle: Handle
    created_at: datetime


def to_upload_item(upload: Upload) -> UploadItem:
    return UploadItem(
        upload_id=upload.id,
        filename=upload.filename,
        size=upload.size,
        created_at=upload.created_at,
    )


def to_file_summary(file: File) -> FileSummary:
    return FileSummary(
        file_id=file.id,
        title=file.title,
        overview_short=file.overview_short,
        price=file.price,
        owner_id=file.owner_id,
        owner_handle=file.owner_handle,
        created_at=file.created_at,
    )
