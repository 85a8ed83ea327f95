"""Typed descriptor for an uploaded image, produced by the multipart parse stage."""

from pydantic import BaseModel, Field


class ImageUpload(BaseModel):
    """An image read from a multipart request, not yet persisted."""

    filename: str = Field(..., min_length=1, description="Client-supplied file name")
    content_type: str | None = Field(default=None, description="Declared MIME type")
    content: bytes = Field(..., repr=False)

    @property
    def size(self) -> int:
        return len(self.content)
